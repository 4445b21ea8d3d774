"""
Errors and warnings raised while cloning.

A failed clone never returns a partial result: the error propagates
straight to the caller, who decides whether to retry with another
strategy.
"""

from __future__ import annotations

from typing import Any, Optional

from structclone.options import Strategy
from structclone.values import Path, ValueKind, format_path


class CloneError(Exception):
    """Base class for every error raised by structclone."""
    pass


class UnsupportedValueKind(CloneError):
    """
    Raised when a strategy meets a value it cannot reproduce.

    Properties:
        kind: ValueKind of the offending value
        path: Segments from the root to the offending value
        strategy: Strategy that rejected it
        reason: Short human-readable explanation
        value_type: Python type name of the offending value
    """

    def __init__(
        self,
        kind: ValueKind,
        path: Path,
        strategy: Strategy,
        reason: str,
        value: Any = None,
    ):
        self.kind = kind
        self.path = tuple(path)
        self.strategy = strategy
        self.reason = reason
        self.value_type = type(value).__name__
        super().__init__(
            f"{kind.value} value at {format_path(self.path)} cannot be cloned "
            f"with {strategy.value}: {reason}"
        )


class CloneLimitExceeded(CloneError):
    """Raised when a traversal crosses a CloneLimits bound."""

    def __init__(self, limit: str, maximum: int, path: Path):
        self.limit = limit
        self.maximum = maximum
        self.path = tuple(path)
        super().__init__(f"{limit} of {maximum} exceeded at {format_path(self.path)}")


class SharedReferenceWarning(UserWarning):
    """A deep copy kept a reference to a mutable foreign value."""
    pass


def unsupported(
    kind: ValueKind,
    path: Path,
    strategy: Strategy,
    reason: Optional[str] = None,
    value: Any = None,
) -> UnsupportedValueKind:
    """Build an UnsupportedValueKind with a default reason for the kind."""
    if reason is None:
        reason = f"{type(value).__name__} has no {strategy.value} representation"
    return UnsupportedValueKind(kind, path, strategy, reason, value=value)
