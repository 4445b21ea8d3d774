"""
Cloning options: strategy selection and traversal limits.

These are the only configuration surfaces of the package. There are no
config files and no environment variables; callers pass options explicitly.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional


class Strategy(Enum):
    """Deep-copy strategies accepted by deep_copy()."""

    STRUCTURAL_CLONE = "structural"
    JSON_ROUND_TRIP = "json"
    RECURSIVE_CLONE = "recursive"
    YAML_ROUND_TRIP = "yaml"

    @property
    def description(self) -> str:
        return _DESCRIPTIONS[self]


_DESCRIPTIONS = {
    Strategy.STRUCTURAL_CLONE: (
        "preserve all container/primitive kinds and cycles, reject non-cloneable values"
    ),
    Strategy.JSON_ROUND_TRIP: (
        "text-based clone, rejects kinds JSON cannot express and rejects cycles"
    ),
    Strategy.RECURSIVE_CLONE: (
        "manual fully general clone, preserves cycles and shared references"
    ),
    Strategy.YAML_ROUND_TRIP: (
        "text-based clone through YAML anchors, preserves cycles, dates, sets and bytes"
    ),
}


@dataclass(frozen=True)
class CloneLimits:
    """
    Upper bounds on a single traversal.

    Untrusted input can be arbitrarily deep or wide. Limits are opt-in:
    a None field means unbounded.

    Properties:
        max_depth: Deepest allowed nesting level (the root is depth 0)
        max_nodes: Most values (containers and leaves) that may be visited
    """

    max_depth: Optional[int] = None
    max_nodes: Optional[int] = None

    def __post_init__(self) -> None:
        for name in ("max_depth", "max_nodes"):
            bound = getattr(self, name)
            if bound is not None and bound < 0:
                raise ValueError(f"{name} must be non-negative, got {bound}")
