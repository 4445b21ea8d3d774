"""
Structural Cloner: shallow and deep copies of nested containers.

shallow_copy()
    Duplicates the top-level container only. Nested containers stay
    shared with the source, so mutating them through the copy is
    observable through the original.

deep_copy()
    Duplicates every reachable container. No container instance is
    shared between the source graph and the result graph.

Strategies:
    RECURSIVE_CLONE  - iterative clone with a visited map. Handles every
                       value, preserves cycles and shared references.
    STRUCTURAL_CLONE - same engine, but rejects callables and handles and
                       deep-copies foreign objects through the copy protocol.
    JSON_ROUND_TRIP  - json.dumps then json.loads. Lossy kinds and cycles
                       are rejected up front.
    YAML_ROUND_TRIP  - yaml.safe_dump then yaml.safe_load. Anchors keep
                       cycles and shared references.

The source is never mutated, and a failed clone returns nothing.
"""

from __future__ import annotations

import copy
import json
import warnings
from typing import Any, Dict, Iterator, List, Optional, Tuple

import yaml

from structclone.errors import CloneLimitExceeded, SharedReferenceWarning, unsupported
from structclone.options import CloneLimits, Strategy
from structclone.policy import check_cloneable
from structclone.values import ROOT, Path, PathSegment, ValueKind, children, classify, format_path

# Placeholder for a tuple clone that is still being assembled
_PENDING = object()


def shallow_copy(source: Any) -> Any:
    """
    Copy the top level of a container.

    Lists, dicts, sets and bytearrays are duplicated (keeping their class);
    every slot of the copy holds the same reference as the source slot.
    Immutable and foreign values are returned unchanged. Never raises.
    """
    if isinstance(source, (list, dict, set, bytearray)):
        return copy.copy(source)
    return source


def deep_copy(
    source: Any,
    strategy: Strategy = Strategy.RECURSIVE_CLONE,
    *,
    limits: Optional[CloneLimits] = None,
) -> Any:
    """
    Copy source so that no container is shared with the result.

    Args:
        source: Any value
        strategy: Strategy to clone with
        limits: Optional depth / node bounds

    Returns:
        The clone. Immutable roots that hold no container (primitives, an
        empty tuple, a frozenset) may come back as the source object
        itself; nothing mutable is ever shared.

    Raises:
        UnsupportedValueKind: JSON, YAML or structural strategy met a value
            it cannot reproduce
        CloneLimitExceeded: limits given and crossed
        ValueError: strategy is neither a Strategy nor a Strategy value
    """
    strategy = Strategy(strategy)

    if strategy is Strategy.RECURSIVE_CLONE:
        return _CloneEngine(strategy, limits, copy_objects=False).run(source)

    check_cloneable(source, strategy, limits=limits)

    if strategy is Strategy.STRUCTURAL_CLONE:
        return _CloneEngine(strategy, None, copy_objects=True).run(source)
    if strategy is Strategy.JSON_ROUND_TRIP:
        return _json_round_trip(source)
    return _yaml_round_trip(source)


def _json_round_trip(source: Any) -> Any:
    try:
        return json.loads(json.dumps(source, allow_nan=False))
    except (ValueError, RecursionError) as e:
        raise unsupported(
            classify(source), ROOT, Strategy.JSON_ROUND_TRIP, f"json codec failed: {e}", value=source
        ) from e


def _yaml_round_trip(source: Any) -> Any:
    # Plain and single-quoted scalars fold line breaks such as NEL and
    # U+2028 on load. Double-quoted ones escape them; non-string scalars
    # then carry an explicit tag (!!int "1") and keep their type.
    try:
        text = yaml.safe_dump(source, default_style='"', sort_keys=False, allow_unicode=True)
        return yaml.safe_load(text)
    except (yaml.YAMLError, ValueError, RecursionError) as e:
        raise unsupported(
            classify(source), ROOT, Strategy.YAML_ROUND_TRIP, f"yaml codec failed: {e}", value=source
        ) from e


def _empty_like(container: Any) -> Any:
    """Empty container of the same class (subclass state such as a default factory kept)."""
    if type(container) is list:
        return []
    if type(container) is dict:
        return {}
    clone = copy.copy(container)
    clone.clear()
    return clone


def _build_tuple(source: tuple, items: List[Any]) -> tuple:
    if type(source) is tuple:
        return tuple(items)
    if hasattr(source, "_make"):
        return source._make(items)
    return type(source)(items)


class _Frame:
    """A container whose slots are still being cloned."""

    __slots__ = ("source", "kind", "path", "target", "slots", "segment")

    def __init__(self, source: Any, kind: ValueKind, path: Path, target: Any):
        self.source = source
        self.kind = kind
        self.path = path
        # list/dict clone for mutable containers, item accumulator for tuples
        self.target = target
        self.slots: Iterator[Tuple[PathSegment, Any]] = children(source, kind)
        self.segment: PathSegment = None

    def place(self, clone: Any) -> None:
        if self.kind is ValueKind.KEYED:
            self.target[self.segment] = clone
        else:
            self.target.append(clone)


class _CloneEngine:
    """
    Iterative deep clone over an explicit stack.

    Lists and dicts are allocated and memoized before their slots are
    filled, so a back-reference resolves to the (partially filled) clone.
    Tuples are built once all of their items exist. The memo maps id() of
    a source value to its clone and lives for one run only.
    """

    def __init__(self, strategy: Strategy, limits: Optional[CloneLimits], copy_objects: bool):
        self.strategy = strategy
        self.max_depth = limits.max_depth if limits else None
        self.max_nodes = limits.max_nodes if limits else None
        self.copy_objects = copy_objects
        self.memo: Dict[int, Any] = {}
        self.stack: List[_Frame] = []
        self.visited = 0

    def run(self, source: Any) -> Any:
        result = self._visit(source, ROOT)

        while self.stack:
            frame = self.stack[-1]
            step = next(frame.slots, None)

            if step is None:
                self.stack.pop()
                if frame.kind is ValueKind.TUPLE:
                    clone = self._finish_tuple(frame)
                    if self.stack:
                        self.stack[-1].place(clone)
                    else:
                        result = clone
                continue

            segment, child = step
            frame.segment = segment
            clone = self._visit(child, frame.path + (segment,))
            if clone is not _PENDING:
                frame.place(clone)

        return result

    def _visit(self, value: Any, path: Path) -> Any:
        if self.max_depth is not None and len(path) > self.max_depth:
            raise CloneLimitExceeded("max_depth", self.max_depth, path)
        self.visited += 1
        if self.max_nodes is not None and self.visited > self.max_nodes:
            raise CloneLimitExceeded("max_nodes", self.max_nodes, path)

        kind = classify(value)
        if kind is ValueKind.PRIMITIVE:
            return value

        ident = id(value)
        if ident in self.memo:
            return self.memo[ident]

        if kind is ValueKind.ORDERED or kind is ValueKind.KEYED:
            clone = _empty_like(value)
            self.memo[ident] = clone
            self.stack.append(_Frame(value, kind, path, clone))
            return clone

        if kind is ValueKind.TUPLE:
            self.stack.append(_Frame(value, kind, path, []))
            return _PENDING

        if kind is ValueKind.SET or isinstance(value, bytearray):
            # Set members are hashable, hence immutable
            clone = copy.copy(value)
            self.memo[ident] = clone
            return clone

        if kind is ValueKind.OBJECT and self.copy_objects:
            return self._copy_object(value, path)

        if kind is ValueKind.OBJECT or kind is ValueKind.HANDLE:
            warnings.warn(
                f"{type(value).__name__} at {format_path(path)} is shared with the source",
                SharedReferenceWarning,
            )
        return value

    def _finish_tuple(self, frame: _Frame) -> tuple:
        # A cycle through a mutable container may already have built this tuple
        ident = id(frame.source)
        if ident in self.memo:
            return self.memo[ident]
        clone = _build_tuple(frame.source, frame.target)
        self.memo[ident] = clone
        return clone

    def _copy_object(self, value: Any, path: Path) -> Any:
        # The engine memo doubles as the deepcopy memo so that containers
        # referenced both by the object and by the graph are cloned once
        try:
            return copy.deepcopy(value, self.memo)
        except (TypeError, copy.Error) as e:
            raise unsupported(
                ValueKind.OBJECT, path, self.strategy, f"copy protocol failed: {e}", value=value
            ) from e
