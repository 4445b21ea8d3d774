"""
Iterative traversal of value graphs.

walk() visits every value reachable from a root, depth-first, in
insertion order, without native recursion. Containers reached a second
time are reported but not re-expanded, which makes the walk linear in
the size of the graph and safe on cycles.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterator, List, Optional, Set, Tuple

from structclone.errors import CloneLimitExceeded
from structclone.options import CloneLimits
from structclone.values import CONTAINER_KINDS, ROOT, Path, ValueKind, attributes, children, classify


@dataclass(frozen=True)
class Node:
    """
    One visited value.

    Properties:
        path: Segments from the root
        value: The value itself
        kind: classify(value)
        depth: len(path)
        shared: Container already visited through another path
        cycle: Container is an ancestor of this position (back-reference)
    """

    path: Path
    value: Any
    kind: ValueKind
    depth: int
    shared: bool = False
    cycle: bool = False


_ENTER = 0
_EXIT = 1


def walk(source: Any, limits: Optional[CloneLimits] = None, objects: bool = False) -> Iterator[Node]:
    """
    Yield a Node for every value reachable from source.

    With objects=True, foreign OBJECT values are expanded too: their
    instance attributes (see values.attributes) are visited like container
    slots, under Attribute path segments.

    Raises:
        CloneLimitExceeded: If limits are given and a bound is crossed
    """
    max_depth = limits.max_depth if limits else None
    max_nodes = limits.max_nodes if limits else None

    stack: List[Tuple[int, Path, Any]] = [(_ENTER, ROOT, source)]
    ancestors: Set[int] = set()
    seen: Set[int] = set()
    visited = 0

    while stack:
        op, path, value = stack.pop()

        if op == _EXIT:
            ancestors.discard(id(value))
            continue

        depth = len(path)
        if max_depth is not None and depth > max_depth:
            raise CloneLimitExceeded("max_depth", max_depth, path)
        visited += 1
        if max_nodes is not None and visited > max_nodes:
            raise CloneLimitExceeded("max_nodes", max_nodes, path)

        kind = classify(value)
        expand_object = objects and kind is ValueKind.OBJECT
        if kind not in CONTAINER_KINDS and not expand_object:
            yield Node(path, value, kind, depth)
            continue

        ident = id(value)
        if ident in ancestors:
            yield Node(path, value, kind, depth, shared=True, cycle=True)
            continue
        if ident in seen:
            yield Node(path, value, kind, depth, shared=True)
            continue

        yield Node(path, value, kind, depth)
        seen.add(ident)
        ancestors.add(ident)
        stack.append((_EXIT, path, value))
        slots = attributes(value) if expand_object else children(value, kind)
        # Reversed so the first slot is popped first
        pending = [(_ENTER, path + (segment,), child) for segment, child in slots]
        stack.extend(reversed(pending))
