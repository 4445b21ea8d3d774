"""
Comparisons that make copy semantics checkable.

Python's == recurses natively and never terminates on a self-containing
list, and it says nothing about identity. These helpers compare value
graphs iteratively and report where two graphs share containers.
"""

from __future__ import annotations

import math
from typing import Any, Dict, List, Set, Tuple

from structclone.values import CONTAINER_KINDS, Path, ValueKind, classify, is_mutable_container
from structclone.walker import walk


def _leaf_equal(x: Any, y: Any) -> bool:
    if type(x) is not type(y):
        return False
    if x is y or x == y:
        return True
    return isinstance(x, float) and math.isnan(x) and math.isnan(y)


def structurally_equal(a: Any, b: Any, *, aliasing: bool = False) -> bool:
    """
    Compare two value graphs slot by slot, at every depth.

    Cycles are handled by assuming a pair of containers equal while it is
    being compared. NaN compares equal to NaN.

    Args:
        a, b: Values to compare
        aliasing: Also require the identity structure to match, i.e. a
            container shared (or cyclic) in a must correspond to exactly
            one container in b, and vice versa

    Returns:
        True if the graphs are equal
    """
    assumed: Set[Tuple[int, int]] = set()
    forward: Dict[int, int] = {}
    backward: Dict[int, int] = {}
    stack: List[Tuple[Any, Any]] = [(a, b)]

    while stack:
        x, y = stack.pop()
        kind = classify(x)
        if classify(y) is not kind:
            return False

        if kind not in CONTAINER_KINDS:
            if not _leaf_equal(x, y):
                return False
            continue

        if aliasing:
            if forward.setdefault(id(x), id(y)) != id(y):
                return False
            if backward.setdefault(id(y), id(x)) != id(x):
                return False

        pair = (id(x), id(y))
        if pair in assumed:
            continue
        assumed.add(pair)

        if len(x) != len(y):
            return False
        if kind is ValueKind.SET:
            if x != y:
                return False
        elif kind is ValueKind.KEYED:
            if x.keys() != y.keys():
                return False
            stack.extend((x[key], y[key]) for key in x)
        else:
            stack.extend(zip(x, y))

    return True


def shared_containers(a: Any, b: Any) -> List[Path]:
    """
    Paths (in b) of mutable containers that are also reachable from a.

    An empty list means b is fully independent of a.
    """
    in_a = {id(node.value) for node in walk(a) if is_mutable_container(node.value)}
    return [
        node.path
        for node in walk(b)
        if not node.shared and is_mutable_container(node.value) and id(node.value) in in_a
    ]
