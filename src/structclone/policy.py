"""
Which values each strategy can reproduce.

Each text strategy has its own "safe kind" predicate, written for
Python's type system:

    JSON  - exact None/bool/int/float/str (finite floats only), exact list,
            exact dict with str keys. No cycles.
    YAML  - the JSON kinds plus non-finite floats, scalar dict keys, sets of
            scalars, bytes, date and datetime. Cycles and shared references
            survive through anchors.
    STRUCTURAL - everything except callables and open handles, including
            those held in the attributes of foreign objects.

Both text strategies also reject ints too long for the interpreter's
int/str conversion limit, and nesting deeper than TEXT_MAX_DEPTH: the
json and yaml codecs recurse natively on nested containers.

check_cloneable() walks a value once and raises the first rejection.
"""

from __future__ import annotations

import datetime
import math
import sys
from typing import Any, Callable, Dict, Optional

from structclone.errors import UnsupportedValueKind, unsupported
from structclone.options import CloneLimits, Strategy
from structclone.values import PRIMITIVE_TYPES, ValueKind
from structclone.walker import Node, walk

# Returns a rejection reason, or None when the node is acceptable
Predicate = Callable[[Node], Optional[str]]

_YAML_SCALAR_TYPES = PRIMITIVE_TYPES + (datetime.date, datetime.datetime)

# Deepest container nesting the text strategies accept. The yaml
# representer spends about three interpreter frames per level.
TEXT_MAX_DEPTH = 200

# Ints this short are below any possible int/str conversion limit
_SHORT_INT_BITS = 2000


def _exact_primitive(value: Any) -> Optional[str]:
    if type(value) not in PRIMITIVE_TYPES:
        return f"{type(value).__name__} is a subclass of a primitive type"
    if type(value) is int and value.bit_length() > _SHORT_INT_BITS:
        return _long_int_reason(value)
    return None


def _long_int_reason(value: int) -> Optional[str]:
    # Over the limit, str() fails before doing any conversion work
    try:
        str(value)
    except ValueError:
        limit = getattr(sys, "get_int_max_str_digits", lambda: 0)()
        return f"int exceeds the {limit}-digit limit for integer string conversion"
    return None


def _text_depth_reason(node: Node) -> Optional[str]:
    if node.depth > TEXT_MAX_DEPTH:
        return f"nesting deeper than {TEXT_MAX_DEPTH} levels"
    return None


def _json_reason(node: Node) -> Optional[str]:
    if node.cycle:
        return "cyclic reference"
    depth_reason = _text_depth_reason(node)
    if depth_reason is not None:
        return depth_reason
    value = node.value
    if node.kind is ValueKind.PRIMITIVE:
        reason = _exact_primitive(value)
        if reason is None and isinstance(value, float) and not math.isfinite(value):
            reason = f"non-finite float {value!r}"
        return reason
    if node.kind is ValueKind.ORDERED:
        if type(value) is not list:
            return f"list subclass {type(value).__name__}"
        return None
    if node.kind is ValueKind.KEYED:
        if type(value) is not dict:
            return f"dict subclass {type(value).__name__}"
        for key in value:
            if type(key) is not str:
                return f"non-text key {key!r}"
        return None
    return f"{type(value).__name__} has no JSON representation"


def _yaml_reason(node: Node) -> Optional[str]:
    depth_reason = _text_depth_reason(node)
    if depth_reason is not None:
        return depth_reason
    value = node.value
    if node.kind is ValueKind.PRIMITIVE:
        return _exact_primitive(value)
    if node.kind is ValueKind.ORDERED:
        if type(value) is not list:
            return f"list subclass {type(value).__name__}"
        return None
    if node.kind is ValueKind.KEYED:
        if type(value) is not dict:
            return f"dict subclass {type(value).__name__}"
        for key in value:
            if type(key) not in _YAML_SCALAR_TYPES:
                return f"non-scalar key {key!r}"
        return None
    if node.kind is ValueKind.SET:
        if type(value) is not set:
            return f"{type(value).__name__} has no YAML representation"
        return None
    if node.kind is ValueKind.BYTES:
        if type(value) is not bytes:
            return f"{type(value).__name__} has no YAML representation"
        return None
    if node.kind is ValueKind.TEMPORAL:
        if type(value) not in (datetime.date, datetime.datetime):
            return f"{type(value).__name__} has no YAML representation"
        return None
    return f"{type(value).__name__} has no YAML representation"


def _structural_reason(node: Node) -> Optional[str]:
    if node.kind is ValueKind.CALLABLE:
        return f"{type(node.value).__name__} is a live callable"
    if node.kind is ValueKind.HANDLE:
        return f"{type(node.value).__name__} is an open resource handle"
    return None


def _accept(node: Node) -> Optional[str]:
    return None


_PREDICATES: Dict[Strategy, Predicate] = {
    Strategy.JSON_ROUND_TRIP: _json_reason,
    Strategy.YAML_ROUND_TRIP: _yaml_reason,
    Strategy.STRUCTURAL_CLONE: _structural_reason,
    Strategy.RECURSIVE_CLONE: _accept,
}


def check_cloneable(source: Any, strategy: Strategy, limits: Optional[CloneLimits] = None) -> None:
    """
    Raise if any value reachable from source is rejected by strategy.

    Values are checked depth-first in insertion order, so the reported
    path is the first offending slot. For STRUCTURAL_CLONE the instance
    attributes of foreign objects are checked too, because the copy
    protocol would share any callable they hold.

    Raises:
        UnsupportedValueKind: First rejected value, with its path
        CloneLimitExceeded: If limits are given and a bound is crossed
        ValueError: strategy is neither a Strategy nor a Strategy value
    """
    strategy = Strategy(strategy)
    predicate = _PREDICATES[strategy]
    objects = strategy is Strategy.STRUCTURAL_CLONE
    for node in walk(source, limits=limits, objects=objects):
        reason = predicate(node)
        if reason is not None:
            raise unsupported(node.kind, node.path, strategy, reason, value=node.value)


def find_unsupported(source: Any, strategy: Strategy) -> Optional[UnsupportedValueKind]:
    """Return the first rejection for strategy instead of raising it."""
    try:
        check_cloneable(source, strategy)
    except UnsupportedValueKind as e:
        return e
    return None


def is_json_safe(value: Any) -> bool:
    return find_unsupported(value, Strategy.JSON_ROUND_TRIP) is None


def is_yaml_safe(value: Any) -> bool:
    return find_unsupported(value, Strategy.YAML_ROUND_TRIP) is None


def is_structured_cloneable(value: Any) -> bool:
    return find_unsupported(value, Strategy.STRUCTURAL_CLONE) is None
