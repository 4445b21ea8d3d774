"""
Value Model for structclone

Every value handed to the cloner is classified into exactly one ValueKind.
The core model is a tagged union:

    Value = Primitive | OrderedContainer | KeyedContainer

Python programs hold more than that, so the remaining kinds describe
the values the cloning strategies have to accept, carry over or reject.

ARCHITECTURAL RULE:
    Operations dispatch on classify(value), never on ad-hoc isinstance
    checks scattered through the strategies.
"""

from __future__ import annotations

import datetime
import io
import numbers
import socket
import threading
import types
from dataclasses import dataclass
from enum import Enum
from typing import Any, Hashable, Iterator, Tuple, Union


class ValueKind(Enum):
    """
    Kinds of values known to the cloner.

    The first three form the core model. TUPLE and SET are immutable or
    hash-based containers, BYTES/TEMPORAL/NUMBER are scalar-like values with
    no JSON form, and CALLABLE/HANDLE/OBJECT are foreign values.
    """

    PRIMITIVE = "primitive"
    ORDERED = "ordered"
    KEYED = "keyed"
    TUPLE = "tuple"
    SET = "set"
    BYTES = "bytes"
    TEMPORAL = "temporal"
    NUMBER = "number"
    HANDLE = "handle"
    CALLABLE = "callable"
    OBJECT = "object"


# Containers the walker descends into
CONTAINER_KINDS = frozenset({ValueKind.ORDERED, ValueKind.KEYED, ValueKind.TUPLE, ValueKind.SET})

# Values carried over by reference by the recursive strategy
FOREIGN_KINDS = frozenset({ValueKind.HANDLE, ValueKind.CALLABLE, ValueKind.OBJECT})

PRIMITIVE_TYPES = (type(None), bool, int, float, str)

_TEMPORAL_TYPES = (datetime.date, datetime.time, datetime.timedelta)

_HANDLE_TYPES = (
    io.IOBase,
    socket.socket,
    types.GeneratorType,
    types.AsyncGeneratorType,
    types.CoroutineType,
    type(threading.Lock()),
    type(threading.RLock()),
)


def classify(value: Any) -> ValueKind:
    """
    Return the ValueKind of a value.

    Checks run in a fixed order so that, e.g., bool is a primitive rather
    than a number and a class is a callable rather than an object.
    """
    if value is None or isinstance(value, (bool, int, float, str)):
        return ValueKind.PRIMITIVE
    if isinstance(value, list):
        return ValueKind.ORDERED
    if isinstance(value, dict):
        return ValueKind.KEYED
    if isinstance(value, tuple):
        return ValueKind.TUPLE
    if isinstance(value, (set, frozenset)):
        return ValueKind.SET
    if isinstance(value, (bytes, bytearray)):
        return ValueKind.BYTES
    if isinstance(value, _TEMPORAL_TYPES):
        return ValueKind.TEMPORAL
    if isinstance(value, numbers.Number):
        return ValueKind.NUMBER
    if isinstance(value, _HANDLE_TYPES):
        return ValueKind.HANDLE
    if callable(value):
        return ValueKind.CALLABLE
    return ValueKind.OBJECT


def is_container(value: Any) -> bool:
    """True for values whose identity matters to copy semantics."""
    return classify(value) in CONTAINER_KINDS


def is_mutable_container(value: Any) -> bool:
    """True for list, dict, set and bytearray instances."""
    return isinstance(value, (list, dict, set, bytearray))


@dataclass(frozen=True)
class Member:
    """
    Path segment addressing a set member.

    Sets have no index or key, so the member value itself identifies
    the slot.
    """

    value: Hashable


@dataclass(frozen=True)
class Attribute:
    """Path segment addressing an instance attribute of a foreign object."""

    name: str


PathSegment = Union[int, Hashable, Member, Attribute]
Path = Tuple[PathSegment, ...]

ROOT: Path = ()


def format_path(path: Path) -> str:
    """
    Render a path as JSONPath-like text.

    Examples:
        ()                      -> $
        (1, "name")             -> $[1]['name']
        (Member(3),)            -> ${3}
        (0, Attribute("items")) -> $[0].items
    """
    parts = ["$"]
    for segment in path:
        if isinstance(segment, Member):
            parts.append("{" + repr(segment.value) + "}")
        elif isinstance(segment, Attribute):
            parts.append("." + segment.name)
        else:
            parts.append(f"[{segment!r}]")
    return "".join(parts)


def attributes(value: Any) -> Iterator[Tuple[Attribute, Any]]:
    """
    Yield (segment, attribute value) pairs of an object's instance state.

    Covers __dict__ entries and filled __slots__ of every class in the MRO.
    Objects that keep their state elsewhere (C extensions, custom
    __reduce__) yield nothing.
    """
    state = getattr(value, "__dict__", None)
    if isinstance(state, dict):
        for name, attr in list(state.items()):
            yield Attribute(str(name)), attr

    for cls in type(value).__mro__:
        slots = cls.__dict__.get("__slots__", ())
        if isinstance(slots, str):
            slots = (slots,)
        for name in slots:
            if name in ("__dict__", "__weakref__"):
                continue
            if name.startswith("__") and not name.endswith("__"):
                name = f"_{cls.__name__.lstrip('_')}{name}"
            try:
                attr = getattr(value, name)
            except AttributeError:
                continue
            yield Attribute(name), attr


def children(value: Any, kind: ValueKind):
    """
    Yield (segment, child) pairs of a container in insertion order.

    Non-containers have no children.
    """
    if kind is ValueKind.ORDERED or kind is ValueKind.TUPLE:
        yield from enumerate(value)
    elif kind is ValueKind.KEYED:
        yield from value.items()
    elif kind is ValueKind.SET:
        for member in value:
            yield Member(member), member
