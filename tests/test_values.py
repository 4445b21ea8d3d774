"""
Tests for value classification and paths.
"""

import datetime
import decimal
import fractions
import io
import threading

import pytest

from structclone.values import (
    Attribute,
    Member,
    ValueKind,
    attributes,
    children,
    classify,
    format_path,
    is_container,
    is_mutable_container,
)


def _generator():
    yield 1


class TestClassify:
    """Test classify()."""

    @pytest.mark.parametrize("value", [None, True, False, 0, -3, 2 ** 100, 1.5, float("nan"), "", "text"])
    def test_primitives(self, value):
        assert classify(value) is ValueKind.PRIMITIVE

    def test_bool_is_primitive_not_number(self):
        """bool is checked before the numeric tower."""
        assert classify(True) is ValueKind.PRIMITIVE

    def test_containers(self):
        assert classify([]) is ValueKind.ORDERED
        assert classify({}) is ValueKind.KEYED
        assert classify(()) is ValueKind.TUPLE
        assert classify({1}) is ValueKind.SET
        assert classify(frozenset()) is ValueKind.SET

    def test_scalar_like_values(self):
        assert classify(b"x") is ValueKind.BYTES
        assert classify(bytearray()) is ValueKind.BYTES
        assert classify(datetime.date(2020, 1, 1)) is ValueKind.TEMPORAL
        assert classify(datetime.datetime(2020, 1, 1, 12)) is ValueKind.TEMPORAL
        assert classify(datetime.timedelta(seconds=1)) is ValueKind.TEMPORAL
        assert classify(decimal.Decimal("1.5")) is ValueKind.NUMBER
        assert classify(fractions.Fraction(1, 3)) is ValueKind.NUMBER
        assert classify(1j) is ValueKind.NUMBER

    def test_foreign_values(self):
        assert classify(lambda: None) is ValueKind.CALLABLE
        assert classify(len) is ValueKind.CALLABLE
        assert classify(dict) is ValueKind.CALLABLE
        assert classify(io.StringIO()) is ValueKind.HANDLE
        assert classify(threading.Lock()) is ValueKind.HANDLE
        assert classify(_generator()) is ValueKind.HANDLE
        assert classify(object()) is ValueKind.OBJECT

    def test_is_container(self):
        assert is_container([1])
        assert is_container((1,))
        assert not is_container("abc")
        assert not is_container(b"abc")

    def test_is_mutable_container(self):
        assert is_mutable_container([])
        assert is_mutable_container(bytearray())
        assert not is_mutable_container(())
        assert not is_mutable_container(frozenset())


class TestPaths:
    """Test path formatting and child enumeration."""

    def test_root(self):
        assert format_path(()) == "$"

    def test_index_and_key(self):
        assert format_path((1, "name")) == "$[1]['name']"

    def test_set_member(self):
        assert format_path(("roles", Member("admin"))) == "$['roles']{'admin'}"

    def test_children_of_list(self):
        assert list(children(["a", "b"], ValueKind.ORDERED)) == [(0, "a"), (1, "b")]

    def test_children_of_dict_in_insertion_order(self):
        assert list(children({"z": 1, "a": 2}, ValueKind.KEYED)) == [("z", 1), ("a", 2)]

    def test_children_of_set(self):
        assert list(children({7}, ValueKind.SET)) == [(Member(7), 7)]

    def test_leaf_has_no_children(self):
        assert list(children("text", ValueKind.PRIMITIVE)) == []

    def test_attribute(self):
        assert format_path((0, Attribute("items"), "cb")) == "$[0].items['cb']"


class _Point:
    def __init__(self):
        self.x = 1
        self.y = [2]


class _Slotted:
    __slots__ = ("callback", "__secret", "unset")

    def __init__(self):
        self.callback = print
        self.__secret = 3


class TestAttributes:
    """Test attributes() over object instance state."""

    def test_instance_dict(self):
        point = _Point()
        pairs = list(attributes(point))
        assert pairs == [(Attribute("x"), 1), (Attribute("y"), point.y)]

    def test_slots_with_mangled_name(self):
        pairs = dict(attributes(_Slotted()))
        assert pairs[Attribute("callback")] is print
        assert pairs[Attribute("_Slotted__secret")] == 3

    def test_unset_slot_skipped(self):
        names = [segment.name for segment, _ in attributes(_Slotted())]
        assert "unset" not in names

    def test_stateless_object(self):
        assert list(attributes(object())) == []
