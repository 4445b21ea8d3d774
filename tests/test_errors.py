"""
Tests for error types and cloning options.
"""

import pytest

from structclone.errors import CloneError, CloneLimitExceeded, UnsupportedValueKind, unsupported
from structclone.options import CloneLimits, Strategy
from structclone.values import ValueKind


class TestUnsupportedValueKind:
    """Test UnsupportedValueKind."""

    def test_carries_kind_path_and_strategy(self):
        error = UnsupportedValueKind(
            ValueKind.CALLABLE, ["data", 2], Strategy.JSON_ROUND_TRIP, "no", value=len
        )
        assert error.kind is ValueKind.CALLABLE
        assert error.path == ("data", 2)
        assert error.strategy is Strategy.JSON_ROUND_TRIP
        assert error.value_type == "builtin_function_or_method"

    def test_message(self):
        error = UnsupportedValueKind(ValueKind.SET, (1,), Strategy.JSON_ROUND_TRIP, "set has no JSON representation")
        assert str(error) == "set value at $[1] cannot be cloned with json: set has no JSON representation"

    def test_is_clone_error(self):
        assert issubclass(UnsupportedValueKind, CloneError)
        assert issubclass(CloneLimitExceeded, CloneError)

    def test_default_reason(self):
        error = unsupported(ValueKind.BYTES, (), Strategy.YAML_ROUND_TRIP, value=bytearray())
        assert error.reason == "bytearray has no yaml representation"


class TestOptions:
    """Test Strategy and CloneLimits."""

    def test_every_strategy_described(self):
        for strategy in Strategy:
            assert strategy.description

    def test_strategy_from_value(self):
        assert Strategy("json") is Strategy.JSON_ROUND_TRIP

    def test_limits_default_unbounded(self):
        limits = CloneLimits()
        assert limits.max_depth is None
        assert limits.max_nodes is None

    def test_negative_limit_rejected(self):
        with pytest.raises(ValueError, match="max_depth"):
            CloneLimits(max_depth=-1)

    def test_limits_are_frozen(self):
        limits = CloneLimits(max_nodes=10)
        with pytest.raises(AttributeError):
            limits.max_nodes = 20
