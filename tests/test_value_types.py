"""Tests for runtime/value_types.py: Number, Str, and as_value().

Python 3.13+.
"""

from __future__ import annotations

import pytest
from hypothesis import given
from hypothesis import strategies as st

from message_format.constants import INT64_MAX, INT64_MIN, UINT64_MAX
from message_format.runtime.value_types import Number, Str, as_value
from tests.strategies import int64_values


class TestNumber:
    """Number wraps a signed 64-bit integer."""

    def test_display_form(self) -> None:
        assert str(Number(42)) == "42"
        assert str(Number(-7)) == "-7"

    def test_range_bounds_accepted(self) -> None:
        assert Number(INT64_MIN).value == INT64_MIN
        assert Number(INT64_MAX).value == INT64_MAX

    def test_out_of_range_rejected(self) -> None:
        with pytest.raises(ValueError, match="64-bit"):
            Number(INT64_MAX + 1)
        with pytest.raises(ValueError, match="64-bit"):
            Number(INT64_MIN - 1)

    def test_bool_rejected(self) -> None:
        with pytest.raises(TypeError, match="bool"):
            Number(True)

    def test_non_int_rejected(self) -> None:
        with pytest.raises(TypeError, match="float"):
            Number(1.5)  # type: ignore[arg-type]

    def test_equality_by_value(self) -> None:
        assert Number(3) == Number(3)
        assert Number(3) != Number(4)
        assert Number(3) != Str("3")

    @given(int64_values())
    def test_display_matches_int(self, value: int) -> None:
        """Property: str(Number(v)) == str(v) over the whole range."""
        assert str(Number(value)) == str(value)


class TestStr:
    """Str wraps text."""

    def test_display_form(self) -> None:
        assert str(Str("Berlin")) == "Berlin"

    def test_empty_string_allowed(self) -> None:
        assert str(Str("")) == ""

    def test_non_str_rejected(self) -> None:
        with pytest.raises(TypeError, match="int"):
            Str(5)  # type: ignore[arg-type]

    @given(st.text())
    def test_display_is_identity(self, text: str) -> None:
        assert str(Str(text)) == text


class TestAsValue:
    """as_value() converts Python objects into Values."""

    def test_int_becomes_number(self) -> None:
        assert as_value(5) == Number(5)

    def test_str_becomes_str(self) -> None:
        assert as_value("five") == Str("five")

    def test_value_passes_through(self) -> None:
        number = Number(1)
        text = Str("x")
        assert as_value(number) is number
        assert as_value(text) is text

    def test_bool_rejected(self) -> None:
        with pytest.raises(TypeError, match="bool"):
            as_value(True)

    @pytest.mark.parametrize("obj", [1.0, None, b"bytes", ["list"], {"k": 1}])
    def test_unsupported_types_rejected(self, obj: object) -> None:
        with pytest.raises(TypeError, match="Unsupported argument type"):
            as_value(obj)  # type: ignore[arg-type]

    def test_unsigned_above_signed_range_rejected(self) -> None:
        """Unsigned inputs that do not fit i64 are refused, never wrapped."""
        with pytest.raises(ValueError, match="Unsigned"):
            as_value(INT64_MAX + 1)
        with pytest.raises(ValueError, match="Unsigned"):
            as_value(UINT64_MAX)

    def test_beyond_unsigned_range_rejected(self) -> None:
        with pytest.raises(ValueError, match="64-bit"):
            as_value(UINT64_MAX + 1)
        with pytest.raises(ValueError, match="64-bit"):
            as_value(INT64_MIN - 1)

    def test_unsigned_within_signed_range_accepted(self) -> None:
        assert as_value(INT64_MAX) == Number(INT64_MAX)
