"""Tests for runtime/args.py: the immutable argument chain.

Python 3.13+.
"""

from __future__ import annotations

import pytest
from hypothesis import given
from hypothesis import strategies as st

from message_format import Args, Number, Str, arg
from tests.strategies import int64_values, simple_names


class TestArgsLookup:
    """Args.get() scans from the newest link toward the root."""

    def test_single_argument(self) -> None:
        assert arg("name", "Hendrik").get("name") == Str("Hendrik")

    def test_multiple_arguments(self) -> None:
        args = arg("name", "Hendrik").arg("city", "Berlin")
        assert args.get("name") == Str("Hendrik")
        assert args.get("city") == Str("Berlin")

    def test_missing_name_returns_none(self) -> None:
        assert arg("name", "Hendrik").get("country") is None

    def test_shadowing_newest_wins(self) -> None:
        assert arg("x", 1).arg("x", 2).get("x") == Number(2)

    def test_attach_leaves_receiver_unchanged(self) -> None:
        base = arg("x", 1)
        extended = base.arg("x", 2)
        assert base.get("x") == Number(1)
        assert extended.get("x") == Number(2)
        assert extended.prev is base

    def test_shared_base_extended_independently(self) -> None:
        base = arg("greeting", "Hello")
        left = base.arg("name", "Ada")
        right = base.arg("name", "Grace")
        assert left.get("name") == Str("Ada")
        assert right.get("name") == Str("Grace")
        assert left.get("greeting") == right.get("greeting") == Str("Hello")

    def test_values_converted(self) -> None:
        args = arg("count", 3).arg("word", "three").arg("wrapped", Number(4))
        assert args.get("count") == Number(3)
        assert args.get("word") == Str("three")
        assert args.get("wrapped") == Number(4)

    def test_invalid_value_rejected(self) -> None:
        with pytest.raises(TypeError):
            arg("flag", True)
        with pytest.raises(TypeError):
            arg("x", 1).arg("ratio", 0.5)  # type: ignore[arg-type]

    @given(st.lists(st.tuples(simple_names(), int64_values()), min_size=1, max_size=10))
    def test_get_matches_last_assignment(self, pairs: list[tuple[str, int]]) -> None:
        """Property: lookup behaves like dict assignment in attach order."""
        chain: Args | None = None
        expected: dict[str, int] = {}
        for name, value in pairs:
            chain = arg(name, value) if chain is None else chain.arg(name, value)
            expected[name] = value
        assert chain is not None
        for name, value in expected.items():
            assert chain.get(name) == Number(value)


class TestArgsCollection:
    """Container protocol helpers on Args."""

    def test_contains(self) -> None:
        args = arg("a", 1).arg("b", "two")
        assert "a" in args
        assert "b" in args
        assert "c" not in args
        assert 1 not in args

    def test_iteration_newest_first_with_shadowed(self) -> None:
        args = arg("x", 1).arg("y", "why").arg("x", 2)
        assert list(args) == [
            ("x", Number(2)),
            ("y", Str("why")),
            ("x", Number(1)),
        ]

    def test_len_counts_links(self) -> None:
        assert len(arg("x", 1)) == 1
        assert len(arg("x", 1).arg("x", 2).arg("y", 3)) == 3

    def test_to_dict_drops_shadowed(self) -> None:
        args = arg("x", 1).arg("y", "why").arg("x", 2)
        assert args.to_dict() == {"x": Number(2), "y": Str("why")}

    def test_from_mapping(self) -> None:
        args = Args.from_mapping({"name": "Ada", "count": 3})
        assert args is not None
        assert args.get("name") == Str("Ada")
        assert args.get("count") == Number(3)
        assert [name for name, _ in args] == ["count", "name"]

    def test_from_empty_mapping(self) -> None:
        assert Args.from_mapping({}) is None

    def test_from_mapping_validates(self) -> None:
        with pytest.raises(TypeError):
            Args.from_mapping({"bad": None})  # type: ignore[dict-item]

    def test_frozen(self) -> None:
        args = arg("x", 1)
        with pytest.raises(AttributeError):
            args.name = "y"  # type: ignore[misc]
