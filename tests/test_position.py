"""Tests for seed parsing and position rendering."""

from __future__ import annotations

import pytest

from docnum.config import DEFAULT_START_FROM
from docnum.position import (
    coerce_level,
    coerce_start_from,
    is_numeric_token,
    parse_seed,
    render_position,
)

# ===================================================================
# is_numeric_token
# ===================================================================


class TestIsNumericToken:
    """Tests for the digit-run check."""

    @pytest.mark.parametrize("token", ["0", "1", "12", "007", " 3 "])
    def test_numeric(self, token: str) -> None:
        assert is_numeric_token(token)

    @pytest.mark.parametrize("token", ["", "a", "1a", "-1", "1.5", "+2", " "])
    def test_not_numeric(self, token: str) -> None:
        assert not is_numeric_token(token)


# ===================================================================
# parse_seed
# ===================================================================


class TestParseSeed:
    """Tests for turning seed strings into position vectors."""

    def test_none_defaults_to_one(self) -> None:
        assert parse_seed(None, 1) == [1]

    def test_multi_level(self) -> None:
        assert parse_seed("12.1.2", 1) == [12, 1, 2]

    def test_trailing_dot_adds_level(self) -> None:
        """The empty token after a trailing dot becomes a new level."""
        assert parse_seed("12.", 1) == [12, 1]

    def test_non_numeric_uses_start_from(self) -> None:
        assert parse_seed("3.x.5", 0) == [3, 0, 5]

    def test_empty_seed(self) -> None:
        assert parse_seed("", 4) == [4]

    def test_leading_zeros_are_dropped(self) -> None:
        assert parse_seed("01.02", 1) == [1, 2]


# ===================================================================
# coerce_level / render_position
# ===================================================================


class TestCoerceLevel:
    """Tests for level-argument interpretation."""

    def test_int(self) -> None:
        assert coerce_level(3) == 3

    def test_digit_string(self) -> None:
        assert coerce_level("2") == 2

    @pytest.mark.parametrize("value", [None, "two", 1.5, True, [1]])
    def test_rejected(self, value: object) -> None:
        assert coerce_level(value) is None


class TestRenderPosition:
    """Tests for joining level values."""

    def test_default_separator(self) -> None:
        assert render_position([1, 2, 3], ".") == "1.2.3"

    def test_custom_separator(self) -> None:
        assert render_position([4, 1], "-") == "4-1"

    def test_single_level(self) -> None:
        assert render_position((7,), ".") == "7"


# ===================================================================
# Oversized tokens / coerce_start_from
# ===================================================================


class TestOversizedTokens:
    """Tests for digit runs past the int conversion limit."""

    def test_parse_seed_falls_back(self) -> None:
        assert parse_seed("2." + "9" * 5000, 1) == [2, 1]

    def test_coerce_level_returns_none(self) -> None:
        assert coerce_level("9" * 5000) is None


class TestCoerceStartFrom:
    """Tests for start-value fallback."""

    @pytest.mark.parametrize("value, expected", [(0, 0), (5, 5), ("3", 3)])
    def test_accepted(self, value: object, expected: int) -> None:
        assert coerce_start_from(value) == expected

    @pytest.mark.parametrize("value", ["x", "", None, -1, 1.5, False, "9" * 5000])
    def test_falls_back_to_default(self, value: object) -> None:
        assert coerce_start_from(value) == DEFAULT_START_FROM
