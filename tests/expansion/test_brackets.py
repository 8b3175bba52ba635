"""Tests for bracket pool expressions and name pattern expansion."""

import pytest

from multiradix.expansion import expand_name_patterns, parse_pool_expr


class TestParsePoolExpr:
    """Tests for parse_pool_expr."""

    def test_range(self) -> None:
        """Inclusive numeric range."""
        assert parse_pool_expr("1-3") == ["1", "2", "3"]

    def test_list(self) -> None:
        """Comma-separated literals keep their order."""
        assert parse_pool_expr("c,a,b") == ["c", "a", "b"]

    def test_mixed(self) -> None:
        """Ranges and literals can be mixed."""
        assert parse_pool_expr("1,3,5-7") == ["1", "3", "5", "6", "7"]

    def test_whitespace_stripped(self) -> None:
        """Whitespace around items is ignored."""
        assert parse_pool_expr(" a , 1-2 ") == ["a", "1", "2"]

    def test_descending_range(self) -> None:
        """A descending range counts down."""
        assert parse_pool_expr("3-1") == ["3", "2", "1"]

    def test_non_numeric_dash_is_literal(self) -> None:
        """Dashes outside numeric ranges stay literal."""
        assert parse_pool_expr("low-high,x") == ["low-high", "x"]

    def test_empty_item_raises(self) -> None:
        """Empty items are rejected."""
        with pytest.raises(ValueError, match="Empty item"):
            parse_pool_expr("a,,b")


class TestExpandNamePatterns:
    """Tests for expand_name_patterns."""

    def test_no_brackets(self) -> None:
        """Names without brackets pass through."""
        assert expand_name_patterns("plain") == ["plain"]

    def test_single_bracket(self) -> None:
        """One bracket expands to one name per value."""
        assert expand_name_patterns("fa[1-3]") == ["fa1", "fa2", "fa3"]

    def test_multiple_brackets_cartesian(self) -> None:
        """Multiple brackets combine with the last bracket fastest."""
        assert expand_name_patterns("fa[1-2]_plane[5-6]") == [
            "fa1_plane5",
            "fa1_plane6",
            "fa2_plane5",
            "fa2_plane6",
        ]

    def test_adjacent_brackets(self) -> None:
        """Brackets with no literal text between them."""
        assert expand_name_patterns("[a,b][0-1]") == ["a0", "a1", "b0", "b1"]

    def test_trailing_text_kept(self) -> None:
        """Text after the last bracket is preserved."""
        assert expand_name_patterns("dc[a,b]_power") == ["dca_power", "dcb_power"]

    def test_cardinality(self) -> None:
        """Count is the product of bracket pool sizes."""
        assert len(expand_name_patterns("s[1-4]r[1-3]p[a,b]")) == 24
