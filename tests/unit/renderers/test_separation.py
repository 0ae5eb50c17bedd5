"""Unit tests for block separation rules."""

import pytest

from md2styled.renderers._separation import trailing_breaks

ALL_KINDS = ["paragraph", "heading", "code_block", "block_quote", "list_item", "unordered_list", "ordered_list"]


@pytest.mark.unit
class TestTrailingBreaks:
    """Tests for the line breaks emitted after each block kind."""

    @pytest.mark.parametrize("kind", ALL_KINDS)
    @pytest.mark.parametrize("in_list", [False, True])
    def test_last_child_ends_flush(self, kind, in_list):
        assert trailing_breaks(kind, has_successor=False, in_list=in_list) == ""

    @pytest.mark.parametrize(
        "kind,expected",
        [
            ("paragraph", "\n\n"),
            ("heading", "\n\n"),
            ("code_block", "\n"),
            ("block_quote", "\n\n"),
            ("list_item", "\n"),
            ("unordered_list", "\n\n"),
            ("ordered_list", "\n\n"),
        ],
    )
    def test_top_level(self, kind, expected):
        assert trailing_breaks(kind, has_successor=True, in_list=False) == expected

    @pytest.mark.parametrize(
        "kind,expected",
        [
            ("paragraph", "\n"),
            ("heading", "\n\n"),
            ("code_block", "\n"),
            ("block_quote", "\n\n"),
            ("list_item", "\n"),
            ("unordered_list", "\n\n"),
            ("ordered_list", "\n"),
        ],
    )
    def test_inside_list(self, kind, expected):
        assert trailing_breaks(kind, has_successor=True, in_list=True) == expected

    def test_nested_unordered_and_ordered_lists_differ(self):
        unordered = trailing_breaks("unordered_list", has_successor=True, in_list=True)
        ordered = trailing_breaks("ordered_list", has_successor=True, in_list=True)
        assert unordered == "\n\n"
        assert ordered == "\n"
