"""Unit tests for styled-text runs and fragments."""

import functools

import pytest
from hypothesis import given
from hypothesis import strategies as st

from md2styled.styled import Font, Run, StyledText, TextAttributes, concat, empty, insert_at_start, single_run

ATTRIBUTE_SETS = [
    TextAttributes(),
    TextAttributes(font=Font(family="Helvetica", size=15.0)),
    TextAttributes(font=Font(family="Helvetica", size=15.0, weight="bold")),
    TextAttributes(color="muted", strikethrough=True),
    TextAttributes(color="link", link="https://example.com"),
]

runs = st.builds(Run, st.text(max_size=8), st.sampled_from(ATTRIBUTE_SETS))
fragments = st.lists(runs, max_size=5).map(lambda items: StyledText(tuple(items)))


@pytest.mark.unit
class TestConcatenationLaws:
    """Concatenation is associative, has an identity and preserves runs."""

    @given(fragments, fragments, fragments)
    def test_associative(self, a, b, c):
        assert (a + b) + c == a + (b + c)

    @given(fragments)
    def test_empty_is_identity(self, fragment):
        assert empty() + fragment == fragment
        assert fragment + empty() == fragment

    @given(fragments, fragments)
    def test_length_is_additive(self, a, b):
        assert len(a + b) == len(a) + len(b)

    @given(st.lists(fragments, max_size=6))
    def test_concat_matches_repeated_addition(self, parts):
        assert concat(*parts) == functools.reduce(lambda left, right: left + right, parts, empty())

    @given(fragments, fragments)
    def test_runs_are_not_merged(self, a, b):
        combined = a + b
        assert combined.runs == a.runs + b.runs


@pytest.mark.unit
class TestStyledText:
    """Tests for StyledText behavior."""

    def test_empty_fragment(self):
        fragment = empty()
        assert len(fragment) == 0
        assert not fragment
        assert fragment.plain_text == ""

    def test_single_run_defaults_to_unset_attributes(self):
        fragment = single_run("hello")
        assert fragment.runs == (Run("hello", TextAttributes()),)

    def test_plain_text_joins_runs(self):
        fragment = single_run("Hello, ") + single_run("world")
        assert fragment.plain_text == "Hello, world"

    def test_iteration_yields_runs_in_order(self):
        fragment = concat(single_run("a"), single_run("b"), single_run("c"))
        assert [run.text for run in fragment] == ["a", "b", "c"]

    def test_add_rejects_other_types(self):
        with pytest.raises(TypeError):
            single_run("a") + "b"

    def test_insert_at_start(self):
        fragment = single_run("body")
        marker = Run("\t•\t", ATTRIBUTE_SETS[1])
        result = insert_at_start(fragment, marker)
        assert result.runs[0] is marker
        assert result.plain_text == "\t•\tbody"
        # Original is untouched
        assert fragment.plain_text == "body"

    def test_insert_at_start_on_empty(self):
        result = empty().insert_at_start(Run("x"))
        assert len(result) == 1

    def test_map_attributes_touches_every_run(self):
        fragment = single_run("a", ATTRIBUTE_SETS[0]) + single_run("b", ATTRIBUTE_SETS[2])
        result = fragment.map_attributes(lambda attrs: attrs.updated(color="muted"))
        assert all(run.attributes.color == "muted" for run in result)
        assert result.runs[1].attributes.font.weight == "bold"

    def test_coalesced_merges_equal_neighbors(self):
        attrs = ATTRIBUTE_SETS[1]
        fragment = concat(single_run("a", attrs), single_run("b", attrs), single_run("c", ATTRIBUTE_SETS[3]))
        result = fragment.coalesced()
        assert [run.text for run in result] == ["ab", "c"]
        assert result.plain_text == fragment.plain_text

    def test_fragments_are_immutable(self):
        fragment = single_run("a")
        with pytest.raises(AttributeError):
            fragment.runs = ()


@pytest.mark.unit
class TestTextAttributes:
    """Tests for the attribute mapping view."""

    def test_unset_attributes_map_to_empty_dict(self):
        assert TextAttributes().as_mapping() == {}

    def test_mapping_keys(self):
        attrs = TextAttributes(
            font=Font(family="Courier", size=14.0, monospace=True),
            color="muted",
            strikethrough=True,
            link="https://example.com",
        )
        assert attrs.as_mapping() == {
            "font_family": "Courier",
            "font_weight": "normal",
            "font_slant": "normal",
            "point_size": 14.0,
            "monospace": True,
            "foreground_color": "muted",
            "strikethrough": True,
            "link": "https://example.com",
        }

    def test_font_body_defaults(self):
        font = Font.body()
        assert font == Font(family="Helvetica", size=15.0)
        assert not font.bold
        assert not font.italic
