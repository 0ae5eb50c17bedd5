"""Unit tests for trait application on styled-text fragments."""

import pytest
from hypothesis import given
from hypothesis import strategies as st

from md2styled.styled import (
    Font,
    Run,
    StyledText,
    TextAttributes,
    apply_bold,
    apply_color,
    apply_heading,
    apply_italic,
    apply_link,
    apply_strikethrough,
    heading_point_size,
    single_run,
)

BODY = Font(family="Helvetica", size=15.0)

attribute_sets = st.builds(
    TextAttributes,
    font=st.one_of(
        st.none(),
        st.builds(
            Font,
            family=st.just("Helvetica"),
            size=st.sampled_from([14.0, 15.0, 27.0]),
            weight=st.sampled_from(["normal", "bold"]),
            slant=st.sampled_from(["normal", "italic"]),
        ),
    ),
    color=st.sampled_from([None, "default", "muted", "link"]),
    strikethrough=st.booleans(),
    link=st.sampled_from([None, "https://example.com"]),
)
fragments = st.lists(st.builds(Run, st.text(max_size=5), attribute_sets), max_size=4).map(
    lambda items: StyledText(tuple(items))
)


@pytest.mark.unit
class TestFontTraits:
    """Bold and italic add to a run's font without clearing other traits."""

    @given(fragments)
    def test_bold_and_italic_commute(self, fragment):
        assert apply_bold(apply_italic(fragment)) == apply_italic(apply_bold(fragment))

    @given(fragments)
    def test_traits_are_idempotent(self, fragment):
        once = apply_bold(fragment)
        assert apply_bold(once) == once

    @given(fragments)
    def test_bold_preserves_other_attributes(self, fragment):
        result = apply_bold(fragment)
        for before, after in zip(fragment, result):
            assert after.text == before.text
            assert after.attributes.font.bold
            assert after.attributes.color == before.attributes.color
            assert after.attributes.strikethrough == before.attributes.strikethrough
            assert after.attributes.link == before.attributes.link
            if before.attributes.font is not None:
                assert after.attributes.font.slant == before.attributes.font.slant
                assert after.attributes.font.size == before.attributes.font.size

    def test_bold_on_italic_muted_run(self):
        fragment = single_run("x", TextAttributes(font=Font(family="Helvetica", size=15.0, slant="italic"), color="muted"))
        result = apply_bold(fragment)
        attrs = result.runs[0].attributes
        assert attrs.font.bold
        assert attrs.font.italic
        assert attrs.color == "muted"

    def test_run_without_font_gets_body_font(self):
        result = apply_italic(single_run("x"), base_size=12.0, family="Times-Roman")
        assert result.runs[0].attributes.font == Font(family="Times-Roman", size=12.0, slant="italic")

    def test_empty_fragment_stays_empty(self):
        assert len(apply_bold(StyledText())) == 0


@pytest.mark.unit
class TestHeadingSize:
    """Tests for heading point sizes."""

    @pytest.mark.parametrize("level,expected", [(1, 27.0), (2, 25.0), (3, 23.0), (4, 21.0), (5, 19.0), (6, 17.0)])
    def test_default_sizes(self, level, expected):
        assert heading_point_size(level) == expected

    def test_sizes_decrease_with_level(self):
        sizes = [heading_point_size(level) for level in range(1, 7)]
        assert sizes == sorted(sizes, reverse=True)
        assert len(set(sizes)) == 6

    def test_every_heading_is_larger_than_body(self):
        assert all(heading_point_size(level, 15.0) > 15.0 for level in range(1, 7))

    def test_levels_are_clamped(self):
        assert heading_point_size(0) == heading_point_size(1)
        assert heading_point_size(9) == heading_point_size(6)

    def test_scales_with_base_size(self):
        assert heading_point_size(1, base_size=10.0) == 22.0

    def test_apply_heading_replaces_size(self):
        fragment = single_run("Title", TextAttributes(font=Font(family="Courier", size=14.0, slant="italic")))
        font = apply_heading(fragment, 2).runs[0].attributes.font
        assert font.size == 25.0
        assert font.bold
        assert font.italic
        assert font.family == "Courier"


@pytest.mark.unit
class TestColorAndDecorationTraits:
    """Tests for strikethrough, color and link traits."""

    def test_strikethrough_keeps_font(self):
        fragment = single_run("gone", TextAttributes(font=BODY))
        attrs = apply_strikethrough(fragment).runs[0].attributes
        assert attrs.strikethrough
        assert attrs.font == BODY

    def test_color_replaces_previous_color(self):
        fragment = single_run("x", TextAttributes(color="link"))
        assert apply_color(fragment, "muted").runs[0].attributes.color == "muted"

    def test_link_with_target(self):
        attrs = apply_link(single_run("site", TextAttributes(font=BODY)), "https://example.com").runs[0].attributes
        assert attrs.color == "link"
        assert attrs.link == "https://example.com"
        assert attrs.font == BODY

    def test_link_without_target_only_colors(self):
        attrs = apply_link(single_run("site")).runs[0].attributes
        assert attrs.color == "link"
        assert attrs.link is None
