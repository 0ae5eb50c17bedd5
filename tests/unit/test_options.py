"""Unit tests for parser and renderer option classes."""

import dataclasses

import pytest

from md2styled.options import MarkdownParserOptions, StyledTextRendererOptions


@pytest.mark.unit
class TestStyledTextRendererOptions:
    """Tests for StyledTextRendererOptions defaults and validation."""

    def test_defaults(self):
        options = StyledTextRendererOptions()
        assert options.base_font_size == 15.0
        assert options.body_font == "Helvetica"
        assert options.monospace_font == "Courier"
        assert options.bullet_glyph == "•"
        assert options.base_left_margin == 15.0
        assert options.nesting_indent == 20.0
        assert options.tab_spacing == 8.0
        assert options.honor_list_start is False

    def test_code_font_size(self):
        assert StyledTextRendererOptions().code_font_size == 14.0
        assert StyledTextRendererOptions(base_font_size=12.0, code_size_delta=2.0).code_font_size == 10.0

    def test_frozen(self):
        options = StyledTextRendererOptions()
        with pytest.raises(dataclasses.FrozenInstanceError):
            options.base_font_size = 20.0

    def test_create_updated(self):
        original = StyledTextRendererOptions()
        updated = original.create_updated(bullet_glyph="-", honor_list_start=True)
        assert updated.bullet_glyph == "-"
        assert updated.honor_list_start is True
        assert original.bullet_glyph == "•"

    def test_create_updated_validates(self):
        with pytest.raises(ValueError, match="nesting_indent"):
            StyledTextRendererOptions().create_updated(nesting_indent=-1.0)

    @pytest.mark.parametrize("size", [0, -3.0])
    def test_non_positive_base_size(self, size):
        with pytest.raises(ValueError, match="base_font_size"):
            StyledTextRendererOptions(base_font_size=size)

    @pytest.mark.parametrize("name", ["base_left_margin", "nesting_indent", "tab_spacing"])
    def test_negative_layout_numbers(self, name):
        with pytest.raises(ValueError, match=name):
            StyledTextRendererOptions(**{name: -0.5})

    def test_zero_layout_numbers_allowed(self):
        options = StyledTextRendererOptions(base_left_margin=0.0, nesting_indent=0.0, tab_spacing=0.0)
        assert options.nesting_indent == 0.0

    def test_empty_bullet_glyph(self):
        with pytest.raises(ValueError, match="bullet_glyph"):
            StyledTextRendererOptions(bullet_glyph="")

    def test_code_size_must_stay_positive(self):
        with pytest.raises(ValueError, match="code_size_delta"):
            StyledTextRendererOptions(base_font_size=10.0, code_size_delta=10.0)


@pytest.mark.unit
class TestMarkdownParserOptions:
    """Tests for MarkdownParserOptions."""

    def test_defaults(self):
        assert MarkdownParserOptions().parse_strikethrough is True
        assert MarkdownParserOptions().parse_tables is True

    def test_create_updated(self):
        assert MarkdownParserOptions().create_updated(parse_strikethrough=False).parse_strikethrough is False
