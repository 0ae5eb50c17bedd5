#  Copyright (c) 2025 Tom Villani, Ph.D.

# md2styled/options/styled_text.py
"""Configuration options for rendering AST documents to styled text.

The defaults reproduce the classic attributed-string look: 15 pt Helvetica
body text, Courier code one point smaller, list markers in a right-aligned
column starting 15 pt from the left edge and moving 20 pt per nesting level.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from md2styled.constants import (
    DEFAULT_BASE_LEFT_MARGIN,
    DEFAULT_BODY_FONT,
    DEFAULT_BULLET_GLYPH,
    DEFAULT_CODE_SIZE_DELTA,
    DEFAULT_MONOSPACE_FONT,
    DEFAULT_NESTING_INDENT,
    DEFAULT_NUMERAL_FONT,
    DEFAULT_TAB_SPACING,
)
from md2styled.options.base import BaseRendererOptions


@dataclass(frozen=True)
class StyledTextRendererOptions(BaseRendererOptions):
    """Configuration options for ``StyledTextRenderer``.

    Parameters
    ----------
    body_font : str, default "Helvetica"
        Font family for body text, line breaks and bullet markers
    monospace_font : str, default "Courier"
        Font family for inline code and code blocks
    numeral_font : str, default "Courier"
        Font family with fixed-width digits, used for ordered-list numerals
    bullet_glyph : str, default "•"
        Marker drawn before unordered list items
    base_left_margin : float, default 15.0
        Left offset of top-level list markers and block-quote text
    nesting_indent : float, default 20.0
        Extra offset added for each level of list or quote nesting
    tab_spacing : float, default 8.0
        Gap between the marker column and the item text
    code_size_delta : float, default 1.0
        How many points smaller code text is than body text
    honor_list_start : bool, default False
        Number ordered lists from the source's start value instead of 1

    """

    body_font: str = field(
        default=DEFAULT_BODY_FONT,
        metadata={"help": "Font family for body text", "importance": "core"},
    )
    monospace_font: str = field(
        default=DEFAULT_MONOSPACE_FONT,
        metadata={"help": "Font family for inline code and code blocks", "importance": "core"},
    )
    numeral_font: str = field(
        default=DEFAULT_NUMERAL_FONT,
        metadata={"help": "Font family used for ordered-list numerals", "importance": "advanced"},
    )
    bullet_glyph: str = field(
        default=DEFAULT_BULLET_GLYPH,
        metadata={"help": "Marker for unordered list items", "importance": "core"},
    )
    base_left_margin: float = field(
        default=DEFAULT_BASE_LEFT_MARGIN,
        metadata={"help": "Left offset of top-level list markers and quotes", "type": float, "importance": "advanced"},
    )
    nesting_indent: float = field(
        default=DEFAULT_NESTING_INDENT,
        metadata={"help": "Offset added per nesting level", "type": float, "importance": "advanced"},
    )
    tab_spacing: float = field(
        default=DEFAULT_TAB_SPACING,
        metadata={"help": "Gap between marker column and item text", "type": float, "importance": "advanced"},
    )
    code_size_delta: float = field(
        default=DEFAULT_CODE_SIZE_DELTA,
        metadata={"help": "Points subtracted from body size for code", "type": float, "importance": "advanced"},
    )
    honor_list_start: bool = field(
        default=False,
        metadata={"help": "Number ordered lists from their start value", "importance": "core"},
    )

    def __post_init__(self) -> None:
        """Validate layout numbers.

        Raises
        ------
        ValueError
            If a margin, indent or spacing is negative, the glyph is empty,
            or code text would have a non-positive size.

        """
        super().__post_init__()

        for name in ("base_left_margin", "nesting_indent", "tab_spacing"):
            value = getattr(self, name)
            if value < 0:
                raise ValueError(f"{name} must be non-negative, got {value}")

        if not self.bullet_glyph:
            raise ValueError("bullet_glyph must not be empty")

        if self.base_font_size - self.code_size_delta <= 0:
            raise ValueError(
                f"code_size_delta ({self.code_size_delta}) leaves no positive code size "
                f"for base_font_size {self.base_font_size}"
            )

    @property
    def code_font_size(self) -> float:
        return self.base_font_size - self.code_size_delta
