#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/md2styled/styled/__init__.py
"""Styled-text output model.

- attributes: Font, TabStop, ParagraphLayout and the per-run TextAttributes
- fragment: Run and StyledText with concatenation
- traits: functions that add one trait to every run of a fragment
- layout: indentation, tab-stop and marker-column arithmetic

"""

from __future__ import annotations

from md2styled.styled.attributes import Font, ParagraphLayout, TabStop, TextAttributes
from md2styled.styled.fragment import Run, StyledText, concat, empty, insert_at_start, single_run
from md2styled.styled.layout import (
    ListColumns,
    ReportLabTextMeasurer,
    TextMeasurer,
    bullet_column_width,
    list_columns,
    list_indent,
    list_item_layout,
    numeral_column_width,
    quote_indent,
    quote_layout,
)
from md2styled.styled.traits import (
    apply_bold,
    apply_color,
    apply_heading,
    apply_italic,
    apply_link,
    apply_strikethrough,
    heading_point_size,
)

__all__ = [
    "Font",
    "ListColumns",
    "ParagraphLayout",
    "ReportLabTextMeasurer",
    "Run",
    "StyledText",
    "TabStop",
    "TextAttributes",
    "TextMeasurer",
    "apply_bold",
    "apply_color",
    "apply_heading",
    "apply_italic",
    "apply_link",
    "apply_strikethrough",
    "bullet_column_width",
    "concat",
    "empty",
    "heading_point_size",
    "insert_at_start",
    "list_columns",
    "list_indent",
    "list_item_layout",
    "numeral_column_width",
    "quote_indent",
    "quote_layout",
    "single_run",
]
