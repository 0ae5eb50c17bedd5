#  Copyright (c) 2025 Tom Villani, Ph.D.

# md2styled/options/markdown.py
"""Configuration options for parsing Markdown into the node tree."""

from __future__ import annotations

from dataclasses import dataclass, field

from md2styled.options.base import BaseParserOptions


@dataclass(frozen=True)
class MarkdownParserOptions(BaseParserOptions):
    """Configuration options for ``MarkdownToAstConverter``.

    Parameters
    ----------
    parse_strikethrough : bool, default True
        Recognize GFM ``~~strikethrough~~`` spans
    parse_tables : bool, default True
        Recognize GFM pipe tables. Their cell text becomes one paragraph,
        tab-separated, one line per row. When False the table source stays
        literal paragraph text.

    """

    parse_strikethrough: bool = field(
        default=True,
        metadata={"help": "Parse ~~strikethrough~~ syntax", "importance": "core"},
    )
    parse_tables: bool = field(
        default=True,
        metadata={"help": "Parse table syntax (GFM pipe tables)", "importance": "core"},
    )
