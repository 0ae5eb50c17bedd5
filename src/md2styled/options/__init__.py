#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Option dataclasses for md2styled parsers and renderers."""

from md2styled.options.base import BaseParserOptions, BaseRendererOptions, CloneFrozenMixin
from md2styled.options.markdown import MarkdownParserOptions
from md2styled.options.styled_text import StyledTextRendererOptions

__all__ = [
    "BaseParserOptions",
    "BaseRendererOptions",
    "CloneFrozenMixin",
    "MarkdownParserOptions",
    "StyledTextRendererOptions",
]
