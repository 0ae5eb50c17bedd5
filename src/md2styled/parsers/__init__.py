#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Parsers that produce the md2styled node tree."""

from md2styled.parsers.base import BaseParser
from md2styled.parsers.markdown import MarkdownToAstConverter, markdown_to_ast

__all__ = ["BaseParser", "MarkdownToAstConverter", "markdown_to_ast"]
