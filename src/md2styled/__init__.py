#  Copyright (c) 2025 Tom Villani, Ph.D.
"""md2styled - Markdown to styled rich text.

md2styled turns a parsed Markdown document into a ``StyledText`` value: an
ordered sequence of text runs, each with a font, a foreground color category,
optional strikethrough, an optional link target and, for indented lines, a
paragraph layout with tab stops. Any rich-text surface (a PDF canvas, a GUI
text widget, an RTF writer) can draw the result run by run.

Key Features
------------
- Tree-in, fragment-out conversion with no mutable shared state
- Nested lists with right-aligned marker columns and per-level indentation
- Block quotes recolored muted with a tab-stop indent
- Text widths measured with ReportLab's standard font metrics
- Optional mistune-based Markdown parser front end

Examples
--------
Convert Markdown text directly (requires ``md2styled[markdown]``):

    >>> from md2styled import markdown_to_styled_text
    >>> styled = markdown_to_styled_text("Hello **world**")
    >>> [run.text for run in styled]
    ['Hello ', 'world']

Render a hand-built tree:

    >>> from md2styled import to_styled_text
    >>> from md2styled.ast import Document, Heading, Text
    >>> styled = to_styled_text(Document(children=[Heading(level=1, content=[Text(content="Title")])]))
    >>> styled.runs[0].attributes.font.size
    27.0

"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import IO, Union

__version__ = "1.0.0"

from md2styled.ast import Document
from md2styled.exceptions import (
    DependencyError,
    InvalidOptionsError,
    Md2StyledError,
    ParsingError,
    RenderingError,
    ValidationError,
)
from md2styled.options import BaseParserOptions, BaseRendererOptions, MarkdownParserOptions, StyledTextRendererOptions
from md2styled.parsers import MarkdownToAstConverter, markdown_to_ast
from md2styled.renderers import StyledTextRenderer
from md2styled.styled import Font, ParagraphLayout, Run, StyledText, TabStop, TextAttributes, TextMeasurer

logger = logging.getLogger(__name__)


def to_styled_text(
    doc: Document,
    options: StyledTextRendererOptions | None = None,
    measurer: TextMeasurer | None = None,
) -> StyledText:
    """Convert a Markdown node tree into styled text.

    Parameters
    ----------
    doc : Document
        Root of the tree to convert
    options : StyledTextRendererOptions or None, default None
        Fonts, sizes and layout numbers. Defaults are used when None.
    measurer : TextMeasurer or None, default None
        Width measurer for list markers. ReportLab metrics are used when None.

    Returns
    -------
    StyledText
        The converted fragment. Converting the same tree twice gives equal results.

    """
    return StyledTextRenderer(options, measurer=measurer).render(doc)


def markdown_to_styled_text(
    source: Union[str, Path, IO[bytes], IO[str], bytes],
    parser_options: MarkdownParserOptions | None = None,
    renderer_options: StyledTextRendererOptions | None = None,
) -> StyledText:
    """Parse Markdown and convert it to styled text in one step.

    Parameters
    ----------
    source : str, Path, IO or bytes
        Markdown text, or a file holding it
    parser_options : MarkdownParserOptions or None, default None
        Options for the mistune front end
    renderer_options : StyledTextRendererOptions or None, default None
        Options for the styled-text renderer

    Returns
    -------
    StyledText
        The converted fragment

    Raises
    ------
    DependencyError
        If mistune is not installed
    ParsingError
        If the source cannot be read or tokenized

    """
    doc = MarkdownToAstConverter(parser_options).parse(source)
    logger.debug("Parsed Markdown into %d top-level blocks", len(doc.children))
    return to_styled_text(doc, renderer_options)


__all__ = [
    "__version__",
    "markdown_to_styled_text",
    "to_styled_text",
    "markdown_to_ast",
    # Core types
    "Document",
    "Font",
    "ParagraphLayout",
    "Run",
    "StyledText",
    "TabStop",
    "TextAttributes",
    "TextMeasurer",
    # Parsers and renderers
    "MarkdownToAstConverter",
    "StyledTextRenderer",
    # Options
    "BaseParserOptions",
    "BaseRendererOptions",
    "MarkdownParserOptions",
    "StyledTextRendererOptions",
    # Exceptions
    "DependencyError",
    "InvalidOptionsError",
    "Md2StyledError",
    "ParsingError",
    "RenderingError",
    "ValidationError",
]
