#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/md2styled/parsers/markdown.py
"""Markdown to AST converter.

This module converts Markdown text into the md2styled node tree using the
mistune parser in AST mode. Only the node kinds the styled-text renderer
understands are produced. Pipe tables keep their cell text as a single
paragraph, one line per row. Tokens that carry no text for styled output
(thematic breaks, raw HTML) are dropped with a DEBUG log line.

"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import IO, Any, Union

from md2styled.ast import (
    BlockQuote,
    Code,
    CodeBlock,
    Document,
    Emphasis,
    Heading,
    Image,
    LineBreak,
    Link,
    List,
    ListItem,
    Node,
    Paragraph,
    Strikethrough,
    Strong,
    Text,
)
from md2styled.constants import DEPS_MARKDOWN, MAX_HEADING_LEVEL, MIN_HEADING_LEVEL
from md2styled.exceptions import ParsingError
from md2styled.options.markdown import MarkdownParserOptions
from md2styled.parsers.base import BaseParser
from md2styled.utils.decorators import requires_dependencies

logger = logging.getLogger(__name__)


class MarkdownToAstConverter(BaseParser):
    r"""Convert Markdown to AST representation.

    Parameters
    ----------
    options : MarkdownParserOptions or None, default = None
        Parser configuration options

    Examples
    --------
        >>> converter = MarkdownToAstConverter()
        >>> doc = converter.parse("# Hello\n\nThis is **bold**.")
        >>> len(doc.children)
        2

    """

    def __init__(self, options: MarkdownParserOptions | None = None):
        """Initialize the Markdown parser with options."""
        BaseParser._validate_options_type(options, MarkdownParserOptions, "markdown")
        options = options or MarkdownParserOptions()
        super().__init__(options)
        self.options: MarkdownParserOptions = options

    @requires_dependencies("markdown", DEPS_MARKDOWN)
    def parse(self, input_data: Union[str, Path, IO[bytes], IO[str], bytes]) -> Document:
        """Parse Markdown input into an AST Document.

        Parameters
        ----------
        input_data : str, Path, IO, or bytes
            Markdown text, or a file holding it

        Returns
        -------
        Document
            AST document node

        Raises
        ------
        ParsingError
            If the input cannot be read or mistune fails on it

        """
        markdown_content = self._load_text_content(input_data)

        import mistune

        plugins = []
        if self.options.parse_strikethrough:
            plugins.append("strikethrough")
        if self.options.parse_tables:
            plugins.append("table")

        # renderer=None makes mistune return its token tree
        markdown = mistune.create_markdown(plugins=plugins, renderer=None)

        try:
            tokens, _state = markdown.parse(markdown_content)
        except Exception as exc:
            raise ParsingError(
                f"Failed to tokenize Markdown: {exc!r}", parsing_stage="tokenizing", original_error=exc
            ) from exc

        children = self._process_tokens(tokens) if isinstance(tokens, list) else []
        return Document(children=children)

    # ------------------------------------------------------------------
    # Block tokens
    # ------------------------------------------------------------------

    def _process_tokens(self, tokens: list[dict[str, Any]]) -> list[Node]:
        """Process a list of block tokens into AST nodes."""
        nodes: list[Node] = []
        for token in tokens:
            node = self._process_token(token)
            if node is not None:
                nodes.append(node)
        return nodes

    def _process_token(self, token: dict[str, Any]) -> Node | None:
        """Process a single block token into an AST node, or None to drop it."""
        token_type = token.get("type", "")

        if token_type == "heading":
            return self._process_heading(token)
        elif token_type in ("paragraph", "block_text"):
            # block_text is used for tight list items - treat like paragraph
            return Paragraph(content=self._process_inline_tokens(token.get("children", [])))
        elif token_type == "block_code":
            return self._process_code_block(token)
        elif token_type == "block_quote":
            return BlockQuote(children=self._process_tokens(token.get("children", [])))
        elif token_type == "list":
            return self._process_list(token)
        elif token_type == "table":
            return self._process_table(token)
        elif token_type == "blank_line":
            return None

        logger.debug("Dropping unsupported Markdown block token: %s", token_type)
        return None

    def _process_heading(self, token: dict[str, Any]) -> Heading:
        attrs = token.get("attrs", {})
        level = attrs.get("level", 1) if isinstance(attrs, dict) else 1
        if not isinstance(level, int):
            level = MIN_HEADING_LEVEL
        level = max(MIN_HEADING_LEVEL, min(MAX_HEADING_LEVEL, level))

        children = token.get("children", [])
        content = self._process_inline_tokens(children) if isinstance(children, list) else []
        return Heading(level=level, content=content)

    def _process_code_block(self, token: dict[str, Any]) -> CodeBlock:
        return CodeBlock(content=token.get("raw", ""))

    def _process_list(self, token: dict[str, Any]) -> List:
        """Process list token.

        Parameters
        ----------
        token : dict
            List token with 'children' and 'attrs' (ordered, start)

        Returns
        -------
        List
            List AST node

        """
        attrs = token.get("attrs", {})
        if not isinstance(attrs, dict):
            attrs = {}

        ordered = bool(attrs.get("ordered", False))
        start = attrs.get("start", 1)
        if not isinstance(start, int):
            start = 1

        children = token.get("children", [])
        if not isinstance(children, list):
            children = []

        items = [
            ListItem(children=self._process_tokens(child.get("children", [])))
            for child in children
            if isinstance(child, dict) and child.get("type") == "list_item"
        ]
        return List(ordered=ordered, items=items, start=start)

    def _process_table(self, token: dict[str, Any]) -> Paragraph:
        """Process table token into a paragraph of its cell text.

        Cells in a row are separated by a tab and rows by a hard line break,
        header row first.

        Parameters
        ----------
        token : dict
            Table token with 'children' (table_head, table_body)

        Returns
        -------
        Paragraph
            Paragraph holding every cell's inline content

        """
        rows: list[list[dict[str, Any]]] = []
        for section in token.get("children", []):
            section_type = section.get("type", "")
            if section_type == "table_head":
                # Header cells are direct children of table_head
                rows.append(section.get("children", []))
            elif section_type == "table_body":
                rows.extend(row.get("children", []) for row in section.get("children", []))

        content: list[Node] = []
        for row_index, cells in enumerate(rows):
            if row_index > 0:
                content.append(LineBreak())
            for cell_index, cell in enumerate(cells):
                if cell_index > 0:
                    content.append(Text(content="\t"))
                content.extend(self._process_inline_tokens(cell.get("children", [])))
        return Paragraph(content=content)

    # ------------------------------------------------------------------
    # Inline tokens
    # ------------------------------------------------------------------

    def _process_inline_tokens(self, tokens: list[dict[str, Any]]) -> list[Node]:
        """Process inline tokens into inline AST nodes."""
        nodes: list[Node] = []
        for token in tokens:
            node = self._process_inline_token(token)
            if node is not None:
                nodes.append(node)
        return nodes

    def _process_inline_token(self, token: dict[str, Any]) -> Node | None:
        token_type = token.get("type", "")
        children = token.get("children", [])
        if not isinstance(children, list):
            children = []

        if token_type == "text":
            raw = token.get("raw", "")
            # mistune emits zero-length text tokens around nested emphasis
            return Text(content=raw) if raw else None
        elif token_type == "emphasis":
            return Emphasis(content=self._process_inline_tokens(children))
        elif token_type == "strong":
            return Strong(content=self._process_inline_tokens(children))
        elif token_type == "strikethrough":
            return Strikethrough(content=self._process_inline_tokens(children))
        elif token_type == "codespan":
            return Code(content=token.get("raw", ""))
        elif token_type == "link":
            attrs = token.get("attrs", {})
            if not isinstance(attrs, dict):
                attrs = {}
            return Link(url=attrs.get("url"), content=self._process_inline_tokens(children))
        elif token_type == "image":
            # Alt text is in children, not attrs
            alt_text = "".join(
                child.get("raw", "") for child in children if isinstance(child, dict) and child.get("type") == "text"
            )
            return Image(alt_text=alt_text)
        elif token_type == "softbreak":
            return LineBreak(soft=True)
        elif token_type == "linebreak":
            return LineBreak(soft=False)

        logger.debug("Dropping unsupported Markdown inline token: %s", token_type)
        return None


def markdown_to_ast(markdown_content: str, options: MarkdownParserOptions | None = None) -> Document:
    r"""Convert a Markdown string to an AST.

    Parameters
    ----------
    markdown_content : str
        Markdown text to parse
    options : MarkdownParserOptions or None, default = None
        Parser configuration

    Returns
    -------
    Document
        AST document node

    Examples
    --------
    >>> doc = markdown_to_ast("# Hello\n\nWorld")
    >>> len(doc.children)
    2

    """
    return MarkdownToAstConverter(options).parse(markdown_content)
