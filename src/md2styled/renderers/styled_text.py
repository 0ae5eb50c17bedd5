#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/md2styled/renderers/styled_text.py
"""Styled-text rendering from AST.

This module provides the StyledTextRenderer class which converts a Markdown
node tree into a ``StyledText`` fragment: an ordered sequence of runs, each
carrying font, color, strikethrough, link and paragraph-layout attributes.

The renderer walks the tree depth-first, left to right. Each handler renders
its children, concatenates the results, applies its own trait (italic, bold,
heading size, link color, ...) and finally appends the line breaks its block
kind calls for. Nesting depth and list context are passed down during the
walk instead of being recomputed from ancestors.

"""

from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from typing import Sequence
from urllib.parse import urlsplit

from md2styled.ast.nodes import (
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
    get_node_children,
)
from md2styled.ast.visitors import NodeVisitor
from md2styled.options.styled_text import StyledTextRendererOptions
from md2styled.renderers._separation import BlockKind, trailing_breaks
from md2styled.renderers.base import BaseRenderer
from md2styled.styled.attributes import Font, TextAttributes
from md2styled.styled.fragment import Run, StyledText, concat, empty, single_run
from md2styled.styled.layout import (
    ReportLabTextMeasurer,
    TextMeasurer,
    bullet_column_width,
    list_item_layout,
    numeral_column_width,
    quote_layout,
)
from md2styled.styled.traits import apply_bold, apply_color, apply_heading, apply_italic, apply_link, apply_strikethrough
from md2styled.utils.decorators import debug_timer

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class _RenderContext:
    """Where the node being rendered sits in the tree.

    ``list_depth`` and ``quote_depth`` count enclosing lists and block quotes;
    the node's own kind is not included.
    """

    list_depth: int = 0
    quote_depth: int = 0
    has_successor: bool = False

    @property
    def in_list(self) -> bool:
        return self.list_depth > 0


def resolve_link_target(url: str | None) -> str | None:
    """Return ``url`` if it can be used as a link target, otherwise None.

    Empty destinations, destinations containing whitespace or control
    characters, and strings ``urlsplit`` rejects are not navigable.
    """
    if not url:
        return None
    if any(char.isspace() or ord(char) < 0x20 or ord(char) == 0x7F for char in url):
        return None
    try:
        urlsplit(url)
    except ValueError:
        return None
    return url


class StyledTextRenderer(NodeVisitor, BaseRenderer):
    """Render AST nodes into a styled-text fragment.

    Parameters
    ----------
    options : StyledTextRendererOptions or None, default = None
        Fonts, sizes and layout numbers
    measurer : TextMeasurer or None, default = None
        Measures list-marker widths. Defaults to ``ReportLabTextMeasurer``.

    Examples
    --------
        >>> from md2styled.ast import Document, Paragraph, Strong, Text
        >>> doc = Document(children=[Paragraph(content=[Strong(content=[Text(content="Hi")])])])
        >>> styled = StyledTextRenderer().render(doc)
        >>> styled.runs[0].attributes.font.weight
        'bold'

    """

    def __init__(
        self, options: StyledTextRendererOptions | None = None, measurer: TextMeasurer | None = None
    ) -> None:
        """Initialize the renderer with options and an optional text measurer."""
        BaseRenderer._validate_options_type(options, StyledTextRendererOptions, "styled_text")
        options = options or StyledTextRendererOptions()
        BaseRenderer.__init__(self, options)
        self.options: StyledTextRendererOptions = options
        self._measurer: TextMeasurer = measurer if measurer is not None else ReportLabTextMeasurer()
        self._context = _RenderContext()

    def render(self, doc: Document) -> StyledText:
        """Render a document to a styled-text fragment.

        Each call walks the tree with its own renderer instance, so one
        renderer can serve several threads at once.
        """
        walker = self._walker()
        with debug_timer(logger, "Rendering styled text"):
            result = doc.accept(walker)
        logger.debug("Rendered %d runs", len(result))
        return result

    def _walker(self) -> StyledTextRenderer:
        """Return a renderer with the same options and measurer and a fresh context."""
        return type(self)(self.options, measurer=self._measurer)

    def render_to_string(self, doc: Document) -> str:
        """Render a document and return only its plain text."""
        return self.render(doc).plain_text

    # ------------------------------------------------------------------
    # Attribute helpers
    # ------------------------------------------------------------------

    def _body_font(self) -> Font:
        return Font.body(self.options.base_font_size, self.options.body_font)

    def _body_attributes(self) -> TextAttributes:
        return TextAttributes(font=self._body_font())

    def _code_attributes(self) -> TextAttributes:
        font = Font(family=self.options.monospace_font, size=self.options.code_font_size, monospace=True)
        return TextAttributes(font=font, color="muted")

    def _numeral_font(self) -> Font:
        return Font(family=self.options.numeral_font, size=self.options.base_font_size, monospaced_digits=True)

    def _breaks(self, kind: BlockKind) -> StyledText:
        breaks = trailing_breaks(kind, has_successor=self._context.has_successor, in_list=self._context.in_list)
        if not breaks:
            return empty()
        return single_run(breaks, self._body_attributes())

    # ------------------------------------------------------------------
    # Traversal helpers
    # ------------------------------------------------------------------

    def _visit(self, node: Node, context: _RenderContext) -> StyledText:
        saved = self._context
        self._context = context
        try:
            return node.accept(self)
        finally:
            self._context = saved

    def _render_children(self, children: Sequence[Node], context: _RenderContext | None = None) -> StyledText:
        """Render sibling nodes in order, telling each whether a sibling follows it."""
        base = context if context is not None else self._context
        last = len(children) - 1
        return concat(
            *(self._visit(child, replace(base, has_successor=index < last)) for index, child in enumerate(children))
        )

    # ------------------------------------------------------------------
    # Block nodes
    # ------------------------------------------------------------------

    def visit_document(self, node: Document) -> StyledText:
        """Render the root document; the root has no trailing breaks."""
        return self._render_children(node.children)

    def visit_paragraph(self, node: Paragraph) -> StyledText:
        return self._render_children(node.content) + self._breaks("paragraph")

    def visit_heading(self, node: Heading) -> StyledText:
        """Render a heading bold at its level's point size."""
        content = apply_heading(
            self._render_children(node.content), node.level, self.options.base_font_size, self.options.body_font
        )
        return content + self._breaks("heading")

    def visit_code_block(self, node: CodeBlock) -> StyledText:
        return single_run(node.content, self._code_attributes()) + self._breaks("code_block")

    def visit_block_quote(self, node: BlockQuote) -> StyledText:
        """Render a block quote.

        Every child starts with a tab run carrying the quote's layout and is
        then recolored muted, tab run included.
        """
        depth = self._context.quote_depth
        leading_tab = Run(
            "\t",
            TextAttributes(
                font=self._body_font(),
                paragraph=quote_layout(depth, self.options.base_left_margin, self.options.nesting_indent),
            ),
        )
        inner = replace(self._context, quote_depth=depth + 1)
        last = len(node.children) - 1

        parts = []
        for index, child in enumerate(node.children):
            rendered = self._visit(child, replace(inner, has_successor=index < last))
            parts.append(apply_color(rendered.insert_at_start(leading_tab), "muted"))

        return concat(*parts) + self._breaks("block_quote")

    def visit_list(self, node: List) -> StyledText:
        if node.ordered:
            return self._render_ordered_list(node)
        return self._render_unordered_list(node)

    def _render_list_items(self, node: List, markers: Sequence[Run]) -> StyledText:
        inner = replace(self._context, list_depth=self._context.list_depth + 1)
        last = len(node.items) - 1

        parts = []
        for index, (item, marker) in enumerate(zip(node.items, markers)):
            rendered = self._visit(item, replace(inner, has_successor=index < last))
            parts.append(rendered.insert_at_start(marker))
        return concat(*parts)

    def _render_unordered_list(self, node: List) -> StyledText:
        if not node.items:
            return self._breaks("unordered_list")

        depth = self._context.list_depth
        glyph = self.options.bullet_glyph
        body_font = self._body_font()
        layout = list_item_layout(
            depth,
            bullet_column_width(self._measurer, glyph, body_font),
            self.options.base_left_margin,
            self.options.nesting_indent,
            self.options.tab_spacing,
        )
        marker = Run(f"\t{glyph}\t", TextAttributes(font=body_font, paragraph=layout))

        items = self._render_list_items(node, [marker] * len(node.items))
        return items + self._breaks("unordered_list")

    def _render_ordered_list(self, node: List) -> StyledText:
        if not node.items:
            return self._breaks("ordered_list")

        depth = self._context.list_depth
        first_number = node.start if self.options.honor_list_start else 1
        numbers = [first_number + offset for offset in range(len(node.items))]

        numeral_font = self._numeral_font()
        # All items share the column width of the last (widest) label
        layout = list_item_layout(
            depth,
            numeral_column_width(self._measurer, numbers[-1], numeral_font),
            self.options.base_left_margin,
            self.options.nesting_indent,
            self.options.tab_spacing,
        )
        attributes = TextAttributes(font=numeral_font, paragraph=layout)
        markers = [Run(f"\t{number}.\t", attributes) for number in numbers]

        return self._render_list_items(node, markers) + self._breaks("ordered_list")

    def visit_list_item(self, node: ListItem) -> StyledText:
        return self._render_children(node.children) + self._breaks("list_item")

    # ------------------------------------------------------------------
    # Inline nodes
    # ------------------------------------------------------------------

    def visit_text(self, node: Text) -> StyledText:
        return single_run(node.content, self._body_attributes())

    def visit_emphasis(self, node: Emphasis) -> StyledText:
        return apply_italic(self._render_children(node.content), self.options.base_font_size, self.options.body_font)

    def visit_strong(self, node: Strong) -> StyledText:
        return apply_bold(self._render_children(node.content), self.options.base_font_size, self.options.body_font)

    def visit_strikethrough(self, node: Strikethrough) -> StyledText:
        return apply_strikethrough(self._render_children(node.content))

    def visit_code(self, node: Code) -> StyledText:
        return single_run(node.content, self._code_attributes())

    def visit_link(self, node: Link) -> StyledText:
        """Render link text in the link color, navigable when the destination parses."""
        target = resolve_link_target(node.url)
        if target is None and node.url:
            logger.debug("Link destination %r is not a valid URL; rendering link text without a target", node.url)
        return apply_link(self._render_children(node.content), target)

    def visit_image(self, node: Image) -> StyledText:
        if not node.alt_text:
            return empty()
        return single_run(node.alt_text, self._body_attributes())

    def visit_line_break(self, node: LineBreak) -> StyledText:
        return single_run(" " if node.soft else "\n", self._body_attributes())

    def generic_visit(self, node: Node) -> StyledText:
        """Render unknown node kinds by concatenating their children."""
        logger.debug("No styled-text handler for %s, rendering its children", type(node).__name__)
        return self._render_children(get_node_children(node))
