#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/md2styled/ast/__init__.py
"""Markdown node tree consumed by the styled-text renderer.

Examples
--------
    >>> from md2styled.ast import Document, Heading, Paragraph, Text
    >>> doc = Document(children=[
    ...     Heading(level=1, content=[Text(content="Title")]),
    ...     Paragraph(content=[Text(content="Hello world")])
    ... ])

"""

from __future__ import annotations

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

__all__ = [
    "BlockQuote",
    "Code",
    "CodeBlock",
    "Document",
    "Emphasis",
    "Heading",
    "Image",
    "LineBreak",
    "Link",
    "List",
    "ListItem",
    "Node",
    "NodeVisitor",
    "Paragraph",
    "Strikethrough",
    "Strong",
    "Text",
    "get_node_children",
]
