#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/md2styled/ast/visitors.py
"""Visitor pattern implementation for AST traversal.

This module provides the visitor base class used to walk the Markdown node
tree. Visitors keep per-kind conversion logic (such as the styled-text
renderer) separate from the node classes themselves.

"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any

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
)


class NodeVisitor(ABC):
    """Abstract base class for AST node visitors.

    Subclasses implement a visit_* method for each node kind. Each node's
    ``accept`` dispatches to the matching method, so a visitor is invoked with
    ``document.accept(visitor)``.

    Examples
    --------
    Visitor that collects plain text:

        >>> class TextCollector(NodeVisitor):
        ...     def visit_text(self, node):
        ...         return node.content
        ...     def generic_visit(self, node):
        ...         return "".join(child.accept(self) for child in get_node_children(node))

    """

    @abstractmethod
    def visit_document(self, node: Document) -> Any:
        """Visit a Document node.

        Parameters
        ----------
        node : Document
            The document node to visit

        Returns
        -------
        Any
            Result of processing this node

        """
        pass

    @abstractmethod
    def visit_heading(self, node: Heading) -> Any:
        """Visit a Heading node."""
        pass

    @abstractmethod
    def visit_paragraph(self, node: Paragraph) -> Any:
        """Visit a Paragraph node."""
        pass

    @abstractmethod
    def visit_code_block(self, node: CodeBlock) -> Any:
        """Visit a CodeBlock node."""
        pass

    @abstractmethod
    def visit_block_quote(self, node: BlockQuote) -> Any:
        """Visit a BlockQuote node."""
        pass

    @abstractmethod
    def visit_list(self, node: List) -> Any:
        """Visit a List node (ordered or unordered)."""
        pass

    @abstractmethod
    def visit_list_item(self, node: ListItem) -> Any:
        """Visit a ListItem node."""
        pass

    @abstractmethod
    def visit_text(self, node: Text) -> Any:
        """Visit a Text node."""
        pass

    @abstractmethod
    def visit_emphasis(self, node: Emphasis) -> Any:
        """Visit an Emphasis node."""
        pass

    @abstractmethod
    def visit_strong(self, node: Strong) -> Any:
        """Visit a Strong node."""
        pass

    @abstractmethod
    def visit_strikethrough(self, node: Strikethrough) -> Any:
        """Visit a Strikethrough node."""
        pass

    @abstractmethod
    def visit_code(self, node: Code) -> Any:
        """Visit an inline Code node."""
        pass

    @abstractmethod
    def visit_link(self, node: Link) -> Any:
        """Visit a Link node."""
        pass

    def visit_image(self, node: Image) -> Any:
        """Visit an Image node. Defaults to ``generic_visit``."""
        return self.generic_visit(node)

    def visit_line_break(self, node: LineBreak) -> Any:
        """Visit a LineBreak node. Defaults to ``generic_visit``."""
        return self.generic_visit(node)

    def generic_visit(self, node: Node) -> Any:
        """Fallback visitor for unhandled node types.

        The default implementation does nothing but can be overridden.

        Parameters
        ----------
        node : Node
            The node to visit

        Returns
        -------
        Any
            Result of processing (default: None)

        """
        return None
