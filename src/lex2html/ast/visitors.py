#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/lex2html/ast/visitors.py
"""Visitor pattern implementation for document tree traversal.

Visitors keep algorithms (rendering, statistics, validation) separate from
the node classes. Each node's ``accept`` calls the matching ``visit_*``
method, so adding a node kind means adding one method here and one arm in
each concrete visitor.

"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any

from lex2html.ast.nodes import (
    CodeBlock,
    Document,
    Heading,
    HorizontalRule,
    Image,
    LineBreak,
    Link,
    List,
    ListItem,
    Node,
    Paragraph,
    Quote,
    Tab,
    Table,
    TableCell,
    TableRow,
    Text,
    UnknownNode,
    get_node_children,
)


class NodeVisitor(ABC):
    """Abstract base class for document node visitors.

    Subclasses implement one ``visit_*`` method per node kind. All visit
    methods accept a node and return Any (None for side-effect visitors,
    a value for collecting ones).

    Examples
    --------
    Counting text runs:

        >>> class TextCounter(NodeVisitor):
        ...     def __init__(self):
        ...         self.count = 0
        ...
        ...     def visit_text(self, node):
        ...         self.count += 1
        ...
        ...     # remaining visit_* methods delegate to generic_visit

    """

    def generic_visit(self, node: Node) -> Any:
        """Visit every child of ``node`` in stored order."""
        for child in get_node_children(node):
            child.accept(self)

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
    def visit_paragraph(self, node: Paragraph) -> Any:
        """Visit a Paragraph node."""
        pass

    @abstractmethod
    def visit_heading(self, node: Heading) -> Any:
        """Visit a Heading node."""
        pass

    @abstractmethod
    def visit_quote(self, node: Quote) -> Any:
        """Visit a Quote node."""
        pass

    @abstractmethod
    def visit_list(self, node: List) -> Any:
        """Visit a List node."""
        pass

    @abstractmethod
    def visit_list_item(self, node: ListItem) -> Any:
        """Visit a ListItem node."""
        pass

    @abstractmethod
    def visit_code_block(self, node: CodeBlock) -> Any:
        """Visit a CodeBlock node."""
        pass

    @abstractmethod
    def visit_horizontal_rule(self, node: HorizontalRule) -> Any:
        """Visit a HorizontalRule node."""
        pass

    @abstractmethod
    def visit_table(self, node: Table) -> Any:
        """Visit a Table node."""
        pass

    @abstractmethod
    def visit_table_row(self, node: TableRow) -> Any:
        """Visit a TableRow node."""
        pass

    @abstractmethod
    def visit_table_cell(self, node: TableCell) -> Any:
        """Visit a TableCell node."""
        pass

    @abstractmethod
    def visit_text(self, node: Text) -> Any:
        """Visit a Text node."""
        pass

    @abstractmethod
    def visit_link(self, node: Link) -> Any:
        """Visit a Link node."""
        pass

    @abstractmethod
    def visit_image(self, node: Image) -> Any:
        """Visit an Image node."""
        pass

    @abstractmethod
    def visit_line_break(self, node: LineBreak) -> Any:
        """Visit a LineBreak node."""
        pass

    @abstractmethod
    def visit_tab(self, node: Tab) -> Any:
        """Visit a Tab node."""
        pass

    def visit_unknown(self, node: UnknownNode) -> Any:
        """Visit a node of an unrecognized kind.

        The default does nothing, so visitors written before a node kind
        existed keep working on documents that contain it.

        """
        return None


__all__ = ["NodeVisitor"]
