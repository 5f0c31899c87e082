#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/lex2html/ast/nodes.py
"""Node classes for the editor document model.

This module defines the typed node tree that the rich-text editor emits as
its ``DocumentState``. Each node represents one structural or inline element
of an article body.

The node hierarchy is designed to:
- Mirror the editor's node kinds one-to-one
- Enable rendering strategies via the visitor pattern
- Keep unrecognized kinds in the tree so newer documents still load

Node Hierarchy
--------------
All nodes inherit from the base Node class and support the visitor pattern.

Block-level nodes:
    - Document, Paragraph, Heading, Quote, CodeBlock, HorizontalRule
    - List, ListItem, Table, TableRow, TableCell

Inline nodes:
    - Text, Link, Image, LineBreak, Tab

Forward compatibility:
    - UnknownNode holds any kind the model does not know about

The tree is a pure ownership tree: every node belongs to exactly one parent
and nothing here points back up. Renderers treat it as read-only.

"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any, ClassVar, Optional

from lex2html.constants import (
    KIND_CODE,
    KIND_HEADING,
    KIND_HORIZONTAL_RULE,
    KIND_IMAGE,
    KIND_LINE_BREAK,
    KIND_LINK,
    KIND_LIST,
    KIND_LIST_ITEM,
    KIND_PARAGRAPH,
    KIND_QUOTE,
    KIND_ROOT,
    KIND_TAB,
    KIND_TABLE,
    KIND_TABLE_CELL,
    KIND_TABLE_ROW,
    KIND_TEXT,
    KNOWN_FORMAT_MASK,
    TextFormat,
)


class Node(ABC):
    """Base class for all document nodes.

    Parameters
    ----------
    metadata : dict, default = empty dict
        Attributes stored on the node that the model does not name
        (editor bookkeeping such as ``indent`` or ``direction``)

    """

    kind: ClassVar[str] = ""
    metadata: dict[str, Any]

    @abstractmethod
    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this node.

        Parameters
        ----------
        visitor : Any
            A visitor object with visit_* methods

        Returns
        -------
        Any
            Result from the visitor's processing

        """
        pass


# ============================================================================
# Block-level Nodes
# ============================================================================


@dataclass
class Document(Node):
    """Root node of a DocumentState.

    Parameters
    ----------
    children : list of Node, default = empty list
        Block-level nodes in stored order
    metadata : dict, default = empty dict
        Root-level attributes

    """

    kind: ClassVar[str] = KIND_ROOT

    children: list[Node] = field(default_factory=list)
    metadata: dict[str, Any] = field(default_factory=dict)

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this document.

        Parameters
        ----------
        visitor : Any
            A visitor object with visit_document method

        Returns
        -------
        Any
            Result from visitor.visit_document(self)

        """
        return visitor.visit_document(self)


@dataclass
class Paragraph(Node):
    """Paragraph node.

    Parameters
    ----------
    children : list of Node, default = empty list
        Inline content of the paragraph
    metadata : dict, default = empty dict
        Paragraph metadata

    """

    kind: ClassVar[str] = KIND_PARAGRAPH

    children: list[Node] = field(default_factory=list)
    metadata: dict[str, Any] = field(default_factory=dict)

    def accept(self, visitor: Any) -> Any:
        """Dispatch to visitor.visit_paragraph."""
        return visitor.visit_paragraph(self)


@dataclass
class Heading(Node):
    """Heading node.

    Parameters
    ----------
    level : int
        Heading level (1-6)
    children : list of Node, default = empty list
        Inline content of the heading
    metadata : dict, default = empty dict
        Heading metadata

    Notes
    -----
    Levels outside 1-6 are clamped into range on construction.

    """

    kind: ClassVar[str] = KIND_HEADING

    level: int = 1
    children: list[Node] = field(default_factory=list)
    metadata: dict[str, Any] = field(default_factory=dict)

    def __post_init__(self) -> None:
        """Clamp the heading level into the valid range."""
        self.level = min(6, max(1, self.level))

    def accept(self, visitor: Any) -> Any:
        """Dispatch to visitor.visit_heading."""
        return visitor.visit_heading(self)


@dataclass
class Quote(Node):
    """Block quotation node.

    Parameters
    ----------
    children : list of Node, default = empty list
        Inline or block content of the quotation
    metadata : dict, default = empty dict
        Quote metadata

    """

    kind: ClassVar[str] = KIND_QUOTE

    children: list[Node] = field(default_factory=list)
    metadata: dict[str, Any] = field(default_factory=dict)

    def accept(self, visitor: Any) -> Any:
        """Dispatch to visitor.visit_quote."""
        return visitor.visit_quote(self)


@dataclass
class List(Node):
    """List node (ordered, unordered or checklist).

    Parameters
    ----------
    ordered : bool, default = False
        True for a numbered list
    start : int, default = 1
        First number of an ordered list
    checklist : bool, default = False
        True when the items carry a checked state
    children : list of Node, default = empty list
        List items; an item may itself hold a nested List
    metadata : dict, default = empty dict
        List metadata

    """

    kind: ClassVar[str] = KIND_LIST

    ordered: bool = False
    start: int = 1
    checklist: bool = False
    children: list[Node] = field(default_factory=list)
    metadata: dict[str, Any] = field(default_factory=dict)

    def accept(self, visitor: Any) -> Any:
        """Dispatch to visitor.visit_list."""
        return visitor.visit_list(self)


@dataclass
class ListItem(Node):
    """List item node.

    Parameters
    ----------
    children : list of Node, default = empty list
        Inline content and/or nested lists
    checked : bool or None, default = None
        Checked state for checklist items, None for ordinary items
    metadata : dict, default = empty dict
        Item metadata (the editor stores ``value`` and ``indent`` here)

    """

    kind: ClassVar[str] = KIND_LIST_ITEM

    children: list[Node] = field(default_factory=list)
    checked: Optional[bool] = None
    metadata: dict[str, Any] = field(default_factory=dict)

    def accept(self, visitor: Any) -> Any:
        """Dispatch to visitor.visit_list_item."""
        return visitor.visit_list_item(self)


@dataclass
class CodeBlock(Node):
    """Code block node.

    Parameters
    ----------
    children : list of Node, default = empty list
        Text runs, line breaks and tabs making up the code; format flags
        on the runs are not rendered
    language : str or None, default = None
        Language label as stored by the editor
    metadata : dict, default = empty dict
        Code block metadata

    """

    kind: ClassVar[str] = KIND_CODE

    children: list[Node] = field(default_factory=list)
    language: Optional[str] = None
    metadata: dict[str, Any] = field(default_factory=dict)

    def accept(self, visitor: Any) -> Any:
        """Dispatch to visitor.visit_code_block."""
        return visitor.visit_code_block(self)


@dataclass
class HorizontalRule(Node):
    """Horizontal rule (thematic break) node."""

    kind: ClassVar[str] = KIND_HORIZONTAL_RULE

    metadata: dict[str, Any] = field(default_factory=dict)

    def accept(self, visitor: Any) -> Any:
        """Dispatch to visitor.visit_horizontal_rule."""
        return visitor.visit_horizontal_rule(self)


@dataclass
class Table(Node):
    """Table node.

    Parameters
    ----------
    children : list of Node, default = empty list
        Table rows in stored order
    metadata : dict, default = empty dict
        Table metadata

    """

    kind: ClassVar[str] = KIND_TABLE

    children: list[Node] = field(default_factory=list)
    metadata: dict[str, Any] = field(default_factory=dict)

    def accept(self, visitor: Any) -> Any:
        """Dispatch to visitor.visit_table."""
        return visitor.visit_table(self)


@dataclass
class TableRow(Node):
    """Table row node.

    Parameters
    ----------
    children : list of Node, default = empty list
        Cells of the row
    is_header : bool or None, default = None
        Explicit header flag; None when the document does not say
    metadata : dict, default = empty dict
        Row metadata

    """

    kind: ClassVar[str] = KIND_TABLE_ROW

    children: list[Node] = field(default_factory=list)
    is_header: Optional[bool] = None
    metadata: dict[str, Any] = field(default_factory=dict)

    def accept(self, visitor: Any) -> Any:
        """Dispatch to visitor.visit_table_row."""
        return visitor.visit_table_row(self)


@dataclass
class TableCell(Node):
    """Table cell node.

    Parameters
    ----------
    children : list of Node, default = empty list
        Inline or paragraph content
    header : bool, default = False
        True when the cell itself is marked as a header cell
    metadata : dict, default = empty dict
        Cell metadata

    """

    kind: ClassVar[str] = KIND_TABLE_CELL

    children: list[Node] = field(default_factory=list)
    header: bool = False
    metadata: dict[str, Any] = field(default_factory=dict)

    def accept(self, visitor: Any) -> Any:
        """Dispatch to visitor.visit_table_cell."""
        return visitor.visit_table_cell(self)


# ============================================================================
# Inline Nodes
# ============================================================================


@dataclass
class Text(Node):
    """Text run; the only node carrying literal content.

    Parameters
    ----------
    text : str, default = ''
        Literal text (unescaped)
    format : int, default = 0
        Bitmask of :class:`~lex2html.constants.TextFormat` flags
    style : str or None, default = None
        Inline CSS stored by the editor (colour, font size)
    metadata : dict, default = empty dict
        Text metadata

    """

    kind: ClassVar[str] = KIND_TEXT

    text: str = ""
    format: int = 0
    style: Optional[str] = None
    metadata: dict[str, Any] = field(default_factory=dict)

    @property
    def flags(self) -> TextFormat:
        """Return the format bitmask as a :class:`TextFormat` value."""
        return TextFormat(self.format & int(KNOWN_FORMAT_MASK))

    def accept(self, visitor: Any) -> Any:
        """Dispatch to visitor.visit_text."""
        return visitor.visit_text(self)


@dataclass
class Link(Node):
    """Hyperlink node.

    Parameters
    ----------
    url : str, default = ''
        Link target
    children : list of Node, default = empty list
        Link text content
    target : str or None, default = None
        Browsing context (``_blank`` opens a new tab)
    rel : str or None, default = None
        Stored ``rel`` attribute
    title : str or None, default = None
        Optional link title
    metadata : dict, default = empty dict
        Link metadata

    """

    kind: ClassVar[str] = KIND_LINK

    url: str = ""
    children: list[Node] = field(default_factory=list)
    target: Optional[str] = None
    rel: Optional[str] = None
    title: Optional[str] = None
    metadata: dict[str, Any] = field(default_factory=dict)

    def accept(self, visitor: Any) -> Any:
        """Dispatch to visitor.visit_link."""
        return visitor.visit_link(self)


@dataclass
class Image(Node):
    """Image node.

    Parameters
    ----------
    src : str, default = ''
        Image source URL; an image without one is not rendered
    alt_text : str, default = ''
        Alternative text description
    width : float or None, default = None
        Width in pixels
    height : float or None, default = None
        Height in pixels
    max_width : float or None, default = None
        Maximum display width in pixels
    metadata : dict, default = empty dict
        Image metadata (caption settings and similar)

    """

    kind: ClassVar[str] = KIND_IMAGE

    src: str = ""
    alt_text: str = ""
    width: Optional[float] = None
    height: Optional[float] = None
    max_width: Optional[float] = None
    metadata: dict[str, Any] = field(default_factory=dict)

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this image.

        Parameters
        ----------
        visitor : Any
            A visitor object with visit_image method

        Returns
        -------
        Any
            Result from visitor.visit_image(self)

        """
        return visitor.visit_image(self)


@dataclass
class LineBreak(Node):
    """Hard line break."""

    kind: ClassVar[str] = KIND_LINE_BREAK

    metadata: dict[str, Any] = field(default_factory=dict)

    def accept(self, visitor: Any) -> Any:
        """Dispatch to visitor.visit_line_break."""
        return visitor.visit_line_break(self)


@dataclass
class Tab(Node):
    """Tab character, mostly found inside code blocks."""

    kind: ClassVar[str] = KIND_TAB

    metadata: dict[str, Any] = field(default_factory=dict)

    def accept(self, visitor: Any) -> Any:
        """Dispatch to visitor.visit_tab."""
        return visitor.visit_tab(self)


@dataclass
class UnknownNode(Node):
    """Node of a kind this model does not recognize.

    Kept in the tree so that documents written by a newer editor still load;
    renderers produce no output for it.

    Parameters
    ----------
    type_name : str
        The kind string found in the document
    data : dict, default = empty dict
        The raw node data
    metadata : dict, default = empty dict
        Node metadata

    """

    type_name: str = ""
    data: dict[str, Any] = field(default_factory=dict)
    metadata: dict[str, Any] = field(default_factory=dict)

    def accept(self, visitor: Any) -> Any:
        """Dispatch to visitor.visit_unknown."""
        return visitor.visit_unknown(self)


def get_node_children(node: Node) -> list[Node]:
    """Return the child nodes of any node, or an empty list for leaves."""
    children = getattr(node, "children", None)
    return list(children) if children else []


__all__ = [
    "Node",
    "Document",
    "Paragraph",
    "Heading",
    "Quote",
    "List",
    "ListItem",
    "CodeBlock",
    "HorizontalRule",
    "Table",
    "TableRow",
    "TableCell",
    "Text",
    "Link",
    "Image",
    "LineBreak",
    "Tab",
    "UnknownNode",
    "get_node_children",
]
