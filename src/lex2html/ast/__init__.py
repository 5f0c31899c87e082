#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Document model for editor DocumentState trees.

This package holds the typed node classes, the visitor base class and the
loader that reads the editor's JSON into nodes.

"""

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
from lex2html.ast.serialization import dict_to_node, load_document_state
from lex2html.ast.visitors import NodeVisitor

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
    "NodeVisitor",
    "dict_to_node",
    "load_document_state",
]
