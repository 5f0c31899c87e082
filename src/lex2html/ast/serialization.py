#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/lex2html/ast/serialization.py
"""Loading of editor DocumentState JSON into the node tree.

The editor persists its document as a JSON object of the form
``{"root": {"type": "root", "children": [...]}}``. Each node names its kind
in ``type`` (editor-native) or ``kind``. This module turns that structure
into :mod:`lex2html.ast.nodes` instances.

Loading is lenient below the root: unknown kinds become
:class:`~lex2html.ast.nodes.UnknownNode`, and missing or mistyped attributes
fall back to their defaults. Only a document that cannot be read at all
(bad JSON, no root) raises :class:`~lex2html.exceptions.DocumentStateError`.

Examples
--------
    >>> from lex2html.ast.serialization import load_document_state
    >>> doc = load_document_state('{"root": {"children": [{"type": "paragraph", "children": []}]}}')
    >>> doc.children[0].kind
    'paragraph'

"""

from __future__ import annotations

import json
import logging
import math
from typing import Any, Callable, Union

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
)
from lex2html.constants import (
    KIND_ALIASES,
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
    LIST_TYPE_CHECK,
    LIST_TYPE_NUMBER,
)
from lex2html.exceptions import DocumentStateError

logger = logging.getLogger(__name__)

DocumentStateInput = Union[str, bytes, bytearray, dict, Document]

# Keys consumed by the typed fields; everything else lands in metadata
_STRUCTURAL_KEYS = frozenset({"type", "kind", "children", "version"})


# Attribute coercion helpers
def _as_str(value: Any, default: str = "") -> str:
    return value if isinstance(value, str) else default


def _as_optional_str(value: Any) -> str | None:
    if isinstance(value, str) and value:
        return value
    return None


def _as_int(value: Any, default: int) -> int:
    # bool is an int subclass but never a meaningful count here
    if isinstance(value, bool):
        return default
    if isinstance(value, int):
        return value
    if isinstance(value, float) and math.isfinite(value):
        return int(value)
    if isinstance(value, str):
        try:
            return int(value.strip())
        except ValueError:
            return default
    return default


def _as_dimension(value: Any) -> float | None:
    """Return a positive finite pixel size, or None for anything else (``"inherit"``)."""
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return None
    if not math.isfinite(value) or value <= 0:
        return None
    return value


def _as_optional_bool(value: Any) -> bool | None:
    return value if isinstance(value, bool) else None


def _node_kind(data: dict[str, Any]) -> str:
    kind = data.get("kind", data.get("type"))
    if not isinstance(kind, str):
        return ""
    return KIND_ALIASES.get(kind, kind)


def _extra_metadata(data: dict[str, Any], consumed: frozenset[str] | set[str] = frozenset()) -> dict[str, Any]:
    return {key: value for key, value in data.items() if key not in _STRUCTURAL_KEYS and key not in consumed}


def _load_children(data: dict[str, Any]) -> list[Node]:
    """Load the ``children`` array of a node, dropping entries that are not objects."""
    raw_children = data.get("children")
    if not isinstance(raw_children, list):
        return []

    children: list[Node] = []
    for child in raw_children:
        if not isinstance(child, dict):
            logger.debug("Skipping non-object child entry of type %s", type(child).__name__)
            continue
        children.append(dict_to_node(child))
    return children


# Individual loader functions for each node kind
def _load_document(data: dict[str, Any]) -> Document:
    return Document(children=_load_children(data), metadata=_extra_metadata(data))


def _load_paragraph(data: dict[str, Any]) -> Paragraph:
    return Paragraph(children=_load_children(data), metadata=_extra_metadata(data))


def _load_heading(data: dict[str, Any]) -> Heading:
    """Load a heading from ``level`` or the editor's ``tag`` (``"h2"``)."""
    if "level" in data:
        level = _as_int(data["level"], 1)
    else:
        tag = _as_str(data.get("tag"), "h1").strip().lower()
        level = _as_int(tag[1:], 1) if tag.startswith("h") else 1
    return Heading(level=level, children=_load_children(data), metadata=_extra_metadata(data, {"level", "tag"}))


def _load_quote(data: dict[str, Any]) -> Quote:
    return Quote(children=_load_children(data), metadata=_extra_metadata(data))


def _load_list(data: dict[str, Any]) -> List:
    """Load a list from ``ordered`` or the editor's ``listType``."""
    list_type = _as_str(data.get("listType"))
    ordered_flag = _as_optional_bool(data.get("ordered"))
    ordered = ordered_flag if ordered_flag is not None else list_type == LIST_TYPE_NUMBER
    start = max(1, _as_int(data.get("start"), 1))
    return List(
        ordered=ordered,
        start=start,
        checklist=list_type == LIST_TYPE_CHECK,
        children=_load_children(data),
        metadata=_extra_metadata(data, {"ordered", "start", "listType"}),
    )


def _load_list_item(data: dict[str, Any]) -> ListItem:
    return ListItem(
        children=_load_children(data),
        checked=_as_optional_bool(data.get("checked")),
        metadata=_extra_metadata(data, {"checked"}),
    )


def _load_code_block(data: dict[str, Any]) -> CodeBlock:
    children = _load_children(data)
    # Some producers store the code as a flat string instead of text runs
    if not children and isinstance(data.get("text"), str):
        children = [Text(text=data["text"])]
    return CodeBlock(
        children=children,
        language=_as_optional_str(data.get("language")),
        metadata=_extra_metadata(data, {"language", "text"}),
    )


def _load_horizontal_rule(data: dict[str, Any]) -> HorizontalRule:
    return HorizontalRule(metadata=_extra_metadata(data))


def _load_table(data: dict[str, Any]) -> Table:
    return Table(children=_load_children(data), metadata=_extra_metadata(data))


def _load_table_row(data: dict[str, Any]) -> TableRow:
    return TableRow(
        children=_load_children(data),
        is_header=_as_optional_bool(data.get("isHeader")),
        metadata=_extra_metadata(data, {"isHeader"}),
    )


def _load_table_cell(data: dict[str, Any]) -> TableCell:
    """Load a cell; ``header: true`` or a non-zero ``headerState`` marks a header cell."""
    header = data.get("header") is True or _as_int(data.get("headerState"), 0) != 0
    return TableCell(
        children=_load_children(data),
        header=header,
        metadata=_extra_metadata(data, {"header", "headerState"}),
    )


def _load_text(data: dict[str, Any]) -> Text:
    return Text(
        text=_as_str(data.get("text")),
        format=max(0, _as_int(data.get("format"), 0)),
        style=_as_optional_str(data.get("style")),
        metadata=_extra_metadata(data, {"text", "format", "style"}),
    )


def _load_link(data: dict[str, Any]) -> Link:
    return Link(
        url=_as_str(data.get("url")),
        children=_load_children(data),
        target=_as_optional_str(data.get("target")),
        rel=_as_optional_str(data.get("rel")),
        title=_as_optional_str(data.get("title")),
        metadata=_extra_metadata(data, {"url", "target", "rel", "title"}),
    )


def _load_image(data: dict[str, Any]) -> Image:
    return Image(
        src=_as_str(data.get("src")),
        alt_text=_as_str(data.get("altText", data.get("alt"))),
        width=_as_dimension(data.get("width")),
        height=_as_dimension(data.get("height")),
        max_width=_as_dimension(data.get("maxWidth")),
        metadata=_extra_metadata(data, {"src", "altText", "alt", "width", "height", "maxWidth"}),
    )


def _load_line_break(data: dict[str, Any]) -> LineBreak:
    return LineBreak(metadata=_extra_metadata(data))


def _load_tab(data: dict[str, Any]) -> Tab:
    return Tab(metadata=_extra_metadata(data))


_LOADER_DISPATCH: dict[str, Callable[[dict[str, Any]], Node]] = {
    KIND_ROOT: _load_document,
    KIND_PARAGRAPH: _load_paragraph,
    KIND_HEADING: _load_heading,
    KIND_QUOTE: _load_quote,
    KIND_LIST: _load_list,
    KIND_LIST_ITEM: _load_list_item,
    KIND_CODE: _load_code_block,
    KIND_HORIZONTAL_RULE: _load_horizontal_rule,
    KIND_TABLE: _load_table,
    KIND_TABLE_ROW: _load_table_row,
    KIND_TABLE_CELL: _load_table_cell,
    KIND_TEXT: _load_text,
    KIND_LINK: _load_link,
    KIND_IMAGE: _load_image,
    KIND_LINE_BREAK: _load_line_break,
    KIND_TAB: _load_tab,
}


def dict_to_node(data: dict[str, Any]) -> Node:
    """Convert one node dictionary into a typed node.

    Parameters
    ----------
    data : dict
        Node dictionary as written by the editor

    Returns
    -------
    Node
        The typed node; :class:`UnknownNode` for unrecognized kinds

    Examples
    --------
    >>> node = dict_to_node({"type": "text", "text": "Hi", "format": 1})
    >>> node.text, node.format
    ('Hi', 1)

    """
    kind = _node_kind(data)
    loader = _LOADER_DISPATCH.get(kind)
    if loader is None:
        logger.debug("Unknown node kind %r, keeping as UnknownNode", kind)
        return UnknownNode(type_name=kind, data=data)
    return loader(data)


def load_document_state(state: DocumentStateInput) -> Document:
    """Load a DocumentState into a :class:`Document` tree.

    Parameters
    ----------
    state : str, bytes, dict or Document
        The editor state: JSON text, an already-parsed object (either the
        ``{"root": ...}`` wrapper or the root node itself), or a Document,
        which is returned unchanged

    Returns
    -------
    Document
        The root node of the loaded tree

    Raises
    ------
    DocumentStateError
        If the JSON does not parse, the top-level value is not an object,
        or no root node can be found

    """
    if isinstance(state, Document):
        return state

    if isinstance(state, (str, bytes, bytearray)):
        try:
            data = json.loads(state)
        except (json.JSONDecodeError, UnicodeDecodeError) as e:
            raise DocumentStateError(f"DocumentState is not valid JSON: {e}", original_error=e) from e
    else:
        data = state

    if not isinstance(data, dict):
        raise DocumentStateError(f"DocumentState must be a JSON object, got {type(data).__name__}")

    root = data.get("root")
    if root is None and _node_kind(data) == KIND_ROOT:
        root = data

    if not isinstance(root, dict):
        raise DocumentStateError("DocumentState has no root node")

    return _load_document(root)


__all__ = [
    "DocumentStateInput",
    "dict_to_node",
    "load_document_state",
]
