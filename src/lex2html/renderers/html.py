#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/lex2html/renderers/html.py
"""HTML rendering of editor documents.

This module provides the HtmlRenderer class, which converts a document tree
into the semantic HTML fragment injected into an article page. Rendering is
a total function over the node kinds: every node yields a fragment, possibly
empty, and nothing here raises for unexpected input unless
``fail_on_unknown_nodes`` is set.

Rendering rules worth knowing:

- Blocks whose content renders empty produce no markup at all.
- The root node skips children that render empty.
- Unknown kinds render as nothing; their siblings are unaffected.
- Images always carry the marker class (``lexical-image``); explicit
  ``width``/``height`` attributes only appear when both are known and no
  ``maxWidth`` asks for CSS-driven sizing instead.
- ``target="_blank"`` links always carry ``noopener noreferrer``.
- Code blocks are escaped, never highlighted.

The output never contains ``<script>``: no node kind produces one, and all
literal text passes through :func:`~lex2html.renderers.text_format.render_text`
or attribute escaping.

"""

from __future__ import annotations

import logging
from typing import Optional

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
from lex2html.ast.visitors import NodeVisitor
from lex2html.constants import (
    CHECKBOX_CHECKED,
    CHECKBOX_UNCHECKED,
    CLOUDINARY_DEFAULT_MAX_WIDTH,
    DEFAULT_IMAGE_SIZES,
)
from lex2html.exceptions import RenderingError
from lex2html.options.html import HtmlRendererOptions
from lex2html.renderers.base import BaseRenderer, InlineContentMixin
from lex2html.renderers.text_format import render_plain_text, render_text
from lex2html.utils.cloudinary import generate_srcset, is_cloudinary_url, optimize_cloudinary_url
from lex2html.utils.html_utils import format_attributes, format_dimension
from lex2html.utils.security import sanitize_link_url

logger = logging.getLogger(__name__)


class HtmlRenderer(NodeVisitor, InlineContentMixin, BaseRenderer):
    """Render document nodes to an HTML fragment.

    This class implements the visitor pattern to traverse a document tree and
    accumulate HTML. A renderer instance holds only its output buffer, so
    separate instances can run concurrently; a single instance should not be
    shared between threads.

    Parameters
    ----------
    options : HtmlRendererOptions or None, default = None
        HTML rendering options

    Examples
    --------
    Basic usage:

        >>> from lex2html.ast import Document, Heading, Text
        >>> from lex2html.renderers.html import HtmlRenderer
        >>> doc = Document(children=[Heading(level=2, children=[Text(text="Hi & Bye")])])
        >>> HtmlRenderer().render_to_string(doc)
        '<h2>Hi &amp; Bye</h2>'

    """

    def __init__(self, options: HtmlRendererOptions | None = None):
        """Initialize the HTML renderer with options."""
        BaseRenderer._validate_options_type(options, HtmlRendererOptions, "html")
        options = options or HtmlRendererOptions()
        BaseRenderer.__init__(self, options)
        self.options: HtmlRendererOptions = options
        self._output: list[str] = []

    def render_to_string(self, doc: Document) -> str:
        """Render a document to an HTML string.

        Parameters
        ----------
        doc : Document
            The root node to render

        Returns
        -------
        str
            HTML fragment (no ``<html>``/``<body>`` wrapper)

        """
        return self.render_node(doc)

    def render_node(self, node: Node) -> str:
        """Render any single node, with its subtree, to an HTML fragment."""
        self._output = []
        node.accept(self)
        return "".join(self._output)

    # ------------------------------------------------------------------
    # Block-level nodes
    # ------------------------------------------------------------------

    def visit_document(self, node: Document) -> None:
        """Render the root node, skipping children that render empty."""
        for child in node.children:
            fragment = self._render_children([child])
            if fragment:
                self._output.append(fragment)

    def visit_paragraph(self, node: Paragraph) -> None:
        """Render a Paragraph node."""
        content = self._render_children(node.children)
        if content:
            self._output.append(f"<p>{content}</p>")

    def visit_heading(self, node: Heading) -> None:
        """Render a Heading node."""
        content = self._render_children(node.children)
        if content:
            self._output.append(f"<h{node.level}>{content}</h{node.level}>")

    def visit_quote(self, node: Quote) -> None:
        """Render a Quote node as a blockquote."""
        content = self._render_children(node.children)
        if content:
            self._output.append(f"<blockquote>{content}</blockquote>")

    def visit_list(self, node: List) -> None:
        """Render a List node.

        ``start`` is only emitted for ordered lists starting above 1. Children
        that are not list items get their own ``<li>`` when they render
        anything. A list without any rendered item produces no markup.

        Parameters
        ----------
        node : List
            List to render

        """
        items: list[str] = []
        for child in node.children:
            if isinstance(child, ListItem):
                items.append(self._render_list_item(child, checklist=node.checklist))
                continue

            content = self._render_children([child])
            if content:
                items.append(f"<li>{content}</li>")

        if not items:
            return

        tag = "ol" if node.ordered else "ul"
        start_attr = f' start="{node.start}"' if node.ordered and node.start > 1 else ""
        self._output.append(f"<{tag}{start_attr}>{''.join(items)}</{tag}>")

    def visit_list_item(self, node: ListItem) -> None:
        """Render a ListItem node outside of its list."""
        self._output.append(self._render_list_item(node, checklist=node.checked is not None))

    def _render_list_item(self, node: ListItem, checklist: bool) -> str:
        """Render one ``<li>``; nested lists render inside it."""
        content = self._render_children(node.children)

        # A checkbox only belongs in front of the item's own text, not a nested list
        marker = ""
        if checklist and not (node.children and isinstance(node.children[0], List)):
            marker = CHECKBOX_CHECKED if node.checked else CHECKBOX_UNCHECKED

        return f"<li>{marker}{content}</li>"

    def visit_code_block(self, node: CodeBlock) -> None:
        """Render a CodeBlock node.

        The text is escaped and wrapped in ``<pre><code>``. Format flags on
        the runs are ignored and no highlighting is applied; the language is
        only passed on as ``data-language``.

        Parameters
        ----------
        node : CodeBlock
            Code block to render

        """
        code = self._collect_code_text(node.children)
        if not code:
            return

        language_attr = format_attributes([("data-language", node.language)])
        self._output.append(f"<pre><code{language_attr}>{render_plain_text(code)}</code></pre>")

    def _collect_code_text(self, nodes: list[Node]) -> str:
        parts: list[str] = []
        for child in nodes:
            if isinstance(child, Text):
                parts.append(child.text)
            elif isinstance(child, LineBreak):
                parts.append("\n")
            elif isinstance(child, Tab):
                parts.append("\t")
            else:
                parts.append(self._collect_code_text(get_node_children(child)))
        return "".join(parts)

    def visit_horizontal_rule(self, node: HorizontalRule) -> None:
        """Render a HorizontalRule node."""
        self._output.append("<hr />")

    def visit_table(self, node: Table) -> None:
        """Render a Table node.

        Leading header rows go into ``<thead>``: the first row counts as a
        header unless it is explicitly flagged otherwise, and rows explicitly
        flagged as headers that directly follow it join it. All remaining
        rows go into ``<tbody>``, where a row flagged as a header still
        renders ``<th>`` cells. A table without rows produces no markup.

        Parameters
        ----------
        node : Table
            Table to render

        """
        rows = [child for child in node.children if isinstance(child, TableRow)]
        if not rows:
            return

        header_count = 0
        for index, row in enumerate(rows):
            if row.is_header is True or (index == 0 and row.is_header is None):
                header_count += 1
            else:
                break

        parts = ["<table>"]
        if header_count:
            parts.append("<thead>")
            parts.extend(self._render_table_row(row, header_row=True) for row in rows[:header_count])
            parts.append("</thead>")
        if header_count < len(rows):
            parts.append("<tbody>")
            parts.extend(self._render_table_row(row, header_row=bool(row.is_header)) for row in rows[header_count:])
            parts.append("</tbody>")
        parts.append("</table>")

        self._output.append("".join(parts))

    def visit_table_row(self, node: TableRow) -> None:
        """Render a TableRow node outside of its table."""
        self._output.append(self._render_table_row(node, header_row=bool(node.is_header)))

    def visit_table_cell(self, node: TableCell) -> None:
        """Render a TableCell node outside of its row."""
        self._output.append(self._render_table_cell(node, header_row=False))

    def _render_table_row(self, row: TableRow, header_row: bool) -> str:
        cells = "".join(
            self._render_table_cell(cell, header_row) for cell in row.children if isinstance(cell, TableCell)
        )
        return f"<tr>{cells}</tr>"

    def _render_table_cell(self, cell: TableCell, header_row: bool) -> str:
        tag = "th" if header_row or cell.header else "td"
        content = self._render_children(cell.children)
        return f"<{tag}>{content}</{tag}>"

    # ------------------------------------------------------------------
    # Inline nodes
    # ------------------------------------------------------------------

    def visit_text(self, node: Text) -> None:
        """Render a Text node through the text-run formatter."""
        self._output.append(
            render_text(node.text, node.flags, node.style, preserve_style=self.options.preserve_text_styles)
        )

    def visit_link(self, node: Link) -> None:
        """Render a Link node.

        An empty or script-capable URL drops the ``<a>`` but keeps the link
        text. ``target="_blank"`` always gets the ``blank_target_rel``
        tokens, added to whatever ``rel`` the document stored.

        Parameters
        ----------
        node : Link
            Link to render

        """
        content = self._render_children(node.children)
        href = sanitize_link_url(node.url)
        if not href:
            logger.debug("Link without a usable URL rendered as plain content")
            self._output.append(content)
            return

        attributes = format_attributes(
            [
                ("href", href),
                ("target", node.target),
                ("rel", self._resolve_rel(node)),
                ("title", node.title),
            ]
        )
        self._output.append(f"<a{attributes}>{content}</a>")

    def _resolve_rel(self, node: Link) -> Optional[str]:
        tokens = node.rel.split() if node.rel else []
        if node.target and node.target.strip().lower() == "_blank":
            present = {token.lower() for token in tokens}
            tokens.extend(token for token in self.options.blank_target_rel.split() if token.lower() not in present)
        return " ".join(tokens) or None

    def visit_image(self, node: Image) -> None:
        """Render an Image node.

        Parameters
        ----------
        node : Image
            Image to render; one without a usable ``src`` produces no markup

        """
        src = sanitize_link_url(node.src)
        if not src:
            logger.debug("Image without usable src skipped")
            return

        attributes: list[tuple[str, Optional[str]]] = []
        if self.options.optimize_cloudinary_images and is_cloudinary_url(src):
            display_width = node.width or node.max_width or CLOUDINARY_DEFAULT_MAX_WIDTH
            attributes.append(("src", optimize_cloudinary_url(src, width=display_width, height=node.height)))
            attributes.append(("alt", node.alt_text))
            srcset = generate_srcset(src, max_width=display_width)
            if srcset:
                attributes.append(("srcset", srcset))
                attributes.append(("sizes", DEFAULT_IMAGE_SIZES.format(width=format_dimension(display_width))))
        else:
            attributes.append(("src", src))
            attributes.append(("alt", node.alt_text))

        if node.max_width is not None:
            attributes.append(("style", f"max-width: {format_dimension(node.max_width)}px"))
        elif node.width is not None and node.height is not None:
            attributes.append(("width", format_dimension(node.width)))
            attributes.append(("height", format_dimension(node.height)))

        if self.options.lazy_images:
            attributes.append(("loading", "lazy"))
            attributes.append(("decoding", "async"))

        attributes.append(("class", self.options.image_class))
        self._output.append(f"<img{format_attributes(attributes)} />")

    def visit_line_break(self, node: LineBreak) -> None:
        """Render a LineBreak node."""
        self._output.append("<br />")

    def visit_tab(self, node: Tab) -> None:
        """Render a Tab node as a literal tab."""
        self._output.append("\t")

    def visit_unknown(self, node: UnknownNode) -> None:
        """Render nothing for an unrecognized node kind.

        Raises
        ------
        RenderingError
            If ``fail_on_unknown_nodes`` is enabled

        """
        if self.options.fail_on_unknown_nodes:
            raise RenderingError(f"Unknown node kind: {node.type_name!r}", node_kind=node.type_name)
        logger.debug("Skipping unknown node kind %r", node.type_name)


def render_node(node: Node, options: HtmlRendererOptions | None = None) -> str:
    """Render a single node and its subtree to an HTML fragment.

    Parameters
    ----------
    node : Node
        Any document node
    options : HtmlRendererOptions, optional
        Rendering options

    Returns
    -------
    str
        HTML fragment; empty for unknown kinds and for nodes missing a
        required attribute

    """
    return HtmlRenderer(options).render_node(node)


__all__ = ["HtmlRenderer", "render_node"]
