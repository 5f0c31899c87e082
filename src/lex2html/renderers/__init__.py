#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/lex2html/renderers/__init__.py
"""Renderers that turn a document tree into output markup."""

from lex2html.renderers.base import BaseRenderer, InlineContentMixin
from lex2html.renderers.html import HtmlRenderer, render_node
from lex2html.renderers.text_format import render_plain_text, render_text

__all__ = [
    "BaseRenderer",
    "HtmlRenderer",
    "InlineContentMixin",
    "render_node",
    "render_plain_text",
    "render_text",
]
