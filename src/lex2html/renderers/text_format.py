#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/lex2html/renderers/text_format.py
"""Text-run formatting.

Converts a text leaf and its format bitmask into nested inline tags. This is
the only place literal document text enters the output, so escaping happens
here first and unconditionally.

Tags are applied in one fixed order, Code, Bold, Italic, StrikeThrough,
Underline, Subscript, Superscript, each wrapping the result so far. The same
bitmask therefore always yields byte-identical markup::

    >>> render_text("x", TextFormat.BOLD | TextFormat.ITALIC)
    '<em><strong>x</strong></em>'

"""

from __future__ import annotations

from typing import Optional

from lex2html.constants import FORMAT_TAG_ORDER, KNOWN_FORMAT_MASK, TextFormat
from lex2html.utils.html_utils import escape_html


def render_text(
    text: str,
    format: int = 0,
    style: Optional[str] = None,
    *,
    preserve_style: bool = True,
) -> str:
    """Render one text run to inline HTML.

    Parameters
    ----------
    text : str
        Literal, unescaped text
    format : int, default 0
        Bitmask of :class:`~lex2html.constants.TextFormat` flags; bits outside
        the vocabulary are ignored. Subscript and Superscript may both be set
        and are then both applied.
    style : str, optional
        Inline CSS stored by the editor for this run
    preserve_style : bool, default True
        Wrap the run in ``<span style="...">`` when ``style`` is set

    Returns
    -------
    str
        Escaped, tag-wrapped markup; ``""`` for empty text

    """
    if not text:
        return ""

    formatted = escape_html(text)
    flags = TextFormat(format & int(KNOWN_FORMAT_MASK))

    for flag, tag in FORMAT_TAG_ORDER:
        if flag in flags:
            formatted = f"<{tag}>{formatted}</{tag}>"

    if style and preserve_style:
        formatted = f'<span style="{escape_html(style)}">{formatted}</span>'

    return formatted


def render_plain_text(text: str) -> str:
    """Escape ``text`` without applying any formatting (code block content)."""
    return escape_html(text)
