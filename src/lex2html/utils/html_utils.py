#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/lex2html/utils/html_utils.py
"""HTML-related utility helpers."""

from __future__ import annotations

from html import escape as _html_escape


def escape_html(text: str, *, enabled: bool = True) -> str:
    """Escape ``&``, ``<``, ``>``, ``"`` and ``'`` when enabled."""
    if not enabled:
        return text
    return _html_escape(text, quote=True)


def format_attributes(attributes: list[tuple[str, str | None]]) -> str:
    """Render ``(name, value)`` pairs as an attribute string with a leading space.

    Values are escaped. Pairs whose value is None are skipped, so optional
    attributes can be listed unconditionally.

    Examples
    --------
    >>> format_attributes([("src", "/a.png"), ("alt", 'say "hi"'), ("width", None)])
    ' src="/a.png" alt="say &quot;hi&quot;"'

    """
    return "".join(f' {name}="{escape_html(value)}"' for name, value in attributes if value is not None)


def format_dimension(value: float) -> str:
    """Format a pixel size without a trailing ``.0`` for whole numbers."""
    if float(value).is_integer():
        return str(int(value))
    return str(value)
