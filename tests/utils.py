"""Test utilities for the lex2html test suite.

Builders for editor DocumentState dictionaries, so tests can describe a
document in a few lines instead of spelling out the JSON.
"""

from typing import Any


def text(value: str, format: int = 0, **extra: Any) -> dict[str, Any]:
    """Build a text node dictionary."""
    return {"type": "text", "text": value, "format": format, **extra}


def block(kind: str, *children: dict[str, Any], **extra: Any) -> dict[str, Any]:
    """Build a node dictionary of ``kind`` with ``children``."""
    return {"type": kind, "children": list(children), **extra}


def state(*children: dict[str, Any]) -> dict[str, Any]:
    """Wrap root children in the editor's ``{"root": ...}`` envelope."""
    return {"root": block("root", *children)}


def paragraph(value: str, format: int = 0) -> dict[str, Any]:
    """Build a paragraph holding a single text run."""
    return block("paragraph", text(value, format))
