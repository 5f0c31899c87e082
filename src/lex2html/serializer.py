#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/lex2html/serializer.py
"""Document serialization entry points.

``serialize`` is the function the CMS calls when an article is saved or
rendered: it loads the stored editor state, renders it to HTML and attaches
a read-time estimate. It is a pure function of its input and options, and it
never raises for malformed input; a document that cannot be loaded yields
an empty result instead.

Examples
--------
    >>> from lex2html import serialize
    >>> result = serialize('{"root": {"type": "root", "children": []}}')
    >>> result.html, result.approx_read_time_minutes
    ('', 1)

"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import Optional

from lex2html.ast.serialization import DocumentStateInput, load_document_state
from lex2html.constants import DEFAULT_CHARS_PER_MINUTE, MIN_READ_TIME_MINUTES
from lex2html.exceptions import Lex2HtmlError
from lex2html.options.html import HtmlRendererOptions
from lex2html.renderers.html import HtmlRenderer

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SerializedDocument:
    """Rendered article body and its read-time estimate.

    Parameters
    ----------
    html : str
        HTML fragment for the article body
    approx_read_time_minutes : int
        Estimated reading time, at least 1

    """

    html: str
    approx_read_time_minutes: int

    @classmethod
    def empty(cls) -> "SerializedDocument":
        """Result used when a document cannot be rendered."""
        return cls(html="", approx_read_time_minutes=MIN_READ_TIME_MINUTES)


def estimate_read_time(html: str, chars_per_minute: int = DEFAULT_CHARS_PER_MINUTE) -> int:
    """Estimate reading time in whole minutes from the rendered HTML length.

    Parameters
    ----------
    html : str
        Rendered markup; tags count towards the length
    chars_per_minute : int, default 500
        Reading speed

    Returns
    -------
    int
        ``ceil(len(html) / chars_per_minute)``, never below 1

    Raises
    ------
    ValueError
        If ``chars_per_minute`` is not positive

    Examples
    --------
    >>> estimate_read_time("")
    1
    >>> estimate_read_time("x" * 501)
    2

    """
    if chars_per_minute <= 0:
        raise ValueError(f"chars_per_minute must be positive, got {chars_per_minute}")
    return max(MIN_READ_TIME_MINUTES, math.ceil(len(html) / chars_per_minute))


def serialize(
    document_state: DocumentStateInput,
    options: Optional[HtmlRendererOptions] = None,
) -> SerializedDocument:
    """Render a stored editor document to HTML with a read-time estimate.

    Parameters
    ----------
    document_state : str, bytes, dict or Document
        The DocumentState JSON text, its parsed form, or a loaded tree
    options : HtmlRendererOptions, optional
        Rendering options; defaults are used when omitted

    Returns
    -------
    SerializedDocument
        The rendered HTML and its read time. Malformed input (invalid JSON,
        no root node, wrong types) gives ``SerializedDocument.empty()``.

    Raises
    ------
    InvalidOptionsError
        If ``options`` is not an :class:`HtmlRendererOptions` instance

    """
    renderer = HtmlRenderer(options)

    try:
        document = load_document_state(document_state)
        html = renderer.render_to_string(document)
    except (Lex2HtmlError, TypeError, ValueError, RecursionError) as e:
        logger.warning(f"Could not serialize document state, returning empty result: {e}")
        return SerializedDocument.empty()

    read_time = estimate_read_time(html, renderer.options.chars_per_minute)
    logger.debug("Serialized document: %d characters, %d minute(s)", len(html), read_time)
    return SerializedDocument(html=html, approx_read_time_minutes=read_time)


def lexical_to_html(
    document_state: DocumentStateInput,
    options: Optional[HtmlRendererOptions] = None,
) -> str:
    """Render a stored editor document and return only the HTML."""
    return serialize(document_state, options).html


__all__ = ["SerializedDocument", "estimate_read_time", "lexical_to_html", "serialize"]
