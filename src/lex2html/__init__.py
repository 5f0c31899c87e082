"""lex2html - Safe HTML rendering for rich-text editor documents.

lex2html turns the JSON document state stored by a block/inline rich-text
editor into semantic, escaped HTML for public article pages, estimates the
read time of the result, and provides a presentation pass that makes images
fluid and tables horizontally scrollable once the markup is mounted.

Key Features
------------
- Typed document tree loaded leniently from DocumentState JSON
- Visitor-based HTML renderer; every literal string is escaped
- Deterministic inline formatting (bold, italic, code, sub/superscript, ...)
- Link hardening: script-capable URLs dropped, ``_blank`` links get
  ``noopener noreferrer``
- Cloudinary image URL optimisation with responsive ``srcset``
- Idempotent, memoized image/table post-processing

Requirements
------------
- Python 3.10+
- beautifulsoup4 (post-processing), rich (CLI pretty-printing)

Examples
--------
Serialize a stored document:

    >>> from lex2html import serialize
    >>> state = {"root": {"type": "root", "children": [
    ...     {"type": "heading", "tag": "h2", "children": [{"type": "text", "text": "Hi & Bye"}]}
    ... ]}}
    >>> serialize(state).html
    '<h2>Hi &amp; Bye</h2>'

Enhance the rendered markup for display:

    >>> from lex2html import enhance_html
    >>> enhance_html('<img src="a.png" alt="" class="lexical-image" />')
    '<img src="a.png" alt="" class="lexical-image w-full h-auto" style="max-width: 100%; height: auto" data-processed="true"/>'

"""

#  Copyright (c) 2025 Tom Villani, Ph.D.

# Check Python version before any imports
import sys

if sys.version_info < (3, 10):
    raise ImportError(
        "lex2html requires Python 3.10 or later. "
        f"You are using Python {sys.version_info.major}.{sys.version_info.minor}."
    )

__version__ = "1.0.0"

from lex2html.ast import Document, dict_to_node, load_document_state  # noqa: E402
from lex2html.exceptions import (  # noqa: E402
    DocumentStateError,
    InvalidOptionsError,
    Lex2HtmlError,
    RenderingError,
    ValidationError,
)
from lex2html.options import HtmlRendererOptions, PostProcessOptions  # noqa: E402
from lex2html.postprocess import (  # noqa: E402
    PresentationPostProcessor,
    enhance_content,
    enhance_html,
    enhance_images,
    wrap_tables,
)
from lex2html.renderers import HtmlRenderer, render_node, render_text  # noqa: E402
from lex2html.serializer import SerializedDocument, estimate_read_time, lexical_to_html, serialize  # noqa: E402

__all__ = [
    "__version__",
    # Serialization
    "serialize",
    "lexical_to_html",
    "estimate_read_time",
    "SerializedDocument",
    # Document model
    "Document",
    "dict_to_node",
    "load_document_state",
    # Rendering
    "HtmlRenderer",
    "render_node",
    "render_text",
    # Post-processing
    "PresentationPostProcessor",
    "enhance_content",
    "enhance_html",
    "enhance_images",
    "wrap_tables",
    # Options
    "HtmlRendererOptions",
    "PostProcessOptions",
    # Exceptions
    "Lex2HtmlError",
    "ValidationError",
    "InvalidOptionsError",
    "DocumentStateError",
    "RenderingError",
]
