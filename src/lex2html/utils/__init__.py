#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/lex2html/utils/__init__.py
"""Utility modules for the lex2html package.

Escaping and attribute helpers, URL safety checks, and Cloudinary delivery
URL rewriting.
"""

from lex2html.utils.cloudinary import generate_srcset, is_cloudinary_url, optimize_cloudinary_url
from lex2html.utils.html_utils import escape_html, format_attributes
from lex2html.utils.security import is_url_scheme_dangerous, sanitize_link_url

__all__ = [
    "escape_html",
    "format_attributes",
    "generate_srcset",
    "is_cloudinary_url",
    "is_url_scheme_dangerous",
    "optimize_cloudinary_url",
    "sanitize_link_url",
]
