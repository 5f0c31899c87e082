#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/lex2html/utils/security.py
"""URL safety checks used before emitting link targets."""

from __future__ import annotations

import logging
import re

from lex2html.constants import DANGEROUS_SCHEMES

logger = logging.getLogger(__name__)

# Browsers ignore ASCII control characters and whitespace inside a scheme
_IGNORED_URL_CHARS = re.compile(r"[\x00-\x20\x7f]")
_SCHEME_PATTERN = re.compile(r"^([a-z][a-z0-9+.\-]*):")


def is_relative_url(url: str) -> bool:
    """Check if a URL is a relative URL.

    Relative URLs do not have a scheme and typically start with #, /, ./, ../, or ?.

    Examples
    --------
    >>> is_relative_url("#section")
    True
    >>> is_relative_url("/path/to/file")
    True
    >>> is_relative_url("https://example.com")
    False

    """
    if not url or not url.strip():
        return True

    return url.strip().startswith(("#", "/", "./", "../", "?"))


def is_url_scheme_dangerous(url: str) -> bool:
    """Check if a URL uses a scheme that can execute script.

    Parameters
    ----------
    url : str
        URL to check

    Returns
    -------
    bool
        True for ``javascript:``, ``vbscript:`` and ``data:`` URLs, including
        obfuscated spellings such as ``JaVa\\tScript:``

    Examples
    --------
    >>> is_url_scheme_dangerous("https://example.com")
    False
    >>> is_url_scheme_dangerous("javascript:alert('xss')")
    True
    >>> is_url_scheme_dangerous(" java\\nscript:alert(1)")
    True
    >>> is_url_scheme_dangerous("/relative/path")
    False

    """
    if not url or not url.strip():
        return False

    normalized = _IGNORED_URL_CHARS.sub("", url).lower()
    if is_relative_url(normalized):
        return False

    match = _SCHEME_PATTERN.match(normalized)
    return bool(match) and match.group(1) in DANGEROUS_SCHEMES


def sanitize_link_url(url: str) -> str:
    """Return ``url`` stripped of surrounding whitespace, or ``""`` when unusable.

    Examples
    --------
    >>> sanitize_link_url("  https://example.com ")
    'https://example.com'
    >>> sanitize_link_url("javascript:alert(1)")
    ''

    """
    stripped = url.strip() if url else ""
    if not stripped:
        return ""

    if is_url_scheme_dangerous(stripped):
        logger.warning(f"Blocked URL with dangerous scheme (URL: {url[:100]}{'...' if len(url) > 100 else ''})")
        return ""

    return stripped
