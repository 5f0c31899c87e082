#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/lex2html/utils/cloudinary.py
"""Cloudinary delivery URL helpers.

Article images uploaded through the media library are served from
Cloudinary. Cloudinary applies resizing and format negotiation through path
segments after ``/upload/``, so the renderer can request a right-sized,
auto-format variant and a responsive ``srcset`` without touching the stored
document.

URLs from any other host pass through unchanged.

"""

from __future__ import annotations

import logging
import re
from typing import Optional

from lex2html.constants import (
    CLOUDINARY_DEFAULT_FLAGS,
    CLOUDINARY_HOST_MARKER,
    CLOUDINARY_SRCSET_WIDTHS,
    CLOUDINARY_TRANSFORM_PREFIXES,
)
from lex2html.utils.html_utils import format_dimension

logger = logging.getLogger(__name__)

_CLOUD_NAME_PATTERN = re.compile(r"res\.cloudinary\.com/([^/]+)")
_UPLOAD_PATH_PATTERN = re.compile(r"/upload/(.+)$")


def is_cloudinary_url(url: str) -> bool:
    """Return True when ``url`` points at Cloudinary."""
    return CLOUDINARY_HOST_MARKER in url


def _has_transformations(path: str) -> bool:
    return "," in path or path.startswith(CLOUDINARY_TRANSFORM_PREFIXES)


def optimize_cloudinary_url(
    url: str,
    width: Optional[float] = None,
    height: Optional[float] = None,
    max_width: Optional[float] = None,
) -> str:
    """Add sizing and delivery transformations to a Cloudinary URL.

    Parameters
    ----------
    url : str
        Image URL
    width : float, optional
        Target width in pixels; takes precedence over ``max_width``
    height : float, optional
        Target height in pixels, only applied together with a width
    max_width : float, optional
        Width to request when no explicit width is known

    Returns
    -------
    str
        The rewritten URL, or ``url`` unchanged when it is not a Cloudinary
        delivery URL

    Examples
    --------
    >>> optimize_cloudinary_url("https://res.cloudinary.com/demo/image/upload/v1/cat.jpg", width=800)
    'https://res.cloudinary.com/demo/image/upload/w_800,q_auto:good,f_auto,fl_progressive,fl_strip_profile/v1/cat.jpg'

    """
    if not is_cloudinary_url(url):
        return url

    cloud_match = _CLOUD_NAME_PATTERN.search(url)
    upload_match = _UPLOAD_PATH_PATTERN.search(url)
    if not cloud_match or not upload_match:
        logger.debug("Cloudinary URL without a delivery path, leaving as is: %s", url)
        return url

    transformations: list[str] = []
    if width:
        transformations.append(f"w_{format_dimension(width)}")
    elif max_width:
        transformations.append(f"w_{format_dimension(max_width)}")

    if height and (width or max_width):
        transformations.append(f"h_{format_dimension(height)}")

    transformations.extend(CLOUDINARY_DEFAULT_FLAGS)
    transform_string = ",".join(transformations)

    existing_path = upload_match.group(1)
    if _has_transformations(existing_path):
        # Chain in front of the transformations already present
        return url.replace("/upload/", f"/upload/{transform_string},", 1)

    return f"https://res.cloudinary.com/{cloud_match.group(1)}/image/upload/{transform_string}/{existing_path}"


def generate_srcset(url: str, max_width: Optional[float] = None) -> str:
    """Build a ``srcset`` value of width-limited Cloudinary variants.

    Parameters
    ----------
    url : str
        Image URL
    max_width : float, optional
        Largest candidate width to include; all standard widths when omitted

    Returns
    -------
    str
        Comma-separated candidates (``"<url> 400w, <url> 800w"``), or an
        empty string for non-Cloudinary URLs

    """
    if not is_cloudinary_url(url):
        return ""

    candidates = [
        f"{optimize_cloudinary_url(url, width=width)} {width}w"
        for width in CLOUDINARY_SRCSET_WIDTHS
        if not max_width or width <= max_width
    ]
    return ", ".join(candidates)


__all__ = ["is_cloudinary_url", "optimize_cloudinary_url", "generate_srcset"]
