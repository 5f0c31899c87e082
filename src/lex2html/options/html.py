#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Configuration options for rendering editor documents to HTML.

This module defines the options that control how the node renderer builds
article markup and how the serializer derives the read-time estimate.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from lex2html.constants import (
    DEFAULT_BLANK_TARGET_REL,
    DEFAULT_CHARS_PER_MINUTE,
    DEFAULT_IMAGE_CLASS,
    DEFAULT_LAZY_IMAGES,
    DEFAULT_OPTIMIZE_CLOUDINARY_IMAGES,
    DEFAULT_PRESERVE_TEXT_STYLES,
)
from lex2html.options.base import BaseRendererOptions


# src/lex2html/options/html.py
@dataclass(frozen=True)
class HtmlRendererOptions(BaseRendererOptions):
    """Configuration options for rendering a document tree to HTML.

    Parameters
    ----------
    image_class : str, default "lexical-image"
        Marker class attached to every rendered image. The presentation
        post-processor selects images by this class.
    lazy_images : bool, default True
        Add ``loading="lazy"`` and ``decoding="async"`` to images.
    optimize_cloudinary_images : bool, default True
        Rewrite Cloudinary image URLs with size/quality transformations and
        add a responsive ``srcset``. Other hosts are left untouched.
    preserve_text_styles : bool, default True
        Keep the editor's inline CSS on text runs as a ``<span style>``.
    blank_target_rel : str, default "noopener noreferrer"
        Tokens that every ``target="_blank"`` link must carry in ``rel``.
    chars_per_minute : int, default 500
        Rendered characters per minute of reading, used by the read-time
        estimate.

    Examples
    --------
    Plain markup without lazy loading or CDN rewriting:
        >>> options = HtmlRendererOptions(lazy_images=False, optimize_cloudinary_images=False)

    """

    image_class: str = field(
        default=DEFAULT_IMAGE_CLASS,
        metadata={"help": "CSS class attached to every rendered image", "importance": "advanced"},
    )
    lazy_images: bool = field(
        default=DEFAULT_LAZY_IMAGES,
        metadata={
            "help": "Add loading=lazy and decoding=async to images",
            "cli_name": "no-lazy-images",
            "importance": "core",
        },
    )
    optimize_cloudinary_images: bool = field(
        default=DEFAULT_OPTIMIZE_CLOUDINARY_IMAGES,
        metadata={
            "help": "Rewrite Cloudinary image URLs and add responsive srcset",
            "cli_name": "no-cloudinary",
            "importance": "core",
        },
    )
    preserve_text_styles: bool = field(
        default=DEFAULT_PRESERVE_TEXT_STYLES,
        metadata={"help": "Keep inline CSS stored on text runs", "importance": "advanced"},
    )
    blank_target_rel: str = field(
        default=DEFAULT_BLANK_TARGET_REL,
        metadata={"help": "rel tokens enforced on target=_blank links", "importance": "security"},
    )
    chars_per_minute: int = field(
        default=DEFAULT_CHARS_PER_MINUTE,
        metadata={"help": "Rendered characters per minute for the read-time estimate", "type": int},
    )

    def __post_init__(self) -> None:
        """Validate option values.

        Raises
        ------
        ValueError
            If any field value is outside its valid range.

        """
        if self.chars_per_minute <= 0:
            raise ValueError(f"chars_per_minute must be positive, got {self.chars_per_minute}")
        if not self.image_class.strip():
            raise ValueError("image_class must not be empty")
        rel_tokens = self.blank_target_rel.split()
        if "noopener" not in rel_tokens:
            raise ValueError(f"blank_target_rel must include 'noopener', got {self.blank_target_rel!r}")
