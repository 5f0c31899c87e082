#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Configuration options for the presentation post-processor."""

from __future__ import annotations

from dataclasses import dataclass, field

from lex2html.constants import (
    DEFAULT_IMAGE_CLASS,
    DEFAULT_IMAGE_ENHANCE_CLASSES,
    DEFAULT_POSTPROCESS_CACHE_SIZE,
    DEFAULT_PROCESSED_ATTRIBUTE,
    DEFAULT_TABLE_WRAPPER_CLASSES,
)
from lex2html.options.base import CloneFrozenMixin


@dataclass(frozen=True)
class PostProcessOptions(CloneFrozenMixin):
    """Options for the read-time image and table pass.

    Parameters
    ----------
    image_class : str, default "lexical-image"
        Class that selects images for normalization
    image_classes : tuple of str, default ("w-full", "h-auto")
        Classes added to each normalized image
    wrapper_classes : tuple of str
        Classes of the scroll container put around tables; the first one is
        the marker checked on a table's parent
    processed_attribute : str, default "data-processed"
        Attribute that marks an image as already normalized
    cache_size : int, default 128
        Number of distinct content payloads remembered by
        :class:`~lex2html.postprocess.PresentationPostProcessor`

    """

    image_class: str = field(
        default=DEFAULT_IMAGE_CLASS,
        metadata={"help": "Class selecting images to normalize", "importance": "advanced"},
    )
    image_classes: tuple[str, ...] = field(
        default=DEFAULT_IMAGE_ENHANCE_CLASSES,
        metadata={"help": "Classes added to normalized images", "importance": "advanced"},
    )
    wrapper_classes: tuple[str, ...] = field(
        default=DEFAULT_TABLE_WRAPPER_CLASSES,
        metadata={"help": "Classes of the table scroll wrapper", "importance": "advanced"},
    )
    processed_attribute: str = field(
        default=DEFAULT_PROCESSED_ATTRIBUTE,
        metadata={"help": "Attribute marking processed images", "importance": "advanced"},
    )
    cache_size: int = field(
        default=DEFAULT_POSTPROCESS_CACHE_SIZE,
        metadata={"help": "Distinct payloads kept in the post-processing memo", "type": int},
    )

    def __post_init__(self) -> None:
        """Validate option values.

        Raises
        ------
        ValueError
            If any field value is outside its valid range.

        """
        if not self.wrapper_classes:
            raise ValueError("wrapper_classes must contain at least the marker class")
        if self.cache_size <= 0:
            raise ValueError(f"cache_size must be positive, got {self.cache_size}")

    @property
    def wrapper_marker(self) -> str:
        """Class that identifies an existing table wrapper."""
        return self.wrapper_classes[0]
