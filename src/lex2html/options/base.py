#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/lex2html/options/base.py
"""Shared behaviour of the frozen option dataclasses."""

from __future__ import annotations

import sys
from dataclasses import dataclass, field, replace
from typing import Any

if sys.version_info >= (3, 11):
    from typing import Self
else:
    from typing_extensions import Self

from lex2html.constants import DEFAULT_FAIL_ON_UNKNOWN_NODES


@dataclass(frozen=True)
class CloneFrozenMixin:
    """Copy-with-changes for frozen option dataclasses.

    Options are shared between threads and renders, so they are never
    mutated; a variant is derived instead:

        >>> from lex2html.options import HtmlRendererOptions
        >>> HtmlRendererOptions().create_updated(lazy_images=False).lazy_images
        False

    """

    def create_updated(self, **kwargs: Any) -> Self:
        """Return a copy with the given fields replaced.

        Parameters
        ----------
        **kwargs : Any
            Fields to change

        Returns
        -------
        Self
            The new, validated instance

        Raises
        ------
        ValueError
            If a new value fails the class validation

        """
        return replace(self, **kwargs)


@dataclass(frozen=True)
class BaseRendererOptions(CloneFrozenMixin):
    """Options common to every renderer.

    Parameters
    ----------
    fail_on_unknown_nodes : bool, default=False
        Raise RenderingError when a node of an unrecognized kind is met.
        If False (default), such nodes render as nothing and their siblings
        render normally.

    """

    fail_on_unknown_nodes: bool = field(
        default=DEFAULT_FAIL_ON_UNKNOWN_NODES,
        metadata={
            "help": "Raise RenderingError on unknown node kinds instead of skipping them",
            "importance": "advanced",
        },
    )
