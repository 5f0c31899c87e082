#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Configuration options for lex2html.

Options are frozen dataclasses; use ``create_updated`` (or
:func:`create_updated_options`) to derive a modified copy.
"""

from __future__ import annotations

from dataclasses import replace
from typing import Any

from lex2html.options.base import BaseRendererOptions, CloneFrozenMixin
from lex2html.options.html import HtmlRendererOptions
from lex2html.options.postprocess import PostProcessOptions


def create_updated_options(options: Any, **kwargs: Any) -> Any:
    """Create a new options instance with updated values.

    Parameters
    ----------
    options : Any
        The original options instance (must be a dataclass)
    **kwargs
        Field values to change

    Returns
    -------
    Any
        A new instance of the same class

    """
    return replace(options, **kwargs)


__all__ = [
    "BaseRendererOptions",
    "CloneFrozenMixin",
    "HtmlRendererOptions",
    "PostProcessOptions",
    "create_updated_options",
]
