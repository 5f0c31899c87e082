#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/lex2html/renderers/base.py
"""Base classes for document renderers.

This module defines the abstract base class that renderers inherit from and
the mixin that captures the output of child nodes as a string.

"""

from __future__ import annotations

from abc import ABC, abstractmethod
from io import TextIOBase
from pathlib import Path
from typing import IO, Union

from lex2html.ast.nodes import Document, Node
from lex2html.exceptions import InvalidOptionsError
from lex2html.options.base import BaseRendererOptions


class BaseRenderer(ABC):
    """Abstract base class for document renderers.

    Parameters
    ----------
    options : BaseRendererOptions or None, default = None
        Format-specific rendering options

    """

    def __init__(self, options: BaseRendererOptions | None = None):
        """Initialize the renderer with optional configuration."""
        self.options = options

    @abstractmethod
    def render_to_string(self, doc: Document) -> str:
        """Render the document to a string.

        Parameters
        ----------
        doc : Document
            Root node to render

        Returns
        -------
        str
            Rendered document

        """
        pass

    def render(self, doc: Document, output: Union[str, Path, IO[bytes], IO[str]]) -> None:
        """Render the document and write it to ``output``.

        Parameters
        ----------
        doc : Document
            Root node to render
        output : str, Path, IO[bytes] or IO[str]
            File path or open file-like object

        """
        self.write_text_output(self.render_to_string(doc), output)

    @staticmethod
    def _validate_options_type(options: BaseRendererOptions | None, expected_type: type, renderer_name: str) -> None:
        """Validate that options are of the correct type for this renderer.

        Raises
        ------
        InvalidOptionsError
            If options are not None and not an instance of expected_type

        """
        if options is not None and not isinstance(options, expected_type):
            raise InvalidOptionsError(
                renderer_name=renderer_name,
                expected_type=expected_type,
                received_type=type(options),
            )

    @staticmethod
    def write_text_output(text: str, output: Union[str, Path, IO[bytes], IO[str]]) -> None:
        """Write text to a file path or stream, encoding for binary streams.

        Examples
        --------
        >>> from io import BytesIO
        >>> buffer = BytesIO()
        >>> BaseRenderer.write_text_output("<p>Hi</p>", buffer)
        >>> buffer.getvalue()
        b'<p>Hi</p>'

        """
        if isinstance(output, (str, Path)):
            Path(output).write_text(text, encoding="utf-8")
        elif isinstance(output, TextIOBase) or "b" not in getattr(output, "mode", "b"):
            output.write(text)  # type: ignore[arg-type]
        else:
            output.write(text.encode("utf-8"))  # type: ignore[arg-type]


class InlineContentMixin:
    """Mixin capturing the rendered output of child nodes as a string.

    The implementing class must have:
    - A ``_output`` attribute (list[str]) for accumulating output
    - Visitor methods that append to ``_output``

    """

    _output: list[str]

    def _render_children(self, children: list[Node]) -> str:
        """Render ``children`` in order and return their concatenated output.

        The current output buffer is saved and restored around the call, so
        this is safe to use at any nesting depth.

        """
        saved_output = self._output
        self._output = []

        for node in children:
            node.accept(self)

        result = "".join(self._output)
        self._output = saved_output
        return result
