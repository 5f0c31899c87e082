#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/lex2html/exceptions.py
"""Exceptions raised by lex2html.

Exception Hierarchy
-------------------
- Lex2HtmlError (base exception)

  - ValidationError (a caller passed a bad argument or option)
    - InvalidOptionsError (options object of the wrong class)

  - DocumentStateError (stored state is not loadable JSON or has no root)

  - RenderingError (strict rendering met a node it cannot render)

Notes
-----
:func:`lex2html.serialize` never lets these escape: a document that cannot
be loaded or rendered yields an empty result. The loader and the renderer
raise them so that the CLI and strict callers can report the cause.

"""

from typing import Any


class Lex2HtmlError(Exception):
    """Root of every error raised by this package.

    Parameters
    ----------
    message : str
        What went wrong, suitable for showing to a CMS editor or in a log
    original_error : Exception, optional
        Lower-level exception (JSON decode error, type error) behind this one

    Attributes
    ----------
    message : str
        The error message
    original_error : Exception or None
        The underlying exception, when there is one

    """

    def __init__(self, message: str, original_error: Exception | None = None):
        super().__init__(message)
        self.message = message
        self.original_error = original_error


class ValidationError(Lex2HtmlError):
    """A caller-supplied argument or option is not acceptable.

    Parameters
    ----------
    message : str
        Which argument is wrong and why
    parameter_name : str, optional
        Name of the offending argument
    parameter_value : any, optional
        Value that was rejected
    original_error : Exception, optional
        Lower-level exception behind this one

    """

    def __init__(
        self,
        message: str,
        parameter_name: str | None = None,
        parameter_value: Any = None,
        original_error: Exception | None = None,
    ):
        super().__init__(message, original_error=original_error)
        self.parameter_name = parameter_name
        self.parameter_value = parameter_value


class InvalidOptionsError(ValidationError):
    """A renderer was given an options object meant for something else.

    Passing :class:`~lex2html.options.PostProcessOptions` to
    :class:`~lex2html.renderers.html.HtmlRenderer` is the typical case.

    Parameters
    ----------
    renderer_name : str
        Short name of the renderer (``"html"``)
    expected_type : type
        Options class the renderer accepts
    received_type : type
        Class of the object actually passed
    message : str, optional
        Overrides the generated message

    """

    def __init__(
        self,
        renderer_name: str,
        expected_type: type,
        received_type: type,
        message: str | None = None,
        original_error: Exception | None = None,
    ):
        if message is None:
            message = (
                f"{renderer_name} renderer takes {expected_type.__name__}, "
                f"got {received_type.__name__}"
            )
        super().__init__(
            message, parameter_name="options", parameter_value=received_type, original_error=original_error
        )
        self.renderer_name = renderer_name
        self.expected_type = expected_type
        self.received_type = received_type


class DocumentStateError(Lex2HtmlError):
    """Stored editor state cannot be turned into a document tree.

    Covers JSON that does not parse, a top-level value that is not an
    object, and documents without a ``root`` node.

    Parameters
    ----------
    message : str
        Description of the problem
    original_error : Exception, optional
        The decode error, when the JSON itself was invalid

    """


class RenderingError(Lex2HtmlError):
    """Strict rendering met a node it has no output for.

    Only raised by :class:`~lex2html.renderers.html.HtmlRenderer` when
    ``fail_on_unknown_nodes`` is enabled.

    Parameters
    ----------
    message : str
        Description of the failure
    node_kind : str, optional
        Kind string of the node, as stored in the document
    original_error : Exception, optional
        Lower-level exception behind this one

    """

    def __init__(self, message: str, node_kind: str | None = None, original_error: Exception | None = None):
        super().__init__(message, original_error=original_error)
        self.node_kind = node_kind


__all__ = [
    "Lex2HtmlError",
    "ValidationError",
    "InvalidOptionsError",
    "DocumentStateError",
    "RenderingError",
]
