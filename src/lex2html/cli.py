#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/lex2html/cli.py
"""Command-line interface for lex2html.

Renders a stored DocumentState JSON file to HTML::

    lex2html article.json -o article.html --enhance --read-time
    cat article.json | lex2html - --rich

Unlike :func:`lex2html.serialize`, the command line reports malformed input
instead of printing an empty document.
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Optional

from rich.console import Console
from rich.syntax import Syntax

from lex2html import __version__
from lex2html.ast.serialization import load_document_state
from lex2html.exceptions import DocumentStateError, Lex2HtmlError, ValidationError
from lex2html.logging_utils import configure_logging
from lex2html.options.html import HtmlRendererOptions
from lex2html.postprocess import enhance_html
from lex2html.renderers.base import BaseRenderer
from lex2html.renderers.html import HtmlRenderer
from lex2html.serializer import estimate_read_time

logger = logging.getLogger(__name__)

EXIT_SUCCESS = 0
EXIT_ERROR = 1
EXIT_VALIDATION_ERROR = 3
EXIT_FILE_ERROR = 4


def create_parser() -> argparse.ArgumentParser:
    """Create and configure the argument parser."""
    parser = argparse.ArgumentParser(
        prog="lex2html",
        description="Render an editor DocumentState (JSON) to safe article HTML.",
    )
    parser.add_argument(
        "input",
        nargs="?",
        default="-",
        help="DocumentState JSON file, or '-' to read from stdin (default)",
    )
    parser.add_argument("--out", "-o", type=str, help="Write HTML to this file instead of stdout")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")

    render_group = parser.add_argument_group("rendering")
    render_group.add_argument(
        "--enhance",
        action="store_true",
        help="Apply the presentation pass (fluid images, scrollable tables)",
    )
    render_group.add_argument(
        "--no-lazy-images",
        dest="lazy_images",
        action="store_false",
        help="Do not add loading=lazy / decoding=async to images",
    )
    render_group.add_argument(
        "--no-cloudinary",
        dest="optimize_cloudinary_images",
        action="store_false",
        help="Leave Cloudinary image URLs untouched",
    )
    render_group.add_argument(
        "--no-text-styles",
        dest="preserve_text_styles",
        action="store_false",
        help="Drop inline CSS stored on text runs",
    )
    render_group.add_argument(
        "--fail-on-unknown-nodes",
        action="store_true",
        help="Exit with an error on node kinds the renderer does not know",
    )

    report_group = parser.add_argument_group("reporting")
    report_group.add_argument("--read-time", action="store_true", help="Print the read-time estimate to stderr")
    report_group.add_argument(
        "--chars-per-minute",
        type=int,
        default=None,
        help="Reading speed used for the read-time estimate (default: 500)",
    )
    report_group.add_argument("--rich", action="store_true", help="Pretty-print the HTML with syntax highlighting")

    log_group = parser.add_argument_group("logging")
    log_group.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        default="WARNING",
        help="Logging level (default: WARNING)",
    )
    log_group.add_argument("--log-file", type=str, help="Also write log messages to this file")
    log_group.add_argument("--trace", action="store_true", help="Debug logging with timestamps")

    return parser


def get_exit_code_for_exception(exception: Exception) -> int:
    """Map an exception to an appropriate CLI exit code.

    Parameters
    ----------
    exception : Exception
        The exception to map to an exit code

    Returns
    -------
    int
        The appropriate exit code for the exception type

    """
    if isinstance(exception, (ValidationError, DocumentStateError, ValueError, RecursionError)):
        return EXIT_VALIDATION_ERROR

    if isinstance(exception, OSError):
        return EXIT_FILE_ERROR

    return EXIT_ERROR


def _setup_logging_level(parsed_args: argparse.Namespace) -> None:
    # --trace takes precedence over --log-level
    log_level = logging.DEBUG if parsed_args.trace else getattr(logging, parsed_args.log_level)
    configure_logging(
        log_level, log_file=parsed_args.log_file, trace_mode=parsed_args.trace, rich_console=parsed_args.rich
    )


def _read_input(source: str) -> str:
    if source == "-":
        return sys.stdin.read()
    return Path(source).read_text(encoding="utf-8")


def _build_options(parsed_args: argparse.Namespace) -> HtmlRendererOptions:
    overrides = {
        "lazy_images": parsed_args.lazy_images,
        "optimize_cloudinary_images": parsed_args.optimize_cloudinary_images,
        "preserve_text_styles": parsed_args.preserve_text_styles,
        "fail_on_unknown_nodes": parsed_args.fail_on_unknown_nodes,
    }
    if parsed_args.chars_per_minute is not None:
        overrides["chars_per_minute"] = parsed_args.chars_per_minute
    return HtmlRendererOptions(**overrides)


def _print_rich(html: str) -> None:
    console = Console()
    console.print(Syntax(html, "html", theme="monokai", word_wrap=True))


def convert(parsed_args: argparse.Namespace) -> int:
    """Run one conversion for parsed arguments and return the exit code.

    Parameters
    ----------
    parsed_args : argparse.Namespace
        Arguments from :func:`create_parser`

    Returns
    -------
    int
        Exit code

    """
    options = _build_options(parsed_args)
    raw = _read_input(parsed_args.input)
    document = load_document_state(raw)
    html = HtmlRenderer(options).render_to_string(document)
    read_time = estimate_read_time(html, options.chars_per_minute)

    if parsed_args.enhance:
        html = enhance_html(html)

    if parsed_args.out:
        BaseRenderer.write_text_output(html, parsed_args.out)
        logger.info(f"Wrote {len(html)} characters to {parsed_args.out}")
    elif parsed_args.rich:
        _print_rich(html)
    else:
        print(html)

    if parsed_args.read_time:
        print(f"Read time: {read_time} min", file=sys.stderr)

    return EXIT_SUCCESS


def main(args: Optional[list[str]] = None) -> int:
    """Execute the CLI entry point.

    Parameters
    ----------
    args : list of str, optional
        Command-line arguments; ``sys.argv[1:]`` when omitted

    Returns
    -------
    int
        Process exit code

    """
    parser = create_parser()
    parsed_args = parser.parse_args(args)
    _setup_logging_level(parsed_args)

    try:
        return convert(parsed_args)
    except (Lex2HtmlError, ValueError, OSError, RecursionError) as e:
        exit_code = get_exit_code_for_exception(e)
        logger.debug("Conversion failed", exc_info=True)
        print(f"Error: {e}", file=sys.stderr)
        return exit_code


__all__ = [
    "EXIT_ERROR",
    "EXIT_FILE_ERROR",
    "EXIT_SUCCESS",
    "EXIT_VALIDATION_ERROR",
    "convert",
    "create_parser",
    "get_exit_code_for_exception",
    "main",
]
