#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/lex2html/constants.py
"""Constants and default values for lex2html.

This module centralizes the format-flag vocabulary of the editor document
model together with the default values used by the renderer, the serializer
and the presentation post-processor.

"""

from __future__ import annotations

from enum import IntFlag


class TextFormat(IntFlag):
    """Inline format bits carried by ``text`` nodes.

    The values match the bitmask written by the editor, so a stored
    ``format`` integer converts directly with ``TextFormat(value)``.
    Bits above ``SUPERSCRIPT`` are not part of the vocabulary and are
    ignored by the formatter.
    """

    NONE = 0
    BOLD = 1
    ITALIC = 2
    STRIKETHROUGH = 4
    UNDERLINE = 8
    CODE = 16
    SUBSCRIPT = 32
    SUPERSCRIPT = 64


KNOWN_FORMAT_MASK = (
    TextFormat.BOLD
    | TextFormat.ITALIC
    | TextFormat.STRIKETHROUGH
    | TextFormat.UNDERLINE
    | TextFormat.CODE
    | TextFormat.SUBSCRIPT
    | TextFormat.SUPERSCRIPT
)

# Innermost first; each tag wraps the result of the previous one.
FORMAT_TAG_ORDER: tuple[tuple[TextFormat, str], ...] = (
    (TextFormat.CODE, "code"),
    (TextFormat.BOLD, "strong"),
    (TextFormat.ITALIC, "em"),
    (TextFormat.STRIKETHROUGH, "s"),
    (TextFormat.UNDERLINE, "u"),
    (TextFormat.SUBSCRIPT, "sub"),
    (TextFormat.SUPERSCRIPT, "sup"),
)

# Node kind discriminants
KIND_ROOT = "root"
KIND_PARAGRAPH = "paragraph"
KIND_HEADING = "heading"
KIND_QUOTE = "quote"
KIND_LIST = "list"
KIND_LIST_ITEM = "listitem"
KIND_CODE = "code"
KIND_HORIZONTAL_RULE = "horizontalrule"
KIND_TABLE = "table"
KIND_TABLE_ROW = "tablerow"
KIND_TABLE_CELL = "tablecell"
KIND_IMAGE = "image"
KIND_LINK = "link"
KIND_LINE_BREAK = "linebreak"
KIND_TAB = "tab"
KIND_TEXT = "text"

# Editor-native names that map onto one of the kinds above. "codehighlight" is a
# whole code block, "code-highlight" a single highlighted run inside one.
KIND_ALIASES: dict[str, str] = {
    "codehighlight": KIND_CODE,
    "code-highlight": KIND_TEXT,
    "autolink": KIND_LINK,
}

# Lexical list types
LIST_TYPE_NUMBER = "number"
LIST_TYPE_CHECK = "check"

CHECKBOX_CHECKED = "&#9745; "
CHECKBOX_UNCHECKED = "&#9744; "

# Rendering defaults
DEFAULT_IMAGE_CLASS = "lexical-image"
DEFAULT_BLANK_TARGET_REL = "noopener noreferrer"
DEFAULT_LAZY_IMAGES = True
DEFAULT_OPTIMIZE_CLOUDINARY_IMAGES = True
DEFAULT_PRESERVE_TEXT_STYLES = True
DEFAULT_FAIL_ON_UNKNOWN_NODES = False

# Read-time estimate: rendered characters per minute
DEFAULT_CHARS_PER_MINUTE = 500
MIN_READ_TIME_MINUTES = 1

# Presentation post-processing defaults
DEFAULT_TABLE_WRAPPER_CLASSES: tuple[str, ...] = ("table-wrapper", "overflow-x-auto", "my-4", "sm:my-6")
DEFAULT_IMAGE_ENHANCE_CLASSES: tuple[str, ...] = ("w-full", "h-auto")
DEFAULT_PROCESSED_ATTRIBUTE = "data-processed"
DEFAULT_POSTPROCESS_CACHE_SIZE = 128

# Cloudinary image optimisation
CLOUDINARY_HOST_MARKER = "cloudinary.com"
CLOUDINARY_DEFAULT_MAX_WIDTH = 1200
CLOUDINARY_SRCSET_WIDTHS: tuple[int, ...] = (400, 800, 1200, 1600, 2000)
CLOUDINARY_DEFAULT_FLAGS: tuple[str, ...] = ("q_auto:good", "f_auto", "fl_progressive", "fl_strip_profile")
CLOUDINARY_TRANSFORM_PREFIXES: tuple[str, ...] = (
    "w_",
    "h_",
    "q_",
    "c_",
    "f_",
    "fl_",
    "ar_",
    "b_",
    "bo_",
    "dpr_",
    "e_",
    "g_",
    "l_",
    "o_",
    "r_",
    "t_",
    "u_",
    "x_",
    "y_",
    "z_",
)
DEFAULT_IMAGE_SIZES = "(max-width: 768px) 100vw, (max-width: 1200px) 80vw, {width}px"

# URL schemes that never become a link target
DANGEROUS_SCHEMES = frozenset({"javascript", "vbscript", "data"})
