#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/lex2html/postprocess.py
"""Read-time presentation pass over rendered article markup.

Once the serialized HTML is mounted, two adjustments make it behave on
narrow screens:

- images carrying the renderer's marker class are made fluid (``max-width:
  100%`` unless the document set one, ``height: auto``, utility classes)
  and tagged ``data-processed="true"`` so they are never touched twice;
- top-level tables are wrapped in a horizontally scrolling container,
  unless their parent already is one.

Both passes only add to the markup, so running them again leaves it
byte-identical. The functions here operate on a parsed BeautifulSoup tree;
:func:`enhance_html` and :class:`PresentationPostProcessor` accept and
return strings.

"""

from __future__ import annotations

import hashlib
import logging
import threading
from collections import OrderedDict
from typing import Optional, Union

from bs4 import BeautifulSoup
from bs4.element import Tag

from lex2html.options.postprocess import PostProcessOptions

logger = logging.getLogger(__name__)

MarkupRoot = Union[BeautifulSoup, Tag]


def _class_list(tag: Tag) -> list[str]:
    value = tag.get("class")
    if value is None:
        return []
    if isinstance(value, str):
        return value.split()
    return list(value)


def _parse_style(style: str) -> list[tuple[str, str]]:
    declarations: list[tuple[str, str]] = []
    for declaration in style.split(";"):
        name, sep, value = declaration.partition(":")
        name = name.strip().lower()
        if sep and name:
            declarations.append((name, value.strip()))
    return declarations


def _set_style_property(declarations: list[tuple[str, str]], name: str, value: str) -> None:
    for index, (existing, _) in enumerate(declarations):
        if existing == name:
            declarations[index] = (name, value)
            return
    declarations.append((name, value))


def _owning_soup(root: MarkupRoot) -> BeautifulSoup:
    node: Optional[Tag] = root
    while node is not None and not isinstance(node, BeautifulSoup):
        node = node.parent
    # A detached tag has no soup to create elements with
    return node if node is not None else BeautifulSoup("", "html.parser")


def enhance_images(root: MarkupRoot, options: Optional[PostProcessOptions] = None) -> None:
    """Make rendered article images fluid.

    Every ``img`` with the marker class and without the processed attribute
    gets ``max-width: 100%`` (only when its style has no ``max-width``),
    ``height: auto``, the configured utility classes and the processed
    attribute.

    Parameters
    ----------
    root : BeautifulSoup or Tag
        Parsed markup, modified in place
    options : PostProcessOptions, optional
        Class names and marker attribute to use

    """
    options = options or PostProcessOptions()
    processed = 0

    for img in root.find_all("img", class_=options.image_class):
        if img.has_attr(options.processed_attribute):
            continue

        declarations = _parse_style(str(img.get("style", "")))
        if not any(name == "max-width" for name, _ in declarations):
            declarations.append(("max-width", "100%"))
        _set_style_property(declarations, "height", "auto")
        img["style"] = "; ".join(f"{name}: {value}" for name, value in declarations)

        classes = _class_list(img)
        classes.extend(cls for cls in options.image_classes if cls not in classes)
        img["class"] = classes

        img[options.processed_attribute] = "true"
        processed += 1

    logger.debug("Enhanced %d image(s)", processed)


def wrap_tables(root: MarkupRoot, options: Optional[PostProcessOptions] = None) -> None:
    """Wrap top-level tables in a horizontally scrolling container.

    Tables nested in another table are left alone, as are tables whose
    immediate parent already carries the wrapper marker class.

    Parameters
    ----------
    root : BeautifulSoup or Tag
        Parsed markup, modified in place
    options : PostProcessOptions, optional
        Wrapper classes to use

    """
    options = options or PostProcessOptions()
    soup = _owning_soup(root)
    wrapped = 0

    for table in root.find_all("table"):
        if table.find_parent("table") is not None:
            continue

        parent = table.parent
        if isinstance(parent, Tag) and options.wrapper_marker in _class_list(parent):
            continue

        wrapper = soup.new_tag("div", attrs={"class": " ".join(options.wrapper_classes)})
        table.wrap(wrapper)
        wrapped += 1

    logger.debug("Wrapped %d table(s)", wrapped)


def enhance_content(root: MarkupRoot, options: Optional[PostProcessOptions] = None) -> None:
    """Run the image and table passes over ``root``; nothing to do is a no-op."""
    enhance_images(root, options)
    wrap_tables(root, options)


def enhance_html(html: str, options: Optional[PostProcessOptions] = None) -> str:
    """Parse ``html``, run :func:`enhance_content` and serialize the result.

    Parameters
    ----------
    html : str
        Article markup, usually the output of :func:`~lex2html.serialize`
    options : PostProcessOptions, optional
        Post-processing options

    Returns
    -------
    str
        The enhanced markup. Void elements come back in BeautifulSoup's
        ``<img .../>`` form, so the first pass may normalize markup it did
        not otherwise change; later passes are byte-identical.

    Examples
    --------
    >>> enhance_html("<table><tr><td>1</td></tr></table>")
    '<div class="table-wrapper overflow-x-auto my-4 sm:my-6"><table><tr><td>1</td></tr></table></div>'

    """
    if not html:
        return ""

    soup = BeautifulSoup(html, "html.parser")
    enhance_content(soup, options)
    return str(soup)


class PresentationPostProcessor:
    """Run the presentation pass once per distinct content payload.

    Results are memoized by the SHA-256 digest of the input markup in a
    bounded least-recently-used map, so re-rendering the same article does
    not re-parse it. The memo is the only shared state and is guarded by a
    lock; instances can be shared between threads.

    Parameters
    ----------
    options : PostProcessOptions, optional
        Post-processing options; ``cache_size`` bounds the memo

    Examples
    --------
    >>> processor = PresentationPostProcessor()
    >>> first = processor.process("<table></table>")
    >>> processor.process("<table></table>") is first
    True

    """

    def __init__(self, options: Optional[PostProcessOptions] = None):
        self.options = options or PostProcessOptions()
        self._cache: OrderedDict[str, str] = OrderedDict()
        self._lock = threading.Lock()

    def process(self, html: str) -> str:
        """Return the enhanced form of ``html``, computing it at most once per payload."""
        key = hashlib.sha256(html.encode("utf-8")).hexdigest()

        with self._lock:
            cached = self._cache.get(key)
            if cached is not None:
                self._cache.move_to_end(key)
                return cached

        enhanced = enhance_html(html, self.options)

        with self._lock:
            # Another thread may have stored the same payload meanwhile
            existing = self._cache.setdefault(key, enhanced)
            self._cache.move_to_end(key)
            while len(self._cache) > self.options.cache_size:
                self._cache.popitem(last=False)
        return existing

    def clear(self) -> None:
        """Forget all memoized payloads."""
        with self._lock:
            self._cache.clear()

    def __len__(self) -> int:
        with self._lock:
            return len(self._cache)


__all__ = [
    "PresentationPostProcessor",
    "enhance_content",
    "enhance_html",
    "enhance_images",
    "wrap_tables",
]
