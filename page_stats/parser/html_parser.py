# === FILE: page_stats/parser/html_parser.py ===
"""HTML content statistics for PageStats.

:func:`extract_stats` walks a parsed document exactly once and tallies:

* links  — every ``<a>`` element, with or without ``href``;
* images — every ``<img>`` element;
* text   — all text nodes outside ``<script>`` and ``<style>``.

Those two elements are pruned whole: the walk never descends into them, so
neither their text nor any element nested inside them is counted.  Comments,
doctypes, CDATA sections and processing instructions are not text.

:func:`count_words` collapses every whitespace run to one space before
splitting, so the way text is chunked into nodes cannot change the result.
"""
from __future__ import annotations

import re
import warnings
from collections.abc import Sequence
from dataclasses import dataclass, field
from typing import Union

from bs4 import BeautifulSoup, MarkupResemblesLocatorWarning
from bs4.builder import ParserRejectedMarkup, XMLParsedAsHTMLWarning
from bs4.element import (
    CData,
    Comment,
    Declaration,
    Doctype,
    NavigableString,
    ProcessingInstruction,
    Tag,
)

from page_stats.errors import ParseError

__all__: Sequence[str] = ("ContentStats", "extract_stats", "count_words")

_LINK_TAGS = frozenset({"a"})
_IMAGE_TAGS = frozenset({"img"})
_SKIPPED_TAGS = frozenset({"script", "style"})
_NON_TEXT = (Comment, CData, Declaration, Doctype, ProcessingInstruction)

_WHITESPACE_RE = re.compile(r"\s+")


@dataclass(frozen=True, slots=True)
class ContentStats:
    """Counts extracted from one document."""

    word_count: int = 0
    image_count: int = 0
    link_count: int = 0


@dataclass(slots=True)
class _Tally:
    """Accumulator owned by a single :func:`extract_stats` call."""

    links: int = 0
    images: int = 0
    chunks: list[str] = field(default_factory=list)

    def freeze(self) -> ContentStats:
        return ContentStats(
            word_count=count_words(" ".join(self.chunks)),
            image_count=self.images,
            link_count=self.links,
        )


def count_words(text: str) -> int:
    """Number of non-empty whitespace-delimited tokens in *text*."""
    collapsed = _WHITESPACE_RE.sub(" ", text).strip()
    if not collapsed:
        return 0
    return len(collapsed.split(" "))


def _walk(root: Tag, tally: _Tally) -> None:
    # Explicit stack: deeply nested markup must not hit the recursion limit.
    stack = list(reversed(root.contents))
    while stack:
        node = stack.pop()
        if isinstance(node, Tag):
            name = (node.name or "").lower()
            if name in _SKIPPED_TAGS:
                continue
            if name in _LINK_TAGS:
                tally.links += 1
            elif name in _IMAGE_TAGS:
                tally.images += 1
            stack.extend(reversed(node.contents))
        elif isinstance(node, NavigableString) and not isinstance(node, _NON_TEXT):
            tally.chunks.append(str(node))


def extract_stats(markup: Union[str, bytes]) -> ContentStats:
    """Parse *markup* and return its word, image and link counts.

    Bytes are handed to BeautifulSoup undecoded so it can sniff the charset.
    Raises :class:`ParseError` if the parser rejects the document.
    """
    try:
        # fetched bodies are always parsed as HTML, whatever they look like
        with warnings.catch_warnings():
            warnings.simplefilter("ignore", XMLParsedAsHTMLWarning)
            warnings.simplefilter("ignore", MarkupResemblesLocatorWarning)
            soup = BeautifulSoup(markup, "html.parser")
    except ParserRejectedMarkup as exc:
        raise ParseError.wrap(exc) from exc

    tally = _Tally()
    _walk(soup, tally)
    return tally.freeze()
