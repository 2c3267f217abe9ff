# File: page_stats/utils.py
"""page_stats.utils: URL helpers shared by the analyzer and the CLI."""

from __future__ import annotations

from typing import Sequence

from page_stats.logger import logger

__all__: Sequence[str] = ("normalize_url", "DEFAULT_SCHEME")

DEFAULT_SCHEME = "http://"


def normalize_url(url: str) -> str:
    """Prepend ``http://`` when *url* does not start with ``http``.

    No syntax validation happens here; a malformed URL is handed to the HTTP
    client as is and fails there.
    """
    if url.startswith("http"):
        return url
    normalized = DEFAULT_SCHEME + url
    logger.debug("Normalized URL: %s -> %s", url, normalized)
    return normalized
