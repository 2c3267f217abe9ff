"""Per-URL failure taxonomy.

Each error wraps the low-level exception (aiohttp, asyncio, bs4) as its
``__cause__`` and ends up in :attr:`PageResult.error`; none of them is ever
raised past the task that analyses a single URL.
"""
from __future__ import annotations

__all__ = ["PageStatsError", "TransportError", "BodyReadError", "ParseError"]


class PageStatsError(Exception):
    """Base class for failures recorded on a page result."""

    @classmethod
    def wrap(cls, exc: BaseException) -> PageStatsError:
        detail = str(exc) or repr(exc)
        err = cls(f"{type(exc).__name__}: {detail}")
        err.__cause__ = exc
        return err


class TransportError(PageStatsError):
    """DNS, connection, TLS, redirect or timeout failure before a response."""


class BodyReadError(PageStatsError):
    """The response body could not be drained."""


class ParseError(PageStatsError):
    """The HTML parser rejected the markup."""
