# page_stats/crawler/analyzer.py
"""
Page analyzer: fetches one URL, times it and counts its content.
"""
from __future__ import annotations

import asyncio
import time
from typing import Optional

from aiohttp import ClientError, ClientSession, ClientTimeout

from page_stats.config import AnalyzerConfig
from page_stats.crawler.models import PageResult
from page_stats.errors import BodyReadError, ParseError, TransportError
from page_stats.logger import logger
from page_stats.parser.html_parser import extract_stats
from page_stats.utils import normalize_url


def build_session(config: AnalyzerConfig) -> ClientSession:
    """Create the session shared by every request of a batch."""
    headers = {"User-Agent": config.user_agent} if config.user_agent else None
    return ClientSession(
        timeout=ClientTimeout(total=config.timeout),
        headers=headers,
        raise_for_status=False,
    )


class PageAnalyzer:
    """Turns a single URL into a :class:`PageResult`.

    Every failure is recorded on the result; :meth:`analyze_one` never raises
    for network, body or markup problems.
    """

    def __init__(self, config: AnalyzerConfig, session: Optional[ClientSession] = None) -> None:
        self.config = config
        self.session = session
        self._owns_session = session is None

    async def __aenter__(self) -> PageAnalyzer:
        if self.session is None:
            self.session = build_session(self.config)
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        if self._owns_session and self.session and not self.session.closed:
            await self.session.close()

    async def analyze_one(self, url: str) -> PageResult:
        if self.session is None:
            raise RuntimeError("Session not initialized")
        url = normalize_url(url)

        start = time.perf_counter()
        try:
            async with self.session.get(url) as resp:
                # headers are in once the context is entered
                elapsed = time.perf_counter() - start
                status = resp.status
                logger.debug("GET %s -> %d in %.3f s", url, status, elapsed)
                try:
                    body = await resp.read()
                except (ClientError, asyncio.TimeoutError) as exc:
                    logger.warning("Failed reading body of %s: %s", url, exc)
                    return PageResult(url=url, error=BodyReadError.wrap(exc))
        except (ClientError, asyncio.TimeoutError, ValueError) as exc:
            # yarl raises a bare ValueError for some unparsable URLs
            logger.warning("Failed %s: %s", url, exc)
            return PageResult(url=url, error=TransportError.wrap(exc))

        try:
            stats = extract_stats(body)
        except ParseError as exc:
            logger.warning("Failed parsing %s: %s", url, exc)
            return PageResult(url=url, status_code=status, response_time=elapsed, error=exc)

        return PageResult(
            url=url,
            word_count=stats.word_count,
            image_count=stats.image_count,
            link_count=stats.link_count,
            status_code=status,
            response_time=elapsed,
        )
