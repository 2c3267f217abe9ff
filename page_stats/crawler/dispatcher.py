# === FILE: page_stats/crawler/dispatcher.py ===
"""Fetch dispatcher: runs one analysis per URL and joins them in input order."""
from __future__ import annotations

import asyncio
import time
from typing import List, Optional, Sequence, Tuple

from aiohttp import ClientSession

from page_stats.config import AnalyzerConfig
from page_stats.crawler.analyzer import PageAnalyzer
from page_stats.crawler.models import PageResult
from page_stats.logger import logger

__all__ = ("FetchDispatcher", "analyze")


class FetchDispatcher:
    """Concurrent batch analyzer.

    Each URL's result lands in the slot of its input index, so the returned
    list follows input order whatever order the requests complete in.  Tasks
    are never cancelled because a sibling failed.

    With ``config.concurrency`` unset every URL gets its own task at once;
    otherwise a pool of that many workers drains a shared queue.
    """

    def __init__(self, config: Optional[AnalyzerConfig] = None, session: Optional[ClientSession] = None) -> None:
        self.config = config or AnalyzerConfig()
        self._session = session
        self._analyzer: Optional[PageAnalyzer] = None

    async def __aenter__(self) -> FetchDispatcher:
        self._analyzer = PageAnalyzer(self.config, self._session)
        await self._analyzer.__aenter__()
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        if self._analyzer is not None:
            await self._analyzer.__aexit__(exc_type, exc, tb)
            self._analyzer = None

    async def analyze(self, urls: Sequence[str]) -> List[PageResult]:
        if not urls:
            return []
        if self._analyzer is None:
            raise RuntimeError("FetchDispatcher must be used as an async context manager")

        logger.info("Analyzing %d URL(s)", len(urls))
        start = time.monotonic()
        results: List[Optional[PageResult]] = [None] * len(urls)

        if self.config.concurrency is None:
            await asyncio.gather(*(self._run_one(results, i, url) for i, url in enumerate(urls)))
        else:
            await self._run_pool(results, urls, self.config.concurrency)

        duration = time.monotonic() - start
        failed = sum(1 for r in results if r is not None and not r.ok)
        logger.info("Finished %d URL(s) in %.2f s (%d failed)", len(results), duration, failed)
        return results  # type: ignore[return-value]

    async def _run_one(self, results: List[Optional[PageResult]], index: int, url: str) -> None:
        if self._analyzer is None:
            raise RuntimeError("FetchDispatcher must be used as an async context manager")
        results[index] = await self._analyzer.analyze_one(url)

    async def _run_pool(self, results: List[Optional[PageResult]], urls: Sequence[str], limit: int) -> None:
        queue: asyncio.Queue[Tuple[int, str]] = asyncio.Queue()
        for item in enumerate(urls):
            queue.put_nowait(item)
        workers = [asyncio.create_task(self._worker(queue, results)) for _ in range(min(limit, len(urls)))]
        await asyncio.gather(*workers)

    async def _worker(self, queue: asyncio.Queue[Tuple[int, str]], results: List[Optional[PageResult]]) -> None:
        while True:
            try:
                index, url = queue.get_nowait()
            except asyncio.QueueEmpty:
                return
            await self._run_one(results, index, url)


async def analyze(urls: Sequence[str], config: Optional[AnalyzerConfig] = None) -> List[PageResult]:
    """Analyze *urls* concurrently and return one result per URL, in input order."""
    if not urls:
        return []
    async with FetchDispatcher(config) as dispatcher:
        return await dispatcher.analyze(urls)
