# === FILE: page_stats/scanner.py ===
"""
Wrapper module around the batch analysis entry point.
"""
from typing import List, Optional, Sequence

from page_stats.config import AnalyzerConfig
from page_stats.crawler.dispatcher import analyze
from page_stats.crawler.models import PageResult


async def start_scan(urls: Sequence[str], cfg: Optional[AnalyzerConfig] = None) -> List[PageResult]:
    """
    Run the fetch dispatcher for *urls* and return its results.

    Parameters
    ----------
    urls : Sequence[str]
        URLs as given on the command line; normalized by the analyzer.
    cfg : AnalyzerConfig, optional
        Analyzer settings; defaults when omitted.

    Returns
    -------
    List[PageResult]
        One result per URL, in input order.
    """
    return await analyze(list(urls), cfg)

__all__ = ["start_scan"]
