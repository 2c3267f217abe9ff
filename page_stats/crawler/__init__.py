"""Concurrent fetch-and-count pipeline."""
from page_stats.crawler.analyzer import PageAnalyzer
from page_stats.crawler.dispatcher import FetchDispatcher, analyze
from page_stats.crawler.models import PageResult

__all__ = ["PageAnalyzer", "FetchDispatcher", "PageResult", "analyze"]
