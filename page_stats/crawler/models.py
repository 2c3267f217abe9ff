# page_stats/crawler/models.py
"""
Data models for the PageStats pipeline.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Optional

from page_stats.errors import PageStatsError


@dataclass(frozen=True, slots=True)
class PageResult:
    """Statistics for one requested URL, or the error that prevented them.

    ``response_time`` is in seconds and stops when response headers arrive.
    ``status_code`` and ``response_time`` stay at zero when no response was received.
    """

    url: str
    word_count: int = 0
    image_count: int = 0
    link_count: int = 0
    status_code: int = 0
    response_time: float = 0.0
    error: Optional[PageStatsError] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    def to_dict(self) -> Dict[str, Any]:
        error = None
        if self.error is not None:
            error = {"type": type(self.error).__name__, "message": str(self.error)}
        return {
            "url": self.url,
            "word_count": self.word_count,
            "image_count": self.image_count,
            "link_count": self.link_count,
            "status_code": self.status_code,
            "response_time": self.response_time,
            "error": error,
        }
