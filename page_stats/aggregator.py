# File: page_stats/aggregator.py
"""page_stats.aggregator: batch report with summary totals."""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Sequence, TypedDict

from page_stats.crawler.models import PageResult


class Summary(TypedDict):
    """Totals over one batch."""

    total: int
    succeeded: int
    failed: int
    total_words: int
    total_images: int
    total_links: int
    mean_response_time: Optional[float]


@dataclass(slots=True)
class ScanReport:
    """Per-URL results (input order) plus batch totals."""

    results: List[PageResult] = field(default_factory=list)
    summary: Summary = field(default_factory=lambda: _summarize([]))

    def to_dict(self) -> Dict[str, Any]:
        return {
            "results": [r.to_dict() for r in self.results],
            "summary": dict(self.summary),
        }

    def json(self, *, pretty: bool = False) -> str:
        """JSON representation of the report."""
        return json.dumps(self.to_dict(), ensure_ascii=False, indent=2 if pretty else None)


def _summarize(results: Sequence[PageResult]) -> Summary:
    ok = [r for r in results if r.ok]
    # a status code means a response arrived, so its time is meaningful
    timed = [r.response_time for r in results if r.status_code]
    return {
        "total": len(results),
        "succeeded": len(ok),
        "failed": len(results) - len(ok),
        "total_words": sum(r.word_count for r in ok),
        "total_images": sum(r.image_count for r in ok),
        "total_links": sum(r.link_count for r in ok),
        "mean_response_time": sum(timed) / len(timed) if timed else None,
    }


def aggregate_results(results: Sequence[PageResult]) -> ScanReport:
    """Build a :class:`ScanReport` from dispatcher output, keeping its order."""
    return ScanReport(results=list(results), summary=_summarize(results))
