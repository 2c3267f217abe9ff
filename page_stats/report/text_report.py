"""Plain-text report printed to stdout."""
from __future__ import annotations

from page_stats.aggregator import ScanReport
from page_stats.crawler.models import PageResult

SEPARATOR = "-" * 20


def format_duration(seconds: float) -> str:
    if seconds < 1:
        return f"{seconds * 1000:.1f}ms"
    return f"{seconds:.3f}s"


def _format_result(result: PageResult) -> list[str]:
    lines = [f"URL: {result.url}"]
    if result.error is not None:
        lines.append(f"Error: {result.error}")
        return lines
    lines += [
        f"Word count: {result.word_count}",
        f"Image count: {result.image_count}",
        f"Link count: {result.link_count}",
        f"Status code: {result.status_code}",
        f"Response time: {format_duration(result.response_time)}",
    ]
    return lines


def format_text(report: ScanReport) -> str:
    """Render one block per URL in input order, then a summary line."""
    lines = ["Results:", SEPARATOR]
    for result in report.results:
        lines += _format_result(result)
        lines.append(SEPARATOR)
    s = report.summary
    lines.append(f"{s['total']} URL(s): {s['succeeded']} succeeded, {s['failed']} failed")
    return "\n".join(lines)
