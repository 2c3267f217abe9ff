# File: tests/test_report.py
import json

import pytest

from page_stats.aggregator import ScanReport, aggregate_results
from page_stats.crawler.models import PageResult
from page_stats.errors import BodyReadError, TransportError
from page_stats.report.json_report import render_json
from page_stats.report.text_report import format_duration, format_text


def _results():
    return [
        PageResult(url="http://a.com", word_count=10, image_count=1, link_count=4,
                   status_code=200, response_time=0.2),
        PageResult(url="http://b.com", error=TransportError("ClientConnectorError: refused")),
        PageResult(url="http://c.com", word_count=5, link_count=1, status_code=404, response_time=0.4),
        PageResult(url="http://d.com", error=BodyReadError("ClientPayloadError: truncated")),
    ]


def test_summary_totals():
    report = aggregate_results(_results())
    assert report.summary == {
        "total": 4,
        "succeeded": 2,
        "failed": 2,
        "total_words": 15,
        "total_images": 1,
        "total_links": 5,
        "mean_response_time": pytest.approx(0.3),
    }
    assert [r.url for r in report.results] == ["http://a.com", "http://b.com", "http://c.com", "http://d.com"]


def test_empty_report():
    report = aggregate_results([])
    assert report.summary["total"] == 0
    assert report.summary["mean_response_time"] is None
    assert ScanReport().summary == report.summary
    assert "0 URL(s): 0 succeeded, 0 failed" in format_text(report)


def test_text_blocks():
    text = format_text(aggregate_results(_results()))
    lines = text.splitlines()
    assert lines[:2] == ["Results:", "-" * 20]
    assert "URL: http://b.com" in lines
    b = lines.index("URL: http://b.com")
    assert lines[b + 1] == "Error: ClientConnectorError: refused"
    assert "Response time: 200.0ms" in lines
    assert "Status code: 404" in lines


def test_format_duration():
    assert format_duration(0.0421) == "42.1ms"
    assert format_duration(1.5) == "1.500s"


def test_json_file(tmp_path):
    path = render_json(aggregate_results(_results()), tmp_path / "r.json", pretty=False)
    data = json.loads(path.read_text(encoding="utf-8"))
    assert data["results"][1]["error"] == {
        "type": "TransportError",
        "message": "ClientConnectorError: refused",
    }
    assert data["results"][0]["error"] is None
    assert data["summary"]["total_links"] == 5
