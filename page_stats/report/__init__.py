"""page_stats.report: text, JSON and HTML renderers for a ScanReport."""

from page_stats.report.html_report import render_html
from page_stats.report.json_report import render_json
from page_stats.report.text_report import format_text

__all__ = ["format_text", "render_json", "render_html"]
