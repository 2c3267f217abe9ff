# File: page_stats/report/html_report.py
"""page_stats.report.html_report: HTML report rendering with Jinja2."""

from __future__ import annotations

from pathlib import Path
from typing import Any, Optional, Union

from jinja2 import BaseLoader, Environment, FileSystemLoader, PackageLoader, select_autoescape

from page_stats.aggregator import ScanReport
from page_stats.report.text_report import format_duration

TEMPLATE_NAME = "report.html.j2"


def _loader(template_dir: Optional[Union[Path, str]]) -> BaseLoader:
    if template_dir is None:
        return PackageLoader("page_stats", "templates")
    return FileSystemLoader(str(template_dir))


def render_html(
    report: ScanReport,
    output_path: Union[Path, str],
    template_dir: Optional[Union[Path, str]] = None,
) -> Path:
    """Render the HTML report and save it at the given path.

    Args:
        report: ScanReport object.
        output_path: path of the resulting HTML file.
        template_dir: directory holding ``report.html.j2``; the packaged
            template is used when omitted.

    Returns:
        Path of the saved HTML file.
    """
    output_path = Path(output_path)
    output_path.parent.mkdir(parents=True, exist_ok=True)

    env = Environment(
        loader=_loader(template_dir),
        autoescape=select_autoescape(["html", "xml", "j2"]),
    )
    env.filters["duration"] = format_duration
    template = env.get_template(TEMPLATE_NAME)

    context: dict[str, Any] = {
        "results": report.results,
        "summary": report.summary,
    }

    html_content = template.render(**context)
    output_path.write_text(html_content, encoding="utf-8")

    return output_path
