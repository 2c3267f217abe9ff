# page_stats/report/json_report.py

"""
JSON report generation for PageStats.

Serializes a ScanReport to a file.
"""
from pathlib import Path

from page_stats.aggregator import ScanReport


def render_json(report: ScanReport, output_path: Path | str, *, pretty: bool = True) -> Path:
    """
    Save *report* as JSON at the given path.

    :param report: ScanReport with the batch results
    :param output_path: path of the JSON file
    :param pretty: indent the output by 2 spaces
    :return: Path of the saved file

    Example:
    ```python
    from page_stats.report.json_report import render_json
    report_path = render_json(report, 'reports/report.json')
    print(f"JSON report saved to: {report_path}")
    ```
    """
    output = Path(output_path)
    output.parent.mkdir(parents=True, exist_ok=True)
    output.write_text(report.json(pretty=pretty), encoding="utf-8")
    return output
