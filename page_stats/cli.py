# === FILE: page_stats/cli.py ===
#!/usr/bin/env python3
"""
Command-line entry point for PageStats.

Usage:
  page-stats [OPTIONS] URL...

Fetches every URL concurrently and prints, in the order given, its word,
image and link counts, HTTP status and response time.  A URL without a
scheme is requested over ``http://``.

Options:
  --config PATH        YAML/JSON config file (timeout, concurrency, user_agent)
  --timeout SEC        Per-request timeout (overrides config)
  --concurrency N      Max requests in flight (overrides config; default: no cap)
  --user-agent UA      User-Agent header (overrides config)
  --scan-timeout SEC   Timeout for the whole batch
  --json PATH          Also save a JSON report
  --pretty             Indent the JSON report
  --html PATH          Also save an HTML report
  --template DIR       Directory holding report.html.j2
  --log-level LEVEL    Logging level (DEBUG, INFO, ...)
  --log-file PATH      Also write logs to this file
  --log-format FORMAT  Logging format string
  --version, -v        Show the PageStats version

Example:
  page-stats example.com https://www.python.org --concurrency 4 --json report.json
"""
import asyncio
import sys
from pathlib import Path

import click
from pydantic import ValidationError

from page_stats import __version__
from page_stats.aggregator import aggregate_results
from page_stats.config import AnalyzerConfig, load_config
from page_stats.logger import DEFAULT_FORMAT, init_logging
from page_stats.report.html_report import render_html
from page_stats.report.json_report import render_json
from page_stats.report.text_report import format_text
from page_stats.scanner import start_scan

CONTEXT_SETTINGS = dict(help_option_names=["--help", "-h"])


def print_error(message: str):
    click.secho(message, fg='red', err=True)
    sys.exit(1)


@click.command(context_settings=CONTEXT_SETTINGS)
@click.version_option(__version__, '--version', '-v', message='PageStats, version %(version)s')
@click.argument('urls', nargs=-1, required=True)
@click.option(
    '--config', '-c', 'config_path',
    default=None,
    type=click.Path(dir_okay=False, path_type=Path),
    help='Path to a YAML or JSON config file.'
)
@click.option('--timeout', type=click.FloatRange(min=0, min_open=True), default=None,
              help='Per-request timeout in seconds.')
@click.option('--concurrency', type=click.IntRange(min=1), default=None,
              help='Max requests in flight (default: one task per URL).')
@click.option('--user-agent', 'user_agent', default=None, help='User-Agent header.')
@click.option(
    '--scan-timeout', 'scan_timeout',
    type=click.FloatRange(min=0, min_open=True),
    default=None,
    help='Timeout for the whole batch (seconds)'
)
@click.option(
    '--json', '-j', 'json_output',
    default=None,
    type=click.Path(writable=True, dir_okay=False, path_type=Path),
    help='Save a JSON report to this file'
)
@click.option('--pretty', is_flag=True, help='Indent the JSON report by 2 spaces')
@click.option(
    '--html', 'html_output',
    default=None,
    type=click.Path(writable=True, dir_okay=False, path_type=Path),
    help='Save an HTML report to this file'
)
@click.option(
    '--template', '-t', 'template_dir',
    default=None,
    type=click.Path(exists=True, file_okay=False, path_type=Path),
    help='Directory with Jinja2 templates (default: bundled template)'
)
@click.option(
    '--log-level', 'log_level',
    default='WARNING', show_default=True,
    type=click.Choice(['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL']),
    help='Logging level'
)
@click.option(
    '--log-file', 'log_file',
    default=None,
    type=click.Path(writable=True, dir_okay=False, path_type=Path),
    help='Log file path (stderr only if omitted)'
)
@click.option('--log-format', 'log_format', default=DEFAULT_FORMAT, help='Logging format string')
def cli(urls, config_path, timeout, concurrency, user_agent, scan_timeout,
        json_output, pretty, html_output, template_dir, log_level, log_file, log_format):
    """Fetch URL... concurrently and report word, image and link counts."""
    init_logging(
        level=log_level,
        log_file=str(log_file) if log_file else None,
        log_format=log_format
    )
    try:
        cfg = load_config(config_path)
    except Exception as e:
        print_error(f'Failed to load configuration: {e}')

    overrides = {'timeout': timeout, 'concurrency': concurrency, 'user_agent': user_agent}
    overrides = {k: v for k, v in overrides.items() if v is not None}
    if overrides:
        try:
            cfg = AnalyzerConfig.model_validate({**cfg.model_dump(), **overrides})
        except ValidationError as e:
            print_error(f'Invalid option value: {e}')

    try:
        if scan_timeout is not None:
            results = asyncio.run(
                asyncio.wait_for(start_scan(urls, cfg), timeout=scan_timeout)
            )
        else:
            results = asyncio.run(start_scan(urls, cfg))
    except asyncio.TimeoutError:
        print_error(f'Scan did not finish within {scan_timeout} seconds')

    report = aggregate_results(results)
    click.echo(format_text(report))

    if json_output:
        try:
            saved_json = render_json(report, json_output, pretty=pretty)
        except OSError as e:
            print_error(f'Failed to save JSON report: {e}')
        click.echo(f'JSON report: {saved_json}', err=True)

    if html_output:
        try:
            saved_html = render_html(report, html_output, template_dir)
        except Exception as e:
            print_error(f'Failed to save HTML report: {e}')
        click.echo(f'HTML report: {saved_html}', err=True)


if __name__ == "__main__":
    cli()
