# File: tests/conftest.py
from collections.abc import AsyncIterator

import pytest
from aiohttp import web

from page_stats.config import AnalyzerConfig
from page_stats.logger import init_logging

SAMPLE_HTML = """<!DOCTYPE html>
<html>
<head>
  <title>Sample page</title>
  <style>body { color: red; }</style>
  <script>var ignored = "not words";</script>
</head>
<body>
  <!-- a comment that is not text -->
  <h1>Hello there</h1>
  <p>Three <a href="/one">small</a> words <img src="a.png"></p>
  <div><div><a href="/two"><img src="b.png"></a></div></div>
  <a>no href</a>
</body>
</html>
"""
# "Sample page" + "Hello there" + "Three small words" + "no href"
SAMPLE_WORDS = 9
SAMPLE_IMAGES = 2
SAMPLE_LINKS = 3


async def serve_app(app: web.Application, port: int) -> AsyncIterator[str]:
    """Start *app* on *port*, yield base URL, ensure cleanup."""
    runner = web.AppRunner(app)
    await runner.setup()
    site = web.TCPSite(runner, "127.0.0.1", port)
    await site.start()
    try:
        yield f"http://127.0.0.1:{port}"
    finally:
        await runner.cleanup()


@pytest.fixture()
def basic_config() -> AnalyzerConfig:
    """
    Return a short-timeout AnalyzerConfig for network tests.
    """
    return AnalyzerConfig(timeout=2.0, user_agent="TestAgent/1.0")


@pytest.fixture(autouse=True)
def reset_logging():
    """CliRunner swaps sys.stderr; rebuild handlers so later tests log to a live stream."""
    yield
    init_logging()
