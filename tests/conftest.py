import functools
import http.server
import socketserver
import threading
from collections.abc import Iterator
from pathlib import Path

import pytest

from site_uitests.core.settings import Settings

FIXTURE_SITE = Path(__file__).resolve().parent / "fixtures" / "site"


class _QuietHandler(http.server.SimpleHTTPRequestHandler):
    def log_message(self, format: str, *args: object) -> None:  # noqa: A002
        pass


@pytest.fixture(scope="session")
def site_url() -> Iterator[str]:
    """SITE_URL when set, otherwise a local server for tests/fixtures/site."""
    configured = Settings().site_url
    if configured:
        yield configured
        return
    Handler = functools.partial(_QuietHandler, directory=str(FIXTURE_SITE))
    httpd = socketserver.TCPServer(("127.0.0.1", 0), Handler)
    port = httpd.server_address[1]
    t = threading.Thread(target=httpd.serve_forever, daemon=True)
    t.start()
    try:
        yield f"http://127.0.0.1:{port}"
    finally:
        httpd.shutdown()
        httpd.server_close()
