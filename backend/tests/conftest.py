"""Pytest fixtures: in-memory transport and small source catalogs. No test touches the network."""

import threading

import pytest
import requests

from logofinder.config import Settings
from logofinder.phases.phase2.catalog import SourceCatalog, SourceTemplate
from logofinder.phases.phase2.probes import DownloadProber, ExistenceCheckProber
from logofinder.phases.phase2.support import ProbeMonitor


class FakeTransport:
    """
    Serves canned responses by URL. Unknown URLs return 404; URLs listed in
    ``errors`` raise the given requests exception.
    """

    def __init__(self, bodies=None, statuses=None, errors=None):
        self.bodies = dict(bodies or {})
        self.statuses = dict(statuses or {})
        self.errors = dict(errors or {})
        self.calls: list[tuple[str, str]] = []
        self.headers_seen: list[dict] = []
        self.timeouts_seen: list[float] = []
        self._lock = threading.Lock()

    def _record(self, method, url, timeout, headers):
        with self._lock:
            self.calls.append((method, url))
            self.headers_seen.append(dict(headers))
            self.timeouts_seen.append(timeout)
        if url in self.errors:
            raise self.errors[url]

    def _status(self, url):
        if url in self.statuses:
            return self.statuses[url]
        return 200 if url in self.bodies else 404

    def head(self, url, timeout, headers):
        self._record("HEAD", url, timeout, headers)
        return self._status(url)

    def get(self, url, timeout, headers):
        self._record("GET", url, timeout, headers)
        status = self._status(url)
        reason = "OK" if status == 200 else "Not Found"
        return status, reason, self.bodies.get(url, b"")

    @property
    def urls(self):
        return [url for _, url in self.calls]


@pytest.fixture
def fake_transport():
    return FakeTransport()


@pytest.fixture
def settings():
    return Settings(_env_file=None)


@pytest.fixture
def monitor():
    return ProbeMonitor()


@pytest.fixture
def small_catalog():
    """Three sources: two SVG, one raster."""
    return SourceCatalog(
        [
            SourceTemplate("Alpha", "https://alpha.test/{variant}.svg"),
            SourceTemplate("Beta", "https://beta.test/{variant}/{variant}-plain.svg"),
            SourceTemplate("Gamma", "https://gamma.test/{variant}.png"),
        ]
    )


@pytest.fixture
def existence_prober(fake_transport, monitor):
    return ExistenceCheckProber(transport=fake_transport, monitor=monitor, max_workers=4)


@pytest.fixture
def download_prober(fake_transport, monitor):
    return DownloadProber(transport=fake_transport, monitor=monitor)


@pytest.fixture
def timeout_error():
    return requests.exceptions.Timeout("read timed out")


@pytest.fixture
def connection_error():
    return requests.exceptions.ConnectionError("name resolution failed")
