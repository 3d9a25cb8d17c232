"""
HTTP transport for logo probes. Reuses a single requests.Session for performance.

Raises requests.RequestException subclasses on timeouts and connection errors;
probers turn those into misses.

A requests timeout bounds the connect step and each socket read separately,
not the whole exchange. Every redirect hop gets its own budget, so redirects
are capped at MAX_REDIRECTS to keep a probe within a few timeouts.
"""

from threading import Lock
from typing import Mapping, Optional

import requests

MAX_REDIRECTS = 3

_session_lock = Lock()
_session: Optional[requests.Session] = None


def _new_session() -> requests.Session:
    session = requests.Session()
    session.max_redirects = MAX_REDIRECTS
    return session


def _get_session() -> requests.Session:
    global _session
    if _session is None:
        with _session_lock:
            if _session is None:
                _session = _new_session()
    return _session


class HttpTransport:
    """GET/HEAD with per-step timeout and headers."""

    def __init__(self, session: Optional[requests.Session] = None):
        self._session = session

    @property
    def session(self) -> requests.Session:
        return self._session if self._session is not None else _get_session()

    def head(self, url: str, timeout: float, headers: Mapping[str, str]) -> int:
        """
        Return the final status code, following redirects like a browser fetch.

        *timeout* applies to the connect and each read of every hop. Too many
        redirects raise requests.TooManyRedirects.
        """
        response = self.session.head(url, timeout=timeout, headers=dict(headers), allow_redirects=True)
        try:
            return response.status_code
        finally:
            response.close()

    def get(self, url: str, timeout: float, headers: Mapping[str, str]) -> tuple[int, str, bytes]:
        """Return (status_code, reason, body). *timeout* is per step, as for head()."""
        response = self.session.get(url, timeout=timeout, headers=dict(headers))
        return response.status_code, response.reason or "", response.content


_default_transport = HttpTransport()


def get_transport() -> HttpTransport:
    return _default_transport
