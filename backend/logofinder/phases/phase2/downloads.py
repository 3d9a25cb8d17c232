"""
User-triggered logo downloads: fetch the full bytes of one chosen logo.

Only URLs on a catalog host are fetched, so the server never requests
arbitrary addresses on a client's behalf.
"""

import logging
import re
from typing import Optional

import requests

from logofinder.config import Settings
from logofinder.errors import DownloadFailure, DownloadRejected
from logofinder.phases.phase2.catalog import SourceCatalog, extension_of, load_catalog
from logofinder.phases.phase2.clients import HttpTransport, get_transport

logger = logging.getLogger(__name__)

CONTENT_TYPES = {
    "svg": "image/svg+xml",
    "png": "image/png",
    "jpg": "image/jpeg",
}

# Anything that cannot sit inside a quoted ASCII header value, plus "/"
_UNSAFE_FILENAME_CHARS = re.compile(r'["\\/]|[^\x20-\x7e]')


def suggested_filename(url: str, variant: Optional[str] = None) -> str:
    """Name a saved logo after the variant that found it, e.g. "react-logo.svg"."""
    stem = f"{variant}-logo" if variant else "logo"
    return safe_filename(f"{stem}.{extension_of(url)}")


def safe_filename(filename: str) -> str:
    """Make *filename* safe to place inside a quoted Content-Disposition value."""
    cleaned = _UNSAFE_FILENAME_CHARS.sub("_", filename).strip()
    return cleaned or "logo"


def content_type_for(url: str) -> str:
    return CONTENT_TYPES[extension_of(url)]


def download_logo(
    url: str,
    transport: Optional[HttpTransport] = None,
    settings: Optional[Settings] = None,
    catalog: Optional[SourceCatalog] = None,
) -> bytes:
    """
    Return the logo bytes at *url*; any failure raises DownloadFailure.

    URLs whose scheme, host and port match no catalog template raise
    DownloadRejected before any request is made.
    """
    settings = settings or Settings()
    catalog = catalog if catalog is not None else load_catalog(settings)
    if not catalog.allows(url):
        logger.warning("Rejected download outside the source catalog: %s", url)
        raise DownloadRejected("URL is not served by a known logo source", {"url": url})

    transport = transport if transport is not None else get_transport()
    try:
        status, reason, content = transport.get(
            url,
            timeout=settings.download_timeout_seconds,
            headers={"User-Agent": settings.search_user_agent},
        )
    except requests.exceptions.RequestException as e:
        logger.exception("Error downloading logo: %s", url)
        raise DownloadFailure(e, {"url": url}) from e

    if not 200 <= status < 300:
        logger.error("Error downloading logo %s: HTTP %s %s", url, status, reason)
        raise DownloadFailure(reason or f"HTTP {status}", {"url": url, "status_code": status})
    return content
