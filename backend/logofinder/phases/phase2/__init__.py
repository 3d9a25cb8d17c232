"""Phase 2: Source Probing & Retrieval."""

from .catalog import DEFAULT_SOURCES, SourceCatalog, SourceTemplate, extension_of, load_catalog
from .clients import HttpTransport, get_transport
from .downloads import download_logo, suggested_filename
from .pipeline import resolve
from .probes import DownloadProber, ExistenceCheckProber, ProbeOutcome, Prober
from .schemas import DownloadedLogo, LogoHit, MediaType, ProbeTarget, ResolveResult
from .search_orchestrator import search_logos
from .session import LogoSearchSession
from .support import (
    Debouncer,
    LatestRequestGate,
    ProbeMonitor,
    get_probe_monitor,
)

__all__ = [
    "DEFAULT_SOURCES",
    "SourceCatalog",
    "SourceTemplate",
    "extension_of",
    "load_catalog",
    "HttpTransport",
    "get_transport",
    "download_logo",
    "suggested_filename",
    "resolve",
    "Prober",
    "DownloadProber",
    "ExistenceCheckProber",
    "ProbeOutcome",
    "DownloadedLogo",
    "LogoHit",
    "MediaType",
    "ProbeTarget",
    "ResolveResult",
    "search_logos",
    "LogoSearchSession",
    "Debouncer",
    "LatestRequestGate",
    "ProbeMonitor",
    "get_probe_monitor",
]
