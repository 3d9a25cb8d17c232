"""
Probe executors: existence check (HEAD, fan-out per variant) and download-and-keep
(GET, one at a time).

Every network failure becomes a ProbeOutcome with ok=False. Exceptions that are
not transport errors are programming defects and propagate to the caller.
"""

import concurrent.futures
import logging
from dataclasses import dataclass
from typing import Optional, Sequence

import requests

from logofinder.config import Settings
from logofinder.phases.phase2.clients import HttpTransport, get_transport
from logofinder.phases.phase2.schemas import ProbeTarget
from logofinder.phases.phase2.support import ProbeMonitor, get_probe_monitor

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ProbeOutcome:
    target: ProbeTarget
    ok: bool
    status_code: Optional[int] = None
    content: Optional[bytes] = None
    error: Optional[str] = None


class Prober:
    """Checks one probe target. Subclasses pick the HTTP method and success rule."""

    strategy = "base"

    def __init__(
        self,
        transport: Optional[HttpTransport] = None,
        timeout: float = 5.0,
        user_agent: str = "LogoDownloader/1.0",
        monitor: Optional[ProbeMonitor] = None,
    ):
        self.transport = transport or get_transport()
        self.timeout = timeout
        self.headers = {"User-Agent": user_agent}
        self.monitor = monitor or get_probe_monitor()

    def _request(self, target: ProbeTarget) -> ProbeOutcome:
        raise NotImplementedError

    def probe(self, target: ProbeTarget) -> ProbeOutcome:
        metric = self.monitor.start_probe(target.url, target.source_label, self.strategy)
        try:
            outcome = self._request(target)
        except requests.exceptions.RequestException as e:
            outcome = ProbeOutcome(target=target, ok=False, error=str(e))
        self.monitor.record(metric, outcome.ok, status_code=outcome.status_code, error_message=outcome.error)
        if not outcome.ok:
            logger.debug("Probe miss %s (%s): %s", target.url, target.source_label, outcome.error or outcome.status_code)
        return outcome


class ExistenceCheckProber(Prober):
    """HEAD probe; a 200 means the logo exists. The body is never fetched."""

    strategy = "existence_check"

    def __init__(
        self,
        transport: Optional[HttpTransport] = None,
        timeout: float = 3.0,
        user_agent: str = "LogoDownloader/2.0",
        monitor: Optional[ProbeMonitor] = None,
        max_workers: int = 10,
    ):
        super().__init__(transport=transport, timeout=timeout, user_agent=user_agent, monitor=monitor)
        self.max_workers = max_workers

    @classmethod
    def from_settings(cls, settings: Settings, transport: Optional[HttpTransport] = None) -> "ExistenceCheckProber":
        return cls(
            transport=transport,
            timeout=settings.search_timeout_seconds,
            user_agent=settings.search_user_agent,
            max_workers=settings.max_workers,
        )

    def _request(self, target: ProbeTarget) -> ProbeOutcome:
        status = self.transport.head(target.url, timeout=self.timeout, headers=self.headers)
        return ProbeOutcome(target=target, ok=status == 200, status_code=status)

    def probe_all(self, targets: Sequence[ProbeTarget]) -> list[ProbeOutcome]:
        """
        Probe every target concurrently and wait for all of them.

        Outcomes come back in target order regardless of completion order, so
        the merge step sees the registry's priority.
        """
        if not targets:
            return []
        max_workers = max(1, min(self.max_workers, len(targets)))
        with concurrent.futures.ThreadPoolExecutor(max_workers=max_workers) as executor:
            futures = [executor.submit(self.probe, target) for target in targets]
            concurrent.futures.wait(futures)
        return [future.result() for future in futures]


class DownloadProber(Prober):
    """GET probe; a 200 with a non-empty body is a hit and carries the bytes."""

    strategy = "download"

    @classmethod
    def from_settings(cls, settings: Settings, transport: Optional[HttpTransport] = None) -> "DownloadProber":
        return cls(
            transport=transport,
            timeout=settings.download_timeout_seconds,
            user_agent=settings.download_user_agent,
        )

    def _request(self, target: ProbeTarget) -> ProbeOutcome:
        status, reason, content = self.transport.get(target.url, timeout=self.timeout, headers=self.headers)
        if status == 200 and content:
            return ProbeOutcome(target=target, ok=True, status_code=status, content=content)
        return ProbeOutcome(target=target, ok=False, status_code=status, error=reason or None)
