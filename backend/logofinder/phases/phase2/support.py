"""
Phase 2 support: probe monitoring, stale-search suppression, and debouncing in one module.
"""

import threading
import time
from dataclasses import dataclass
from threading import Lock
from typing import Any, Callable, Optional

# ----- Performance monitor -----


@dataclass
class ProbeMetrics:
    url: str
    source_label: str
    strategy: str
    start_time: float
    end_time: Optional[float] = None
    success: bool = False
    status_code: Optional[int] = None
    error_message: Optional[str] = None

    @property
    def duration_seconds(self) -> float:
        return (self.end_time or 0.0) - self.start_time


@dataclass
class ProbeStats:
    total_probes: int = 0
    hits: int = 0
    misses: int = 0
    total_duration_seconds: float = 0.0
    avg_duration_seconds: float = 0.0
    min_duration_seconds: float = 0.0
    max_duration_seconds: float = 0.0
    hit_rate: float = 0.0


class ProbeMonitor:
    """Bounded in-memory log of probe outcomes. Never consulted to skip a probe."""

    def __init__(self, max_metrics: int = 1000):
        self._metrics: list[ProbeMetrics] = []
        self._lock = Lock()
        self._max_metrics = max_metrics

    def start_probe(self, url: str, source_label: str, strategy: str) -> ProbeMetrics:
        return ProbeMetrics(url=url, source_label=source_label, strategy=strategy, start_time=time.time())

    def record(
        self,
        metric: ProbeMetrics,
        success: bool,
        status_code: Optional[int] = None,
        error_message: Optional[str] = None,
    ):
        metric.end_time = time.time()
        metric.success = success
        metric.status_code = status_code
        metric.error_message = error_message
        with self._lock:
            self._metrics.append(metric)
            if len(self._metrics) > self._max_metrics:
                self._metrics = self._metrics[-self._max_metrics :]

    def get_stats(self, source_label: Optional[str] = None, strategy: Optional[str] = None) -> ProbeStats:
        with self._lock:
            metrics = self._metrics.copy()
        if source_label:
            metrics = [m for m in metrics if m.source_label == source_label]
        if strategy:
            metrics = [m for m in metrics if m.strategy == strategy]
        if not metrics:
            return ProbeStats()
        hits = sum(1 for m in metrics if m.success)
        durations = [m.duration_seconds for m in metrics if m.end_time]
        return ProbeStats(
            total_probes=len(metrics),
            hits=hits,
            misses=len(metrics) - hits,
            total_duration_seconds=sum(durations),
            avg_duration_seconds=sum(durations) / len(durations) if durations else 0.0,
            min_duration_seconds=min(durations) if durations else 0.0,
            max_duration_seconds=max(durations) if durations else 0.0,
            hit_rate=hits / len(metrics),
        )

    def reset(self):
        with self._lock:
            self._metrics = []


_probe_monitor = ProbeMonitor()


def get_probe_monitor() -> ProbeMonitor:
    return _probe_monitor


# ----- Stale-search suppression -----


class LatestRequestGate:
    """
    Monotonic request sequence. A response may be applied only while its ticket
    is still the latest one issued (last-query-wins).
    """

    def __init__(self):
        self._latest = 0
        self._lock = Lock()

    def issue(self) -> int:
        with self._lock:
            self._latest += 1
            return self._latest

    def is_latest(self, ticket: int) -> bool:
        with self._lock:
            return ticket == self._latest

    @property
    def latest(self) -> int:
        with self._lock:
            return self._latest


# ----- Debounce -----


class Debouncer:
    """Run *func* once calls have been quiet for *delay* seconds; each call restarts the timer."""

    def __init__(self, delay: float, func: Callable[..., Any]):
        self.delay = delay
        self.func = func
        self._timer: Optional[threading.Timer] = None
        self._lock = Lock()

    def __call__(self, *args: Any, **kwargs: Any):
        with self._lock:
            if self._timer is not None:
                self._timer.cancel()
            self._timer = threading.Timer(self.delay, self.func, args=args, kwargs=kwargs)
            self._timer.daemon = True
            self._timer.start()

    def cancel(self):
        with self._lock:
            if self._timer is not None:
                self._timer.cancel()
                self._timer = None

    @property
    def pending(self) -> bool:
        with self._lock:
            return self._timer is not None and self._timer.is_alive()
