"""Tests for the interactive session: debounce and last-query-wins."""

import threading
import time

from logofinder.errors import SearchFailure
from logofinder.phases.phase2.schemas import LogoHit, MediaType
from logofinder.phases.phase2.session import LogoSearchSession
from logofinder.phases.phase2.support import Debouncer, LatestRequestGate, ProbeMonitor


def _hit(query, n=1):
    return LogoHit(
        id=f"{query}-{n}",
        url=f"https://a.test/{query}.svg",
        media_type=MediaType.SVG,
        source_label="A",
        variant=query,
        original_query=query,
        download_url=f"https://a.test/{query}.svg",
    )


class TestLatestRequestGate:
    def test_tickets_increase(self):
        gate = LatestRequestGate()
        first, second = gate.issue(), gate.issue()
        assert second > first
        assert gate.latest == second

    def test_only_latest_is_current(self):
        gate = LatestRequestGate()
        old = gate.issue()
        new = gate.issue()
        assert not gate.is_latest(old)
        assert gate.is_latest(new)


class TestDebouncer:
    def test_only_last_call_runs(self):
        calls = []
        done = threading.Event()

        def record(value):
            calls.append(value)
            done.set()

        debounce = Debouncer(0.05, record)
        debounce("r")
        debounce("re")
        debounce("react")
        assert done.wait(2)
        time.sleep(0.1)
        assert calls == ["react"]

    def test_cancel(self):
        calls = []
        debounce = Debouncer(0.05, calls.append)
        debounce("x")
        assert debounce.pending
        debounce.cancel()
        time.sleep(0.1)
        assert calls == []
        assert not debounce.pending


class TestLogoSearchSession:
    def test_search_now_applies_results(self):
        session = LogoSearchSession(search_fn=lambda term: [_hit(term)], debounce_seconds=0)
        logos = session.search_now("react")
        assert [h.id for h in logos] == ["react-1"]
        assert session.loading is False
        assert session.error is None
        assert session.search_term == "react"

    def test_stale_results_discarded(self):
        session = LogoSearchSession(search_fn=lambda term: [_hit(term)], debounce_seconds=0)
        stale_ticket = session._gate.issue()
        latest_ticket = session._gate.issue()
        session._run("vue", latest_ticket)
        session._run("rea", stale_ticket)
        assert [h.variant for h in session.logos] == ["vue"]

    def test_slow_older_search_cannot_overwrite_newer(self):
        release = threading.Event()

        def search(term):
            if term == "slow":
                release.wait(2)
            return [_hit(term)]

        session = LogoSearchSession(search_fn=search, debounce_seconds=0)
        worker = threading.Thread(target=session.search_now, args=("slow",))
        worker.start()
        time.sleep(0.05)
        session.search_now("fast")
        release.set()
        worker.join(2)
        assert [h.variant for h in session.logos] == ["fast"]
        assert session.loading is False

    def test_failure_sets_error_and_clears_logos(self):
        def search(term):
            if term == "bad":
                raise SearchFailure(RuntimeError("boom"))
            return [_hit(term)]

        session = LogoSearchSession(search_fn=search, debounce_seconds=0)
        session.search_now("good")
        session.search_now("bad")
        assert session.logos == []
        assert session.error == "Failed to search for logos: boom"
        assert session.loading is False

    def test_blank_submit_clears_and_invalidates(self):
        session = LogoSearchSession(search_fn=lambda term: [_hit(term)], debounce_seconds=0)
        session.search_now("react")
        ticket = session._gate.issue()
        session.submit("   ")
        assert session.logos == []
        assert session.error is None
        session._run("react", ticket)
        assert session.logos == []

    def test_submit_debounces_keystrokes(self):
        seen = []
        done = threading.Event()

        def search(term):
            seen.append(term)
            done.set()
            return [_hit(term)]

        session = LogoSearchSession(search_fn=search, debounce_seconds=0.05)
        for term in ("g", "gi", "git", "github"):
            session.submit(term)
        assert done.wait(2)
        time.sleep(0.1)
        session.close()
        assert seen == ["github"]
        assert [h.variant for h in session.logos] == ["github"]


class TestProbeMonitor:
    def test_stats_by_source(self):
        monitor = ProbeMonitor()
        for label, ok in (("A", True), ("A", False), ("B", False)):
            metric = monitor.start_probe(f"https://{label}.test", label, "existence_check")
            monitor.record(metric, ok, status_code=200 if ok else 404)
        assert monitor.get_stats().total_probes == 3
        stats_a = monitor.get_stats(source_label="A")
        assert stats_a.hits == 1
        assert stats_a.misses == 1
        assert stats_a.hit_rate == 0.5
        assert monitor.get_stats(strategy="download").total_probes == 0

    def test_bounded(self):
        monitor = ProbeMonitor(max_metrics=2)
        for i in range(5):
            monitor.record(monitor.start_probe(f"https://{i}.test", "A", "download"), True)
        assert monitor.get_stats().total_probes == 2

    def test_reset(self):
        monitor = ProbeMonitor()
        monitor.record(monitor.start_probe("https://a.test", "A", "download"), True)
        monitor.reset()
        assert monitor.get_stats().total_probes == 0


class TestLogoSearchSessionUnexpectedErrors:
    def test_unexpected_error_resets_loading(self):
        def search(term):
            raise KeyError("bug")

        session = LogoSearchSession(search_fn=search, debounce_seconds=0)
        session.search_now("react")
        assert session.loading is False
        assert session.logos == []
        assert session.error == "Failed to search for logos: 'bug'"

    def test_unexpected_error_on_debounce_thread(self):
        finished = threading.Event()

        def search(term):
            finished.set()
            raise ValueError("broken")

        session = LogoSearchSession(search_fn=search, debounce_seconds=0.01)
        session.submit("react")
        assert finished.wait(2)
        for _ in range(100):
            if not session.loading:
                break
            time.sleep(0.01)
        session.close()
        assert session.loading is False
        assert session.error == "Failed to search for logos: broken"
