"""
Interactive search session: debounced input with last-query-wins results.

Mirrors what a search box needs: the latest results, a loading flag and an
error message. A search that finishes after a newer one was issued is dropped.
"""

import logging
from threading import Lock
from typing import Callable, Optional

from logofinder.config import Settings
from logofinder.errors import SearchFailure
from logofinder.phases.phase2.schemas import LogoHit
from logofinder.phases.phase2.search_orchestrator import search_logos
from logofinder.phases.phase2.support import Debouncer, LatestRequestGate

logger = logging.getLogger(__name__)

SearchFn = Callable[[str], list[LogoHit]]


class LogoSearchSession:
    def __init__(
        self,
        search_fn: Optional[SearchFn] = None,
        debounce_seconds: Optional[float] = None,
        settings: Optional[Settings] = None,
    ):
        settings = settings or Settings()
        self.search_fn: SearchFn = search_fn or (lambda term: search_logos(term, settings=settings))
        delay = debounce_seconds if debounce_seconds is not None else settings.debounce_seconds
        self._gate = LatestRequestGate()
        self._debouncer = Debouncer(delay, self._run_latest)
        self._lock = Lock()

        self.logos: list[LogoHit] = []
        self.loading = False
        self.error: Optional[str] = None
        self.search_term = ""

    def submit(self, term: str):
        """Record a keystroke; the search runs once input has been quiet for the debounce delay."""
        if not term or not term.strip():
            self._debouncer.cancel()
            self._gate.issue()  # invalidate anything in flight
            with self._lock:
                self.search_term = term or ""
                self.logos = []
                self.error = None
                self.loading = False
            return
        self._debouncer(term)

    def search_now(self, term: str) -> list[LogoHit]:
        """Run a search immediately and return the session's current logos."""
        self._debouncer.cancel()
        self._run(term, self._gate.issue())
        return self.logos

    def close(self):
        self._debouncer.cancel()

    def _run_latest(self, term: str):
        self._run(term, self._gate.issue())

    def _run(self, term: str, ticket: int):
        with self._lock:
            if self._gate.is_latest(ticket):
                self.search_term = term
                self.loading = True
                self.error = None

        try:
            results = self.search_fn(term)
        except SearchFailure as e:
            self._apply(ticket, [], str(e))
        except Exception as e:
            # Runs on the debounce timer thread, where nothing else would see it
            logger.exception("Error searching for logos: %s", term)
            self._apply(ticket, [], str(SearchFailure(e)))
        else:
            self._apply(ticket, results, None)

    def _apply(self, ticket: int, logos: list[LogoHit], error: Optional[str]):
        with self._lock:
            if not self._gate.is_latest(ticket):
                logger.debug("Discarding stale search results (ticket %s)", ticket)
                return
            self.logos = logos
            self.error = error
            self.loading = False
