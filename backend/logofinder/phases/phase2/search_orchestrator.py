"""
Search orchestrator: interactive logo search across all variants and sources.

Variants run strictly in sequence; within a variant every source is probed in
parallel (HEAD only) and the results are merged after all probes finish.
"""

import logging
from typing import Optional

from logofinder.config import Settings
from logofinder.errors import SearchFailure
from logofinder.phases.phase1 import generate_variants
from logofinder.phases.phase2.catalog import SourceCatalog, load_catalog
from logofinder.phases.phase2.probes import ExistenceCheckProber, ProbeOutcome
from logofinder.phases.phase2.schemas import LogoHit

logger = logging.getLogger(__name__)


def _to_hit(outcome: ProbeOutcome, variant: str, query: str, original_query: str, position: int) -> LogoHit:
    target = outcome.target
    return LogoHit(
        id=f"{query}-{position}",
        url=target.url,
        media_type=target.media_type,
        source_label=target.source_label,
        variant=variant,
        original_query=original_query,
        download_url=target.url,
    )


def search_logos(
    service: str,
    max_logos: Optional[int] = None,
    *,
    catalog: Optional[SourceCatalog] = None,
    prober: Optional[ExistenceCheckProber] = None,
    settings: Optional[Settings] = None,
) -> list[LogoHit]:
    """
    Return up to *max_logos* hits for *service* without downloading anything.

    Blank input returns [] with no network calls. Probe misses are swallowed;
    any other exception is raised as SearchFailure.
    """
    if not service or not service.strip():
        return []

    settings = settings or Settings()
    max_logos = max_logos if max_logos is not None else settings.max_logos
    query = service.strip()
    found: list[LogoHit] = []

    try:
        catalog = catalog if catalog is not None else load_catalog(settings)
        prober = prober if prober is not None else ExistenceCheckProber.from_settings(settings)
        for variant in generate_variants(query):
            if len(found) >= max_logos:
                break
            outcomes = prober.probe_all(catalog.urls_for(variant))
            for outcome in outcomes:
                if not outcome.ok or len(found) >= max_logos:
                    continue
                found.append(_to_hit(outcome, variant, query, service, len(found) + 1))
    except Exception as e:
        logger.exception("Error searching for logos: %s", service)
        raise SearchFailure(e) from e

    return found
