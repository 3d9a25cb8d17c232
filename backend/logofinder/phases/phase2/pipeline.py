"""
Phase 2 batch pipeline: resolve a service name to logo files on disk.

Orchestrates: variant generation → sequential GET probes per variant →
write each hit as "<service>-<n>.<ext>" until *count* files exist.
Single entry point: resolve(service, count, output_dir, verbose).
"""

import logging
from pathlib import Path
from typing import Optional

from logofinder.config import Settings
from logofinder.errors import SetupFailure
from logofinder.phases.phase1 import generate_variants
from logofinder.phases.phase2.catalog import SourceCatalog, load_catalog
from logofinder.phases.phase2.probes import DownloadProber, ProbeOutcome
from logofinder.phases.phase2.schemas import DownloadedLogo, ResolveResult

logger = logging.getLogger(__name__)


def _prepare_output_dir(output_dir: str | Path) -> Path:
    path = Path(output_dir)
    try:
        path.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        raise SetupFailure(str(e), {"output_dir": str(path)}) from e
    return path


def _saved_extension(url: str) -> str:
    # Batch files are only ever .svg or .png
    return "svg" if ".svg" in url else "png"


def _save(outcome: ProbeOutcome, out_path: Path, service: str, original: str, variant: str, position: int) -> DownloadedLogo:
    target = outcome.target
    filename = f"{service}-{position}.{_saved_extension(target.url)}"
    filepath = out_path / filename
    filepath.write_bytes(outcome.content or b"")
    return DownloadedLogo(
        id=f"{service}-{position}",
        url=target.url,
        media_type=target.media_type,
        source_label=target.source_label,
        variant=variant,
        original_query=original,
        download_url=target.url,
        filename=filename,
        filepath=str(filepath),
    )


def resolve(
    service: str,
    count: Optional[int] = None,
    output_dir: Optional[str | Path] = None,
    verbose: bool = False,
    *,
    catalog: Optional[SourceCatalog] = None,
    prober: Optional[DownloadProber] = None,
    settings: Optional[Settings] = None,
) -> ResolveResult:
    """
    Download up to *count* logos for *service* into *output_dir*.

    Args:
        service: Brand or service name, e.g. "reactjs".
        count: Maximum number of files to write (default from settings, 5).
        output_dir: Created if missing, including parents (default "./logos").
        verbose: Log variants, saved files and probe misses at INFO.

    Returns:
        ResolveResult with success = (count > 0). Probe failures are skipped
        silently; only setup failures set ``error``.
    """
    settings = settings or Settings()
    count = count if count is not None else settings.download_count
    output_dir = output_dir if output_dir is not None else settings.output_dir
    log = logger.info if verbose else logger.debug

    query = (service or "").strip()
    if not query:
        return ResolveResult(success=False, service=service, count=0, logos=[])

    try:
        out_path = _prepare_output_dir(output_dir)
        catalog = catalog if catalog is not None else load_catalog(settings)
        prober = prober if prober is not None else DownloadProber.from_settings(settings)
    except (SetupFailure, ValueError, OSError) as e:
        logger.error("Cannot resolve logos for %s: %s", service, e)
        return ResolveResult(success=False, service=service, count=0, logos=[], error=str(e))

    variants = generate_variants(query)
    log("Trying variations: %s", ", ".join(variants))

    logos: list[DownloadedLogo] = []
    for variant in variants:
        if len(logos) >= count:
            break
        for target in catalog.urls_for(variant):
            if len(logos) >= count:
                break
            outcome = prober.probe(target)
            if not outcome.ok:
                log("Miss: %s (%s)", target.url, outcome.error or outcome.status_code)
                continue
            try:
                logo = _save(outcome, out_path, query, service, variant, len(logos) + 1)
            except OSError as e:
                log("Could not write logo from %s: %s", target.url, e)
                continue
            logos.append(logo)
            log("Downloaded: %s (from %s)", logo.filename, variant)

    return ResolveResult(success=len(logos) > 0, service=service, count=len(logos), logos=logos)
