"""
LogoFinder API: search logo hosts for a brand/service and download chosen logos.
"""

from dataclasses import asdict

from fastapi import FastAPI, HTTPException, Query
from fastapi.responses import Response

from logofinder.errors import DownloadFailure, DownloadRejected, SearchFailure
from logofinder.phases.phase1 import expand_variants
from logofinder.phases.phase1.schemas import VariantsOutput
from logofinder.phases.phase2 import download_logo, get_probe_monitor, search_logos
from logofinder.phases.phase2.downloads import content_type_for, safe_filename, suggested_filename
from logofinder.phases.phase2.schemas import DownloadRequest, LogoSearchResponse

app = FastAPI(title="LogoFinder", version="0.1.0")


@app.get("/health")
def health():
    return {"status": "ok"}


@app.get("/api/v1/logos/variants", response_model=VariantsOutput)
def logo_variants(q: str = Query(...)):
    """Spellings that will be probed for *q*, in probe order."""
    return expand_variants(q)


@app.get("/api/v1/logos/search", response_model=LogoSearchResponse)
def logo_search(q: str = Query(...), max_logos: int = Query(8, ge=1, le=50)):
    """
    Probe every source for each variant of *q* (HEAD only) and return up to
    max_logos hits. Blank queries return an empty list.
    """
    try:
        return LogoSearchResponse(query=q, logos=search_logos(q, max_logos))
    except SearchFailure as e:
        raise HTTPException(status_code=500, detail=str(e))


@app.post("/api/v1/logos/download")
def logo_download(body: DownloadRequest):
    """Fetch a logo from a catalog host and return it as an attachment."""
    try:
        content = download_logo(body.url)
    except DownloadRejected as e:
        raise HTTPException(status_code=400, detail=str(e))
    except DownloadFailure as e:
        raise HTTPException(status_code=502, detail=str(e))
    filename = safe_filename(body.filename) if body.filename else suggested_filename(body.url, body.variant)
    return Response(
        content=content,
        media_type=content_type_for(body.url),
        headers={"Content-Disposition": f'attachment; filename="{filename}"'},
    )


@app.get("/api/v1/stats")
def probe_stats(source: str | None = None):
    return asdict(get_probe_monitor().get_stats(source_label=source))
