from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class MediaType(str, Enum):
    SVG = "svg"
    RASTER = "raster"


class ProbeTarget(BaseModel):
    """One concrete URL to check or fetch, derived from (variant, registry entry)."""

    model_config = ConfigDict(frozen=True)

    url: str
    media_type: MediaType
    source_label: str


class LogoHit(BaseModel):
    """A probe target confirmed to host a usable logo."""

    id: str = Field(..., description="<query>-<n>, 1-based presentation order")
    url: str
    media_type: MediaType
    source_label: str
    variant: str
    original_query: str
    download_url: str


class DownloadedLogo(LogoHit):
    """A hit whose bytes were saved by the batch path."""

    filename: str
    filepath: str


class ResolveResult(BaseModel):
    success: bool
    service: str
    count: int = 0
    logos: list[DownloadedLogo] = Field(default_factory=list)
    error: Optional[str] = None


class LogoSearchResponse(BaseModel):
    query: str
    logos: list[LogoHit]


class DownloadRequest(BaseModel):
    url: str = Field(..., min_length=1)
    filename: Optional[str] = None
    variant: Optional[str] = None
