"""
Source catalog: the ordered registry of public logo hosts.

Registry order is probe priority: for one variant, the first template that
resolves wins the earliest slot in the results. No network access here.
"""

import json
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, Optional
from urllib.parse import urlparse

from logofinder.config import Settings
from logofinder.phases.phase2.schemas import MediaType, ProbeTarget


@dataclass(frozen=True)
class SourceTemplate:
    label: str
    template: str  # "{variant}" is substituted

    @property
    def media_type(self) -> MediaType:
        return MediaType.SVG if self.template.endswith(".svg") else MediaType.RASTER

    def render(self, variant: str) -> ProbeTarget:
        return ProbeTarget(
            url=self.template.replace("{variant}", variant),
            media_type=self.media_type,
            source_label=self.label,
        )


SIMPLE_ICONS = "https://cdn.jsdelivr.net/npm/simple-icons@latest/icons/"
SIMPLE_ICONS_RAW = "https://raw.githubusercontent.com/simple-icons/simple-icons/develop/icons/"
DEVICONS = "https://raw.githubusercontent.com/devicons/devicon/master/icons/"
ICONIFY = "https://api.iconify.design/"
LOGOS_COLLECTION = "https://raw.githubusercontent.com/gilbarbara/logos/master/logos/"
ICONS8 = "https://img.icons8.com/"
CLEARBIT = "https://logo.clearbit.com/"

DEFAULT_SOURCES: tuple[SourceTemplate, ...] = (
    SourceTemplate("Simple Icons (CDN)", SIMPLE_ICONS + "{variant}.svg"),
    SourceTemplate("Simple Icons (Raw)", SIMPLE_ICONS_RAW + "{variant}.svg"),
    SourceTemplate("DevIcons Original", DEVICONS + "{variant}/{variant}-original.svg"),
    SourceTemplate("DevIcons Plain", DEVICONS + "{variant}/{variant}-plain.svg"),
    SourceTemplate("Iconify Logos", ICONIFY + "logos:{variant}.svg"),
    SourceTemplate("Iconify Simple", ICONIFY + "simple-icons:{variant}.svg"),
    SourceTemplate("Logos Collection", LOGOS_COLLECTION + "{variant}.svg"),
    SourceTemplate("Icons8 Color", ICONS8 + "color/512/{variant}.png"),
    SourceTemplate("Icons8 Fluency", ICONS8 + "fluency/512/{variant}.png"),
    SourceTemplate("Clearbit", CLEARBIT + "{variant}.com"),
)


class SourceCatalog:
    """Maps a variant to its ordered probe targets."""

    def __init__(self, sources: Optional[Iterable[SourceTemplate]] = None):
        self.sources: tuple[SourceTemplate, ...] = (
            tuple(sources) if sources is not None else DEFAULT_SOURCES
        )

    def __len__(self) -> int:
        return len(self.sources)

    def urls_for(self, variant: str) -> list[ProbeTarget]:
        return [source.render(variant) for source in self.sources]

    def origins(self) -> set[tuple[str, str, Optional[int]]]:
        """(scheme, host, port) of every template. Templates with a variant in the host are skipped."""
        origins = set()
        for source in self.sources:
            origin = _origin(source.template)
            if origin and "{" not in origin[1]:
                origins.add(origin)
        return origins

    def allows(self, url: str) -> bool:
        """True if *url* is served by one of the catalog's hosts."""
        origin = _origin(url)
        return origin is not None and origin in self.origins()

    @classmethod
    def from_json(cls, path: str | Path) -> "SourceCatalog":
        """Load a registry from a JSON list of {"label", "template"} objects, in probe order."""
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
        if not isinstance(data, list):
            raise ValueError(f"Source catalog {path} must contain a JSON list")
        sources = []
        for idx, item in enumerate(data):
            if not isinstance(item, dict) or not item.get("label") or not item.get("template"):
                raise ValueError(f"Source catalog entry {idx} needs 'label' and 'template'")
            sources.append(SourceTemplate(label=str(item["label"]), template=str(item["template"])))
        return cls(sources)


def load_catalog(settings: Optional[Settings] = None) -> SourceCatalog:
    settings = settings or Settings()
    if settings.source_catalog_path:
        return SourceCatalog.from_json(settings.source_catalog_path)
    return SourceCatalog()


def extension_of(url: str) -> str:
    """File extension for a logo URL, by substring: svg, png, jpg, else png."""
    if ".svg" in url:
        return "svg"
    if ".png" in url:
        return "png"
    if ".jpg" in url or ".jpeg" in url:
        return "jpg"
    return "png"



def _origin(url: str) -> Optional[tuple[str, str, Optional[int]]]:
    parsed = urlparse(url)
    try:
        port = parsed.port
    except ValueError:
        return None
    if not parsed.hostname:
        return None
    return parsed.scheme.lower(), parsed.hostname.lower(), port
