"""
Phase 1: Variant generation.

Turns a human-supplied brand/service name into the spellings logo hosts are
likely to use as file names ("ReactJS" -> "React", "reactjs", ...).
"""

import re
from typing import Callable

from .schemas import VariantsOutput

_WHITESPACE = re.compile(r"\s+")

# Applied in order to the trimmed query; order decides probe priority.
VARIANT_RULES: list[tuple[str, Callable[[str], str]]] = [
    ("identity", lambda q: q),
    ("strip_js", lambda q: re.sub(r"js$", "", q, flags=re.IGNORECASE)),  # reactjs -> react
    ("strip_db", lambda q: re.sub(r"db$", "", q, flags=re.IGNORECASE)),  # mongodb -> mongo
    ("lowercase", lambda q: q.lower()),
    ("no_hyphens", lambda q: q.replace("-", "")),  # socket-io -> socketio
    ("no_whitespace", lambda q: _WHITESPACE.sub("", q)),  # visual studio -> visualstudio
    ("hyphenate", lambda q: _WHITESPACE.sub("-", q)),  # visual studio -> visual-studio
]


def generate_variants(query: str) -> list[str]:
    """
    Return candidate identifiers for *query*, deduplicated by exact string
    equality with the first occurrence kept. Blank input yields [].

    Dedup is case-sensitive: "React" and "react" are distinct variants.
    """
    query = (query or "").strip()
    if not query:
        return []

    candidates = (rule(query) for _, rule in VARIANT_RULES)
    # A stripped suffix can leave nothing behind ("js" -> "")
    return list(dict.fromkeys(c for c in candidates if c))


def expand_variants(query: str) -> VariantsOutput:
    """Variant generation wrapped for the API."""
    return VariantsOutput(query=query, variants=generate_variants(query))
