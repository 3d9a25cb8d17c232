"""logofinder: resolve brand and service names to downloadable logos."""

from logofinder.phases.phase1 import generate_variants
from logofinder.phases.phase2 import extension_of, resolve, search_logos

__version__ = "0.1.0"

__all__ = ["extension_of", "generate_variants", "resolve", "search_logos"]
