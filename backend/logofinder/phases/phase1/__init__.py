"""Phase 1: Query Processing."""

from .schemas import VariantsOutput
from .variants import VARIANT_RULES, expand_variants, generate_variants

__all__ = [
    "expand_variants",
    "generate_variants",
    "VARIANT_RULES",
    "VariantsOutput",
]
