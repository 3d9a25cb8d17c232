"""
Phase 1 Query Processing: Pydantic schemas for variant generation.
"""

from pydantic import BaseModel, Field


class VariantsOutput(BaseModel):
    """Ordered, deduplicated identifier variants derived from a query."""

    query: str = Field(..., description="User's original query, as supplied")
    variants: list[str] = Field(
        default_factory=list,
        description="Candidate identifiers in generation order (first = probed first)",
    )
