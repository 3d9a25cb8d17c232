"""Processing phases: query variants (1) and source probing (2)."""
