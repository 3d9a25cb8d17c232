"""
Error types surfaced by logofinder.

Probe misses are not errors: they are returned as ProbeOutcome values and never
leave the prober. Only the failures below cross a caller boundary.
"""

from typing import Any


class LogoFinderError(Exception):
    """Base exception for logofinder errors."""

    def __init__(self, message: str, details: dict[str, Any] | None = None):
        super().__init__(message)
        self.details = details or {}

    def to_dict(self) -> dict[str, Any]:
        return {
            "error_type": type(self).__name__,
            "message": str(self),
            "details": self.details,
        }


class SetupFailure(LogoFinderError):
    """Output directory for a batch download could not be prepared."""


class SearchFailure(LogoFinderError):
    """Unexpected exception while orchestrating an interactive search."""

    def __init__(self, cause: Exception | str, details: dict[str, Any] | None = None):
        super().__init__(f"Failed to search for logos: {cause}", details)


class DownloadFailure(LogoFinderError):
    """User-triggered download of a logo failed."""

    def __init__(self, cause: Exception | str, details: dict[str, Any] | None = None):
        super().__init__(f"Failed to download logo: {cause}", details)


class DownloadRejected(DownloadFailure):
    """URL does not belong to any source in the catalog; nothing was fetched."""
