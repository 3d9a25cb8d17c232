"""HTTP clients for logo hosts."""

from .http import HttpTransport, get_transport

__all__ = ["HttpTransport", "get_transport"]
