"""Concrete implementations of core interfaces (HTTP transport)."""

from bbb_api.adapters.http_transport import HttpxTransport, build_http_client

__all__ = ["HttpxTransport", "build_http_client"]
