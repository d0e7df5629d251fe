"""HTTP transport contract.

Why Protocol:
- Structural contract without inheritance: any object with a matching
  `request` method (httpx adapter, test stub, custom client) can be injected.
- Keeps the client free of HTTP-library details.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol, runtime_checkable


@dataclass(frozen=True)
class TransportRequest:
    """One outgoing call.

    An empty `payload` means a plain GET; anything else is sent as the body
    of a POST with `content_type`.
    """

    url: str
    payload: bytes | str = ""
    content_type: str = "application/xml"
    session_id: str | None = None


@dataclass(frozen=True)
class TransportResponse:
    """Raw server answer plus the affinity token to remember, if any."""

    body: str
    status_code: int = 200
    session_id: str | None = None


@runtime_checkable
class Transport(Protocol):
    """Minimal contract for sending a request.

    Design rules:
    - Blocking: one call, one round trip.
    - Raises `TransportError` on network failure, timeout or non-2xx status;
      never returns an error status as a successful empty response.
    """

    def request(self, request: TransportRequest) -> TransportResponse:
        """Send `request` and return the decoded body."""

        ...
