"""Error taxonomy of the client.

Every failure surfaces to the immediate caller as one of these types:

- `ConfigurationError`: the client cannot be built (missing base URL/secret).
- `ValidationError`: call parameters are incomplete; raised before any I/O.
- `TransportError`: network failure, timeout or non-2xx HTTP status.
- `ParsingError`: the response body is not valid XML/JSON.
"""

from __future__ import annotations

from typing import Iterable


class BigBlueButtonError(Exception):
    """Base class for all errors raised by the client."""


class ConfigurationError(BigBlueButtonError):
    """Missing or invalid construction input (base URL, secret)."""


class ValidationError(BigBlueButtonError, ValueError):
    """Required call parameters are absent or inconsistent."""

    def __init__(self, message: str, missing: Iterable[str] = ()) -> None:
        super().__init__(message)
        self.missing: tuple[str, ...] = tuple(missing)


class TransportError(BigBlueButtonError):
    """HTTP request failed without a usable response body."""

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
        url: str | None = None,
    ) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.url = url


class ParsingError(BigBlueButtonError):
    """Response body could not be decoded."""

    def __init__(self, message: str, raw_body: str = "") -> None:
        super().__init__(message)
        self.raw_body = raw_body
