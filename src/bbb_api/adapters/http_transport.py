"""httpx-based reference transport.

Why a wrapper:
- Standardizes timeouts, headers, TLS verification and redirects in one place.
- Converts every httpx failure (network, timeout, HTTP status) into
  `TransportError` so the client sees a single error type.
- Easy to substitute by a stub in tests (see `core.interfaces.transport`).
"""

from __future__ import annotations

import logging
from urllib.parse import urlsplit

import httpx

from bbb_api.core.config import ApiSettings
from bbb_api.core.errors import TransportError
from bbb_api.core.interfaces.transport import TransportRequest, TransportResponse

logger = logging.getLogger(__name__)

SESSION_COOKIE = "JSESSIONID"


def build_http_client(
    settings: ApiSettings | None = None,
    *,
    extra_headers: dict[str, str] | None = None,
) -> httpx.Client:
    """Create an `httpx.Client` with safe defaults.

    The client keeps its connection pool between calls, so one instance should
    be reused for every request to the same deployment.
    """

    settings = settings or ApiSettings()
    headers: dict[str, str] = {
        "User-Agent": settings.user_agent,
        "Accept": "application/xml, application/json;q=0.9, */*;q=0.8",
    }
    if extra_headers:
        headers.update(extra_headers)
    return httpx.Client(
        timeout=httpx.Timeout(settings.http_timeout_seconds),
        follow_redirects=True,
        headers=headers,
        verify=settings.verify_ssl,
    )


def _endpoint(url: str) -> str:
    # Path only: the query carries the checksum.
    parts = urlsplit(url)
    return f"{parts.scheme}://{parts.netloc}{parts.path}"


def _session_id(response: httpx.Response) -> str | None:
    value = response.cookies.get(SESSION_COOKIE)
    return value or None


class HttpxTransport:
    """Sends `TransportRequest`s with a shared `httpx.Client`."""

    def __init__(
        self,
        client: httpx.Client | None = None,
        settings: ApiSettings | None = None,
    ) -> None:
        self._owns_client = client is None
        self._client = client if client is not None else build_http_client(settings)

    @classmethod
    def with_default_options(cls, settings: ApiSettings | None = None) -> "HttpxTransport":
        return cls(settings=settings)

    def request(self, request: TransportRequest) -> TransportResponse:
        headers = {"Content-Type": request.content_type}
        if request.session_id:
            headers["Cookie"] = f"{SESSION_COOKIE}={request.session_id}"

        payload = request.payload
        verb = "POST" if payload else "GET"
        endpoint = _endpoint(request.url)
        logger.debug("bbb_http_request", extra={"http_method": verb, "endpoint": endpoint})

        try:
            if payload:
                content = payload.encode("utf-8") if isinstance(payload, str) else payload
                response = self._client.post(request.url, content=content, headers=headers)
            else:
                response = self._client.get(request.url, headers=headers)
            response.raise_for_status()
        except httpx.HTTPStatusError as exc:
            status = exc.response.status_code
            logger.warning(
                "bbb_http_status_error",
                extra={"endpoint": endpoint, "status_code": status},
            )
            raise TransportError(
                f"Bad response, HTTP code: {status}",
                status_code=status,
                url=endpoint,
            ) from exc
        except httpx.HTTPError as exc:
            logger.warning(
                "bbb_http_transport_error",
                extra={"endpoint": endpoint, "error_type": type(exc).__name__},
            )
            raise TransportError(f"HTTP request failed: {exc}", url=endpoint) from exc
        finally:
            # The affinity token lives in the caller's session_id only.
            self._client.cookies.clear()

        return TransportResponse(
            body=response.text,
            status_code=response.status_code,
            session_id=_session_id(response),
        )

    def close(self) -> None:
        """Release the connection pool if this transport created it."""

        if self._owns_client:
            self._client.close()

    def __enter__(self) -> "HttpxTransport":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()
