"""Final URL assembly: `base/method?query&checksum=<hex>`."""

from __future__ import annotations

from bbb_api.core.checksum import build_checksum
from bbb_api.core.domain.enums import ApiMethod, HashingAlgorithm


class UrlBuilder:
    """Builds signed URLs for one deployment.

    The query string is used as given: it is expected to be encoded already by
    the parameter models and is never re-encoded here.
    """

    def __init__(
        self,
        secret: str,
        base_url: str,
        algorithm: HashingAlgorithm = HashingAlgorithm.SHA_1,
    ) -> None:
        self._secret = secret
        self._base_url = base_url[:-1] if base_url.endswith("/") else base_url
        self._algorithm = HashingAlgorithm(algorithm)

    @property
    def base_url(self) -> str:
        return self._base_url

    @property
    def algorithm(self) -> HashingAlgorithm:
        return self._algorithm

    def build_url(
        self,
        method: ApiMethod | str | None = None,
        query: str = "",
        append_checksum: bool = True,
    ) -> str:
        """Return the request URL.

        - No method: the bare endpoint (API version probe).
        - `append_checksum=False`: `base/method` only; the signed query then
          travels in the request body (see `build_qs`).
        """

        if not method:
            return self._base_url

        name = method.value if isinstance(method, ApiMethod) else method
        url = f"{self._base_url}/{name}"
        if not append_checksum:
            return url
        return f"{url}?{self.build_qs(name, query)}"

    def build_qs(self, method: ApiMethod | str, query: str = "") -> str:
        """Return `query&checksum=<hex>` (or `checksum=<hex>` for an empty query)."""

        checksum = build_checksum(method, query, self._secret, self._algorithm)
        if not query:
            return f"checksum={checksum}"
        return f"{query}&checksum={checksum}"
