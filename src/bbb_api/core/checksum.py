"""Request signing.

The server recomputes the digest over `method + query + secret` and rejects
the call with `checksumError` when it differs, so the input must be the query
string exactly as sent (already percent-encoded).
"""

from __future__ import annotations

import hashlib

from bbb_api.core.domain.enums import ApiMethod, HashingAlgorithm


def build_checksum(
    method: ApiMethod | str,
    query_string: str,
    secret: str,
    algorithm: HashingAlgorithm = HashingAlgorithm.SHA_1,
) -> str:
    """Return the lowercase hex digest of `method + query_string + secret`."""

    name = method.value if isinstance(method, ApiMethod) else method
    digest = hashlib.new(HashingAlgorithm(algorithm).value)
    digest.update(f"{name}{query_string}{secret}".encode("utf-8"))
    return digest.hexdigest()
