"""Typed response base classes.

Every response exposes the API's own status contract:

- `returncode` is `SUCCESS` or `FAILED`;
- on failure `messageKey`/`message` explain why, `checksumError` being the
  reserved key for a signature mismatch (wrong shared secret).
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from functools import cached_property
from typing import Any
from xml.etree import ElementTree

from bbb_api.core.response_decoder import decode_json, decode_xml, text_of

SUCCESS = "SUCCESS"
FAILED = "FAILED"
CHECKSUM_ERROR = "checksumError"


class ApiResponse(ABC):
    """Shared accessors; subclasses decide where the status fields live."""

    def __init__(self, raw: str = "") -> None:
        self.raw = raw

    @abstractmethod
    def _field(self, name: str) -> str | None:
        """Raw text of the top-level status field `name`."""

    @property
    def return_code(self) -> str | None:
        return self._field("returncode")

    @property
    def message_key(self) -> str | None:
        return self._field("messageKey")

    @property
    def message(self) -> str | None:
        return self._field("message")

    def success(self) -> bool:
        return self.return_code == SUCCESS

    def failed(self) -> bool:
        return self.return_code == FAILED

    def has_checksum_error(self) -> bool:
        """True only for a signature mismatch, not for e.g. `notFound`."""

        return self.failed() and self.message_key == CHECKSUM_ERROR

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(return_code={self.return_code!r}, "
            f"message_key={self.message_key!r})"
        )


class XmlResponse(ApiResponse):
    """Response whose body is an XML document rooted at `<response>`."""

    def __init__(self, xml: ElementTree.Element, raw: str = "") -> None:
        super().__init__(raw)
        self.xml = xml

    @classmethod
    def from_body(cls, body: str) -> "XmlResponse":
        return cls(decode_xml(body), raw=body)

    def _field(self, name: str) -> str | None:
        return text_of(self.xml, name)


class JsonResponse(ApiResponse):
    """Response whose body is `{"response": {...}}`."""

    def __init__(self, data: dict[str, Any], raw: str = "") -> None:
        super().__init__(raw)
        self.data = data

    @classmethod
    def from_body(cls, body: str) -> "JsonResponse":
        return cls(decode_json(body), raw=body)

    @cached_property
    def response(self) -> dict[str, Any]:
        inner = self.data.get("response")
        return inner if isinstance(inner, dict) else {}

    def _field(self, name: str) -> str | None:
        value = self.response.get(name)
        return None if value is None else str(value)
