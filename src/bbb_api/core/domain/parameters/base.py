"""Parameter encoding shared by every operation.

Each operation declares its fields on a pydantic model; the field alias is the
wire name. Fields carry two markers in `json_schema_extra`:

- `wire_required`: must be set before the query string can be built.
- `wire_body`: travels in the request body, never in the query string.

Dictionary fields marked with `wire_prefix` expand to one query key per entry
(`meta_<key>`, `userdata-<key>`).
"""

from __future__ import annotations

from datetime import datetime, timezone
from enum import Enum
from typing import Any, Iterator
from urllib.parse import urlencode

from pydantic import BaseModel, Field
from pydantic.config import ConfigDict
from pydantic.fields import FieldInfo

from bbb_api.core.errors import ValidationError


def wire_field(
    alias: str,
    *,
    required: bool = False,
    body: bool = False,
    default: Any = None,
    description: str | None = None,
) -> Any:
    """Declare a wire parameter."""

    extra: dict[str, Any] = {}
    if required:
        extra["wire_required"] = True
    if body:
        extra["wire_body"] = True
    return Field(
        default=default,
        alias=alias,
        description=description,
        json_schema_extra=extra or None,
    )


def prefixed_field(prefix: str, *, description: str | None = None) -> Any:
    """Declare a `{prefix}{key}` family backed by a dict."""

    return Field(
        default_factory=dict,
        description=description,
        json_schema_extra={"wire_prefix": prefix},
    )


def _markers(info: FieldInfo) -> dict[str, Any]:
    extra = info.json_schema_extra
    return extra if isinstance(extra, dict) else {}


def _is_blank(value: Any) -> bool:
    if value is None:
        return True
    if isinstance(value, (str, bytes, list, tuple, set, dict)):
        return len(value) == 0
    return False


def to_wire_value(value: Any) -> str:
    """Convert a Python value to its query-string form (before encoding)."""

    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, Enum):
        return str(value.value)
    if isinstance(value, datetime):
        # Naive values are UTC.
        if value.tzinfo is None:
            value = value.replace(tzinfo=timezone.utc)
        return str(int(value.timestamp() * 1000))
    if isinstance(value, float):
        return str(int(value)) if value.is_integer() else repr(value)
    if isinstance(value, (list, tuple, set)):
        return ",".join(to_wire_value(item) for item in value)
    return str(value)


class BaseParameters(BaseModel):
    """Common behaviour of every operation's call parameters."""

    model_config = ConfigDict(
        populate_by_name=True,
        validate_assignment=True,
        extra="forbid",
    )

    def _wire_fields(self) -> Iterator[tuple[str, FieldInfo]]:
        yield from type(self).model_fields.items()

    def missing_required(self) -> list[str]:
        """Wire names of required parameters that are not set."""

        return [
            info.alias or name
            for name, info in self._wire_fields()
            if _markers(info).get("wire_required") and _is_blank(getattr(self, name))
        ]

    def validate_required(self) -> None:
        """Raise `ValidationError` if a required parameter is absent."""

        missing = self.missing_required()
        if missing:
            raise ValidationError(
                f"{type(self).__name__} is missing required parameter(s): {', '.join(missing)}",
                missing=missing,
            )
        self._check_consistency()

    def _check_consistency(self) -> None:
        """Cross-field rules; subclasses override."""

    def to_query_pairs(self) -> list[tuple[str, str]]:
        """Ordered `(key, value)` pairs for every set query parameter."""

        self.validate_required()

        pairs: list[tuple[str, str]] = []
        families: list[tuple[str, dict[str, Any]]] = []
        for name, info in self._wire_fields():
            markers = _markers(info)
            value = getattr(self, name)
            if "wire_prefix" in markers:
                families.append((markers["wire_prefix"], value))
                continue
            if markers.get("wire_body") or info.alias is None or value is None:
                continue
            pairs.append((info.alias, to_wire_value(value)))

        for prefix, entries in families:
            for key, value in entries.items():
                if value is None:
                    continue
                pairs.append((f"{prefix}{key}", to_wire_value(value)))
        return pairs

    def http_query(self) -> str:
        """URL-encoded query string (`application/x-www-form-urlencoded`)."""

        return urlencode(self.to_query_pairs())

    def body_payload(self) -> bytes | str:
        """Request body for fields that do not travel in the query string."""

        return ""

    def body_content_type(self) -> str:
        return "application/xml"


class MetaParameters(BaseParameters):
    """Operations accepting free-form `meta_<key>` parameters."""

    meta: dict[str, Any] = prefixed_field("meta_", description="Free-form metadata.")

    def add_meta(self, key: str, value: Any) -> "MetaParameters":
        self.meta[key] = value
        return self

    def get_meta(self, key: str) -> Any:
        return self.meta.get(key)
