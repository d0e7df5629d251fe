"""Response body decoding and value coercion.

Two entry points turn a raw body into a generic tree: `decode_xml` (most
operations) and `decode_json` (recording text tracks). Typed responses then
read values from the tree with the coercion helpers below, which return a
default instead of raising when a field is absent.
"""

from __future__ import annotations

import json
import logging
from datetime import datetime, timezone
from typing import Any
from xml.etree import ElementTree

from bbb_api.core.errors import ParsingError

logger = logging.getLogger(__name__)


def decode_xml(body: str | bytes) -> ElementTree.Element:
    """Parse `body` as XML; malformed input raises `ParsingError`."""

    raw = body.decode("utf-8", errors="replace") if isinstance(body, bytes) else body
    try:
        return ElementTree.fromstring(body)
    except ElementTree.ParseError as exc:
        logger.error("bbb_xml_parse_error", extra={"error": str(exc), "body_length": len(raw)})
        raise ParsingError("Could not parse payload as XML", raw_body=raw) from exc


def decode_json(body: str | bytes) -> dict[str, Any]:
    """Parse `body` as a JSON object; anything else raises `ParsingError`."""

    raw = body.decode("utf-8", errors="replace") if isinstance(body, bytes) else body
    try:
        data = json.loads(raw)
    except json.JSONDecodeError as exc:
        logger.error("bbb_json_parse_error", extra={"error": str(exc), "body_length": len(raw)})
        raise ParsingError("Could not parse payload as JSON", raw_body=raw) from exc
    if not isinstance(data, dict):
        raise ParsingError("JSON payload is not an object", raw_body=raw)
    return data


def text_of(element: ElementTree.Element | None, path: str, default: str | None = None) -> str | None:
    """Stripped text at `path` below `element`, or `default` when absent."""

    if element is None:
        return default
    node = element.find(path)
    if node is None or node.text is None:
        return default
    return node.text.strip()


def to_bool(value: str | bool | None, default: bool = False) -> bool:
    if value is None:
        return default
    if isinstance(value, bool):
        return value
    text = value.strip().lower()
    if text in ("true", "1", "yes"):
        return True
    if text in ("false", "0", "no"):
        return False
    return default


def to_int(value: str | int | None, default: int = 0) -> int:
    if value is None:
        return default
    try:
        return int(value)
    except (TypeError, ValueError):
        return default


def to_float(value: str | float | None, default: float = 0.0) -> float:
    if value is None:
        return default
    try:
        return float(value)
    except (TypeError, ValueError):
        return default


def to_datetime(value: str | int | None) -> datetime | None:
    """Convert epoch milliseconds (the API's time unit) to an aware UTC datetime."""

    millis = to_int(value, default=0)
    if millis <= 0:
        return None
    return datetime.fromtimestamp(millis / 1000, tz=timezone.utc)
