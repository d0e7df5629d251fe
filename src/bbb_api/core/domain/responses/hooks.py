"""Responses of the webhooks extension."""

from __future__ import annotations

from functools import cached_property

from bbb_api.core.domain.models import Hook
from bbb_api.core.domain.responses.base import XmlResponse
from bbb_api.core.response_decoder import to_bool, to_int


class HooksCreateResponse(XmlResponse):
    @property
    def hook_id(self) -> int | None:
        value = self._field("hookID")
        return None if value is None else to_int(value)

    def is_permanent_hook(self) -> bool:
        return to_bool(self._field("permanentHook"))

    def has_raw_data(self) -> bool:
        return to_bool(self._field("rawData"))


class HooksListResponse(XmlResponse):
    @cached_property
    def hooks(self) -> list[Hook]:
        return [Hook.from_xml(node) for node in self.xml.findall("hooks/hook")]


class HooksDestroyResponse(XmlResponse):
    def removed(self) -> bool:
        return to_bool(self._field("removed"))
