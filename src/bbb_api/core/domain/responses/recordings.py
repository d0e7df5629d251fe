"""Responses of the recording operations."""

from __future__ import annotations

from functools import cached_property

from bbb_api.core.domain.models import Recording, TextTrack
from bbb_api.core.domain.responses.base import JsonResponse, XmlResponse
from bbb_api.core.response_decoder import to_bool


class GetRecordingsResponse(XmlResponse):
    @cached_property
    def recordings(self) -> list[Recording]:
        return [Recording.from_xml(node) for node in self.xml.findall("recordings/recording")]


class PublishRecordingsResponse(XmlResponse):
    def is_published(self) -> bool:
        return to_bool(self._field("published"))


class DeleteRecordingsResponse(XmlResponse):
    def is_deleted(self) -> bool:
        return to_bool(self._field("deleted"))


class UpdateRecordingsResponse(XmlResponse):
    def is_updated(self) -> bool:
        return to_bool(self._field("updated"))


class GetRecordingTextTracksResponse(JsonResponse):
    @cached_property
    def tracks(self) -> list[TextTrack]:
        items = self.response.get("tracks")
        if not isinstance(items, list):
            return []
        return [TextTrack.from_json(item) for item in items if isinstance(item, dict)]


class PutRecordingTextTrackResponse(JsonResponse):
    @property
    def record_id(self) -> str | None:
        return self._field("recordId")
