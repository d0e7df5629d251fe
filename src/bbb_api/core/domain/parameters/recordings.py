"""Call parameters of the recording operations.

`meetingID`, `recordID` and `state` accept several values; lists are sent
comma-separated.
"""

from __future__ import annotations

from bbb_api.core.domain.parameters.base import BaseParameters, MetaParameters, wire_field


class GetRecordingsParameters(MetaParameters):
    meeting_id: str | list[str] | None = wire_field("meetingID")
    record_id: str | list[str] | None = wire_field("recordID")
    state: str | list[str] | None = wire_field("state")
    offset: int | None = wire_field("offset")
    limit: int | None = wire_field("limit")


class PublishRecordingsParameters(MetaParameters):
    record_id: str | list[str] | None = wire_field("recordID", required=True)
    publish: bool | None = wire_field("publish", required=True)


class DeleteRecordingsParameters(BaseParameters):
    record_id: str | list[str] | None = wire_field("recordID", required=True)


class UpdateRecordingsParameters(MetaParameters):
    record_id: str | list[str] | None = wire_field("recordID", required=True)


class GetRecordingTextTracksParameters(BaseParameters):
    record_id: str | None = wire_field("recordID", required=True)


class PutRecordingTextTrackParameters(BaseParameters):
    """Parameters of `putRecordingTextTrack`.

    `file` is the caption document itself; when set it is sent as the request
    body with `content_type`.
    """

    record_id: str | None = wire_field("recordID", required=True)
    kind: str | None = wire_field("kind", required=True)
    lang: str | None = wire_field("lang", required=True)
    label: str | None = wire_field("label")
    file: bytes | None = wire_field("file", body=True)
    content_type: str = wire_field("contentType", body=True, default="text/vtt")

    def body_payload(self) -> bytes:
        return self.file or b""

    def body_content_type(self) -> str:
        return self.content_type
