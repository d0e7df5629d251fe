"""Typed responses, one class per operation."""

from bbb_api.core.domain.responses.base import (
    CHECKSUM_ERROR,
    FAILED,
    SUCCESS,
    ApiResponse,
    JsonResponse,
    XmlResponse,
)
from bbb_api.core.domain.responses.hooks import (
    HooksCreateResponse,
    HooksDestroyResponse,
    HooksListResponse,
)
from bbb_api.core.domain.responses.meetings import (
    ApiVersionResponse,
    CreateMeetingResponse,
    EndMeetingResponse,
    GetDefaultConfigXMLResponse,
    GetMeetingInfoResponse,
    GetMeetingsResponse,
    IsMeetingRunningResponse,
    JoinMeetingResponse,
    SetConfigXMLResponse,
)
from bbb_api.core.domain.responses.recordings import (
    DeleteRecordingsResponse,
    GetRecordingsResponse,
    GetRecordingTextTracksResponse,
    PublishRecordingsResponse,
    PutRecordingTextTrackResponse,
    UpdateRecordingsResponse,
)

__all__ = [
    "CHECKSUM_ERROR",
    "FAILED",
    "SUCCESS",
    "ApiResponse",
    "ApiVersionResponse",
    "CreateMeetingResponse",
    "DeleteRecordingsResponse",
    "EndMeetingResponse",
    "GetDefaultConfigXMLResponse",
    "GetMeetingInfoResponse",
    "GetMeetingsResponse",
    "GetRecordingTextTracksResponse",
    "GetRecordingsResponse",
    "HooksCreateResponse",
    "HooksDestroyResponse",
    "HooksListResponse",
    "IsMeetingRunningResponse",
    "JoinMeetingResponse",
    "JsonResponse",
    "PublishRecordingsResponse",
    "PutRecordingTextTrackResponse",
    "SetConfigXMLResponse",
    "UpdateRecordingsResponse",
    "XmlResponse",
]
