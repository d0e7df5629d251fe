"""Call parameters, one model per operation."""

from bbb_api.core.domain.parameters.base import BaseParameters, MetaParameters, to_wire_value
from bbb_api.core.domain.parameters.hooks import HooksCreateParameters, HooksDestroyParameters
from bbb_api.core.domain.parameters.meetings import (
    CreateMeetingParameters,
    EndMeetingParameters,
    GetMeetingInfoParameters,
    IsMeetingRunningParameters,
    JoinMeetingParameters,
    PresentationDocument,
    SetConfigXMLParameters,
)
from bbb_api.core.domain.parameters.recordings import (
    DeleteRecordingsParameters,
    GetRecordingsParameters,
    GetRecordingTextTracksParameters,
    PublishRecordingsParameters,
    PutRecordingTextTrackParameters,
    UpdateRecordingsParameters,
)

__all__ = [
    "BaseParameters",
    "CreateMeetingParameters",
    "DeleteRecordingsParameters",
    "EndMeetingParameters",
    "GetMeetingInfoParameters",
    "GetRecordingTextTracksParameters",
    "GetRecordingsParameters",
    "HooksCreateParameters",
    "HooksDestroyParameters",
    "IsMeetingRunningParameters",
    "JoinMeetingParameters",
    "MetaParameters",
    "PresentationDocument",
    "PublishRecordingsParameters",
    "PutRecordingTextTrackParameters",
    "SetConfigXMLParameters",
    "UpdateRecordingsParameters",
    "to_wire_value",
]
