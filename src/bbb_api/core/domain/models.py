"""Domain entities (Pydantic v2) read from API responses.

Why Pydantic in the domain:
- Typed, documented fields (Field) without coupling the core to I/O.
- The `from_xml`/`from_json` constructors normalize the server's stringly
  typed payloads in one place.

These models describe *what* the server reports, not *how* it is fetched.
"""

from __future__ import annotations

from datetime import datetime
from typing import Any
from xml.etree import ElementTree

from pydantic import BaseModel, Field
from pydantic.config import ConfigDict

from bbb_api.core.response_decoder import text_of, to_bool, to_datetime, to_float, to_int


def _children_as_dict(element: ElementTree.Element | None) -> dict[str, str]:
    if element is None:
        return {}
    return {child.tag: (child.text or "").strip() for child in element}


class Attendee(BaseModel):
    """A user currently in a meeting."""

    user_id: str = Field(..., description="Internal user identifier (`userID`).")
    full_name: str = Field(default="", description="Display name.")
    role: str = Field(default="VIEWER", description="`MODERATOR` or `VIEWER`.")
    is_presenter: bool = False
    is_listening_only: bool = False
    has_joined_voice: bool = False
    has_video: bool = False
    client_type: str | None = None
    custom_data: dict[str, str] = Field(
        default_factory=dict,
        description="`userdata-*` values passed on join.",
    )

    @classmethod
    def from_xml(cls, element: ElementTree.Element) -> "Attendee":
        return cls(
            user_id=text_of(element, "userID", ""),
            full_name=text_of(element, "fullName", ""),
            role=text_of(element, "role", "VIEWER"),
            is_presenter=to_bool(text_of(element, "isPresenter")),
            is_listening_only=to_bool(text_of(element, "isListeningOnly")),
            has_joined_voice=to_bool(text_of(element, "hasJoinedVoice")),
            has_video=to_bool(text_of(element, "hasVideo")),
            client_type=text_of(element, "clientType"),
            custom_data=_children_as_dict(element.find("customdata")),
        )

    def is_moderator(self) -> bool:
        return self.role.upper() == "MODERATOR"


class Meeting(BaseModel):
    """A meeting as listed by `getMeetings` or detailed by `getMeetingInfo`."""

    meeting_id: str = Field(..., description="External meeting identifier (`meetingID`).")
    meeting_name: str = ""
    internal_meeting_id: str | None = None
    creation_time: float = Field(default=0.0, description="Epoch milliseconds.")
    creation_date: str | None = None
    voice_bridge: int = 0
    dial_number: str | None = None
    attendee_password: str | None = None
    moderator_password: str | None = None
    is_running: bool = False
    duration: int = 0
    has_user_joined: bool = False
    is_recording: bool = False
    has_been_forcibly_ended: bool = False
    start_time: datetime | None = None
    end_time: datetime | None = None
    participant_count: int = 0
    listener_count: int = 0
    voice_participant_count: int = 0
    video_count: int = 0
    max_users: int = 0
    moderator_count: int = 0
    is_breakout: bool = False
    parent_meeting_id: str | None = None
    breakout_room_ids: list[str] = Field(default_factory=list)
    attendees: list[Attendee] = Field(default_factory=list)
    metadata: dict[str, str] = Field(default_factory=dict)

    @classmethod
    def from_xml(cls, element: ElementTree.Element) -> "Meeting":
        breakout = element.find("breakout")
        parent_meeting_id = breakout.get("parentMeetingID") if breakout is not None else None
        return cls(
            meeting_id=text_of(element, "meetingID", ""),
            meeting_name=text_of(element, "meetingName", ""),
            internal_meeting_id=text_of(element, "internalMeetingID"),
            creation_time=to_float(text_of(element, "createTime")),
            creation_date=text_of(element, "createDate"),
            voice_bridge=to_int(text_of(element, "voiceBridge")),
            dial_number=text_of(element, "dialNumber"),
            attendee_password=text_of(element, "attendeePW"),
            moderator_password=text_of(element, "moderatorPW"),
            is_running=to_bool(text_of(element, "running")),
            duration=to_int(text_of(element, "duration")),
            has_user_joined=to_bool(text_of(element, "hasUserJoined")),
            is_recording=to_bool(text_of(element, "recording")),
            has_been_forcibly_ended=to_bool(text_of(element, "hasBeenForciblyEnded")),
            start_time=to_datetime(text_of(element, "startTime")),
            end_time=to_datetime(text_of(element, "endTime")),
            participant_count=to_int(text_of(element, "participantCount")),
            listener_count=to_int(text_of(element, "listenerCount")),
            voice_participant_count=to_int(text_of(element, "voiceParticipantCount")),
            video_count=to_int(text_of(element, "videoCount")),
            max_users=to_int(text_of(element, "maxUsers")),
            moderator_count=to_int(text_of(element, "moderatorCount")),
            is_breakout=to_bool(text_of(element, "isBreakout")),
            parent_meeting_id=parent_meeting_id,
            breakout_room_ids=[
                (node.text or "").strip() for node in element.findall("breakoutRooms/breakout")
            ],
            attendees=[Attendee.from_xml(node) for node in element.findall("attendees/attendee")],
            metadata=_children_as_dict(element.find("metadata")),
        )

    @property
    def moderators(self) -> list[Attendee]:
        return [attendee for attendee in self.attendees if attendee.is_moderator()]

    @property
    def viewers(self) -> list[Attendee]:
        return [attendee for attendee in self.attendees if not attendee.is_moderator()]


class PreviewImage(BaseModel):
    url: str
    width: int = 0
    height: int = 0
    alt: str | None = None


class RecordingFormat(BaseModel):
    """One playback format (`presentation`, `video`, `podcast`, ...)."""

    type: str = Field(..., description="Playback format name.")
    url: str = ""
    processing_time: int = 0
    length: int = Field(default=0, description="Playback length in minutes.")
    size: int = 0
    images: list[PreviewImage] = Field(default_factory=list)

    @classmethod
    def from_xml(cls, element: ElementTree.Element) -> "RecordingFormat":
        images = [
            PreviewImage(
                url=(node.text or "").strip(),
                width=to_int(node.get("width")),
                height=to_int(node.get("height")),
                alt=node.get("alt"),
            )
            for node in element.findall("preview/images/image")
        ]
        return cls(
            type=text_of(element, "type", ""),
            url=text_of(element, "url", ""),
            processing_time=to_int(text_of(element, "processingTime")),
            length=to_int(text_of(element, "length")),
            size=to_int(text_of(element, "size")),
            images=images,
        )


class Recording(BaseModel):
    """A recording listed by `getRecordings`."""

    record_id: str = Field(..., description="Recording identifier (`recordID`).")
    meeting_id: str = ""
    internal_meeting_id: str | None = None
    name: str = ""
    is_published: bool = False
    is_breakout: bool = False
    state: str | None = None
    start_time: datetime | None = None
    end_time: datetime | None = None
    participant_count: int = 0
    raw_size: int = 0
    metadata: dict[str, str] = Field(default_factory=dict)
    formats: list[RecordingFormat] = Field(default_factory=list)

    @classmethod
    def from_xml(cls, element: ElementTree.Element) -> "Recording":
        return cls(
            record_id=text_of(element, "recordID", ""),
            meeting_id=text_of(element, "meetingID", ""),
            internal_meeting_id=text_of(element, "internalMeetingID"),
            name=text_of(element, "name", ""),
            is_published=to_bool(text_of(element, "published")),
            is_breakout=to_bool(text_of(element, "isBreakout")),
            state=text_of(element, "state"),
            start_time=to_datetime(text_of(element, "startTime")),
            end_time=to_datetime(text_of(element, "endTime")),
            participant_count=to_int(text_of(element, "participants")),
            raw_size=to_int(text_of(element, "rawSize")),
            metadata=_children_as_dict(element.find("metadata")),
            formats=[RecordingFormat.from_xml(node) for node in element.findall("playback/format")],
        )

    def format(self, type_: str) -> RecordingFormat | None:
        """First playback format named `type_`, if any."""

        return next((fmt for fmt in self.formats if fmt.type == type_), None)


class Hook(BaseModel):
    """A webhook registered through `hooks/create`."""

    hook_id: int = Field(..., description="Identifier assigned by the server.")
    callback_url: str = ""
    meeting_id: str | None = None
    permanent_hook: bool = False
    raw_data: bool = False

    @classmethod
    def from_xml(cls, element: ElementTree.Element) -> "Hook":
        return cls(
            hook_id=to_int(text_of(element, "hookID")),
            callback_url=text_of(element, "callbackURL", ""),
            meeting_id=text_of(element, "meetingID"),
            permanent_hook=to_bool(text_of(element, "permanentHook")),
            raw_data=to_bool(text_of(element, "rawData")),
        )


class TextTrack(BaseModel):
    """Caption/subtitle track of a recording (JSON API)."""

    model_config = ConfigDict(extra="ignore")

    href: str = ""
    kind: str = ""
    label: str = ""
    lang: str = ""
    source: str = ""

    @classmethod
    def from_json(cls, data: dict[str, Any]) -> "TextTrack":
        return cls.model_validate({key: value for key, value in data.items() if value is not None})
