"""Responses of the meeting administration operations."""

from __future__ import annotations

from functools import cached_property

from bbb_api.core.domain.models import Meeting
from bbb_api.core.domain.responses.base import XmlResponse
from bbb_api.core.response_decoder import text_of, to_bool, to_float, to_int


class ApiVersionResponse(XmlResponse):
    @property
    def version(self) -> str | None:
        return self._field("version")

    @property
    def api_version(self) -> str | None:
        return self._field("apiVersion")

    @property
    def bbb_version(self) -> str | None:
        return self._field("bbbVersion")


class CreateMeetingResponse(XmlResponse):
    @property
    def meeting_id(self) -> str | None:
        return self._field("meetingID")

    @property
    def internal_meeting_id(self) -> str | None:
        return self._field("internalMeetingID")

    @property
    def parent_meeting_id(self) -> str | None:
        return self._field("parentMeetingID")

    @property
    def attendee_password(self) -> str | None:
        return self._field("attendeePW")

    @property
    def moderator_password(self) -> str | None:
        return self._field("moderatorPW")

    @property
    def creation_time(self) -> float:
        """Epoch milliseconds."""

        return to_float(self._field("createTime"))

    @property
    def voice_bridge(self) -> int:
        return to_int(self._field("voiceBridge"))

    @property
    def dial_number(self) -> str | None:
        return self._field("dialNumber")

    @property
    def creation_date(self) -> str | None:
        return self._field("createDate")

    @property
    def has_user_joined(self) -> bool:
        return to_bool(self._field("hasUserJoined"))

    @property
    def duration(self) -> int:
        return to_int(self._field("duration"))

    @property
    def has_been_forcibly_ended(self) -> bool:
        return to_bool(self._field("hasBeenForciblyEnded"))

    def is_duplicate(self) -> bool:
        """The meeting already existed with the same parameters."""

        return self.message_key == "duplicateWarning"

    def is_id_not_unique(self) -> bool:
        return self.message_key == "idNotUnique"


class JoinMeetingResponse(XmlResponse):
    """Answer of `join` with `redirect=false`."""

    @property
    def meeting_id(self) -> str | None:
        return self._field("meeting_id")

    @property
    def user_id(self) -> str | None:
        return self._field("user_id")

    @property
    def auth_token(self) -> str | None:
        return self._field("auth_token")

    @property
    def session_token(self) -> str | None:
        return self._field("session_token")

    @property
    def guest_status(self) -> str | None:
        return self._field("guestStatus")

    @property
    def url(self) -> str | None:
        return self._field("url")


class EndMeetingResponse(XmlResponse):
    pass


class IsMeetingRunningResponse(XmlResponse):
    def is_running(self) -> bool:
        return to_bool(self._field("running"))


class GetMeetingsResponse(XmlResponse):
    """`noMeetings` is a success with an empty list."""

    @cached_property
    def meetings(self) -> list[Meeting]:
        return [Meeting.from_xml(node) for node in self.xml.findall("meetings/meeting")]


class GetMeetingInfoResponse(XmlResponse):
    @cached_property
    def meeting(self) -> Meeting | None:
        """Meeting details; `None` unless the call succeeded."""

        if not self.success():
            return None
        return Meeting.from_xml(self.xml)


class GetDefaultConfigXMLResponse(XmlResponse):
    """Default client configuration document, returned as-is in `raw`."""

    @property
    def config(self) -> str:
        return self.raw


class SetConfigXMLResponse(XmlResponse):
    @property
    def token(self) -> str | None:
        return text_of(self.xml, "configToken")
