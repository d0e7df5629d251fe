"""Call parameters of the meeting administration operations."""

from __future__ import annotations

import base64
from typing import Any
from xml.etree import ElementTree

from pydantic import BaseModel, Field

from bbb_api.core.domain.enums import GuestPolicy, MeetingLayout, Role
from bbb_api.core.domain.parameters.base import (
    BaseParameters,
    MetaParameters,
    prefixed_field,
    wire_field,
)
from bbb_api.core.errors import ValidationError

_BREAKOUT_ONLY = ("parentMeetingID", "sequence", "freeJoin")


class PresentationDocument(BaseModel):
    """One pre-uploaded presentation: either a URL or inline content."""

    url: str | None = None
    name: str | None = None
    filename: str | None = None
    content: bytes | None = None


class CreateMeetingParameters(MetaParameters):
    """Parameters of `create`.

    Presentations are not query parameters: they are rendered as an XML
    document by `body_payload` and sent as the request body.
    """

    meeting_id: str | None = wire_field("meetingID", required=True)
    meeting_name: str | None = wire_field("name", required=True)
    attendee_password: str | None = wire_field("attendeePW")
    moderator_password: str | None = wire_field("moderatorPW")
    dial_number: str | None = wire_field("dialNumber")
    voice_bridge: int | None = wire_field("voiceBridge")
    web_voice: str | None = wire_field("webVoice")
    logout_url: str | None = wire_field("logoutURL")
    record: bool | None = wire_field("record")
    duration: int | None = wire_field("duration")
    max_participants: int | None = wire_field("maxParticipants")
    auto_start_recording: bool | None = wire_field("autoStartRecording")
    allow_start_stop_recording: bool | None = wire_field("allowStartStopRecording")
    welcome_message: str | None = wire_field("welcome")
    moderator_only_message: str | None = wire_field("moderatorOnlyMessage")
    webcams_only_for_moderator: bool | None = wire_field("webcamsOnlyForModerator")
    logo: str | None = wire_field("logo")
    copyright: str | None = wire_field("copyright")
    mute_on_start: bool | None = wire_field("muteOnStart")
    allow_mods_to_unmute_users: bool | None = wire_field("allowModsToUnmuteUsers")
    allow_mods_to_eject_cameras: bool | None = wire_field("allowModsToEjectCameras")
    lock_settings_disable_cam: bool | None = wire_field("lockSettingsDisableCam")
    lock_settings_disable_mic: bool | None = wire_field("lockSettingsDisableMic")
    lock_settings_disable_private_chat: bool | None = wire_field("lockSettingsDisablePrivateChat")
    lock_settings_disable_public_chat: bool | None = wire_field("lockSettingsDisablePublicChat")
    lock_settings_disable_note: bool | None = wire_field("lockSettingsDisableNote")
    lock_settings_hide_user_list: bool | None = wire_field("lockSettingsHideUserList")
    lock_settings_locked_layout: bool | None = wire_field("lockSettingsLockedLayout")
    lock_settings_lock_on_join: bool | None = wire_field("lockSettingsLockOnJoin")
    lock_settings_lock_on_join_configurable: bool | None = wire_field(
        "lockSettingsLockOnJoinConfigurable"
    )
    guest_policy: GuestPolicy | None = wire_field("guestPolicy")
    meeting_layout: MeetingLayout | None = wire_field("meetingLayout")
    end_when_no_moderator: bool | None = wire_field("endWhenNoModerator")
    end_when_no_moderator_delay_in_minutes: int | None = wire_field(
        "endWhenNoModeratorDelayInMinutes"
    )
    meeting_keep_events: bool | None = wire_field("meetingKeepEvents")
    learning_dashboard_enabled: bool | None = wire_field("learningDashboardEnabled")
    learning_dashboard_cleanup_delay_in_minutes: int | None = wire_field(
        "learningDashboardCleanupDelayInMinutes"
    )
    breakout_rooms_enabled: bool | None = wire_field("breakoutRoomsEnabled")
    breakout_rooms_private_chat_enabled: bool | None = wire_field("breakoutRoomsPrivateChatEnabled")
    breakout_rooms_record: bool | None = wire_field("breakoutRoomsRecord")
    banner_text: str | None = wire_field("bannerText")
    banner_color: str | None = wire_field("bannerColor")
    allow_requests_without_session: bool | None = wire_field("allowRequestsWithoutSession")
    virtual_backgrounds_disabled: bool | None = wire_field("virtualBackgroundsDisabled")
    user_camera_cap: int | None = wire_field("userCameraCap")
    meeting_camera_cap: int | None = wire_field("meetingCameraCap")
    meeting_expire_if_no_user_joined_in_minutes: int | None = wire_field(
        "meetingExpireIfNoUserJoinedInMinutes"
    )
    meeting_expire_when_last_user_left_in_minutes: int | None = wire_field(
        "meetingExpireWhenLastUserLeftInMinutes"
    )
    pre_uploaded_presentation_override_default: bool | None = wire_field(
        "preUploadedPresentationOverrideDefault"
    )
    disabled_features: list[str] | None = wire_field("disabledFeatures")
    is_breakout: bool | None = wire_field("isBreakout")
    parent_meeting_id: str | None = wire_field("parentMeetingID")
    sequence: int | None = wire_field("sequence")
    free_join: bool | None = wire_field("freeJoin")
    presentations: list[PresentationDocument] = Field(
        default_factory=list,
        json_schema_extra={"wire_body": True},
    )

    def add_presentation(
        self,
        name_or_url: str,
        content: bytes | str | None = None,
        filename: str | None = None,
    ) -> "CreateMeetingParameters":
        """Attach a presentation.

        A value starting with `http` is a URL the server downloads (optionally
        renamed with `filename`); anything else is a file name whose `content`
        is embedded base64-encoded.
        """

        if name_or_url.startswith("http"):
            document = PresentationDocument(url=name_or_url, filename=filename)
        else:
            if content is None:
                raise ValidationError(
                    f"Presentation {name_or_url!r} needs inline content",
                    missing=["content"],
                )
            raw = content.encode("utf-8") if isinstance(content, str) else content
            document = PresentationDocument(name=name_or_url, content=raw)
        self.presentations.append(document)
        return self

    def _check_consistency(self) -> None:
        if not self.is_breakout:
            return
        missing = [
            alias
            for alias, value in (("parentMeetingID", self.parent_meeting_id), ("sequence", self.sequence))
            if value is None
        ]
        if missing:
            raise ValidationError(
                "Breakout rooms require a parentMeetingID and sequence number",
                missing=missing,
            )

    def to_query_pairs(self) -> list[tuple[str, str]]:
        pairs = super().to_query_pairs()
        if self.is_breakout:
            return pairs
        return [(key, value) for key, value in pairs if key not in _BREAKOUT_ONLY]

    def body_payload(self) -> str:
        """`<modules>` document with the presentations, or `""` when none."""

        if not self.presentations:
            return ""

        modules = ElementTree.Element("modules")
        module = ElementTree.SubElement(modules, "module", {"name": "presentation"})
        for presentation in self.presentations:
            document = ElementTree.SubElement(module, "document")
            if presentation.url:
                document.set("url", presentation.url)
                if presentation.filename:
                    document.set("filename", presentation.filename)
            else:
                document.set("name", presentation.name or "")
                document.text = base64.b64encode(presentation.content or b"").decode("ascii")

        body = ElementTree.tostring(modules, encoding="unicode")
        return f'<?xml version="1.0" encoding="UTF-8"?>\n{body}'


class JoinMeetingParameters(BaseParameters):
    """Parameters of `join`; custom `userdata-<key>` values via `add_user_data`."""

    meeting_id: str | None = wire_field("meetingID", required=True)
    full_name: str | None = wire_field("fullName", required=True)
    password: str | None = wire_field("password")
    role: Role | None = wire_field("role")
    user_id: str | None = wire_field("userID")
    web_voice_conf: str | None = wire_field("webVoiceConf")
    create_time: int | None = wire_field("createTime")
    avatar_url: str | None = wire_field("avatarURL")
    redirect: bool | None = wire_field("redirect")
    client_url: str | None = wire_field("clientURL")
    join_via_html5: bool | None = wire_field("joinViaHtml5")
    guest: bool | None = wire_field("guest")
    default_layout: MeetingLayout | None = wire_field("defaultLayout")
    exclude_from_dashboard: bool | None = wire_field("excludeFromDashboard")
    config_token: str | None = wire_field("configToken")
    user_data: dict[str, Any] = prefixed_field("userdata-")

    def add_user_data(self, key: str, value: Any) -> "JoinMeetingParameters":
        self.user_data[key] = value
        return self


class EndMeetingParameters(BaseParameters):
    meeting_id: str | None = wire_field("meetingID", required=True)
    password: str | None = wire_field("password")


class IsMeetingRunningParameters(BaseParameters):
    meeting_id: str | None = wire_field("meetingID", required=True)


class GetMeetingInfoParameters(BaseParameters):
    meeting_id: str | None = wire_field("meetingID", required=True)
    password: str | None = wire_field("password")
    offset: int | None = wire_field("offset")
    limit: int | None = wire_field("limit")


class SetConfigXMLParameters(BaseParameters):
    """Parameters of the deprecated `setConfigXML` call.

    The whole signed query is sent as a form body, not in the URL.
    """

    meeting_id: str | None = wire_field("meetingID", required=True)
    config_xml: str | None = wire_field("configXML", required=True)

    def body_content_type(self) -> str:
        return "application/x-www-form-urlencoded"
