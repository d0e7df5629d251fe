"""Tests for typed responses."""

from __future__ import annotations

import pytest

from bbb_api.core.domain.responses import (
    ApiResponse,
    ApiVersionResponse,
    CreateMeetingResponse,
    DeleteRecordingsResponse,
    GetMeetingInfoResponse,
    GetMeetingsResponse,
    GetRecordingsResponse,
    GetRecordingTextTracksResponse,
    HooksCreateResponse,
    HooksDestroyResponse,
    HooksListResponse,
    IsMeetingRunningResponse,
    JoinMeetingResponse,
    PublishRecordingsResponse,
    PutRecordingTextTrackResponse,
    SetConfigXMLResponse,
    UpdateRecordingsResponse,
)
from bbb_api.core.errors import ParsingError

CHECKSUM_ERROR_XML = (
    "<response><returncode>FAILED</returncode><messageKey>checksumError</messageKey>"
    "<message>You did not pass the checksum security check</message></response>"
)

MEETING_INFO_XML = """
<response>
  <returncode>SUCCESS</returncode>
  <meetingName>Demo Meeting</meetingName>
  <meetingID>demo-1</meetingID>
  <internalMeetingID>183f0bf3a0982a127bdb8161-1531240585189</internalMeetingID>
  <createTime>1531240585189</createTime>
  <createDate>Tue Jul 10 16:36:25 UTC 2018</createDate>
  <voiceBridge>70066</voiceBridge>
  <dialNumber>613-555-1234</dialNumber>
  <attendeePW>ap</attendeePW>
  <moderatorPW>mp</moderatorPW>
  <running>true</running>
  <duration>0</duration>
  <hasUserJoined>true</hasUserJoined>
  <recording>false</recording>
  <hasBeenForciblyEnded>false</hasBeenForciblyEnded>
  <startTime>1531240585239</startTime>
  <endTime>0</endTime>
  <participantCount>2</participantCount>
  <listenerCount>1</listenerCount>
  <voiceParticipantCount>1</voiceParticipantCount>
  <videoCount>1</videoCount>
  <maxUsers>20</maxUsers>
  <moderatorCount>1</moderatorCount>
  <attendees>
    <attendee>
      <userID>w_2d2jbzgaxlgf</userID>
      <fullName>Ann Moderator</fullName>
      <role>MODERATOR</role>
      <isPresenter>true</isPresenter>
      <isListeningOnly>false</isListeningOnly>
      <hasJoinedVoice>true</hasJoinedVoice>
      <hasVideo>true</hasVideo>
      <clientType>HTML5</clientType>
      <customdata><skipCheck>true</skipCheck></customdata>
    </attendee>
    <attendee>
      <userID>w_xb1lc4gq2vfm</userID>
      <fullName>Bob Viewer</fullName>
      <role>VIEWER</role>
      <isPresenter>false</isPresenter>
      <isListeningOnly>true</isListeningOnly>
      <hasJoinedVoice>false</hasJoinedVoice>
      <hasVideo>false</hasVideo>
      <clientType>HTML5</clientType>
    </attendee>
  </attendees>
  <metadata>
    <course>Maths 101</course>
  </metadata>
  <isBreakout>false</isBreakout>
  <breakoutRooms>
    <breakout>demo-1-room-1</breakout>
  </breakoutRooms>
</response>
"""

RECORDINGS_XML = """
<response>
  <returncode>SUCCESS</returncode>
  <recordings>
    <recording>
      <recordID>ffbfc4cc24428694e8b53a4e144f414052431693-1530718721124</recordID>
      <meetingID>c637ba21adcd0191f48f5c4bf23fab0f96ed5c18</meetingID>
      <internalMeetingID>ffbfc4cc24428694e8b53a4e144f414052431693-1530718721124</internalMeetingID>
      <name>Fred's Room</name>
      <isBreakout>false</isBreakout>
      <published>true</published>
      <state>published</state>
      <startTime>1530718721124</startTime>
      <endTime>1530718810456</endTime>
      <participants>3</participants>
      <rawSize>951067</rawSize>
      <metadata>
        <isBreakout>false</isBreakout>
        <meetingName>Fred's Room</meetingName>
      </metadata>
      <playback>
        <format>
          <type>presentation</type>
          <url>https://demo.example.org/playback/presentation/2.0/playback.html?meetingId=ffbf</url>
          <processingTime>7177</processingTime>
          <length>0</length>
          <size>1104836</size>
          <preview>
            <images>
              <image alt="Welcome" height="136" width="176">https://demo.example.org/thumb-1.png</image>
            </images>
          </preview>
        </format>
        <format>
          <type>video</type>
          <url>https://demo.example.org/playback/video/ffbf/</url>
          <length>1</length>
        </format>
      </playback>
    </recording>
  </recordings>
</response>
"""


class TestStatusContract:
    def test_base_response_is_abstract(self) -> None:
        with pytest.raises(TypeError):
            ApiResponse()

    def test_checksum_error_is_failure_with_checksum_flag(self) -> None:
        response = IsMeetingRunningResponse.from_body(CHECKSUM_ERROR_XML)
        assert response.success() is False
        assert response.failed() is True
        assert response.has_checksum_error() is True
        assert response.message_key == "checksumError"
        assert response.message == "You did not pass the checksum security check"

    def test_not_found_is_not_a_checksum_error(self) -> None:
        response = GetMeetingInfoResponse.from_body(
            "<response><returncode>FAILED</returncode><messageKey>notFound</messageKey></response>"
        )
        assert response.success() is False
        assert response.has_checksum_error() is False
        assert response.meeting is None

    def test_success_marker(self) -> None:
        response = IsMeetingRunningResponse.from_body(
            "<response><returncode>SUCCESS</returncode><running>true</running></response>"
        )
        assert response.success() is True
        assert response.has_checksum_error() is False
        assert response.is_running() is True

    def test_raw_body_is_kept(self) -> None:
        assert IsMeetingRunningResponse.from_body(CHECKSUM_ERROR_XML).raw == CHECKSUM_ERROR_XML

    def test_malformed_xml_raises(self) -> None:
        with pytest.raises(ParsingError):
            GetMeetingsResponse.from_body("<response><returncode>SUCCESS")


class TestMeetingResponses:
    def test_api_version(self) -> None:
        response = ApiVersionResponse.from_body(
            "<response><returncode>SUCCESS</returncode><version>2.0</version>"
            "<apiVersion>2.0</apiVersion><bbbVersion>2.7.3</bbbVersion></response>"
        )
        assert response.version == "2.0"
        assert response.api_version == "2.0"
        assert response.bbb_version == "2.7.3"

    def test_create_meeting(self) -> None:
        response = CreateMeetingResponse.from_body(
            "<response><returncode>SUCCESS</returncode><meetingID>demo-1</meetingID>"
            "<internalMeetingID>abc-123</internalMeetingID><parentMeetingID>bbb-none</parentMeetingID>"
            "<attendeePW>ap</attendeePW><moderatorPW>mp</moderatorPW><createTime>1531155809613</createTime>"
            "<voiceBridge>70757</voiceBridge><dialNumber>613-555-1234</dialNumber>"
            "<createDate>Mon Jul 09 17:03:29 UTC 2018</createDate><hasUserJoined>false</hasUserJoined>"
            "<duration>0</duration><hasBeenForciblyEnded>false</hasBeenForciblyEnded>"
            "<messageKey>duplicateWarning</messageKey></response>"
        )
        assert response.meeting_id == "demo-1"
        assert response.internal_meeting_id == "abc-123"
        assert response.parent_meeting_id == "bbb-none"
        assert response.attendee_password == "ap"
        assert response.moderator_password == "mp"
        assert response.creation_time == 1531155809613.0
        assert response.voice_bridge == 70757
        assert response.dial_number == "613-555-1234"
        assert response.has_user_joined is False
        assert response.duration == 0
        assert response.is_duplicate() is True
        assert response.is_id_not_unique() is False

    def test_join_meeting(self) -> None:
        response = JoinMeetingResponse.from_body(
            "<response><returncode>SUCCESS</returncode><messageKey>successfullyJoined</messageKey>"
            "<meeting_id>abc-123</meeting_id><user_id>w_euxnssffnsbs</user_id>"
            "<auth_token>dvzvByybzsYy</auth_token><session_token>ai1wqj8wb6s7rnk0</session_token>"
            "<guestStatus>ALLOW</guestStatus><url>https://demo.example.org/html5client/join</url></response>"
        )
        assert response.meeting_id == "abc-123"
        assert response.user_id == "w_euxnssffnsbs"
        assert response.auth_token == "dvzvByybzsYy"
        assert response.session_token == "ai1wqj8wb6s7rnk0"
        assert response.guest_status == "ALLOW"
        assert response.url == "https://demo.example.org/html5client/join"

    def test_meeting_info(self) -> None:
        meeting = GetMeetingInfoResponse.from_body(MEETING_INFO_XML).meeting

        assert meeting is not None
        assert meeting.meeting_id == "demo-1"
        assert meeting.meeting_name == "Demo Meeting"
        assert meeting.voice_bridge == 70066
        assert meeting.is_running is True
        assert meeting.participant_count == 2
        assert meeting.start_time is not None and meeting.start_time.year == 2018
        assert meeting.end_time is None
        assert meeting.metadata == {"course": "Maths 101"}
        assert meeting.breakout_room_ids == ["demo-1-room-1"]
        assert [a.full_name for a in meeting.moderators] == ["Ann Moderator"]
        assert [a.full_name for a in meeting.viewers] == ["Bob Viewer"]
        ann = meeting.attendees[0]
        assert ann.is_presenter is True
        assert ann.has_video is True
        assert ann.custom_data == {"skipCheck": "true"}

    def test_get_meetings_lists_meetings(self) -> None:
        body = (
            "<response><returncode>SUCCESS</returncode><meetings><meeting>"
            "<meetingID>a</meetingID><meetingName>A</meetingName><running>true</running></meeting>"
            "<meeting><meetingID>b</meetingID><meetingName>B</meetingName></meeting></meetings></response>"
        )
        meetings = GetMeetingsResponse.from_body(body).meetings
        assert [m.meeting_id for m in meetings] == ["a", "b"]
        assert meetings[0].is_running is True
        assert meetings[1].is_running is False

    def test_no_meetings_is_empty_success(self) -> None:
        response = GetMeetingsResponse.from_body(
            "<response><returncode>SUCCESS</returncode><meetings/>"
            "<messageKey>noMeetings</messageKey><message>no meetings were found on this server</message></response>"
        )
        assert response.success() is True
        assert response.meetings == []

    def test_set_config_xml_token(self) -> None:
        response = SetConfigXMLResponse.from_body(
            "<response><returncode>SUCCESS</returncode><configToken>token-1</configToken></response>"
        )
        assert response.token == "token-1"


class TestRecordingResponses:
    def test_get_recordings(self) -> None:
        recordings = GetRecordingsResponse.from_body(RECORDINGS_XML).recordings

        assert len(recordings) == 1
        recording = recordings[0]
        assert recording.record_id.endswith("1530718721124")
        assert recording.name == "Fred's Room"
        assert recording.is_published is True
        assert recording.state == "published"
        assert recording.participant_count == 3
        assert recording.raw_size == 951067
        assert recording.metadata["meetingName"] == "Fred's Room"
        assert [fmt.type for fmt in recording.formats] == ["presentation", "video"]

        presentation = recording.format("presentation")
        assert presentation is not None
        assert presentation.processing_time == 7177
        assert presentation.images[0].width == 176
        assert presentation.images[0].alt == "Welcome"
        assert presentation.images[0].url == "https://demo.example.org/thumb-1.png"
        assert recording.format("podcast") is None

    def test_publish_delete_update_flags(self) -> None:
        ok = "<response><returncode>SUCCESS</returncode>{}</response>"
        assert PublishRecordingsResponse.from_body(ok.format("<published>true</published>")).is_published()
        assert DeleteRecordingsResponse.from_body(ok.format("<deleted>true</deleted>")).is_deleted()
        assert UpdateRecordingsResponse.from_body(ok.format("<updated>true</updated>")).is_updated()
        assert not UpdateRecordingsResponse.from_body(ok.format("")).is_updated()

    def test_text_tracks_json(self) -> None:
        response = GetRecordingTextTracksResponse.from_body(
            '{"response": {"returncode": "SUCCESS", "tracks": ['
            '{"href": "https://demo.example.org/captions/en.vtt", "kind": "subtitles",'
            ' "label": "English", "lang": "en-US", "source": "upload"}]}}'
        )
        assert response.success() is True
        assert len(response.tracks) == 1
        track = response.tracks[0]
        assert track.kind == "subtitles"
        assert track.lang == "en-US"
        assert track.source == "upload"

    def test_text_tracks_json_failure(self) -> None:
        response = GetRecordingTextTracksResponse.from_body(
            '{"response": {"returncode": "FAILED", "messageKey": "noRecordings", "message": "No recording found"}}'
        )
        assert response.failed() is True
        assert response.has_checksum_error() is False
        assert response.message_key == "noRecordings"
        assert response.tracks == []

    def test_put_text_track_json(self) -> None:
        response = PutRecordingTextTrackResponse.from_body(
            '{"response": {"messageKey": "upload_text_track_success", "message": "Text track uploaded",'
            ' "recordId": "baz", "returncode": "SUCCESS"}}'
        )
        assert response.success() is True
        assert response.record_id == "baz"

    def test_json_checksum_error(self) -> None:
        response = PutRecordingTextTrackResponse.from_body(
            '{"response": {"returncode": "FAILED", "messageKey": "checksumError"}}'
        )
        assert response.has_checksum_error() is True


class TestHooksResponses:
    def test_create(self) -> None:
        response = HooksCreateResponse.from_body(
            "<response><returncode>SUCCESS</returncode><hookID>1</hookID>"
            "<permanentHook>false</permanentHook><rawData>true</rawData></response>"
        )
        assert response.hook_id == 1
        assert response.is_permanent_hook() is False
        assert response.has_raw_data() is True

    def test_create_without_hook_id(self) -> None:
        response = HooksCreateResponse.from_body(
            "<response><returncode>FAILED</returncode><messageKey>createHookError</messageKey></response>"
        )
        assert response.hook_id is None

    def test_list(self) -> None:
        hooks = HooksListResponse.from_body(
            "<response><returncode>SUCCESS</returncode><hooks>"
            "<hook><hookID>1</hookID><callbackURL><![CDATA[https://cb.example.org/a]]></callbackURL>"
            "<meetingID><![CDATA[m1]]></meetingID><permanentHook>false</permanentHook><rawData>false</rawData></hook>"
            "<hook><hookID>2</hookID><callbackURL>https://cb.example.org/b</callbackURL>"
            "<permanentHook>true</permanentHook><rawData>false</rawData></hook>"
            "</hooks></response>"
        ).hooks
        assert [hook.hook_id for hook in hooks] == [1, 2]
        assert hooks[0].callback_url == "https://cb.example.org/a"
        assert hooks[0].meeting_id == "m1"
        assert hooks[1].meeting_id is None
        assert hooks[1].permanent_hook is True

    def test_destroy(self) -> None:
        response = HooksDestroyResponse.from_body(
            "<response><returncode>SUCCESS</returncode><removed>true</removed></response>"
        )
        assert response.removed() is True
