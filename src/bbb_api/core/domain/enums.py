"""Closed sets of values shared by parameters, responses and the client.

Keeping them in the domain layer lets parameters, responses and the client
share a single source of truth without circular imports.
"""

from __future__ import annotations

from enum import Enum, IntEnum


class ApiMethod(str, Enum):
    """Remote operation names, used verbatim in the URL path and checksum."""

    CREATE = "create"
    JOIN = "join"
    ENTER = "enter"
    END = "end"
    IS_MEETING_RUNNING = "isMeetingRunning"
    GET_MEETING_INFO = "getMeetingInfo"
    GET_MEETINGS = "getMeetings"
    SIGN_OUT = "signOut"
    GET_RECORDINGS = "getRecordings"
    PUBLISH_RECORDINGS = "publishRecordings"
    DELETE_RECORDINGS = "deleteRecordings"
    UPDATE_RECORDINGS = "updateRecordings"
    GET_RECORDING_TEXT_TRACKS = "getRecordingTextTracks"
    PUT_RECORDING_TEXT_TRACK = "putRecordingTextTrack"
    GET_DEFAULT_CONFIG_XML = "getDefaultConfigXML"
    SET_CONFIG_XML = "setConfigXML"
    CONFIG_XML = "configXML"
    HOOKS_CREATE = "hooks/create"
    HOOKS_LIST = "hooks/list"
    HOOKS_DESTROY = "hooks/destroy"

    def __str__(self) -> str:
        return self.value


class HashingAlgorithm(str, Enum):
    """Checksum digest; values are `hashlib` algorithm names."""

    SHA_1 = "sha1"
    SHA_256 = "sha256"
    SHA_384 = "sha384"
    SHA_512 = "sha512"


class GuestPolicy(str, Enum):
    ALWAYS_ACCEPT = "ALWAYS_ACCEPT"
    ALWAYS_DENY = "ALWAYS_DENY"
    ASK_MODERATOR = "ASK_MODERATOR"


class MeetingLayout(str, Enum):
    CUSTOM_LAYOUT = "CUSTOM_LAYOUT"
    SMART_LAYOUT = "SMART_LAYOUT"
    PRESENTATION_FOCUS = "PRESENTATION_FOCUS"
    VIDEO_FOCUS = "VIDEO_FOCUS"


class Role(str, Enum):
    MODERATOR = "MODERATOR"
    VIEWER = "VIEWER"


class ConnectionErrorKind(IntEnum):
    """Classification produced by `BigBlueButton.is_connection_working`."""

    BASE_URL = 1
    SECRET = 2

    def label(self) -> str:
        """Human readable label for the CLI and logging."""

        if self is ConnectionErrorKind.SECRET:
            return "bad shared secret"
        return "bad base URL / unreachable"
