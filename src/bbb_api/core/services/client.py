"""Client facade for the BigBlueButton API.

For every operation there is a pure `get_<op>_url(params)` that only builds
the signed URL, and an `<op>(params)` that sends it through the transport,
remembers the server-affinity token and decodes the typed response.

The client keeps mutable per-instance state (`session_id`,
`connection_error`) and is not safe for concurrent use from several threads.
"""

from __future__ import annotations

import logging
from typing import TypeVar

from pydantic import ValidationError as PydanticValidationError

from bbb_api.adapters.http_transport import HttpxTransport
from bbb_api.core.config import ApiSettings
from bbb_api.core.deprecation import deprecated
from bbb_api.core.domain.enums import ApiMethod, ConnectionErrorKind, HashingAlgorithm
from bbb_api.core.domain.parameters import (
    CreateMeetingParameters,
    DeleteRecordingsParameters,
    EndMeetingParameters,
    GetMeetingInfoParameters,
    GetRecordingsParameters,
    GetRecordingTextTracksParameters,
    HooksCreateParameters,
    HooksDestroyParameters,
    IsMeetingRunningParameters,
    JoinMeetingParameters,
    PublishRecordingsParameters,
    PutRecordingTextTrackParameters,
    SetConfigXMLParameters,
    UpdateRecordingsParameters,
)
from bbb_api.core.domain.responses import (
    ApiVersionResponse,
    CreateMeetingResponse,
    DeleteRecordingsResponse,
    EndMeetingResponse,
    GetDefaultConfigXMLResponse,
    GetMeetingInfoResponse,
    GetMeetingsResponse,
    GetRecordingsResponse,
    GetRecordingTextTracksResponse,
    HooksCreateResponse,
    HooksDestroyResponse,
    HooksListResponse,
    IsMeetingRunningResponse,
    JoinMeetingResponse,
    JsonResponse,
    PublishRecordingsResponse,
    PutRecordingTextTrackResponse,
    SetConfigXMLResponse,
    UpdateRecordingsResponse,
    XmlResponse,
)
from bbb_api.core.errors import ConfigurationError
from bbb_api.core.interfaces.transport import Transport, TransportRequest
from bbb_api.core.response_decoder import decode_json, decode_xml
from bbb_api.core.url_builder import UrlBuilder

logger = logging.getLogger(__name__)

XmlT = TypeVar("XmlT", bound=XmlResponse)
JsonT = TypeVar("JsonT", bound=JsonResponse)

CONNECTION_CHECK_MEETING_ID = "connection_check"

_CONFIG_XML_REASON = (
    "the config XML API served the Flash client, which was removed in BigBlueButton 2.2; "
    "the call itself was removed in BigBlueButton 2.3"
)


class BigBlueButton:
    """Signed-request client for one BigBlueButton deployment.

    Construction inputs are explicit arguments; anything not given is read once
    from the environment through `ApiSettings` (`BBB_SERVER_BASE_URL`,
    `BBB_SECURITY_SALT` or the legacy `BBB_SECRET`).

    Raises:
        ConfigurationError: base URL or secret is missing, or a setting is invalid.
    """

    def __init__(
        self,
        base_url: str | None = None,
        secret: str | None = None,
        transport: Transport | None = None,
        *,
        hashing_algorithm: HashingAlgorithm | str | None = None,
        settings: ApiSettings | None = None,
    ) -> None:
        if settings is None:
            try:
                settings = ApiSettings()
            except PydanticValidationError as exc:
                raise ConfigurationError(f"Invalid BBB_* environment settings: {exc}") from exc

        resolved_url = base_url or settings.server_base_url
        if not resolved_url:
            raise ConfigurationError("Base url required")
        resolved_secret = secret or settings.secret
        if not resolved_secret:
            raise ConfigurationError("Shared secret required")

        try:
            algorithm = HashingAlgorithm(hashing_algorithm or settings.hashing_algorithm)
        except ValueError as exc:
            raise ConfigurationError(f"Unsupported hashing algorithm: {hashing_algorithm!r}") from exc

        self._url_builder = UrlBuilder(resolved_secret, resolved_url, algorithm)
        self._transport: Transport = transport or HttpxTransport(settings=settings)
        self._session_id: str | None = None
        self._connection_error: ConnectionErrorKind | None = None

    @property
    def url_builder(self) -> UrlBuilder:
        return self._url_builder

    @property
    def transport(self) -> Transport:
        return self._transport

    @property
    def session_id(self) -> str | None:
        """Server-affinity token (`JSESSIONID`) replayed on every call."""

        return self._session_id

    @session_id.setter
    def session_id(self, value: str | None) -> None:
        self._session_id = value

    @property
    def connection_error(self) -> ConnectionErrorKind | None:
        """Classification of the last failed `is_connection_working` probe."""

        return self._connection_error

    # Monitoring

    def get_api_version_url(self) -> str:
        return self._url_builder.build_url()

    def get_api_version(self) -> ApiVersionResponse:
        return self._xml(ApiVersionResponse, self.get_api_version_url())

    def is_connection_working(self) -> bool:
        """Probe the server with a harmless `isMeetingRunning` call.

        Returns `True` when URL and secret both work. Otherwise
        `connection_error` tells whether the secret (checksum rejected) or the
        base URL (anything else) is at fault.
        """

        self._connection_error = None
        response: IsMeetingRunningResponse | None = None
        try:
            response = self.is_meeting_running(
                IsMeetingRunningParameters(meeting_id=CONNECTION_CHECK_MEETING_ID)
            )
        except Exception as exc:
            logger.warning(
                "bbb_connection_check_failed",
                extra={"base_url": self._url_builder.base_url, "error_type": type(exc).__name__},
            )

        if response is not None:
            if response.success():
                return True
            if response.has_checksum_error():
                self._connection_error = ConnectionErrorKind.SECRET
                logger.warning(
                    "bbb_connection_check_checksum_error",
                    extra={"base_url": self._url_builder.base_url},
                )
                return False

        self._connection_error = ConnectionErrorKind.BASE_URL
        return False

    # Meetings

    def get_create_meeting_url(self, params: CreateMeetingParameters) -> str:
        return self._url_builder.build_url(ApiMethod.CREATE, params.http_query())

    def create_meeting(self, params: CreateMeetingParameters) -> CreateMeetingResponse:
        """Create a meeting; attached presentations are sent as an XML body."""

        return self._xml(
            CreateMeetingResponse,
            self.get_create_meeting_url(params),
            params.body_payload(),
            params.body_content_type(),
        )

    def get_join_meeting_url(self, params: JoinMeetingParameters) -> str:
        return self._url_builder.build_url(ApiMethod.JOIN, params.http_query())

    def join_meeting(self, params: JoinMeetingParameters) -> JoinMeetingResponse:
        """Call `join` server-side; meaningful with `redirect=False` only."""

        return self._xml(JoinMeetingResponse, self.get_join_meeting_url(params))

    def get_end_meeting_url(self, params: EndMeetingParameters) -> str:
        return self._url_builder.build_url(ApiMethod.END, params.http_query())

    def end_meeting(self, params: EndMeetingParameters) -> EndMeetingResponse:
        return self._xml(EndMeetingResponse, self.get_end_meeting_url(params))

    def get_is_meeting_running_url(self, params: IsMeetingRunningParameters) -> str:
        return self._url_builder.build_url(ApiMethod.IS_MEETING_RUNNING, params.http_query())

    def is_meeting_running(self, params: IsMeetingRunningParameters) -> IsMeetingRunningResponse:
        return self._xml(IsMeetingRunningResponse, self.get_is_meeting_running_url(params))

    def get_meetings_url(self) -> str:
        return self._url_builder.build_url(ApiMethod.GET_MEETINGS)

    def get_meetings(self) -> GetMeetingsResponse:
        return self._xml(GetMeetingsResponse, self.get_meetings_url())

    def get_meeting_info_url(self, params: GetMeetingInfoParameters) -> str:
        return self._url_builder.build_url(ApiMethod.GET_MEETING_INFO, params.http_query())

    def get_meeting_info(self, params: GetMeetingInfoParameters) -> GetMeetingInfoResponse:
        return self._xml(GetMeetingInfoResponse, self.get_meeting_info_url(params))

    @deprecated(_CONFIG_XML_REASON)
    def get_default_config_xml_url(self) -> str:
        return self._url_builder.build_url(ApiMethod.GET_DEFAULT_CONFIG_XML)

    @deprecated(_CONFIG_XML_REASON)
    def get_default_config_xml(self) -> GetDefaultConfigXMLResponse:
        url = self._url_builder.build_url(ApiMethod.GET_DEFAULT_CONFIG_XML)
        return self._xml(GetDefaultConfigXMLResponse, url)

    @deprecated(_CONFIG_XML_REASON)
    def set_config_xml_url(self) -> str:
        return self._url_builder.build_url(ApiMethod.SET_CONFIG_XML, append_checksum=False)

    @deprecated(_CONFIG_XML_REASON)
    def set_config_xml(self, params: SetConfigXMLParameters) -> SetConfigXMLResponse:
        """Upload a client configuration; the signed query is the form body."""

        payload = self._url_builder.build_qs(ApiMethod.SET_CONFIG_XML, params.http_query())
        url = self._url_builder.build_url(ApiMethod.SET_CONFIG_XML, append_checksum=False)
        return self._xml(SetConfigXMLResponse, url, payload, params.body_content_type())

    # Recordings

    def get_recordings_url(self, params: GetRecordingsParameters) -> str:
        return self._url_builder.build_url(ApiMethod.GET_RECORDINGS, params.http_query())

    def get_recordings(self, params: GetRecordingsParameters) -> GetRecordingsResponse:
        return self._xml(GetRecordingsResponse, self.get_recordings_url(params))

    def get_publish_recordings_url(self, params: PublishRecordingsParameters) -> str:
        return self._url_builder.build_url(ApiMethod.PUBLISH_RECORDINGS, params.http_query())

    def publish_recordings(self, params: PublishRecordingsParameters) -> PublishRecordingsResponse:
        return self._xml(PublishRecordingsResponse, self.get_publish_recordings_url(params))

    def get_delete_recordings_url(self, params: DeleteRecordingsParameters) -> str:
        return self._url_builder.build_url(ApiMethod.DELETE_RECORDINGS, params.http_query())

    def delete_recordings(self, params: DeleteRecordingsParameters) -> DeleteRecordingsResponse:
        return self._xml(DeleteRecordingsResponse, self.get_delete_recordings_url(params))

    def get_update_recordings_url(self, params: UpdateRecordingsParameters) -> str:
        return self._url_builder.build_url(ApiMethod.UPDATE_RECORDINGS, params.http_query())

    def update_recordings(self, params: UpdateRecordingsParameters) -> UpdateRecordingsResponse:
        return self._xml(UpdateRecordingsResponse, self.get_update_recordings_url(params))

    def get_recording_text_tracks_url(self, params: GetRecordingTextTracksParameters) -> str:
        return self._url_builder.build_url(ApiMethod.GET_RECORDING_TEXT_TRACKS, params.http_query())

    def get_recording_text_tracks(
        self, params: GetRecordingTextTracksParameters
    ) -> GetRecordingTextTracksResponse:
        return self._json(GetRecordingTextTracksResponse, self.get_recording_text_tracks_url(params))

    def get_put_recording_text_track_url(self, params: PutRecordingTextTrackParameters) -> str:
        return self._url_builder.build_url(ApiMethod.PUT_RECORDING_TEXT_TRACK, params.http_query())

    def put_recording_text_track(
        self, params: PutRecordingTextTrackParameters
    ) -> PutRecordingTextTrackResponse:
        """Upload a caption file; without `file` the call is a plain GET."""

        url = self.get_put_recording_text_track_url(params)
        if params.file is None:
            return self._json(PutRecordingTextTrackResponse, url)
        return self._json(
            PutRecordingTextTrackResponse,
            url,
            params.body_payload(),
            params.body_content_type(),
        )

    # Webhooks

    def get_hooks_create_url(self, params: HooksCreateParameters) -> str:
        return self._url_builder.build_url(ApiMethod.HOOKS_CREATE, params.http_query())

    def hooks_create(self, params: HooksCreateParameters) -> HooksCreateResponse:
        return self._xml(HooksCreateResponse, self.get_hooks_create_url(params))

    def get_hooks_list_url(self) -> str:
        return self._url_builder.build_url(ApiMethod.HOOKS_LIST)

    def hooks_list(self) -> HooksListResponse:
        return self._xml(HooksListResponse, self.get_hooks_list_url())

    def get_hooks_destroy_url(self, params: HooksDestroyParameters) -> str:
        return self._url_builder.build_url(ApiMethod.HOOKS_DESTROY, params.http_query())

    def hooks_destroy(self, params: HooksDestroyParameters) -> HooksDestroyResponse:
        return self._xml(HooksDestroyResponse, self.get_hooks_destroy_url(params))

    # Internals

    def _request(
        self,
        url: str,
        payload: bytes | str = "",
        content_type: str = "application/xml",
    ) -> str:
        response = self._transport.request(
            TransportRequest(
                url=url,
                payload=payload,
                content_type=content_type,
                session_id=self._session_id,
            )
        )
        if response.session_id is not None:
            self._session_id = response.session_id
        return response.body

    def _xml(
        self,
        response_type: type[XmlT],
        url: str,
        payload: bytes | str = "",
        content_type: str = "application/xml",
    ) -> XmlT:
        body = self._request(url, payload, content_type)
        return response_type(decode_xml(body), raw=body)

    def _json(
        self,
        response_type: type[JsonT],
        url: str,
        payload: bytes | str = "",
        content_type: str = "application/json",
    ) -> JsonT:
        body = self._request(url, payload, content_type)
        return response_type(decode_json(body), raw=body)

    def close(self) -> None:
        close = getattr(self._transport, "close", None)
        if callable(close):
            close()

    def __enter__(self) -> "BigBlueButton":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()
