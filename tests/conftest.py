"""pytest configuration for bbb-api-client."""

from __future__ import annotations

import sys
from pathlib import Path

import pytest

# Allow running the suite without an editable install.
src_path = Path(__file__).parent.parent / "src"
if str(src_path) not in sys.path:
    sys.path.insert(0, str(src_path))

from bbb_api.core.errors import TransportError  # noqa: E402
from bbb_api.core.interfaces.transport import TransportRequest, TransportResponse  # noqa: E402

BASE_URL = "https://example.org/bigbluebutton/api"
SECRET = "supersecret"

CHECKSUM_ERROR_XML = (
    "<response><returncode>FAILED</returncode><messageKey>checksumError</messageKey>"
    "<message>You did not pass the checksum security check</message></response>"
)
NOT_FOUND_XML = (
    "<response><returncode>FAILED</returncode><messageKey>notFound</messageKey>"
    "<message>We could not find a meeting with that meeting ID</message></response>"
)
RUNNING_XML = "<response><returncode>SUCCESS</returncode><running>false</running></response>"


class StubTransport:
    """Transport double: replays queued bodies/errors and records requests."""

    def __init__(self, *responses: str | TransportResponse | Exception) -> None:
        self.requests: list[TransportRequest] = []
        self._responses = list(responses)

    def queue(self, *responses: str | TransportResponse | Exception) -> None:
        self._responses.extend(responses)

    def request(self, request: TransportRequest) -> TransportResponse:
        self.requests.append(request)
        if not self._responses:
            raise TransportError("no stubbed response left", url=request.url)
        item = self._responses.pop(0)
        if isinstance(item, Exception):
            raise item
        if isinstance(item, TransportResponse):
            return item
        return TransportResponse(body=item)

    @property
    def last(self) -> TransportRequest:
        return self.requests[-1]


@pytest.fixture(autouse=True)
def _isolated_environment(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    """No BBB_* variables or stray `.env` file leak into the tests."""

    for name in (
        "BBB_SERVER_BASE_URL",
        "BBB_SECURITY_SALT",
        "BBB_SECRET",
        "BBB_HASHING_ALGORITHM",
        "BBB_HTTP_TIMEOUT_SECONDS",
        "BBB_USER_AGENT",
        "BBB_VERIFY_SSL",
    ):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path)


@pytest.fixture
def stub_transport() -> StubTransport:
    return StubTransport()


@pytest.fixture
def client(stub_transport: StubTransport):
    from bbb_api.core.services.client import BigBlueButton

    return BigBlueButton(BASE_URL, SECRET, stub_transport)
