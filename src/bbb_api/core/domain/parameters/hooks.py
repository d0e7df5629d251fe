"""Call parameters of the webhooks extension (`hooks/*`)."""

from __future__ import annotations

from bbb_api.core.domain.parameters.base import BaseParameters, wire_field


class HooksCreateParameters(BaseParameters):
    callback_url: str | None = wire_field("callbackURL", required=True)
    meeting_id: str | None = wire_field("meetingID")
    get_raw: bool | None = wire_field("getRaw")


class HooksDestroyParameters(BaseParameters):
    hook_id: int | str | None = wire_field("hookID", required=True)
