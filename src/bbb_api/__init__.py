"""Client library for the BigBlueButton HTTP API."""

from bbb_api.core.config import ApiSettings
from bbb_api.core.domain.enums import (
    ApiMethod,
    ConnectionErrorKind,
    GuestPolicy,
    HashingAlgorithm,
    MeetingLayout,
    Role,
)
from bbb_api.core.errors import (
    BigBlueButtonError,
    ConfigurationError,
    ParsingError,
    TransportError,
    ValidationError,
)
from bbb_api.core.services.client import BigBlueButton

__version__ = "0.1.0"

__all__ = [
    "ApiMethod",
    "ApiSettings",
    "BigBlueButton",
    "BigBlueButtonError",
    "ConfigurationError",
    "ConnectionErrorKind",
    "GuestPolicy",
    "HashingAlgorithm",
    "MeetingLayout",
    "ParsingError",
    "Role",
    "TransportError",
    "ValidationError",
]
