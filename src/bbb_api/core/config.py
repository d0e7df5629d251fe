"""Client configuration.

Why here:
- Centralizes environment variables (pydantic-settings) so the facade and the
  transport read them consistently.
- The environment is consulted only when a client is constructed; nothing
  reads it lazily afterwards.
"""

from __future__ import annotations

from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from bbb_api.core.domain.enums import HashingAlgorithm


class ApiSettings(BaseSettings):
    """Connection settings for one BigBlueButton deployment.

    Variables:
    - `BBB_SERVER_BASE_URL`: API endpoint, e.g. `https://host/bigbluebutton/api`.
    - `BBB_SECURITY_SALT`, or the legacy `BBB_SECRET`: shared secret.
    - `BBB_HASHING_ALGORITHM`, `BBB_HTTP_TIMEOUT_SECONDS`, `BBB_USER_AGENT`,
      `BBB_VERIFY_SSL`: transport and signing tuning.
    """

    model_config = SettingsConfigDict(
        env_prefix="BBB_",
        extra="ignore",
        case_sensitive=False,
        populate_by_name=True,
        env_file=".env",
        env_file_encoding="utf-8",
    )

    server_base_url: str | None = Field(
        default=None,
        description="Base URL of the API endpoint (without the method name).",
    )
    secret: str | None = Field(
        default=None,
        validation_alias=AliasChoices("BBB_SECURITY_SALT", "BBB_SECRET"),
        description="Shared secret used to sign every call.",
    )
    hashing_algorithm: HashingAlgorithm = Field(
        default=HashingAlgorithm.SHA_1,
        description="Checksum digest; must match the server configuration.",
    )
    http_timeout_seconds: float = Field(
        default=10.0,
        gt=0,
        description="Per-request timeout (seconds).",
    )
    user_agent: str = Field(
        default="bbb-api-client/0.1",
        min_length=1,
        description="User-Agent sent with each request.",
    )
    verify_ssl: bool = Field(
        default=True,
        description="Verify the server TLS certificate.",
    )
