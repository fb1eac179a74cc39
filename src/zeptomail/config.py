"""
Client configuration with environment-driven settings.

Values come from ZEPTOMAIL_* environment variables or a local .env file.
"""

from enum import Enum

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

API_VERSION = "v1.1"
DEFAULT_TIMEOUT_SECONDS = 30.0
DEFAULT_AUTH_SCHEME = "Zoho-enczapikey"


class Region(str, Enum):
    """Regional data centres, by top-level domain of the API host."""

    US = "com"
    EU = "eu"
    IN = "in"
    AU = "com.au"
    JP = "jp"
    CA = "ca"

    @property
    def base_url(self) -> str:
        return f"https://api.zeptomail.{self.value}/{API_VERSION}"


DEFAULT_BASE_URL = Region.EU.base_url


class ZeptoMailSettings(BaseSettings):
    """ZeptoMail client configuration from environment."""

    model_config = SettingsConfigDict(
        env_prefix="ZEPTOMAIL_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    api_key: str = Field(default="", description="Send Mail token from the Mail Agent")
    region: Region = Field(default=Region.EU)
    base_url: str | None = Field(
        default=None,
        description="Overrides the regional base URL when set.",
    )
    timeout_seconds: float = Field(default=DEFAULT_TIMEOUT_SECONDS, ge=1, le=300)
    auth_scheme: str = Field(default=DEFAULT_AUTH_SCHEME)
    log_level: str = "INFO"

    @property
    def resolved_base_url(self) -> str:
        if self.base_url:
            return self.base_url.rstrip("/")
        return self.region.base_url


def get_settings() -> ZeptoMailSettings:
    return ZeptoMailSettings()
