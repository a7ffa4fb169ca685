"""Configuration management for the Vikunja MCP server."""

from pathlib import Path
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from pydantic import Field, SecretStr, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict
from tzlocal import get_localzone_name


def _default_timezone() -> str:
    return get_localzone_name() or "UTC"


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env", env_file_encoding="utf-8", case_sensitive=False, extra="ignore"
    )

    # Vikunja API
    vikunja_api_base: str = Field(
        default="",
        description="Base URL of the Vikunja instance (e.g., https://vikunja.example.com)",
    )
    create_task_token: SecretStr = Field(
        default=SecretStr(""),
        description="Vikunja API token allowed to create tasks",
    )
    get_tasks_token: SecretStr = Field(
        default=SecretStr(""),
        description="Vikunja API token allowed to read tasks",
    )
    request_timeout: float = Field(
        default=30.0, gt=0, description="Timeout in seconds for Vikunja API requests"
    )

    # Local time
    timezone: str = Field(
        default_factory=_default_timezone,
        description="IANA time zone used to interpret and display reminder times. "
        "Defaults to the host time zone.",
    )

    # Logging
    log_level: str = Field(default="INFO", description="Logging level")
    log_file: Path | None = Field(default=None, description="Optional log file path")

    @field_validator("timezone")
    @classmethod
    def validate_timezone(cls, v: str) -> str:
        """Validate that timezone is a known IANA zone name."""
        try:
            ZoneInfo(v)
        except (ZoneInfoNotFoundError, ValueError) as e:
            raise ValueError(f"Unknown IANA time zone: {v}") from e
        return v

    @property
    def zone(self) -> ZoneInfo:
        """The configured time zone as a ZoneInfo instance."""
        return ZoneInfo(self.timezone)
