"""Pydantic configuration models with validation."""

from __future__ import annotations

from typing import Any, Literal, Optional

from pydantic import AliasChoices, AliasPath, BaseModel, Field, field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

Environment = Literal["dev", "test", "prod"]
LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR"]
LogFormat = Literal["json", "console"]


def _flat_or_sectioned(flat: str, section: str, key: str) -> AliasChoices:
    # Accept both ``log_level`` and ``{"logging": {"level": ...}}``.
    return AliasChoices(flat, AliasPath(section, key))


class AppConfig(BaseModel):
    """
    Validated, final configuration.

    Fields are flat; YAML and CLI layers may use either the flat name or
    the sectioned ``http``/``innertube``/``logging``/``notifications`` form.
    """

    app_name: str = "thumbstrip"
    environment: Environment = Field(
        default="dev",
        description="Runtime environment; selects the default log format.",
    )

    http_timeout_seconds: float = Field(
        default=10.0,
        validation_alias=_flat_or_sectioned("http_timeout_seconds", "http", "timeout_seconds"),
        description="Transport timeout per player request, in seconds.",
    )
    http_user_agent: str = Field(
        default="thumbstrip/0.1.0",
        validation_alias=_flat_or_sectioned("http_user_agent", "http", "user_agent"),
        description="User-Agent for requests whose persona does not set one.",
    )

    innertube_base_url: str = Field(
        default="https://youtubei.googleapis.com/youtubei/v1/",
        validation_alias=_flat_or_sectioned("innertube_base_url", "innertube", "base_url"),
    )
    innertube_api_key: Optional[str] = Field(
        default=None,
        validation_alias=_flat_or_sectioned("innertube_api_key", "innertube", "api_key"),
        description="Sent as the ``key`` query parameter when set.",
    )

    log_level: LogLevel = Field(
        default="INFO",
        validation_alias=_flat_or_sectioned("log_level", "logging", "level"),
    )
    log_format: Optional[LogFormat] = Field(
        default=None,
        validation_alias=_flat_or_sectioned("log_format", "logging", "format"),
        description="console/json; derived from environment when unset.",
    )

    notifications_enabled: bool = Field(
        default=True,
        validation_alias=_flat_or_sectioned("notifications_enabled", "notifications", "enabled"),
    )

    @field_validator("http_timeout_seconds")
    @classmethod
    def _positive_timeout(cls, v: float) -> float:
        if v <= 0:
            raise ValueError("http_timeout_seconds must be > 0")
        return v

    @field_validator("innertube_base_url")
    @classmethod
    def _http_base_url(cls, v: str) -> str:
        if not v.startswith(("http://", "https://")):
            raise ValueError("innertube_base_url must be an http(s) URL")
        # Routes are joined by plain concatenation.
        return v if v.endswith("/") else f"{v}/"

    @model_validator(mode="after")
    def _derive_log_format(self) -> "AppConfig":
        if self.log_format is None:
            self.log_format = "json" if self.environment == "prod" else "console"
        return self

    def to_sectioned_dict(self) -> dict[str, Any]:
        """Dump in the sectioned shape a config.yaml uses."""
        return {
            "app_name": self.app_name,
            "environment": self.environment,
            "http": {
                "timeout_seconds": self.http_timeout_seconds,
                "user_agent": self.http_user_agent,
            },
            "innertube": {
                "base_url": self.innertube_base_url,
                "api_key": self.innertube_api_key,
            },
            "logging": {"level": self.log_level, "format": self.log_format},
            "notifications": {"enabled": self.notifications_enabled},
        }


class EnvOverrides(BaseSettings):
    """
    ``THUMBSTRIP_*`` environment overrides, all optional.

    Only variables that are actually set end up in :meth:`to_update_dict`,
    so unset ones never shadow YAML values.  Example:
    ``THUMBSTRIP_INNERTUBE_API_KEY=...``.
    """

    model_config = SettingsConfigDict(
        env_prefix="THUMBSTRIP_",
        extra="ignore",
        case_sensitive=False,
    )

    app_name: Optional[str] = None
    environment: Optional[Environment] = None
    http_timeout_seconds: Optional[float] = None
    http_user_agent: Optional[str] = None
    innertube_base_url: Optional[str] = None
    innertube_api_key: Optional[str] = None
    log_level: Optional[LogLevel] = None
    log_format: Optional[LogFormat] = None
    notifications_enabled: Optional[bool] = None

    def to_update_dict(self) -> dict[str, Any]:
        return self.model_dump(exclude_none=True)
