"""Main application configuration for the zero2prod project."""

from typing import Any

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Zero2ProdSettings(BaseSettings):
    """The configurable fields for the zero2prod application."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        populate_by_name=True,
    )

    host: str = Field(
        default="127.0.0.1",
        title="Application Host",
        description="Interface the HTTP listener binds to.",
        alias="APP_HOST",
    )
    port: int = Field(
        default=8000,
        title="Application Port",
        description="Port the HTTP listener binds to. 0 lets the OS choose.",
        alias="APP_PORT",
    )
    log_level: str = Field(
        default="info",
        title="Log Level",
        description="Minimum level for application and server logs.",
        alias="APP_LOG_LEVEL",
    )

    @field_validator("log_level", mode="before")
    @classmethod
    def normalize_log_level(cls, value: Any) -> str:
        """Accept any casing for the log level name."""
        return str(value).strip().lower()
