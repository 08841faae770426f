from __future__ import annotations

from typing import Annotated, Any, Optional
from urllib.parse import urlparse

from pydantic import Field, field_validator
from pydantic_settings import (
    BaseSettings as _BaseSettings,
    NoDecode,
    SettingsConfigDict,
)

from .tracing import TracerConfig, TraceScheme


class Settings(_BaseSettings):
    """Library-wide settings."""

    model_config = SettingsConfigDict(
        env_prefix="REQUESTKIT_", case_sensitive=True, env_ignore_empty=True
    )

    #: Timeout, in seconds, used by the builders when the caller doesn't provide one.
    DEFAULT_TIMEOUT: float = Field(60.0, gt=0)

    #: Disable colorful logs (https://no-color.org)
    NO_COLOR: bool = Field(False, validation_alias="NO_COLOR")

    #: Level of the ``requestkit`` logger. Any name understood by :mod:`logging`.
    LOG_LEVEL: str = "WARNING"

    #: Tracing resource name. This is used by some exporters.
    TRACING_RESOURCE_NAME: str = "requestkit"

    #: Optional list of hosts to send traces to. For example:
    #: console://,otlp+http://localhost:4318/v1/traces
    TRACING_EXPORTERS: Annotated[Optional[list[TracerConfig]], NoDecode] = None

    @field_validator("LOG_LEVEL")
    @classmethod
    def validate_log_level(cls, value: str) -> str:
        """Ensure the log level is one :mod:`logging` knows about."""
        value = value.upper()
        if value not in ("DEBUG", "INFO", "WARNING", "WARN", "ERROR", "CRITICAL"):
            raise ValueError(f"{value} is not a valid log level.")
        return value

    @field_validator("TRACING_EXPORTERS", mode="before")
    @classmethod
    def validate_tracing_exporters(cls, value: Any) -> Any:
        """Parse the comma separated exporter urls into :class:`TracerConfig`."""
        if value is None or value == "":
            return None

        if isinstance(value, str):
            value = [v.strip() for v in value.split(",") if v.strip()]

        return [
            v if isinstance(v, TracerConfig) else cls._parse_exporter(v) for v in value
        ]

    @staticmethod
    def _parse_exporter(value: str) -> TracerConfig:
        parts = urlparse(value)

        if parts.scheme not in TraceScheme.__members__.values():
            raise ValueError(
                f"{value} does not define a valid scheme: " f'[{",".join(TraceScheme)}]'
            )

        return TracerConfig(
            scheme=TraceScheme(parts.scheme),
            host=f"{parts.netloc}{parts.path}",
        )


settings = Settings()  # pyright: ignore
