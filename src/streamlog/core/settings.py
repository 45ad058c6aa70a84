"""
Configuration models for streamlog using Pydantic v2 Settings.

Values are read from ``STREAMLOG_``-prefixed environment variables with
``__`` as the nested delimiter, e.g. ``STREAMLOG_CONSOLE__TARGET=stderr``.
"""

from __future__ import annotations

import codecs
from typing import Literal

from pydantic import BaseModel, Field, field_validator, model_validator
from pydantic_settings import (  # type: ignore[import-not-found]
    BaseSettings,
    SettingsConfigDict,
)

LATEST_CONFIG_SCHEMA_VERSION = "1.0"


class CoreSettings(BaseModel):
    """Registry-wide toggles."""

    internal_logging_enabled: bool = Field(
        default=False,
        description="Emit DEBUG/WARN diagnostics about streamlog internals",
    )
    enable_metrics: bool = Field(
        default=False,
        description="Export Prometheus-compatible dispatch metrics",
    )


class ConsoleSettings(BaseModel):
    stream: str | None = Field(
        default="cout",
        description="Stream name bound to the console sink; None disables it",
    )
    target: Literal["stdout", "stderr"] = Field(default="stdout")
    flush: bool = Field(
        default=True,
        description="Flush the console after every message",
    )

    @field_validator("stream")
    @classmethod
    def _blank_stream_disables(cls, value: str | None) -> str | None:
        # Environment values are always strings; these spellings mean "off"
        if value is not None and value.strip().lower() in ("", "null", "none"):
            return None
        return value


class FileSettings(BaseModel):
    stream: str = Field(
        default="file",
        description="Stream name bound to the file sink",
    )
    path: str | None = Field(
        default=None,
        description="File the sink appends to; None disables the file sink",
    )
    encoding: str = Field(default="utf-8")
    create_dirs: bool = Field(
        default=True,
        description="Create missing parent directories on first write",
    )
    strict: bool = Field(
        default=False,
        description="Let file write errors propagate to the caller of print",
    )

    @field_validator("encoding")
    @classmethod
    def _ensure_known_encoding(cls, value: str) -> str:
        try:
            codecs.lookup(value)
        except LookupError as e:
            raise ValueError(f"unknown encoding: {value}") from e
        return value

    @field_validator("path")
    @classmethod
    def _blank_path_disables(cls, value: str | None) -> str | None:
        if value is not None and not value.strip():
            return None
        return value


class Settings(BaseSettings):
    """Top-level configuration model."""

    schema_version: str = Field(default=LATEST_CONFIG_SCHEMA_VERSION)

    core: CoreSettings = Field(default_factory=CoreSettings)
    console: ConsoleSettings = Field(default_factory=ConsoleSettings)
    file: FileSettings = Field(default_factory=FileSettings)

    model_config = SettingsConfigDict(
        env_prefix="STREAMLOG_",
        env_nested_delimiter="__",
        extra="ignore",
        case_sensitive=False,
    )

    @model_validator(mode="after")
    def _ensure_distinct_streams(self) -> Settings:
        if (
            self.file.path is not None
            and self.console.stream is not None
            and self.console.stream == self.file.stream
        ):
            raise ValueError(
                "console.stream and file.stream must differ when both sinks "
                f"are enabled (both are {self.file.stream!r})"
            )
        return self

    def to_dict(self) -> dict[str, object]:
        from typing import cast

        return cast(
            dict[str, object],
            self.model_dump(by_alias=True, exclude_none=True),
        )


__all__ = [
    "LATEST_CONFIG_SCHEMA_VERSION",
    "CoreSettings",
    "ConsoleSettings",
    "FileSettings",
    "Settings",
]
