"""Main application configuration for the gitops-updater project."""

from typing import Any

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class UpdaterSettings(BaseSettings):
    """The configurable fields for the gitops-updater application."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        populate_by_name=True,
    )

    log_level: str = Field(
        default="INFO",
        title="Log Level",
        description="Root log level used by the HTTP application.",
        alias="GITOPS_UPDATER_LOG_LEVEL",
    )

    # --- Service Toggles ---
    use_mock_github: bool = Field(
        default=False,
        title="Use Mock GitHub",
        description="Use the in-memory GitHub client instead of the GitHub API.",
        alias="GITOPS_UPDATER_USE_MOCK_GITHUB",
    )

    request_timeout_seconds: float = Field(
        default=60.0,
        gt=0,
        title="Request Timeout",
        description="Deadline in seconds applied to each update triggered over HTTP.",
        alias="GITOPS_UPDATER_REQUEST_TIMEOUT_SECONDS",
    )

    # --- YAML emitter ---
    yaml_mapping_indent: int = Field(
        default=2,
        ge=1,
        description="Indentation of nested mappings in patched YAML.",
        alias="GITOPS_UPDATER_YAML_MAPPING_INDENT",
    )
    yaml_sequence_indent: int = Field(
        default=2,
        ge=1,
        description="Indentation of sequence items in patched YAML.",
        alias="GITOPS_UPDATER_YAML_SEQUENCE_INDENT",
    )
    yaml_sequence_offset: int = Field(
        default=0,
        ge=0,
        description="Offset of the sequence dash within the sequence indentation.",
        alias="GITOPS_UPDATER_YAML_SEQUENCE_OFFSET",
    )

    @field_validator("use_mock_github", mode="before")
    @classmethod
    def parse_bool(cls, value: Any) -> bool:
        """Ensure the toggle is parsed as booleans from strings."""
        if isinstance(value, str):
            return value.lower() in {"true", "1", "yes", "on"}
        return bool(value)

    @field_validator("log_level", mode="before")
    @classmethod
    def normalize_log_level(cls, value: Any) -> str:
        """Upper-case the log level so it matches the logging module names."""
        if isinstance(value, str):
            return value.strip().upper() or "INFO"
        return value
