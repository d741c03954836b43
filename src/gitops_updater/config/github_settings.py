"""GitHub-specific settings for gitops-updater."""

from __future__ import annotations

from typing import Any

from pydantic import Field, SecretStr, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class GitHubSettings(BaseSettings):
    """Configuration values for GitHub API integration."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        populate_by_name=True,
    )

    github_token: SecretStr | None = Field(
        default=None,
        alias="GITOPS_UPDATER_GITHUB_TOKEN",
        description="Personal Access Token for GitHub API operations.",
    )
    github_api_url: str = Field(
        default="https://api.github.com",
        alias="GITOPS_UPDATER_GITHUB_API_URL",
        description="Base URL for the GitHub API (GitHub Enterprise URLs allowed).",
    )
    github_api_timeout_seconds: int = Field(
        default=30,
        ge=1,
        alias="GITOPS_UPDATER_GITHUB_API_TIMEOUT_SECONDS",
        description="HTTP timeout (in seconds) for GitHub API calls.",
    )

    @field_validator("github_api_url", mode="before")
    @classmethod
    def normalize_api_url(cls, value: Any) -> Any:
        """Strip whitespace and any trailing slash from the API URL."""
        if isinstance(value, str):
            return value.strip().rstrip("/")
        return value
