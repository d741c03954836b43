"""Configuration module for the gitops-updater project."""

from .github_settings import GitHubSettings
from .updater_settings import UpdaterSettings

__all__ = [
    "GitHubSettings",
    "UpdaterSettings",
]
