"""Central dependency injection hub for gitops-updater using FastAPI's Depends mechanism."""

from functools import lru_cache

from fastapi import Depends

from src.gitops_updater.clients import GithubClient
from src.gitops_updater.config import GitHubSettings, UpdaterSettings
from src.gitops_updater.protocols import GitClientProtocol
from src.gitops_updater.services import NameGenerator, Updater, YAMLPatcher

# ============================================================================
# Configuration Providers
# ============================================================================


@lru_cache()
def get_app_settings() -> UpdaterSettings:
    """Get the application settings singleton."""
    return UpdaterSettings()


@lru_cache()
def get_github_settings() -> GitHubSettings:
    """Get the GitHub settings singleton."""
    return GitHubSettings()


# ============================================================================
# Client Providers
# ============================================================================


@lru_cache()
def _get_mock_github_client() -> GitClientProtocol:
    from dev.mocks_clients import MockGithubClient

    return MockGithubClient()


def get_git_client(
    settings: UpdaterSettings = Depends(get_app_settings),
    github_settings: GitHubSettings = Depends(get_github_settings),
) -> GitClientProtocol:
    """
    Get the Git hosting client.

    Args:
        settings: Application settings for mock configuration.
        github_settings: GitHub integration configuration.

    Returns:
        GitClientProtocol implementation (mock or real based on settings).
        The mock client is shared so its in-memory state survives requests.
    """
    if settings.use_mock_github:
        return _get_mock_github_client()
    return GithubClient(github_settings)


# ============================================================================
# Service Providers
# ============================================================================


def get_updater(
    git_client: GitClientProtocol = Depends(get_git_client),
    settings: UpdaterSettings = Depends(get_app_settings),
) -> Updater:
    """
    Get an Updater wired with the configured client and YAML patcher.

    Args:
        git_client: Git hosting client.
        settings: Application settings providing YAML emitter indentation.

    Returns:
        Updater using a wall-clock seeded branch name generator.
    """
    return Updater(
        git_client,
        name_generator=NameGenerator.from_time(),
        yaml_patcher=YAMLPatcher(
            mapping_indent=settings.yaml_mapping_indent,
            sequence_indent=settings.yaml_sequence_indent,
            sequence_offset=settings.yaml_sequence_offset,
        ),
    )
