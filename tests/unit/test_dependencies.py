"""Unit tests for the dependency injection system."""

from pytest import MonkeyPatch

from dev.mocks_clients import MockGithubClient
from src.gitops_updater import dependencies
from src.gitops_updater.clients import GithubClient
from src.gitops_updater.config import GitHubSettings, UpdaterSettings
from src.gitops_updater.services import Updater


class TestConfigurationProviders:
    """Test configuration provider functions."""

    def test_get_app_settings(self):
        """Test that get_app_settings returns UpdaterSettings."""
        settings = dependencies.get_app_settings()
        assert isinstance(settings, UpdaterSettings)

    def test_get_github_settings(self):
        """Test that get_github_settings returns GitHubSettings."""
        settings = dependencies.get_github_settings()
        assert isinstance(settings, GitHubSettings)

    def test_settings_are_cached(self):
        """Settings providers should use lru_cache and return the same instance."""
        settings1 = dependencies.get_app_settings()
        settings2 = dependencies.get_app_settings()
        assert settings1 is settings2

    def test_settings_read_environment(self, monkeypatch: MonkeyPatch):
        monkeypatch.setenv("GITOPS_UPDATER_LOG_LEVEL", "debug")
        monkeypatch.setenv("GITOPS_UPDATER_REQUEST_TIMEOUT_SECONDS", "5")

        settings = UpdaterSettings()

        assert settings.log_level == "DEBUG"
        assert settings.request_timeout_seconds == 5.0
        assert settings.use_mock_github is True


class TestGitClientFactory:
    """Test Git hosting client selection."""

    def test_get_git_client_mock(self):
        """The in-memory client is returned and shared when mock mode is enabled."""
        settings = UpdaterSettings(GITOPS_UPDATER_USE_MOCK_GITHUB="true")

        client1 = dependencies.get_git_client(
            settings=settings, github_settings=GitHubSettings()
        )
        client2 = dependencies.get_git_client(
            settings=settings, github_settings=GitHubSettings()
        )

        assert isinstance(client1, MockGithubClient)
        assert client1 is client2

    def test_get_git_client_real(self):
        settings = UpdaterSettings(GITOPS_UPDATER_USE_MOCK_GITHUB="false")
        github_settings = GitHubSettings(GITOPS_UPDATER_GITHUB_TOKEN="fake-pat")

        client = dependencies.get_git_client(
            settings=settings, github_settings=github_settings
        )

        assert isinstance(client, GithubClient)
        assert client.settings is github_settings


def test_get_updater_uses_given_client():
    git_client = MockGithubClient()

    updater = dependencies.get_updater(
        git_client=git_client, settings=UpdaterSettings()
    )

    assert isinstance(updater, Updater)
    assert updater._git_client is git_client
