"""Unit test specific fixtures."""

import pytest

from src.gitops_updater import dependencies


class _BlockedGithubClient:  # pragma: no cover - constructor raises immediately
    def __init__(self, *args, **kwargs):
        raise RuntimeError(
            "GitHub API clients are blocked in unit tests; inject a stub client instead."
        )


@pytest.fixture(autouse=True)
def set_unit_test_env(monkeypatch):
    """Setup environment variables for unit tests.

    Note: Monkeypatch only works for in-process execution.
    For subprocess-based tests, use subprocess env parameter.
    """
    monkeypatch.setenv("GITOPS_UPDATER_USE_MOCK_GITHUB", "true")
    monkeypatch.delenv("GITOPS_UPDATER_GITHUB_TOKEN", raising=False)
    monkeypatch.setattr(
        "src.gitops_updater.clients.github_client.Github",
        _BlockedGithubClient,
        raising=True,
    )

    dependencies.get_app_settings.cache_clear()
    dependencies.get_github_settings.cache_clear()
    yield
    dependencies.get_app_settings.cache_clear()
    dependencies.get_github_settings.cache_clear()
