"""Shared test fixtures for all test categories."""

from typing import Callable

import pytest

from dev.mocks_clients import MockGithubClient
from src.gitops_updater.config import UpdaterSettings
from src.gitops_updater.schemas import PullRequestInput, UpdateInput
from tests.constants import (
    TEST_BRANCH,
    TEST_CONTENT,
    TEST_FILE_PATH,
    TEST_GITHUB_REPO,
    TEST_SHA,
)


@pytest.fixture(scope="session")
def default_settings() -> UpdaterSettings:
    """Provide a default Settings instance for tests."""

    return UpdaterSettings()


# =============================================================================
# Git hosting fixtures
# =============================================================================


@pytest.fixture
def mock_github_client() -> MockGithubClient:
    """In-memory Git host holding the test file on the main branch."""
    client = MockGithubClient()
    client.add_file_contents(TEST_GITHUB_REPO, TEST_FILE_PATH, TEST_BRANCH, TEST_CONTENT)
    client.add_branch_head(TEST_GITHUB_REPO, TEST_BRANCH, TEST_SHA)
    return client


@pytest.fixture
def make_update_input() -> Callable[..., UpdateInput]:
    """Factory for UpdateInput with test defaults; keyword arguments override fields."""

    def _make(**overrides) -> UpdateInput:
        values = {
            "repo": TEST_GITHUB_REPO,
            "filename": TEST_FILE_PATH,
            "branch": TEST_BRANCH,
            "key": "test.image",
            "new_value": "test/my-test-image",
            "branch_generate_name": "test-branch-",
            "commit_message": "just a test commit",
            "pull_request": PullRequestInput(
                title="test pull-request", body="test pull-request body"
            ),
        }
        values.update(overrides)
        return UpdateInput(**values)

    return _make
