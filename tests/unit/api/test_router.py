"""Unit tests for the updates API router."""

from unittest.mock import MagicMock, patch

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient
from requests.exceptions import ConnectionError

from dev.mocks_clients import MockGithubClient
from src.gitops_updater import dependencies
from src.gitops_updater.api.router import router
from src.gitops_updater.clients import GithubClient
from src.gitops_updater.config import GitHubSettings
from src.gitops_updater.context import ContextCancelledError
from src.gitops_updater.services import Updater
from tests.constants import TEST_BRANCH, TEST_FILE_PATH, TEST_GITHUB_REPO


class StubNameGenerator:
    def prefixed_name(self, prefix: str) -> str:
        return prefix + "a"


@pytest.fixture
def client(mock_github_client: MockGithubClient):
    """Create FastAPI test client backed by the in-memory Git host."""
    app = FastAPI()
    app.include_router(router, prefix="/api/v1")
    app.dependency_overrides[dependencies.get_updater] = lambda: Updater(
        mock_github_client, name_generator=StubNameGenerator()
    )
    with TestClient(app) as test_client:
        yield test_client


def _payload(**overrides):
    payload = {
        "repo": TEST_GITHUB_REPO,
        "filename": TEST_FILE_PATH,
        "branch": TEST_BRANCH,
        "key": "test.image",
        "new_value": "test/my-test-image",
        "commit_message": "bump image",
    }
    payload.update(overrides)
    return payload


def test_update_commits_directly(client, mock_github_client):
    response = client.post("/api/v1/updates/yaml", json=_payload())

    assert response.status_code == 200
    body = response.json()
    assert body["pull_request"] is None
    assert body["message"] == f"Committed {TEST_FILE_PATH} to {TEST_BRANCH}"
    assert (
        mock_github_client.get_updated_contents(TEST_GITHUB_REPO, TEST_FILE_PATH, TEST_BRANCH)
        == b"test:\n  image: test/my-test-image\n"
    )


def test_update_opens_pull_request(client, mock_github_client):
    response = client.post(
        "/api/v1/updates/yaml",
        json=_payload(
            branch_generate_name="bump-",
            pull_request={"title": "Bump image", "body": "Automated"},
        ),
    )

    assert response.status_code == 200
    assert response.json()["pull_request"] == {
        "number": 1,
        "link": "https://example.com/pull-request/1",
    }
    ((repo, pull_request),) = mock_github_client.pull_requests
    assert pull_request.head == "bump-a"
    assert pull_request.title == "Bump image"


def test_invalid_key_path_returns_422(client):
    response = client.post("/api/v1/updates/yaml", json=_payload(key="test.image.tag"))

    assert response.status_code == 422
    assert "test.image is a scalar value" in response.json()["detail"]


def test_missing_file_returns_404(client):
    response = client.post("/api/v1/updates/yaml", json=_payload(filename="nope.yaml"))

    assert response.status_code == 404


def test_branch_creation_failure_returns_502(client, mock_github_client):
    mock_github_client.create_branch_error = RuntimeError("boom")

    response = client.post(
        "/api/v1/updates/yaml", json=_payload(branch_generate_name="bump-")
    )

    assert response.status_code == 502
    assert response.json()["detail"] == "failed to create branch: boom"


def test_cancelled_step_returns_504(client, mock_github_client):
    mock_github_client.update_file_error = ContextCancelledError(
        "context deadline exceeded"
    )

    response = client.post("/api/v1/updates/yaml", json=_payload())

    assert response.status_code == 504
    assert response.json()["detail"] == "failed to update file: context deadline exceeded"


def _github_app(github_client: GithubClient) -> FastAPI:
    app = FastAPI()
    app.include_router(router, prefix="/api/v1")
    app.dependency_overrides[dependencies.get_updater] = lambda: Updater(github_client)
    return app


def test_unreachable_github_returns_502():
    github_client = GithubClient(GitHubSettings(GITOPS_UPDATER_GITHUB_TOKEN="fake-pat"))
    mock_github = MagicMock()
    mock_github.get_repo.side_effect = ConnectionError("conn refused")

    with patch.object(GithubClient, "authenticate", return_value=mock_github):
        with TestClient(_github_app(github_client)) as test_client:
            response = test_client.post("/api/v1/updates/yaml", json=_payload())

    assert response.status_code == 502
    assert "conn refused" in response.json()["detail"]


def test_missing_github_token_returns_502():
    with TestClient(_github_app(GithubClient(GitHubSettings()))) as test_client:
        response = test_client.post("/api/v1/updates/yaml", json=_payload())

    assert response.status_code == 502
    assert "GITOPS_UPDATER_GITHUB_TOKEN" in response.json()["detail"]


def test_blank_repo_is_rejected(client):
    response = client.post("/api/v1/updates/yaml", json=_payload(repo="  "))

    assert response.status_code == 422


def test_health_check():
    from src.gitops_updater.main import app

    with TestClient(app) as test_client:
        response = test_client.get("/health")

    assert response.status_code == 200
    assert response.json() == {"status": "healthy"}
