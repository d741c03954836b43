"""Client for GitHub API operations."""

import logging
from typing import Optional

from github import Auth, Github, GithubException
from github.Repository import Repository
from requests.exceptions import RequestException

from src.gitops_updater.config import GitHubSettings
from src.gitops_updater.context import RequestContext
from src.gitops_updater.protocols import GitClientError, GitClientProtocol
from src.gitops_updater.schemas import FileContent, NewPullRequest, PullRequest

logger = logging.getLogger(__name__)


class GitHubConfigurationError(GitClientError):
    """Raised when required GitHub configuration values are missing."""


def _status_of(error: Exception) -> Optional[int]:
    return error.status if isinstance(error, GithubException) else None


class GithubClient(GitClientProtocol):
    """
    Client for GitHub API operations.

    This client handles GitHub Personal Access Token authentication and
    implements the file, branch and pull request operations used by the
    updater via the GitHub REST API.
    """

    def __init__(self, settings: GitHubSettings):
        """Initialize the GitHub client with settings."""
        self.settings = settings
        self._github_client: Optional[Github] = None

    def authenticate(self) -> Github:
        """
        Authenticate using Personal Access Token.

        Returns:
            Authenticated GitHub API client.

        Raises:
            GitHubConfigurationError: If the GitHub token is not configured.
        """
        if self._github_client is not None:
            return self._github_client

        token = self.settings.github_token
        if token is None or not token.get_secret_value():
            raise GitHubConfigurationError(
                "GitHub Personal Access Token not configured. Set GITOPS_UPDATER_GITHUB_TOKEN."
            )

        self._github_client = Github(
            auth=Auth.Token(token.get_secret_value()),
            base_url=self.settings.github_api_url,
            timeout=self.settings.github_api_timeout_seconds,
        )
        return self._github_client

    def _get_repo(self, ctx: RequestContext, repo: str) -> Repository:
        ctx.raise_if_cancelled()
        return self.authenticate().get_repo(repo)

    def get_file(
        self, ctx: RequestContext, repo: str, branch: str, path: str
    ) -> FileContent:
        """
        Get file content and blob sha from repository via GitHub API.

        Raises:
            GitClientError: If file retrieval fails or ``path`` is a directory.
        """
        try:
            repository = self._get_repo(ctx, repo)
            file_content = repository.get_contents(path, ref=branch)
        except (GithubException, RequestException) as e:
            raise GitClientError(
                f"Failed to get file content for '{path}': {e}", _status_of(e)
            ) from e

        if isinstance(file_content, list):
            raise GitClientError(f"'{path}' is a directory, not a file")

        logger.debug("fetched %s@%s sha=%s", path, branch, file_content.sha)
        # GitHub API returns base64 encoded content
        return FileContent(data=file_content.decoded_content, sha=file_content.sha)

    def get_branch_head(self, ctx: RequestContext, repo: str, branch: str) -> str:
        """
        Get the commit sha at the head of a branch via GitHub API.

        Raises:
            GitClientError: If the branch reference cannot be read.
        """
        try:
            repository = self._get_repo(ctx, repo)
            branch_ref = repository.get_git_ref(f"heads/{branch}")
        except (GithubException, RequestException) as e:
            raise GitClientError(
                f"Failed to get head of branch '{branch}': {e}", _status_of(e)
            ) from e
        return branch_ref.object.sha

    def create_branch(
        self, ctx: RequestContext, repo: str, branch_name: str, source_ref: str
    ) -> None:
        """
        Create new branch pointing at ``source_ref`` via GitHub API.

        Raises:
            GitClientError: If branch creation fails.
        """
        try:
            repository = self._get_repo(ctx, repo)
            repository.create_git_ref(ref=f"refs/heads/{branch_name}", sha=source_ref)
        except (GithubException, RequestException) as e:
            raise GitClientError(
                f"Failed to create branch '{branch_name}': {e}", _status_of(e)
            ) from e

    def update_file(
        self,
        ctx: RequestContext,
        repo: str,
        branch: str,
        path: str,
        commit_message: str,
        sha: str,
        content: bytes,
    ) -> None:
        """
        Update an existing file via GitHub API.

        GitHub answers 409 when ``sha`` no longer matches the file on the branch.

        Raises:
            GitClientError: If the file update fails.
        """
        try:
            repository = self._get_repo(ctx, repo)
            repository.update_file(path, commit_message, content, sha, branch=branch)
        except (GithubException, RequestException) as e:
            raise GitClientError(
                f"Failed to update file '{path}' on branch '{branch}': {e}", _status_of(e)
            ) from e

    def create_pull_request(
        self, ctx: RequestContext, repo: str, pull_request: NewPullRequest
    ) -> PullRequest:
        """
        Create pull request via GitHub API.

        Raises:
            GitClientError: If PR creation fails.
        """
        try:
            repository = self._get_repo(ctx, repo)
            pr = repository.create_pull(
                title=pull_request.title,
                body=pull_request.body,
                head=pull_request.head,
                base=pull_request.base,
            )
        except (GithubException, RequestException) as e:
            raise GitClientError(f"Failed to create pull request: {e}", _status_of(e)) from e

        return PullRequest(number=pr.number, link=pr.html_url, title=pr.title)
