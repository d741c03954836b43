"""Protocol definition for Git hosting client interface."""

from typing import Optional, Protocol

from src.gitops_updater.context import RequestContext
from src.gitops_updater.schemas import FileContent, NewPullRequest, PullRequest


class GitClientError(RuntimeError):
    """Raised by Git hosting clients when a request fails."""

    def __init__(self, message: str, status_code: Optional[int] = None) -> None:
        super().__init__(message)
        self.status_code = status_code


class GitClientProtocol(Protocol):
    """Protocol for the Git hosting operations needed to propose a file change."""

    def get_file(
        self, ctx: RequestContext, repo: str, branch: str, path: str
    ) -> FileContent:
        """
        Get the content of a file and its blob sha.

        Args:
            ctx: Cancellation context for the request.
            repo: Repository identifier (e.g., "owner/repo").
            branch: Branch name to read the file from.
            path: Path to the file in the repository.

        Returns:
            FileContent with the raw bytes and the blob sha.

        Raises:
            GitClientError: If the file cannot be retrieved.
        """
        ...

    def get_branch_head(self, ctx: RequestContext, repo: str, branch: str) -> str:
        """
        Get the sha of the commit at the tip of a branch.

        Raises:
            GitClientError: If the branch cannot be resolved.
        """
        ...

    def create_branch(
        self, ctx: RequestContext, repo: str, branch_name: str, source_ref: str
    ) -> None:
        """
        Create a new branch pointing at ``source_ref``.

        Raises:
            GitClientError: If branch creation fails, including when the
                branch already exists.
        """
        ...

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
        Commit new content for an existing file.

        Args:
            sha: Blob sha the change is based on; the host must reject the
                update when the file has changed since.

        Raises:
            GitClientError: If the update fails or ``sha`` is stale.
        """
        ...

    def create_pull_request(
        self, ctx: RequestContext, repo: str, pull_request: NewPullRequest
    ) -> PullRequest:
        """
        Open a pull request.

        Raises:
            GitClientError: If PR creation fails.
        """
        ...
