"""Mock GitHub client for offline development and testing."""

import hashlib
import threading
from typing import Dict, List, Optional, Tuple

from src.gitops_updater.context import RequestContext
from src.gitops_updater.protocols import GitClientError, GitClientProtocol
from src.gitops_updater.schemas import FileContent, NewPullRequest, PullRequest


def blob_sha(data: bytes) -> str:
    """Return the Git blob sha of ``data``, as GitHub reports it for files."""
    header = f"blob {len(data)}\0".encode("utf-8")
    return hashlib.sha1(header + data).hexdigest()


class MockGithubClient(GitClientProtocol):
    """
    In-memory implementation of the Git hosting client.

    Repositories, branches and files live in dictionaries, so development
    and tests run without network access or GitHub credentials. Setting one
    of the ``*_error`` attributes makes the matching operation raise it.
    Stale blob shas are rejected on update, like GitHub does.
    """

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._files: Dict[Tuple[str, str, str], bytes] = {}
        self._branch_heads: Dict[Tuple[str, str], str] = {}
        self._commits = 0

        self.updated_files: Dict[Tuple[str, str, str], bytes] = {}
        self.created_branches: Dict[Tuple[str, str], str] = {}
        self.pull_requests: List[Tuple[str, NewPullRequest]] = []

        self.get_file_error: Optional[Exception] = None
        self.get_branch_head_error: Optional[Exception] = None
        self.create_branch_error: Optional[Exception] = None
        self.update_file_error: Optional[Exception] = None
        self.create_pull_request_error: Optional[Exception] = None

    # --- Seeding ---

    def add_file_contents(self, repo: str, path: str, branch: str, data: bytes) -> None:
        """Store ``data`` as the content of ``path`` on ``branch``."""
        with self._lock:
            self._files[(repo, branch, path)] = data

    def add_branch_head(self, repo: str, branch: str, sha: str) -> None:
        """Register ``sha`` as the head commit of ``branch``."""
        with self._lock:
            self._branch_heads[(repo, branch)] = sha

    # --- GitClientProtocol ---

    def get_file(
        self, ctx: RequestContext, repo: str, branch: str, path: str
    ) -> FileContent:
        ctx.raise_if_cancelled()
        if self.get_file_error is not None:
            raise self.get_file_error
        with self._lock:
            data = self._files.get((repo, branch, path))
        if data is None:
            raise GitClientError(f"file {path} not found on {repo}@{branch}", 404)
        return FileContent(data=data, sha=blob_sha(data))

    def get_branch_head(self, ctx: RequestContext, repo: str, branch: str) -> str:
        ctx.raise_if_cancelled()
        if self.get_branch_head_error is not None:
            raise self.get_branch_head_error
        with self._lock:
            sha = self._branch_heads.get((repo, branch))
        if sha is None:
            raise GitClientError(f"branch {branch} not found in {repo}", 404)
        return sha

    def create_branch(
        self, ctx: RequestContext, repo: str, branch_name: str, source_ref: str
    ) -> None:
        ctx.raise_if_cancelled()
        if self.create_branch_error is not None:
            raise self.create_branch_error
        with self._lock:
            if (repo, branch_name) in self._branch_heads:
                raise GitClientError("Reference already exists", 422)

            source_branches = {
                branch
                for (head_repo, branch), sha in self._branch_heads.items()
                if head_repo == repo and sha == source_ref
            }
            for (file_repo, branch, path), data in list(self._files.items()):
                if file_repo == repo and branch in source_branches:
                    self._files[(repo, branch_name, path)] = data

            self._branch_heads[(repo, branch_name)] = source_ref
            self.created_branches[(repo, branch_name)] = source_ref
        print(
            f"[MockGithubClient] create_branch(repo={repo}, branch_name={branch_name}, source_ref={source_ref})"
        )

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
        ctx.raise_if_cancelled()
        if self.update_file_error is not None:
            raise self.update_file_error
        with self._lock:
            current = self._files.get((repo, branch, path))
            if current is None:
                raise GitClientError(f"file {path} not found on {repo}@{branch}", 404)
            if blob_sha(current) != sha:
                raise GitClientError(f"{path} does not match {sha}", 409)

            self._files[(repo, branch, path)] = content
            self.updated_files[(repo, branch, path)] = content
            self._commits += 1
            self._branch_heads[(repo, branch)] = hashlib.sha1(
                f"{commit_message}-{self._commits}".encode("utf-8")
            ).hexdigest()
        print(
            f"[MockGithubClient] update_file(repo={repo}, branch={branch}, path={path}, message={commit_message[:50]})"
        )

    def create_pull_request(
        self, ctx: RequestContext, repo: str, pull_request: NewPullRequest
    ) -> PullRequest:
        ctx.raise_if_cancelled()
        if self.create_pull_request_error is not None:
            raise self.create_pull_request_error
        with self._lock:
            self.pull_requests.append((repo, pull_request))
            number = len(self.pull_requests)
        print(
            f"[MockGithubClient] create_pull_request(repo={repo}, head={pull_request.head}, base={pull_request.base})"
        )
        return PullRequest(
            number=number,
            link=f"https://example.com/pull-request/{number}",
            title=pull_request.title,
        )

    # --- Inspection ---

    def get_contents(self, repo: str, path: str, branch: str) -> bytes:
        """Return the current content of ``path`` on ``branch``, or b"" if absent."""
        with self._lock:
            return self._files.get((repo, branch, path), b"")

    def get_updated_contents(self, repo: str, path: str, branch: str) -> bytes:
        """Return the last content committed to ``path`` on ``branch``, or b""."""
        with self._lock:
            return self.updated_files.get((repo, branch, path), b"")

    def assert_branch_created(self, repo: str, branch_name: str, source_ref: str) -> None:
        ref = self.created_branches.get((repo, branch_name))
        assert ref is not None, f"branch {branch_name} was not created in {repo}"
        assert ref == source_ref, f"branch {branch_name} created from {ref}, want {source_ref}"

    def assert_no_branches_created(self) -> None:
        assert not self.created_branches, f"branches created: {self.created_branches}"

    def assert_pull_request_created(self, repo: str, pull_request: NewPullRequest) -> None:
        assert (repo, pull_request) in self.pull_requests, (
            f"pull request {pull_request} not created in {repo}, got {self.pull_requests}"
        )

    def assert_no_pull_requests_created(self) -> None:
        assert not self.pull_requests, f"pull requests created: {self.pull_requests}"
