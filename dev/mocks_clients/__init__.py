"""Mock client modules for development and testing."""

from .mock_github_client import MockGithubClient, blob_sha

__all__ = [
    "MockGithubClient",
    "blob_sha",
]
