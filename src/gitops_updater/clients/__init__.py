"""Client modules for Git hosting providers."""

from .github_client import GitHubConfigurationError, GithubClient

__all__ = [
    "GitHubConfigurationError",
    "GithubClient",
]
