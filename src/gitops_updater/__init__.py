"""GitOps Updater - update a YAML key in a Git repository and propose it as a pull request."""

from .context import ContextCancelledError, RequestContext
from .schemas import (
    FileContent,
    FileUpdateInput,
    NewPullRequest,
    PullRequest,
    PullRequestInput,
    UpdateInput,
)
from .services import UpdateError, Updater

__all__ = [
    "ContextCancelledError",
    "FileContent",
    "FileUpdateInput",
    "NewPullRequest",
    "PullRequest",
    "PullRequestInput",
    "RequestContext",
    "UpdateError",
    "UpdateInput",
    "Updater",
]
