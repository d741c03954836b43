"""Models describing an update request and the values exchanged with Git hosts."""

from dataclasses import dataclass
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class PullRequestInput(BaseModel):
    """Title and body of the pull request opened for a generated branch."""

    model_config = ConfigDict(frozen=True)

    title: str = ""
    body: str = ""


class FileUpdateInput(BaseModel):
    """
    Describes which file to change and how the change is delivered.

    Attributes:
        repo: Repository identifier, e.g. ``my-org/my-repo``.
        filename: Path of the file relative to the repository root.
        branch: Source branch; read from, and committed to directly when
            ``branch_generate_name`` is empty.
        branch_generate_name: Prefix for a generated branch, e.g.
            ``update-image-``. Empty means commit straight to ``branch``.
        commit_message: Message of the file-update commit.
        pull_request: Used only when a new branch was created.
    """

    model_config = ConfigDict(frozen=True)

    repo: str
    filename: str
    branch: str
    branch_generate_name: str = ""
    commit_message: str = ""
    pull_request: PullRequestInput = Field(default_factory=PullRequestInput)


class UpdateInput(FileUpdateInput):
    """Configuration for updating one key of a YAML file in a repository."""

    key: str
    new_value: str


@dataclass(frozen=True)
class FileContent:
    """Current content of a file and the blob sha it was read at."""

    data: bytes
    sha: str


@dataclass(frozen=True)
class NewPullRequest:
    """Payload for opening a pull request."""

    title: str
    body: str
    head: str
    base: str


@dataclass(frozen=True)
class PullRequest:
    """A pull request created on the Git host."""

    number: int
    link: str
    title: Optional[str] = None
