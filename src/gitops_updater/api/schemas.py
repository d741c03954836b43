"""Pydantic models for API request and response schemas."""

from typing import Optional

from pydantic import BaseModel, Field, field_validator

from src.gitops_updater.schemas import PullRequestInput, UpdateInput


class UpdateYAMLRequest(BaseModel):
    """Request body for updating a key in a YAML file."""

    repo: str = Field(..., description="Repository identifier, e.g. 'my-org/my-repo'.")
    filename: str = Field(..., description="Path of the YAML file in the repository.")
    branch: str = Field("main", description="Source branch to read and target.")
    key: str = Field(..., description="Dotted path of the key to update.")
    new_value: str = Field(..., description="Value to set at the key.")
    branch_generate_name: str = Field(
        "",
        description="Prefix for a generated branch; empty commits to the source branch.",
    )
    commit_message: str = Field(..., description="Message of the update commit.")
    pull_request: PullRequestInput = Field(
        default_factory=PullRequestInput,
        description="Title and body used when a pull request is opened.",
    )

    @field_validator("repo", "filename", "branch", "key", mode="after")
    @classmethod
    def validate_not_blank(cls, value: str) -> str:
        """Ensure identifiers are non-empty once surrounding whitespace is removed."""
        stripped = value.strip()
        if not stripped:
            raise ValueError("Value cannot be empty")
        return stripped

    def to_update_input(self) -> UpdateInput:
        return UpdateInput(**self.model_dump())


class PullRequestResponse(BaseModel):
    """Pull request opened for an update."""

    number: int
    link: str


class UpdateYAMLResponse(BaseModel):
    """Response model for a YAML update."""

    pull_request: Optional[PullRequestResponse] = None
    message: str
