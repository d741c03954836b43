"""Service that proposes a file change: fetch, patch, branch, commit and open a PR."""

import logging
from typing import Optional, Union

from src.gitops_updater.context import RequestContext
from src.gitops_updater.protocols import (
    GitClientProtocol,
    NameGeneratorProtocol,
    YAMLPatcherProtocol,
)
from src.gitops_updater.schemas import (
    FileUpdateInput,
    NewPullRequest,
    PullRequest,
    UpdateInput,
)
from src.gitops_updater.services.content_updaters import ContentUpdater, update_yaml
from src.gitops_updater.services.name_generator import NameGenerator
from src.gitops_updater.services.yaml_patcher import YAMLPatcher

logger = logging.getLogger(__name__)

Logger = Union[logging.Logger, logging.LoggerAdapter]


class UpdateError(RuntimeError):
    """A step of the update failed; ``cause`` is the collaborator's error."""

    def __init__(self, context: str, cause: BaseException) -> None:
        super().__init__(f"{context}: {cause}")
        self.context = context
        self.cause = cause


class Updater:
    """
    Updates a file in a Git repository and optionally proposes it as a PR.

    The updater holds no per-request state, so one instance can serve
    concurrent calls as long as its collaborators are thread-safe.
    """

    def __init__(
        self,
        git_client: GitClientProtocol,
        log: Optional[Logger] = None,
        *,
        name_generator: Optional[NameGeneratorProtocol] = None,
        yaml_patcher: Optional[YAMLPatcherProtocol] = None,
    ) -> None:
        self._git_client = git_client
        self._log = log or logger
        self._name_generator = name_generator or NameGenerator.from_time()
        self._yaml_patcher = yaml_patcher or YAMLPatcher()

    def update_yaml(
        self, ctx: RequestContext, update_input: UpdateInput
    ) -> Optional[PullRequest]:
        """
        Fetch the file, set ``key`` to ``new_value`` and deliver the change.

        Returns:
            The created pull request, or None when the change was committed
            directly to the source branch.

        Raises:
            GitClientError: If the file cannot be read (unwrapped).
            ValueError: If the key path is invalid for the document (unwrapped).
            ruamel.yaml.error.YAMLError: If the document is not valid YAML
                (unwrapped).
            UpdateError: If a later step fails; earlier side effects remain.
            ContextCancelledError: If ``ctx`` is cancelled between steps.
        """
        return self.apply_update(
            ctx,
            update_input,
            update_yaml(
                update_input.key, update_input.new_value, patcher=self._yaml_patcher
            ),
        )

    def apply_update(
        self,
        ctx: RequestContext,
        update_input: FileUpdateInput,
        content_updater: ContentUpdater,
    ) -> Optional[PullRequest]:
        """Deliver the content produced by ``content_updater`` for the input file."""
        ctx.raise_if_cancelled()
        try:
            current = self._git_client.get_file(
                ctx, update_input.repo, update_input.branch, update_input.filename
            )
        except Exception as e:
            self._log.error("failed to get file from repo: %s", e)
            raise
        self._log.debug("got existing file sha=%s", current.sha)

        updated = content_updater(current.data)

        ctx.raise_if_cancelled()
        try:
            branch_ref = self._git_client.get_branch_head(
                ctx, update_input.repo, update_input.branch
            )
        except Exception as e:
            self._log.error("failed to get branch head: %s", e)
            raise UpdateError("failed to get branch head", e) from e

        target_branch = self._create_branch_if_necessary(ctx, update_input, branch_ref)

        ctx.raise_if_cancelled()
        try:
            self._git_client.update_file(
                ctx,
                update_input.repo,
                target_branch,
                update_input.filename,
                update_input.commit_message,
                current.sha,
                updated,
            )
        except Exception as e:
            self._log.error("failed to update file: %s", e)
            raise UpdateError("failed to update file", e) from e
        self._log.debug(
            "updated file filename=%s branch=%s", update_input.filename, target_branch
        )

        pull_request = self._create_pr_if_necessary(ctx, update_input, target_branch)
        self._log.info(
            "update complete repo=%s filename=%s branch=%s",
            update_input.repo,
            update_input.filename,
            target_branch,
        )
        return pull_request

    def _create_branch_if_necessary(
        self, ctx: RequestContext, update_input: FileUpdateInput, source_ref: str
    ) -> str:
        if not update_input.branch_generate_name:
            self._log.debug(
                "no branch_generate_name configured, reusing source branch=%s",
                update_input.branch,
            )
            return update_input.branch

        new_branch_name = self._name_generator.prefixed_name(
            update_input.branch_generate_name
        )
        self._log.debug("generating new branch name=%s", new_branch_name)
        ctx.raise_if_cancelled()
        try:
            self._git_client.create_branch(
                ctx, update_input.repo, new_branch_name, source_ref
            )
        except Exception as e:
            self._log.error("failed to create branch: %s", e)
            raise UpdateError("failed to create branch", e) from e
        self._log.debug("created branch=%s ref=%s", new_branch_name, source_ref)
        return new_branch_name

    def _create_pr_if_necessary(
        self, ctx: RequestContext, update_input: FileUpdateInput, target_branch: str
    ) -> Optional[PullRequest]:
        if target_branch == update_input.branch:
            return None

        ctx.raise_if_cancelled()
        try:
            pull_request = self._git_client.create_pull_request(
                ctx,
                update_input.repo,
                NewPullRequest(
                    title=update_input.pull_request.title,
                    body=update_input.pull_request.body,
                    head=target_branch,
                    base=update_input.branch,
                ),
            )
        except Exception as e:
            self._log.error("failed to create a pull request: %s", e)
            raise UpdateError("failed to create a pull request", e) from e
        self._log.debug("created pull request number=%s", pull_request.number)
        return pull_request
