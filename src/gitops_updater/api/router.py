"""API endpoints for GitOps file updates."""

import logging

from fastapi import APIRouter, Depends, HTTPException
from ruamel.yaml.error import YAMLError

from src.gitops_updater import dependencies
from src.gitops_updater.api.schemas import (
    PullRequestResponse,
    UpdateYAMLRequest,
    UpdateYAMLResponse,
)
from src.gitops_updater.config import UpdaterSettings
from src.gitops_updater.context import ContextCancelledError, RequestContext
from src.gitops_updater.protocols import GitClientError
from src.gitops_updater.services import UpdateError, Updater

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("/updates/yaml", response_model=UpdateYAMLResponse)
def update_yaml(
    request: UpdateYAMLRequest,
    updater: Updater = Depends(dependencies.get_updater),
    settings: UpdaterSettings = Depends(dependencies.get_app_settings),
) -> UpdateYAMLResponse:
    """
    Update a key in a YAML file and optionally open a pull request.

    Runs in FastAPI's threadpool since the Git hosting calls block.

    Raises:
        HTTPException: 422 for an unpatchable document, 404 when the file or
            branch is missing, 504 when the request deadline passes and 502
            for any other Git hosting failure.
    """
    ctx = RequestContext.with_timeout(settings.request_timeout_seconds)
    try:
        pull_request = updater.update_yaml(ctx, request.to_update_input())
    except (ValueError, YAMLError) as e:
        raise HTTPException(status_code=422, detail=str(e))
    except ContextCancelledError as e:
        raise HTTPException(status_code=504, detail=str(e))
    except GitClientError as e:
        status = 404 if e.status_code == 404 else 502
        raise HTTPException(status_code=status, detail=str(e))
    except UpdateError as e:
        status = 504 if isinstance(e.cause, ContextCancelledError) else 502
        raise HTTPException(status_code=status, detail=str(e))

    if pull_request is None:
        return UpdateYAMLResponse(
            message=f"Committed {request.filename} to {request.branch}",
        )

    logger.info("opened pull request %s for %s", pull_request.link, request.repo)
    return UpdateYAMLResponse(
        pull_request=PullRequestResponse(
            number=pull_request.number, link=pull_request.link
        ),
        message=f"Opened pull request #{pull_request.number}",
    )
