import logging
from importlib import metadata

from fastapi import FastAPI

from src.gitops_updater.api.router import router as updates_router
from src.gitops_updater.dependencies import get_app_settings

try:
    version = metadata.version("gitops-updater")
except metadata.PackageNotFoundError:
    version = "0.1.0"

logging.basicConfig(level=get_app_settings().log_level)

app = FastAPI(
    title="GitOps Updater API",
    version=version,
    description="Update YAML files in Git repositories and propose the change.",
)


@app.get("/health")
async def health_check():
    """Health check endpoint."""
    return {"status": "healthy"}


# Include routers
app.include_router(updates_router, prefix="/api/v1", tags=["updates"])
