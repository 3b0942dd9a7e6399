"""
FastAPI application exposing session snapshots, workspace tools and line diffs.
"""

import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from patchspace.api.routers import router as api_router
from patchspace.exceptions import ConfigurationError, WorkspaceError

app = FastAPI(
    title="Virtual Workspace Patch Engine",
    description="In-memory project sessions edited through search/replace file tools.",
    version="0.1.0",
)
app.include_router(api_router)

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)

logger = logging.getLogger(__name__)


@app.exception_handler(WorkspaceError)
async def workspace_error_handler(request: Request, exc: WorkspaceError):
    logger.warning(f"Unhandled workspace error on {request.url.path}: {exc}")
    return JSONResponse(status_code=400, content={"detail": str(exc)})


@app.exception_handler(ConfigurationError)
async def configuration_error_handler(request: Request, exc: ConfigurationError):
    logger.error(f"Configuration error: {exc}")
    return JSONResponse(status_code=500, content={"detail": str(exc)})
