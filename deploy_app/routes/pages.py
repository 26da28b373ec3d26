"""
HTML page routes.

Only the landing page has an explicit route. Every other file under the
public directory is served by the static mount registered in main.py, which
is consulted after all routes fail to match.
"""

from fastapi import APIRouter, Request
from fastapi.responses import FileResponse

from deploy_app.utils.constants import INDEX_PAGE
from deploy_app.utils.logging import get_logger

logger = get_logger(__name__)

router = APIRouter(tags=["pages"])


@router.get("/", response_class=FileResponse, include_in_schema=False)
async def index(request: Request) -> FileResponse:
    """Serve the landing page explicitly instead of relying on directory defaults."""
    logger.debug("Serving landing page")

    return FileResponse(request.app.state.public_dir / INDEX_PAGE, media_type="text/html")
