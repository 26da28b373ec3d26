"""
FastAPI application entry point for the Deploy Test Application.

This module builds the FastAPI app, registers routers, exception handlers and
the static file mount, and exposes a module-level ``app`` for uvicorn.
"""

from contextlib import asynccontextmanager
from pathlib import Path
from typing import Optional

from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exception_handlers import http_exception_handler
from fastapi.exceptions import RequestValidationError
from fastapi.responses import FileResponse, JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from deploy_app.config import Settings
from deploy_app.routes.api import router as api_router
from deploy_app.routes.pages import router as pages_router
from deploy_app.staticfiles import PublicFiles
from deploy_app.utils.constants import APP_NAME, APP_VERSION, NOT_FOUND_PAGE, PUBLIC_DIR
from deploy_app.utils.logging import configure_logging, get_logger, preview

logger = get_logger(__name__)


def _public_errors(exc: RequestValidationError) -> list:
    """Validation errors without the offending input, which may be undecodable bytes."""
    return [
        {key: value for key, value in error.items() if key != "input"}
        for error in exc.errors()
    ]


@asynccontextmanager
async def lifespan(app: FastAPI):
    settings: Settings = app.state.settings
    logger.info(f"Server is running on port {settings.port}")
    logger.info(f"Environment: {settings.environment}")
    yield
    logger.info("Server shutting down")


def create_app(settings: Optional[Settings] = None, public_dir: Path = PUBLIC_DIR) -> FastAPI:
    """
    Create the FastAPI application.

    Args:
        settings: Immutable settings handed to request handlers.
                  Read from the environment when omitted.
        public_dir: Directory served as static assets; must contain
                    index.html and 404.html.

    Returns:
        Configured FastAPI app
    """
    if settings is None:
        settings = Settings.from_env()

    app = FastAPI(
        title=APP_NAME,
        description="Sample application for verifying cloud deployments",
        version=APP_VERSION,
        docs_url="/docs",
        redoc_url="/redoc",
        lifespan=lifespan,
    )
    app.state.settings = settings
    app.state.public_dir = public_dir

    # Malformed or missing JSON bodies are client errors: answer 400, not 422
    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(request: Request, exc: RequestValidationError):
        """Log validation failures and reject the request with 400."""
        logger.warning(
            f"Validation error on {request.method} {request.url.path}: {_public_errors(exc)}"
        )
        logger.debug(f"Request body preview: {preview(exc.body)}")

        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content=jsonable_encoder({
                "error": "validation_error",
                "details": _public_errors(exc),
            }),
        )

    @app.exception_handler(StarletteHTTPException)
    async def not_found_handler(request: Request, exc: StarletteHTTPException):
        """Serve the fixed not-found page for 404s; defer everything else."""
        if exc.status_code != status.HTTP_404_NOT_FOUND:
            return await http_exception_handler(request, exc)

        logger.info(f"Not found: {request.method} {request.url.path}")
        return FileResponse(
            public_dir / NOT_FOUND_PAGE,
            status_code=status.HTTP_404_NOT_FOUND,
            media_type="text/html",
        )

    # Register routers
    app.include_router(pages_router)
    app.include_router(api_router)

    # Static assets last so explicit routes always win
    app.mount("/", PublicFiles(directory=public_dir), name="public")

    logger.info("FastAPI app initialized successfully")
    return app


settings = Settings.from_env()
configure_logging(settings.log_level)

app = create_app(settings)
