"""
JSON API endpoints.

Provides:
- GET  /api/info          application metadata and deployment mode
- GET  /api/greet/{name}  greeting for a name taken from the path
- POST /api/echo          returns the JSON body it was sent

All endpoints are stateless; each request is answered independently.
"""

import logging
from typing import Annotated

from fastapi import APIRouter, Depends, status

from deploy_app.config import Settings, get_settings
from deploy_app.dependencies import read_json_body
from deploy_app.schemas.echo import EchoResponse, JsonValue
from deploy_app.schemas.errors import ValidationErrorResponse
from deploy_app.schemas.greet import GreetResponse
from deploy_app.schemas.info import InfoResponse
from deploy_app.services import build_app_info, build_greeting
from deploy_app.utils.logging import preview
from deploy_app.utils.time import utc_timestamp

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["api"])

# Documents the body read by read_json_body, which has no pydantic field
ECHO_REQUEST_BODY = {
    "requestBody": {
        "required": True,
        "content": {"application/json": {"schema": {}}},
    }
}


@router.get(
    "/info",
    response_model=InfoResponse,
    status_code=status.HTTP_200_OK,
    summary="Application metadata",
    description="""
    Report the application name, version, deployment mode and runtime.

    The environment field echoes the configured deployment mode verbatim.
    """
)
async def get_info(
    settings: Annotated[Settings, Depends(get_settings)]
) -> InfoResponse:
    """Return application metadata for the running process."""
    logger.info(f"Returning app info (environment={settings.environment})")

    return build_app_info(settings)


@router.get(
    "/greet/{name}",
    response_model=GreetResponse,
    status_code=status.HTTP_200_OK,
    summary="Greet a name",
    description="""
    Return a greeting for the URL-decoded name in the path.

    The name is embedded as is. It is not escaped for any rendering context.
    """
)
async def greet(name: str) -> GreetResponse:
    """Greet ``name`` exactly as decoded from the path segment."""
    logger.info(f"Greeting requested (name length={len(name)})")

    return build_greeting(name)


@router.post(
    "/echo",
    response_model=EchoResponse,
    status_code=status.HTTP_200_OK,
    summary="Echo a JSON body",
    description="""
    Return the parsed JSON body verbatim, whatever its shape.

    The body is decoded as JSON whatever its Content-Type.
    Malformed JSON or an empty body is rejected with 400.
    """,
    openapi_extra=ECHO_REQUEST_BODY,
    responses={
        status.HTTP_400_BAD_REQUEST: {
            "model": ValidationErrorResponse,
            "description": "Malformed or missing JSON body",
        }
    },
)
async def echo(
    payload: Annotated[JsonValue, Depends(read_json_body)]
) -> EchoResponse:
    """Echo the request body back with a timestamp."""
    logger.info(f"Echoing body: {preview(payload, limit=80)}")

    return EchoResponse(received=payload, timestamp=utc_timestamp())
