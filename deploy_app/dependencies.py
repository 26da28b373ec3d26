"""
FastAPI dependency functions for request bodies.

The echo endpoint accepts any JSON document, including a bare ``null``, so
the body is decoded here rather than through a pydantic ``Body()`` field.
The body is decoded as JSON whatever its Content-Type header says.
"""

import json
import logging

from fastapi import Request
from fastapi.exceptions import RequestValidationError

from deploy_app.schemas.echo import JsonValue

logger = logging.getLogger(__name__)


async def read_json_body(request: Request) -> JsonValue:
    """
    Decode the request body as a JSON value.

    Returns:
        The parsed document (object, array, string, number, boolean or None)

    Raises:
        RequestValidationError: If the body is empty or not valid JSON.
            The application's validation handler answers it with 400.
    """
    raw = await request.body()

    if not raw.strip():
        raise RequestValidationError(
            [{"type": "missing", "loc": ("body",), "msg": "Field required"}]
        )

    try:
        return json.loads(raw)
    except ValueError as e:
        # JSONDecodeError and UnicodeDecodeError are both ValueErrors
        logger.debug(f"Rejecting undecodable body ({len(raw)} bytes): {e}")
        raise RequestValidationError(
            [{
                "type": "json_invalid",
                "loc": ("body",),
                "msg": "JSON decode error",
                "ctx": {"error": str(e)},
            }],
            body=raw,
        ) from e
