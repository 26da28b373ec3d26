"""
Schemas for the echo endpoint.

The echo body can be any JSON document, so it is typed as a union of the
JSON value kinds instead of a fixed model.
"""

from typing import Any, Dict, List, Optional, Union

from pydantic import BaseModel, Field

# Object, array, string, number, boolean or null
JsonValue = Optional[Union[Dict[str, Any], List[Any], str, int, float, bool]]


class EchoResponse(BaseModel):
    """Response model for POST /api/echo."""

    received: JsonValue = Field(
        ...,
        description="The parsed request body, returned verbatim",
        examples=[{"message": "hi"}]
    )
    timestamp: str = Field(..., description="ISO-8601 UTC time of the response")

