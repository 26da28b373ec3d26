"""
Error response schemas.
"""

from typing import Any, Dict, List

from pydantic import BaseModel, Field


class ValidationErrorResponse(BaseModel):
    """Body of the 400 response returned for malformed or missing JSON."""

    error: str = Field(default="validation_error", description="Error code")
    details: List[Dict[str, Any]] = Field(
        default_factory=list,
        description="Validation errors reported by the request parser"
    )
