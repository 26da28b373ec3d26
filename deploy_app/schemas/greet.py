"""
Schemas for the greeting endpoint.
"""

from pydantic import BaseModel, Field


class GreetResponse(BaseModel):
    """Response model for GET /api/greet/{name}."""

    message: str = Field(
        ...,
        description="Greeting containing the decoded name exactly as received",
        examples=["Hello, Ada! Welcome."]
    )
    timestamp: str = Field(..., description="ISO-8601 UTC time of the response")
