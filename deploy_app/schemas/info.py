"""
Schemas for the application metadata endpoint.
"""

from pydantic import BaseModel, ConfigDict, Field


class InfoResponse(BaseModel):
    """
    Response model for GET /api/info.

    Reports static application metadata plus the deployment mode the
    process was started with.
    """

    app: str = Field(..., description="Application display name")
    version: str = Field(..., description="Application version")
    timestamp: str = Field(..., description="ISO-8601 UTC time of the response")
    environment: str = Field(
        ...,
        description="Deployment mode flag, echoed verbatim from configuration",
        examples=["development", "production"]
    )
    runtime_version: str = Field(..., description="Version of the Python interpreter")

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "app": "Deploy Test Application",
                "version": "1.0.0",
                "timestamp": "2025-01-01T12:00:00.000Z",
                "environment": "development",
                "runtime_version": "3.12.1"
            }
        }
    )
