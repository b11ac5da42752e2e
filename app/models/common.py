"""Common models used across the application."""
from pydantic import BaseModel, Field


class HealthResponse(BaseModel):
    """Health check response model."""
    status: str = Field(..., description="Overall health status")
    timestamp: str = Field(..., description="ISO timestamp")
    version: str = Field(..., description="Application version")
    dependencies: dict[str, str] = Field(
        ...,
        description="Status of each dependency"
    )
