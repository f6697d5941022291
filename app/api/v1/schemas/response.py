"""
Generic response schemas for API endpoints.

Provides the documented error response shape.
"""

from typing import Optional
from pydantic import BaseModel, Field


class ErrorResponseModel(BaseModel):
    """Error response model for API endpoints."""

    status_code: int = Field(..., description="HTTP status code")
    status: bool = Field(default=False, description="Error status (always false)")
    message: str = Field(..., description="Error message")
    detail: Optional[str] = Field(None, description="Error detail code")
    request_id: Optional[str] = Field(None, description="Request ID for correlation")

    class Config:
        json_schema_extra = {
            "example": {
                "status_code": 422,
                "status": False,
                "message": "Invalid size parameter. Must be between 1 and 100",
                "detail": "VALIDATION_ERROR",
                "request_id": "0b5f8f0e-4c1d-4a55-9a3b-2f1f7d6a9c11",
            }
        }


class HealthResponseModel(BaseModel):
    """Health check response model."""

    status: str = Field(..., description="Service status")
    app_name: str = Field(..., description="Application name")
    version: str = Field(..., description="Application version")
    environment: str = Field(..., description="Deployment environment")
    timestamp: str = Field(..., description="Current server time (ISO 8601, UTC)")
    uptime: dict = Field(..., description="Uptime in seconds and human-readable form")
