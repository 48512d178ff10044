"""
Standardized API response models.
Provides consistent response formatting across all endpoints.
"""

from typing import Optional, Any
from pydantic import BaseModel, Field
from datetime import datetime


class ErrorResponse(BaseModel):
    """Standardized error response"""

    success: bool = Field(False, description="Always false for errors")
    error: str = Field(..., description="Human-readable error message")
    code: str = Field(..., description="Machine-readable error code")
    details: Optional[Any] = Field(None, description="Additional error details")
    timestamp: datetime = Field(
        default_factory=datetime.utcnow, description="Error timestamp"
    )


class HealthResponse(BaseModel):
    """Health check response"""

    status: str = Field(..., description="Service status")
    service: str = Field(..., description="Service name")
    version: Optional[str] = Field(None, description="Service version")
    mode: str = Field(..., description="'backend' or 'demo'")
    timestamp: datetime = Field(
        default_factory=datetime.utcnow, description="Check timestamp"
    )


class DeleteResponse(BaseModel):
    """Acknowledgement for delete endpoints"""

    status: str = Field("ok", description="Always 'ok'")
    deleted: str = Field(..., description="Identifier of the removed resource")
    cascaded_items: int = Field(0, description="Child items removed with it")
    cascaded_categories: int = Field(0, description="Child categories removed with it")


ERROR_RESPONSES = {
    400: {"model": ErrorResponse, "description": "Invalid request"},
    401: {"model": ErrorResponse, "description": "Authentication required"},
    403: {"model": ErrorResponse, "description": "Not the restaurant owner"},
    404: {"model": ErrorResponse, "description": "Resource not found"},
}
