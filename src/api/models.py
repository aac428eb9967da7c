"""Pydantic models for API request/response."""

from typing import Any, Optional
from pydantic import BaseModel, ConfigDict, Field


class ApiResponse(BaseModel):
    """Envelope wrapping every API response, success or failure."""
    code: int = Field(..., description="Mirrors the HTTP status code")
    message: str = Field(..., description="Human-readable outcome")
    data: Optional[Any] = Field(None, description="Payload, null on failure")


class UserRequest(BaseModel):
    """Request body for creating or updating a user.

    Caller-supplied id and created_at are ignored; the store assigns them.
    """
    model_config = ConfigDict(extra="ignore")

    name: str = ""
    email: str = ""


class UserResponse(BaseModel):
    """Response model for a user record."""
    model_config = ConfigDict(from_attributes=True)

    id: int = Field(..., description="User ID")
    name: str
    email: str
    created_at: str = Field(..., description="Creation date (YYYY-MM-DD)")


class DeletedUserResponse(BaseModel):
    """Payload returned after a successful delete."""
    deleted_user_id: int
    deleted_user_name: str


class HealthResponse(BaseModel):
    """Payload of the health check."""
    status: str = "healthy"
    timestamp: str = Field(..., description="Local time, YYYY-MM-DD HH:MM:SS")
    version: str
