"""Standardized error response schema."""

from pydantic import BaseModel, Field


class ErrorResponse(BaseModel):
    """Error body returned for every 4xx/5xx response."""

    error: str = Field(..., description="Human-readable error message")
