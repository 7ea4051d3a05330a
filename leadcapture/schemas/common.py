"""
Common schemas used across multiple endpoints.
"""
from typing import List, Optional
from pydantic import BaseModel


class ErrorResponse(BaseModel):
    """Error envelope."""
    success: bool = False
    error: str
    timestamp: str
    validation_errors: Optional[List[str]] = None

    class Config:
        json_schema_extra = {
            "example": {
                "success": False,
                "error": "Validation failed",
                "timestamp": "2024-01-01T00:00:00+00:00",
                "validation_errors": ["Please select at least one service"]
            }
        }


class HealthResponse(BaseModel):
    """Health check payload."""
    status: str = "OK"
    version: str = "v1"
    environment: str = "production"


# Documented error responses shared by every router
ERROR_RESPONSES = {
    400: {"model": ErrorResponse, "description": "Bad input or invalid status"},
    404: {"model": ErrorResponse, "description": "Not found"},
    422: {"model": ErrorResponse, "description": "Validation failed"},
    429: {"model": ErrorResponse, "description": "Rate limit exceeded"},
    500: {"model": ErrorResponse, "description": "Internal server error"},
}
