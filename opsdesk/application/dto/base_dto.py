"""
Base DTOs for the application layer.
Provides common patterns for request/response data transfer objects.
"""

from typing import Any, Dict, Optional, Union
from datetime import datetime
from pydantic import BaseModel, Field, ConfigDict


class BaseDTO(BaseModel):
    """Base DTO with common configuration."""

    model_config = ConfigDict(
        # Allow population by field name or alias
        populate_by_name=True,
        # Convert enum values to their values
        use_enum_values=True,
        # Reject unknown keys so misspelled form fields fail loudly
        extra="forbid",
    )


class RequestDTO(BaseDTO):
    """
    Base class for request DTOs.
    Repositories read only the fields a caller explicitly set.
    """
    pass


class ResponseDTO(BaseDTO):
    """Base class for response DTOs built from domain records."""

    model_config = ConfigDict(
        populate_by_name=True,
        use_enum_values=True,
        from_attributes=True,
    )

    id: Optional[Union[int, str]] = None
    owner_id: Optional[str] = None
    created_at: Optional[datetime] = None

    @classmethod
    def from_domain(cls, entity: Any) -> "ResponseDTO":
        """Convert a domain record to its response DTO."""
        return cls.model_validate(entity)


class CreateRequestDTO(RequestDTO):
    """Base class for creation request DTOs."""
    pass


class UpdateRequestDTO(RequestDTO):
    """Base class for update request DTOs; every field is optional."""
    pass


class ErrorResponseDTO(BaseModel):
    """Error response DTO."""

    error: str = Field(description="Error type")
    message: str = Field(description="Error message")
    code: Optional[str] = Field(default=None, description="Machine-readable error code")
    status_code: int = Field(description="HTTP status code")
    details: Optional[Dict[str, Any]] = Field(default=None, description="Additional error details")


class HealthCheckResponseDTO(BaseModel):
    """Health check response DTO."""

    status: str = Field(description="Service status")
    environment: str = Field(description="Current environment")
    version: Optional[str] = Field(default=None, description="Application version")

