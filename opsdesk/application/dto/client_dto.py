"""
Client DTOs for the application layer.
Data Transfer Objects for client-related operations.
"""

from typing import Optional
from pydantic import Field

from .base_dto import CreateRequestDTO, UpdateRequestDTO, ResponseDTO


class CreateClientRequestDTO(CreateRequestDTO):
    """DTO for client creation requests."""

    name: str = Field(min_length=1, max_length=255, alias="clientName", description="Client name")
    company: Optional[str] = Field(default=None, max_length=255, alias="companyName", description="Company name")
    designation: Optional[str] = Field(default=None, max_length=255, alias="clientDesignation")
    address: Optional[str] = Field(default=None, max_length=500, alias="companyAddress")
    city: Optional[str] = Field(default=None, max_length=100)
    phone: Optional[str] = Field(default=None, max_length=30)
    email: Optional[str] = Field(default=None, max_length=255)
    tax_id: Optional[str] = Field(default=None, max_length=50, alias="gstin", description="Tax ID (GSTIN)")


class UpdateClientRequestDTO(UpdateRequestDTO):
    """DTO for client update requests. Only fields sent are changed."""

    name: Optional[str] = Field(default=None, max_length=255, alias="clientName")
    company: Optional[str] = Field(default=None, max_length=255, alias="companyName")
    designation: Optional[str] = Field(default=None, max_length=255, alias="clientDesignation")
    address: Optional[str] = Field(default=None, max_length=500, alias="companyAddress")
    city: Optional[str] = Field(default=None, max_length=100)
    phone: Optional[str] = Field(default=None, max_length=30)
    email: Optional[str] = Field(default=None, max_length=255)
    tax_id: Optional[str] = Field(default=None, max_length=50, alias="gstin")


class ClientResponseDTO(ResponseDTO):
    """DTO for client responses."""

    name: str = ""
    company: str = ""
    designation: str = ""
    address: str = ""
    city: str = ""
    phone: str = ""
    email: str = ""
    tax_id: str = ""
