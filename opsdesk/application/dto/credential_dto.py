"""
Credential DTOs for the application layer.
"""

import datetime
from typing import Optional
from pydantic import Field

from opsdesk.domain.models.credential import Credential
from opsdesk.domain.models.renewal import days_until, expiry_status
from .base_dto import CreateRequestDTO, UpdateRequestDTO, ResponseDTO


class CreateCredentialRequestDTO(CreateRequestDTO):
    """
    DTO for credential creation requests.
    `type` accepts the display labels or canonical values; it is validated
    when the row is built, not here.
    """

    client: Optional[str] = Field(default=None, max_length=255, description="Client name")
    type: str = Field(description="Domain, Hosting, Email or Other")
    provider: Optional[str] = Field(default=None, max_length=255)
    url: Optional[str] = Field(default=None, max_length=2048, description="Portal URL")
    login: Optional[str] = Field(default=None, max_length=255)
    password: Optional[str] = Field(default=None, max_length=1024)
    service_name: Optional[str] = Field(default=None, max_length=255, alias="serviceName")
    expiry: Optional[datetime.date] = None
    notes: Optional[str] = Field(default=None, max_length=2000)


class UpdateCredentialRequestDTO(UpdateRequestDTO):
    """DTO for credential update requests. Only fields sent are changed."""

    client: Optional[str] = Field(default=None, max_length=255)
    type: Optional[str] = None
    provider: Optional[str] = Field(default=None, max_length=255)
    url: Optional[str] = Field(default=None, max_length=2048)
    login: Optional[str] = Field(default=None, max_length=255)
    password: Optional[str] = Field(default=None, max_length=1024)
    service_name: Optional[str] = Field(default=None, max_length=255, alias="serviceName")
    expiry: Optional[datetime.date] = None
    notes: Optional[str] = Field(default=None, max_length=2000)


class CredentialResponseDTO(ResponseDTO):
    """DTO for credential responses; the secret is masked unless revealed."""

    client: str = ""
    type: str = ""
    provider: str = ""
    url: str = ""
    login: str = ""
    password: str = ""
    service_name: str = ""
    expiry: Optional[datetime.date] = None
    notes: str = ""
    days_left: Optional[int] = None
    expiry_status: Optional[str] = None

    @classmethod
    def from_domain(
        cls,
        entity: Credential,
        reveal_secret: bool = False,
        critical_days: int = 7,
        warning_days: int = 30
    ) -> "CredentialResponseDTO":
        dto = cls.model_validate(entity)
        if not reveal_secret:
            dto.password = entity.masked_password
        dto.days_left = days_until(entity.expiry)
        status = expiry_status(dto.days_left, critical_days, warning_days)
        dto.expiry_status = status.value if status else None
        return dto
