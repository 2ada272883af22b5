"""
Application layer DTOs.
Data Transfer Objects for API requests and responses.
"""

from .base_dto import (
    BaseDTO,
    RequestDTO,
    ResponseDTO,
    CreateRequestDTO,
    UpdateRequestDTO,
    ErrorResponseDTO,
    HealthCheckResponseDTO,
)
from .client_dto import CreateClientRequestDTO, UpdateClientRequestDTO, ClientResponseDTO
from .credential_dto import (
    CreateCredentialRequestDTO,
    UpdateCredentialRequestDTO,
    CredentialResponseDTO,
)
from .ledger_dto import (
    CreateIncomeRequestDTO,
    UpdateIncomeRequestDTO,
    IncomeResponseDTO,
    CreateExpenseRequestDTO,
    UpdateExpenseRequestDTO,
    ExpenseResponseDTO,
)
from .dashboard_dto import RenewalResponseDTO, DashboardResponseDTO

__all__ = [
    "BaseDTO",
    "RequestDTO",
    "ResponseDTO",
    "CreateRequestDTO",
    "UpdateRequestDTO",
    "ErrorResponseDTO",
    "HealthCheckResponseDTO",
    "CreateClientRequestDTO",
    "UpdateClientRequestDTO",
    "ClientResponseDTO",
    "CreateCredentialRequestDTO",
    "UpdateCredentialRequestDTO",
    "CredentialResponseDTO",
    "CreateIncomeRequestDTO",
    "UpdateIncomeRequestDTO",
    "IncomeResponseDTO",
    "CreateExpenseRequestDTO",
    "UpdateExpenseRequestDTO",
    "ExpenseResponseDTO",
    "RenewalResponseDTO",
    "DashboardResponseDTO",
]
