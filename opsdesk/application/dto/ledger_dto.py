"""
Income and expense DTOs for the application layer.
"""

import datetime
from typing import Optional, Union
from pydantic import Field

from .base_dto import CreateRequestDTO, UpdateRequestDTO, ResponseDTO


# Amounts arrive from form inputs as strings; the mapper coerces them
AmountInput = Optional[Union[float, str]]


class CreateIncomeRequestDTO(CreateRequestDTO):
    """DTO for income creation requests."""

    customer: Optional[str] = Field(default=None, max_length=255, description="Customer name")
    amount: AmountInput = Field(default=None, description="Amount; non-numeric input is stored as 0")
    date: Optional[datetime.date] = None
    remark: Optional[str] = Field(default=None, max_length=2000)
    uploaded: Optional[str] = Field(default=None, max_length=1024, description="Storage path of the invoice")
    client_id: Optional[Union[int, str]] = None


class UpdateIncomeRequestDTO(UpdateRequestDTO):
    """DTO for income update requests. Only fields sent are changed."""

    customer: Optional[str] = Field(default=None, max_length=255)
    amount: AmountInput = None
    date: Optional[datetime.date] = None
    remark: Optional[str] = Field(default=None, max_length=2000)
    uploaded: Optional[str] = Field(default=None, max_length=1024)
    client_id: Optional[Union[int, str]] = None


class CreateExpenseRequestDTO(CreateIncomeRequestDTO):
    """DTO for expense creation requests."""

    category: Optional[str] = Field(default=None, max_length=100)


class UpdateExpenseRequestDTO(UpdateIncomeRequestDTO):
    """DTO for expense update requests."""

    category: Optional[str] = Field(default=None, max_length=100)


class IncomeResponseDTO(ResponseDTO):
    """DTO for income responses."""

    customer: str = ""
    amount: float = 0.0
    date: Optional[datetime.date] = None
    remark: str = ""
    uploaded: str = ""
    client_id: Optional[Union[int, str]] = None


class ExpenseResponseDTO(IncomeResponseDTO):
    """DTO for expense responses."""

    category: str = ""
