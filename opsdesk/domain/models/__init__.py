"""
Domain models for the business operations desk.
This module exports all domain records and exceptions.
"""

# Base classes
from .base import (
    BaseEntity,
    RecordId,
    DomainException,
    ValidationError,
    StorageError,
    EntityNotFoundError,
    SyncError,
    parse_date
)

# Domain records
from .client import Client
from .credential import Credential, CredentialType
from .ledger import LedgerEntry, Income, Expense, is_pending_remark, parse_amount, validate_amount
from .renewal import Renewal, ExpiryStatus, days_until, expiry_status

__all__ = [
    "BaseEntity",
    "RecordId",
    "DomainException",
    "ValidationError",
    "StorageError",
    "EntityNotFoundError",
    "SyncError",
    "parse_date",
    "Client",
    "Credential",
    "CredentialType",
    "LedgerEntry",
    "Income",
    "Expense",
    "is_pending_remark",
    "parse_amount",
    "validate_amount",
    "Renewal",
    "ExpiryStatus",
    "days_until",
    "expiry_status",
]
