"""
Infrastructure mappers module.
Contains mappers for converting between UI-shaped records and storage rows.
"""

from .base import FieldMapper, as_payload
from .client_mapper import ClientMapper
from .credential_mapper import CredentialMapper
from .ledger_mapper import IncomeMapper, ExpenseMapper
from .renewal_mapper import RenewalMapper

__all__ = [
    "FieldMapper",
    "as_payload",
    "ClientMapper",
    "CredentialMapper",
    "IncomeMapper",
    "ExpenseMapper",
    "RenewalMapper",
]
