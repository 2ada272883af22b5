"""
Infrastructure repositories module.
Contains Supabase implementations of domain repositories.
"""

from .base import SupabaseRepository, execute_query, require_id
from .client_repository import SupabaseClientRepository
from .credential_repository import SupabaseCredentialRepository
from .ledger_repository import SupabaseIncomeRepository, SupabaseExpenseRepository
from .renewal_repository import SupabaseRenewalRepository
from .dashboard_repository import SupabaseDashboardRepository

__all__ = [
    "SupabaseRepository",
    "execute_query",
    "require_id",
    "SupabaseClientRepository",
    "SupabaseCredentialRepository",
    "SupabaseIncomeRepository",
    "SupabaseExpenseRepository",
    "SupabaseRenewalRepository",
    "SupabaseDashboardRepository",
]
