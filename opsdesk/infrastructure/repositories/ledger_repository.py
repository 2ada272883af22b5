"""
Income and expense repository implementations using Supabase.
"""

from opsdesk.domain.models.ledger import Expense, Income
from opsdesk.infrastructure.mappers.ledger_mapper import ExpenseMapper, IncomeMapper
from .base import SupabaseRepository


class SupabaseIncomeRepository(SupabaseRepository[Income]):
    """Supabase implementation of the income repository."""

    table = "incomes"
    search_column = "customer_name"
    date_column = "date"
    date_is_timestamp = False
    order_column = "date"
    mapper = IncomeMapper()


class SupabaseExpenseRepository(SupabaseRepository[Expense]):
    """Supabase implementation of the expense repository."""

    table = "expenses"
    search_column = "customer_name"
    date_column = "date"
    date_is_timestamp = False
    order_column = "date"
    mapper = ExpenseMapper()
