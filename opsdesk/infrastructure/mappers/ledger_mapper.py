"""
Ledger mappers for converting between income/expense records and storage rows.
"""

from typing import Any, Mapping

from opsdesk.domain.models.ledger import Expense, Income, parse_amount, validate_amount
from .base import FieldMapper, parse_date, parse_datetime, storage_date, text


class IncomeMapper(FieldMapper[Income]):
    """Maps between the Income record and the `incomes` table."""

    entity_name = "Income"
    field_map = {
        "customer": "customer_name",
        "amount": "amount",
        "date": "date",
        "remark": "remark",
        "uploaded": "uploaded_path",
        "client_id": "client_id",
    }
    aliases = {
        "customer_name": "customer",
        "uploaded_path": "uploaded",
    }

    def to_storage_value(self, field: str, value: Any) -> Any:
        if field == "amount":
            return validate_amount(value)
        if field == "date":
            return storage_date(value)
        if field in ("uploaded", "client_id") and value == "":
            return None
        return value

    def _ledger_fields(self, row: Mapping[str, Any]) -> dict:
        return dict(
            id=row.get("id"),
            owner_id=row.get("owner_id"),
            created_at=parse_datetime(row.get("created_at")),
            customer=text(row.get("customer_name")),
            amount=parse_amount(row.get("amount")),
            date=parse_date(row.get("date")),
            remark=text(row.get("remark")),
            uploaded=text(row.get("uploaded_path")),
            client_id=row.get("client_id"),
        )

    def to_domain(self, row: Mapping[str, Any]) -> Income:
        return Income(**self._ledger_fields(row))


class ExpenseMapper(IncomeMapper):
    """Maps between the Expense record and the `expenses` table."""

    entity_name = "Expense"
    field_map = dict(IncomeMapper.field_map, category="category")
    aliases = dict(IncomeMapper.aliases, name="customer")

    def to_domain(self, row: Mapping[str, Any]) -> Expense:
        fields = self._ledger_fields(row)
        if not fields["customer"]:
            fields["customer"] = text(row.get("name"))
        return Expense(category=text(row.get("category")), **fields)
