"""
Client mapper for converting between client records and storage rows.
"""

from typing import Any, Mapping

from opsdesk.domain.models.client import Client
from .base import FieldMapper, parse_datetime, text


class ClientMapper(FieldMapper[Client]):
    """Maps between the Client record and the `clients` table."""

    entity_name = "Client"
    field_map = {
        "name": "client_name",
        "company": "company_name",
        "designation": "designation",
        "address": "address",
        "city": "city",
        "phone": "phone",
        "email": "email",
        "tax_id": "tax_id",
    }
    # Keys sent by the customer form
    aliases = {
        "clientName": "name",
        "client_name": "name",
        "companyName": "company",
        "company_name": "company",
        "clientDesignation": "designation",
        "companyAddress": "address",
        "gstin": "tax_id",
    }

    def to_storage_value(self, field: str, value: Any) -> Any:
        if isinstance(value, str) and field in ("email", "tax_id"):
            return value.strip()
        return value

    def to_domain(self, row: Mapping[str, Any]) -> Client:
        return Client(
            id=row.get("id"),
            owner_id=row.get("owner_id"),
            created_at=parse_datetime(row.get("created_at")),
            name=text(row.get("client_name")),
            company=text(row.get("company_name")),
            designation=text(row.get("designation")),
            address=text(row.get("address")),
            city=text(row.get("city")),
            phone=text(row.get("phone")),
            email=text(row.get("email")),
            tax_id=text(row.get("tax_id")),
        )
