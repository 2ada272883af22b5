"""
Credential mapper for converting between credential records and storage rows.
"""

from typing import Any, Mapping

from opsdesk.domain.models.credential import Credential, CredentialType
from .base import FieldMapper, parse_date, parse_datetime, storage_date, text


class CredentialMapper(FieldMapper[Credential]):
    """
    Maps between the Credential record and the `credentials` table.

    The category is validated on every write path it appears in; on create it
    is required because an absent category does not resolve.
    """

    entity_name = "Credential"
    field_map = {
        "client": "client_name",
        "type": "type",
        "provider": "provider",
        "url": "portal_url",
        "login": "login",
        "password": "password",
        "service_name": "service_name",
        "expiry": "expiry",
        "notes": "notes",
    }
    aliases = {
        "client_name": "client",
        "clientName": "client",
        "portal_url": "url",
        "serviceName": "service_name",
    }

    def to_storage_value(self, field: str, value: Any) -> Any:
        if field == "type":
            return CredentialType.normalize(value).value
        if field == "expiry":
            return storage_date(value)
        return value

    def to_domain(self, row: Mapping[str, Any]) -> Credential:
        return Credential(
            id=row.get("id"),
            owner_id=row.get("owner_id"),
            created_at=parse_datetime(row.get("created_at")),
            client=text(row.get("client_name")),
            type=CredentialType.display(row.get("type")),
            provider=text(row.get("provider")),
            url=text(row.get("portal_url")),
            login=text(row.get("login")),
            password=text(row.get("password")),
            service_name=text(row.get("service_name")),
            expiry=parse_date(row.get("expiry")),
            notes=text(row.get("notes")),
        )
