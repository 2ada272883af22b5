"""
Base field mapper for converting between UI-shaped payloads and storage rows.
"""

import datetime
from typing import Any, Dict, Generic, Mapping, Optional, TypeVar

from opsdesk.domain.models.base import parse_date


T = TypeVar("T")


def as_payload(payload: Any) -> Dict[str, Any]:
    """
    Turn a caller payload into a plain dict of the keys the caller provided.
    Pydantic DTOs contribute only explicitly set fields.
    """
    if payload is None:
        return {}
    if hasattr(payload, "model_dump"):
        return payload.model_dump(exclude_unset=True)
    if isinstance(payload, Mapping):
        return dict(payload)
    raise TypeError(f"Unsupported payload type: {type(payload).__name__}")


def text(value: Any) -> str:
    """Read a nullable column as display text."""
    return "" if value is None else str(value)


def parse_datetime(value: Any) -> Optional[datetime.datetime]:
    """Read a timestamptz column as returned by PostgREST."""
    if isinstance(value, datetime.datetime):
        return value
    if not value:
        return None
    raw = str(value).replace("Z", "+00:00")
    try:
        return datetime.datetime.fromisoformat(raw)
    except ValueError:
        return None


def storage_date(value: Any) -> Any:
    """Serialize a date for the store; strings pass through untouched."""
    if isinstance(value, (datetime.date, datetime.datetime)):
        return value.isoformat()
    if value == "":
        return None
    return value


class FieldMapper(Generic[T]):
    """
    Maps between UI field names and storage column names.

    Subclasses declare `field_map` (UI field -> column) and `aliases`
    (alternate incoming key -> UI field), and implement `to_domain`.
    Value conversion for writes goes through `to_storage_value`.
    """

    entity_name: str = "Record"
    field_map: Dict[str, str] = {}
    aliases: Dict[str, str] = {}

    def canonical_fields(self, payload: Any) -> Dict[str, Any]:
        """Resolve aliases and drop keys this entity does not know."""
        fields: Dict[str, Any] = {}
        for key, value in as_payload(payload).items():
            name = self.aliases.get(key, key)
            if name in self.field_map:
                fields[name] = value
        return fields

    def to_storage_value(self, field: str, value: Any) -> Any:
        """Convert one UI value for storage. Override for typed fields."""
        return value

    def to_row(self, payload: Any) -> Dict[str, Any]:
        """
        Build a full insert row, without the owner tag.
        Every mapped column is present; missing fields are sent as null.
        """
        fields = self.canonical_fields(payload)
        row = {
            column: self.to_storage_value(name, fields.get(name))
            for name, column in self.field_map.items()
        }
        return row

    def to_patch(self, patch: Any) -> Dict[str, Any]:
        """
        Build a sparse update patch.
        A column is included iff its field key was present, even when the
        value is falsy ("", 0, None).
        """
        fields = self.canonical_fields(patch)
        return {
            self.field_map[name]: self.to_storage_value(name, value)
            for name, value in fields.items()
        }

    def to_domain(self, row: Mapping[str, Any]) -> T:
        """Convert a storage row to a UI-shaped record."""
        raise NotImplementedError

