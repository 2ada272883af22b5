"""
Base entity and exceptions for the domain layer.
This module contains the foundational classes for all domain records.
"""

from datetime import date, datetime
from typing import Optional, Any, Dict, Union
from dataclasses import dataclass, fields


# Supabase tables use either bigint or uuid primary keys
RecordId = Union[int, str]


def parse_date(value: Any) -> Optional[date]:
    """Read a date value; anything unparseable becomes None."""
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if not value:
        return None
    try:
        return date.fromisoformat(str(value)[:10])
    except ValueError:
        return None


@dataclass
class BaseEntity:
    """
    Base class for all domain records.
    Records are flat and mirror one storage row in UI-facing shape.
    """

    id: Optional[RecordId] = None
    owner_id: Optional[str] = None
    created_at: Optional[datetime] = None

    def __eq__(self, other: Any) -> bool:
        """Records are equal if they have the same ID and are of the same type."""
        if not isinstance(other, self.__class__):
            return False
        if self.id is None or other.id is None:
            return self is other
        return self.id == other.id

    def __hash__(self) -> int:
        """Hash based on record ID."""
        if self.id is None:
            return hash(id(self))
        return hash((self.__class__.__name__, self.id))

    @property
    def is_new(self) -> bool:
        """Check if record is new (not persisted)."""
        return self.id is None

    def to_dict(self) -> Dict[str, Any]:
        """Convert record to a JSON-friendly dictionary."""
        data = {}
        for f in fields(self):
            value = getattr(self, f.name)
            if isinstance(value, (datetime, date)):
                data[f.name] = value.isoformat()
            elif hasattr(value, "value") and hasattr(value, "name"):
                data[f.name] = value.value
            else:
                data[f.name] = value
        return data


class DomainException(Exception):
    """Base exception for domain errors."""

    def __init__(self, message: str, code: Optional[str] = None):
        self.message = message
        self.code = code or self.__class__.__name__
        super().__init__(self.message)


class ValidationError(DomainException):
    """Raised before any network call when caller input is malformed."""

    def __init__(self, message: str, field: Optional[str] = None):
        super().__init__(message, "VALIDATION_ERROR")
        self.field = field


class StorageError(DomainException):
    """
    Raised when the external store rejects or fails a call.
    Carries the store's own message and, when available, its error code.
    """

    def __init__(
        self,
        message: str,
        code: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None
    ):
        super().__init__(message, code or "STORAGE_ERROR")
        self.details = details or {}


class EntityNotFoundError(StorageError):
    """Raised when a by-id call matches no row."""

    def __init__(self, entity_type: str, entity_id: Any):
        message = f"{entity_type} with id {entity_id} not found"
        super().__init__(message, "ENTITY_NOT_FOUND")
        self.entity_type = entity_type
        self.entity_id = entity_id


class SyncError(DomainException):
    """Raised inside the realtime adapter when a change cannot be applied locally."""

    def __init__(self, message: str, event_type: Optional[str] = None):
        super().__init__(message, "SYNC_ERROR")
        self.event_type = event_type
