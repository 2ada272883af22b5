"""
Realtime change events.
Normalizes Supabase `postgres_changes` payloads into one typed shape.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Mapping, Optional

from opsdesk.domain.models.base import RecordId, SyncError


class ChangeType(str, Enum):
    """Kinds of row change delivered by the feed."""

    INSERT = "INSERT"
    UPDATE = "UPDATE"
    DELETE = "DELETE"


@dataclass
class ChangeEvent:
    """One row change with its new and/or old row image."""

    type: ChangeType
    table: str = ""
    new: Dict[str, Any] = field(default_factory=dict)
    old: Dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_payload(cls, payload: Any) -> "ChangeEvent":
        """
        Build an event from a realtime payload.

        Accepts the server shape (`{"data": {"type", "record", "old_record"}}`)
        as well as the flattened client shape (`eventType`, `new`, `old`).

        Raises:
            SyncError: If the payload is not a recognizable change
        """
        if not isinstance(payload, Mapping):
            raise SyncError(f"Unexpected realtime payload: {payload!r}")

        data = payload.get("data", payload)
        if not isinstance(data, Mapping):
            raise SyncError(f"Unexpected realtime payload data: {data!r}")

        raw_type = data.get("type") or data.get("eventType")
        try:
            change_type = ChangeType(str(raw_type).upper())
        except ValueError:
            raise SyncError(f"Unknown change type: {raw_type}", str(raw_type))

        new = data.get("record", data.get("new")) or {}
        old = data.get("old_record", data.get("old")) or {}

        return cls(
            type=change_type,
            table=data.get("table") or "",
            new=dict(new),
            old=dict(old),
        )

    @property
    def record_id(self) -> Optional[RecordId]:
        """Id of the affected row, from whichever image carries it."""
        if self.new.get("id") is not None:
            return self.new["id"]
        return self.old.get("id")
