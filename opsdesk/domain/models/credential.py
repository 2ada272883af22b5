"""
Credential domain model and its closed category set.
"""

from dataclasses import dataclass
from datetime import date
from enum import Enum
from typing import Any, Optional

from .base import BaseEntity, ValidationError


class CredentialType(str, Enum):
    """Canonical credential categories as stored."""

    DOMAIN = "domain"
    HOSTING = "hosting"
    EMAIL = "email"
    OTHER = "other"

    @property
    def label(self) -> str:
        """Human-readable label used by the front end."""
        return self.value.capitalize()

    @classmethod
    def labels(cls) -> list[str]:
        return [member.label for member in cls]

    @classmethod
    def normalize(cls, raw: Any) -> "CredentialType":
        """
        Resolve a UI value to a canonical category.

        Display labels map directly; any other non-empty string is lower-cased
        and must then be one of the canonical values.

        Raises:
            ValidationError: If the value does not resolve to a known category
        """
        resolved = None
        if isinstance(raw, CredentialType):
            return raw
        if isinstance(raw, str) and raw.strip():
            text = raw.strip()
            resolved = _LABELS.get(text, text.lower())

        try:
            return cls(resolved)
        except ValueError:
            raise ValidationError(
                f'Invalid type "{raw}". Must be one of: {", ".join(cls.labels())}.',
                "type"
            )

    @classmethod
    def display(cls, stored: Optional[str]) -> str:
        """Render a stored value for display, tolerating legacy free text."""
        if not stored:
            return ""
        try:
            return cls(stored).label
        except ValueError:
            return stored[:1].upper() + stored[1:]


_LABELS = {member.label: member.value for member in CredentialType}


@dataclass(eq=False)
class Credential(BaseEntity):
    """
    Login details for a client's domain, hosting, mailbox or other service.

    The secret is held in plaintext; masking is the caller's concern.
    """

    client: str = ""
    type: str = ""
    provider: str = ""
    url: str = ""
    login: str = ""
    password: str = ""
    service_name: str = ""
    expiry: Optional[date] = None
    notes: str = ""

    @property
    def masked_password(self) -> str:
        return "•" * len(self.password) if self.password else ""
