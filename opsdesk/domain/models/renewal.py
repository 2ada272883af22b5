"""
Upcoming renewal read model and expiry status helpers.
"""

import datetime
from dataclasses import dataclass
from enum import Enum
from typing import Optional


class ExpiryStatus(str, Enum):
    """Urgency bucket for an expiring credential."""

    EXPIRED = "expired"
    CRITICAL = "critical"
    WARNING = "warning"
    OK = "ok"


def days_until(expiry: Optional[datetime.date], today: Optional[datetime.date] = None) -> Optional[int]:
    """Whole days from today until expiry; negative once expired."""
    if expiry is None:
        return None
    today = today or datetime.date.today()
    return (expiry - today).days


def expiry_status(days_left: Optional[int], critical_days: int = 7, warning_days: int = 30) -> Optional[ExpiryStatus]:
    """Bucket a days-remaining value into an urgency status."""
    if days_left is None:
        return None
    if days_left < 0:
        return ExpiryStatus.EXPIRED
    if days_left <= critical_days:
        return ExpiryStatus.CRITICAL
    if days_left <= warning_days:
        return ExpiryStatus.WARNING
    return ExpiryStatus.OK


@dataclass
class Renewal:
    """
    A credential nearing expiry, as computed by the `upcoming_renewals` view.
    Read-only: there is no way to create or change one directly.
    """

    client: str = ""
    type: str = ""
    provider: str = ""
    service_name: str = ""
    expiry: Optional[datetime.date] = None
    days_left: Optional[int] = None

    def badge(self) -> str:
        """Short text for the expiry badge."""
        if self.days_left is None:
            return ""
        if self.days_left < 0:
            return f"Expired {abs(self.days_left)}d"
        return f"Due in {self.days_left}d"

