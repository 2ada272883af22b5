"""
Renewal mapper for reading rows of the upcoming renewals view.
"""

import datetime
from typing import Any, Mapping, Optional

from opsdesk.domain.models.credential import CredentialType
from opsdesk.domain.models.renewal import Renewal, days_until
from .base import parse_date, text


class RenewalMapper:
    """Read-only mapper; renewals are never written."""

    def to_domain(self, row: Mapping[str, Any], today: Optional[datetime.date] = None) -> Renewal:
        expiry = parse_date(row.get("expiry"))
        days_left = row.get("days_left")
        if days_left is None:
            days_left = days_until(expiry, today)
        else:
            days_left = int(days_left)

        return Renewal(
            client=text(row.get("client_name")),
            type=CredentialType.display(row.get("type")),
            provider=text(row.get("provider")),
            service_name=text(row.get("service_name")),
            expiry=expiry,
            days_left=days_left,
        )
