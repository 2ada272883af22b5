"""
Client domain model.
"""

from dataclasses import dataclass

from .base import BaseEntity


@dataclass(eq=False)
class Client(BaseEntity):
    """
    A customer of the business.
    Owned by the user who created it; ownership is a tag, not enforced here.
    """

    name: str = ""
    company: str = ""
    designation: str = ""
    address: str = ""
    city: str = ""
    phone: str = ""
    email: str = ""
    tax_id: str = ""

    @property
    def display_name(self) -> str:
        """Name shown in lists: the person, then the company."""
        if self.name and self.company:
            return f"{self.name} ({self.company})"
        return self.name or self.company
