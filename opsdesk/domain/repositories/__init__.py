"""
Repository interfaces for the domain layer.
This module exports all repository interfaces (ports) for dependency injection.
"""

from .base import EntityRepository, ListFilters
from .renewal_repository import RenewalRepository

__all__ = [
    "EntityRepository",
    "ListFilters",
    "RenewalRepository",
]
