"""
Domain services module.
Contains business logic that doesn't naturally fit in a single record.
"""

from .auth_service import SessionProvider, StaticSessionProvider
from .dashboard_service import DashboardService, DashboardStats

__all__ = [
    "SessionProvider",
    "StaticSessionProvider",
    "DashboardService",
    "DashboardStats",
]
