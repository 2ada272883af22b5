"""
Authentication infrastructure module.
Resolves the acting user from Supabase sessions and bearer tokens.
"""

from .jwt_handler import JWTHandler
from .supabase_auth import SupabaseSessionProvider

__all__ = [
    "JWTHandler",
    "SupabaseSessionProvider",
]
