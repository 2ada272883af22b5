"""
Realtime sync module.
Keeps local lists current from Supabase change notifications.
"""

from .events import ChangeEvent, ChangeType
from .feed import ChangeFeed, SupabaseChangeFeed
from .live_list import LiveList, SubscriptionState

__all__ = [
    "ChangeEvent",
    "ChangeType",
    "ChangeFeed",
    "SupabaseChangeFeed",
    "LiveList",
    "SubscriptionState",
]
