"""
Business operations desk: clients, credentials, income and expense ledgers
backed by Supabase, with live list synchronisation.
"""

__version__ = "1.0.0"
