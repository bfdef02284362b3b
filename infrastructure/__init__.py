"""
Infrastructure Layer for the FitTrack API.

This package contains concrete implementations of the application ports:
- db/: Supabase record store
"""

from infrastructure.db import SupabaseRecordStore

__all__ = [
    "SupabaseRecordStore",
]
