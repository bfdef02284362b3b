"""
Infrastructure Database Layer.

This package provides the Supabase-backed implementation of the RecordStore
interface defined in application.ports. It is injected into use cases and
routers for clean separation of concerns and testability.

Usage:
    from supabase import acreate_client
    from infrastructure.db import SupabaseRecordStore

    # Create async Supabase client
    client = await acreate_client(SUPABASE_URL, SUPABASE_KEY)

    # Instantiate the store with injected client
    store = SupabaseRecordStore(client)
"""

from infrastructure.db.record_store import SupabaseRecordStore

__all__ = [
    "SupabaseRecordStore",
]
