"""
In-memory fake implementations for testing.

This package provides fake implementations of the application ports
for fast, isolated testing without database dependencies.

Usage:
    from tests.fakes import FakeRecordStore

    store = FakeRecordStore()
    store.seed("progress_tracking", [{"user_id": "u1", "weight": 180.0, ...}])
    use_case = GetDashboardUseCase(store)
"""

from tests.fakes.record_store import FakeRecordStore

__all__ = [
    "FakeRecordStore",
]
