"""
Repository Interfaces (Ports) for the FitTrack API.

This package defines abstract interfaces that decouple domain logic from
infrastructure (database, external services). Implementations are provided
in the infrastructure layer.

Architecture follows the Ports & Adapters (Hexagonal) pattern:
- Ports: Abstract interfaces defined here (what the domain needs)
- Adapters: Concrete implementations in infrastructure/ (how it's provided)

Usage:
    from application.ports import RecordStore, QueryFilter

    class DashboardService:
        def __init__(self, store: RecordStore):
            self.store = store

        async def weights(self, user_id: str):
            return await self.store.query(
                "progress_tracking",
                filters=[QueryFilter("user_id", "eq", user_id)],
            )
"""

from application.ports.record_store import FilterOp, QueryFilter, RecordStore

__all__ = [
    "RecordStore",
    "QueryFilter",
    "FilterOp",
]
