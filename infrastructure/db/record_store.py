"""
Supabase Record Store Implementation.

This module implements the RecordStore protocol using the async Supabase
client. PostgREST errors and transport failures are translated into
RecordStoreError so callers never see client-specific exceptions.

A bulk insert is sent as one request and executed by PostgREST as a single
INSERT statement, which is why ``insert_batch`` is all-or-nothing.
"""
from typing import Any, Dict, List, Optional, Sequence
import logging

import httpx
from postgrest.exceptions import APIError
from supabase import AsyncClient

from application.exceptions import RecordStoreError
from application.ports.record_store import QueryFilter

logger = logging.getLogger(__name__)


def _to_store_error(error: Exception) -> RecordStoreError:
    """Translate a client exception into a RecordStoreError."""
    if isinstance(error, APIError):
        return RecordStoreError(error.message or "", code=str(error.code or ""))
    return RecordStoreError(str(error))


class SupabaseRecordStore:
    """
    Supabase implementation of RecordStore.

    Tables are addressed by name; row-level security on the Supabase side
    is expected to match the ``user_id`` every caller supplies.
    """

    def __init__(self, client: AsyncClient):
        """
        Initialize with Supabase client.

        Args:
            client: Async Supabase client instance (injected)
        """
        self._client = client

    async def insert(
        self,
        table: str,
        record: Dict[str, Any],
    ) -> Dict[str, Any]:
        """Insert a single row and return the echoed row."""
        try:
            result = await self._client.table(table).insert(record).execute()
        except (APIError, httpx.HTTPError) as e:
            logger.warning(f"Insert into {table} failed: {e}")
            raise _to_store_error(e) from e

        if not result.data:
            raise RecordStoreError(f"Insert into {table} returned no row")
        return result.data[0]

    async def insert_batch(
        self,
        table: str,
        records: Sequence[Dict[str, Any]],
    ) -> List[Dict[str, Any]]:
        """Insert several rows in one request; all rows land or none do."""
        if not records:
            return []
        try:
            result = await self._client.table(table).insert(list(records)).execute()
        except (APIError, httpx.HTTPError) as e:
            logger.warning(f"Batch insert of {len(records)} rows into {table} failed: {e}")
            raise _to_store_error(e) from e

        return list(result.data or [])

    async def query(
        self,
        table: str,
        *,
        columns: str = "*",
        filters: Sequence[QueryFilter] = (),
        order_by: Optional[str] = None,
        descending: bool = False,
        limit: Optional[int] = None,
    ) -> List[Dict[str, Any]]:
        """Select rows with filters, ordering and a limit applied server-side."""
        request = self._client.table(table).select(columns)

        for f in filters:
            if f.op == "eq":
                request = request.eq(f.column, f.value)
            elif f.op == "gte":
                request = request.gte(f.column, f.value)
            elif f.op == "lt":
                request = request.lt(f.column, f.value)
            else:
                raise ValueError(f"Unsupported filter operator: {f.op}")

        if order_by:
            request = request.order(order_by, desc=descending)
        if limit is not None:
            request = request.limit(limit)

        try:
            result = await request.execute()
        except (APIError, httpx.HTTPError) as e:
            logger.warning(f"Query on {table} failed: {e}")
            raise _to_store_error(e) from e

        return list(result.data or [])
