"""
Record Store Interface (Port).

This module defines the abstract interface for the record store holding
workouts, nutrition logs and progress entries. The store is shared by all
users: every write carries a ``user_id`` and every personal read filters by
it.

All methods are coroutines. Implementations raise
application.exceptions.RecordStoreError when the store rejects a call.
"""
from dataclasses import dataclass
from typing import Any, Dict, List, Literal, Optional, Protocol, Sequence

FilterOp = Literal["eq", "gte", "lt"]


@dataclass(frozen=True)
class QueryFilter:
    """A single column predicate for RecordStore.query."""
    column: str
    op: FilterOp
    value: Any


class RecordStore(Protocol):
    """
    Abstract interface for record persistence.

    This protocol defines the contract for inserting and querying rows by
    table name.
    """

    async def insert(
        self,
        table: str,
        record: Dict[str, Any],
    ) -> Dict[str, Any]:
        """
        Insert a single row.

        Args:
            table: Table name
            record: Column -> value mapping

        Returns:
            The inserted row as echoed by the store

        Raises:
            RecordStoreError: If the store rejects the insert
        """
        ...

    async def insert_batch(
        self,
        table: str,
        records: Sequence[Dict[str, Any]],
    ) -> List[Dict[str, Any]]:
        """
        Insert several rows as one all-or-nothing write.

        Args:
            table: Table name
            records: Rows to insert

        Returns:
            The inserted rows in input order

        Raises:
            RecordStoreError: If the store rejects the batch; no row is kept
        """
        ...

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
        """
        Query rows.

        Filters are applied first, then ordering, then the limit.

        Args:
            table: Table name
            columns: Comma-separated column list
            filters: Column predicates, all of which must hold
            order_by: Column to sort by (optional)
            descending: Sort direction for ``order_by``
            limit: Maximum rows to return (optional)

        Returns:
            Matching rows

        Raises:
            RecordStoreError: If the query fails
        """
        ...
