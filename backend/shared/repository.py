"""
Table-scoped Supabase access.

A repository is bound to one table and maps its rows to a model type.
"""

from typing import Any, Generic, Optional, TypeVar

from supabase import Client

T = TypeVar("T")


class BaseRepository(Generic[T]):
    """
    Common plumbing for repositories that read and write a single table.

    Subclasses implement `_to_model` and build their queries on
    `_find_one` / `_insert_one`. Postgrest errors propagate unchanged so
    callers can inspect the Postgres error code.
    """

    def __init__(self, db: Client, table: str) -> None:
        self._db = db
        self._table_name = table

    def _table(self):
        return self._db.table(self._table_name)

    def _find_one(self, column: str, value: Any) -> Optional[T]:
        result = self._table().select("*").eq(column, value).execute()
        if not result.data:
            return None
        return self._to_model(result.data[0])

    def _insert_one(self, row: dict[str, Any]) -> T:
        result = self._table().insert(row).execute()
        return self._to_model(result.data[0])

    def _to_model(self, row: dict[str, Any]) -> T:
        raise NotImplementedError
