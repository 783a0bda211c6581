"""Storage of JSON documents in per-name tables."""

from __future__ import annotations

from typing import Iterable

from .database import (
    COUNT,
    CREATE_TABLE,
    GET_JSON,
    INSERT_DATA,
    SQLITE_DRIVER,
    DataContext,
    get_db_context,
)

SQ_LITE = SQLITE_DRIVER


class UnsupportedDriverError(ValueError):
    """Raised when no repository exists for the context's driver."""

    def __init__(self, driver: str) -> None:
        super().__init__(f"there is no repository for {driver} driver")
        self.driver = driver


def _quote(table_name: str) -> str:
    return '"' + table_name.replace('"', '""') + '"'


class SqliteRepository:
    """Stores JSON strings in SQLite tables with an id and a json_data column."""

    def __init__(self, context: DataContext) -> None:
        self._context = context

    def _create_table(self, table: str) -> None:
        with self._context.connection as conn:
            conn.execute(CREATE_TABLE.format(table=table))

    def set_data(self, table_name: str, data: str) -> None:
        """Insert one document, creating the table if needed."""
        table = _quote(table_name)
        with self._context.lock:
            self._create_table(table)
            with self._context.connection as conn:
                conn.execute(INSERT_DATA.format(table=table), (data,))

    def set_chunk_data(self, table_name: str, chunk: Iterable[str]) -> None:
        """Insert several documents in one transaction; nothing is kept on failure."""
        table = _quote(table_name)
        query = INSERT_DATA.format(table=table)
        with self._context.lock:
            self._create_table(table)
            with self._context.connection as conn:
                for item in chunk:
                    conn.execute(query, (item,))

    def get_data(self, table_name: str, is_random: bool, take: int, skip: int) -> list[str]:
        """Return up to take documents after skipping skip rows."""
        with self._context.lock:
            rows = self._context.connection.execute(
                GET_JSON.format(table=_quote(table_name)), (skip, take)
            ).fetchall()
        return [row[0] for row in rows]

    def count(self, table_name: str) -> int:
        with self._context.lock:
            row = self._context.connection.execute(
                COUNT.format(table=_quote(table_name))
            ).fetchone()
        return int(row[0])


def new_repository(context: DataContext | None = None) -> SqliteRepository:
    """Return the repository matching the driver of context (the shared one by default)."""
    context = context if context is not None else get_db_context()
    if context.driver == SQ_LITE:
        return SqliteRepository(context)
    raise UnsupportedDriverError(context.driver)