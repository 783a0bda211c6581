"""Database connection shared by the application, and the SQL it runs."""

from __future__ import annotations

import sqlite3
import threading
from dataclasses import dataclass, field

SQLITE_DRIVER = "sqlite3"

CREATE_TABLE = """CREATE TABLE IF NOT EXISTS {table} (
id INTEGER PRIMARY KEY,
json_data TEXT
)"""
INSERT_DATA = "INSERT INTO {table} (json_data) values (?)"
GET_JSON = "SELECT json_data FROM {table} LIMIT ?, ?"
COUNT = "Select count () from {table}"


@dataclass
class DataContext:
    """An open connection together with the name of the driver that opened it."""

    connection: sqlite3.Connection
    driver: str
    lock: threading.RLock = field(default_factory=threading.RLock, repr=False)

    def close(self) -> None:
        with self.lock:
            self.connection.close()

    def __enter__(self) -> DataContext:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()


_current: DataContext | None = None


def init_db_connection(driver: str, connection_string: str) -> DataContext:
    """Open the application's database and make it the shared context."""
    global _current
    if driver != SQLITE_DRIVER:
        raise ValueError(f"unknown driver {driver!r}")
    connection = sqlite3.connect(connection_string, check_same_thread=False)
    _current = DataContext(connection=connection, driver=driver)
    return _current


def get_db_context() -> DataContext:
    """Return the shared context opened by init_db_connection()."""
    if _current is None:
        raise RuntimeError("database connection has not been initialised")
    return _current