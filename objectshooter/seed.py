"""Filling a table with random copies of a sample JSON document."""

from __future__ import annotations

import json
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass
from typing import Any, Mapping

from .dummy import fill_with_dummy_data
from .repository import SqliteRepository, new_repository

_MAX_PARALLEL_CHUNKS = 10


def _field(data: Mapping[str, Any], key: str, kind: type, default: Any) -> Any:
    value = data.get(key)
    if value is None:
        return default
    if isinstance(value, kind) and not (kind is int and isinstance(value, bool)):
        return value
    raise TypeError(
        f"field {key!r} must be of type {kind.__name__}, got {type(value).__name__}"
    )


def _encode(document: Any) -> str:
    return json.dumps(document, sort_keys=True, separators=(",", ":"), ensure_ascii=False)


@dataclass
class SeedProcessor:
    """A seeding request: the target table, the sample document and how many copies."""

    table_name: str = ""
    jstr: str = ""
    count: int = 0

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> SeedProcessor:
        """Build a processor from a decoded JSON object using its wire field names."""
        if not isinstance(data, Mapping):
            raise TypeError("seed request must be a JSON object")
        return cls(
            table_name=_field(data, "tableName", str, ""),
            jstr=_field(data, "jStr", str, ""),
            count=_field(data, "count", int, 0),
        )

    def process_json(
        self,
        repository: SqliteRepository | None = None,
        are_chunks: bool = False,
        in_chunk: int = 0,
    ) -> None:
        """Parse the sample document and store count randomised copies of it."""
        if not self.jstr:
            raise ValueError("received json string is empty")
        document = json.loads(self.jstr)
        if not isinstance(document, dict):
            raise ValueError("json document must be an object")
        repository = repository if repository is not None else new_repository()
        if are_chunks:
            insert_chunks_to_database(
                document, self.table_name, self.count, in_chunk, repository
            )
        else:
            insert_to_database(document, self.table_name, self.count, repository)


def insert_to_database(
    document: dict[str, Any],
    table_name: str,
    how_much: int,
    repository: SqliteRepository,
) -> None:
    """Store how_much randomised copies of document, one insert at a time."""
    for _ in range(how_much):
        document = fill_with_dummy_data(document)
        repository.set_data(table_name, _encode(document))


def insert_chunks_to_database(
    document: dict[str, Any],
    table_name: str,
    how_much: int,
    in_chunk: int,
    repository: SqliteRepository,
) -> None:
    """Store randomised copies in transactions of in_chunk documents each.

    Copies left over after the last full chunk are not stored.
    """
    futures = []
    chunk: list[str] = []
    with ThreadPoolExecutor(max_workers=_MAX_PARALLEL_CHUNKS) as pool:
        for _ in range(how_much):
            document = fill_with_dummy_data(document)
            chunk.append(_encode(document))
            if len(chunk) >= in_chunk:
                futures.append(pool.submit(repository.set_chunk_data, table_name, chunk))
                chunk = []
    for future in futures:
        future.result()