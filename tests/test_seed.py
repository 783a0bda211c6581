import json
import sqlite3

import pytest

from objectshooter.database import DataContext
from objectshooter.repository import SqliteRepository
from objectshooter.seed import (
    SeedProcessor,
    insert_chunks_to_database,
    insert_to_database,
)


@pytest.fixture
def repo():
    context = DataContext(sqlite3.connect(":memory:", check_same_thread=False), "sqlite3")
    yield SqliteRepository(context)
    context.close()


def test_from_dict_reads_wire_names():
    proc = SeedProcessor.from_dict({"tableName": "people", "jStr": "{}", "count": 4})
    assert proc == SeedProcessor(table_name="people", jstr="{}", count=4)


def test_from_dict_rejects_wrong_type():
    with pytest.raises(TypeError):
        SeedProcessor.from_dict({"count": "many"})


def test_empty_json_string_is_rejected(repo):
    with pytest.raises(ValueError, match="received json string is empty"):
        SeedProcessor(table_name="t", jstr="", count=1).process_json(repo)


def test_invalid_json_is_rejected(repo):
    with pytest.raises(ValueError):
        SeedProcessor(table_name="t", jstr="{not json", count=1).process_json(repo)


def test_top_level_array_is_rejected(repo):
    with pytest.raises(ValueError):
        SeedProcessor(table_name="t", jstr="[1, 2]", count=1).process_json(repo)


def test_process_json_stores_count_copies_with_same_shape(repo):
    sample = {"name": "alice", "active": True, "age": 30, "tags": ["a", "b"]}
    SeedProcessor(table_name="people", jstr=json.dumps(sample), count=5).process_json(repo)
    assert repo.count("people") == 5
    for row in repo.get_data("people", False, 10, 0):
        doc = json.loads(row)
        assert set(doc) == set(sample)
        assert isinstance(doc["name"], str)
        assert isinstance(doc["active"], bool)
        assert isinstance(doc["age"], int)
        assert len(doc["tags"]) == 2


def test_rows_are_compact_with_sorted_keys(repo):
    insert_to_database({"b": "x", "a": "y"}, "t", 1, repo)
    row = repo.get_data("t", False, 1, 0)[0]
    assert row.startswith('{"a":"')
    assert '","b":"' in row


def test_chunks_drop_incomplete_tail(repo):
    insert_chunks_to_database({"v": 1}, "t", 7, 3, repo)
    assert repo.count("t") == 6


def test_chunk_size_zero_stores_every_copy(repo):
    insert_chunks_to_database({"v": 1}, "t", 4, 0, repo)
    assert repo.count("t") == 4


def test_process_json_in_chunks(repo):
    proc = SeedProcessor(table_name="t", jstr='{"v": "x"}', count=4)
    proc.process_json(repo, True, 2)
    assert repo.count("t") == 4