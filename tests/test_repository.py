import sqlite3

import pytest

from objectshooter.database import DataContext, init_db_connection
from objectshooter.repository import SqliteRepository, UnsupportedDriverError, new_repository


@pytest.fixture
def context():
    ctx = init_db_connection("sqlite3", ":memory:")
    yield ctx
    ctx.close()


@pytest.fixture
def repo(context):
    return new_repository(context)


def test_new_repository_for_sqlite(context):
    repo = new_repository(context)
    repo.set_data("items", '{"id": 1}')
    assert repo.get_data("items", False, 5, 0) == ['{"id": 1}']
    assert repo.count("items") == 1


def test_new_repository_defaults_to_shared_context(context):
    repo = new_repository()
    repo.set_data("shared", '{"a": 1}')
    assert new_repository(context).count("shared") == 1


def test_new_repository_unsupported_driver():
    ctx = DataContext(connection=sqlite3.connect(":memory:"), driver="mysql")
    try:
        with pytest.raises(UnsupportedDriverError, match="there is no repository for mysql driver"):
            new_repository(ctx)
    finally:
        ctx.close()


def test_set_data_then_read(repo):
    repo.set_data("docs", '{"x": 1}')
    repo.set_data("docs", '{"x": 2}')
    assert repo.count("docs") == 2
    assert repo.get_data("docs", False, 10, 0) == ['{"x": 1}', '{"x": 2}']


def test_chunk_and_paging(repo):
    items = [f"doc-{n}" for n in range(5)]
    repo.set_chunk_data("docs", items)
    assert repo.count("docs") == len(items)
    assert repo.get_data("docs", False, 2, 1) == items[1:3]
    assert repo.get_data("docs", True, 10, 4) == items[4:]
    assert repo.get_data("docs", False, 10, 5) == []


def test_chunk_failure_rolls_back(repo):
    repo.set_chunk_data("docs", ["kept"])
    with pytest.raises(sqlite3.Error):
        repo.set_chunk_data("docs", ["lost", object()])
    assert repo.get_data("docs", False, 10, 0) == ["kept"]


def test_count_missing_table_raises(repo):
    with pytest.raises(sqlite3.OperationalError):
        repo.count("absent")


def test_tables_are_independent(repo):
    repo.set_data("first", "a")
    repo.set_chunk_data("second", ["b", "c"])
    assert repo.count("first") == 1
    assert repo.count("second") == 2