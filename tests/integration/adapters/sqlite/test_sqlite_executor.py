"""Integration tests running built statements on SQLite."""

import sqlite3

import pytest

from sqlcompose import Insert, InsertExecutorProtocol, sql
from sqlcompose.adapters.sqlite import SqliteInsertExecutor, sqlite_statement_config
from sqlcompose.exceptions import IntegrityError, RepositoryError

requires_returning = pytest.mark.skipif(sqlite3.sqlite_version_info < (3, 35, 0), reason="requires RETURNING support")


@pytest.fixture
def sqlite_executor(sqlite_connection: sqlite3.Connection) -> SqliteInsertExecutor:
    return SqliteInsertExecutor(sqlite_connection)


def _insert(executor: SqliteInsertExecutor, table: str = "users") -> Insert:
    return sql.insert(table, executor=executor)


def _users(connection: sqlite3.Connection) -> list[tuple[str, int]]:
    return connection.execute("SELECT name, visits FROM users ORDER BY id").fetchall()


def test_executor_satisfies_protocol(sqlite_executor: SqliteInsertExecutor) -> None:
    assert isinstance(sqlite_executor, InsertExecutorProtocol)


def test_factory_picks_executor_statement_config(sqlite_executor: SqliteInsertExecutor) -> None:
    query = _insert(sqlite_executor).values({"name": "alice"})

    assert query.statement_config == sqlite_statement_config
    assert query.render().dialect == "sqlite"


def test_insert_returns_lastrowid(sqlite_executor: SqliteInsertExecutor, sqlite_connection: sqlite3.Connection) -> None:
    first = _insert(sqlite_executor).values({"name": "alice"}).execute()
    second = _insert(sqlite_executor).values({"name": "bob", "visits": 3}).execute()

    assert (first, second) == (1, 2)
    assert _users(sqlite_connection) == [("alice", 0), ("bob", 3)]


@requires_returning
def test_insert_returning(sqlite_executor: SqliteInsertExecutor) -> None:
    _insert(sqlite_executor).values({"name": "alice"}).execute()

    assert _insert(sqlite_executor).values({"name": "bob"}).execute("id") == 2


def test_insert_many_rows(sqlite_executor: SqliteInsertExecutor, sqlite_connection: sqlite3.Connection) -> None:
    _insert(sqlite_executor).columns("name", "visits").values([("a", 1), ("b", 2), ("c", 3)]).execute()

    assert _users(sqlite_connection) == [("a", 1), ("b", 2), ("c", 3)]


def test_on_conflict_do_update(sqlite_executor: SqliteInsertExecutor, sqlite_connection: sqlite3.Connection) -> None:
    _insert(sqlite_executor).values({"name": "alice", "visits": 1}).execute()

    (
        _insert(sqlite_executor)
        .values({"name": "alice", "visits": 5})
        .on_conflict_do_update("name", "visits", sql.raw("visits + EXCLUDED.visits"))
        .execute()
    )

    assert _users(sqlite_connection) == [("alice", 6)]


def test_on_conflict_do_update_excluded(
    sqlite_executor: SqliteInsertExecutor, sqlite_connection: sqlite3.Connection
) -> None:
    _insert(sqlite_executor).values({"name": "alice", "visits": 1}).execute()

    _insert(sqlite_executor).values({"name": "alice", "visits": 9}).on_conflict_do_update("name", "visits").execute()

    assert _users(sqlite_connection) == [("alice", 9)]


def test_on_conflict_do_nothing(sqlite_executor: SqliteInsertExecutor, sqlite_connection: sqlite3.Connection) -> None:
    _insert(sqlite_executor).values({"name": "alice", "visits": 1}).execute()

    _insert(sqlite_executor).values({"name": "alice", "visits": 7}).on_conflict_do_update("name").execute()

    assert _users(sqlite_connection) == [("alice", 1)]


def test_insert_from_select(sqlite_executor: SqliteInsertExecutor, sqlite_connection: sqlite3.Connection) -> None:
    _insert(sqlite_executor).values([{"name": "a", "visits": 1}, {"name": "b", "visits": 20}]).execute()

    (
        _insert(sqlite_executor, "archive")
        .columns("name")
        .select("SELECT name FROM users WHERE visits > ?", 10)
        .execute()
    )

    assert sqlite_connection.execute("SELECT name FROM archive").fetchall() == [("b",)]


def test_integrity_error_is_wrapped(sqlite_executor: SqliteInsertExecutor) -> None:
    _insert(sqlite_executor).values({"name": "alice"}).execute()

    with pytest.raises(IntegrityError) as exc_info:
        _insert(sqlite_executor).values({"name": "alice"}).execute()
    assert isinstance(exc_info.value.__cause__, sqlite3.IntegrityError)


def test_database_error_is_wrapped(sqlite_executor: SqliteInsertExecutor) -> None:
    with pytest.raises(RepositoryError, match="SQLite database error"):
        _insert(sqlite_executor, "missing_table").values({"name": "alice"}).execute()
