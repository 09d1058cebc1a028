"""Unit tests for the ``sql`` factory."""

from collections.abc import Sequence
from typing import Any, Optional

from sqlcompose import Insert, Raw, SQLFactory, SubQuery, sql
from sqlcompose.core.statement import StatementConfig


def test_insert_with_table() -> None:
    query = sql.insert("users", "u")

    assert isinstance(query, Insert)
    assert query.values({"id": 1}).to_sql() == "INSERT INTO users AS u (id) VALUES (?)"


def test_insert_without_table() -> None:
    assert sql.insert().into("t").columns("a").values(1).to_sql() == "INSERT INTO t (a) VALUES (?)"


def test_insert_binds_executor(executor: object) -> None:
    query = sql.insert("t", executor=executor)  # type: ignore[arg-type]

    assert query.executor is executor


def test_factory_dialect_default() -> None:
    factory = SQLFactory(dialect="postgres")

    query = factory.insert("t").values({"a": 1})

    assert query.to_sql() == "INSERT INTO t (a) VALUES (%s)"
    assert query.render().dialect == "postgres"


def test_raw_and_subquery() -> None:
    raw = sql.raw("NOW()")
    sub_query = sql.subquery("SELECT a FROM s WHERE b = ?", 1)

    assert raw == Raw("NOW()")
    assert isinstance(sub_query, SubQuery)
    assert sql.insert("t").columns("a").select(sub_query).get_params() == [1]


def test_insert_uses_executor_statement_config() -> None:
    class PostgresExecutor:
        statement_config = StatementConfig.for_dialect("postgres")

        def insert(self, sql: str, params: "Sequence[Any]", sequence: "Optional[str]" = None) -> Any:
            return None

    query = sql.insert("t", executor=PostgresExecutor()).values({"a": 1})

    assert query.to_sql() == "INSERT INTO t (a) VALUES (%s)"
    assert query.render().dialect == "postgres"


def test_insert_dialect_overrides_executor_statement_config() -> None:
    class PostgresExecutor:
        statement_config = StatementConfig.for_dialect("postgres")

        def insert(self, sql: str, params: "Sequence[Any]", sequence: "Optional[str]" = None) -> Any:
            return None

    query = sql.insert("t", executor=PostgresExecutor(), dialect="sqlite").values({"a": 1})
    factory_query = SQLFactory(dialect="mysql").insert("t", executor=PostgresExecutor()).values({"a": 1})

    assert query.to_sql() == "INSERT INTO t (a) VALUES (?)"
    assert factory_query.render().dialect == "mysql"
