import contextlib
import sqlite3
from collections.abc import Generator, Sequence
from contextlib import contextmanager
from typing import Any, Optional

from sqlcompose.core.parameters import ParameterStyle
from sqlcompose.core.statement import StatementConfig
from sqlcompose.exceptions import IntegrityError, RepositoryError
from sqlcompose.utils.logging import get_logger, log_statement

__all__ = ("SqliteCursor", "SqliteInsertExecutor", "sqlite_statement_config")

logger = get_logger("adapters.sqlite")

sqlite_statement_config = StatementConfig(dialect="sqlite", parameter_style=ParameterStyle.QMARK)


class SqliteCursor:
    """Context manager for SQLite cursor management."""

    def __init__(self, connection: "sqlite3.Connection") -> None:
        self.connection = connection
        self.cursor: Optional[sqlite3.Cursor] = None

    def __enter__(self) -> "sqlite3.Cursor":
        self.cursor = self.connection.cursor()
        return self.cursor

    def __exit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        if self.cursor is not None:
            with contextlib.suppress(Exception):
                self.cursor.close()


class SqliteInsertExecutor:
    """Runs INSERT statements on a ``sqlite3`` connection.

    Transactions belong to the caller: the executor never commits.
    """

    statement_config = sqlite_statement_config

    def __init__(self, connection: "sqlite3.Connection") -> None:
        self.connection = connection

    @contextmanager
    def handle_database_exceptions(self) -> "Generator[None, None, None]":
        """Handle SQLite-specific exceptions and wrap them appropriately."""
        try:
            yield
        except sqlite3.IntegrityError as e:
            msg = f"SQLite integrity error: {e}"
            raise IntegrityError(msg) from e
        except sqlite3.Error as e:
            msg = f"SQLite database error: {e}"
            raise RepositoryError(msg) from e

    def insert(self, sql: str, params: "Sequence[Any]", sequence: "Optional[str]" = None) -> Any:
        """Execute an INSERT statement.

        Args:
            sql: The statement, ending in ``RETURNING <sequence>`` when ``sequence`` is set.
            params: Positional bind values.
            sequence: Name of the returned column.

        Returns:
            The returned value when ``sequence`` is set, else the last inserted rowid.
        """
        log_statement(logger, "Executing on SQLite", sql, len(params), sequence=sequence)
        with self.handle_database_exceptions(), SqliteCursor(self.connection) as cursor:
            cursor.execute(sql, tuple(params))
            if sequence is None:
                return cursor.lastrowid
            rows = cursor.fetchall()
            return rows[0][0] if rows else None
