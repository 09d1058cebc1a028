from sqlcompose.adapters.sqlite.executor import SqliteCursor, SqliteInsertExecutor, sqlite_statement_config

__all__ = ("SqliteCursor", "SqliteInsertExecutor", "sqlite_statement_config")
