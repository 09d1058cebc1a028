from __future__ import annotations

import logging
import sqlite3
from collections.abc import Generator, Sequence
from dataclasses import dataclass, field
from typing import Any

import pytest

from sqlcompose.utils.logging import ROOT_LOGGER_NAME


@dataclass
class RecordingExecutor:
    """Executor double that records every call and returns a fixed value."""

    result: Any = 42
    calls: list[tuple[str, list[Any], str | None]] = field(default_factory=list)

    def insert(self, sql: str, params: Sequence[Any], sequence: str | None = None) -> Any:
        self.calls.append((sql, list(params), sequence))
        return self.result


@pytest.fixture
def executor() -> RecordingExecutor:
    return RecordingExecutor()


@pytest.fixture
def sqlite_connection() -> Generator[sqlite3.Connection, None, None]:
    connection = sqlite3.connect(":memory:")
    connection.execute(
        "CREATE TABLE users (id INTEGER PRIMARY KEY, name TEXT NOT NULL UNIQUE, visits INTEGER NOT NULL DEFAULT 0)"
    )
    connection.execute("CREATE TABLE archive (id INTEGER PRIMARY KEY, name TEXT NOT NULL)")
    try:
        yield connection
    finally:
        connection.close()


@pytest.fixture
def restore_logging() -> Generator[None, None, None]:
    root_logger = logging.getLogger(ROOT_LOGGER_NAME)
    handlers = list(root_logger.handlers)
    level = root_logger.level
    propagate = root_logger.propagate
    try:
        yield
    finally:
        for handler in root_logger.handlers:
            if handler not in handlers:
                handler.close()
        root_logger.handlers[:] = handlers
        root_logger.setLevel(level)
        root_logger.propagate = propagate
