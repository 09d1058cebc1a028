"""Logging for sqlcompose.

Statement events carry the rendered SQL, the number of bind values and,
where relevant, the statement type and returned sequence as attributes of the
log record. :class:`StatementFormatter` emits those attributes as JSON fields.
"""

import json
import logging
from typing import Optional

__all__ = ("STATEMENT_FIELDS", "StatementFormatter", "configure_logging", "get_logger", "log_statement")

ROOT_LOGGER_NAME = "sqlcompose"
STATEMENT_FIELDS = ("statement", "sql", "parameter_count", "sequence")


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Get a logger under the ``sqlcompose`` namespace.

    Args:
        name: Logger name, with or without the ``sqlcompose.`` prefix.

    Returns:
        The logger.
    """
    if name is None:
        return logging.getLogger(ROOT_LOGGER_NAME)
    if not name.startswith(ROOT_LOGGER_NAME):
        name = f"{ROOT_LOGGER_NAME}.{name}"
    return logging.getLogger(name)


def log_statement(
    logger: logging.Logger,
    message: str,
    sql: str,
    parameter_count: int,
    *,
    statement: Optional[str] = None,
    sequence: Optional[str] = None,
    level: int = logging.DEBUG,
) -> None:
    """Log a statement event with its SQL and bind value count attached."""
    if not logger.isEnabledFor(level):
        return
    logger.log(
        level,
        message,
        extra={"statement": statement, "sql": sql, "parameter_count": parameter_count, "sequence": sequence},
    )


class StatementFormatter(logging.Formatter):
    """JSON formatter emitting the statement fields of a record."""

    def format(self, record: logging.LogRecord) -> str:
        entry = {
            "timestamp": self.formatTime(record, self.datefmt),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        for name in STATEMENT_FIELDS:
            value = getattr(record, name, None)
            if value is not None:
                entry[name] = value
        if record.exc_info:
            entry["exception"] = self.formatException(record.exc_info)
        return json.dumps(entry, default=str)


def configure_logging(level: str = "INFO", handler: Optional[logging.Handler] = None) -> logging.Handler:
    """Attach a :class:`StatementFormatter` handler to the ``sqlcompose`` logger.

    Args:
        level: Level name for the ``sqlcompose`` logger.
        handler: Handler to install; a stderr ``StreamHandler`` by default.

    Returns:
        The installed handler, so callers can remove it again.
    """
    handler = handler or logging.StreamHandler()
    handler.setFormatter(StatementFormatter())
    root_logger = get_logger()
    root_logger.setLevel(level.upper())
    root_logger.addHandler(handler)
    return handler
