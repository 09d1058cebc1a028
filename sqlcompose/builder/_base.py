"""Buffered statement base class.

A statement is rendered by appending SQL text and bind values to a scratch
buffer in a single pass. The finished ``(sql, parameters)`` pair is kept as a
:class:`SafeQuery` until the next mutation; there is no way to observe a
half-built buffer from outside :meth:`StatementExpression.build`.
"""

from abc import ABC, abstractmethod
from collections.abc import Iterable
from dataclasses import dataclass, field
from typing import Any, Optional

from sqlglot.dialects.dialect import DialectType
from typing_extensions import Self

from sqlcompose.core.statement import StatementConfig, default_statement_config
from sqlcompose.exceptions import SQLBuilderError
from sqlcompose.protocols import FragmentProtocol
from sqlcompose.utils.logging import get_logger, log_statement

__all__ = ("SafeQuery", "StatementExpression")

logger = get_logger("builder")


@dataclass(frozen=True)
class SafeQuery:
    """A fully rendered SQL statement with its positional bind values."""

    sql: str
    parameters: "tuple[Any, ...]" = field(default_factory=tuple)
    dialect: "DialectType" = None


@dataclass
class _Buffer:
    sql: "list[str]" = field(default_factory=list)
    params: "list[Any]" = field(default_factory=list)


class StatementExpression(ABC):
    """Base class for statements rendered through an append-only buffer.

    Subclasses implement :meth:`_build_statement` in terms of
    :meth:`append_sql`, :meth:`append_params` and :meth:`append_fragment`, and
    call :meth:`_invalidate` from every mutator.
    """

    __slots__ = ("_buffer", "_state", "statement_config")

    def __init__(self, statement_config: "Optional[StatementConfig]" = None) -> None:
        self.statement_config = statement_config or default_statement_config
        self._buffer: Optional[_Buffer] = None
        self._state: Optional[SafeQuery] = None

    @property
    def dialect(self) -> "DialectType":
        return self.statement_config.dialect

    @property
    def is_built(self) -> bool:
        """True while the rendered statement reflects the current fragments."""
        return self._state is not None

    def _invalidate(self) -> None:
        self._state = None

    def reset_buffer(self) -> None:
        """Start a new, empty render buffer."""
        self._buffer = _Buffer()

    def _require_buffer(self) -> "_Buffer":
        if self._buffer is None:
            msg = "The render buffer is only available while the statement is being built."
            raise SQLBuilderError(msg)
        return self._buffer

    def append_sql(self, *sql: str) -> Self:
        """Append SQL text to the render buffer."""
        self._require_buffer().sql.extend(sql)
        return self

    def append_params(self, params: "Iterable[Any]") -> Self:
        """Append bind values to the render buffer, in placeholder order."""
        self._require_buffer().params.extend(params)
        return self

    def append_fragment(self, fragment: "FragmentProtocol") -> Self:
        """Append a fragment's SQL and its parameters in lock-step."""
        sql = fragment.to_sql()
        params = fragment.get_params()
        return self.append_sql(sql).append_params(params)

    @abstractmethod
    def _build_statement(self) -> None:
        """Render the statement into the current buffer."""

    def build(self) -> Self:
        """Render the statement unless the cached rendering is still current.

        Returns:
            The statement itself.
        """
        if self._state is not None:
            return self
        self.reset_buffer()
        buffer = self._require_buffer()
        try:
            self._build_statement()
        finally:
            self._buffer = None
        self._state = SafeQuery(sql="".join(buffer.sql), parameters=tuple(buffer.params), dialect=self.dialect)
        log_statement(
            logger, "Built statement", self._state.sql, len(self._state.parameters), statement=type(self).__name__
        )
        return self

    def render(self) -> SafeQuery:
        """Return the rendered statement and its bind values."""
        self.build()
        assert self._state is not None
        return self._state

    def to_sql(self) -> str:
        return self.render().sql

    def get_params(self) -> "list[Any]":
        return list(self.render().parameters)

    def __str__(self) -> str:
        return self.to_sql()
