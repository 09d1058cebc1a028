"""INSERT statement builder.

Provides a fluent interface for building INSERT statements with positional
parameter binding, ``INSERT ... SELECT``, and the MySQL
(``ON DUPLICATE KEY UPDATE``) and PostgreSQL (``ON CONFLICT``) upsert forms.
"""

from typing import TYPE_CHECKING, Any, Optional

from sqlcompose.builder._base import StatementExpression
from sqlcompose.builder.mixins import (
    InsertFromSelectMixin,
    InsertIntoClauseMixin,
    InsertValuesMixin,
    OnConflictMixin,
    OnDuplicateKeyUpdateMixin,
)
from sqlcompose.exceptions import ImproperConfigurationError
from sqlcompose.utils.logging import get_logger, log_statement

if TYPE_CHECKING:
    from sqlcompose.builder._fragments import AssignmentList, ColumnList, SubQuery, TableReference, ValueList
    from sqlcompose.core.statement import StatementConfig
    from sqlcompose.protocols import InsertExecutorProtocol

__all__ = ("Insert",)

logger = get_logger("builder.insert")


class Insert(
    StatementExpression,
    InsertIntoClauseMixin,
    InsertValuesMixin,
    InsertFromSelectMixin,
    OnDuplicateKeyUpdateMixin,
    OnConflictMixin,
):
    """Builder for INSERT statements.

    Every mutator appends to one of the statement's fragments and marks the
    rendered statement stale; the SQL is rebuilt on the next :meth:`to_sql`,
    :meth:`get_params`, :meth:`render` or :meth:`execute`.

    Example:
        >>> query = Insert().into("users").values({"name": "a", "age": 3})
        >>> query.to_sql()
        'INSERT INTO users (name, age) VALUES (?, ?)'
        >>> query.get_params()
        ['a', 3]
    """

    __slots__ = ("_assignment", "_columns", "_executor", "_index_columns", "_query", "_target", "_values")

    def __init__(
        self,
        executor: "Optional[InsertExecutorProtocol]" = None,
        *,
        target: "Optional[TableReference]" = None,
        columns: "Optional[ColumnList]" = None,
        values: "Optional[ValueList]" = None,
        query: "Optional[SubQuery]" = None,
        assignment: "Optional[AssignmentList]" = None,
        index_columns: "Optional[ColumnList]" = None,
        statement_config: "Optional[StatementConfig]" = None,
    ) -> None:
        super().__init__(statement_config)
        self._executor = executor
        self._target = target
        self._columns = columns
        self._values = values
        self._query = query
        self._assignment = assignment
        self._index_columns = index_columns

    @property
    def executor(self) -> "Optional[InsertExecutorProtocol]":
        return self._executor

    def execute(self, sequence: "Optional[str]" = None) -> Any:
        """Execute the insert through the bound executor.

        Args:
            sequence: Name of the sequence (or column) whose value should be
                returned. Appends ``RETURNING <sequence>`` to the statement.

        Raises:
            ImproperConfigurationError: If no executor is bound.

        Returns:
            The ID of the last inserted row or the returned sequence value.
        """
        if self._executor is None:
            msg = "Cannot execute the INSERT statement: missing executor."
            raise ImproperConfigurationError(msg)
        query = self.render()
        sql = query.sql if sequence is None else f"{query.sql} RETURNING {sequence}"
        log_statement(
            logger, "Executing statement", sql, len(query.parameters), statement=type(self).__name__, sequence=sequence
        )
        return self._executor.insert(sql, list(query.parameters), sequence)

    def _build_statement(self) -> None:
        self._build_into()
        self._build_columns()
        self._build_values()
        self._build_query()
        self._build_on_duplicate_key_update()
        self._build_on_conflict()

    def _build_into(self) -> None:
        self.append_sql("INSERT INTO ")
        if self._target is not None:
            self.append_fragment(self._target)

    def _build_columns(self) -> None:
        self.append_sql(" (")
        if self._columns is not None:
            self.append_fragment(self._columns)
        self.append_sql(")")

    def _build_values(self) -> None:
        if self._query is not None:
            return
        self.append_sql(" VALUES ")
        if self._values is None:
            return
        if self._columns is None:
            self.append_fragment(self._values)
        else:
            self.append_fragment(self._values.ordered_by(self._columns.names))

    def _build_query(self) -> None:
        if self._query is not None:
            self.append_sql(" ").append_fragment(self._query)

    def _build_on_duplicate_key_update(self) -> None:
        if self._assignment is not None and self._index_columns is None:
            self.append_sql(" ON DUPLICATE KEY UPDATE ").append_fragment(self._assignment)

    def _build_on_conflict(self) -> None:
        if self._index_columns is None:
            return
        self.append_sql(" ON CONFLICT(").append_fragment(self._index_columns).append_sql(")")
        if self._assignment is None:
            self.append_sql(" DO NOTHING")
        else:
            self.append_sql(" DO UPDATE SET ").append_fragment(self._assignment.excluded())
