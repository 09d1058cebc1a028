from typing import TYPE_CHECKING, Any, Optional

from mypy_extensions import trait
from typing_extensions import Self

from sqlcompose.builder._fragments import AssignmentList, ColumnList
from sqlcompose.types import Empty

if TYPE_CHECKING:
    from sqlcompose.core.statement import StatementConfig

__all__ = ("OnConflictMixin", "OnDuplicateKeyUpdateMixin")


@trait
class OnDuplicateKeyUpdateMixin:
    """Mixin providing MySQL's ``ON DUPLICATE KEY UPDATE`` clause."""

    __slots__ = ()

    _assignment: "Optional[AssignmentList]"
    statement_config: "StatementConfig"

    def _invalidate(self) -> None: ...

    def on_duplicate_key_update(self, column: Any, value: Any = Empty) -> Self:
        """Append an assignment applied when the insert hits a duplicate key.

        Args:
            column: Column name, a mapping of column to value, or an iterable
                of column names.
            value: Value to assign. When omitted the column takes the value
                proposed by the insert.

        Returns:
            The current builder instance for method chaining.
        """
        if self._assignment is None:
            self._assignment = AssignmentList(self.statement_config)
        self._assignment.append(column, value)
        self._invalidate()
        return self


@trait
class OnConflictMixin:
    """Mixin providing PostgreSQL's ``ON CONFLICT`` clause."""

    __slots__ = ()

    _index_columns: "Optional[ColumnList]"
    statement_config: "StatementConfig"

    def _invalidate(self) -> None: ...

    def on_duplicate_key_update(self, column: Any, value: Any = Empty) -> Self: ...

    def on_conflict_do_update(self, index_column: Any, column: Any = None, value: Any = Empty) -> Self:
        """Append a conflict target column and, optionally, an assignment.

        Without any assignment the statement renders ``DO NOTHING``.

        Args:
            index_column: Column (or columns) of the unique index or constraint.
            column: Column to update on conflict.
            value: Value for ``column``; defaults to ``EXCLUDED.column``.

        Returns:
            The current builder instance for method chaining.
        """
        if self._index_columns is None:
            self._index_columns = ColumnList(self.statement_config)
        self._index_columns.append(index_column)
        if column is not None:
            self.on_duplicate_key_update(column, value)
        self._invalidate()
        return self
