from typing import TYPE_CHECKING, Any, Optional, Union

from mypy_extensions import trait
from typing_extensions import Self

from sqlcompose.builder._fragments import ColumnList, SubQuery, ValueList
from sqlcompose.utils.type_guards import is_mapping_row, is_sequence_row

if TYPE_CHECKING:
    from collections.abc import Iterable

    from sqlglot import exp

    from sqlcompose.builder._fragments import ColumnT
    from sqlcompose.core.statement import StatementConfig
    from sqlcompose.protocols import FragmentProtocol

__all__ = ("InsertFromSelectMixin", "InsertValuesMixin")


@trait
class InsertValuesMixin:
    """Mixin providing the column list and VALUES rows for INSERT builders."""

    __slots__ = ()

    _columns: "Optional[ColumnList]"
    _values: "Optional[ValueList]"
    statement_config: "StatementConfig"

    def _invalidate(self) -> None: ...

    def columns(self, *columns: "Union[ColumnT, Iterable[ColumnT]]") -> Self:
        """Append columns to the column list.

        Args:
            *columns: Column names (a single string may hold several, comma
                separated), iterables of names, or expressions.

        Returns:
            The current builder instance for method chaining.
        """
        if self._columns is None:
            self._columns = ColumnList(self.statement_config)
        self._columns.append(columns)
        self._invalidate()
        return self

    def values(self, values: Any, columns: "Optional[Union[ColumnT, Iterable[ColumnT]]]" = None) -> Self:
        """Append one or more rows of values.

        ``values`` may be a mapping of column name to value, a sequence of such
        mappings, a sequence of positional rows, or one positional row. When
        no column list exists yet and ``columns`` is not given, the keys of the
        first mapping row become the column list.

        Args:
            values: The row or rows to insert.
            columns: Columns to append before the rows.

        Returns:
            The current builder instance for method chaining.
        """
        if columns is not None:
            self.columns(columns)
        elif self._columns is None:
            if is_sequence_row(values) and values and is_mapping_row(values[0]):
                self.columns(list(values[0]))
            elif is_mapping_row(values):
                self.columns(list(values))

        if self._values is None:
            self._values = ValueList(self.statement_config)
        self._values.append(values)
        self._invalidate()
        return self


@trait
class InsertFromSelectMixin:
    """Mixin providing ``INSERT ... SELECT`` for INSERT builders."""

    __slots__ = ()

    _query: "Optional[SubQuery]"
    statement_config: "StatementConfig"

    def _invalidate(self) -> None: ...

    def select(self, query: "Union[str, exp.Expression, FragmentProtocol]", *parameters: Any) -> Self:
        """Insert the rows produced by a query instead of VALUES rows.

        Args:
            query: SQL text, a sqlglot expression, or any object rendering
                itself through ``to_sql()``/``get_params()``.
            *parameters: Bind values for placeholders in ``query``.

        Returns:
            The current builder instance for method chaining.
        """
        self._query = SubQuery(query, parameters, self.statement_config)
        self._invalidate()
        return self
