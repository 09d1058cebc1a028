"""Renderable SQL fragments an INSERT statement is assembled from.

Every fragment is an append-only list of items that renders to
``(sql, params)`` on demand. Nothing is validated on ``append``; malformed
input surfaces as :class:`~sqlcompose.exceptions.SQLBuilderError` when the
fragment is rendered.
"""

import copy
from abc import ABC, abstractmethod
from collections.abc import Iterable, Mapping, Sequence
from typing import Any, Optional, Union

from sqlglot import exp

from sqlcompose.core.statement import StatementConfig, default_statement_config
from sqlcompose.exceptions import SQLBuilderError
from sqlcompose.protocols import FragmentProtocol
from sqlcompose.types import Empty
from sqlcompose.utils.type_guards import is_expression, is_fragment, is_mapping_row, is_sequence_row

__all__ = (
    "AssignmentList",
    "ColumnList",
    "Fragment",
    "Raw",
    "SubQuery",
    "TableReference",
    "ValueList",
)

ColumnT = Union[str, exp.Expression, FragmentProtocol]
Rendered = tuple[str, "list[Any]"]


class Fragment(ABC):
    """Base class for the fragments built by this package."""

    __slots__ = ("statement_config",)

    def __init__(self, statement_config: "Optional[StatementConfig]" = None) -> None:
        self.statement_config = statement_config or default_statement_config

    @property
    def dialect(self) -> Any:
        return self.statement_config.dialect

    @abstractmethod
    def _render(self) -> "Rendered":
        """Render the fragment to SQL text and its bind values."""

    def to_sql(self) -> str:
        return self._render()[0]

    def get_params(self) -> "list[Any]":
        return self._render()[1]

    def _identifier(self, name: str) -> str:
        name = name.strip()
        if not name:
            msg = f"{type(self).__name__} received an empty identifier"
            raise SQLBuilderError(msg)
        return exp.to_identifier(name).sql(dialect=self.dialect)

    def _render_item(self, item: Any) -> "Rendered":
        """Render a column-like item: an identifier, expression or fragment."""
        if is_fragment(item):
            return item.to_sql(), list(item.get_params())
        if is_expression(item):
            return item.sql(dialect=self.dialect), []
        if isinstance(item, str):
            return self._identifier(item), []
        msg = f"Cannot render {type(item).__name__} as an identifier"
        raise SQLBuilderError(msg)

    def _render_value(self, value: Any) -> "Rendered":
        """Render a value: fragments and expressions inline, anything else bound."""
        if is_fragment(value):
            return value.to_sql(), list(value.get_params())
        if is_expression(value):
            return value.sql(dialect=self.dialect), []
        return self.statement_config.placeholder, [value]


def _join(parts: "Iterable[Rendered]", separator: str = ", ") -> "Rendered":
    sql: list[str] = []
    params: list[Any] = []
    for part_sql, part_params in parts:
        sql.append(part_sql)
        params.extend(part_params)
    return separator.join(sql), params


class Raw:
    """Verbatim SQL with its own bind values.

    Example:
        >>> Raw("COALESCE(?, 0) + 1", 5).to_sql()
        'COALESCE(?, 0) + 1'
    """

    __slots__ = ("parameters", "sql")

    def __init__(self, sql: str, *parameters: Any) -> None:
        self.sql = sql
        self.parameters = parameters

    def to_sql(self) -> str:
        return self.sql

    def get_params(self) -> "list[Any]":
        return list(self.parameters)

    def __repr__(self) -> str:
        return f"Raw({self.sql!r}, parameters={self.parameters!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Raw):
            return NotImplemented
        return self.sql == other.sql and self.parameters == other.parameters

    def __hash__(self) -> int:
        return hash((self.sql, self.parameters))


class TableReference(Fragment):
    """One or more tables, optionally aliased and schema qualified."""

    __slots__ = ("_tables",)

    def __init__(self, statement_config: "Optional[StatementConfig]" = None) -> None:
        super().__init__(statement_config)
        self._tables: list[tuple[Any, Optional[str]]] = []

    def append(self, table: "Union[str, exp.Expression, FragmentProtocol]", alias: "Optional[str]" = None) -> None:
        self._tables.append((table, alias))

    def _render_table(self, table: Any, alias: "Optional[str]") -> "Rendered":
        if isinstance(table, str):
            parts = [part.strip() for part in table.split(".")]
            if len(parts) > 3 or not all(parts):
                msg = f"Invalid table name {table!r}"
                raise SQLBuilderError(msg)
            parts = [None] * (3 - len(parts)) + parts  # type: ignore[list-item]
            catalog, db, name = parts
            return exp.table_(name, db=db, catalog=catalog, alias=alias or None).sql(dialect=self.dialect), []
        sql, params = self._render_item(table)
        if alias:
            sql = f"{sql} AS {self._identifier(alias)}"
        return sql, params

    def _render(self) -> "Rendered":
        return _join(self._render_table(table, alias) for table, alias in self._tables)


class ColumnList(Fragment):
    """Comma separated identifiers: an INSERT column list or a conflict target."""

    __slots__ = ("_columns",)

    def __init__(self, statement_config: "Optional[StatementConfig]" = None) -> None:
        super().__init__(statement_config)
        self._columns: list[Any] = []

    def append(self, columns: "Union[ColumnT, Iterable[ColumnT]]") -> None:
        if isinstance(columns, str):
            self._columns.extend(columns.split(","))
        elif isinstance(columns, Iterable) and not (is_fragment(columns) or is_expression(columns)):
            for column in columns:
                self.append(column)
        else:
            self._columns.append(columns)

    @property
    def names(self) -> "list[str]":
        """Plain column names, stripped; expression and fragment items are skipped.

        Mapping rows are matched against these names, so a column list that
        holds expressions cannot be combined with mapping rows.
        """
        return [column.strip() for column in self._columns if isinstance(column, str)]

    def _render(self) -> "Rendered":
        return _join(self._render_item(column) for column in self._columns)


class ValueList(Fragment):
    """Parenthesised rows of bind values.

    Accepted input per ``append``: a mapping (one row), a sequence whose
    items are all mappings or sequences (many rows), any other sequence (one
    row), or a scalar (one single-value row). A single row made only of
    sequence cells, such as array values, must be wrapped in a list of rows.

    Mapping rows are laid out in column order when the value list is bound to
    column names (see :meth:`ordered_by`), otherwise in the key order of the
    first mapping row seen.
    """

    __slots__ = ("_column_names", "_entries")

    def __init__(self, statement_config: "Optional[StatementConfig]" = None) -> None:
        super().__init__(statement_config)
        self._entries: list[Any] = []
        self._column_names: Optional[list[str]] = None

    def append(self, values: Any) -> None:
        self._entries.append(values)

    def ordered_by(self, column_names: "Sequence[str]") -> "ValueList":
        """Return a view of this list laying out mapping rows in ``column_names`` order."""
        view = copy.copy(self)
        view._column_names = list(column_names)
        return view

    @staticmethod
    def _split_rows(entry: Any) -> "list[Any]":
        if is_mapping_row(entry):
            return [entry]
        if is_sequence_row(entry):
            if entry and all(is_mapping_row(row) or is_sequence_row(row) for row in entry):
                return list(entry)
            return [entry]
        return [[entry]]

    def _mapping_cells(self, row: "Mapping[Any, Any]", keys: "list[Any]", number: int) -> "list[Any]":
        if set(row) != set(keys):
            missing = sorted(str(key) for key in keys if key not in row)
            unexpected = sorted(str(key) for key in row if key not in keys)
            msg = f"Row {number} does not match columns {[str(key) for key in keys]}"
            if missing:
                msg += f": missing {missing}"
            if unexpected:
                msg += f": unexpected {unexpected}"
            raise SQLBuilderError(msg)
        return [row[key] for key in keys]

    def rows(self) -> "list[list[Any]]":
        """Normalize the appended input into rows of equal width."""
        rows: list[list[Any]] = []
        keys: Optional[list[Any]] = self._column_names or None
        for entry in self._entries:
            for row in self._split_rows(entry):
                number = len(rows) + 1
                if is_mapping_row(row):
                    if keys is None:
                        keys = list(row)
                    cells = self._mapping_cells(row, keys, number)
                else:
                    cells = list(row)
                if not cells:
                    msg = f"Row {number} is empty"
                    raise SQLBuilderError(msg)
                if rows and len(cells) != len(rows[0]):
                    msg = f"Row {number} has {len(cells)} values, expected {len(rows[0])}"
                    raise SQLBuilderError(msg)
                rows.append(cells)
        return rows

    def _render_row(self, row: "Sequence[Any]") -> "Rendered":
        sql, params = _join(self._render_value(value) for value in row)
        return f"({sql})", params

    def _render(self) -> "Rendered":
        return _join(self._render_row(row) for row in self.rows())


class AssignmentList(Fragment):
    """``column = value`` pairs for the upsert clauses.

    An assignment appended without a value refers to the value proposed for
    the same column by the failed insert: ``VALUES(column)`` in the MySQL
    form, ``EXCLUDED.column`` in the PostgreSQL form (see :meth:`excluded`).
    """

    __slots__ = ("_assignments", "_excluded")

    def __init__(self, statement_config: "Optional[StatementConfig]" = None) -> None:
        super().__init__(statement_config)
        self._assignments: list[tuple[Any, Any]] = []
        self._excluded = False

    def append(self, column: Any, value: Any = Empty) -> None:
        if is_mapping_row(column):
            for name, column_value in column.items():
                self._assignments.append((name, column_value))
        elif isinstance(column, Iterable) and not (
            isinstance(column, str) or is_fragment(column) or is_expression(column)
        ):
            for name in column:
                self._assignments.append((name, value))
        else:
            self._assignments.append((column, value))

    def excluded(self) -> "AssignmentList":
        """Return a view of this list rendering self-references as ``EXCLUDED.column``."""
        view = copy.copy(self)
        view._excluded = True
        return view

    def _render_assignment(self, column: Any, value: Any) -> "Rendered":
        column_sql, params = self._render_item(column)
        if value is Empty:
            if self._excluded:
                return f"{column_sql} = EXCLUDED.{column_sql}", params
            return f"{column_sql} = VALUES({column_sql})", params
        value_sql, value_params = self._render_value(value)
        return f"{column_sql} = {value_sql}", params + value_params

    def _render(self) -> "Rendered":
        return _join(self._render_assignment(column, value) for column, value in self._assignments)


class SubQuery(Fragment):
    """The data source of an ``INSERT ... SELECT``.

    Wraps a SQL string (rendered verbatim), a sqlglot expression (rendered in
    the statement dialect) or any other fragment.
    """

    __slots__ = ("parameters", "query")

    def __init__(
        self,
        query: "Union[str, exp.Expression, FragmentProtocol]",
        parameters: "Sequence[Any]" = (),
        statement_config: "Optional[StatementConfig]" = None,
    ) -> None:
        super().__init__(statement_config)
        self.query = query
        self.parameters = tuple(parameters)

    def _render(self) -> "Rendered":
        if isinstance(self.query, str):
            sql, params = self.query.strip(), []
        elif is_expression(self.query):
            sql, params = self.query.sql(dialect=self.dialect), []
        elif is_fragment(self.query):
            sql, params = self.query.to_sql(), list(self.query.get_params())
        else:
            msg = f"Cannot use {type(self.query).__name__} as a sub-query"
            raise SQLBuilderError(msg)
        if not sql:
            msg = "Sub-query must not be empty"
            raise SQLBuilderError(msg)
        return sql, params + list(self.parameters)
