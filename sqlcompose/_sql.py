"""SQL factory for creating statement builders with a compact API.

Example:
    >>> from sqlcompose import sql
    >>> query = sql.insert("users").values({"name": "a"}).on_conflict_do_update("name")
    >>> query.to_sql()
    'INSERT INTO users (name) VALUES (?) ON CONFLICT(name) DO NOTHING'
"""

from typing import TYPE_CHECKING, Any, Optional, Union

from sqlcompose.builder import Insert, Raw, SubQuery
from sqlcompose.core.statement import StatementConfig

if TYPE_CHECKING:
    from sqlglot import exp
    from sqlglot.dialects.dialect import DialectType

    from sqlcompose.protocols import FragmentProtocol, InsertExecutorProtocol

__all__ = ("SQLFactory", "sql")


class SQLFactory:
    """Factory for statement builders and inline SQL fragments."""

    __slots__ = ("dialect",)

    def __init__(self, dialect: "DialectType" = None) -> None:
        self.dialect = dialect

    def _config(self, dialect: "DialectType") -> StatementConfig:
        dialect = dialect or self.dialect
        if dialect is None:
            return StatementConfig()
        return StatementConfig.for_dialect(dialect)

    def insert(
        self,
        table: "Optional[Union[str, exp.Expression, FragmentProtocol]]" = None,
        alias: "Optional[str]" = None,
        *,
        executor: "Optional[InsertExecutorProtocol]" = None,
        dialect: "DialectType" = None,
        statement_config: "Optional[StatementConfig]" = None,
    ) -> Insert:
        """Create an INSERT builder.

        Args:
            table: Optional target table.
            alias: Optional alias for ``table``.
            executor: Executor used by :meth:`Insert.execute`. Its ``statement_config``
                attribute, if any, applies when no dialect (here or on the
                factory) and no ``statement_config`` is given.
            dialect: Dialect for the statement; placeholders follow the dialect's usual style.
            statement_config: Explicit configuration, overriding ``dialect``.

        Returns:
            A new INSERT builder.
        """
        if statement_config is None and dialect is None and self.dialect is None:
            statement_config = getattr(executor, "statement_config", None)
        builder = Insert(executor, statement_config=statement_config or self._config(dialect))
        if table is not None:
            builder.into(table, alias)
        return builder

    @staticmethod
    def raw(sql_fragment: str, *parameters: Any) -> Raw:
        """Create a verbatim SQL fragment, e.g. ``sql.raw("counter + 1")``."""
        return Raw(sql_fragment, *parameters)

    def subquery(
        self, query: "Union[str, exp.Expression, FragmentProtocol]", *parameters: Any, dialect: "DialectType" = None
    ) -> SubQuery:
        """Create a sub-query fragment for ``INSERT ... SELECT``."""
        return SubQuery(query, parameters, self._config(dialect))


sql = SQLFactory()
