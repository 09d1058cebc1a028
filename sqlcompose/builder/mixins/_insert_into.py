from typing import TYPE_CHECKING, Optional, Union

from mypy_extensions import trait
from typing_extensions import Self

from sqlcompose.builder._fragments import TableReference

if TYPE_CHECKING:
    from sqlglot import exp

    from sqlcompose.core.statement import StatementConfig
    from sqlcompose.protocols import FragmentProtocol

__all__ = ("InsertIntoClauseMixin",)


@trait
class InsertIntoClauseMixin:
    """Mixin providing the INTO clause for INSERT builders."""

    __slots__ = ()

    _target: "Optional[TableReference]"
    statement_config: "StatementConfig"

    def _invalidate(self) -> None: ...

    def into(self, table: "Union[str, exp.Expression, FragmentProtocol]", alias: "Optional[str]" = None) -> Self:
        """Add a target table.

        Args:
            table: Table name, optionally qualified as ``schema.table``, or an expression.
            alias: Optional table alias.

        Returns:
            The current builder instance for method chaining.
        """
        if self._target is None:
            self._target = TableReference(self.statement_config)
        self._target.append(table, alias)
        self._invalidate()
        return self
