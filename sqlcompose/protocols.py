"""Runtime-checkable protocols for sqlcompose.

These describe the collaborators a statement talks to: the renderable
fragments it is assembled from and the executor it hands finished SQL to.
"""

from collections.abc import Sequence
from typing import Any, Optional, Protocol, runtime_checkable

__all__ = ("FragmentProtocol", "InsertExecutorProtocol")


@runtime_checkable
class FragmentProtocol(Protocol):
    """Protocol for renderable SQL sub-expressions.

    ``to_sql`` and ``get_params`` must agree: the parameters are returned in
    the left-to-right order of the placeholders in the rendered text. Neither
    method may mutate the statement that renders the fragment.
    """

    def to_sql(self) -> str:
        """Render the fragment as SQL text."""
        ...

    def get_params(self) -> "list[Any]":
        """Return the bind values of the rendered fragment."""
        ...


@runtime_checkable
class InsertExecutorProtocol(Protocol):
    """Protocol for objects that run finished INSERT statements."""

    def insert(self, sql: str, params: "Sequence[Any]", sequence: "Optional[str]" = None) -> Any:
        """Execute ``sql`` with ``params``.

        Args:
            sql: The complete statement, including any RETURNING clause.
            params: Positional bind values.
            sequence: Name of the sequence or column returned by the statement.

        Returns:
            The last inserted row ID, or the returned sequence value.
        """
        ...
