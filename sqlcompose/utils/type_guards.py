"""Type guard functions for runtime type checking in sqlcompose."""

from collections.abc import Mapping, Sequence
from typing import TYPE_CHECKING, Any

from sqlcompose.protocols import FragmentProtocol

if TYPE_CHECKING:
    from sqlglot import exp
    from typing_extensions import TypeGuard

__all__ = (
    "is_expression",
    "is_fragment",
    "is_mapping_row",
    "is_sequence_row",
)


def is_expression(obj: Any) -> "TypeGuard[exp.Expression]":
    """Check if a value is a sqlglot Expression.

    Args:
        obj: Value to check.

    Returns:
        bool
    """
    from sqlglot import exp

    return isinstance(obj, exp.Expression)


def is_fragment(obj: Any) -> "TypeGuard[FragmentProtocol]":
    """Check if a value renders itself through ``to_sql``/``get_params``.

    Args:
        obj: Value to check.

    Returns:
        bool
    """
    return isinstance(obj, FragmentProtocol)


def is_mapping_row(obj: Any) -> "TypeGuard[Mapping[str, Any]]":
    """Check if a value is a row keyed by column name.

    Args:
        obj: Value to check.

    Returns:
        bool
    """
    return isinstance(obj, Mapping)


def is_sequence_row(obj: Any) -> "TypeGuard[Sequence[Any]]":
    """Check if a value is a positional row.

    Strings and bytes are scalars here, not sequences of characters.

    Args:
        obj: Value to check.

    Returns:
        bool
    """
    return isinstance(obj, Sequence) and not isinstance(obj, (str, bytes, bytearray))
