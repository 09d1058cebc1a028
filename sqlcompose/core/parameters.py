"""Bind parameter styles.

Statements are rendered fragment by fragment and the bind values are
collected in the same order, so only styles whose placeholders are purely
positional can be emitted.
"""

from enum import Enum

__all__ = ("PARAMETER_PLACEHOLDERS", "POSITIONAL_PARAMETER_STYLES", "ParameterStyle")


class ParameterStyle(str, Enum):
    """Parameter style enumeration.

    Supported parameter styles:
    - QMARK: ? placeholders
    - POSITIONAL_PYFORMAT: %s placeholders
    """

    QMARK = "qmark"
    POSITIONAL_PYFORMAT = "pyformat_positional"

    def __str__(self) -> str:
        return self.value


PARAMETER_PLACEHOLDERS: "dict[ParameterStyle, str]" = {
    ParameterStyle.QMARK: "?",
    ParameterStyle.POSITIONAL_PYFORMAT: "%s",
}

POSITIONAL_PARAMETER_STYLES = frozenset(PARAMETER_PLACEHOLDERS)
