"""Statement configuration shared by a statement and the fragments it creates."""

from dataclasses import dataclass
from typing import Any, Optional

from sqlglot.dialects.dialect import Dialect, DialectType

from sqlcompose.core.parameters import PARAMETER_PLACEHOLDERS, POSITIONAL_PARAMETER_STYLES, ParameterStyle
from sqlcompose.exceptions import ImproperConfigurationError

__all__ = ("DIALECT_PARAMETER_STYLES", "StatementConfig", "default_statement_config")

DIALECT_PARAMETER_STYLES: "dict[str, ParameterStyle]" = {
    "mysql": ParameterStyle.POSITIONAL_PYFORMAT,
    "postgres": ParameterStyle.POSITIONAL_PYFORMAT,
    "sqlite": ParameterStyle.QMARK,
    "duckdb": ParameterStyle.QMARK,
}


@dataclass(frozen=True)
class StatementConfig:
    """Rendering settings for a statement.

    Attributes:
        dialect: sqlglot dialect used to quote identifiers and render expressions.
        parameter_style: Placeholder style for bind values.
    """

    dialect: "DialectType" = None
    parameter_style: ParameterStyle = ParameterStyle.QMARK

    def __post_init__(self) -> None:
        try:
            style = ParameterStyle(self.parameter_style)
        except ValueError as e:
            msg = f"Unsupported parameter style {self.parameter_style!r}"
            raise ImproperConfigurationError(msg) from e
        if style not in POSITIONAL_PARAMETER_STYLES:
            msg = f"Parameter style {style} is not positional"
            raise ImproperConfigurationError(msg)
        if self.dialect is not None:
            try:
                Dialect.get_or_raise(self.dialect)
            except ValueError as e:
                msg = f"Unknown SQL dialect {self.dialect!r}"
                raise ImproperConfigurationError(msg) from e
        object.__setattr__(self, "parameter_style", style)

    @property
    def placeholder(self) -> str:
        """Placeholder text emitted for each bind value."""
        return PARAMETER_PLACEHOLDERS[self.parameter_style]

    @classmethod
    def for_dialect(cls, dialect: "DialectType", **kwargs: Any) -> "StatementConfig":
        """Create a config using the customary parameter style of ``dialect``.

        Args:
            dialect: sqlglot dialect name or instance.
            **kwargs: Overrides passed to the constructor.

        Returns:
            A new configuration.
        """
        name: Optional[str] = dialect if isinstance(dialect, str) else None
        if isinstance(dialect, Dialect):
            name = type(dialect).__name__.lower()
        elif isinstance(dialect, type) and issubclass(dialect, Dialect):
            name = dialect.__name__.lower()
        kwargs.setdefault("parameter_style", DIALECT_PARAMETER_STYLES.get(name or "", ParameterStyle.QMARK))
        return cls(dialect=dialect, **kwargs)


default_statement_config = StatementConfig()
