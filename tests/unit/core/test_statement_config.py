"""Unit tests for statement configuration."""

import pytest

from sqlcompose import ImproperConfigurationError, ParameterStyle, StatementConfig
from sqlcompose.core import default_statement_config


def test_default_config() -> None:
    assert default_statement_config.dialect is None
    assert default_statement_config.parameter_style is ParameterStyle.QMARK
    assert default_statement_config.placeholder == "?"


def test_parameter_style_accepts_value_string() -> None:
    config = StatementConfig(parameter_style="pyformat_positional")  # type: ignore[arg-type]

    assert config.parameter_style is ParameterStyle.POSITIONAL_PYFORMAT
    assert config.placeholder == "%s"


@pytest.mark.parametrize("style", ["numeric", "named_colon", "bogus"])
def test_unsupported_parameter_style(style: str) -> None:
    with pytest.raises(ImproperConfigurationError, match="Unsupported parameter style"):
        StatementConfig(parameter_style=style)  # type: ignore[arg-type]


def test_unknown_dialect() -> None:
    with pytest.raises(ImproperConfigurationError, match="Unknown SQL dialect"):
        StatementConfig(dialect="not-a-dialect")


@pytest.mark.parametrize(
    ("dialect", "placeholder"),
    [("postgres", "%s"), ("mysql", "%s"), ("sqlite", "?"), ("duckdb", "?"), ("bigquery", "?")],
)
def test_for_dialect(dialect: str, placeholder: str) -> None:
    config = StatementConfig.for_dialect(dialect)

    assert config.dialect == dialect
    assert config.placeholder == placeholder


def test_for_dialect_override() -> None:
    config = StatementConfig.for_dialect("postgres", parameter_style=ParameterStyle.QMARK)

    assert config.placeholder == "?"


def test_config_is_frozen() -> None:
    with pytest.raises(AttributeError):
        default_statement_config.dialect = "mysql"  # type: ignore[misc]
