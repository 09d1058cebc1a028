from sqlcompose.core.parameters import POSITIONAL_PARAMETER_STYLES, ParameterStyle
from sqlcompose.core.statement import StatementConfig, default_statement_config

__all__ = ("POSITIONAL_PARAMETER_STYLES", "ParameterStyle", "StatementConfig", "default_statement_config")
