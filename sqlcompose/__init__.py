"""sqlcompose: composable, parameterized SQL statement building."""

from sqlcompose import adapters, builder, core, exceptions, protocols, utils
from sqlcompose.__metadata__ import __version__
from sqlcompose._sql import SQLFactory, sql
from sqlcompose.builder import Insert, Raw, SafeQuery, SubQuery
from sqlcompose.core import ParameterStyle, StatementConfig
from sqlcompose.exceptions import ImproperConfigurationError, SQLBuilderError, SQLComposeError
from sqlcompose.protocols import FragmentProtocol, InsertExecutorProtocol

__all__ = (
    "FragmentProtocol",
    "ImproperConfigurationError",
    "Insert",
    "InsertExecutorProtocol",
    "ParameterStyle",
    "Raw",
    "SQLBuilderError",
    "SQLComposeError",
    "SQLFactory",
    "SafeQuery",
    "StatementConfig",
    "SubQuery",
    "adapters",
    "builder",
    "core",
    "exceptions",
    "protocols",
    "sql",
    "utils",
    "__version__",
)
