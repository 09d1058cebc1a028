"""Fluent builders for parameterized SQL statements."""

from sqlcompose.builder._base import SafeQuery, StatementExpression
from sqlcompose.builder._fragments import (
    AssignmentList,
    ColumnList,
    Fragment,
    Raw,
    SubQuery,
    TableReference,
    ValueList,
)
from sqlcompose.builder._insert import Insert

__all__ = (
    "AssignmentList",
    "ColumnList",
    "Fragment",
    "Insert",
    "Raw",
    "SafeQuery",
    "StatementExpression",
    "SubQuery",
    "TableReference",
    "ValueList",
)
