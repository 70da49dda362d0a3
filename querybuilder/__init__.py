"""ORDER BY clause accumulation and rendering for SQL query builders."""

from querybuilder.builder import OrderByClauseMixin
from querybuilder.config import CompilerConfig
from querybuilder.exceptions import QueryBuilderError, SQLBuilderError, SQLParsingError
from querybuilder.grammar import (
    Clause,
    ColumnName,
    Expression,
    OrderByClause,
    OrderByCompiler,
    OrderItem,
    sort_items,
)
from querybuilder.types import OrderPriority, OrderType

__all__ = (
    "Clause",
    "ColumnName",
    "CompilerConfig",
    "Expression",
    "OrderByClause",
    "OrderByClauseMixin",
    "OrderByCompiler",
    "OrderItem",
    "OrderPriority",
    "OrderType",
    "QueryBuilderError",
    "SQLBuilderError",
    "SQLParsingError",
    "sort_items",
)

__version__ = "0.1.0"
