"""Render ORDER BY clauses to sqlglot trees and SQL text.

The compiler owns the final emission order: items are sorted by priority
(highest first) and then by insertion index. Each item becomes an
``exp.Ordered`` node so dialect differences are handled by sqlglot.
"""

from collections.abc import Iterable
from typing import Optional

from sqlglot import exp
from sqlglot.dialects.dialect import Dialect

from querybuilder.config import DEFAULT_COMPILER_CONFIG, CompilerConfig
from querybuilder.exceptions import SQLBuilderError
from querybuilder.grammar.clauses.order_by import OrderByClause
from querybuilder.grammar.clauses.order_item import OrderItem
from querybuilder.grammar.expression import ColumnName, Expression
from querybuilder.types import OrderType
from querybuilder.utils.logging import get_logger

__all__ = ("OrderByCompiler", "sort_items")

logger = get_logger("grammar.compiler")


def sort_items(items: Iterable[OrderItem]) -> list[OrderItem]:
    """Order items by descending priority, then ascending insertion index."""
    return sorted(items, key=lambda item: item.sort_key)


class OrderByCompiler:
    """Turns an :class:`OrderByClause` into SQL."""

    __slots__ = ("config",)

    def __init__(self, config: Optional[CompilerConfig] = None) -> None:
        self.config = config or DEFAULT_COMPILER_CONFIG

    def compile(self, clause: OrderByClause) -> Optional[exp.Order]:
        """Build the ``exp.Order`` node for a clause.

        Returns:
            None when the clause is empty, otherwise the ORDER BY node with items in emission order.
        """
        if clause.is_empty():
            return None
        ordered = [self.compile_item(item) for item in sort_items(clause.get_columns())]
        return exp.Order(expressions=ordered)

    def compile_item(self, item: OrderItem) -> exp.Ordered:
        """Build the ``exp.Ordered`` node of a single item.

        Raises:
            SQLBuilderError: If the item's target is not a column name or expression.
        """
        node = self._target_to_sqlglot(item.expression)
        order_type = item.order_type
        if order_type is None:
            return exp.Ordered(this=node, nulls_first=self._native_nulls_first(descending=False))
        descending = order_type is OrderType.DESC
        return exp.Ordered(this=node, desc=descending, nulls_first=self._native_nulls_first(descending))

    def to_sql(self, clause: OrderByClause) -> str:
        """Render a clause as ``ORDER BY ...`` text, or an empty string if it holds no items."""
        order = self.compile(clause)
        if order is None:
            return ""
        sql = order.sql(**self.config.generator_options()).strip()
        logger.debug("Rendered ORDER BY clause", extra={"extra_fields": {"sql": sql, "items": len(clause)}})
        return sql

    def _native_nulls_first(self, descending: bool) -> bool:
        # Matching the dialect's own NULL placement keeps NULLS FIRST/LAST out of the output.
        null_ordering = Dialect.get_or_raise(self.config.dialect).NULL_ORDERING
        if null_ordering == "nulls_are_last":
            return False
        if null_ordering == "nulls_are_large":
            return descending
        return not descending

    def _target_to_sqlglot(self, target: object) -> exp.Expression:
        dialect = self.config.dialect
        if isinstance(target, ColumnName):
            return target.to_sqlglot(dialect)
        if isinstance(target, Expression):
            return target.to_sqlglot(dialect)
        if isinstance(target, str):
            return ColumnName(target).to_sqlglot(dialect)
        msg = f"Cannot render ORDER BY target of type {type(target).__name__}"
        raise SQLBuilderError(msg)
