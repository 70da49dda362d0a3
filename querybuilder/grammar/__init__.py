"""SQL grammar: clause accumulators, orderable targets and their compiler."""

from querybuilder.grammar.clauses import Clause, OrderByClause, OrderItem
from querybuilder.grammar.compiler import OrderByCompiler, sort_items
from querybuilder.grammar.expression import ColumnName, Expression, OrderTarget, to_order_target

__all__ = (
    "Clause",
    "ColumnName",
    "Expression",
    "OrderByClause",
    "OrderByCompiler",
    "OrderItem",
    "OrderTarget",
    "sort_items",
    "to_order_target",
)
