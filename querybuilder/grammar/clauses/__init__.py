"""Clause accumulators used by query builders."""

from querybuilder.grammar.clauses.base import Clause
from querybuilder.grammar.clauses.order_by import OrderByClause
from querybuilder.grammar.clauses.order_item import OrderItem

__all__ = ("Clause", "OrderByClause", "OrderItem")
