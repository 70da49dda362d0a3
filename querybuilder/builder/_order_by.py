from typing import Any, Optional, Union

from mypy_extensions import trait
from typing_extensions import Self

from querybuilder.exceptions import SQLBuilderError
from querybuilder.grammar.clauses.order_by import OrderByClause
from querybuilder.grammar.expression import ColumnName, Expression, to_order_target
from querybuilder.types import OrderType

__all__ = ("OrderByClauseMixin", "OrderBySpec")

OrderBySpec = Union[str, ColumnName, Expression, tuple[Union[str, ColumnName, Expression], Union[str, OrderType]]]


@trait
class OrderByClauseMixin:
    """Mixin providing ORDER BY methods for query builders.

    The host builder owns one :class:`OrderByClause`; input is validated here
    so the clause itself never has to reject anything.
    """

    __slots__ = ()
    _order_by: Optional[OrderByClause]

    @property
    def order_by_clause(self) -> OrderByClause:
        clause = getattr(self, "_order_by", None)
        if clause is None:
            clause = OrderByClause()
            self._order_by = clause
        return clause

    def order_by(self, *items: OrderBySpec) -> Self:
        """Add ORDER BY items.

        Args:
            *items: Columns to order by. Each is a column name, a ``ColumnName``, an ``Expression``,
                or a ``(target, direction)`` tuple. Items without a direction sort ascending.

        Raises:
            SQLBuilderError: If a column name is blank, a direction is invalid or an item type is unsupported.
                Nothing is added when any item is rejected.

        Returns:
            The current builder instance for method chaining.
        """
        resolved = [self._resolve_order_item(item) for item in items]
        clause = self.order_by_clause
        for target, order_type in resolved:
            clause.add_column(target, order_type)
        return self

    def order_by_random(self, expression: Optional[Expression] = None) -> Self:
        """Order rows randomly. Random ordering is emitted ahead of any column ordering."""
        if expression is not None and not isinstance(expression, Expression):
            msg = f"Random ordering requires an Expression, got {type(expression).__name__}"
            raise SQLBuilderError(msg)
        self.order_by_clause.add_random(expression if expression is not None else Expression.random())
        return self

    @staticmethod
    def _resolve_order_item(item: Any) -> "tuple[Union[ColumnName, Expression], OrderType]":
        if isinstance(item, tuple):
            if len(item) != 2:  # noqa: PLR2004
                msg = f"ORDER BY tuples must be (target, direction), got {item!r}"
                raise SQLBuilderError(msg)
            target, direction = item
            order_type = OrderType.from_string(direction)
        else:
            target, order_type = item, OrderType.ASC

        resolved = to_order_target(target)
        if isinstance(resolved, ColumnName) and not resolved.name.strip():
            msg = "ORDER BY column name cannot be empty."
            raise SQLBuilderError(msg)
        return resolved, order_type
