from collections.abc import Iterator
from typing import Optional, Union

from querybuilder.grammar.clauses.base import Clause
from querybuilder.grammar.clauses.order_item import OrderItem
from querybuilder.grammar.expression import ColumnName, Expression
from querybuilder.types import OrderPriority, OrderType
from querybuilder.utils.logging import get_logger

__all__ = ("OrderByClause",)

logger = get_logger("grammar.order_by")


class OrderByClause(Clause):
    """Append-only collection of ORDER BY items.

    Items keep the order they were added in. Each receives the next value of
    an internal counter as its index. Sorting by priority is left to the
    compiler; :meth:`get_columns` always returns raw insertion order.
    """

    __slots__ = ("_counter", "_items")

    def __init__(self) -> None:
        self._items: list[OrderItem] = []
        self._counter = 0

    def add_column(self, expression: Union[ColumnName, Expression, str], order_type: OrderType) -> None:
        """Add a regular ordering directive.

        Args:
            expression: Column name or expression to order by. Plain strings are treated as column names.
            order_type: Sort direction.
        """
        if isinstance(expression, str):
            expression = ColumnName(expression)
        self._append(expression, order_type, OrderPriority.NORMAL)

    def add_random(self, expression: Expression) -> None:
        """Add a random ordering directive.

        Random items outrank regular columns, so a renderer emits them first
        no matter when they were requested.
        """
        self._append(expression, None, OrderPriority.RANDOM)

    def get_columns(self) -> list[OrderItem]:
        return list(self._items)

    def is_empty(self) -> bool:
        return not self._items

    def _append(self, expression: Union[ColumnName, Expression], order_type: Optional[OrderType], priority: int) -> None:
        item = OrderItem(expression, order_type, priority, self._counter)
        self._counter += 1
        self._items.append(item)
        logger.debug(
            "Added ORDER BY item",
            extra={
                "extra_fields": {
                    "expression": repr(expression),
                    "order_type": str(order_type) if order_type is not None else None,
                    "priority": int(priority),
                    "index": item.index,
                }
            },
        )

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[OrderItem]:
        return iter(list(self._items))

    def __repr__(self) -> str:
        return f"{type(self).__name__}(items={self._items!r})"
