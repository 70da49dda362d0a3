from typing import Optional, Union

from querybuilder.grammar.expression import ColumnName, Expression
from querybuilder.types import OrderPriority, OrderType

__all__ = ("OrderItem",)


class OrderItem:
    """One ordering directive of an ORDER BY clause.

    Items are immutable. ``index`` is assigned by the owning clause in the
    order items were added and breaks ties between items of equal priority.
    """

    __slots__ = ("_expression", "_index", "_order_type", "_priority")

    def __init__(
        self,
        expression: Union[ColumnName, Expression, str],
        order_type: Optional[OrderType] = None,
        priority: int = OrderPriority.NORMAL,
        index: int = 0,
    ) -> None:
        self._expression = expression
        self._order_type = order_type
        self._priority = priority
        self._index = index

    @property
    def expression(self) -> Union[ColumnName, Expression, str]:
        return self._expression

    @property
    def order_type(self) -> Optional[OrderType]:
        return self._order_type

    @property
    def priority(self) -> int:
        return self._priority

    @property
    def index(self) -> int:
        return self._index

    def get_expression(self) -> Union[ColumnName, Expression, str]:
        return self._expression

    def get_order_type(self) -> Optional[OrderType]:
        return self._order_type

    def get_priority(self) -> int:
        return self._priority

    def get_index(self) -> int:
        return self._index

    @property
    def is_random(self) -> bool:
        return self._priority == OrderPriority.RANDOM

    @property
    def sort_key(self) -> "tuple[int, int]":
        """Key placing higher priorities first, then earlier insertions."""
        return (-OrderPriority.rank_of(self._priority), self._index)

    def __setattr__(self, name: str, value: object) -> None:
        if hasattr(self, name):
            msg = f"{type(self).__name__} is immutable"
            raise AttributeError(msg)
        super().__setattr__(name, value)

    def __hash__(self) -> int:
        return hash((self._expression, self._order_type, self._priority, self._index))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, type(self)):
            return False
        return (
            self._expression == other._expression
            and self._order_type == other._order_type
            and self._priority == other._priority
            and self._index == other._index
        )

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(expression={self._expression!r}, order_type={self._order_type!r}, "
            f"priority={self._priority!r}, index={self._index!r})"
        )
