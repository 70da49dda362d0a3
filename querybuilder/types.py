"""Enumerations shared by the grammar and builder layers."""

from enum import Enum, IntEnum
from typing import Union

from querybuilder.exceptions import SQLBuilderError

__all__ = ("OrderPriority", "OrderType")


class OrderType(str, Enum):
    """Sort direction of an ORDER BY item."""

    ASC = "ASC"
    DESC = "DESC"

    def __str__(self) -> str:
        return self.value

    @property
    def is_descending(self) -> bool:
        return self is OrderType.DESC

    @classmethod
    def from_string(cls, value: Union[str, "OrderType"]) -> "OrderType":
        """Resolve a direction from user input.

        Args:
            value: An ``OrderType`` member or a case-insensitive ``"asc"``/``"desc"`` string.

        Raises:
            SQLBuilderError: If the value is not a recognised direction.

        Returns:
            The matching ``OrderType`` member.
        """
        if isinstance(value, OrderType):
            return value
        if isinstance(value, str):
            normalized = value.strip().upper()
            if normalized in cls.__members__:
                return cls[normalized]
        msg = f"Invalid sort direction: {value!r}. Expected 'ASC' or 'DESC'."
        raise SQLBuilderError(msg)


class OrderPriority(IntEnum):
    """Priority classes of ORDER BY items.

    Items with a higher rank are emitted before items with a lower rank,
    regardless of the order in which they were requested.
    """

    NORMAL = 0
    RANDOM = 1

    @property
    def rank(self) -> int:
        return int(self)

    @staticmethod
    def rank_of(priority: Union[int, "OrderPriority"]) -> int:
        """Rank of a priority value, including classes not declared here."""
        return int(priority)
