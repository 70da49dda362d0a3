from abc import ABC, abstractmethod

__all__ = ("Clause",)


class Clause(ABC):
    """A clause a query builder accumulates and a compiler later reads."""

    __slots__ = ()

    @abstractmethod
    def is_empty(self) -> bool:
        """Whether the clause holds nothing to render."""
