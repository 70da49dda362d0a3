"""Things an ORDER BY item can point at.

An orderable target is either a :class:`ColumnName` (plain identifier text) or
an :class:`Expression` (an opaque SQL fragment). The compiler dispatches on the
type to produce SQL.
"""

from typing import Any, Union

import sqlglot
from sqlglot import exp
from sqlglot.dialects.dialect import DialectType
from sqlglot.errors import ParseError

from querybuilder.exceptions import SQLBuilderError, SQLParsingError

__all__ = ("ColumnName", "Expression", "OrderTarget", "to_order_target")


class ColumnName:
    """A column identifier, optionally table-qualified (``users.name``)."""

    __slots__ = ("name",)

    def __init__(self, name: str) -> None:
        self.name = name

    def to_sqlglot(self, dialect: DialectType = None) -> exp.Expression:
        return exp.to_column(self.name, dialect=dialect)

    def __hash__(self) -> int:
        return hash((type(self).__name__, self.name))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, type(self)):
            return False
        return self.name == other.name

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.name!r})"

    def __str__(self) -> str:
        return self.name


class Expression:
    """Opaque SQL fragment supplied by the caller.

    Holds either raw SQL text, parsed on demand in the dialect being rendered,
    or a prebuilt sqlglot expression which is used as-is.
    """

    __slots__ = ("value",)

    def __init__(self, value: Union[str, exp.Expression]) -> None:
        self.value = value

    @classmethod
    def random(cls) -> "Expression":
        """The random-ordering function, spelled per dialect by sqlglot."""
        return cls(exp.Rand())

    def to_sqlglot(self, dialect: DialectType = None) -> exp.Expression:
        """Resolve the fragment into a sqlglot expression.

        Raises:
            SQLParsingError: If raw SQL text cannot be parsed.

        Returns:
            A copy of the expression, safe to embed in a larger tree.
        """
        if isinstance(self.value, exp.Expression):
            return self.value.copy()
        try:
            return sqlglot.parse_one(self.value, dialect=dialect)
        except ParseError as e:
            msg = f"Could not parse ORDER BY expression {self.value!r}: {e}"
            raise SQLParsingError(msg) from e

    def sql(self, dialect: DialectType = None) -> str:
        return self.to_sqlglot(dialect).sql(dialect=dialect)

    def __hash__(self) -> int:
        if isinstance(self.value, exp.Expression):
            return hash((type(self).__name__, self.value.sql()))
        return hash((type(self).__name__, self.value))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, type(self)):
            return False
        return self.value == other.value

    def __repr__(self) -> str:
        if isinstance(self.value, exp.Expression):
            return f"{type(self).__name__}({self.value.sql()!r})"
        return f"{type(self).__name__}({self.value!r})"


OrderTarget = Union[ColumnName, Expression]


def to_order_target(value: Any) -> OrderTarget:
    """Coerce caller input into an orderable target.

    Plain strings are column names. ``ColumnName`` and ``Expression`` pass
    through unchanged.

    Raises:
        SQLBuilderError: If the value is of an unsupported type.
    """
    if isinstance(value, (ColumnName, Expression)):
        return value
    if isinstance(value, str):
        return ColumnName(value)
    msg = f"Unsupported ORDER BY target type: {type(value).__name__}"
    raise SQLBuilderError(msg)
