"""Rendering configuration."""

from typing import Any, Final

from sqlglot.dialects.dialect import DialectType

__all__ = ("COMPILER_CONFIG_SLOTS", "DEFAULT_COMPILER_CONFIG", "CompilerConfig")

COMPILER_CONFIG_SLOTS: Final = ("dialect", "identify", "pretty")


class CompilerConfig:
    """Options handed to sqlglot when clauses are rendered to SQL text."""

    __slots__ = COMPILER_CONFIG_SLOTS

    def __init__(self, dialect: DialectType = None, pretty: bool = False, identify: bool = False) -> None:
        """Initialize compiler configuration.

        Args:
            dialect: sqlglot dialect used for parsing raw fragments and generating SQL
            pretty: Format the generated SQL over several lines
            identify: Quote every identifier in the generated SQL
        """
        self.dialect = dialect
        self.pretty = pretty
        self.identify = identify

    def replace(self, **changes: Any) -> "CompilerConfig":
        """Create a new CompilerConfig with specified changes."""
        for key in changes:
            if key not in COMPILER_CONFIG_SLOTS:
                msg = f"{key!r} is not a field in {type(self).__name__}"
                raise TypeError(msg)

        kwargs = {slot: getattr(self, slot) for slot in COMPILER_CONFIG_SLOTS}
        kwargs.update(changes)
        return type(self)(**kwargs)

    def generator_options(self) -> "dict[str, Any]":
        return {"dialect": self.dialect, "pretty": self.pretty, "identify": self.identify}

    def __hash__(self) -> int:
        return hash((str(self.dialect) if self.dialect is not None else None, self.pretty, self.identify))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, type(self)):
            return False
        return all(getattr(self, slot) == getattr(other, slot) for slot in COMPILER_CONFIG_SLOTS)

    def __repr__(self) -> str:
        field_strs = [f"{slot}={getattr(self, slot)!r}" for slot in COMPILER_CONFIG_SLOTS]
        return f"{self.__class__.__name__}({', '.join(field_strs)})"


DEFAULT_COMPILER_CONFIG: Final = CompilerConfig()
