from typing import Any, Optional

__all__ = ("QueryBuilderError", "SQLBuilderError", "SQLParsingError")


class QueryBuilderError(Exception):
    """Base exception class from which all querybuilder exceptions inherit."""

    detail: str

    def __init__(self, *args: Any, detail: str = "") -> None:
        """Initialize ``QueryBuilderError``.

        Args:
            *args: args are converted to :class:`str` before passing to :class:`Exception`
            detail: detail of the exception.
        """
        str_args = [str(arg) for arg in args if arg]
        if not detail:
            if str_args:
                detail, *str_args = str_args
            elif hasattr(self, "detail"):
                detail = self.detail
        self.detail = detail
        super().__init__(*str_args)

    def __repr__(self) -> str:
        if self.detail:
            return f"{self.__class__.__name__} - {self.detail}"
        return self.__class__.__name__

    def __str__(self) -> str:
        return " ".join((*self.args, self.detail)).strip()


class SQLParsingError(QueryBuilderError):
    """Issues parsing SQL fragments."""

    def __init__(self, message: Optional[str] = None) -> None:
        if message is None:
            message = "Issues parsing SQL fragment."
        super().__init__(message)


class SQLBuilderError(QueryBuilderError):
    """Issues building or generating SQL clauses."""

    def __init__(self, message: Optional[str] = None) -> None:
        if message is None:
            message = "Issues building SQL clause."
        super().__init__(message)
