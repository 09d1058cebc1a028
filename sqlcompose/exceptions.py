from typing import Any, Optional

__all__ = (
    "ImproperConfigurationError",
    "IntegrityError",
    "RepositoryError",
    "SQLBuilderError",
    "SQLComposeError",
)


class SQLComposeError(Exception):
    """Base exception class from which all sqlcompose exceptions inherit."""

    detail: str

    def __init__(self, *args: Any, detail: str = "") -> None:
        """Initialize ``SQLComposeError``.

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


class SQLBuilderError(SQLComposeError):
    """Issues Building or Generating SQL statements."""

    def __init__(self, message: Optional[str] = None) -> None:
        if message is None:
            message = "Issues building SQL statement."
        super().__init__(message)


class ImproperConfigurationError(SQLComposeError):
    """Improper Configuration error.

    Raised when a statement is executed without an executor or configured
    with settings it cannot honour.
    """


class RepositoryError(SQLComposeError):
    """Base repository exception type."""


class IntegrityError(RepositoryError):
    """Data integrity error."""

