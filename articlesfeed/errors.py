"""Application errors that carry an HTTP status code."""

from __future__ import annotations

from http import HTTPStatus

__all__ = [
    "CustomError",
    "BadRequestError",
    "UnauthorizedError",
    "NotFoundError",
    "AuthorNotFoundError",
    "InvalidSearchPathError",
    "get_error_code",
]


class CustomError(Exception):
    """Base class for errors that map to a specific HTTP status code."""

    code: int = HTTPStatus.INTERNAL_SERVER_ERROR
    default_message: str = ""

    def __init__(self, message: str | None = None) -> None:
        self.message = self.default_message if message is None else message
        super().__init__(self.message)

    def __str__(self) -> str:
        return self.message


class BadRequestError(CustomError):
    """The request was malformed or failed validation."""

    code = HTTPStatus.BAD_REQUEST


class UnauthorizedError(CustomError):
    """The caller is not authorised."""

    code = HTTPStatus.UNAUTHORIZED


class NotFoundError(CustomError):
    """The requested entity does not exist."""

    code = HTTPStatus.NOT_FOUND


class AuthorNotFoundError(NotFoundError):
    """No author exists with the requested name."""

    default_message = "author not found"


class InvalidSearchPathError(Exception):
    """The database schema search path could not be selected."""

    def __init__(self, message: str = "invalid search path") -> None:
        super().__init__(message)


def _error_chain(err: BaseException | None):
    seen: set[int] = set()
    while err is not None and id(err) not in seen:
        seen.add(id(err))
        yield err
        if err.__cause__ is not None:
            err = err.__cause__
        elif not err.__suppress_context__:
            err = err.__context__
        else:
            err = None


def get_error_code(err: BaseException) -> int:
    """Return the status code of the first CustomError in the chain, else 500."""
    for item in _error_chain(err):
        if isinstance(item, CustomError):
            return int(item.code)
    return int(HTTPStatus.INTERNAL_SERVER_ERROR)