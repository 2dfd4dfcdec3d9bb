"""Errors raised by the user-management client."""

from __future__ import annotations

from enum import IntEnum
from typing import Any


class ErrorCode(IntEnum):
    """Category of a client error."""

    NETWORK_EXCEPTION = 0
    DELETE_ACTIVE_USER_EXCEPTION = 1


class ClientError(Exception):
    """An error carrying a category code and its underlying cause."""

    def __init__(self, status_code: ErrorCode, err: Any) -> None:
        super().__init__(status_code, err)
        self.status_code = status_code
        self.err = err

    def __str__(self) -> str:
        return f"status: {int(self.status_code)}, err: {self.err}"


def new_network_error(cause: Any) -> ClientError:
    """Wrap *cause* as a network error."""
    error = ClientError(ErrorCode.NETWORK_EXCEPTION, cause)
    if isinstance(cause, BaseException):
        error.__cause__ = cause
    return error


def new_error_attempt_delete_active_user(user: str) -> ClientError:
    """Return the error for an attempt to delete an active user."""
    return ClientError(
        ErrorCode.DELETE_ACTIVE_USER_EXCEPTION,
        Exception(f"deleting active user {user} is not supported"),
    )