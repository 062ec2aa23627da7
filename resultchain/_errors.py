from __future__ import annotations


class EmptyErrorMessageError(ValueError):
    """A failure was requested without an error message."""

    def __init__(self, where: str) -> None:
        self.where = where
        super().__init__(f"{where}: error message must be a non-empty string")


class UnwrapFailedError(Exception):
    """Tried to take the value out of a failed Result."""

    message: str

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(f"Unwrapped a failure: {message}")


def require_message(message: str, *, where: str) -> str:
    if not isinstance(message, str) or not message:
        raise EmptyErrorMessageError(where)
    return message


__all__ = ("EmptyErrorMessageError", "UnwrapFailedError", "require_message")
