"""Shared test helpers.

Outcome accessors go through pattern matching only, the same way the
library reads a Result.
"""

from __future__ import annotations

import typing

from kungfu import Error, Ok, Result


class Spy:
    """Async callable that records each call and returns a fixed value."""

    def __init__(self, returns: typing.Any = None) -> None:
        self.returns = returns
        self.calls: list[tuple[typing.Any, ...]] = []

    async def __call__(self, *args: typing.Any) -> typing.Any:
        self.calls.append(args)
        return self.returns

    @property
    def count(self) -> int:
        return len(self.calls)


def value_of[T](result: Result[T, str]) -> T:
    match result:
        case Ok(value):
            return value
        case Error(message):
            raise AssertionError(f"expected Ok, got Error({message!r})")
    raise AssertionError(f"not a Result: {result!r}")


def error_of(result: Result[typing.Any, str]) -> str:
    match result:
        case Error(message):
            return message
        case Ok(value):
            raise AssertionError(f"expected Error, got Ok({value!r})")
    raise AssertionError(f"not a Result: {result!r}")


def outcome(result: Result[typing.Any, str]) -> tuple[str, typing.Any]:
    """Comparable view of a Result."""
    match result:
        case Ok(value):
            return ("ok", value)
        case Error(message):
            return ("error", message)
    raise AssertionError(f"not a Result: {result!r}")
