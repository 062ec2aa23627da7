"""
Leaving a chain.

Run a chain and get a Result or a bare value back.
"""

from __future__ import annotations

from typing import assert_never

from kungfu import Error, Ok

from .._errors import UnwrapFailedError
from .._helpers import resolve
from .._types import Res, Source


async def to_result[T](source: Source[T]) -> Res[T]:
    """Run the chain and return its Result."""
    return await resolve(source)


async def unsafe[T](source: Source[T]) -> T:
    """
    Run and return the value.

    Raises UnwrapFailedError carrying the failure message. Use at edges
    where a failure is a bug, not an expected outcome.
    """
    match await resolve(source):
        case Ok(value):
            return value
        case Error(message):
            raise UnwrapFailedError(message)
        case _ as unreachable:
            assert_never(unreachable)


async def or_else[T](source: Source[T], default: T) -> T:
    """Run and return the value, or default on failure."""
    match await resolve(source):
        case Ok(value):
            return value
        case Error(_):
            return default
        case _ as unreachable:
            assert_never(unreachable)


__all__ = (
    "to_result",
    "unsafe",
    "or_else",
)
