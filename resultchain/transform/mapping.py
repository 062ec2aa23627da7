"""Mapping combinators

Transform the success value with a suspending function and wrap what it
returns. The function cannot fail through the Result; use on_success_bind
for that."""

from __future__ import annotations

from collections.abc import Awaitable, Callable
from typing import assert_never

from kungfu import Error, LazyCoroResult, Ok

from .._helpers import capture, resolve, suspend
from .._types import Res, Source, Thunk

def map_ok[T, K](
    result: Source[T],
    function: Callable[[T], Awaitable[K]],
    *,
    capture_context: bool = False,
) -> LazyCoroResult[K, str]:
    """Await function(value) and wrap it in Ok. Failures pass with the same message."""
    context = capture(capture_context)

    async def run() -> Res[K]:
        r = await resolve(result)
        match r:
            case Error(message):
                return Error(message)
            case Ok(value):
                return Ok(await suspend(lambda: function(value), context))
            case _ as unreachable:
                assert_never(unreachable)

    return LazyCoroResult(run)

def map_thunk[T, K](
    result: Source[T],
    function: Thunk[K],
    *,
    capture_context: bool = False,
) -> LazyCoroResult[K, str]:
    """map_ok() with a function that ignores the value."""
    return map_ok(result, lambda _: function(), capture_context=capture_context)

def on_success[T, K](
    result: Source[T],
    function: Callable[[T], Awaitable[K]],
    *,
    capture_context: bool = False,
) -> LazyCoroResult[K, str]:
    """Success-path name for map_ok()."""
    return map_ok(result, function, capture_context=capture_context)

def on_success_thunk[T, K](
    result: Source[T],
    function: Thunk[K],
    *,
    capture_context: bool = False,
) -> LazyCoroResult[K, str]:
    """Success-path name for map_thunk()."""
    return map_thunk(result, function, capture_context=capture_context)

__all__ = (
    "map_ok",
    "map_thunk",
    "on_success",
    "on_success_thunk",
)
