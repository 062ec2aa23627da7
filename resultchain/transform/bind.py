"""Bind combinators

on_success_bind is flat-map: the continuation yields a Result of its own,
which becomes the outcome of the stage without nesting. A failure it
introduces flows on through the rest of the chain like any other."""

from __future__ import annotations

from collections.abc import Awaitable, Callable
from typing import assert_never

from kungfu import Error, LazyCoroResult, Ok

from .._helpers import capture, resolve, suspend
from .._types import Res, Source, Thunk

def on_success_bind[T, K](
    result: Source[T],
    function: Callable[[T], Awaitable[Res[K]]],
    *,
    capture_context: bool = False,
) -> LazyCoroResult[K, str]:
    """
    Await function(value) and return the Result it yields.

    Failures pass with the same message and the function is not called.

    Example:
        async def reserve(order: Order) -> Result[Reservation, str]: ...

        await on_success_bind(place_order(cart), reserve)
    """
    context = capture(capture_context)

    async def run() -> Res[K]:
        r = await resolve(result)
        match r:
            case Error(message):
                return Error(message)
            case Ok(value):
                return await suspend(lambda: function(value), context)
            case _ as unreachable:
                assert_never(unreachable)

    return LazyCoroResult(run)

def on_success_bind_thunk[T, K](
    result: Source[T],
    function: Thunk[Res[K]],
    *,
    capture_context: bool = False,
) -> LazyCoroResult[K, str]:
    """on_success_bind() with a continuation that ignores the value."""
    return on_success_bind(result, lambda _: function(), capture_context=capture_context)

__all__ = (
    "on_success_bind",
    "on_success_bind_thunk",
)
