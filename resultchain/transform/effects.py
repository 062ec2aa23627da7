"""Side effect combinators

Effects run for observation only (logging, metrics, cleanup, notification).
Whatever they return is discarded and the incoming Result object is handed
on unchanged."""

from __future__ import annotations

import typing
from collections.abc import Awaitable, Callable
from typing import assert_never

from kungfu import Error, LazyCoroResult, Ok

from .._helpers import capture, resolve, suspend
from .._types import Res, Source, Thunk

def on_failure_with_error[T](
    result: Source[T],
    function: Callable[[str], Awaitable[typing.Any]],
    *,
    capture_context: bool = False,
) -> LazyCoroResult[T, str]:
    """Await function(message) on failure. Returns the incoming Result either way."""
    context = capture(capture_context)

    async def run() -> Res[T]:
        r = await resolve(result)
        match r:
            case Error(message):
                await suspend(lambda: function(message), context)
            case Ok(_):
                pass
            case _ as unreachable:
                assert_never(unreachable)
        return r

    return LazyCoroResult(run)

def on_failure[T](
    result: Source[T],
    function: Thunk[typing.Any],
    *,
    capture_context: bool = False,
) -> LazyCoroResult[T, str]:
    """Await function() on failure. Returns the incoming Result either way."""
    return on_failure_with_error(result, lambda _: function(), capture_context=capture_context)

def on_success_tap[T](
    result: Source[T],
    action: Callable[[T], Awaitable[typing.Any]],
    *,
    capture_context: bool = False,
) -> LazyCoroResult[T, str]:
    """Await action(value) on success. Returns the incoming Result either way."""
    context = capture(capture_context)

    async def run() -> Res[T]:
        r = await resolve(result)
        match r:
            case Ok(value):
                await suspend(lambda: action(value), context)
            case Error(_):
                pass
            case _ as unreachable:
                assert_never(unreachable)
        return r

    return LazyCoroResult(run)

def on_success_tap_thunk[T](
    result: Source[T],
    action: Thunk[typing.Any],
    *,
    capture_context: bool = False,
) -> LazyCoroResult[T, str]:
    """on_success_tap() with an action that ignores the value."""
    return on_success_tap(result, lambda _: action(), capture_context=capture_context)

__all__ = (
    "on_failure",
    "on_failure_with_error",
    "on_success_tap",
    "on_success_tap_thunk",
)
