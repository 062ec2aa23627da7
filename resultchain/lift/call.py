"""
Calling async functions as chain stages.

Helpers that turn an async function returning Result into a lazy
LazyCoroResult, so it only runs when the chain is awaited.
"""

from __future__ import annotations

from collections.abc import Awaitable, Callable
from functools import wraps

from kungfu import LazyCoroResult, Result

from .._types import LCR


def wrap_async[T](
    thunk: Callable[[], Awaitable[Result[T, str]]],
) -> LCR[T, str]:
    """
    Wrap a zero-arg async callable into a LazyCoroResult.

    Prefer call() when arguments are known at the call site:
        L.call(fetch_user, user_id)
        L.wrap_async(lambda: fetch_user(user_id))

    NOTE: pass the callable, not a coroutine. A coroutine would already be
          created and could only be awaited once.
    """
    async def run() -> Result[T, str]:
        return await thunk()

    return LazyCoroResult(run)


def lifted[T, **P](
    func: Callable[P, Awaitable[Result[T, str]]],
) -> Callable[P, LCR[T, str]]:
    """
    Decorator: calls to func return a LazyCoroResult instead of a coroutine.

    Example:
        @L.lifted
        async def fetch_user(user_id: int) -> Result[User, str]:
            ...

        await map_ok(fetch_user(42), render)
    """
    @wraps(func)
    def wrapper(*args: P.args, **kwargs: P.kwargs) -> LCR[T, str]:
        return wrap_async(lambda: func(*args, **kwargs))

    return wrapper


def call[T, **P](
    func: Callable[P, Awaitable[Result[T, str]]],
    *args: P.args,
    **kwargs: P.kwargs,
) -> LCR[T, str]:
    """Call func lazily with arguments. Each await of the result calls it again."""
    return wrap_async(lambda: func(*args, **kwargs))


__all__ = (
    "call",
    "lifted",
    "wrap_async",
)
