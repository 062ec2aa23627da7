"""Internal helpers for combinators.

Functions shared by the combinator modules: bridging plain and pending
Results, and running continuations in a captured context. Not part of the
public API."""

from __future__ import annotations

import asyncio
import contextvars
from collections.abc import Awaitable, Callable

from kungfu import Error, Ok

from ._types import Res, Source

# Bridge (Source -> Result)
async def resolve[T](source: Source[T]) -> Res[T]:
    """
    Settle the operand of a combinator.

    A plain Result is returned as is, so the combinator branches on it
    without suspending. Anything else is awaited.
    """
    if isinstance(source, (Ok, Error)):
        return source
    return await source

# Resumption context
def capture(capture_context: bool) -> contextvars.Context | None:
    """
    Snapshot the caller's context when requested.

    Called when a combinator is built, not when it runs.
    """
    return contextvars.copy_context() if capture_context else None

async def suspend[R](call: Callable[[], Awaitable[R]], context: contextvars.Context | None) -> R:
    """
    Await a continuation, the single suspension point of every combinator.

    Without a captured context the continuation runs in the awaiting task.
    With one, it runs in a task bound to that context which is awaited
    right away, so stage ordering does not change.
    """
    if context is None:
        return await call()

    async def drive() -> R:
        return await call()

    return await asyncio.create_task(drive(), context=context)

__all__ = (
    "resolve",
    "capture",
    "suspend",
)
