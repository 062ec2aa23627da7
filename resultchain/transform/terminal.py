"""Terminal combinators

on_both hands the settled Result to one function regardless of its state
and returns whatever that function produces, unwrapped. Typical use is the
last stage of a chain: turning the outcome into a response, a status code,
a message."""

from __future__ import annotations

import typing
from collections.abc import Awaitable, Callable, Coroutine

from .._helpers import capture, resolve, suspend
from .._types import Res, Source

def on_both[T, K](
    result: Source[T],
    function: Callable[[Res[T]], Awaitable[K]],
    *,
    capture_context: bool = False,
) -> Coroutine[typing.Any, typing.Any, K]:
    """Await function(result) exactly once, success or failure, and return its value."""
    context = capture(capture_context)

    async def run() -> K:
        r = await resolve(result)
        return await suspend(lambda: function(r), context)

    return run()

__all__ = ("on_both",)
