"""
Guard combinators
=================

Turn a success into a failure when a suspending check does not hold.
"""

from __future__ import annotations

from typing import assert_never

from kungfu import Error, LazyCoroResult, Ok

from .._errors import require_message
from .._helpers import capture, resolve, suspend
from .._types import AsyncPredicate, Res, Source, Thunk


def ensure[T](
    result: Source[T],
    predicate: AsyncPredicate[T],
    error_message: str,
    *,
    capture_context: bool = False,
) -> LazyCoroResult[T, str]:
    """
    Fail with error_message unless predicate(value) resolves truthy.

    An incoming failure is passed on unchanged and the predicate is not
    called. The original value is dropped when the check fails.

    error_message is only read when the check fails; an empty one raises
    EmptyErrorMessageError at that point.

    Example:
        async def in_stock(item: Item) -> bool: ...

        checked = ensure(fetch_item(42), in_stock, "item is sold out")
        await checked  # Ok(item) or Error("item is sold out")
    """
    context = capture(capture_context)

    async def run() -> Res[T]:
        r = await resolve(result)
        match r:
            case Error(_):
                return r
            case Ok(value):
                if await suspend(lambda: predicate(value), context):
                    return r
                return Error(require_message(error_message, where="ensure"))
            case _ as unreachable:
                assert_never(unreachable)

    return LazyCoroResult(run)


def ensure_thunk[T](
    result: Source[T],
    predicate: Thunk[bool],
    error_message: str,
    *,
    capture_context: bool = False,
) -> LazyCoroResult[T, str]:
    """ensure() with a predicate that does not look at the value (valueless Results)."""
    return ensure(
        result,
        lambda _: predicate(),
        error_message,
        capture_context=capture_context,
    )


__all__ = ("ensure", "ensure_thunk")
