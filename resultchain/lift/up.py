"""
Lifting values into a chain.

Starting points for a chain: plain values, messages, resolved Results and
optionals become LazyCoroResult[T, str].
"""

from __future__ import annotations

from typing import Never

from kungfu import Error, LazyCoroResult, Ok, Result

from .._errors import require_message
from .._types import LCR


def ok[T](value: T) -> LCR[T, Never]:
    """
    Always-succeeding chain root.

    Example:
        from resultchain import lift as L

        await L.up.ok(User(id=42))  # Ok(User(id=42))
    """
    return LazyCoroResult.pure(value)


def unit() -> LCR[None, Never]:
    """Valueless success, Ok(None)."""
    return LazyCoroResult.pure(None)


def fail(message: str) -> LCR[Never, str]:
    """
    Always-failing chain root. Dual of ok().

    Raises EmptyErrorMessageError for an empty message.
    """
    require_message(message, where="fail")
    return Error(message).to_async()


def from_result[T](value: Result[T, str]) -> LCR[T, str]:
    """
    Lift an already computed Result.

    NOTE: not lazy, the Result exists already. Every combinator also takes
          a plain Result directly; this is for LazyCoroResult method chains.
    """
    async def run() -> Result[T, str]:
        return value

    return LazyCoroResult(run)


def optional[T](value: T | None, *, error: str) -> LCR[T, str]:
    """
    None becomes Error(error), anything else Ok(value).

    Example:
        from resultchain import lift as L

        L.up.optional(cache.get(user_id), error="user not cached")
    """
    require_message(error, where="optional")

    async def run() -> Result[T, str]:
        if value is None:
            return Error(error)
        return Ok(value)

    return LazyCoroResult(run)


__all__ = (
    "ok",
    "unit",
    "fail",
    "from_result",
    "optional",
)
