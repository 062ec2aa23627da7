"""
Core type definitions for resultchain.

Aliases shared by every combinator module.
"""

from __future__ import annotations

from collections.abc import Awaitable, Callable

from kungfu import LazyCoroResult, Result

# ============================================================================
# Result shapes
# ============================================================================

# Res = Result whose failure channel is a plain error message
# NOTE: the valueless Result is Res[None], success is Ok(None).
type Res[T] = Result[T, str]

# Source = plain Result or anything that suspends to produce one
# NOTE: coroutines are single-use, LazyCoroResult can be awaited many times.
type Source[T] = Res[T] | Awaitable[Res[T]]

# ============================================================================
# Continuation shapes
# ============================================================================

# AsyncPredicate = suspending test on a success value
type AsyncPredicate[T] = Callable[[T], Awaitable[bool]]

# Thunk = zero-arg suspending computation
type Thunk[R] = Callable[[], Awaitable[R]]

# LCR = LazyCoroResult shortcut
type LCR[T, E] = LazyCoroResult[T, E]

__all__ = (
    "Res",
    "Source",
    "AsyncPredicate",
    "Thunk",
    "LCR",
)
