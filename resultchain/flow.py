"""
Fluent chaining.

Chain wraps a stage and exposes every combinator as a method, so
a pipeline reads top to bottom:

    reply = await (
        chain(L.call(fetch_order, order_id))
        .ensure(is_paid, "order is not paid")
        .on_success_bind(ship)
        .on_failure_with_error(report)
        .on_both(to_response)
    )

The builder's capture_context is the default for each stage; any method
can override it.
"""

from __future__ import annotations

import typing
from collections.abc import Awaitable, Callable, Coroutine
from dataclasses import dataclass

from kungfu import LazyCoroResult

from ._helpers import resolve
from ._types import AsyncPredicate, Res, Source, Thunk
from .control.guard import ensure, ensure_thunk
from .transform.bind import on_success_bind, on_success_bind_thunk
from .transform.effects import (
    on_failure,
    on_failure_with_error,
    on_success_tap,
    on_success_tap_thunk,
)
from .transform.mapping import (
    map_ok,
    map_thunk,
    on_success,
    on_success_thunk,
)
from .transform.terminal import on_both


@dataclass(frozen=True, slots=True)
class Chain[T]:
    """
    Fluent builder over LazyCoroResult[T, str].
    """

    source: Source[T]
    capture_context: bool = False

    def _capture(self, override: bool | None) -> bool:
        return self.capture_context if override is None else override

    def _next[K](self, stage: LazyCoroResult[K, str]) -> Chain[K]:
        return Chain(stage, self.capture_context)

    def ensure(
        self,
        predicate: AsyncPredicate[T],
        error_message: str,
        *,
        capture_context: bool | None = None,
    ) -> Chain[T]:
        return self._next(
            ensure(self.source, predicate, error_message, capture_context=self._capture(capture_context))
        )

    def ensure_thunk(
        self,
        predicate: Thunk[bool],
        error_message: str,
        *,
        capture_context: bool | None = None,
    ) -> Chain[T]:
        return self._next(
            ensure_thunk(self.source, predicate, error_message, capture_context=self._capture(capture_context))
        )

    def map_ok[K](
        self,
        function: Callable[[T], Awaitable[K]],
        *,
        capture_context: bool | None = None,
    ) -> Chain[K]:
        return self._next(map_ok(self.source, function, capture_context=self._capture(capture_context)))

    def map_thunk[K](self, function: Thunk[K], *, capture_context: bool | None = None) -> Chain[K]:
        return self._next(map_thunk(self.source, function, capture_context=self._capture(capture_context)))

    def on_success[K](
        self,
        function: Callable[[T], Awaitable[K]],
        *,
        capture_context: bool | None = None,
    ) -> Chain[K]:
        return self._next(on_success(self.source, function, capture_context=self._capture(capture_context)))

    def on_success_thunk[K](self, function: Thunk[K], *, capture_context: bool | None = None) -> Chain[K]:
        return self._next(
            on_success_thunk(self.source, function, capture_context=self._capture(capture_context))
        )

    def on_success_bind[K](
        self,
        function: Callable[[T], Awaitable[Res[K]]],
        *,
        capture_context: bool | None = None,
    ) -> Chain[K]:
        return self._next(
            on_success_bind(self.source, function, capture_context=self._capture(capture_context))
        )

    def on_success_bind_thunk[K](
        self,
        function: Thunk[Res[K]],
        *,
        capture_context: bool | None = None,
    ) -> Chain[K]:
        return self._next(
            on_success_bind_thunk(self.source, function, capture_context=self._capture(capture_context))
        )

    def on_success_tap(
        self,
        action: Callable[[T], Awaitable[typing.Any]],
        *,
        capture_context: bool | None = None,
    ) -> Chain[T]:
        return self._next(on_success_tap(self.source, action, capture_context=self._capture(capture_context)))

    def on_success_tap_thunk(
        self,
        action: Thunk[typing.Any],
        *,
        capture_context: bool | None = None,
    ) -> Chain[T]:
        return self._next(
            on_success_tap_thunk(self.source, action, capture_context=self._capture(capture_context))
        )

    def on_failure(self, function: Thunk[typing.Any], *, capture_context: bool | None = None) -> Chain[T]:
        return self._next(on_failure(self.source, function, capture_context=self._capture(capture_context)))

    def on_failure_with_error(
        self,
        function: Callable[[str], Awaitable[typing.Any]],
        *,
        capture_context: bool | None = None,
    ) -> Chain[T]:
        return self._next(
            on_failure_with_error(self.source, function, capture_context=self._capture(capture_context))
        )

    def on_both[K](
        self,
        function: Callable[[Res[T]], Awaitable[K]],
        *,
        capture_context: bool | None = None,
    ) -> Coroutine[typing.Any, typing.Any, K]:
        """Terminal stage."""
        return on_both(self.source, function, capture_context=self._capture(capture_context))

    def compile(self) -> LazyCoroResult[T, str]:
        if isinstance(self.source, LazyCoroResult):
            return self.source
        source = self.source

        async def run() -> Res[T]:
            return await resolve(source)

        return LazyCoroResult(run)

    def __await__(self) -> typing.Generator[typing.Any, None, Res[T]]:
        return resolve(self.source).__await__()


def chain[T](source: Source[T], *, capture_context: bool = False) -> Chain[T]:
    """Start a fluent chain from a Result or anything that produces one."""
    return Chain(source, capture_context)


__all__ = ("Chain", "chain")
