"""Tests for the Chain fluent builder."""

from __future__ import annotations

from contextvars import ContextVar

import pytest
from kungfu import Error, Ok, Result

from resultchain import chain, lift as L
from tests.conftest import Spy, error_of, outcome, value_of

tenant: ContextVar[str] = ContextVar("tenant", default="none")


async def positive(x: int) -> bool:
    return x > 0


async def increment(x: int) -> Result[int, str]:
    return Ok(x + 1)


async def stop(x: int) -> Result[int, str]:
    return Error("stop")


async def times_ten(x: int) -> int:
    return x * 10


class TestChain:
    @pytest.mark.asyncio
    async def test_success_path(self):
        result = await (
            chain(Ok(5))
            .ensure(positive, "must be positive")
            .on_success_bind(increment)
            .map_ok(times_ten)
        )
        assert value_of(result) == 60

    @pytest.mark.asyncio
    async def test_failure_skips_remaining_stages(self):
        third = Spy(returns=Ok(0))
        reported = Spy()

        result = await (
            chain(Ok(5))
            .on_success_bind(increment)
            .on_success_bind(stop)
            .on_success_bind(third)
            .on_failure_with_error(reported)
        )

        assert error_of(result) == "stop"
        assert third.count == 0
        assert reported.calls == [("stop",)]

    @pytest.mark.asyncio
    async def test_thunk_stages(self):
        tapped = Spy()
        result = await (
            chain(L.unit())
            .ensure_thunk(Spy(returns=True), "closed")
            .on_success_tap_thunk(tapped)
            .on_success_thunk(Spy(returns=1))
            .map_thunk(Spy(returns=2))
            .on_success_bind_thunk(Spy(returns=Ok(3)))
        )
        assert value_of(result) == 3
        assert tapped.calls == [()]

    @pytest.mark.asyncio
    async def test_side_effect_stages(self):
        on_fail = Spy()
        on_ok = Spy()
        result = await (
            chain(Error("bad"))
            .on_success(Spy(returns=0))
            .on_success_tap(on_ok)
            .on_failure(on_fail)
        )
        assert error_of(result) == "bad"
        assert on_fail.count == 1
        assert on_ok.count == 0

    @pytest.mark.asyncio
    async def test_on_both_is_terminal(self):
        async def render(result: Result[int, str]) -> str:
            return str(outcome(result))

        reply = await chain(Ok(1)).on_success_bind(increment).on_both(render)
        assert reply == "('ok', 2)"

    @pytest.mark.asyncio
    async def test_compile_gives_rerunnable_lazy_result(self):
        function = Spy(returns=True)
        compiled = chain(Ok(2)).ensure(function, "no").compile()
        assert value_of(await compiled) == 2
        assert value_of(await compiled) == 2
        assert function.count == 2

    @pytest.mark.asyncio
    async def test_compile_plain_root(self):
        assert error_of(await chain(Error("bad")).compile()) == "bad"

    @pytest.mark.asyncio
    async def test_capture_context_default_and_override(self):
        seen: list[str] = []

        async def record(value: int) -> int:
            seen.append(tenant.get())
            return value

        tenant.set("built")
        pipeline = (
            chain(Ok(1), capture_context=True)
            .map_ok(record)
            .map_ok(record, capture_context=False)
        )
        tenant.set("awaited")
        await pipeline

        assert seen == ["built", "awaited"]

