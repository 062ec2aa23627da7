"""Unexpected faults and cancellation stay outside the Result channel."""

from __future__ import annotations

import asyncio

import pytest
from kungfu import Error, Ok

from resultchain import (
    ensure,
    lift as L,
    map_ok,
    on_both,
    on_failure,
    on_success_bind,
    on_success_tap,
)
from tests.conftest import Spy


class Boom(RuntimeError):
    pass


async def explode(*_args) -> None:
    raise Boom("continuation blew up")


class TestFaultsPropagate:
    @pytest.mark.asyncio
    async def test_ensure_predicate_fault(self):
        with pytest.raises(Boom):
            await ensure(Ok(1), explode, "unused")

    @pytest.mark.asyncio
    async def test_map_fault(self):
        with pytest.raises(Boom):
            await map_ok(Ok(1), explode)

    @pytest.mark.asyncio
    async def test_bind_fault(self):
        with pytest.raises(Boom):
            await on_success_bind(Ok(1), explode)

    @pytest.mark.asyncio
    async def test_tap_fault(self):
        with pytest.raises(Boom):
            await on_success_tap(Ok(1), explode)

    @pytest.mark.asyncio
    async def test_on_failure_fault(self):
        with pytest.raises(Boom):
            await on_failure(Error("bad"), explode)

    @pytest.mark.asyncio
    async def test_on_both_fault(self):
        with pytest.raises(Boom):
            await on_both(Ok(1), explode)

    @pytest.mark.asyncio
    async def test_fault_with_captured_context(self):
        with pytest.raises(Boom):
            await map_ok(Ok(1), explode, capture_context=True)

    @pytest.mark.asyncio
    async def test_later_stages_do_not_run_after_fault(self):
        after = Spy()
        with pytest.raises(Boom):
            await on_success_tap(map_ok(Ok(1), explode), after)
        assert after.count == 0


class TestCancellation:
    @pytest.mark.asyncio
    async def test_cancelled_chain_never_resumes(self):
        started = asyncio.Event()

        async def hang(value: int) -> int:
            started.set()
            await asyncio.Event().wait()
            return value

        after = Spy()
        pipeline = on_success_tap(map_ok(Ok(1), hang), after)
        task = asyncio.create_task(L.to_result(pipeline))
        await started.wait()
        task.cancel()

        with pytest.raises(asyncio.CancelledError):
            await task
        assert after.count == 0


async def number() -> int:
    return 42


class TestNotAResult:
    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "build",
        [
            lambda source: ensure(source, Spy(returns=True), "unused"),
            lambda source: map_ok(source, Spy()),
            lambda source: on_success_bind(source, Spy(returns=Ok(0))),
            lambda source: on_success_tap(source, Spy()),
            lambda source: on_failure(source, Spy()),
            lambda source: L.unsafe(source),
            lambda source: L.or_else(source, 0),
        ],
    )
    async def test_non_result_operand_fails_loudly(self, build):
        with pytest.raises(AssertionError):
            await build(number())
