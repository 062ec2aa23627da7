from __future__ import annotations

from _infra import FakeStore, Order, banner, run

from resultchain import chain, lift as L
from kungfu import Error, Ok, Result


async def is_paid(order: Order) -> bool:
    return order.paid


async def report(message: str) -> None:
    print(f"  ! {message}")


async def to_reply(result: Result[str, str]) -> str:
    match result:
        case Ok(tracking):
            return f"shipped: {tracking}"
        case Error(message):
            return f"rejected: {message}"


async def main() -> None:
    banner("01_quickstart: ensure -> bind -> taps -> on_both")

    store = FakeStore(
        orders={
            1: Order(id=1, total=40.0),
            2: Order(id=2, total=40.0, paid=False),
            3: Order(id=3, total=5000.0),
        },
        delay_seconds=0.01,
    )

    for order_id in (1, 2, 3, 4):
        reply = await (
            chain(L.call(store.fetch_order, order_id))
            .ensure(is_paid, "order is not paid")
            .on_success_bind(store.ship)
            .on_failure_with_error(report)
            .on_both(to_reply)
        )
        print(f"order {order_id}: {reply}")


if __name__ == "__main__":
    run(main)
