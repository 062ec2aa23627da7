from __future__ import annotations

import asyncio
import sys
from collections.abc import Callable, Coroutine
from dataclasses import dataclass, field
from pathlib import Path

from kungfu import Error, Ok, Result

_PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(_PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(_PROJECT_ROOT))


@dataclass(frozen=True, slots=True)
class Order:
    id: int
    total: float
    paid: bool = True


def _empty_orders() -> dict[int, Order]:
    return {}


@dataclass(slots=True)
class FakeStore:
    orders: dict[int, Order] = field(default_factory=_empty_orders)
    delay_seconds: float = 0.0
    shipped: list[int] = field(default_factory=list)

    async def fetch_order(self, order_id: int) -> Result[Order, str]:
        await asyncio.sleep(self.delay_seconds)
        order = self.orders.get(order_id)
        if order is None:
            return Error(f"order {order_id} not found")
        return Ok(order)

    async def ship(self, order: Order) -> Result[str, str]:
        await asyncio.sleep(self.delay_seconds)
        if order.total > 1000:
            return Error(f"order {order.id} needs manual review")
        self.shipped.append(order.id)
        return Ok(f"tracking-{order.id:05d}")


def banner(title: str) -> None:  # pragma: no cover (examples only)
    print(f"\n== {title} ==")


def run(main: Callable[[], Coroutine[object, object, None]]) -> None:  # pragma: no cover (examples only)
    asyncio.run(main())
