"""
Lift helpers with semantic namespaces.

    from resultchain import lift as L

    L.up.ok(user)              # value -> chain root
    L.up.fail("not found")     # message -> failing root
    L.call(fetch_user, 42)     # async fn -> lazy chain root
    await L.down.unsafe(chain) # chain -> value (raises on failure)
"""

from __future__ import annotations

from . import down, up

from .call import call, lifted, wrap_async
from .down import or_else, to_result, unsafe
from .up import fail, from_result, ok, optional, unit

__all__ = (
    # Namespaces
    "up",
    "down",
    # Up
    "ok",
    "unit",
    "fail",
    "from_result",
    "optional",
    # Call
    "call",
    "lifted",
    "wrap_async",
    # Down
    "to_result",
    "unsafe",
    "or_else",
)
