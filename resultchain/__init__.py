"""
resultchain: asynchronous railway-oriented combinators over kungfu's Result.

A Result[T, str] is Ok(value) or Error(message). Combinators chain
suspending steps; once a step fails, later transformations are skipped and
the original message reaches the end of the chain.

Architecture:
- Combinator functions over any Result source (*_thunk for zero-arg continuations)
- Lift helpers to enter and leave a chain
- Chain fluent builder
"""

# Core types
from ._types import LCR, AsyncPredicate, Res, Source, Thunk

# Fluent API
from .flow import Chain, chain

# Lift helpers
from . import lift
from .lift import (
    call,
    fail,
    from_result,
    lifted,
    ok,
    optional,
    or_else,
    to_result,
    unit,
    unsafe,
    wrap_async,
)

# Guards
from .control import ensure, ensure_thunk

# Transform / effects / terminal
from .transform import (
    map_ok,
    map_thunk,
    on_both,
    on_failure,
    on_failure_with_error,
    on_success,
    on_success_bind,
    on_success_bind_thunk,
    on_success_tap,
    on_success_tap_thunk,
    on_success_thunk,
)

# Errors
from ._errors import EmptyErrorMessageError, UnwrapFailedError

__all__ = (
    # Types
    "LCR",
    "AsyncPredicate",
    "Res",
    "Source",
    "Thunk",
    # Fluent API
    "Chain",
    "chain",
    # Lift
    "lift",
    "call",
    "fail",
    "from_result",
    "lifted",
    "ok",
    "optional",
    "or_else",
    "to_result",
    "unit",
    "unsafe",
    "wrap_async",
    # Guards
    "ensure",
    "ensure_thunk",
    # Transform
    "map_ok",
    "map_thunk",
    "on_both",
    "on_failure",
    "on_failure_with_error",
    "on_success",
    "on_success_bind",
    "on_success_bind_thunk",
    "on_success_tap",
    "on_success_tap_thunk",
    "on_success_thunk",
    # Errors
    "EmptyErrorMessageError",
    "UnwrapFailedError",
)
