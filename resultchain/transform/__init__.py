from .bind import on_success_bind, on_success_bind_thunk
from .effects import on_failure, on_failure_with_error, on_success_tap, on_success_tap_thunk
from .mapping import map_ok, map_thunk, on_success, on_success_thunk
from .terminal import on_both

__all__ = (
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
)
