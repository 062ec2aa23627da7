from .guard import ensure, ensure_thunk

__all__ = (
    "ensure",
    "ensure_thunk",
)
