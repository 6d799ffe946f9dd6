from __future__ import annotations

from typing import Optional, Sequence, TypeVar

T = TypeVar("T")


def safe_get(values: Sequence[T], index: int, default: Optional[T] = None) -> Optional[T]:
    """Bounds-checked indexing.

    Returns `values[index]` when `0 <= index < len(values)`, else `default`.
    Negative indices are treated as out of range rather than counted from the end.
    """
    if 0 <= index < len(values):
        return values[index]
    return default


__all__ = ["safe_get"]
