from __future__ import annotations

from typing import Optional


def is_blank(value: Optional[str]) -> bool:
    """Return True for None, "" or a string made only of whitespace/newlines."""
    if value is None:
        return True
    return not value.strip()


__all__ = ["is_blank"]
