from __future__ import annotations

from typing import Any, Callable


def run_if_true(predicate: bool, action: Callable[[], Any]) -> None:
    """Call `action` when `predicate` is truthy; otherwise do nothing."""
    if predicate:
        action()


def negate(predicate: bool) -> bool:
    return not predicate


__all__ = ["negate", "run_if_true"]
