from __future__ import annotations

import copy
from typing import Any, Callable, TypeVar

from pydantic import BaseModel

T = TypeVar("T")


def _clone(value: T) -> T:
    # Deep copy: nested containers and objects behave like value types
    if isinstance(value, BaseModel):
        return value.model_copy(deep=True)
    return copy.deepcopy(value)


def with_(value: T, block: Callable[[T], Any]) -> T:
    """Return a copy of `value` after `block` has mutated it.

        point = with_(Point(0, 0), lambda p: setattr(p, "x", 10))

    The copy is deep, so mutating nested attributes (`f.origin.x = 10`) never
    reaches the original. If `block` raises, the exception propagates
    unchanged and the partially mutated copy is dropped.
    """
    clone = _clone(value)
    block(clone)
    return clone


class With:
    """Mixin marking a type as copy-and-mutate capable.

        @dataclass
        class Frame(With):
            origin: Point = field(default_factory=Point)
            width: int = 0

        frame = Frame().with_(lambda f: setattr(f.origin, "x", 10))
    """

    def with_(self: T, block: Callable[[T], Any]) -> T:
        return with_(self, block)


__all__ = ["With", "with_"]
