from __future__ import annotations

from typing import Any, Optional, Sized

import httpx

from .logger import get_logger
from .strings import is_blank


logger = get_logger(__name__)


def is_absent(value: Optional[Sized]) -> bool:
    return value is None


def is_present(value: Optional[Sized]) -> bool:
    return not is_absent(value)


def is_absent_or_empty(value: Optional[Sized]) -> bool:
    """True when `value` is None or has zero length."""
    if value is None:
        return True
    return len(value) == 0


def to_url(value: Optional[Any]) -> Optional[httpx.URL]:
    """Parse an optional string into an `httpx.URL`.

    Returns None for None, non-strings, blank strings and anything httpx
    rejects as malformed. Relative references such as "www.google.com" are
    accepted as-is, without a scheme being added.
    """
    if not isinstance(value, str) or is_blank(value):
        return None
    try:
        return httpx.URL(value)
    except httpx.InvalidURL as ex:
        logger.debug("Ignoring unparseable URL %r: %s", value, ex)
        return None


__all__ = [
    "is_absent",
    "is_absent_or_empty",
    "is_present",
    "to_url",
]
