from __future__ import annotations

from typing import Hashable


def _has_own_eq(err: BaseException) -> bool:
    # Exceptions compare by identity unless their class opts into value equality
    return type(err).__eq__ is not BaseException.__eq__


def errors_equal(lhs: BaseException, rhs: BaseException) -> bool:
    """Generic equality for arbitrary exceptions.

    - Same object: equal.
    - If either error's class defines its own `__eq__`, that comparison decides.
    - Otherwise errors are equal when they share the exact type and `args`.
    """
    if lhs is rhs:
        return True
    if _has_own_eq(lhs) or _has_own_eq(rhs):
        return bool(lhs == rhs)
    return type(lhs) is type(rhs) and lhs.args == rhs.args


def _error_hash_key(err: BaseException) -> Hashable:
    key: Hashable = err if _has_own_eq(err) else (type(err), err.args)
    try:
        hash(key)
    except TypeError:
        # Coarser than equality, which keeps equal errors in the same bucket
        return type(err)
    return key


class AnyError(Exception):
    """Opaque, equality-comparable wrapper around any exception.

    The wrapped error is never inspected beyond what `errors_equal` needs, so
    heterogeneous errors can sit inside value types such as `Error` states.
    """

    def __init__(self, wrapped: BaseException) -> None:
        if isinstance(wrapped, AnyError):
            wrapped = wrapped.wrapped
        if not isinstance(wrapped, BaseException):
            raise TypeError(f"AnyError wraps exceptions, got {type(wrapped).__name__}")
        super().__init__(wrapped)
        self.wrapped = wrapped

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, AnyError):
            return NotImplemented
        return errors_equal(self.wrapped, other.wrapped)

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.wrapped!r})"

    def __str__(self) -> str:
        return str(self.wrapped)


class AnyLocalizedError(AnyError):
    """`AnyError` that is also hashable and carries a human-readable description."""

    @property
    def description(self) -> str:
        text = getattr(self.wrapped, "localized_description", None)
        if isinstance(text, str) and text:
            return text
        return str(self.wrapped) or type(self.wrapped).__name__

    def __hash__(self) -> int:
        return hash(_error_hash_key(self.wrapped))


__all__ = ["AnyError", "AnyLocalizedError", "errors_equal"]
