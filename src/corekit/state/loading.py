from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, Optional, TypeVar, Union

from corekit.common.errors import AnyError

T = TypeVar("T")  # payload type; compared with ==


class _LoadingBase(Generic[T]):
    """Accessors shared by every loading-state variant.

    Each accessor is total: it answers for any variant without raising, so
    callers only need a full `match` when they care about every case.
    """

    @property
    def current_error(self) -> Optional[AnyError]:
        """The wrapped error when this is `Error`, else None."""
        return None

    @property
    def current_value(self) -> Optional[T]:
        """The payload when this is `Loaded`, else None.

        `InFlight.previous` is deliberately not reported here: only a finished
        load counts as having a current value. See `previous_value`.
        """
        return None

    @property
    def previous_value(self) -> Optional[T]:
        """The stale payload kept by `InFlight`, else None."""
        return None

    @property
    def is_in_flight(self) -> bool:
        return False


@dataclass(frozen=True)
class Idle(_LoadingBase[T]):
    """No load has been attempted yet."""


@dataclass(frozen=True)
class Error(_LoadingBase[T]):
    """The last attempt failed. Raw exceptions are wrapped in `AnyError`."""

    error: AnyError

    def __post_init__(self) -> None:
        if not isinstance(self.error, AnyError):
            object.__setattr__(self, "error", AnyError(self.error))

    @property
    def current_error(self) -> Optional[AnyError]:
        return self.error


@dataclass(frozen=True)
class InFlight(_LoadingBase[T]):
    """A load is running; `previous` optionally keeps the last loaded payload."""

    previous: Optional[T] = None

    @property
    def previous_value(self) -> Optional[T]:
        return self.previous

    @property
    def is_in_flight(self) -> bool:
        return True


@dataclass(frozen=True)
class Loaded(_LoadingBase[T]):
    """The last attempt succeeded with `value`."""

    value: T

    @property
    def current_value(self) -> Optional[T]:
        return self.value


# Closed union: consumers replace their reference with a new variant on each
# lifecycle event, e.g. Idle() -> InFlight() -> Loaded(v) | Error(e).
LoadingState = Union[Idle[T], Error[T], InFlight[T], Loaded[T]]


def idle() -> LoadingState[T]:
    return Idle()


def failed(error: BaseException) -> LoadingState[T]:
    return Error(AnyError(error))


def in_flight(previous: Optional[T] = None) -> LoadingState[T]:
    return InFlight(previous)


def loaded(value: T) -> LoadingState[T]:
    return Loaded(value)


def describe(state: LoadingState[T]) -> str:
    """Short human-readable rendering, mostly for logs."""
    match state:
        case Idle():
            return "Idle"
        case Error(error=e):
            return f"Error: {e.wrapped!r}"
        case InFlight(previous=None):
            return "In flight"
        case InFlight(previous=p):
            return f"In flight (previous: {p!r})"
        case Loaded(value=v):
            return f"Loaded: {v!r}"
        case _:
            raise TypeError(f"Unknown loading state variant: {type(state).__name__}")


__all__ = [
    "Error",
    "Idle",
    "InFlight",
    "Loaded",
    "LoadingState",
    "describe",
    "failed",
    "idle",
    "in_flight",
    "loaded",
]
