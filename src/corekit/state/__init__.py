"""
Value types describing the status of asynchronously loaded data.

Instances are immutable; consumers move between states by replacing their
reference with a freshly built variant.
"""

from .loading import (
    Error,
    Idle,
    InFlight,
    Loaded,
    LoadingState,
    describe,
    failed,
    idle,
    in_flight,
    loaded,
)

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
