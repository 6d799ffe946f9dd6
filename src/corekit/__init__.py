"""
corekit: small language-convenience utilities.

Subpackages:
- state: `LoadingState` variants describing an asynchronously loaded value
- common: error wrappers, bool/optional/string/sequence helpers, localization,
  copy-and-mutate
"""

import logging

from .common.booleans import negate, run_if_true
from .common.copying import With, with_
from .common.errors import AnyError, AnyLocalizedError, errors_equal
from .common.localization import LocalizationError, LocalizationSettings, Localizer, localized
from .common.optionals import is_absent, is_absent_or_empty, is_present, to_url
from .common.sequences import safe_get
from .common.strings import is_blank
from .state.loading import (
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

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "AnyError",
    "AnyLocalizedError",
    "Error",
    "Idle",
    "InFlight",
    "Loaded",
    "LoadingState",
    "LocalizationError",
    "LocalizationSettings",
    "Localizer",
    "With",
    "describe",
    "errors_equal",
    "failed",
    "idle",
    "in_flight",
    "is_absent",
    "is_absent_or_empty",
    "is_blank",
    "is_present",
    "loaded",
    "localized",
    "negate",
    "run_if_true",
    "safe_get",
    "to_url",
    "with_",
]
