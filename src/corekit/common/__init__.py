"""
Common helpers for corekit.

Modules:
- errors: AnyError / AnyLocalizedError opaque, equality-comparable wrappers
- booleans, optionals, strings, sequences: one-line convenience predicates
- localization: gettext-backed `localized()` lookup
- copying: `with_` copy-and-mutate helper and `With` mixin
- logger: logging setup helpers
"""

__all__ = [
    "booleans",
    "copying",
    "errors",
    "localization",
    "logger",
    "optionals",
    "sequences",
    "strings",
]
