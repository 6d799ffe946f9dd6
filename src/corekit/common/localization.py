from __future__ import annotations

import gettext
import os
import re
from typing import List, Optional, Union

from pydantic import BaseModel, Field

from .logger import get_logger


logger = get_logger(__name__)

# Environment variable names for convenience configuration
ENV_LOCALE_DOMAIN = "COREKIT_LOCALE_DOMAIN"
ENV_LOCALE_DIR = "COREKIT_LOCALE_DIR"
ENV_LOCALE_LANGUAGES = "COREKIT_LOCALE_LANGUAGES"

DEFAULT_DOMAIN = "messages"

# printf-style conversion, including the literal "%%"
_PLACEHOLDER_RE = re.compile(r"%[#0\- +]*(?:\*|\d+)?(?:\.(?:\*|\d+))?[hlL]?([diouxXeEfFgGcrsa%])")


class LocalizationError(ValueError):
    """A localized string could not be formatted with the supplied arguments."""


def _getenv(name: str) -> Optional[str]:
    val = os.environ.get(name)
    return val if val not in (None, "") else None


def _positional_slots(text: str) -> int:
    """Number of positional arguments `text % args` consumes."""
    slots = 0
    for m in _PLACEHOLDER_RE.finditer(text):
        if m.group(1) == "%":
            continue
        slots += 1 + m.group(0).count("*")
    return slots


def _parse_languages(raw: Optional[str]) -> Optional[List[str]]:
    if not raw:
        return None
    norm = raw.replace(",", " ")
    langs = [tok for tok in norm.split() if tok]
    return langs or None


class LocalizationSettings(BaseModel):
    """
    Where to find gettext catalogues.

    Fields
    - domain: catalogue name, i.e. `<localedir>/<lang>/LC_MESSAGES/<domain>.mo`.
    - localedir: directory holding the catalogues (None uses the system default).
    - languages: explicit language preference list; None defers to gettext's
      LANGUAGE/LC_ALL/LC_MESSAGES/LANG lookup.
    """

    domain: str = Field(default=DEFAULT_DOMAIN, min_length=1)
    localedir: Optional[str] = None
    languages: Optional[List[str]] = None

    @classmethod
    def from_env(cls) -> "LocalizationSettings":
        return cls(
            domain=_getenv(ENV_LOCALE_DOMAIN) or DEFAULT_DOMAIN,
            localedir=_getenv(ENV_LOCALE_DIR),
            languages=_parse_languages(_getenv(ENV_LOCALE_LANGUAGES)),
        )


class Localizer:
    """
    Resolves keys to localized strings through a gettext catalogue.

    - The catalogue is loaded on first use; a missing catalogue falls back to
      `gettext.NullTranslations`, so keys come back unchanged.
    - `translations` may be injected directly (any `gettext.NullTranslations`
      subclass), which skips catalogue discovery entirely.
    """

    def __init__(
        self,
        settings: Optional[LocalizationSettings] = None,
        *,
        translations: Optional[gettext.NullTranslations] = None,
    ) -> None:
        self._settings = settings or LocalizationSettings()
        self._translations = translations

    @classmethod
    def from_env(cls) -> "Localizer":
        return cls(LocalizationSettings.from_env())

    @property
    def settings(self) -> LocalizationSettings:
        return self._settings

    def _ensure_loaded(self) -> gettext.NullTranslations:
        if self._translations is None:
            cfg = self._settings
            try:
                self._translations = gettext.translation(
                    cfg.domain, localedir=cfg.localedir, languages=cfg.languages
                )
            except FileNotFoundError:
                logger.debug(
                    "No catalogue for domain %r in %r; returning keys untranslated",
                    cfg.domain,
                    cfg.localedir,
                )
                self._translations = gettext.NullTranslations()
        return self._translations

    def localize(self, key: str, *args: object) -> str:
        """Translate `key`, then apply printf-style positional `args` if given.

        Arguments beyond the placeholders in the translated text are ignored,
        and "%%" collapses to "%" whenever arguments are supplied. Without
        arguments the translation is returned verbatim.
        """
        text = self._ensure_loaded().gettext(key)
        if not args:
            return text
        slots = _positional_slots(text)
        if slots == 0 and "%%" not in text:
            return text
        try:
            return text % args[:slots]
        except (TypeError, ValueError) as ex:
            raise LocalizationError(
                f"Cannot format localized string for key {key!r} with {len(args)} argument(s)"
            ) from ex


_default: Optional[Localizer] = None


def configure_localization(config: Union[LocalizationSettings, Localizer]) -> Localizer:
    """Replace the process-wide localizer used by `localized()`."""
    global _default
    _default = config if isinstance(config, Localizer) else Localizer(config)
    return _default


def reset_localization() -> None:
    """Forget the process-wide localizer; the next lookup rebuilds it from env."""
    global _default
    _default = None


def get_localizer() -> Localizer:
    global _default
    if _default is None:
        _default = Localizer.from_env()
    return _default


def localized(key: str, *args: object) -> str:
    return get_localizer().localize(key, *args)


__all__ = [
    "ENV_LOCALE_DIR",
    "ENV_LOCALE_DOMAIN",
    "ENV_LOCALE_LANGUAGES",
    "LocalizationError",
    "LocalizationSettings",
    "Localizer",
    "configure_localization",
    "get_localizer",
    "localized",
    "reset_localization",
]
