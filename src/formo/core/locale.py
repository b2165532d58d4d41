"""Locale normalization helpers.

Formo threads a ``babel.Locale`` explicitly from facade construction down
to the type converter. This module is the only place that reads the
process environment to find the default locale.
"""
from __future__ import annotations

from typing import Optional, Union

from babel import Locale, UnknownLocaleError, default_locale

FALLBACK_LOCALE = "en_US"

LocaleLike = Union[Locale, str]


def parse_locale(value: LocaleLike) -> Locale:
    """Normalize a locale identifier to a ``babel.Locale``.

    Accepts ``Locale`` instances and identifiers such as ``"de"``,
    ``"de_DE"``, ``"de-DE"`` or ``"de_DE.UTF-8"``.

    Raises:
        ValueError: If the identifier is empty or unknown to babel.
    """
    if isinstance(value, Locale):
        return value
    ident = str(value or "").strip()
    if not ident:
        raise ValueError("Locale identifier must be a non-empty string")
    # Drop encoding/modifier suffixes (``de_DE.UTF-8``, ``de_DE@euro``).
    ident = ident.split(".", 1)[0].split("@", 1)[0]
    try:
        return Locale.parse(ident.replace("-", "_"))
    except (UnknownLocaleError, ValueError) as exc:
        raise ValueError(f"Unknown locale: {value!r}") from exc


def current_locale() -> Locale:
    """Return the process-wide default locale.

    Uses the POSIX environment (``LANGUAGE``, ``LC_ALL``, ``LC_CTYPE``,
    ``LANG``) and falls back to ``en_US`` when nothing usable is set.
    """
    ident: Optional[str] = default_locale()
    if ident:
        try:
            return parse_locale(ident)
        except ValueError:
            pass
    return Locale.parse(FALLBACK_LOCALE)


__all__ = ["FALLBACK_LOCALE", "LocaleLike", "parse_locale", "current_locale"]
