"""Locale utilities for BCP-47 to POSIX conversion.

Centralizes the conversion of the opaque locale values handed to
identifier resolvers. Callers may pass a ``babel.Locale``, a locale code
string in either BCP-47 (``en-GB``) or POSIX (``en_GB``) form, or ``None``.

Python 3.13+.
"""

from __future__ import annotations

import functools
import logging
from typing import TYPE_CHECKING

from babel import Locale, UnknownLocaleError

from chatlex.constants import DEFAULT_LOCALE, MAX_LOCALE_CACHE_SIZE

if TYPE_CHECKING:
    from chatlex.types import LocaleLike

__all__ = [
    "clear_locale_cache",
    "get_babel_locale",
    "locale_code",
    "normalize_locale",
]

logger = logging.getLogger(__name__)


def normalize_locale(code: str) -> str:
    """Convert BCP-47 locale code to POSIX format.

    Args:
        code: BCP-47 locale code (e.g., "en-GB", "pt-BR")

    Returns:
        POSIX-formatted locale code (e.g., "en_GB", "pt_BR")

    Example:
        >>> normalize_locale("en-GB")
        'en_GB'
        >>> normalize_locale("en")  # Already normalized
        'en'
    """
    return code.strip().replace("-", "_")


def locale_code(locale: LocaleLike, default: str = DEFAULT_LOCALE) -> str:
    """Reduce any accepted locale value to a POSIX locale code.

    Args:
        locale: babel.Locale, locale code string, or None
        default: Code returned for None or an empty string

    Returns:
        POSIX locale code
    """
    if locale is None:
        return default
    if isinstance(locale, Locale):
        return str(locale)
    return normalize_locale(locale) or default


@functools.lru_cache(maxsize=MAX_LOCALE_CACHE_SIZE)
def get_babel_locale(code: str) -> Locale | None:
    """Get a Babel Locale object with caching.

    Thread-safe via lru_cache internal locking.

    Args:
        code: Locale code (BCP-47 or POSIX format accepted)

    Returns:
        Babel Locale object, or None if Babel does not know the locale
    """
    try:
        return Locale.parse(normalize_locale(code))
    except (UnknownLocaleError, ValueError) as e:
        logger.warning("Unknown locale '%s': %s", code, e)
        return None


def clear_locale_cache() -> None:
    """Clear the get_babel_locale cache."""
    get_babel_locale.cache_clear()
