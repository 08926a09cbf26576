"""Identifier resolvers for translations.

A resolver turns a locale into the string that identifies a message for
that locale. For protocol messages this is a constant translation key that
the client looks up in its own language resources, but the capability is a
single pure function of the locale so other backends may vary the key.

Variants:
    ConstantString - Same key for every locale
    LocaleTableString - Key looked up in an immutable per-locale table
    ComputedString - Key produced by a pure callable

Python 3.13+.
"""

from __future__ import annotations

from collections.abc import Callable, Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Protocol, runtime_checkable

from babel import negotiate_locale

from chatlex.constants import DEFAULT_LOCALE
from chatlex.locale_utils import get_babel_locale, locale_code, normalize_locale
from chatlex.types import LocaleLike, TranslationKey

__all__ = [
    "ComputedString",
    "ConstantString",
    "LocaleTableString",
    "TranslationString",
]


@runtime_checkable
class TranslationString(Protocol):
    """Value that can resolve the identifier of a message for a locale."""

    def resolve(self, locale: LocaleLike) -> str:
        """Return the identifier to use for ``locale``."""
        ...


@dataclass(frozen=True, slots=True)
class ConstantString:
    """Resolver that ignores the locale and always returns ``key``.

    Example:
        >>> ConstantString("%multiplayer.player.joined").resolve("de_DE")
        '%multiplayer.player.joined'
    """

    key: TranslationKey

    def resolve(self, locale: LocaleLike) -> str:  # noqa: ARG002 - locale-independent
        return self.key

    def __str__(self) -> str:
        return self.key


@dataclass(frozen=True, slots=True)
class LocaleTableString:
    """Resolver backed by an immutable locale-to-identifier table.

    Lookup order for a requested locale:
    1. Exact code, case-insensitive (``en_GB``)
    2. Babel alias or canonical form (``en-gb`` -> ``en_GB``)
    3. Bare language (``en_GB`` -> ``en``)
    4. ``default``

    ``None`` is looked up as ``default_locale``.

    Attributes:
        table: Mapping of locale code to identifier. Keys are normalized to
            POSIX form and the mapping is stored read-only.
        default: Identifier returned when no table entry matches
        default_locale: Locale code used when resolving ``None``
    """

    table: Mapping[str, str]
    default: str
    default_locale: str = DEFAULT_LOCALE
    _by_lower: Mapping[str, str] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        normalized = {normalize_locale(code): key for code, key in self.table.items()}
        object.__setattr__(self, "table", MappingProxyType(normalized))
        object.__setattr__(
            self,
            "_by_lower",
            MappingProxyType({code.lower(): code for code in normalized}),
        )

    def __hash__(self) -> int:
        return hash((tuple(sorted(self.table.items())), self.default, self.default_locale))

    def resolve(self, locale: LocaleLike) -> str:
        code = locale_code(locale, self.default_locale)
        candidates = [code]
        parsed = get_babel_locale(code)
        if parsed is not None:
            candidates.extend((str(parsed), parsed.language))
        match = negotiate_locale(candidates, list(self.table))
        if match is None:
            return self.default
        return self.table[self._by_lower[match.lower()]]


@dataclass(frozen=True, slots=True)
class ComputedString:
    """Resolver that delegates to a pure function of the locale.

    The function must not depend on mutable state; translations built on a
    ComputedString are shared across threads like any other.

    Example:
        >>> shout = ComputedString(lambda locale: f"%chat.shout.{locale}")
        >>> shout.resolve("fr_FR")
        '%chat.shout.fr_FR'
    """

    func: Callable[[LocaleLike], str]

    def resolve(self, locale: LocaleLike) -> str:
        return self.func(locale)
