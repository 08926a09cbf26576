"""Type aliases for the translation domain.

Provides semantic type aliases used throughout chatlex and by user code
when annotating resolver implementations and call sites.

Python 3.13+.
"""

from babel import Locale

__all__ = [
    "LocaleLike",
    "TranslationKey",
]

type TranslationKey = str
"""Protocol translation identifier (e.g., '%multiplayer.player.joined')."""

type LocaleLike = Locale | str | None
"""Opaque locale handed to resolvers: babel.Locale, BCP-47/POSIX code, or None."""
