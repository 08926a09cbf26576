"""Shared constants for chatlex.

Centralizes the substitution marker syntax, the default locale and the
colour/style table used by the markup expander. Placing constants here
avoids circular imports between markup, translation and messages.

Constants are grouped by domain:
- Markers: positional substitution syntax shared by fallback and wrap patterns
- Locale: default locale for resolvers when the caller passes none
- Formatting codes: Bedrock section-sign codes keyed by markup tag name

Python 3.13+. Zero external dependencies.
"""

from types import MappingProxyType

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Markers
    "MARKER",
    "ESCAPED_PERCENT",
    "IDENTITY_FORMAT",
    # Locale
    "DEFAULT_LOCALE",
    "MAX_LOCALE_CACHE_SIZE",
    # Formatting codes
    "FORMAT_PREFIX",
    "RESET",
    "FORMATTING_CODES",
]

# ============================================================================
# MARKERS
# ============================================================================

# One positional substitution slot. Fallback patterns hold exactly as many
# markers as the translation has parameters; wrap patterns hold exactly one.
MARKER: str = "%v"

# Literal percent sign inside a pattern.
ESCAPED_PERCENT: str = "%%"

# Wrap pattern whose expansion is its single argument.
IDENTITY_FORMAT: str = MARKER

# ============================================================================
# LOCALE
# ============================================================================

DEFAULT_LOCALE: str = "en_US"

# Maximum cached babel.Locale instances.
MAX_LOCALE_CACHE_SIZE: int = 128

# ============================================================================
# FORMATTING CODES
# ============================================================================

FORMAT_PREFIX: str = "§"

RESET: str = FORMAT_PREFIX + "r"

FORMATTING_CODES: MappingProxyType[str, str] = MappingProxyType(
    {
        "black": FORMAT_PREFIX + "0",
        "dark-blue": FORMAT_PREFIX + "1",
        "dark-green": FORMAT_PREFIX + "2",
        "dark-aqua": FORMAT_PREFIX + "3",
        "dark-red": FORMAT_PREFIX + "4",
        "dark-purple": FORMAT_PREFIX + "5",
        "gold": FORMAT_PREFIX + "6",
        "grey": FORMAT_PREFIX + "7",
        "dark-grey": FORMAT_PREFIX + "8",
        "blue": FORMAT_PREFIX + "9",
        "green": FORMAT_PREFIX + "a",
        "aqua": FORMAT_PREFIX + "b",
        "red": FORMAT_PREFIX + "c",
        "purple": FORMAT_PREFIX + "d",
        "yellow": FORMAT_PREFIX + "e",
        "white": FORMAT_PREFIX + "f",
        "dark-yellow": FORMAT_PREFIX + "g",
        "quartz": FORMAT_PREFIX + "h",
        "iron": FORMAT_PREFIX + "i",
        "netherite": FORMAT_PREFIX + "j",
        "obfuscated": FORMAT_PREFIX + "k",
        "bold": FORMAT_PREFIX + "l",
        "redstone": FORMAT_PREFIX + "m",
        "copper": FORMAT_PREFIX + "n",
        "italic": FORMAT_PREFIX + "o",
        "material-gold": FORMAT_PREFIX + "p",
        "emerald": FORMAT_PREFIX + "q",
        "diamond": FORMAT_PREFIX + "s",
        "lapis": FORMAT_PREFIX + "t",
        "amethyst": FORMAT_PREFIX + "u",
    }
)
