"""Render configuration for translated messages.

Provides a single frozen dataclass that controls how the server-local
fallback is rendered and which locale resolvers see when the caller has
none to offer.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from dataclasses import dataclass

from chatlex.constants import DEFAULT_LOCALE

__all__ = ["DEFAULT_RENDER_CONFIG", "RenderConfig"]


@dataclass(frozen=True, slots=True)
class RenderConfig:
    """Immutable configuration for rendering translated messages.

    All fields have sensible defaults; ``RenderConfig()`` with no arguments
    produces the in-game rendering (section-sign colour codes included).

    Attributes:
        colour: Expand markup into section-sign codes (default: True). When
            False, markup tags are dropped, which suits console output and
            log files.
        default_locale: Locale passed to identifier resolvers when the
            caller supplies ``None`` (default: "en_US").

    Example:
        >>> from chatlex.messages import MESSAGE_JOIN
        >>> MESSAGE_JOIN.fill("Steve").render_fallback(RenderConfig(colour=False))
        'Steve joined the game'
    """

    colour: bool = True
    default_locale: str = DEFAULT_LOCALE

    def __post_init__(self) -> None:
        """Validate configuration values at construction time.

        Raises:
            ValueError: If default_locale is empty.
        """
        if not self.default_locale:
            msg = "default_locale must be a non-empty locale code"
            raise ValueError(msg)


DEFAULT_RENDER_CONFIG: RenderConfig = RenderConfig()
