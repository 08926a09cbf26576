"""Translation templates and filled-out translated messages.

A Translation is defined once per message kind and filled with arguments
each time the message is sent. The filled TranslatedMessage renders two
ways:

- resolve(): the client-deferred form. The translation identifier for the
  locale, decorated with the wrap format. The arguments are not substituted;
  they travel separately in ``params`` and the client localizes both.
- render_fallback(): the server-local form. The fallback pattern filled
  with the arguments and decorated with the wrap format. Used for console
  output, logs, ``str()`` and error values.

Example:
    >>> join = translate("%multiplayer.player.joined", 1, "%v joined the game")
    >>> join = join.enc("<yellow>%v</yellow>")
    >>> message = join.fill("Steve")
    >>> message.resolve("en_GB")
    '§e%multiplayer.player.joined§r'
    >>> message.params
    ('Steve',)
    >>> str(message)
    '§eSteve joined the game§r'

Thread Safety:
    Both types are frozen dataclasses holding tuples and immutable
    resolvers. Templates are shared freely; fill() touches no shared state.

Python 3.13+.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, replace

from chatlex.config import DEFAULT_RENDER_CONFIG, RenderConfig
from chatlex.constants import IDENTITY_FORMAT
from chatlex.diagnostics import (
    ErrorTemplate,
    ParameterCountError,
    PatternError,
    TranslatedError,
    UnsetTranslationError,
)
from chatlex.markup import (
    count_markers,
    decorate,
    drop_markup,
    embed,
    expand_markup,
    positional_format,
)
from chatlex.payload import TranslationPayload
from chatlex.resolvers import ConstantString, TranslationString
from chatlex.types import LocaleLike

__all__ = [
    "TranslatedMessage",
    "Translation",
    "translate",
]

logger = logging.getLogger(__name__)


def _check_fallback(fallback: str, params: int) -> None:
    found = count_markers(fallback)
    if found != params:
        diagnostic = ErrorTemplate.fallback_marker_mismatch(fallback, params, found)
        raise PatternError(diagnostic, pattern=fallback, expected=params, found=found)


def _check_format(format: str) -> None:  # noqa: A002
    found = count_markers(format)
    if found != 1:
        diagnostic = ErrorTemplate.format_marker_mismatch(format, found)
        raise PatternError(diagnostic, pattern=format, expected=1, found=found)


def _count_mismatch(translation: Translation, received: int) -> ParameterCountError:
    diagnostic = ErrorTemplate.parameter_count_mismatch(
        translation.fallback, translation.params, received
    )
    return ParameterCountError(
        diagnostic,
        expected=translation.params,
        received=received,
        pattern=translation.fallback,
    )


def translate(string: TranslationString | str, params: int, fallback: str) -> Translation:
    """Create a Translation for a translation string.

    ``params`` is the exact number of arguments Translation.fill accepts.
    ``fallback`` is a 'standard' rendering of the message used whenever the
    message is rendered locally; it holds one ``%v`` per parameter.

    The returned translation has the identity format ``%v``. Call
    Translation.enc to decorate it.

    Args:
        string: Identifier resolver, or a plain key for a ConstantString
        params: Number of parameters, >= 0
        fallback: Fallback pattern with exactly ``params`` markers

    Returns:
        New Translation

    Raises:
        ValueError: If params is negative
        TypeError: If string is neither a str nor a TranslationString
        PatternError: If fallback holds a different number of markers
    """
    if params < 0:
        raise ValueError(ErrorTemplate.negative_parameter_count(params).message)
    translation = Translation(
        string=string, params=params, fallback=fallback, format=IDENTITY_FORMAT
    )
    logger.debug("Created translation %r with %d parameter(s)", fallback, params)
    return translation


@dataclass(frozen=True, slots=True)
class Translation:
    """Translation string with formatting and a fixed parameter count.

    ``Translation()`` is the zero value: it has no format and reports
    ``is_zero``. Every other Translation is validated on construction.

    Attributes:
        string: Resolver producing the identifier for a locale
        params: Number of arguments fill() requires
        fallback: Pattern with ``params`` markers, rendered locally
        format: Wrap pattern with exactly one marker
    """

    string: TranslationString | None = None
    params: int = 0
    fallback: str = ""
    format: str = ""

    def __post_init__(self) -> None:
        if self.is_zero:
            return
        if isinstance(self.string, str):
            object.__setattr__(self, "string", ConstantString(self.string))
        elif not isinstance(self.string, TranslationString):
            raise TypeError(ErrorTemplate.invalid_translation_string(self.string).message)
        if self.params < 0:
            raise ValueError(ErrorTemplate.negative_parameter_count(self.params).message)
        _check_fallback(self.fallback, self.params)
        _check_format(self.format)

    @property
    def is_zero(self) -> bool:
        """True if the Translation was not created through translate()."""
        return self.format == ""

    def enc(self, format: str) -> Translation:  # noqa: A002
        """Return a copy with the translation encapsulated in ``format``.

        ``format`` holds exactly one ``%v`` marking where the translation
        goes, such as ``'<yellow>%v</yellow>'``, and may use colour markup.

        Raises:
            PatternError: If format does not hold exactly one marker
            UnsetTranslationError: If called on the zero value
        """
        if self.is_zero:
            raise UnsetTranslationError(ErrorTemplate.translation_unset())
        # An empty format would turn the copy into the zero value.
        _check_format(format)
        return replace(self, format=format)

    def fill(self, *args: object) -> TranslatedMessage:
        """Fill out the translation with ``args``.

        Each argument is converted to its display string now, so later
        changes to an argument do not alter what the client receives.

        Raises:
            ParameterCountError: If ``len(args)`` differs from ``params``
            UnsetTranslationError: If called on the zero value
        """
        if self.is_zero:
            raise UnsetTranslationError(ErrorTemplate.translation_unset())
        if len(args) != self.params:
            error = _count_mismatch(self, len(args))
            logger.error(str(error.diagnostic))
            raise error
        return TranslatedMessage(
            translation=self,
            params=tuple(str(arg) for arg in args),
            fallback_params=args,
        )

    def resolve(self, locale: LocaleLike, config: RenderConfig = DEFAULT_RENDER_CONFIG) -> str:
        """Shorthand for ``fill().resolve(locale)``.

        Raises:
            ParameterCountError: If the translation requires parameters
        """
        return self.fill().resolve(locale, config)


@dataclass(frozen=True, slots=True)
class TranslatedMessage:
    """Translation with its arguments filled out.

    ``params`` and ``fallback_params`` always have the same length: the
    first holds the display strings sent to clients, the second the
    original values used for local rendering.
    """

    translation: Translation
    params: tuple[str, ...]
    fallback_params: tuple[object, ...]

    def __post_init__(self) -> None:
        if self.translation.is_zero:
            raise UnsetTranslationError(ErrorTemplate.translation_unset())
        object.__setattr__(self, "params", tuple(self.params))
        object.__setattr__(self, "fallback_params", tuple(self.fallback_params))
        for values in (self.params, self.fallback_params):
            if len(values) != self.translation.params:
                raise _count_mismatch(self.translation, len(values))

    def resolve(self, locale: LocaleLike, config: RenderConfig = DEFAULT_RENDER_CONFIG) -> str:
        """Resolve the identifier for ``locale`` and decorate it.

        The arguments are not substituted here. Send ``params`` alongside
        the result so the client can complete the message.
        """
        if locale is None:
            locale = config.default_locale
        string = self.translation.string
        assert string is not None  # only the zero value has no resolver
        return decorate(self.translation.format, string.resolve(locale), colour=config.colour)

    def render_fallback(self, config: RenderConfig = DEFAULT_RENDER_CONFIG) -> str:
        """Render the fallback pattern with the original arguments, decorated.

        The fallback is placed inside the wrap before markup is expanded, so
        a tag closed in the fallback restores the wrap's formatting.
        Arguments are inserted afterwards and never read as markup.
        """
        pattern = embed(self.translation.format, self.translation.fallback)
        pattern = expand_markup(pattern) if config.colour else drop_markup(pattern)
        return positional_format(pattern, *self.fallback_params)

    def payload(
        self, locale: LocaleLike, config: RenderConfig = DEFAULT_RENDER_CONFIG
    ) -> TranslationPayload:
        """Bundle the resolved identifier with its parameters for transport."""
        return TranslationPayload(message=self.resolve(locale, config), parameters=self.params)

    def as_display_string(self) -> str:
        return self.render_fallback()

    def as_error(self) -> TranslatedError:
        """Return an exception carrying the fallback rendering as its message."""
        return TranslatedError(self)

    def __str__(self) -> str:
        return self.render_fallback()
