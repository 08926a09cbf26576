"""Predefined protocol translations.

Translation keys come from the client resource pack's language files
(``texts/en_GB.lang``). The keys keep their leading ``%`` so the client
treats them as translatable.

The catalog is built once at import time and exposed read-only. Lookups
need no locking.

Python 3.13+.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from types import MappingProxyType

from chatlex.diagnostics import ChatlexError, ErrorTemplate, UnknownTranslationError
from chatlex.resolvers import ConstantString
from chatlex.translation import Translation, translate
from chatlex.types import TranslationKey

__all__ = [
    "CATALOG",
    "MESSAGE_COMMAND_NO_TARGETS",
    "MESSAGE_COMMAND_SYNTAX",
    "MESSAGE_COMMAND_UNKNOWN",
    "MESSAGE_COMMAND_USAGE",
    "MESSAGE_JOIN",
    "MESSAGE_QUIT",
    "MESSAGE_SERVER_DISCONNECT",
    "build_catalog",
    "get_translation",
]

logger = logging.getLogger(__name__)

MESSAGE_JOIN = translate("%multiplayer.player.joined", 1, "%v joined the game").enc(
    "<yellow>%v</yellow>"
)
MESSAGE_QUIT = translate("%multiplayer.player.left", 1, "%v left the game").enc(
    "<yellow>%v</yellow>"
)
MESSAGE_SERVER_DISCONNECT = translate(
    "%disconnect.disconnected", 0, "Disconnected by Server"
).enc("<yellow>%v</yellow>")

MESSAGE_COMMAND_SYNTAX = translate(
    "%commands.generic.syntax", 3, 'Syntax error: unexpected value: at "%v>>%v<<%v"'
)
MESSAGE_COMMAND_USAGE = translate("%commands.generic.usage", 1, "Usage: %v")
MESSAGE_COMMAND_UNKNOWN = translate(
    "%commands.generic.unknown",
    1,
    'Unknown command: "%v": Please check that the command exists and that you '
    "have permission to use it.",
)
MESSAGE_COMMAND_NO_TARGETS = translate(
    "%commands.generic.noTargetMatch", 0, "No targets matched selector"
)


def build_catalog(
    translations: Iterable[Translation],
) -> MappingProxyType[TranslationKey, Translation]:
    """Index translations by their constant key into a read-only mapping.

    Args:
        translations: Translations built on ConstantString resolvers

    Returns:
        Read-only mapping of translation key to Translation

    Raises:
        ChatlexError: If a key appears twice, or a translation has no
            constant key to index it by
    """
    catalog: dict[TranslationKey, Translation] = {}
    for translation in translations:
        if not isinstance(translation.string, ConstantString):
            raise ChatlexError(ErrorTemplate.translation_not_indexable(translation.fallback))
        key = translation.string.key
        if key in catalog:
            raise ChatlexError(ErrorTemplate.duplicate_translation(key))
        catalog[key] = translation
        logger.debug("Registered translation: %s", key)
    return MappingProxyType(catalog)


CATALOG: MappingProxyType[TranslationKey, Translation] = build_catalog(
    (
        MESSAGE_JOIN,
        MESSAGE_QUIT,
        MESSAGE_SERVER_DISCONNECT,
        MESSAGE_COMMAND_SYNTAX,
        MESSAGE_COMMAND_USAGE,
        MESSAGE_COMMAND_UNKNOWN,
        MESSAGE_COMMAND_NO_TARGETS,
    )
)


def get_translation(key: TranslationKey) -> Translation:
    """Look up a predefined translation by key.

    Raises:
        UnknownTranslationError: If no translation has that key
    """
    try:
        return CATALOG[key]
    except KeyError:
        raise UnknownTranslationError(
            ErrorTemplate.translation_not_found(key), key=key
        ) from None
