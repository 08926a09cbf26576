"""chatlex - Deferred localization for player-facing protocol messages.

Messages are defined once as Translation templates and filled with
arguments when sent. A filled TranslatedMessage renders two ways: the
translation identifier plus ordered parameters, for clients that localize
with their own language resources, and a locally substituted fallback, for
console output, logs and error values.

Public API:
    translate - Create a Translation from an identifier, parameter count and fallback
    Translation - Immutable message template
    TranslatedMessage - Translation with its arguments filled out
    TranslationPayload - Identifier and parameters bundled for transport
    RenderConfig - Rendering options (colour codes, default locale)
    ConstantString, LocaleTableString, ComputedString - Identifier resolvers

Exceptions:
    ChatlexError - Base exception class
    ParameterCountError - fill() called with the wrong number of arguments
    PatternError - Fallback or wrap pattern with the wrong number of markers
    TranslatedError - Error value form of a TranslatedMessage

Submodules:
    chatlex.messages - Predefined protocol translations and their catalog
    chatlex.markup - Colour markup expansion and %v substitution
    chatlex.diagnostics - Diagnostic codes, templates and formatter
    chatlex.locale_utils - Locale normalization helpers
"""

from .config import DEFAULT_RENDER_CONFIG, RenderConfig
from .diagnostics import (
    ChatlexError,
    ParameterCountError,
    PatternError,
    TranslatedError,
    UnknownTranslationError,
    UnsetTranslationError,
)
from .payload import TranslationPayload
from .resolvers import ComputedString, ConstantString, LocaleTableString, TranslationString
from .translation import TranslatedMessage, Translation, translate

# Version information - Auto-populated from package metadata
# SINGLE SOURCE OF TRUTH: pyproject.toml [project] version
from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _get_version

try:
    __version__ = _get_version("chatlex")
except PackageNotFoundError:
    # Development mode: package not installed yet
    __version__ = "0.0.0+dev"

__all__ = [
    "DEFAULT_RENDER_CONFIG",
    "ChatlexError",
    "ComputedString",
    "ConstantString",
    "LocaleTableString",
    "ParameterCountError",
    "PatternError",
    "RenderConfig",
    "TranslatedError",
    "TranslatedMessage",
    "Translation",
    "TranslationPayload",
    "TranslationString",
    "UnknownTranslationError",
    "UnsetTranslationError",
    "__version__",
    "translate",
]
