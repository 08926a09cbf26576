"""chatlex exception hierarchy with structured diagnostics.

All exceptions accept either a plain message or a Diagnostic object.
Programming errors (wrong parameter counts, malformed patterns) also
subclass the matching builtin so generic handlers still recognise them.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from .codes import Diagnostic

if TYPE_CHECKING:
    from chatlex.translation import TranslatedMessage

__all__ = [
    "ChatlexError",
    "ParameterCountError",
    "PatternError",
    "TranslatedError",
    "UnknownTranslationError",
    "UnsetTranslationError",
]


class ChatlexError(Exception):
    """Base exception for all chatlex errors.

    Attributes:
        diagnostic: Structured diagnostic information (optional)
    """

    def __init__(self, message: str | Diagnostic) -> None:
        """Initialize ChatlexError.

        Args:
            message: Error message string OR Diagnostic object
        """
        if isinstance(message, Diagnostic):
            self.diagnostic: Diagnostic | None = message
            super().__init__(message.format_error())
        else:
            self.diagnostic = None
            super().__init__(message)


class ParameterCountError(ChatlexError, TypeError):
    """Translation filled with the wrong number of arguments.

    Both the translation and the call site are fixed in code, so a mismatch
    is always a defect. It is never caught inside chatlex.

    Attributes:
        expected: Parameter count declared by the translation
        received: Number of arguments actually passed
        pattern: Fallback pattern of the translation, for identification
    """

    def __init__(
        self,
        message: str | Diagnostic,
        *,
        expected: int,
        received: int,
        pattern: str,
    ) -> None:
        super().__init__(message)
        self.expected = expected
        self.received = received
        self.pattern = pattern


class PatternError(ChatlexError, ValueError):
    """Fallback or wrap pattern holds the wrong number of markers.

    Attributes:
        pattern: The offending pattern
        expected: Number of markers required
        found: Number of markers present
    """

    def __init__(
        self,
        message: str | Diagnostic,
        *,
        pattern: str,
        expected: int,
        found: int,
    ) -> None:
        super().__init__(message)
        self.pattern = pattern
        self.expected = expected
        self.found = found


class UnsetTranslationError(ChatlexError):
    """Zero-value Translation used as if it had been constructed."""


class UnknownTranslationError(ChatlexError, KeyError):
    """Translation key not present in the catalog.

    Attributes:
        key: The key that was looked up
    """

    def __init__(self, message: str | Diagnostic, *, key: str) -> None:
        super().__init__(message)
        self.key = key

    def __str__(self) -> str:
        # KeyError.__str__ would repr() the message
        return str(self.args[0])


class TranslatedError(ChatlexError):
    """Error value form of a filled translation.

    str() of the exception is the server-local fallback rendering. The
    originating message stays reachable so a handler that catches the error
    can still send it to a client for deferred localization.

    Attributes:
        translated: The TranslatedMessage this error was produced from
    """

    def __init__(self, translated: TranslatedMessage) -> None:
        super().__init__(translated.render_fallback())
        self.translated = translated
