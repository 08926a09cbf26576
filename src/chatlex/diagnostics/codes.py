"""Diagnostic codes and data structures.

Defines error codes and diagnostic messages.
Python 3.13+. Zero external dependencies.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Literal

__all__ = [
    "Diagnostic",
    "DiagnosticCode",
]


class DiagnosticCode(Enum):
    """Error codes with unique identifiers.

    Organized by category:
        1000-1999: Translation errors (parameter counts, unset templates)
        2000-2999: Pattern errors (fallback and wrap marker counts)
        3000-3999: Catalog errors (lookups and registration)
    """

    # Translation errors (1000-1999)
    PARAMETER_COUNT_MISMATCH = 1001
    TRANSLATION_UNSET = 1002
    NEGATIVE_PARAMETER_COUNT = 1003
    INVALID_TRANSLATION_STRING = 1004

    # Pattern errors (2000-2999)
    FALLBACK_MARKER_MISMATCH = 2001
    FORMAT_MARKER_MISMATCH = 2002
    FORMAT_ARGUMENT_MISMATCH = 2003

    # Catalog errors (3000-3999)
    TRANSLATION_NOT_FOUND = 3001
    DUPLICATE_TRANSLATION = 3002
    TRANSLATION_NOT_INDEXABLE = 3003


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """Structured diagnostic message.

    Inspired by Rust compiler diagnostics. Carries enough context to identify
    the offending translation without a stack trace.

    Attributes:
        code: Unique error code
        message: Human-readable error description
        hint: Suggestion for fixing the error
        pattern: Fallback or wrap pattern the error refers to
        expected: Expected parameter or marker count
        received: Actual parameter or marker count
        severity: Error severity level
    """

    code: DiagnosticCode
    message: str
    hint: str | None = None
    pattern: str | None = None
    expected: int | None = None
    received: int | None = None
    severity: Literal["error", "warning"] = "error"

    def __str__(self) -> str:
        """Return human-readable error description."""
        return self.message

    def format_error(self) -> str:
        """Format diagnostic like Rust compiler.

        Example output:
            error[PARAMETER_COUNT_MISMATCH]: Translation '%v joined the game' requires ...
              = pattern: %v joined the game
              = expected: 1
              = received: 2
              = help: Pass exactly 1 argument(s) to fill()

        Returns:
            Formatted error message
        """
        from .formatter import DiagnosticFormatter  # noqa: PLC0415 - circular

        return DiagnosticFormatter().format(self)
