"""Diagnostic system for chatlex errors.

Provides structured error diagnostics with codes and hints.
Inspired by Rust compiler diagnostics.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode
from .errors import (
    ChatlexError,
    ParameterCountError,
    PatternError,
    TranslatedError,
    UnknownTranslationError,
    UnsetTranslationError,
)
from .formatter import DiagnosticFormatter, OutputFormat
from .templates import ErrorTemplate

__all__ = [
    "ChatlexError",
    "Diagnostic",
    "DiagnosticCode",
    "DiagnosticFormatter",
    "ErrorTemplate",
    "OutputFormat",
    "ParameterCountError",
    "PatternError",
    "TranslatedError",
    "UnknownTranslationError",
    "UnsetTranslationError",
]
