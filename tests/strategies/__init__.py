"""Hypothesis strategies for chatlex tests."""

from .translations import (
    fallback_patterns,
    literal_text,
    translation_keys,
    translations_with_args,
    wrap_formats,
)

__all__ = [
    "fallback_patterns",
    "literal_text",
    "translation_keys",
    "translations_with_args",
    "wrap_formats",
]
