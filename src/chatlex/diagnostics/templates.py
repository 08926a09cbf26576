"""Error message templates.

Centralized error message templates for testable, consistent error messages.
Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode


class ErrorTemplate:
    """Centralized error message templates.

    All error messages are created here. NO f-strings in exception constructors!
    Keeps every error case documented in one place and lets tests assert on
    codes instead of message text.
    """

    @staticmethod
    def parameter_count_mismatch(pattern: str, expected: int, received: int) -> Diagnostic:
        """Translation filled with the wrong number of arguments.

        Args:
            pattern: Fallback pattern identifying the translation
            expected: Declared parameter count
            received: Number of arguments passed

        Returns:
            Diagnostic for PARAMETER_COUNT_MISMATCH
        """
        msg = (
            f"Translation '{pattern}' requires exactly {expected} parameter(s), "
            f"got {received}"
        )
        return Diagnostic(
            code=DiagnosticCode.PARAMETER_COUNT_MISMATCH,
            message=msg,
            hint=f"Pass exactly {expected} argument(s) to fill()",
            pattern=pattern,
            expected=expected,
            received=received,
        )

    @staticmethod
    def translation_unset() -> Diagnostic:
        """Zero-value Translation used.

        Returns:
            Diagnostic for TRANSLATION_UNSET
        """
        return Diagnostic(
            code=DiagnosticCode.TRANSLATION_UNSET,
            message="Translation was not created with translate()",
            hint="Build translations with translate(string, params, fallback)",
        )

    @staticmethod
    def negative_parameter_count(params: int) -> Diagnostic:
        """Negative parameter count passed to translate().

        Args:
            params: The rejected parameter count

        Returns:
            Diagnostic for NEGATIVE_PARAMETER_COUNT
        """
        return Diagnostic(
            code=DiagnosticCode.NEGATIVE_PARAMETER_COUNT,
            message=f"Parameter count must be >= 0, got {params}",
            received=params,
        )

    @staticmethod
    def invalid_translation_string(value: object) -> Diagnostic:
        """Translation built without a usable identifier resolver.

        Args:
            value: The rejected resolver

        Returns:
            Diagnostic for INVALID_TRANSLATION_STRING
        """
        return Diagnostic(
            code=DiagnosticCode.INVALID_TRANSLATION_STRING,
            message=f"Translation string must be a str or TranslationString, got {value!r}",
            hint="Pass a translation key or an object with resolve(locale)",
        )

    @staticmethod
    def fallback_marker_mismatch(pattern: str, expected: int, found: int) -> Diagnostic:
        """Fallback pattern marker count differs from the parameter count.

        Args:
            pattern: The fallback pattern
            expected: Declared parameter count
            found: Markers present in the pattern

        Returns:
            Diagnostic for FALLBACK_MARKER_MISMATCH
        """
        msg = f"Fallback '{pattern}' has {found} marker(s), expected {expected}"
        return Diagnostic(
            code=DiagnosticCode.FALLBACK_MARKER_MISMATCH,
            message=msg,
            hint="Use one %v per parameter and %% for a literal percent sign",
            pattern=pattern,
            expected=expected,
            received=found,
        )

    @staticmethod
    def format_marker_mismatch(pattern: str, found: int) -> Diagnostic:
        """Wrap pattern does not hold exactly one marker.

        Args:
            pattern: The wrap pattern
            found: Markers present in the pattern

        Returns:
            Diagnostic for FORMAT_MARKER_MISMATCH
        """
        msg = f"Format '{pattern}' has {found} marker(s), expected exactly 1"
        return Diagnostic(
            code=DiagnosticCode.FORMAT_MARKER_MISMATCH,
            message=msg,
            hint="Mark where the translation goes with a single %v, e.g. '<yellow>%v</yellow>'",
            pattern=pattern,
            expected=1,
            received=found,
        )

    @staticmethod
    def format_argument_mismatch(pattern: str, expected: int, received: int) -> Diagnostic:
        """Positional format called with a different argument count than markers.

        Args:
            pattern: The pattern being formatted
            expected: Markers present in the pattern
            received: Arguments passed

        Returns:
            Diagnostic for FORMAT_ARGUMENT_MISMATCH
        """
        msg = f"Pattern '{pattern}' has {expected} marker(s), got {received} argument(s)"
        return Diagnostic(
            code=DiagnosticCode.FORMAT_ARGUMENT_MISMATCH,
            message=msg,
            pattern=pattern,
            expected=expected,
            received=received,
        )

    @staticmethod
    def translation_not_found(key: str) -> Diagnostic:
        """Catalog lookup miss.

        Args:
            key: The translation key that was looked up

        Returns:
            Diagnostic for TRANSLATION_NOT_FOUND
        """
        return Diagnostic(
            code=DiagnosticCode.TRANSLATION_NOT_FOUND,
            message=f"Translation '{key}' not found",
            hint="Check the key against chatlex.messages.CATALOG",
        )

    @staticmethod
    def duplicate_translation(key: str) -> Diagnostic:
        """Two catalog entries share one translation key.

        Args:
            key: The duplicated translation key

        Returns:
            Diagnostic for DUPLICATE_TRANSLATION
        """
        return Diagnostic(
            code=DiagnosticCode.DUPLICATE_TRANSLATION,
            message=f"Translation '{key}' registered more than once",
        )

    @staticmethod
    def translation_not_indexable(fallback: str) -> Diagnostic:
        """Catalog entry whose identifier depends on the locale.

        Args:
            fallback: Fallback pattern of the rejected translation

        Returns:
            Diagnostic for TRANSLATION_NOT_INDEXABLE
        """
        return Diagnostic(
            code=DiagnosticCode.TRANSLATION_NOT_INDEXABLE,
            message=f"Cannot index translation '{fallback}' without a constant key",
            hint="Register translations built from a str or ConstantString",
            pattern=fallback,
        )
