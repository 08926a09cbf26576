"""Tests for chatlex.diagnostics: codes, templates, formatter and errors.

Python 3.13+.
"""

from __future__ import annotations

import json

import pytest
from hypothesis import event, given
from hypothesis import strategies as st

from chatlex.diagnostics import (
    ChatlexError,
    Diagnostic,
    DiagnosticCode,
    DiagnosticFormatter,
    ErrorTemplate,
    OutputFormat,
    ParameterCountError,
    PatternError,
    UnknownTranslationError,
)

_patterns = st.text(min_size=1, max_size=60)
_counts = st.integers(min_value=0, max_value=20)


class TestErrorTemplate:
    """Each factory assigns the right code and embeds its context."""

    @given(pattern=_patterns, expected=_counts, received=_counts)
    def test_parameter_count_mismatch(self, pattern: str, expected: int, received: int) -> None:
        d = ErrorTemplate.parameter_count_mismatch(pattern, expected, received)
        assert d.code == DiagnosticCode.PARAMETER_COUNT_MISMATCH
        assert pattern in d.message
        assert d.expected == expected
        assert d.received == received
        assert d.hint is not None
        event("template=parameter_count_mismatch")

    @given(pattern=_patterns, expected=_counts, found=_counts)
    def test_fallback_marker_mismatch(self, pattern: str, expected: int, found: int) -> None:
        d = ErrorTemplate.fallback_marker_mismatch(pattern, expected, found)
        assert d.code == DiagnosticCode.FALLBACK_MARKER_MISMATCH
        assert d.pattern == pattern
        event("template=fallback_marker_mismatch")

    def test_format_marker_mismatch(self) -> None:
        d = ErrorTemplate.format_marker_mismatch("<red></red>", 0)
        assert d.code == DiagnosticCode.FORMAT_MARKER_MISMATCH
        assert d.expected == 1
        assert d.received == 0

    def test_translation_unset(self) -> None:
        assert ErrorTemplate.translation_unset().code == DiagnosticCode.TRANSLATION_UNSET

    def test_negative_parameter_count(self) -> None:
        d = ErrorTemplate.negative_parameter_count(-3)
        assert d.code == DiagnosticCode.NEGATIVE_PARAMETER_COUNT
        assert "-3" in d.message

    def test_translation_not_found(self) -> None:
        d = ErrorTemplate.translation_not_found("%x")
        assert d.code == DiagnosticCode.TRANSLATION_NOT_FOUND
        assert "'%x'" in d.message

    def test_invalid_translation_string(self) -> None:
        d = ErrorTemplate.invalid_translation_string(None)
        assert d.code == DiagnosticCode.INVALID_TRANSLATION_STRING
        assert "None" in d.message

    def test_translation_not_indexable(self) -> None:
        d = ErrorTemplate.translation_not_indexable("%v won")
        assert d.code == DiagnosticCode.TRANSLATION_NOT_INDEXABLE
        assert d.pattern == "%v won"
        assert "without a constant key" in d.message

    def test_codes_unique(self) -> None:
        values = [code.value for code in DiagnosticCode]
        assert len(values) == len(set(values))


class TestDiagnosticFormatter:
    """Rust, simple and JSON output."""

    @pytest.fixture
    def diagnostic(self) -> Diagnostic:
        return ErrorTemplate.parameter_count_mismatch("%v joined the game", 1, 2)

    def test_rust(self, diagnostic: Diagnostic) -> None:
        out = DiagnosticFormatter().format(diagnostic)
        lines = out.splitlines()
        assert lines[0] == (
            "error[PARAMETER_COUNT_MISMATCH]: Translation '%v joined the game' "
            "requires exactly 1 parameter(s), got 2"
        )
        assert "  = pattern: %v joined the game" in lines
        assert "  = expected: 1" in lines
        assert "  = received: 2" in lines
        assert lines[-1].startswith("  = help: ")

    def test_rust_color(self, diagnostic: Diagnostic) -> None:
        out = DiagnosticFormatter(color=True).format(diagnostic)
        assert out.startswith("\033[1;31merror\033[0m")

    def test_warning_severity(self) -> None:
        d = Diagnostic(code=DiagnosticCode.TRANSLATION_UNSET, message="m", severity="warning")
        assert DiagnosticFormatter().format(d).startswith("warning[TRANSLATION_UNSET]")

    def test_simple(self, diagnostic: Diagnostic) -> None:
        out = DiagnosticFormatter(output_format=OutputFormat.SIMPLE).format(diagnostic)
        assert out.startswith("PARAMETER_COUNT_MISMATCH: ")
        assert "\n" not in out

    def test_json(self, diagnostic: Diagnostic) -> None:
        out = DiagnosticFormatter(output_format=OutputFormat.JSON).format(diagnostic)
        data = json.loads(out)
        assert data["code"] == "PARAMETER_COUNT_MISMATCH"
        assert data["code_value"] == 1001
        assert data["expected"] == 1
        assert data["received"] == 2
        assert data["pattern"] == "%v joined the game"

    def test_sanitize_truncates(self) -> None:
        d = Diagnostic(code=DiagnosticCode.TRANSLATION_NOT_FOUND, message="x" * 300)
        out = DiagnosticFormatter(
            output_format=OutputFormat.SIMPLE, sanitize=True, max_content_length=10
        ).format(d)
        assert out == "TRANSLATION_NOT_FOUND: " + "x" * 10 + "..."

    def test_format_all(self, diagnostic: Diagnostic) -> None:
        formatter = DiagnosticFormatter(output_format=OutputFormat.SIMPLE)
        assert formatter.format_all([diagnostic, diagnostic]).count("\n\n") == 1

    def test_diagnostic_str_and_format_error(self, diagnostic: Diagnostic) -> None:
        assert str(diagnostic) == diagnostic.message
        assert diagnostic.format_error() == DiagnosticFormatter().format(diagnostic)


class TestErrors:
    """Exception hierarchy and diagnostic attachment."""

    def test_plain_message(self) -> None:
        err = ChatlexError("boom")
        assert str(err) == "boom"
        assert err.diagnostic is None

    def test_diagnostic_message(self) -> None:
        d = ErrorTemplate.translation_unset()
        err = ChatlexError(d)
        assert err.diagnostic is d
        assert str(err) == d.format_error()

    def test_builtin_bases(self) -> None:
        assert issubclass(ParameterCountError, TypeError)
        assert issubclass(PatternError, ValueError)
        assert issubclass(UnknownTranslationError, KeyError)
        for cls in (ParameterCountError, PatternError, UnknownTranslationError):
            assert issubclass(cls, ChatlexError)

    def test_unknown_translation_str_not_quoted(self) -> None:
        err = UnknownTranslationError("missing", key="%x")
        assert str(err) == "missing"
