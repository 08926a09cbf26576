"""Tests for chatlex.config.RenderConfig.

Python 3.13+.
"""

from __future__ import annotations

import dataclasses

import pytest

from chatlex import DEFAULT_RENDER_CONFIG, RenderConfig


class TestRenderConfig:
    """RenderConfig defaults, validation and immutability."""

    def test_defaults(self) -> None:
        config = RenderConfig()
        assert config.colour is True
        assert config.default_locale == "en_US"
        assert config == DEFAULT_RENDER_CONFIG

    def test_empty_default_locale_rejected(self) -> None:
        with pytest.raises(ValueError, match="default_locale"):
            RenderConfig(default_locale="")

    def test_frozen(self) -> None:
        with pytest.raises(dataclasses.FrozenInstanceError):
            DEFAULT_RENDER_CONFIG.colour = False  # type: ignore[misc]

    def test_replace(self) -> None:
        plain = dataclasses.replace(DEFAULT_RENDER_CONFIG, colour=False)
        assert plain.colour is False
        assert DEFAULT_RENDER_CONFIG.colour is True
