"""Tests for QSettings-backed application settings."""

from __future__ import annotations

from pathlib import Path

import pytest
from PySide6.QtCore import QSettings

from themecolors.config.settings import AppSettings
from themecolors.core.webview import WebviewBaseOptions


@pytest.fixture
def settings(tmp_path: Path) -> AppSettings:
    qsettings = QSettings(str(tmp_path / "themecolors.ini"), QSettings.Format.IniFormat)
    return AppSettings(qsettings)


class TestAppSettings:
    """Tests for AppSettings defaults and persistence."""

    def test_defaults_match_webview_options(self, settings):
        """Unset fonts fall back to the webview defaults."""
        assert settings.webview_options() == WebviewBaseOptions()
        assert settings.fetch_timeout == 15.0
        assert settings.cache_enabled is True

    def test_font_setters_round_trip(self, settings):
        """Font settings are stored stripped and read back."""
        settings.ui_font_family = "  Inter  "
        settings.editor_font_size = "12px"
        options = settings.webview_options()
        assert options.ui_font_family == "Inter"
        assert options.editor_font_size == "12px"
        assert options.ui_font_size == WebviewBaseOptions().ui_font_size

    def test_blank_font_falls_back_to_default(self, settings):
        """A blank stored value means default."""
        settings.editor_font_family = "   "
        assert settings.editor_font_family == WebviewBaseOptions().editor_font_family

    def test_fetch_timeout(self, settings):
        """Positive timeouts persist; invalid ones fall back."""
        settings.fetch_timeout = 30
        assert settings.fetch_timeout == 30.0
        settings.fetch_timeout = -1
        assert settings.fetch_timeout == 15.0
        settings._qs.setValue("fetch/timeout", "soon")
        assert settings.fetch_timeout == 15.0

    @pytest.mark.parametrize(("raw", "expected"), [("false", False), ("off", False), ("0", False), ("yes", True)])
    def test_cache_enabled_accepts_strings(self, settings, raw, expected):
        """Ini-style string flags are understood."""
        settings._qs.setValue("fetch/cache_enabled", raw)
        assert settings.cache_enabled is expected

    def test_cache_enabled_setter(self, settings):
        """The cache flag persists."""
        settings.cache_enabled = False
        assert settings.cache_enabled is False

    def test_directories_live_under_appdata(self, settings, tmp_path, monkeypatch):
        """Data, cache and log directories are created under APPDATA."""
        monkeypatch.setenv("APPDATA", str(tmp_path / "appdata"))
        assert settings.app_data_dir == tmp_path / "appdata" / "themecolors"
        assert settings.cache_dir.is_dir()
        assert settings.cache_dir.name == "theme-cache"
        assert settings.log_dir.is_dir()
        assert settings.log_dir.name == "logs"
