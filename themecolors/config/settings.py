"""Application settings via QSettings."""

from __future__ import annotations

import os
from pathlib import Path

from PySide6.QtCore import QSettings

from themecolors.core.webview import WebviewBaseOptions

_DEFAULT_OPTIONS = WebviewBaseOptions()
_DEFAULT_FETCH_TIMEOUT = 15.0


class AppSettings:
    """Wraps QSettings for persistent ThemeColors configuration."""

    def __init__(self, qsettings: QSettings | None = None) -> None:
        self._qs = qsettings if qsettings is not None else QSettings("ThemeColors", "ThemeColors")

    # -- webview fonts --

    @property
    def ui_font_family(self) -> str:
        return self._text("fonts/ui_family", _DEFAULT_OPTIONS.ui_font_family)

    @ui_font_family.setter
    def ui_font_family(self, value: str) -> None:
        self._qs.setValue("fonts/ui_family", (value or "").strip())

    @property
    def ui_font_weight(self) -> str:
        return self._text("fonts/ui_weight", _DEFAULT_OPTIONS.ui_font_weight)

    @ui_font_weight.setter
    def ui_font_weight(self, value: str) -> None:
        self._qs.setValue("fonts/ui_weight", (value or "").strip())

    @property
    def ui_font_size(self) -> str:
        return self._text("fonts/ui_size", _DEFAULT_OPTIONS.ui_font_size)

    @ui_font_size.setter
    def ui_font_size(self, value: str) -> None:
        self._qs.setValue("fonts/ui_size", (value or "").strip())

    @property
    def editor_font_family(self) -> str:
        return self._text("fonts/editor_family", _DEFAULT_OPTIONS.editor_font_family)

    @editor_font_family.setter
    def editor_font_family(self, value: str) -> None:
        self._qs.setValue("fonts/editor_family", (value or "").strip())

    @property
    def editor_font_weight(self) -> str:
        return self._text("fonts/editor_weight", _DEFAULT_OPTIONS.editor_font_weight)

    @editor_font_weight.setter
    def editor_font_weight(self, value: str) -> None:
        self._qs.setValue("fonts/editor_weight", (value or "").strip())

    @property
    def editor_font_size(self) -> str:
        return self._text("fonts/editor_size", _DEFAULT_OPTIONS.editor_font_size)

    @editor_font_size.setter
    def editor_font_size(self, value: str) -> None:
        self._qs.setValue("fonts/editor_size", (value or "").strip())

    def webview_options(self) -> WebviewBaseOptions:
        return WebviewBaseOptions(
            ui_font_family=self.ui_font_family,
            ui_font_weight=self.ui_font_weight,
            ui_font_size=self.ui_font_size,
            editor_font_family=self.editor_font_family,
            editor_font_weight=self.editor_font_weight,
            editor_font_size=self.editor_font_size,
        )

    # -- fetching --

    @property
    def fetch_timeout(self) -> float:
        raw = self._qs.value("fetch/timeout", _DEFAULT_FETCH_TIMEOUT)
        try:
            value = float(raw)
        except (TypeError, ValueError):
            return _DEFAULT_FETCH_TIMEOUT
        return value if value > 0 else _DEFAULT_FETCH_TIMEOUT

    @fetch_timeout.setter
    def fetch_timeout(self, value: float) -> None:
        self._qs.setValue("fetch/timeout", float(value))

    @property
    def cache_enabled(self) -> bool:
        raw = self._qs.value("fetch/cache_enabled", True)
        if isinstance(raw, str):
            return raw.strip().lower() not in {"0", "false", "no", "off"}
        return bool(raw)

    @cache_enabled.setter
    def cache_enabled(self, value: bool) -> None:
        self._qs.setValue("fetch/cache_enabled", bool(value))

    # -- helpers --

    @property
    def app_data_dir(self) -> Path:
        path = self._app_data_dir()
        path.mkdir(parents=True, exist_ok=True)
        return path

    @property
    def cache_dir(self) -> Path:
        path = self.app_data_dir / "theme-cache"
        path.mkdir(parents=True, exist_ok=True)
        return path

    @property
    def log_dir(self) -> Path:
        path = self.app_data_dir / "logs"
        path.mkdir(parents=True, exist_ok=True)
        return path

    def _text(self, key: str, default: str) -> str:
        raw = self._qs.value(key, default)
        # ini backends hand unquoted comma lists back as lists
        if isinstance(raw, list):
            raw = ", ".join(str(item) for item in raw)
        value = raw.strip() if isinstance(raw, str) else ""
        return value or default

    @staticmethod
    def _app_data_dir() -> Path:
        base = Path(os.environ.get("APPDATA", Path.home() / ".config"))
        return base / "themecolors"
