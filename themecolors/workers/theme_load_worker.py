"""Worker for loading a package's color themes off the UI thread."""

from __future__ import annotations

from themecolors.core.catalog import DefaultCatalog
from themecolors.core.fetcher import TextFetcher
from themecolors.core.loader import load_themes
from themecolors.workers.base_worker import BaseWorker


class ThemeLoadWorker(BaseWorker):
    """Fetches a manifest and its themes; emits the list of ColorTheme."""

    def __init__(
        self,
        package_json_url: str,
        fetch: TextFetcher,
        *,
        defaults: DefaultCatalog | None = None,
        strict: bool = False,
    ) -> None:
        super().__init__()
        self._package_json_url = package_json_url
        self._fetch = fetch
        self._defaults = defaults
        self._strict = strict

    def run(self) -> None:
        self.started.emit()
        try:
            themes = load_themes(
                self._package_json_url,
                self._fetch,
                defaults=self._defaults,
                on_progress=self.progress.emit,
                is_cancelled=self.is_cancelled,
                strict=self._strict,
            )
        except Exception as exc:
            self.report_failure(exc, self._package_json_url)
            return

        if self.is_cancelled():
            self.cancelled.emit()
            return
        self.finished.emit(themes)
