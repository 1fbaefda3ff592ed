"""Text fetchers used to load theme manifests and documents."""

from __future__ import annotations

from hashlib import sha256
import logging
from pathlib import Path
from typing import Callable
from urllib.parse import urlsplit
from urllib.request import Request, urlopen

from themecolors import __version__
from themecolors.errors import ErrorCode, ThemeColorsError, classify_exception

logger = logging.getLogger(__name__)

TextFetcher = Callable[[str], str]

_MAX_RESPONSE_BYTES = 8 * 1024 * 1024
_DEFAULT_TIMEOUT = 15.0


def fetch_text(url: str, *, timeout: float = _DEFAULT_TIMEOUT) -> str:
    """Read ``url`` (http, https or file) as UTF-8 text."""
    req = Request(
        url,
        headers={
            "User-Agent": f"ThemeColors/{__version__}",
            "Accept": "application/json,text/plain,*/*;q=0.8",
        },
    )
    try:
        with urlopen(req, timeout=timeout) as resp:
            data = resp.read(_MAX_RESPONSE_BYTES + 1)
    except (OSError, ValueError) as exc:
        raise classify_exception(exc, url) from exc
    if len(data) > _MAX_RESPONSE_BYTES:
        raise ThemeColorsError(
            ErrorCode.THEME_FETCH_FAILED,
            message=f"Response exceeds max size ({_MAX_RESPONSE_BYTES} bytes)",
            url=url,
        )
    try:
        return data.decode("utf-8")
    except UnicodeDecodeError as exc:
        raise classify_exception(exc, url) from exc


class CachedFetcher:
    """Caches remote text on disk, keyed by a short hash of the URL.

    ``file:`` URLs are read straight through.
    """

    def __init__(self, cache_dir: str | Path, fetch: TextFetcher = fetch_text) -> None:
        self._cache_dir = Path(cache_dir)
        self._fetch = fetch

    @property
    def cache_dir(self) -> Path:
        return self._cache_dir

    def cache_path(self, url: str) -> Path:
        digest = sha256(url.encode("utf-8")).hexdigest()[:8]
        return self._cache_dir / digest

    def __call__(self, url: str) -> str:
        if urlsplit(url).scheme == "file":
            return self._fetch(url)

        path = self.cache_path(url)
        if path.is_file():
            try:
                return path.read_text(encoding="utf-8")
            except (OSError, UnicodeDecodeError) as exc:
                logger.warning("Discarding unreadable cache entry %s: %s", path, exc)

        text = self._fetch(url)
        try:
            self._cache_dir.mkdir(parents=True, exist_ok=True)
            path.write_text(text, encoding="utf-8")
        except OSError as exc:
            logger.warning("Could not cache %s at %s: %s", url, path, exc)
        return text

    def clear(self) -> int:
        """Delete cached entries and return how many were removed."""
        if not self._cache_dir.is_dir():
            return 0
        removed = 0
        for entry in self._cache_dir.iterdir():
            if entry.is_file() and len(entry.name) == 8:
                entry.unlink()
                removed += 1
        return removed
