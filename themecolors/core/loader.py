"""Load the color themes a package manifest contributes."""

from __future__ import annotations

from concurrent.futures import Future, ThreadPoolExecutor, as_completed
import logging
import os
from pathlib import Path
from typing import Any, Callable, Mapping
from urllib.parse import urljoin, urlsplit

from themecolors.core.catalog import DefaultCatalog
from themecolors.core.document import parse_jsonc
from themecolors.core.fetcher import TextFetcher
from themecolors.core.theme import ColorTheme, ThemeContribution
from themecolors.errors import ErrorCode, ThemeColorsError

logger = logging.getLogger(__name__)

ProgressCallback = Callable[[int, int, str], None]

_DEFAULT_PORTS = {"http": 80, "https": 443}


def to_url(location: str | Path) -> str:
    """Return ``location`` as a URL, turning filesystem paths into ``file:`` URLs."""
    text = str(location)
    scheme = urlsplit(text).scheme
    # A one letter scheme is a Windows drive, not a URL.
    if len(scheme) > 1:
        return text
    return Path(text).expanduser().resolve().as_uri()


def url_origin(url: str) -> str:
    parts = urlsplit(url)
    scheme = parts.scheme.lower()
    host = (parts.hostname or "").lower()
    try:
        port = parts.port
    except ValueError:
        port = None
    if port is None or port == _DEFAULT_PORTS.get(scheme):
        return f"{scheme}://{host}"
    return f"{scheme}://{host}:{port}"


def theme_contributions(manifest: Any) -> list[ThemeContribution]:
    """Extract ``contributes.themes`` entries from a parsed manifest."""
    if not isinstance(manifest, Mapping):
        return []
    contributes = manifest.get("contributes")
    if not isinstance(contributes, Mapping):
        return []
    themes = contributes.get("themes")
    if not isinstance(themes, list):
        return []

    contributions: list[ThemeContribution] = []
    for index, raw in enumerate(themes):
        if not isinstance(raw, Mapping):
            logger.warning("Skipping theme contribution #%d: not an object", index)
            continue
        contribution = ThemeContribution.from_mapping(raw)
        if not contribution.path:
            logger.warning("Skipping theme contribution %r: missing path", contribution.label)
            continue
        contributions.append(contribution)
    return contributions


def load_themes(
    package_json_url: str,
    fetch: TextFetcher,
    *,
    defaults: DefaultCatalog | None = None,
    max_workers: int | None = None,
    on_progress: ProgressCallback | None = None,
    is_cancelled: Callable[[], bool] | None = None,
    strict: bool = False,
) -> list[ColorTheme]:
    """Fetch a package manifest and every theme it contributes.

    Theme paths are resolved against the manifest URL and must stay on the
    manifest's origin. Theme documents are fetched concurrently; the result
    keeps declaration order and may be empty.

    With ``strict`` a malformed manifest raises ``MANIFEST_INVALID`` and a
    malformed theme document raises ``THEME_PARSE_FAILED`` instead of being
    skipped or loaded as an empty theme.
    """
    try:
        manifest = parse_jsonc(fetch(package_json_url))
    except ValueError as exc:
        if strict:
            raise ThemeColorsError(
                ErrorCode.MANIFEST_INVALID, url=package_json_url, details={"original": str(exc)}
            ) from exc
        logger.warning("Ignoring malformed package manifest %s: %s", package_json_url, exc)
        return []
    if strict and not isinstance(manifest, Mapping):
        raise ThemeColorsError(ErrorCode.MANIFEST_INVALID, url=package_json_url)

    contributions = theme_contributions(manifest)
    if not contributions:
        return []

    expected_origin = url_origin(package_json_url)
    theme_urls: list[str] = []
    for contribution in contributions:
        theme_url = urljoin(package_json_url, contribution.path)
        if url_origin(theme_url) != expected_origin:
            raise ThemeColorsError(
                ErrorCode.THEME_ORIGIN_MISMATCH,
                message=f"Invalid origin {expected_origin}",
                url=theme_url,
            )
        theme_urls.append(theme_url)

    total = len(theme_urls)
    texts: list[str] = [""] * total
    workers = max_workers or min(os.cpu_count() or 4, 8, total)
    with ThreadPoolExecutor(max_workers=workers) as executor:
        futures: dict[Future[str], int] = {
            executor.submit(fetch, theme_url): index for index, theme_url in enumerate(theme_urls)
        }
        completed = 0
        for future in as_completed(futures):
            if is_cancelled is not None and is_cancelled():
                for pending in futures:
                    pending.cancel()
                raise ThemeColorsError(ErrorCode.OPERATION_CANCELLED, url=package_json_url)
            index = futures[future]
            texts[index] = future.result()
            completed += 1
            if on_progress is not None:
                on_progress(completed, total, contributions[index].label)

    if not strict:
        return [
            ColorTheme.parse(text, contribution, defaults)
            for text, contribution in zip(texts, contributions)
        ]

    themes: list[ColorTheme] = []
    for text, contribution, theme_url in zip(texts, contributions, theme_urls):
        try:
            themes.append(ColorTheme.parse_strict(text, contribution, defaults))
        except ThemeColorsError as exc:
            exc.url = theme_url
            raise
    return themes
