"""Command line bootstrap."""

from __future__ import annotations

import argparse
from functools import partial
import logging
from logging.handlers import RotatingFileHandler
import sys
from typing import Sequence

from themecolors import __version__
from themecolors.config.settings import AppSettings
from themecolors.core.fetcher import CachedFetcher, TextFetcher, fetch_text
from themecolors.core.loader import load_themes, to_url
from themecolors.core.theme import ColorTheme
from themecolors.core.webview import get_webview_properties
from themecolors.errors import ThemeColorsError, format_error_for_user
from themecolors.runtime_paths import is_frozen, package_root

EXIT_OK = 0
EXIT_ERROR = 1
EXIT_THEME_NOT_FOUND = 2


def _configure_logger(settings: AppSettings) -> logging.Logger:
    logger = logging.getLogger("themecolors")
    if logger.handlers:
        return logger

    logger.setLevel(logging.INFO)
    handler = RotatingFileHandler(
        settings.log_dir / "themecolors.log",
        maxBytes=512_000,
        backupCount=3,
        encoding="utf-8",
    )
    handler.setFormatter(logging.Formatter("%(asctime)s %(levelname)s %(message)s"))
    logger.addHandler(handler)
    return logger


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="themecolors",
        description="Resolve the colors of themes contributed by a package manifest.",
    )
    parser.add_argument("manifest", help="URL or path of a package.json declaring themes")
    parser.add_argument("--theme", help="label of the theme to print (default: first)")
    parser.add_argument(
        "--format",
        choices=("style", "colors"),
        default="style",
        help="webview style string or one 'identifier color' line per color",
    )
    parser.add_argument("--no-cache", action="store_true", help="bypass the download cache")
    parser.add_argument(
        "--strict",
        action="store_true",
        help="fail on a malformed manifest or theme file instead of skipping it",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def _select_theme(themes: list[ColorTheme], label: str | None) -> ColorTheme | None:
    if not themes:
        return None
    if not label:
        return themes[0]
    wanted = label.strip().lower()
    for theme in themes:
        if theme.name.lower() == wanted or theme.contribution.id.lower() == wanted:
            return theme
    return None


def run_app(argv: Sequence[str] | None = None, settings: AppSettings | None = None) -> int:
    """Parse arguments, load the themes and print the requested output."""
    args = _build_parser().parse_args(argv)
    settings = settings if settings is not None else AppSettings()
    logger = _configure_logger(settings)
    logger.info("startup mode frozen=%s package_root=%s", is_frozen(), package_root())

    fetch: TextFetcher = partial(fetch_text, timeout=settings.fetch_timeout)
    if settings.cache_enabled and not args.no_cache:
        fetch = CachedFetcher(settings.cache_dir, fetch)

    url = to_url(args.manifest)
    try:
        themes = load_themes(url, fetch, strict=args.strict)
    except ThemeColorsError as exc:
        logger.warning("loading %s failed: %s", url, exc.to_dict())
        print(format_error_for_user(exc), file=sys.stderr)
        return EXIT_ERROR

    theme = _select_theme(themes, args.theme)
    if theme is None:
        available = ", ".join(t.name for t in themes) or "none"
        print(f"Theme not found: {args.theme or '(first)'}. Available: {available}", file=sys.stderr)
        return EXIT_THEME_NOT_FOUND

    if args.format == "colors":
        for identifier, color in theme:
            if color is not None:
                print(f"{identifier} {color}")
    else:
        print(get_webview_properties(theme, settings.webview_options()).style)
    return EXIT_OK
