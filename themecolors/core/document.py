"""Theme document parsing (JSON with comments and trailing commas)."""

from __future__ import annotations

import logging
from typing import Any

import json5

from themecolors.errors import ErrorCode, ThemeColorsError

logger = logging.getLogger(__name__)

_MAX_DOCUMENT_CHARS = 4 * 1024 * 1024


def parse_jsonc(text: str) -> Any:
    """Parse a JSON-with-comments text. Raises ``ValueError`` on bad syntax."""
    if len(text) > _MAX_DOCUMENT_CHARS:
        raise ValueError(f"document exceeds max size ({_MAX_DOCUMENT_CHARS} characters)")
    return json5.loads(text.lstrip("\ufeff"))


def parse_theme_document(text: str) -> dict[str, Any]:
    """Parse leniently: malformed documents become an empty theme."""
    try:
        data = parse_jsonc(text)
    except ValueError as exc:
        logger.warning("Ignoring malformed theme document: %s", exc)
        return {}
    if not isinstance(data, dict):
        logger.warning("Theme document is not a JSON object (got %s)", type(data).__name__)
        return {}
    return data


def parse_theme_document_strict(text: str) -> dict[str, Any]:
    """Parse a theme document, raising ``ThemeColorsError`` on any problem."""
    try:
        data = parse_jsonc(text)
    except ValueError as exc:
        raise ThemeColorsError(
            ErrorCode.THEME_PARSE_FAILED, details={"original": str(exc)}
        ) from exc
    if not isinstance(data, dict):
        raise ThemeColorsError(
            ErrorCode.THEME_PARSE_FAILED,
            message=f"Expected a JSON object, got {type(data).__name__}",
        )
    return data
