"""Default color catalog: identifier -> (light, dark, high contrast) defaults."""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path
from types import MappingProxyType
from typing import Any, Mapping

import yaml

from themecolors.core.color_value import ColorValue, transform_from_mapping
from themecolors.errors import ErrorCode, ThemeColorsError
from themecolors.runtime_paths import builtin_catalog_path

ColorDefaults = tuple[ColorValue, ColorValue, ColorValue]
DefaultCatalog = Mapping[str, ColorDefaults]

_SLOTS: tuple[str, ...] = ("light", "dark", "hc")
_MAX_CATALOG_BYTES = 2 * 1024 * 1024


def color_defaults(
    light: ColorValue = None,
    dark: ColorValue = None,
    hc: ColorValue = None,
) -> ColorDefaults:
    return (light, dark, hc)


def load_default_catalog(path: Path) -> dict[str, ColorDefaults]:
    """Load a YAML catalog file, preserving identifier order."""
    try:
        size = path.stat().st_size
    except FileNotFoundError as exc:
        raise ThemeColorsError(ErrorCode.CATALOG_MISSING, url=str(path)) from exc
    except OSError as exc:
        raise ThemeColorsError(
            ErrorCode.CATALOG_INVALID, url=str(path), details={"original": str(exc)}
        ) from exc
    if size > _MAX_CATALOG_BYTES:
        raise ThemeColorsError(
            ErrorCode.CATALOG_INVALID,
            message=f"{path}: catalog exceeds max size ({_MAX_CATALOG_BYTES} bytes)",
            url=str(path),
        )
    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8"))
    except (OSError, UnicodeDecodeError, yaml.YAMLError) as exc:
        raise ThemeColorsError(
            ErrorCode.CATALOG_INVALID, url=str(path), details={"original": str(exc)}
        ) from exc
    return parse_default_catalog(data, context=str(path))


def parse_default_catalog(data: Any, *, context: str = "catalog") -> dict[str, ColorDefaults]:
    if data is None:
        return {}
    if not isinstance(data, Mapping):
        raise ThemeColorsError(
            ErrorCode.CATALOG_INVALID, message=f"{context}: expected a mapping of identifiers"
        )

    catalog: dict[str, ColorDefaults] = {}
    for identifier, entry in data.items():
        if not isinstance(identifier, str) or not identifier:
            raise ThemeColorsError(
                ErrorCode.CATALOG_INVALID,
                message=f"{context}: identifier {identifier!r} must be a non-empty string",
            )
        catalog[identifier] = _parse_entry(identifier, entry, context)
    return catalog


def _parse_entry(identifier: str, entry: Any, context: str) -> ColorDefaults:
    if entry is None:
        return color_defaults()
    if isinstance(entry, (list, tuple)):
        if len(entry) != 3:
            raise ThemeColorsError(
                ErrorCode.CATALOG_INVALID,
                message=f"{context}: {identifier!r} must list exactly three defaults",
            )
        light, dark, hc = (_parse_value(identifier, item, context) for item in entry)
        return color_defaults(light, dark, hc)
    if isinstance(entry, Mapping):
        unknown = sorted(str(key) for key in entry.keys() if key not in _SLOTS)
        if unknown:
            raise ThemeColorsError(
                ErrorCode.CATALOG_INVALID,
                message=f"{context}: {identifier!r} has unsupported keys: {', '.join(unknown)}",
            )
        light, dark, hc = (_parse_value(identifier, entry.get(slot), context) for slot in _SLOTS)
        return color_defaults(light, dark, hc)
    raise ThemeColorsError(
        ErrorCode.CATALOG_INVALID,
        message=f"{context}: {identifier!r} must be a mapping or a three item list",
    )


def _parse_value(identifier: str, value: Any, context: str) -> ColorValue:
    if value is None or isinstance(value, str):
        return value
    if isinstance(value, Mapping):
        return transform_from_mapping(value)
    raise ThemeColorsError(
        ErrorCode.CATALOG_INVALID,
        message=f"{context}: {identifier!r} has invalid default {value!r}",
    )


@lru_cache(maxsize=1)
def builtin_catalog() -> Mapping[str, ColorDefaults]:
    """The catalog bundled with the package, loaded once."""
    return MappingProxyType(load_default_catalog(builtin_catalog_path()))
