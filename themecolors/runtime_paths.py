"""Locations of the data files shipped with themecolors."""

from __future__ import annotations

import os
from pathlib import Path
import sys

CATALOG_ENV_VAR = "THEMECOLORS_CATALOG"


def is_frozen() -> bool:
    """Return True when running from a PyInstaller bundle."""
    return bool(getattr(sys, "frozen", False))


def package_root() -> Path:
    """Directory that holds ``data/``.

    Frozen builds unpack into ``sys._MEIPASS``, either flat or under a
    ``themecolors/`` subdirectory depending on the spec file used.
    """
    meipass = getattr(sys, "_MEIPASS", None) if is_frozen() else None
    if not meipass:
        return Path(__file__).resolve().parent
    bundle = Path(meipass)
    nested = bundle / "themecolors"
    return nested if nested.is_dir() else bundle


def data_path(*parts: str) -> Path:
    return package_root().joinpath("data", *parts)


def builtin_catalog_path() -> Path:
    """The default color catalog; ``$THEMECOLORS_CATALOG`` replaces the bundled one."""
    override = os.environ.get(CATALOG_ENV_VAR, "").strip()
    if override:
        return Path(override).expanduser()
    return data_path("color_defaults.yaml")
