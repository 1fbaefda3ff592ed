"""Resolve theme color identifiers into concrete colors."""

__version__ = "0.3.0"

from themecolors.core.catalog import ColorDefaults, builtin_catalog, load_default_catalog
from themecolors.core.color import HSLA, RGBA, Color, ColorModelError
from themecolors.core.color_value import (
    ColorTransformType,
    ColorValue,
    Darken,
    LessProminent,
    Lighten,
    OneOf,
    Transparent,
    UnknownTransform,
    resolve_color_value,
)
from themecolors.core.theme import ColorTheme, ThemeContribution, ThemeType, UITheme, get_ui_theme_type
from themecolors.core.webview import WebviewBaseOptions, get_webview_properties
from themecolors.errors import ErrorCode, ThemeColorsError

__all__ = [
    "__version__",
    "HSLA",
    "RGBA",
    "Color",
    "ColorDefaults",
    "ColorModelError",
    "ColorTheme",
    "ColorTransformType",
    "ColorValue",
    "Darken",
    "ErrorCode",
    "LessProminent",
    "Lighten",
    "OneOf",
    "ThemeColorsError",
    "ThemeContribution",
    "ThemeType",
    "Transparent",
    "UITheme",
    "UnknownTransform",
    "WebviewBaseOptions",
    "builtin_catalog",
    "get_ui_theme_type",
    "get_webview_properties",
    "load_default_catalog",
    "resolve_color_value",
]
