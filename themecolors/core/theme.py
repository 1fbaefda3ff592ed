"""Color themes: archetype selection and the per-theme resolution table."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
import logging
from typing import Any, Iterator, Mapping

from themecolors.core.catalog import DefaultCatalog, builtin_catalog
from themecolors.core.color import Color
from themecolors.core.color_value import resolve_color_value
from themecolors.core.document import parse_theme_document, parse_theme_document_strict

logger = logging.getLogger(__name__)


class ThemeType(str, Enum):
    """Theme archetype."""

    LIGHT = "light"
    DARK = "dark"
    HIGH_CONTRAST = "hc"

    @property
    def index(self) -> int:
        """Slot of this archetype in a (light, dark, hc) defaults triple."""
        return _TYPE_INDEX[self]


_TYPE_INDEX = {ThemeType.LIGHT: 0, ThemeType.DARK: 1, ThemeType.HIGH_CONTRAST: 2}


class UITheme(str, Enum):
    """``uiTheme`` tokens used by theme contributions."""

    DARK = "vs-dark"
    LIGHT = "vs"
    HIGH_CONTRAST = "hc-black"


def get_ui_theme_type(ui_theme: str | UITheme | None) -> ThemeType:
    """Map a contribution's ``uiTheme`` token to its archetype.

    Anything other than the light and dark tokens is high contrast.
    """
    token = ui_theme.value if isinstance(ui_theme, UITheme) else ui_theme
    if token == UITheme.DARK.value:
        return ThemeType.DARK
    if token == UITheme.LIGHT.value:
        return ThemeType.LIGHT
    return ThemeType.HIGH_CONTRAST


@dataclass(frozen=True, slots=True)
class ThemeContribution:
    """One ``contributes.themes[]`` entry of a package manifest."""

    label: str
    ui_theme: str
    path: str = ""
    id: str = ""

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> ThemeContribution:
        def text(key: str) -> str:
            value = data.get(key)
            return value if isinstance(value, str) else ""

        return cls(
            label=text("label") or text("id"),
            ui_theme=text("uiTheme"),
            path=text("path"),
            id=text("id"),
        )


class ColorTheme:
    """A loaded theme that resolves color identifiers on demand.

    Explicit ``colors`` in the theme document win. Otherwise the default
    for the theme's archetype is taken from ``defaults`` and evaluated with
    this theme's own :meth:`get_color` as the identifier lookup. Every
    result, absent ones included, is memoized for the theme's lifetime,
    except values that ran into a reference cycle.
    """

    def __init__(
        self,
        source: Mapping[str, Any],
        contribution: ThemeContribution | Mapping[str, Any],
        defaults: DefaultCatalog | None = None,
    ) -> None:
        if not isinstance(contribution, ThemeContribution):
            contribution = ThemeContribution.from_mapping(contribution)
        self._source = source if isinstance(source, Mapping) else {}
        self._contribution = contribution
        self._defaults = defaults if defaults is not None else builtin_catalog()
        colors = self._source.get("colors")
        self._colors: Mapping[str, Any] = colors if isinstance(colors, Mapping) else {}
        self._type = get_ui_theme_type(contribution.ui_theme)
        self._resolved: dict[str, Color | None] = {}
        self._resolving: set[str] = set()
        self._cycle_hits = 0

    @classmethod
    def parse(
        cls,
        text: str,
        contribution: ThemeContribution | Mapping[str, Any],
        defaults: DefaultCatalog | None = None,
    ) -> ColorTheme:
        """Parse a theme document leniently; syntax errors yield an empty theme."""
        return cls(parse_theme_document(text), contribution, defaults)

    @classmethod
    def parse_strict(
        cls,
        text: str,
        contribution: ThemeContribution | Mapping[str, Any],
        defaults: DefaultCatalog | None = None,
    ) -> ColorTheme:
        """Parse a theme document, raising on any syntax error."""
        return cls(parse_theme_document_strict(text), contribution, defaults)

    @property
    def source(self) -> Mapping[str, Any]:
        return self._source

    @property
    def contribution(self) -> ThemeContribution:
        return self._contribution

    @property
    def name(self) -> str:
        return self._contribution.label

    @property
    def ui_theme(self) -> str:
        return self._contribution.ui_theme

    @property
    def type(self) -> ThemeType:
        return self._type

    @property
    def colors(self) -> Mapping[str, Any]:
        return self._colors

    def get_color(self, identifier: str) -> Color | None:
        """Resolve ``identifier`` to a color, or ``None`` when it is unset."""
        if identifier in self._resolved:
            return self._resolved[identifier]

        if identifier in self._colors:
            raw = self._colors[identifier]
            color = Color.from_hex(raw) if isinstance(raw, str) else None
            self._resolved[identifier] = color
            return color

        entry = self._defaults.get(identifier)
        default_value = entry[self._type.index] if entry is not None else None
        if default_value is None:
            self._resolved[identifier] = None
            return None

        if identifier in self._resolving:
            logger.warning("Cyclic color reference through %r in theme %r", identifier, self.name)
            self._cycle_hits += 1
            return None

        hits_before = self._cycle_hits
        self._resolving.add(identifier)
        try:
            color = resolve_color_value(default_value, self.get_color)
        finally:
            self._resolving.discard(identifier)
        # Results cut short by a cycle depend on the entry point; never memoize them.
        if self._cycle_hits == hits_before:
            self._resolved[identifier] = color
        return color

    def items(self) -> Iterator[tuple[str, Color | None]]:
        """Yield ``(identifier, color)`` for every catalog identifier, in catalog order."""
        for identifier in list(self._defaults.keys()):
            yield identifier, self.get_color(identifier)

    def __iter__(self) -> Iterator[tuple[str, Color | None]]:
        return self.items()

    def __repr__(self) -> str:
        return f"ColorTheme(name={self.name!r}, type={self._type.value!r})"
