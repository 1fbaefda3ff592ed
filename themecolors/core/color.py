"""Immutable color value model: RGBA/HSLA records and color arithmetic."""

from __future__ import annotations

from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal
import math
import re

_HEX_COLOR_RE = re.compile(r"^#(?:[0-9a-f]{3,4}|[0-9a-f]{6}|[0-9a-f]{8})$", re.IGNORECASE)

# Lightness increment used when searching for a contrasting shade.
_LIGHTNESS_STEP = 0.05


class ColorModelError(ArithmeticError):
    """Raised when a channel value escapes its range after normalization."""


def _round_half_up(value: float) -> int:
    return math.floor(value + 0.5)


def _round_float(value: float, decimals: int) -> float:
    scale = 10**decimals
    return _round_half_up(value * scale) / scale


def _clamp(value: float, low: float, high: float) -> float:
    return max(min(high, value), low)


@dataclass(frozen=True, slots=True)
class RGBA:
    """Red, green, blue in [0, 255] (integers) and alpha in [0, 1]."""

    r: int
    g: int
    b: int
    a: float = 1.0

    def __post_init__(self) -> None:
        for name in ("r", "g", "b"):
            value = getattr(self, name)
            if not isinstance(value, int) or not 0 <= value <= 255:
                raise ColorModelError(f"RGBA channel {name}={value!r} outside [0, 255]")
        if not 0.0 <= self.a <= 1.0:
            raise ColorModelError(f"RGBA alpha {self.a!r} outside [0, 1]")

    @classmethod
    def clamped(cls, r: float, g: float, b: float, a: float = 1.0) -> RGBA:
        return cls(
            int(_clamp(r, 0, 255)),
            int(_clamp(g, 0, 255)),
            int(_clamp(b, 0, 255)),
            _round_float(_clamp(a, 0.0, 1.0), 3),
        )


@dataclass(frozen=True, slots=True)
class HSLA:
    """Hue in [0, 360] degrees, saturation/lightness/alpha in [0, 1]."""

    h: int
    s: float
    l: float  # noqa: E741
    a: float = 1.0

    def __post_init__(self) -> None:
        if not isinstance(self.h, int) or not 0 <= self.h <= 360:
            raise ColorModelError(f"HSLA hue {self.h!r} outside [0, 360]")
        for name in ("s", "l", "a"):
            value = getattr(self, name)
            if not 0.0 <= value <= 1.0:
                raise ColorModelError(f"HSLA channel {name}={value!r} outside [0, 1]")

    @classmethod
    def clamped(cls, h: float, s: float, l: float, a: float = 1.0) -> HSLA:  # noqa: E741
        return cls(
            int(_clamp(h, 0, 360)),
            _round_float(_clamp(s, 0.0, 1.0), 3),
            _round_float(_clamp(l, 0.0, 1.0), 3),
            _round_float(_clamp(a, 0.0, 1.0), 3),
        )

    @classmethod
    def from_rgba(cls, rgba: RGBA) -> HSLA:
        r = rgba.r / 255
        g = rgba.g / 255
        b = rgba.b / 255
        high = max(r, g, b)
        low = min(r, g, b)
        hue = 0.0
        saturation = 0.0
        lightness = (low + high) / 2
        chroma = high - low

        if chroma > 0:
            if lightness <= 0.5:
                saturation = min(chroma / (2 * lightness), 1.0)
            else:
                saturation = min(chroma / (2 - 2 * lightness), 1.0)
            if high == r:
                hue = (g - b) / chroma + (6 if g < b else 0)
            elif high == g:
                hue = (b - r) / chroma + 2
            else:
                hue = (r - g) / chroma + 4
            hue = _round_half_up(hue * 60)

        return cls.clamped(hue, saturation, lightness, rgba.a)

    def to_rgba(self) -> RGBA:
        hue = self.h / 360
        if self.s == 0:
            r = g = b = self.l
        else:
            if self.l < 0.5:
                q = self.l * (1 + self.s)
            else:
                q = self.l + self.s - self.l * self.s
            p = 2 * self.l - q
            r = _hue_to_channel(p, q, hue + 1 / 3)
            g = _hue_to_channel(p, q, hue)
            b = _hue_to_channel(p, q, hue - 1 / 3)
        return RGBA.clamped(
            _round_half_up(r * 255),
            _round_half_up(g * 255),
            _round_half_up(b * 255),
            self.a,
        )


def _hue_to_channel(p: float, q: float, t: float) -> float:
    if t < 0:
        t += 1
    if t > 1:
        t -= 1
    if t < 1 / 6:
        return p + (q - p) * 6 * t
    if t < 1 / 2:
        return q
    if t < 2 / 3:
        return p + (q - p) * (2 / 3 - t) * 6
    return p


def _relative_luminance_component(channel: int) -> float:
    c = channel / 255
    if c <= 0.03928:
        return c / 12.92
    return ((c + 0.055) / 1.055) ** 2.4


class Color:
    """A concrete color. Every operation returns a new instance."""

    __slots__ = ("_rgba", "_hsla")

    def __init__(self, value: RGBA | HSLA) -> None:
        if isinstance(value, HSLA):
            self._hsla: HSLA | None = value
            self._rgba = value.to_rgba()
        elif isinstance(value, RGBA):
            self._hsla = None
            self._rgba = value
        else:
            raise TypeError(f"Color expects RGBA or HSLA, got {type(value).__name__}")

    @classmethod
    def from_hex(cls, text: str) -> Color | None:
        """Parse ``#rgb``, ``#rgba``, ``#rrggbb`` or ``#rrggbbaa``; ``None`` if malformed."""
        if not isinstance(text, str):
            return None
        cleaned = text.strip()
        if not _HEX_COLOR_RE.match(cleaned):
            return None
        digits = cleaned[1:]
        if len(digits) in (3, 4):
            digits = "".join(ch * 2 for ch in digits)
        r = int(digits[0:2], 16)
        g = int(digits[2:4], 16)
        b = int(digits[4:6], 16)
        a = int(digits[6:8], 16) / 255 if len(digits) == 8 else 1.0
        return cls(RGBA.clamped(r, g, b, a))

    @property
    def rgba(self) -> RGBA:
        return self._rgba

    @property
    def hsla(self) -> HSLA:
        if self._hsla is None:
            self._hsla = HSLA.from_rgba(self._rgba)
        return self._hsla

    # -- comparisons --

    def get_relative_luminance(self) -> float:
        """WCAG relative luminance, rounded to 4 decimals."""
        red = 0.2126 * _relative_luminance_component(self._rgba.r)
        green = 0.7152 * _relative_luminance_component(self._rgba.g)
        blue = 0.0722 * _relative_luminance_component(self._rgba.b)
        return _round_float(red + green + blue, 4)

    def is_darker_than(self, other: Color) -> bool:
        return self.get_relative_luminance() < other.get_relative_luminance()

    def is_lighter_than(self, other: Color) -> bool:
        return self.get_relative_luminance() > other.get_relative_luminance()

    def is_opaque(self) -> bool:
        return self._rgba.a == 1

    def is_transparent(self) -> bool:
        return self._rgba.a == 0

    # -- transforms --

    def lighten(self, factor: float) -> Color:
        """Move lightness ``factor`` of the way toward 1."""
        hsla = self.hsla
        return Color(HSLA.clamped(hsla.h, hsla.s, hsla.l + (1 - hsla.l) * factor, hsla.a))

    def darken(self, factor: float) -> Color:
        """Move lightness ``factor`` of the way toward 0."""
        hsla = self.hsla
        return Color(HSLA.clamped(hsla.h, hsla.s, hsla.l - hsla.l * factor, hsla.a))

    def transparent(self, factor: float) -> Color:
        r, g, b, a = self._rgba.r, self._rgba.g, self._rgba.b, self._rgba.a
        return Color(RGBA.clamped(r, g, b, a * factor))

    def blend(self, other: Color) -> Color:
        """Composite this color over ``other``."""
        top, bottom = self._rgba, other.rgba
        alpha = top.a + bottom.a * (1 - top.a)
        if alpha < 1e-6:
            return Color(RGBA(0, 0, 0, 0))

        def mix(upper: int, lower: int) -> float:
            return upper * top.a / alpha + lower * bottom.a * (1 - top.a) / alpha

        return Color(
            RGBA.clamped(mix(top.r, bottom.r), mix(top.g, bottom.g), mix(top.b, bottom.b), alpha)
        )

    def make_opaque(self, background: Color) -> Color:
        """Flatten a translucent color onto an opaque background."""
        if self.is_opaque() or background.rgba.a != 1:
            return self
        fg, bg = self._rgba, background.rgba
        return Color(
            RGBA.clamped(
                bg.r - fg.a * (bg.r - fg.r),
                bg.g - fg.a * (bg.g - fg.g),
                bg.b - fg.a * (bg.b - fg.b),
                1.0,
            )
        )

    @staticmethod
    def get_lighter_color(of: Color, relative: Color, factor: float) -> Color:
        """Return ``of`` re-shaded to sit above ``relative`` in luminance.

        The starting lightness is ``factor`` of the way from ``relative``'s
        lightness to white; it is then raised until the result is lighter
        than ``relative`` or reaches white.
        """
        if factor <= 0:
            return of
        hsla = of.hsla
        base = relative.hsla.l
        candidate = Color(HSLA.clamped(hsla.h, hsla.s, base + (1 - base) * factor, hsla.a))
        while not candidate.is_lighter_than(relative) and candidate.hsla.l < 1:
            lightness = min(1.0, candidate.hsla.l + _LIGHTNESS_STEP)
            candidate = Color(HSLA.clamped(hsla.h, hsla.s, lightness, hsla.a))
        return candidate

    @staticmethod
    def get_darker_color(of: Color, relative: Color, factor: float) -> Color:
        """Mirror of :meth:`get_lighter_color`, heading toward black."""
        if factor <= 0:
            return of
        hsla = of.hsla
        base = relative.hsla.l
        candidate = Color(HSLA.clamped(hsla.h, hsla.s, base * (1 - factor), hsla.a))
        while not candidate.is_darker_than(relative) and candidate.hsla.l > 0:
            lightness = max(0.0, candidate.hsla.l - _LIGHTNESS_STEP)
            candidate = Color(HSLA.clamped(hsla.h, hsla.s, lightness, hsla.a))
        return candidate

    # -- serialization --

    def to_hex(self) -> str:
        """``#rrggbb`` for opaque colors, ``#rrggbbaa`` otherwise."""
        r, g, b, a = self._rgba.r, self._rgba.g, self._rgba.b, self._rgba.a
        text = f"#{r:02x}{g:02x}{b:02x}"
        if a != 1:
            text += f"{_round_half_up(a * 255):02x}"
        return text

    def to_css(self) -> str:
        if self.is_opaque():
            return self.to_hex()
        alpha = Decimal(self._rgba.a).quantize(Decimal("0.01"), rounding=ROUND_HALF_UP)
        alpha_text = format(alpha, "f").rstrip("0").rstrip(".") or "0"
        return f"rgba({self._rgba.r}, {self._rgba.g}, {self._rgba.b}, {alpha_text})"

    def __str__(self) -> str:
        return self.to_css()

    def __repr__(self) -> str:
        return f"Color({self.to_hex()!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Color):
            return NotImplemented
        return self._rgba == other._rgba

    def __hash__(self) -> int:
        return hash(self._rgba)


WHITE = Color(RGBA(255, 255, 255, 1.0))
BLACK = Color(RGBA(0, 0, 0, 1.0))
