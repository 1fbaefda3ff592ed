"""Color value expressions and their evaluation.

A ``ColorValue`` is one of:

* a :class:`Color` (returned as-is),
* a hex string such as ``"#1e1e1e"``,
* an identifier string such as ``"editor.background"``, resolved through a
  caller-supplied lookup,
* a transform (``Darken``, ``Lighten``, ``Transparent``, ``OneOf``,
  ``LessProminent``) whose operands are themselves color values.

Evaluation keeps no state of its own. Memoization belongs to whoever
supplies the lookup, so the same expression tree can be evaluated against
several themes.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
import logging
from typing import Any, Callable, Mapping, Union

from themecolors.core.color import Color

logger = logging.getLogger(__name__)


class ColorTransformType(str, Enum):
    DARKEN = "darken"
    LIGHTEN = "lighten"
    TRANSPARENT = "transparent"
    ONE_OF = "oneOf"
    LESS_PROMINENT = "lessProminent"


@dataclass(frozen=True, slots=True)
class Darken:
    value: ColorValue
    factor: float

    @property
    def op(self) -> ColorTransformType:
        return ColorTransformType.DARKEN


@dataclass(frozen=True, slots=True)
class Lighten:
    value: ColorValue
    factor: float

    @property
    def op(self) -> ColorTransformType:
        return ColorTransformType.LIGHTEN


@dataclass(frozen=True, slots=True)
class Transparent:
    value: ColorValue
    factor: float

    @property
    def op(self) -> ColorTransformType:
        return ColorTransformType.TRANSPARENT


@dataclass(frozen=True, slots=True)
class OneOf:
    """First candidate that resolves wins."""

    values: tuple[ColorValue, ...]

    def __post_init__(self) -> None:
        object.__setattr__(self, "values", tuple(self.values))

    @property
    def op(self) -> ColorTransformType:
        return ColorTransformType.ONE_OF


@dataclass(frozen=True, slots=True)
class LessProminent:
    """Pull ``value`` toward ``background`` and fade it."""

    value: ColorValue
    background: ColorValue
    factor: float
    transparency: float

    @property
    def op(self) -> ColorTransformType:
        return ColorTransformType.LESS_PROMINENT


@dataclass(frozen=True, slots=True)
class UnknownTransform:
    """A transform whose operator this version does not implement."""

    op: str
    payload: Mapping[str, Any] = field(default_factory=dict)


ColorTransform = Union[Darken, Lighten, Transparent, OneOf, LessProminent, UnknownTransform]
ColorValue = Union[Color, str, ColorTransform, None]
ColorLookup = Callable[[str], Union[Color, None]]

_OP_ALIASES: dict[str, ColorTransformType] = {
    transform_type.value.lower(): transform_type for transform_type in ColorTransformType
}
_OP_ALIASES.update(
    {
        "one_of": ColorTransformType.ONE_OF,
        "less_prominent": ColorTransformType.LESS_PROMINENT,
    }
)


def transform_from_mapping(data: Mapping[str, Any]) -> ColorTransform:
    """Build a transform from its mapping form, e.g. ``{"op": "darken", ...}``.

    Operand values may themselves be mappings. Operators that are not
    recognized, or recognized operators with missing fields, come back as
    :class:`UnknownTransform` so that evaluation degrades instead of failing.
    """
    raw_op = data.get("op")
    op = _OP_ALIASES.get(str(raw_op).lower()) if raw_op is not None else None
    try:
        if op in (
            ColorTransformType.DARKEN,
            ColorTransformType.LIGHTEN,
            ColorTransformType.TRANSPARENT,
        ):
            kind = {
                ColorTransformType.DARKEN: Darken,
                ColorTransformType.LIGHTEN: Lighten,
                ColorTransformType.TRANSPARENT: Transparent,
            }[op]
            return kind(_operand(data["value"]), float(data["factor"]))
        if op is ColorTransformType.ONE_OF:
            values = data["values"]
            if isinstance(values, (str, Mapping)):
                raise TypeError("oneOf values must be a list")
            return OneOf(tuple(_operand(item) for item in values))
        if op is ColorTransformType.LESS_PROMINENT:
            return LessProminent(
                _operand(data["value"]),
                _operand(data["background"]),
                float(data["factor"]),
                float(data["transparency"]),
            )
    except (KeyError, TypeError, ValueError):
        return UnknownTransform(op=str(raw_op), payload=dict(data))
    return UnknownTransform(op=str(raw_op), payload=dict(data))


def _operand(value: Any) -> ColorValue:
    if isinstance(value, Mapping):
        return transform_from_mapping(value)
    return value


def resolve_color_value(color_value: ColorValue | Mapping[str, Any], lookup: ColorLookup) -> Color | None:
    """Evaluate ``color_value`` to a concrete color, or ``None`` when absent.

    ``lookup`` resolves identifier references. It is normally the owning
    theme's ``get_color`` so references share that theme's cache.
    """
    if color_value is None:
        return None
    if isinstance(color_value, Color):
        return color_value
    if isinstance(color_value, str):
        if color_value.startswith("#"):
            return Color.from_hex(color_value)
        if not color_value:
            return None
        return lookup(color_value)
    if isinstance(color_value, Mapping):
        color_value = transform_from_mapping(color_value)
    return _execute_transform(color_value, lookup)


def _execute_transform(transform: Any, lookup: ColorLookup) -> Color | None:
    if isinstance(transform, Darken):
        color = resolve_color_value(transform.value, lookup)
        return color.darken(transform.factor) if color is not None else None

    if isinstance(transform, Lighten):
        color = resolve_color_value(transform.value, lookup)
        return color.lighten(transform.factor) if color is not None else None

    if isinstance(transform, Transparent):
        color = resolve_color_value(transform.value, lookup)
        return color.transparent(transform.factor) if color is not None else None

    if isinstance(transform, OneOf):
        for candidate in transform.values:
            color = resolve_color_value(candidate, lookup)
            if color is not None:
                return color
        return None

    if isinstance(transform, LessProminent):
        source = resolve_color_value(transform.value, lookup)
        if source is None:
            return None

        background = resolve_color_value(transform.background, lookup)
        if background is None:
            return source.transparent(transform.factor * transform.transparency)

        if source.is_darker_than(background):
            shaded = Color.get_lighter_color(source, background, transform.factor)
        else:
            shaded = Color.get_darker_color(source, background, transform.factor)
        return shaded.transparent(transform.transparency)

    logger.warning("Unknown color transform %r; treating as unset", transform)
    return None
