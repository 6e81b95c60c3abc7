# -*- coding: utf-8 -*-
"""
Render Options Module

Callers describe a render with a RenderOptions object in which every field is
optional. resolve_options() validates it and returns a new, frozen
ResolvedOptions with the defaults filled in; the caller's object is left as
it was.

Defaults:
    margin: 4 modules of quiet zone
    module_scale: 1 (module radius 0.5)
    foreground / background: '#000000' / '#fff'
    styles: SQUARE for all three regions
    ecc: 'L'
"""

from dataclasses import dataclass
from typing import Dict, FrozenSet, Optional, Union

from .errors import OptionsError, StyleNotSupportedError
from .regions import Region
from .shapes import ShapeStyle

Number = Union[int, float]

ECC_LEVELS = ('L', 'M', 'Q', 'H')

DEFAULT_MARGIN = 4
DEFAULT_MODULE_SCALE = 1
DEFAULT_FOREGROUND = '#000000'
DEFAULT_BACKGROUND = '#fff'
DEFAULT_RING_STROKE_WIDTH = 1
DEFAULT_ECC = 'L'
DEFAULT_SHAPE_RENDERING = 'crispEdges'

_EVERYWHERE = {ShapeStyle.NONE, ShapeStyle.SQUARE, ShapeStyle.CIRCLE, ShapeStyle.ROUNDED_SQUARE}

# Styles each region is able to draw
REGION_STYLES: Dict[Region, FrozenSet[ShapeStyle]] = {
    Region.DATA: frozenset(_EVERYWHERE | {
        ShapeStyle.TRIANGLE,
        ShapeStyle.DIAMOND,
    }),
    Region.FINDER_BORDER: frozenset(_EVERYWHERE | {
        ShapeStyle.BAGEL_BORDER,
        ShapeStyle.SQUIRCLE_BORDER,
        ShapeStyle.CORNERFLOW_BORDER,
    }),
    Region.FINDER_INTERIOR: frozenset(_EVERYWHERE | {
        ShapeStyle.CIRCLE_INSIDE,
        ShapeStyle.SQUIRCLE_INSIDE,
        ShapeStyle.CORNERFLOW_INSIDE,
    }),
}

# Solid layer per region, in registration order
LAYER_NAMES: Dict[Region, str] = {
    Region.FINDER_INTERIOR: 'finder-interior',
    Region.FINDER_BORDER: 'finder-border',
    Region.DATA: 'data',
}


@dataclass
class RenderOptions:
    """Possibly partial render configuration, as supplied by a caller."""
    margin: Optional[Number] = None
    module_scale: Optional[Number] = None
    foreground: Optional[str] = None
    background: Optional[str] = None
    finder_border_style: Optional[ShapeStyle] = None
    finder_interior_style: Optional[ShapeStyle] = None
    data_style: Optional[ShapeStyle] = None
    finder_border_color: Optional[str] = None
    finder_interior_color: Optional[str] = None
    data_color: Optional[str] = None
    finder_ring_stroke_width: Optional[Number] = None
    shape_rendering: Optional[str] = None
    ecc: Optional[str] = None


@dataclass(frozen=True)
class ResolvedOptions:
    margin: Number
    module_scale: Number
    foreground: str
    background: str
    finder_border_style: ShapeStyle
    finder_interior_style: ShapeStyle
    data_style: ShapeStyle
    finder_border_color: str
    finder_interior_color: str
    data_color: str
    finder_ring_stroke_width: Number
    shape_rendering: str
    ecc: str

    @property
    def module_radius(self) -> float:
        return 0.5 * self.module_scale

    def style_for(self, region: Region) -> ShapeStyle:
        return {
            Region.FINDER_BORDER: self.finder_border_style,
            Region.FINDER_INTERIOR: self.finder_interior_style,
            Region.DATA: self.data_style,
        }[region]

    def color_for(self, region: Region) -> str:
        return {
            Region.FINDER_BORDER: self.finder_border_color,
            Region.FINDER_INTERIOR: self.finder_interior_color,
            Region.DATA: self.data_color,
        }[region]


def _pick(value, default):
    return default if value is None else value


def _check_number(name: str, value, minimum: Number, inclusive: bool = True) -> None:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise OptionsError(f"{name} must be a number, got {value!r}")
    if value < minimum or (not inclusive and value == minimum):
        op = '>=' if inclusive else '>'
        raise OptionsError(f"{name} must be {op} {minimum}, got {value!r}")


def _check_style(region: Region, style) -> ShapeStyle:
    if isinstance(style, str):
        try:
            style = ShapeStyle.parse(style)
        except ValueError as ex:
            raise OptionsError(str(ex)) from None
    if not isinstance(style, ShapeStyle):
        raise OptionsError(f"Not a shape style: {style!r}")
    if style not in REGION_STYLES[region]:
        raise StyleNotSupportedError(region, style)
    return style


def resolve_options(options: Optional[Union[RenderOptions, ResolvedOptions]] = None) -> ResolvedOptions:
    """
    Fill in defaults and validate a render configuration.

    Args:
        options: Partial options, already resolved options (returned as is),
            or None for all defaults

    Returns:
        ResolvedOptions: Fully populated, immutable configuration

    Raises:
        OptionsError: If a numeric field is out of range or the ECC level
            is unknown
        StyleNotSupportedError: If a style is selected for a region that
            cannot draw it

    Example:
        >>> opts = resolve_options(RenderOptions(margin=2, data_style=ShapeStyle.CIRCLE))
        >>> opts.margin, opts.foreground, opts.finder_border_style
        (2, '#000000', <ShapeStyle.SQUARE: 'square'>)
    """
    if isinstance(options, ResolvedOptions):
        return options
    opts = options or RenderOptions()

    margin = _pick(opts.margin, DEFAULT_MARGIN)
    module_scale = _pick(opts.module_scale, DEFAULT_MODULE_SCALE)
    ring_width = _pick(opts.finder_ring_stroke_width, DEFAULT_RING_STROKE_WIDTH)
    _check_number('margin', margin, 0)
    _check_number('module_scale', module_scale, 0, inclusive=False)
    if module_scale > 1:
        raise OptionsError(f"module_scale must be <= 1, got {module_scale!r}")
    _check_number('finder_ring_stroke_width', ring_width, 0, inclusive=False)

    ecc = str(_pick(opts.ecc, DEFAULT_ECC)).strip().upper()
    if ecc not in ECC_LEVELS:
        raise OptionsError(f"ecc must be one of {', '.join(ECC_LEVELS)}, got {opts.ecc!r}")

    foreground = _pick(opts.foreground, DEFAULT_FOREGROUND)

    return ResolvedOptions(
        margin=margin,
        module_scale=module_scale,
        foreground=foreground,
        background=_pick(opts.background, DEFAULT_BACKGROUND),
        finder_border_style=_check_style(
            Region.FINDER_BORDER, _pick(opts.finder_border_style, ShapeStyle.SQUARE)),
        finder_interior_style=_check_style(
            Region.FINDER_INTERIOR, _pick(opts.finder_interior_style, ShapeStyle.SQUARE)),
        data_style=_check_style(Region.DATA, _pick(opts.data_style, ShapeStyle.SQUARE)),
        finder_border_color=_pick(opts.finder_border_color, foreground),
        finder_interior_color=_pick(opts.finder_interior_color, foreground),
        data_color=_pick(opts.data_color, foreground),
        finder_ring_stroke_width=ring_width,
        shape_rendering=_pick(opts.shape_rendering, DEFAULT_SHAPE_RENDERING),
        ecc=ecc,
    )
