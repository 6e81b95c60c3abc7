# -*- coding: utf-8 -*-
"""
Shape Strategies Module

One drawing algorithm per visual style. Module-scope strategies draw a single
module and are called once per dark module of their region. Finder-scope
strategies draw one shape that covers a whole finder pattern (or its inner
3x3 block) and are called once per finder anchor.

Every strategy appends to a LayeredSvgBuilder and never touches its context.

Functions:
    rounded_rect_path: Closed path for a rectangle with per-corner radii
    resolve_strategy: Look up the strategy for a ShapeStyle
"""

from dataclasses import dataclass
from enum import Enum
from typing import Dict, Optional

from .regions import (
    FINDER_CENTER_OFFSET,
    FINDER_INNER_OFFSET,
    FINDER_INNER_SIZE,
    FINDER_SIZE,
    Neighbors,
    Point,
)
from .svg_builder import LayeredSvgBuilder, Number, fmt_number

MODULE_SIZE = 1
EVENODD = "evenodd"


class ShapeStyle(Enum):
    """Every style a region can be drawn with."""
    NONE = "none"
    SQUARE = "square"
    CIRCLE = "circle"
    TRIANGLE = "triangle"
    DIAMOND = "diamond"
    ROUNDED_SQUARE = "rounded-square"
    CIRCLE_INSIDE = "circle-inside"
    SQUIRCLE_INSIDE = "squircle-inside"
    CORNERFLOW_INSIDE = "cornerflow-inside"
    BAGEL_BORDER = "bagel-border"
    SQUIRCLE_BORDER = "squircle-border"
    CORNERFLOW_BORDER = "cornerflow-border"

    @classmethod
    def parse(cls, name: str) -> "ShapeStyle":
        """
        Parse a style name such as ``rounded-square`` or ``ROUNDED_SQUARE``.

        Raises:
            ValueError: If the name matches no style
        """
        key = (name or "").strip().lower().replace("_", "-")
        try:
            return cls(key)
        except ValueError:
            raise ValueError(f"Unknown shape style: {name!r}") from None


class Scope(Enum):
    MODULE = "module"
    FINDER = "finder"


@dataclass(frozen=True)
class ModuleContext:
    """
    Everything a strategy needs to draw.

    For finder-scope strategies ``point`` is the finder anchor (top-left
    corner of the 7x7 window) and ``neighbors`` is left at its default.
    """
    point: Point
    layer: str
    margin: Number
    radius: Number
    color: str
    size: int
    neighbors: Neighbors = Neighbors()
    ring_stroke_width: Number = 1


def rounded_rect_path(x: Number, y: Number, w: Number, h: Number,
                      tl: Number = 0, tr: Number = 0,
                      br: Number = 0, bl: Number = 0) -> str:
    """
    Build a closed SVG path for a rectangle with independent corner radii.

    The path starts on the top edge and runs clockwise. Rounded corners are
    quarter arcs, square corners straight joins. Every radius is clamped to
    ``[0, min(w, h) / 2]``.

    Args:
        x (Number): Left edge
        y (Number): Top edge
        w (Number): Width
        h (Number): Height
        tl, tr, br, bl (Number): Corner radii, top-left clockwise

    Returns:
        str: Path data ending in ``Z``

    Example:
        >>> rounded_rect_path(0, 0, 1, 1)
        'M0 0H1L1 0V1L1 1H0L0 1V0L0 0Z'
    """
    limit = min(w, h) / 2

    def clamp(r):
        return max(0, min(r, limit))

    tl, tr, br, bl = clamp(tl), clamp(tr), clamp(br), clamp(bl)
    f = fmt_number

    def arc(r, ex, ey):
        return f"A{f(r)} {f(r)} 0 0 1 {f(ex)} {f(ey)}"

    d = f"M{f(x + tl)} {f(y)}"
    d += f"H{f(x + w - tr)}"
    d += arc(tr, x + w, y + tr) if tr else f"L{f(x + w)} {f(y)}"
    d += f"V{f(y + h - br)}"
    d += arc(br, x + w - br, y + h) if br else f"L{f(x + w)} {f(y + h)}"
    d += f"H{f(x + bl)}"
    d += arc(bl, x, y + h - bl) if bl else f"L{f(x)} {f(y + h)}"
    d += f"V{f(y + tl)}"
    d += arc(tl, x + tl, y) if tl else f"L{f(x)} {f(y)}"
    return d + "Z"


def _points(*pairs) -> str:
    return " ".join(f"{fmt_number(px)},{fmt_number(py)}" for px, py in pairs)


class ShapeStrategy:
    """Base class: subclasses set ``scope`` and implement ``draw``."""

    scope = Scope.MODULE

    def draw(self, builder: LayeredSvgBuilder, ctx: ModuleContext) -> None:
        raise NotImplementedError


# --------------------------------------------------------------------
#  Module-scope strategies
# --------------------------------------------------------------------

class SquareStrategy(ShapeStrategy):
    def draw(self, builder, ctx):
        x = ctx.point.x + ctx.margin
        y = ctx.point.y + ctx.margin
        builder.add_rect(ctx.layer, x, y, MODULE_SIZE, color=ctx.color)


class CircleStrategy(ShapeStrategy):
    def draw(self, builder, ctx):
        cx = ctx.point.x + ctx.margin + 0.5
        cy = ctx.point.y + ctx.margin + 0.5
        builder.add_circle(ctx.layer, cx, cy, ctx.radius, ctx.color)


class TriangleStrategy(ShapeStrategy):
    """Upward triangle filling the module's cell."""

    def draw(self, builder, ctx):
        x = ctx.point.x + ctx.margin
        y = ctx.point.y + ctx.margin
        half = MODULE_SIZE / 2
        points = _points(
            (x + half, y),
            (x, y + MODULE_SIZE),
            (x + MODULE_SIZE, y + MODULE_SIZE),
        )
        builder.add_polygon(ctx.layer, points, ctx.color)


class DiamondStrategy(ShapeStrategy):
    def draw(self, builder, ctx):
        x = ctx.point.x + ctx.margin
        y = ctx.point.y + ctx.margin
        half = MODULE_SIZE / 2
        points = _points(
            (x + half, y),
            (x + MODULE_SIZE, y + half),
            (x + half, y + MODULE_SIZE),
            (x, y + half),
        )
        builder.add_polygon(ctx.layer, points, ctx.color)


class RoundedSquareStrategy(ShapeStrategy):
    """
    Square whose outer corners are rounded.

    A corner is rounded only when neither edge touching it has a dark
    same-region neighbour, so runs of modules merge into one blob with
    rounded silhouette and no inner seams.
    """

    corner_radius = 0.5

    def draw(self, builder, ctx):
        x = ctx.point.x + ctx.margin
        y = ctx.point.y + ctx.margin
        n, e, s, w = ctx.neighbors
        r = self.corner_radius
        d = rounded_rect_path(
            x, y, MODULE_SIZE, MODULE_SIZE,
            tl=r if not (n or w) else 0,
            tr=r if not (n or e) else 0,
            br=r if not (s or e) else 0,
            bl=r if not (s or w) else 0,
        )
        builder.add_path(ctx.layer, d, ctx.color)


# --------------------------------------------------------------------
#  Finder-scope strategies (ctx.point is the finder anchor)
# --------------------------------------------------------------------

class FinderStrategy(ShapeStrategy):
    scope = Scope.FINDER


class CircleInsideStrategy(FinderStrategy):
    """One big dot covering the 3x3 centre of the finder."""

    finder_radius = 1.5

    def draw(self, builder, ctx):
        cx = ctx.point.x + FINDER_CENTER_OFFSET + ctx.margin + 0.5
        cy = ctx.point.y + FINDER_CENTER_OFFSET + ctx.margin + 0.5
        builder.add_circle(ctx.layer, cx, cy, self.finder_radius, ctx.color)


class InnerRoundedStrategy(FinderStrategy):
    """Rounded 3x3 block in the centre of the finder."""

    radii = (0, 0, 0, 0)

    def draw(self, builder, ctx):
        x = ctx.point.x + FINDER_INNER_OFFSET + ctx.margin
        y = ctx.point.y + FINDER_INNER_OFFSET + ctx.margin
        d = rounded_rect_path(x, y, FINDER_INNER_SIZE, FINDER_INNER_SIZE, *self.radii)
        builder.add_path(ctx.layer, d, ctx.color)


class SquircleInsideStrategy(InnerRoundedStrategy):
    radii = (1, 1, 1, 1)


class CornerflowInsideStrategy(InnerRoundedStrategy):
    # top-left and bottom-right only
    radii = (1.5, 0, 1.5, 0)


class BagelBorderStrategy(FinderStrategy):
    """Stroked circle tracing the finder's outer ring."""

    ring_radius = 3

    def draw(self, builder, ctx):
        cx = ctx.point.x + FINDER_CENTER_OFFSET + ctx.margin + 0.5
        cy = ctx.point.y + FINDER_CENTER_OFFSET + ctx.margin + 0.5
        builder.add_ring(ctx.layer, cx, cy, self.ring_radius, ctx.ring_stroke_width, ctx.color)


class RingBorderStrategy(FinderStrategy):
    """
    Hollow 7x7 frame: an outer and an inner rounded rectangle in one path.

    The even-odd fill rule turns the inner rectangle into a hole.
    """

    thickness = 1
    outer_radii = (0, 0, 0, 0)
    inner_radii = (0, 0, 0, 0)

    def draw(self, builder, ctx):
        x = ctx.point.x + ctx.margin
        y = ctx.point.y + ctx.margin
        t = self.thickness
        inner = FINDER_SIZE - 2 * t
        outer_path = rounded_rect_path(x, y, FINDER_SIZE, FINDER_SIZE, *self.outer_radii)
        inner_path = rounded_rect_path(x + t, y + t, inner, inner, *self.inner_radii)
        builder.add_path(ctx.layer, outer_path + inner_path, ctx.color, EVENODD, EVENODD)


class SquircleBorderStrategy(RingBorderStrategy):
    thickness = 1
    outer_radii = (2, 2, 2, 2)
    inner_radii = (1, 1, 1, 1)


class CornerflowBorderStrategy(RingBorderStrategy):
    thickness = 1.1
    outer_radii = (1, 0, 1, 0)


SHAPE_STRATEGIES: Dict[ShapeStyle, ShapeStrategy] = {
    ShapeStyle.SQUARE: SquareStrategy(),
    ShapeStyle.CIRCLE: CircleStrategy(),
    ShapeStyle.TRIANGLE: TriangleStrategy(),
    ShapeStyle.DIAMOND: DiamondStrategy(),
    ShapeStyle.ROUNDED_SQUARE: RoundedSquareStrategy(),
    ShapeStyle.CIRCLE_INSIDE: CircleInsideStrategy(),
    ShapeStyle.SQUIRCLE_INSIDE: SquircleInsideStrategy(),
    ShapeStyle.CORNERFLOW_INSIDE: CornerflowInsideStrategy(),
    ShapeStyle.BAGEL_BORDER: BagelBorderStrategy(),
    ShapeStyle.SQUIRCLE_BORDER: SquircleBorderStrategy(),
    ShapeStyle.CORNERFLOW_BORDER: CornerflowBorderStrategy(),
}


def resolve_strategy(style) -> Optional[ShapeStrategy]:
    """Return the strategy for ``style``, or None when nothing should be drawn."""
    if not isinstance(style, ShapeStyle):
        return None
    return SHAPE_STRATEGIES.get(style)
