# -*- coding: utf-8 -*-
"""
QR Code Renderer Module

Turns a module matrix into a styled SVG document. Each region (finder border,
finder interior, data) is drawn with the shape style chosen for it and lands
in its own layer of the document.

The render runs in two phases:
    1. Finder-scope styles draw one shape per finder pattern, visiting the
       three anchors in the fixed order top-left, top-right, bottom-left.
    2. The matrix is walked row by row; every dark module whose region uses
       a module-scope style is drawn on its own.

A PNG region map (Pillow) is also available to inspect the classification.

Functions:
    render_matrix: Render a styled SVG document
    render_region_map_png: Render the region classification as a PNG
"""

import base64
import logging
from io import BytesIO
from typing import Any, Dict, Optional, Tuple, Union

from PIL import Image, ImageDraw

from .options import LAYER_NAMES, REGION_STYLES, RenderOptions, ResolvedOptions, resolve_options
from .regions import (
    MIN_SEPARATED_SIZE,
    ModuleMatrix,
    Neighbors,
    Point,
    Region,
    classify_module,
    finder_anchors,
    probe_neighbors,
)
from .shapes import ModuleContext, Scope, ShapeStyle, resolve_strategy
from .svg_builder import LayeredSvgBuilder, ViewBox

logger = logging.getLogger(__name__)


# Color palette for the region map
PALETTE = {
    'background': (255, 255, 255),    # White background
    'light': (235, 235, 235),         # Light gray - light modules inside the symbol
    Region.FINDER_BORDER: (128, 0, 128),      # Purple - finder outer ring
    Region.FINDER_INTERIOR: (0, 128, 128),    # Teal - finder centre
    Region.DATA: (35, 35, 35),                # Dark gray - everything else
}


def render_matrix(
    matrix: ModuleMatrix,
    options: Optional[Union[RenderOptions, ResolvedOptions]] = None
) -> str:
    """
    Render a module matrix as a styled SVG document.

    Args:
        matrix (ModuleMatrix): Grid exposing ``size`` and ``get_module(x, y)``
        options: Render options; missing fields take their defaults

    Returns:
        str: Complete SVG document, or an empty string when the matrix is too
            small to hold three separate finder patterns

    Raises:
        OptionsError: If the options cannot be resolved

    Example:
        >>> svg = render_matrix(SegnoMatrix(make_qr("hello")),
        ...                     RenderOptions(data_style=ShapeStyle.CIRCLE))
        >>> svg.startswith('<svg')
        True
    """
    opts = resolve_options(options)
    size = matrix.size

    if size < MIN_SEPARATED_SIZE:
        logger.warning(f"Matrix size {size} is too small for three finder patterns; nothing rendered")
        return ""

    view = size + 2 * opts.margin
    builder = (
        LayeredSvgBuilder()
        .set_viewport(ViewBox(0, 0, view, view), opts.shape_rendering)
        .set_background(opts.background)
        .set_primary_color(opts.foreground)
    )
    for name in LAYER_NAMES.values():
        builder.register_solid_layer(name)

    strategies = {}
    for region in LAYER_NAMES:
        style = opts.style_for(region)
        if not isinstance(style, ShapeStyle) or style not in REGION_STYLES[region]:
            logger.debug(f"{style!r} cannot be drawn in {region.name}; region skipped")
            strategies[region] = None
            continue
        strategy = resolve_strategy(style)
        if strategy is None:
            logger.debug(f"No strategy for {style!r}; {region.name} is not drawn")
        strategies[region] = strategy

    # Phase 1: one shape per finder pattern
    for region, strategy in strategies.items():
        if strategy is None or strategy.scope is not Scope.FINDER:
            continue
        for anchor in finder_anchors(size):
            strategy.draw(builder, _context(opts, region, anchor, size))

    # Phase 2: per-module walk
    for y in range(size):
        for x in range(size):
            if not matrix.get_module(x, y):
                continue
            point = Point(x, y)
            region = classify_module(point, size)
            strategy = strategies[region]
            if strategy is None or strategy.scope is not Scope.MODULE:
                continue
            ctx = _context(opts, region, point, size, probe_neighbors(point, matrix, size))
            strategy.draw(builder, ctx)

    return builder.build()


def _context(opts: ResolvedOptions, region: Region, point: Point, size: int,
             neighbors: Neighbors = Neighbors()) -> ModuleContext:
    return ModuleContext(
        point=point,
        layer=LAYER_NAMES[region],
        margin=opts.margin,
        radius=opts.module_radius,
        color=opts.color_for(region),
        size=size,
        neighbors=neighbors,
        ring_stroke_width=opts.finder_ring_stroke_width,
    )


def render_region_map_png(
    matrix: ModuleMatrix,
    border: int = 4,
    scale: int = 6
) -> Tuple[str, Dict[str, Any]]:
    """
    Render the region classification of a matrix as a PNG.

    Every dark module is painted with its region's palette colour; light
    modules inside the symbol are painted light gray so the grid stays
    readable.

    Args:
        matrix (ModuleMatrix): Module grid
        border (int): Quiet zone size in modules
        scale (int): Pixel size per module

    Returns:
        Tuple[str, Dict[str, Any]]: (base64_png, metrics_dict)
            - base64_png: Base64-encoded PNG image
            - metrics_dict: size, module counts per region, border
    """
    size = matrix.size
    img_px = (size + 2 * border) * scale
    img = Image.new('RGB', (img_px, img_px), PALETTE['background'])
    draw = ImageDraw.Draw(img)

    counts = {region: 0 for region in Region}
    dark_modules = 0

    for y in range(size):
        for x in range(size):
            x0 = (x + border) * scale
            y0 = (y + border) * scale
            x1 = x0 + scale - 1
            y1 = y0 + scale - 1

            if not matrix.get_module(x, y):
                draw.rectangle([x0, y0, x1, y1], fill=PALETTE['light'])
                continue

            dark_modules += 1
            region = classify_module(Point(x, y), size)
            counts[region] += 1
            draw.rectangle([x0, y0, x1, y1], fill=PALETTE[region])

    buf = BytesIO()
    img.save(buf, format='PNG')
    b64 = base64.b64encode(buf.getvalue()).decode('ascii')

    return b64, {
        'size': size,
        'modules': size * size,
        'dark_modules': dark_modules,
        'finder_border_modules': counts[Region.FINDER_BORDER],
        'finder_interior_modules': counts[Region.FINDER_INTERIOR],
        'data_modules': counts[Region.DATA],
        'border': border
    }
