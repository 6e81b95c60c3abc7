# -*- coding: utf-8 -*-
"""
qrstyle - Styled QR code rendering

Renders QR symbols as SVG with a separate shape style for the finder borders,
the finder interiors and the data modules.

Modules:
    regions: Module classification and neighbour probing
    svg_builder: Layered SVG document builder
    shapes: Shape styles and their drawing strategies
    options: Render options and their defaults
    renderer: Matrix walker producing the styled SVG
    content: Payload formatting (WiFi, URL, SMS, ...)
    qr_generator: segno encoding and the top-level render functions
"""

__version__ = "1.0.0"

from .content import (
    ContentType, WiFiEncryption, WiFiConfig, PhoneConfig, SMSConfig,
    EmailConfig, URLConfig, TextConfig, format_content
)
from .errors import QRStyleError, OptionsError, StyleNotSupportedError, UnknownContentTypeError
from .options import RenderOptions, ResolvedOptions, REGION_STYLES, resolve_options
from .qr_generator import BoolMatrix, SegnoMatrix, make_qr, render_qr_svg, render_text_svg
from .regions import Point, Region, classify_module, finder_anchors, probe_neighbors
from .renderer import render_matrix, render_region_map_png
from .shapes import ShapeStyle, resolve_strategy
from .svg_builder import LayeredSvgBuilder, ViewBox

__all__ = [
    'ContentType',
    'WiFiEncryption',
    'WiFiConfig',
    'PhoneConfig',
    'SMSConfig',
    'EmailConfig',
    'URLConfig',
    'TextConfig',
    'format_content',
    'QRStyleError',
    'OptionsError',
    'StyleNotSupportedError',
    'UnknownContentTypeError',
    'RenderOptions',
    'ResolvedOptions',
    'REGION_STYLES',
    'resolve_options',
    'BoolMatrix',
    'SegnoMatrix',
    'make_qr',
    'render_qr_svg',
    'render_text_svg',
    'Point',
    'Region',
    'classify_module',
    'finder_anchors',
    'probe_neighbors',
    'render_matrix',
    'render_region_map_png',
    'ShapeStyle',
    'resolve_strategy',
    'LayeredSvgBuilder',
    'ViewBox',
]
