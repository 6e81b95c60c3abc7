# -*- coding: utf-8 -*-
"""
Layered SVG Builder Module

Accumulates drawing primitives into named layers and serialises them into a
single SVG document. Solid layers hold standalone elements (rect, circle,
polygon, stroked ring); path layers merge every appended path into one
``<path>`` element so several sub-paths share one fill operation.

Classes:
    ViewBox: SVG viewBox rectangle
    LayeredSvgBuilder: Fluent layer accumulator
"""

from dataclasses import dataclass, field
from typing import Dict, List, NamedTuple, Optional, Union
from xml.sax.saxutils import escape

Number = Union[int, float]

SVG_NAMESPACE = "http://www.w3.org/2000/svg"


class ViewBox(NamedTuple):
    min_x: Number
    min_y: Number
    width: Number
    height: Number


def fmt_number(value: Number) -> str:
    """
    Format a coordinate the way it should appear in SVG markup.

    Integral values lose the trailing ``.0``; other floats use Python's
    shortest round-trip representation.

    Example:
        >>> fmt_number(4.0), fmt_number(4.5), fmt_number(7)
        ('4', '4.5', '7')
    """
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return repr(value) if isinstance(value, float) else str(value)


def _attr(value) -> str:
    return escape(str(value), {'"': "&quot;"})


@dataclass
class _PathLayer:
    data: List[str] = field(default_factory=list)
    color: str = ""
    fill_rule: Optional[str] = None
    clip_rule: Optional[str] = None


class LayeredSvgBuilder:
    """
    Fluent accumulator of named SVG layers.

    Every mutator returns the builder so calls can be chained. ``build()``
    only reads the accumulated state and may be called any number of times.

    Example:
        >>> svg = (LayeredSvgBuilder()
        ...        .set_viewport(ViewBox(0, 0, 10, 10))
        ...        .set_background('#fff')
        ...        .set_primary_color('#000')
        ...        .register_solid_layer('data')
        ...        .add_rect('data', 0, 0, 1)
        ...        .build())
    """

    def __init__(self):
        self._viewport: Optional[ViewBox] = None
        self._rendering = "crispEdges"
        self._background: Optional[str] = None
        self._primary_color = ""
        self._solid_layers: Dict[str, List[str]] = {}
        self._path_layers: Dict[str, _PathLayer] = {}

    # -- preamble ---------------------------------------------------------

    def set_viewport(self, box: ViewBox, rendering: str = "crispEdges") -> "LayeredSvgBuilder":
        self._viewport = box
        self._rendering = rendering
        return self

    def set_background(self, color: str) -> "LayeredSvgBuilder":
        self._background = color
        return self

    def set_primary_color(self, color: str) -> "LayeredSvgBuilder":
        """Colour used by every append call that passes an empty colour."""
        self._primary_color = color
        return self

    # -- layer registration -----------------------------------------------

    def register_solid_layer(self, name: str) -> "LayeredSvgBuilder":
        self._solid_layers.setdefault(name, [])
        return self

    def register_path_layer(self, name: str) -> "LayeredSvgBuilder":
        self._path_layers.setdefault(name, _PathLayer())
        return self

    def has_solid_layer(self, name: str) -> bool:
        return name in self._solid_layers

    def has_path_layer(self, name: str) -> bool:
        return name in self._path_layers

    # -- solid primitives -------------------------------------------------
    # Appending to an unregistered solid layer is a no-op.

    def _append_solid(self, name: str, element: str) -> "LayeredSvgBuilder":
        layer = self._solid_layers.get(name)
        if layer is not None:
            layer.append(element)
        return self

    def add_rect(self, name: str, x: Number, y: Number, width: Number,
                 height: Optional[Number] = None, color: str = "") -> "LayeredSvgBuilder":
        height = width if height is None else height
        fill = _attr(color or self._primary_color)
        return self._append_solid(
            name,
            f'<rect x="{fmt_number(x)}" y="{fmt_number(y)}" width="{fmt_number(width)}" '
            f'height="{fmt_number(height)}" fill="{fill}"/>'
        )

    def add_circle(self, name: str, cx: Number, cy: Number, radius: Number,
                   color: str = "") -> "LayeredSvgBuilder":
        fill = _attr(color or self._primary_color)
        return self._append_solid(
            name,
            f'<circle cx="{fmt_number(cx)}" cy="{fmt_number(cy)}" r="{fmt_number(radius)}" fill="{fill}"/>'
        )

    def add_ring(self, name: str, cx: Number, cy: Number, radius: Number,
                 stroke_width: Number, color: str = "") -> "LayeredSvgBuilder":
        """Hollow circle drawn as a stroke centred on ``radius``."""
        stroke = _attr(color or self._primary_color)
        return self._append_solid(
            name,
            f'<circle cx="{fmt_number(cx)}" cy="{fmt_number(cy)}" r="{fmt_number(radius)}" '
            f'fill="none" stroke="{stroke}" stroke-width="{fmt_number(stroke_width)}"/>'
        )

    def add_polygon(self, name: str, points: str, color: str = "") -> "LayeredSvgBuilder":
        fill = _attr(color or self._primary_color)
        return self._append_solid(name, f'<polygon points="{_attr(points)}" fill="{fill}"/>')

    # -- paths ------------------------------------------------------------

    def add_path(self, name: str, path_data: str, color: str = "",
                 fill_rule: Optional[str] = None,
                 clip_rule: Optional[str] = None) -> "LayeredSvgBuilder":
        """
        Append path data to a path layer, registering the layer if needed.

        Data from successive calls is concatenated into one element. The
        colour and fill/clip rules of the most recent call win.
        """
        self.register_path_layer(name)
        layer = self._path_layers[name]
        layer.data.append(path_data)
        layer.color = color or self._primary_color
        layer.fill_rule = fill_rule
        layer.clip_rule = clip_rule
        return self

    # -- output -----------------------------------------------------------

    def _preamble(self) -> str:
        if self._viewport is None:
            head = f'<svg xmlns="{SVG_NAMESPACE}">'
        else:
            box = " ".join(fmt_number(v) for v in self._viewport)
            head = (f'<svg xmlns="{SVG_NAMESPACE}" viewBox="{box}" '
                    f'shape-rendering="{_attr(self._rendering)}">')
        if self._background is not None:
            head += f'<rect width="100%" height="100%" fill="{_attr(self._background)}"/>'
        return head

    @staticmethod
    def _path_element(layer: _PathLayer) -> str:
        attrs = f'd="{_attr("".join(layer.data))}" fill="{_attr(layer.color)}"'
        if layer.fill_rule:
            attrs += f' fill-rule="{_attr(layer.fill_rule)}"'
        if layer.clip_rule:
            attrs += f' clip-rule="{_attr(layer.clip_rule)}"'
        return f"<path {attrs}/>"

    def build(self) -> str:
        """Serialise the preamble and every non-empty layer, in registration order."""
        out = [self._preamble()]
        for elements in self._solid_layers.values():
            out.extend(elements)
        for layer in self._path_layers.values():
            if any(layer.data):
                out.append(self._path_element(layer))
        out.append("</svg>")
        return "".join(out)
