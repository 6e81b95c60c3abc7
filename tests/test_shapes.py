"""Tests for shape strategies and the style registry."""

import pytest

from qrstyle.regions import Neighbors, Point
from qrstyle.shapes import (
    SHAPE_STRATEGIES,
    ModuleContext,
    Scope,
    ShapeStyle,
    resolve_strategy,
    rounded_rect_path,
)
from qrstyle.svg_builder import LayeredSvgBuilder, ViewBox

LAYER = 'layer'


def _draw(style, point=Point(2, 3), neighbors=Neighbors(), ring=1, size=25):
    builder = (LayeredSvgBuilder()
               .set_viewport(ViewBox(0, 0, size + 8, size + 8))
               .set_primary_color('#000')
               .register_solid_layer(LAYER))
    ctx = ModuleContext(point=point, layer=LAYER, margin=4, radius=0.5, color='#111',
                        size=size, neighbors=neighbors, ring_stroke_width=ring)
    resolve_strategy(style).draw(builder, ctx)
    return builder.build()


def test_rounded_rect_path_square_corners():
    assert rounded_rect_path(0, 0, 1, 1) == 'M0 0H1L1 0V1L1 1H0L0 1V0L0 0Z'


def test_rounded_rect_path_all_rounded():
    assert rounded_rect_path(0, 0, 1, 1, 0.5, 0.5, 0.5, 0.5) == (
        'M0.5 0H0.5A0.5 0.5 0 0 1 1 0.5'
        'V0.5A0.5 0.5 0 0 1 0.5 1'
        'H0.5A0.5 0.5 0 0 1 0 0.5'
        'V0.5A0.5 0.5 0 0 1 0.5 0Z'
    )


def test_rounded_rect_path_clamps_radius():
    d = rounded_rect_path(0, 0, 3, 3, 5, 5, 5, 5)
    assert 'A1.5 1.5' in d
    assert 'A5' not in d
    assert rounded_rect_path(0, 0, 1, 1, -1, 0, 0, 0).startswith('M0 0H1L1 0')


def test_square():
    assert '<rect x="6" y="7" width="1" height="1" fill="#111"/>' in _draw(ShapeStyle.SQUARE)


def test_circle():
    assert '<circle cx="6.5" cy="7.5" r="0.5" fill="#111"/>' in _draw(ShapeStyle.CIRCLE)


def test_triangle():
    assert '<polygon points="6.5,7 6,8 7,8" fill="#111"/>' in _draw(ShapeStyle.TRIANGLE)


def test_diamond():
    assert '<polygon points="6.5,7 7,7.5 6.5,8 6,7.5" fill="#111"/>' in _draw(ShapeStyle.DIAMOND)


def test_rounded_square_isolated_rounds_every_corner():
    svg = _draw(ShapeStyle.ROUNDED_SQUARE)
    assert svg.count('A0.5 0.5') == 4
    assert '<path d="M6.5 7' in svg


def test_rounded_square_surrounded_has_no_arcs():
    svg = _draw(ShapeStyle.ROUNDED_SQUARE, neighbors=Neighbors(True, True, True, True))
    assert 'A' not in svg.split('d="')[1].split('"')[0]


def test_rounded_square_rounds_only_free_corners():
    # north and west neighbours: only the bottom-right corner stays free
    svg = _draw(ShapeStyle.ROUNDED_SQUARE, neighbors=Neighbors(n=True, e=False, s=False, w=True))
    assert svg.count('A0.5 0.5') == 1
    assert 'A0.5 0.5 0 0 1 6.5 8' in svg


def test_circle_inside_centres_on_finder():
    svg = _draw(ShapeStyle.CIRCLE_INSIDE, point=Point(18, 0))
    assert '<circle cx="25.5" cy="7.5" r="1.5" fill="#111"/>' in svg


def test_bagel_border_ring():
    svg = _draw(ShapeStyle.BAGEL_BORDER, point=Point(0, 18), ring=0.8)
    assert '<circle cx="7.5" cy="25.5" r="3" fill="none" stroke="#111" stroke-width="0.8"/>' in svg


def test_squircle_inside():
    svg = _draw(ShapeStyle.SQUIRCLE_INSIDE, point=Point(0, 0))
    assert '<path d="M7 6H8A1 1 0 0 1 9 7' in svg


def test_cornerflow_inside():
    svg = _draw(ShapeStyle.CORNERFLOW_INSIDE, point=Point(0, 0))
    assert ('d="M7.5 6H9L9 6V7.5A1.5 1.5 0 0 1 7.5 9H6L6 9V7.5A1.5 1.5 0 0 1 7.5 6Z"') in svg


def test_squircle_border_is_evenodd_ring():
    svg = _draw(ShapeStyle.SQUIRCLE_BORDER, point=Point(18, 0))
    assert 'fill-rule="evenodd" clip-rule="evenodd"' in svg
    # outer 7x7 with radius 2, inner 5x5 with radius 1
    assert 'd="M24 4H27A2 2 0 0 1 29 6' in svg
    assert 'ZM24 5H27A1 1 0 0 1 28 6' in svg


def test_cornerflow_border_outer_corners():
    svg = _draw(ShapeStyle.CORNERFLOW_BORDER, point=Point(0, 0))
    assert 'd="M5 4H11L11 4V10A1 1 0 0 1 10 11H4L4 11V5A1 1 0 0 1 5 4Z' in svg
    assert 'fill-rule="evenodd"' in svg


def test_registry_covers_every_drawable_style():
    for style in ShapeStyle:
        if style is ShapeStyle.NONE:
            assert resolve_strategy(style) is None
        else:
            assert resolve_strategy(style) is SHAPE_STRATEGIES[style]


def test_unknown_identifier_resolves_to_nothing():
    assert resolve_strategy('blob') is None
    assert resolve_strategy(['square']) is None
    assert resolve_strategy(None) is None


def test_scopes():
    finder = {style for style, s in SHAPE_STRATEGIES.items() if s.scope is Scope.FINDER}
    assert finder == {
        ShapeStyle.CIRCLE_INSIDE, ShapeStyle.SQUIRCLE_INSIDE, ShapeStyle.CORNERFLOW_INSIDE,
        ShapeStyle.BAGEL_BORDER, ShapeStyle.SQUIRCLE_BORDER, ShapeStyle.CORNERFLOW_BORDER,
    }


@pytest.mark.parametrize('name, style', [
    ('square', ShapeStyle.SQUARE),
    ('ROUNDED_SQUARE', ShapeStyle.ROUNDED_SQUARE),
    (' Bagel-Border ', ShapeStyle.BAGEL_BORDER),
])
def test_parse_style(name, style):
    assert ShapeStyle.parse(name) is style


def test_parse_unknown_style():
    with pytest.raises(ValueError):
        ShapeStyle.parse('blob')
