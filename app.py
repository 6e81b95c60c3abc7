#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
qrstyle - Flask Web Application
"""

import base64
import logging
from io import BytesIO

from flask import Flask, jsonify, render_template_string, request, send_file
from typing import Tuple

from qrstyle.errors import QRStyleError
from qrstyle.options import ECC_LEVELS, REGION_STYLES, RenderOptions, resolve_options
from qrstyle.qr_generator import SegnoMatrix, make_qr, render_text_svg
from qrstyle.regions import Region
from qrstyle.renderer import render_matrix, render_region_map_png
from qrstyle.shapes import ShapeStyle

# Configure logging
logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

TEMPLATE = """<!doctype html>
<html>
<head><meta charset="utf-8"><title>qrstyle</title></head>
<body>
<form method="post">
  <textarea name="text" rows="3" cols="60">{{ text }}</textarea><br>
  ECC <select name="ecc">{% for level in ecc_levels %}<option {% if level == ecc %}selected{% endif %}>{{ level }}</option>{% endfor %}</select>
  Margin <input name="margin" value="{{ margin }}" size="3">
  Scale <input name="scale" value="{{ scale }}" size="4">
  Dark <input name="dark" value="{{ dark }}" size="8">
  Light <input name="light" value="{{ light }}" size="8"><br>
  {% for field, region in region_fields %}
  {{ field }} <select name="{{ field }}">{% for style in styles[region] %}<option {% if style == selected[field] %}selected{% endif %}>{{ style }}</option>{% endfor %}</select>
  {% endfor %}
  <button type="submit">Render</button>
</form>
{% if error %}<p style="color:red">{{ error }}</p>{% endif %}
{% if qr %}
<div style="width:320px">{{ qr.svg|safe }}</div>
<img src="data:image/png;base64,{{ qr.regions_b64 }}" alt="regions">
<p>size {{ qr.size }} &middot; dark {{ qr.dark_modules }} &middot;
   border {{ qr.finder_border_modules }} &middot; interior {{ qr.finder_interior_modules }} &middot;
   data {{ qr.data_modules }}</p>
{% endif %}
</body>
</html>
"""

# Form field -> region it styles
REGION_FIELDS = [
    ('finder_border', Region.FINDER_BORDER),
    ('finder_interior', Region.FINDER_INTERIOR),
    ('data', Region.DATA),
]


def _style_names(region: Region):
    return sorted(style.value for style in REGION_STYLES[region])


def _read_params(req) -> Tuple[str, RenderOptions]:
    """Extract QR text and render options from a Flask request."""
    text = (req.values.get('text') or "").strip()

    try:
        margin = int(req.values.get('margin') or 4)
        if margin < 0 or margin > 20:
            margin = 4
    except (ValueError, TypeError):
        margin = 4

    try:
        scale = float(req.values.get('scale') or 1)
        if scale <= 0 or scale > 1:
            scale = 1
    except (ValueError, TypeError):
        scale = 1

    try:
        ring = float(req.values.get('ring') or 1)
        if ring <= 0:
            ring = 1
    except (ValueError, TypeError):
        ring = 1

    options = RenderOptions(
        margin=margin,
        module_scale=scale,
        foreground=(req.values.get('dark') or None),
        background=(req.values.get('light') or None),
        finder_border_style=(req.values.get('finder_border') or None),
        finder_interior_style=(req.values.get('finder_interior') or None),
        data_style=(req.values.get('data') or None),
        finder_ring_stroke_width=ring,
        ecc=(req.values.get('ecc') or "L").strip().upper(),
    )
    return text, options


app = Flask(__name__)


@app.route('/', methods=['GET', 'POST'])
def index():
    text, options = _read_params(request)
    qr_view = None
    error = None
    opts = None

    try:
        opts = resolve_options(options)
    except QRStyleError as ex:
        error = f"Invalid options: {ex}"

    if request.method == 'POST' and opts is not None:
        if not text:
            error = "Enter the text to encode."
        else:
            try:
                logger.info(f"Rendering QR: ecc={opts.ecc}, border={opts.finder_border_style.value}, "
                            f"interior={opts.finder_interior_style.value}, data={opts.data_style.value}")
                qr_symbol = make_qr(text, ecc=opts.ecc)
                matrix = SegnoMatrix(qr_symbol)
                regions_b64, metrics = render_region_map_png(matrix, border=opts.margin, scale=6)
                qr_view = dict(metrics, svg=render_matrix(matrix, opts), regions_b64=regions_b64,
                               version=qr_symbol.version)
                logger.info(f"Rendered QR version {qr_symbol.version}")
            except (QRStyleError, ValueError) as ex:
                error = f"Could not generate the QR code: {ex}"
                logger.error(f"QR generation failed: {ex}")

    if opts is not None:
        selected = {field: opts.style_for(region).value for field, region in REGION_FIELDS}
        ecc, margin, scale = opts.ecc, opts.margin, opts.module_scale
        dark, light = opts.foreground, opts.background
    else:
        selected = {field: ShapeStyle.SQUARE.value for field, _ in REGION_FIELDS}
        ecc, margin, scale, dark, light = "L", 4, 1, "#000000", "#fff"

    return render_template_string(
        TEMPLATE,
        text=text, ecc=ecc, ecc_levels=ECC_LEVELS, margin=margin, scale=scale,
        dark=dark, light=light, region_fields=REGION_FIELDS,
        styles={region: _style_names(region) for _, region in REGION_FIELDS},
        selected=selected, qr=qr_view, error=error
    )


@app.route('/styles', methods=['GET'])
def list_styles():
    return jsonify({field: _style_names(region) for field, region in REGION_FIELDS})


@app.route('/export/svg', methods=['GET'])
def export_svg():
    text, options = _read_params(request)
    if not text:
        return "Missing text", 400
    try:
        svg = render_text_svg(text, options)
    except (QRStyleError, ValueError) as ex:
        logger.error(f"SVG export failed: {ex}")
        return f"Invalid request: {ex}", 400
    buf = BytesIO(svg.encode('utf-8'))
    return send_file(buf, as_attachment=True, download_name='qr_styled.svg',
                     mimetype='image/svg+xml')


@app.route('/export/regions.png', methods=['GET'])
def export_regions_png():
    text, options = _read_params(request)
    if not text:
        return "Missing text", 400
    try:
        opts = resolve_options(options)
        matrix = SegnoMatrix(make_qr(text, ecc=opts.ecc))
    except (QRStyleError, ValueError) as ex:
        logger.error(f"Region map export failed: {ex}")
        return f"Invalid request: {ex}", 400
    b64, _ = render_region_map_png(matrix, border=opts.margin, scale=10)
    return send_file(BytesIO(base64.b64decode(b64)), as_attachment=True,
                     download_name='qr_regions.png', mimetype='image/png')


if __name__ == "__main__":
    app.run(debug=True)
