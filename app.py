#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
QR Raster - Flask Web Application
"""

import dataclasses
import logging
from typing import Tuple

import segno
from flask import Flask, Response, render_template_string, request

from qr_raster import RenderError, RenderOptions, make_matrix, render, zone_module_values
from qr_raster.output import sniff_mime_type

# Configure logging
logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

PAGE = """<!doctype html>
<html>
<head><meta charset="utf-8"><title>QR Raster</title></head>
<body>
  <h1>QR Raster</h1>
  <form method="post">
    <p><textarea name="text" rows="3" cols="60">{{ text }}</textarea></p>
    <p>
      ECC <select name="ecc">
        {% for level in 'LMQH' %}<option {% if level == ecc %}selected{% endif %}>{{ level }}</option>{% endfor %}
      </select>
      Scale <input name="scale" size="3" value="{{ options.scale }}">
      Border <input name="border" size="3" value="{{ border }}">
    </p>
    <p>
      Dark <input name="markup_dark" size="8" value="{{ options.markup_dark }}">
      Light <input name="markup_light" size="8" value="{{ options.markup_light }}">
      Background <input name="bg_color" size="8" value="{{ options.bg_color or '' }}">
    </p>
    <p>
      <label><input type="checkbox" name="draw_circular_modules" value="true"
        {% if options.draw_circular_modules %}checked{% endif %}> circular modules</label>
      <label><input type="checkbox" name="image_transparent" value="true"
        {% if options.image_transparent %}checked{% endif %}> transparent background</label>
      <label><input type="checkbox" name="zones" value="true"
        {% if zones %}checked{% endif %}> color zones</label>
    </p>
    <p><button type="submit">Render</button></p>
  </form>
  {% if error %}<p style="color:red">{{ error }}</p>{% endif %}
  {% if image %}<img src="{{ image }}" alt="QR code">{% endif %}
</body>
</html>
"""


def _read_params(req) -> Tuple[str, str, str, str, int, bool, RenderOptions]:
    """Extract QR and render parameters from a Flask request."""
    text = (req.values.get('text') or "").strip()
    ecc = (req.values.get('ecc') or "M").strip().upper()
    version = req.values.get('version') or "auto"
    mask = req.values.get('mask') or "auto"
    zones = (req.values.get('zones') == 'true')

    try:
        border = int(req.values.get('border') or 4)
        if border < 0 or border > 20:
            border = 4
    except (ValueError, TypeError):
        border = 4

    values = req.values.to_dict()
    if req.method == 'POST':
        # Unchecked checkboxes are not submitted at all
        for flag in ('draw_circular_modules', 'image_transparent'):
            values.setdefault(flag, 'false')
    options = RenderOptions.from_mapping(values)
    if zones:
        options = dataclasses.replace(options, module_values=zone_module_values())

    return text, ecc, version, mask, border, zones, options


def _render_request(req, **overrides):
    text, ecc, version, mask, border, zones, options = _read_params(req)
    options = dataclasses.replace(options, return_resource=False, **overrides)
    matrix = make_matrix(text, border=border, ecc=ecc, version=version, mask=mask)
    logger.info(f"Rendering {matrix.size}x{matrix.size} matrix at scale {options.scale}")
    return render(matrix, options)


app = Flask(__name__)


@app.route('/', methods=['GET', 'POST'])
def index():
    text, ecc, version, mask, border, zones, options = _read_params(request)
    image = None
    error = None

    if request.method == 'POST':
        if not text:
            error = "Enter the text to encode."
        else:
            try:
                image = _render_request(request, image_base64=True)
            except (RenderError, ValueError, segno.DataOverflowError) as ex:
                error = f"Could not render the QR code: {ex}"
                logger.error(f"Render failed: {ex}")

    return render_template_string(
        PAGE, text=text, ecc=ecc, border=border, zones=zones,
        options=options, image=image, error=error
    )


@app.route('/render', methods=['GET'])
def render_image():
    if not (request.values.get('text') or "").strip():
        return "Missing text", 400
    try:
        data = _render_request(request, image_base64=False)
    except (RenderError, ValueError, segno.DataOverflowError) as ex:
        logger.warning(f"Render failed: {ex}")
        return str(ex), 400
    return Response(data, mimetype=sniff_mime_type(data))


@app.route('/render/data-uri', methods=['GET'])
def render_data_uri():
    if not (request.values.get('text') or "").strip():
        return "Missing text", 400
    try:
        data_uri = _render_request(request, image_base64=True)
    except (RenderError, ValueError, segno.DataOverflowError) as ex:
        logger.warning(f"Render failed: {ex}")
        return str(ex), 400
    return Response(data_uri, mimetype='text/plain')


if __name__ == "__main__":
    app.run(debug=True)
