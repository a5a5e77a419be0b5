# -*- coding: utf-8 -*-
"""
QR Raster - Core Module

Renders typed QR module matrices to raster images: square or circular
modules, per-type colors, background and transparency handling, and output
as raw bytes, a file, a base64 data URI or the live canvas.

Modules:
    matrix: Module types and the square module matrix
    functional_areas: QR code functional pattern geometry
    options: Render options
    colors: Color resolution for modules, background and transparency
    shapes: Square/circle geometry per module
    canvas: Canvas interface and the Pillow backend
    renderer: The rasterization loop
    output: Bytes, file and data URI serialization
    qr_generator: segno wrapper producing symbols to render
"""

__version__ = "1.0.0"

from .canvas import Canvas, PillowCanvas
from .errors import BackendUnavailable, InvalidColorSpec, InvalidMatrix, RenderError
from .matrix import ModuleMatrix, ModuleType
from .options import RenderOptions
from .qr_generator import make_matrix, make_qr
from .renderer import render, render_canvas, zone_module_values
from .shapes import Circle, Square

__all__ = [
    'BackendUnavailable',
    'Canvas',
    'Circle',
    'InvalidColorSpec',
    'InvalidMatrix',
    'ModuleMatrix',
    'ModuleType',
    'PillowCanvas',
    'RenderError',
    'RenderOptions',
    'Square',
    'make_matrix',
    'make_qr',
    'render',
    'render_canvas',
    'zone_module_values',
]
