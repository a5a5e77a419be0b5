# -*- coding: utf-8 -*-
"""
QR Raster - Renderer Module

This module rasterizes a typed module matrix: it walks every cell, resolves
a color and a shape for it, draws the shapes onto a canvas, masks the
transparency color and hands the canvas to the output serializer.

Functions:
    zone_module_values: Per-type color table that highlights QR structure
    draw_commands: Ordered draw commands for a matrix
    render_canvas: Draw a matrix onto a new canvas
    render: Draw a matrix and serialize the result
"""

import logging
from typing import Callable, Dict, Iterable, List, NamedTuple, Optional, Union

from .canvas import Canvas, PillowCanvas
from .colors import ResolvedColor, background_color, resolve_module_values, transparency_color
from .matrix import ModuleMatrix, ModuleType
from .options import RenderOptions
from .output import Output, PathType, serialize
from .shapes import Shape, shape_for

logger = logging.getLogger(__name__)

CanvasFactory = Callable[[int, int, ResolvedColor, str], Canvas]

# Matching tolerance for transparency masking, in 8-bit channel units
TRANSPARENCY_FUZZ = 0.0

# Color palette for QR code zone visualization
PALETTE = {
    'finder': '#800080',          # Purple - Finder patterns (3 corners)
    'separator': '#e6e6e6',       # Light gray - Visual separators
    'timing': '#ffa500',          # Orange - Timing patterns (row/col 6)
    'alignment': '#008080',       # Teal - Alignment patterns
    'format': '#ff0000',          # Red - Format information bits
    'version': '#b40000',         # Dark red - Version information (v>=7)
    'data': '#232323',            # Dark gray - Data payload
}


class DrawCommand(NamedTuple):
    x: int
    y: int
    module_type: ModuleType
    shape: Shape
    color: ResolvedColor


def zone_module_values() -> Dict[ModuleType, str]:
    """
    Per-type color overrides that paint each functional zone differently.

    Dark modules take the zone color; light separator modules are tinted
    light gray so the finder borders stay visible. Pass the result as
    ``RenderOptions.module_values``.
    """
    return {
        ModuleType.FINDER_DARK: PALETTE['finder'],
        ModuleType.FINDER_DOT_DARK: PALETTE['finder'],
        ModuleType.SEPARATOR: PALETTE['separator'],
        ModuleType.TIMING_DARK: PALETTE['timing'],
        ModuleType.ALIGNMENT_DARK: PALETTE['alignment'],
        ModuleType.FORMAT_DARK: PALETTE['format'],
        ModuleType.DARKMODULE_DARK: PALETTE['format'],
        ModuleType.VERSION_DARK: PALETTE['version'],
        ModuleType.DATA_DARK: PALETTE['data'],
    }


def draw_commands(
    matrix: ModuleMatrix,
    options: RenderOptions,
    module_values: Dict[ModuleType, ResolvedColor],
) -> List[DrawCommand]:
    """
    Draw commands for every module, in row-major order.

    Light modules are skipped unless ``draw_light_modules`` is set.

    Args:
        matrix (ModuleMatrix): Matrix to render
        options (RenderOptions): Render options
        module_values: Color of each module type (see resolve_module_values)

    Returns:
        List[DrawCommand]: One command per drawn module
    """
    commands = []
    for x, y, module_type in matrix:
        if not options.draw_light_modules and not matrix.check(x, y):
            continue
        commands.append(DrawCommand(
            x=x,
            y=y,
            module_type=module_type,
            shape=shape_for(x, y, module_type, options),
            color=module_values[module_type],
        ))
    return commands


def render_canvas(
    matrix: Union[ModuleMatrix, Iterable[Iterable[int]]],
    options: Optional[RenderOptions] = None,
    canvas_factory: CanvasFactory = PillowCanvas,
) -> Canvas:
    """
    Draw a module matrix onto a new canvas.

    The canvas is ``matrix.size * scale`` pixels square and starts filled
    with the background color. All modules are drawn first; the
    transparency color is masked once, afterwards, so modules sharing that
    color become transparent too.

    Args:
        matrix: ModuleMatrix, or rows of module codes
        options (RenderOptions): Render options, defaults if None
        canvas_factory: Callable ``(width, height, background, image_format)``
            returning a Canvas

    Returns:
        Canvas: The drawn canvas, owned by the caller

    Raises:
        InvalidMatrix: If the matrix is empty or not square
        InvalidColorSpec: If a module color cannot be resolved
        BackendUnavailable: If the canvas backend cannot handle the request
    """
    if not isinstance(matrix, ModuleMatrix):
        matrix = ModuleMatrix(matrix)
    options = options or RenderOptions()

    background = background_color(options)
    transparent = transparency_color(options, background)
    module_values = resolve_module_values(options)
    commands = draw_commands(matrix, options, module_values)

    length = matrix.size * options.scale
    canvas = canvas_factory(length, length, background, options.image_format)
    logger.debug(f"Drawing {len(commands)} modules on a {length}x{length} canvas")

    try:
        for command in commands:
            canvas.draw_filled_shape(command.shape, command.color)

        if transparent is not None:
            canvas.paint_transparent(transparent, TRANSPARENCY_FUZZ)
    except Exception:
        canvas.release()
        raise

    return canvas


def render(
    matrix: Union[ModuleMatrix, Iterable[Iterable[int]]],
    options: Optional[RenderOptions] = None,
    file: Optional[PathType] = None,
    canvas_factory: CanvasFactory = PillowCanvas,
) -> Output:
    """
    Render a module matrix to an image.

    Args:
        matrix: ModuleMatrix, or rows of module codes
        options (RenderOptions): Render options, defaults if None
        file: Optional path the encoded image is also written to
        canvas_factory: Canvas backend, PillowCanvas by default

    Returns:
        The live canvas if ``return_resource`` is set, a
        ``data:<mime>;base64,...`` string if ``image_base64`` is set,
        otherwise the encoded image bytes.

    Example:
        >>> from qr_raster import ModuleMatrix, RenderOptions, make_qr, render
        >>> matrix = ModuleMatrix.from_segno(make_qr("https://example.com"))
        >>> png = render(matrix, RenderOptions(scale=10, image_transparent=False))
    """
    options = options or RenderOptions()
    canvas = render_canvas(matrix, options, canvas_factory)
    return serialize(canvas, options, file)
