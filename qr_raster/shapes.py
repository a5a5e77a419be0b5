# -*- coding: utf-8 -*-
"""
QR Raster - Module Shapes

Decides the geometry of each module in canvas pixel coordinates.
"""

from typing import NamedTuple, Union

from .matrix import ModuleType
from .options import RenderOptions


class Square(NamedTuple):
    x0: float
    y0: float
    x1: float
    y1: float


class Circle(NamedTuple):
    cx: float
    cy: float
    r: float


Shape = Union[Square, Circle]


def shape_for(x: int, y: int, module_type: ModuleType, options: RenderOptions) -> Shape:
    """
    Shape of the module at grid cell (x, y).

    Modules are squares unless circular mode is on and the module's category
    is not listed in ``keep_as_square``. A circle is centered on the cell
    with radius ``(0.5 + circle_radius) * scale``; ``circle_radius`` is not
    clamped.
    """
    scale = options.scale

    if options.draw_circular_modules and ModuleType(module_type).category not in options.keep_as_square:
        return Circle(
            cx=(x + 0.5) * scale,
            cy=(y + 0.5) * scale,
            r=(0.5 + options.circle_radius) * scale,
        )

    return Square(
        x0=x * scale,
        y0=y * scale,
        x1=(x + 1) * scale,
        y1=(y + 1) * scale,
    )
