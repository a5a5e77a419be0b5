# -*- coding: utf-8 -*-
"""
QR Raster - Canvas Backends

The renderer only talks to a Canvas: a raster surface that can draw filled
shapes, mask a color to transparent, and encode itself. PillowCanvas is the
production backend; tests substitute an in-memory recorder.
"""

import logging
from abc import ABC, abstractmethod
from io import BytesIO
from typing import Tuple

import numpy as np
from PIL import Image, ImageDraw

from .errors import BackendUnavailable
from .shapes import Circle, Shape, Square

logger = logging.getLogger(__name__)

Color = Tuple[int, int, int, int]


class Canvas(ABC):
    """Base class for raster surfaces the renderer draws on.

    A canvas is created filled with its background color and is owned by a
    single render call.
    """

    def __init__(self, width: int, height: int, background: Color, image_format: str) -> None:
        self.width = width
        self.height = height
        self.background = background
        self.image_format = image_format

    @property
    def size(self) -> Tuple[int, int]:
        return self.width, self.height

    @abstractmethod
    def draw_filled_shape(self, shape: Shape, color: Color) -> None:
        """Fill ``shape`` with ``color``, without an outline."""
        raise NotImplementedError

    @abstractmethod
    def paint_transparent(self, color: Color, fuzz: float = 0.0) -> None:
        """Make every pixel within ``fuzz`` of ``color`` fully transparent."""
        raise NotImplementedError

    @abstractmethod
    def encode_to_bytes(self) -> bytes:
        raise NotImplementedError

    def release(self) -> None:
        """Free backend resources. The canvas is unusable afterwards."""


class PillowCanvas(Canvas):
    """
    Canvas backed by a Pillow RGBA image.

    Args:
        width: Image width in pixels
        height: Image height in pixels
        background: RGBA fill of the new image
        image_format: Pillow format name used by encode_to_bytes
            ("PNG", "WEBP", "JPEG", ...). File extensions such as "jpg"
            are accepted as well.

    Raises:
        BackendUnavailable: If Pillow cannot write ``image_format``
    """

    def __init__(self, width: int, height: int, background: Color, image_format: str = "PNG") -> None:
        super().__init__(width, height, background, _resolve_format(image_format))
        self.image = Image.new("RGBA", (width, height), background)
        self._draw = ImageDraw.Draw(self.image)

    def draw_filled_shape(self, shape: Shape, color: Color) -> None:
        if isinstance(shape, Circle):
            # Same end-pixel rule as squares: a circle of radius scale / 2 fills its cell only
            x0, y0 = shape.cx - shape.r, shape.cy - shape.r
            self._draw.ellipse(
                [x0, y0, max(x0, shape.cx + shape.r - 1), max(y0, shape.cy + shape.r - 1)],
                fill=color,
                width=0,
            )
        elif isinstance(shape, Square):
            # Pillow includes the end coordinate; keep the square inside its cell
            self._draw.rectangle(
                [shape.x0, shape.y0, shape.x1 - 1, shape.y1 - 1],
                fill=color,
                width=0,
            )
        else:
            raise TypeError(f"Unsupported shape: {shape!r}")

    def paint_transparent(self, color: Color, fuzz: float = 0.0) -> None:
        pixels = np.array(self.image)
        target = np.array(color[:3], dtype=np.int32)
        distance = np.sqrt(((pixels[:, :, :3].astype(np.int32) - target) ** 2).sum(axis=2))
        matches = distance <= fuzz
        pixels[matches, 3] = 0
        logger.debug(f"Masked {int(matches.sum())} pixels matching {color} to transparent")

        self.image = Image.fromarray(pixels)
        self._draw = ImageDraw.Draw(self.image)

    def encode_to_bytes(self) -> bytes:
        buf = BytesIO()
        try:
            self.image.save(buf, format=self.image_format)
        except OSError:
            # Formats without an alpha channel (JPEG, ...) refuse RGBA
            logger.debug(f"{self.image_format} cannot store RGBA, encoding as RGB")
            buf = BytesIO()
            self.image.convert("RGB").save(buf, format=self.image_format)
        return buf.getvalue()

    def release(self) -> None:
        self.image.close()
        self._draw = None


def _resolve_format(image_format: str) -> str:
    Image.init()
    name = (image_format or "").strip().upper()
    if name in Image.SAVE:
        return name

    # Accept file extensions too ("jpg", ".tif")
    by_extension = Image.registered_extensions().get("." + name.lower().lstrip("."))
    if by_extension and by_extension in Image.SAVE:
        return by_extension

    raise BackendUnavailable(f"Pillow cannot write image format {image_format!r}")
