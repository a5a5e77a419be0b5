# -*- coding: utf-8 -*-
"""
QR Raster - Output Serialization

Turns a finished canvas into what the caller asked for: the live canvas, the
encoded image bytes, or a base64 data URI. The bytes can additionally be
written to a file.
"""

import base64
import logging
import os
from io import BytesIO
from typing import Optional, Union

from PIL import Image, UnidentifiedImageError

from .canvas import Canvas
from .errors import RenderError
from .options import RenderOptions

logger = logging.getLogger(__name__)

Output = Union[Canvas, bytes, str]
PathType = Union[str, "os.PathLike[str]"]

FALLBACK_MIME_TYPE = "application/octet-stream"


def serialize(canvas: Canvas, options: RenderOptions, file: Optional[PathType] = None) -> Output:
    """
    Produce the render result from a finished canvas.

    Priority: the canvas itself if ``return_resource`` is set, then a data
    URI if ``image_base64`` is set, otherwise the raw encoded bytes. When
    ``file`` is given the raw bytes are also written there. The canvas is
    released unless it is returned.
    """
    if options.return_resource:
        logger.debug("Returning live canvas")
        return canvas

    try:
        image_data = canvas.encode_to_bytes()
    finally:
        canvas.release()

    save_to_file(image_data, file)

    if options.image_base64:
        return to_base64_data_uri(image_data, sniff_mime_type(image_data))

    return image_data


def sniff_mime_type(data: bytes) -> str:
    """MIME type of encoded image bytes, read from the data itself."""
    try:
        with Image.open(BytesIO(data)) as image:
            image_format = image.format
    except UnidentifiedImageError:
        return FALLBACK_MIME_TYPE
    return Image.MIME.get(image_format, FALLBACK_MIME_TYPE)


def to_base64_data_uri(data: bytes, mime: str) -> str:
    return f"data:{mime};base64,{base64.b64encode(data).decode('ascii')}"


def save_to_file(data: bytes, file: Optional[PathType]) -> None:
    """
    Write ``data`` to ``file``; does nothing when ``file`` is None.

    Raises:
        RenderError: If the target directory is missing or not writable,
            or the write fails
    """
    if file is None:
        return

    directory = os.path.dirname(os.path.abspath(file))
    if not os.path.isdir(directory) or not os.access(directory, os.W_OK):
        raise RenderError(f"Cannot write data to file: {file} (directory not writable)")

    try:
        with open(file, 'wb') as fp:
            fp.write(data)
    except OSError as ex:
        raise RenderError(f"Cannot write data to file: {file} ({ex})") from ex

    logger.debug(f"Wrote {len(data)} bytes to {file}")
