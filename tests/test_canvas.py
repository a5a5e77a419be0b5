"""Tests for the Pillow canvas backend."""

from io import BytesIO

import pytest
from PIL import Image

from qr_raster import BackendUnavailable, Circle, PillowCanvas, Square

WHITE = (255, 255, 255, 255)
BLACK = (0, 0, 0, 255)
RED = (255, 0, 0, 255)


def test_new_canvas_is_filled_with_background() -> None:
    canvas = PillowCanvas(8, 6, RED)
    assert canvas.size == (8, 6)
    assert canvas.image.mode == "RGBA"
    assert canvas.image.getpixel((0, 0)) == RED
    assert canvas.image.getpixel((7, 5)) == RED


def test_square_stays_inside_its_cell() -> None:
    canvas = PillowCanvas(30, 30, WHITE)
    canvas.draw_filled_shape(Square(10, 10, 20, 20), BLACK)

    assert canvas.image.getpixel((10, 10)) == BLACK
    assert canvas.image.getpixel((19, 19)) == BLACK
    assert canvas.image.getpixel((20, 20)) == WHITE
    assert canvas.image.getpixel((9, 10)) == WHITE


def test_circle() -> None:
    canvas = PillowCanvas(40, 40, WHITE)
    canvas.draw_filled_shape(Circle(20, 20, 10), BLACK)

    assert canvas.image.getpixel((20, 20)) == BLACK
    assert canvas.image.getpixel((20, 12)) == BLACK
    # Corners of the bounding box are outside the circle
    assert canvas.image.getpixel((11, 11)) == WHITE
    assert canvas.image.getpixel((0, 0)) == WHITE


def test_circle_stays_inside_its_cell() -> None:
    canvas = PillowCanvas(20, 20, WHITE)
    canvas.draw_filled_shape(Circle(5, 5, 5), BLACK)

    assert canvas.image.getpixel((5, 5)) == BLACK
    assert canvas.image.getpixel((8, 5)) == BLACK
    # First pixels of the neighbouring cells
    assert canvas.image.getpixel((10, 5)) == WHITE
    assert canvas.image.getpixel((5, 10)) == WHITE


def test_unknown_shape() -> None:
    canvas = PillowCanvas(4, 4, WHITE)
    with pytest.raises(TypeError):
        canvas.draw_filled_shape((0, 0, 1, 1), BLACK)


def test_paint_transparent() -> None:
    canvas = PillowCanvas(20, 10, WHITE)
    canvas.draw_filled_shape(Square(0, 0, 10, 10), BLACK)
    canvas.paint_transparent(WHITE)

    assert canvas.image.getpixel((5, 5)) == BLACK
    assert canvas.image.getpixel((15, 5))[3] == 0


def test_paint_transparent_fuzz() -> None:
    near_white = (250, 250, 250, 255)
    canvas = PillowCanvas(4, 4, near_white)
    canvas.paint_transparent(WHITE, fuzz=0.0)
    assert canvas.image.getpixel((0, 0))[3] == 255

    canvas.paint_transparent(WHITE, fuzz=10.0)
    assert canvas.image.getpixel((0, 0))[3] == 0


def test_drawing_after_masking_is_kept() -> None:
    canvas = PillowCanvas(10, 10, WHITE)
    canvas.paint_transparent(WHITE)
    canvas.draw_filled_shape(Square(0, 0, 5, 5), BLACK)
    assert canvas.image.getpixel((0, 0)) == BLACK


def test_encode_png() -> None:
    canvas = PillowCanvas(5, 5, BLACK, "png")
    data = canvas.encode_to_bytes()
    with Image.open(BytesIO(data)) as image:
        assert image.format == "PNG"
        assert image.size == (5, 5)


@pytest.mark.parametrize("image_format", ["JPEG", "jpg", ".jpeg"])
def test_encode_jpeg_drops_alpha(image_format: str) -> None:
    canvas = PillowCanvas(8, 8, WHITE, image_format)
    assert canvas.image_format == "JPEG"
    with Image.open(BytesIO(canvas.encode_to_bytes())) as image:
        assert image.format == "JPEG"
        assert image.mode == "RGB"


@pytest.mark.parametrize("image_format", ["", "NOPE", "svg"])
def test_unsupported_format(image_format: str) -> None:
    with pytest.raises(BackendUnavailable):
        PillowCanvas(4, 4, WHITE, image_format)
