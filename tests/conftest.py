import logging
from typing import List, Tuple

import pytest

from qr_raster import ModuleMatrix, ModuleType
from qr_raster.canvas import Canvas

logger = logging.getLogger(__name__)

D = ModuleType.DATA_DARK
L = ModuleType.DATA


class RecordingCanvas(Canvas):
    """In-memory canvas that records every call made by the renderer."""

    instances: List["RecordingCanvas"] = []

    def __init__(self, width, height, background, image_format):
        super().__init__(width, height, background, image_format)
        self.events: List[Tuple] = []
        self.released = False
        RecordingCanvas.instances.append(self)

    def draw_filled_shape(self, shape, color):
        self.events.append(("draw", shape, color))

    def paint_transparent(self, color, fuzz=0.0):
        self.events.append(("transparent", color, fuzz))

    def encode_to_bytes(self):
        self.events.append(("encode",))
        return b"recorded"

    def release(self):
        self.released = True

    @property
    def draws(self):
        return [event for event in self.events if event[0] == "draw"]


@pytest.fixture
def recording_canvas():
    """Canvas factory recording draw calls; yields the list of created canvases."""
    RecordingCanvas.instances = []
    yield RecordingCanvas
    RecordingCanvas.instances = []


@pytest.fixture
def checker_matrix() -> ModuleMatrix:
    """3x3 matrix with dark corners and center."""
    return ModuleMatrix([
        [D, L, D],
        [L, D, L],
        [D, L, D],
    ])


@pytest.fixture
def typed_matrix() -> ModuleMatrix:
    """4x4 matrix mixing finder, timing, data and quiet zone modules."""
    F = ModuleType.FINDER_DARK
    T = ModuleType.TIMING_DARK
    Q = ModuleType.QUIETZONE
    return ModuleMatrix([
        [Q, Q, Q, Q],
        [Q, F, T, Q],
        [Q, D, L, Q],
        [Q, Q, Q, Q],
    ])
