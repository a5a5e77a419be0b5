# -*- coding: utf-8 -*-
"""
QR Raster - Error Types

All failures raised by the rendering engine derive from RenderError, so
callers (the Flask app, for instance) can catch the whole family at once.
None of them are transient: rendering the same input again fails the same way.
"""


class RenderError(Exception):
    """Base class for rendering failures."""


class BackendUnavailable(RenderError, RuntimeError):
    """A required rendering capability (library, image format) is missing."""


class InvalidColorSpec(RenderError, ValueError):
    """A color specification could not be converted by the graphics backend."""

    def __init__(self, spec, reason: str = ""):
        self.spec = spec
        message = f"Invalid color specification: {spec!r}"
        if reason:
            message += f" ({reason})"
        super().__init__(message)


class InvalidMatrix(RenderError, ValueError):
    """The module matrix is empty, not square, or holds unknown module codes."""
