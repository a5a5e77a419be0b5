# -*- coding: utf-8 -*-
"""
QR Raster - Color Resolution

Turns user supplied color specifications ("#000", "white", "rgb(0,128,128)")
into RGBA tuples via Pillow, and derives the background, transparency and
per-module colors of a render.

Functions:
    module_value_is_valid: Check that a color spec is worth resolving
    get_module_value: Resolve a color spec to an RGBA tuple
    get_default_module_value: Resolve the dark or light markup color
    resolve_module_values: Per-module-type color table for a render
    background_color: Background color of a render
    transparency_color: Color masked to transparent after drawing
"""

import logging
from typing import Any, Dict, Optional, Tuple

from PIL import ImageColor

from .errors import InvalidColorSpec
from .matrix import ModuleType
from .options import RenderOptions

logger = logging.getLogger(__name__)

ResolvedColor = Tuple[int, int, int, int]

DEFAULT_BACKGROUND = "white"


def module_value_is_valid(value: Any) -> bool:
    """
    True if ``value`` looks like a color spec: a non-empty string.

    Whether the backend actually understands it is checked by
    get_module_value.
    """
    return isinstance(value, str) and bool(value.strip())


def get_module_value(value: str) -> ResolvedColor:
    """
    Resolve a color spec to an RGBA tuple.

    Raises:
        InvalidColorSpec: If Pillow does not understand the spec
    """
    if not module_value_is_valid(value):
        raise InvalidColorSpec(value, "expected a non-empty string")
    try:
        return ImageColor.getcolor(value.strip(), "RGBA")
    except ValueError as ex:
        raise InvalidColorSpec(value, str(ex)) from ex


def get_default_module_value(is_dark: bool, options: RenderOptions) -> ResolvedColor:
    return get_module_value(options.markup_dark if is_dark else options.markup_light)


def resolve_module_values(options: RenderOptions) -> Dict[ModuleType, ResolvedColor]:
    """
    Build the color table for every module type.

    An entry in ``options.module_values`` replaces the polarity default for
    that exact type when it is a valid spec; missing or empty entries fall
    back to ``markup_dark`` / ``markup_light``.

    Raises:
        InvalidColorSpec: If an override or a markup color cannot be resolved
    """
    overrides = dict(options.module_values or ())
    dark = get_default_module_value(True, options)
    light = get_default_module_value(False, options)

    values = {}
    for module_type in ModuleType:
        override = overrides.get(module_type)
        if module_value_is_valid(override):
            values[module_type] = get_module_value(override)
        else:
            values[module_type] = dark if module_type.is_dark else light
    return values


def background_color(options: RenderOptions) -> ResolvedColor:
    if module_value_is_valid(options.bg_color):
        return get_module_value(options.bg_color)
    return get_module_value(DEFAULT_BACKGROUND)


def transparency_color(options: RenderOptions, background: ResolvedColor) -> Optional[ResolvedColor]:
    """
    Color to mask out after drawing, or None when transparency is disabled.

    Falls back to ``background`` when no valid transparency color is set,
    which makes the background itself vanish.
    """
    if not options.image_transparent:
        return None
    if module_value_is_valid(options.transparency_color):
        return get_module_value(options.transparency_color)
    return background
