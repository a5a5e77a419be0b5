# -*- coding: utf-8 -*-
"""
QR Raster - Render Options

Immutable configuration for a single render call, plus parsing of the same
options from a flat string mapping (Flask request values, a dict loaded from
a config file, ...).
"""

import logging
from dataclasses import dataclass, field
from typing import Any, FrozenSet, Mapping, Optional, Tuple, Union

from .matrix import ModuleType

logger = logging.getLogger(__name__)

DEFAULT_SCALE = 5
MAX_SCALE = 100


@dataclass(frozen=True)
class RenderOptions:
    """
    Options controlling how a module matrix is rasterized and serialized.

    Attributes:
        scale: Pixels per module (>= 1)
        markup_dark: Color spec for dark modules
        markup_light: Color spec for light modules
        bg_color: Background color spec; white when missing or invalid
        image_transparent: Mask the transparency color after drawing
        transparency_color: Color to mask; the background when missing or invalid
        draw_light_modules: Issue draw commands for light modules too
        draw_circular_modules: Draw circles instead of squares
        circle_radius: Extra circle radius, as a fraction of ``scale``,
            on top of the half-module baseline
        keep_as_square: Module types drawn as squares even in circular mode
        module_values: Optional per-type color overrides, given as a mapping
            or as pairs and stored as a sorted tuple of (type, spec) pairs
        return_resource: Return the live canvas instead of encoded output
        image_base64: Return a base64 data URI instead of raw bytes
        image_format: Pillow format name of the encoded output
    """

    scale: int = DEFAULT_SCALE
    markup_dark: str = "#000"
    markup_light: str = "#fff"
    bg_color: Optional[str] = None
    image_transparent: bool = True
    transparency_color: Optional[str] = None
    draw_light_modules: bool = True
    draw_circular_modules: bool = False
    circle_radius: float = 0.0
    keep_as_square: FrozenSet[ModuleType] = field(default_factory=frozenset)
    module_values: Optional[Union[Mapping[ModuleType, str], Tuple[Tuple[ModuleType, str], ...]]] = None
    return_resource: bool = False
    image_base64: bool = False
    image_format: str = "PNG"

    def __post_init__(self):
        if isinstance(self.scale, bool) or not isinstance(self.scale, int) or self.scale < 1:
            raise ValueError(f"scale must be an integer of at least 1, got {self.scale!r}")
        # Accept any iterable of module types and store the categories
        object.__setattr__(
            self, "keep_as_square", frozenset(ModuleType(t).category for t in self.keep_as_square)
        )
        if self.module_values is not None:
            items = self.module_values.items() if isinstance(self.module_values, Mapping) else self.module_values
            object.__setattr__(
                self, "module_values", tuple(sorted((ModuleType(k), v) for k, v in items))
            )

    @classmethod
    def from_mapping(cls, values: Mapping[str, Any]) -> "RenderOptions":
        """
        Build options from a flat mapping of strings.

        Keys use the attribute names. Flags are true only for ``'true'``,
        ``'1'``, ``'yes'`` or ``'on'``; missing or empty keys keep their
        defaults.
        ``keep_as_square`` is a comma separated list of module type names
        (``finder,alignment``). A bad ``scale`` or ``circle_radius`` falls
        back to the default.

        Example:
            >>> RenderOptions.from_mapping({'scale': '10', 'draw_circular_modules': 'true'})
        """
        defaults = cls()
        kwargs = {}

        try:
            scale = int(values.get('scale') or DEFAULT_SCALE)
            if scale < 1 or scale > MAX_SCALE:
                scale = DEFAULT_SCALE
        except (ValueError, TypeError):
            scale = DEFAULT_SCALE
        kwargs['scale'] = scale

        try:
            kwargs['circle_radius'] = float(values.get('circle_radius') or defaults.circle_radius)
        except (ValueError, TypeError):
            kwargs['circle_radius'] = defaults.circle_radius

        for name in ('markup_dark', 'markup_light', 'bg_color', 'transparency_color'):
            value = str(values.get(name) or "").strip()
            if value:
                kwargs[name] = value

        for name in ('image_transparent', 'draw_light_modules', 'draw_circular_modules',
                     'return_resource', 'image_base64'):
            value = values.get(name)
            if value is not None:
                kwargs[name] = _parse_flag(value)

        image_format = (values.get('image_format') or "").strip().upper()
        if image_format:
            kwargs['image_format'] = image_format

        keep = values.get('keep_as_square')
        if keep:
            kwargs['keep_as_square'] = _parse_module_types(keep)

        return cls(**kwargs)


def _parse_flag(value: Any) -> bool:
    if isinstance(value, bool):
        return value
    return str(value).strip().lower() in ('true', '1', 'yes', 'on')


def _parse_module_types(value: str) -> FrozenSet[ModuleType]:
    types = set()
    for name in str(value).split(','):
        name = name.strip().upper()
        if not name:
            continue
        try:
            types.add(ModuleType[name])
        except KeyError:
            logger.warning(f"Ignoring unknown module type in keep_as_square: {name!r}")
    return frozenset(types)
