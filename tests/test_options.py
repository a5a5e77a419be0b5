"""Tests for RenderOptions."""

import dataclasses

import pytest

from qr_raster import ModuleType, RenderOptions
from qr_raster.options import DEFAULT_SCALE


def test_defaults() -> None:
    options = RenderOptions()
    assert options.scale == DEFAULT_SCALE
    assert options.markup_dark == "#000"
    assert options.markup_light == "#fff"
    assert options.bg_color is None
    assert options.image_transparent
    assert options.draw_light_modules
    assert not options.draw_circular_modules
    assert options.circle_radius == 0.0
    assert options.keep_as_square == frozenset()
    assert options.image_format == "PNG"


def test_options_are_immutable() -> None:
    options = RenderOptions()
    with pytest.raises(dataclasses.FrozenInstanceError):
        options.scale = 10


@pytest.mark.parametrize("scale", [0, -1, 2.5, True, "3"])
def test_scale_must_be_positive_integer(scale) -> None:
    with pytest.raises(ValueError):
        RenderOptions(scale=scale)


def test_module_values_are_frozen() -> None:
    options = RenderOptions(module_values={ModuleType.TIMING_DARK: "orange", ModuleType.FINDER_DARK: "red"})
    assert options.module_values == ((ModuleType.FINDER_DARK, "red"), (ModuleType.TIMING_DARK, "orange"))
    assert hash(options) == hash(RenderOptions(module_values=[(ModuleType.TIMING_DARK, "orange"),
                                                             (ModuleType.FINDER_DARK, "red")]))


def test_keep_as_square_stores_categories() -> None:
    options = RenderOptions(keep_as_square=[ModuleType.FINDER_DARK, ModuleType.ALIGNMENT])
    assert options.keep_as_square == frozenset({ModuleType.FINDER, ModuleType.ALIGNMENT})


def test_from_mapping() -> None:
    options = RenderOptions.from_mapping({
        'scale': '10',
        'markup_dark': ' #123456 ',
        'bg_color': 'yellow',
        'draw_circular_modules': 'true',
        'image_transparent': 'false',
        'circle_radius': '0.3',
        'keep_as_square': 'finder, alignment_dark, bogus',
        'image_format': 'webp',
        'unrelated': 'ignored',
    })
    assert options.scale == 10
    assert options.markup_dark == "#123456"
    assert options.bg_color == "yellow"
    assert options.draw_circular_modules
    assert not options.image_transparent
    assert options.circle_radius == pytest.approx(0.3)
    assert options.keep_as_square == frozenset({ModuleType.FINDER, ModuleType.ALIGNMENT})
    assert options.image_format == "WEBP"


@pytest.mark.parametrize("scale", ["0", "-3", "1000", "abc", ""])
def test_from_mapping_bad_scale_falls_back(scale: str) -> None:
    assert RenderOptions.from_mapping({'scale': scale}).scale == DEFAULT_SCALE


def test_from_mapping_empty_keeps_defaults() -> None:
    assert RenderOptions.from_mapping({}) == RenderOptions()
