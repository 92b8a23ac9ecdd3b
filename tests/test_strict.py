#!/usr/bin/env python3
"""
严格模式转换器测试
"""

import math

import pytest

from mercator_convert import Convert, StrictConvert, ConvertError, CoordinateError


@pytest.fixture
def strict():
    return StrictConvert()


def test_valid_input_matches_default_converter(strict):
    convert = Convert()
    lon, lat, zoom = 116.4074, 39.9042, 15
    assert strict.lnglat_to_meters(lon, lat) == convert.lnglat_to_meters(lon, lat)
    assert strict.lnglat_to_pixels(lon, lat, zoom) == convert.lnglat_to_pixels(lon, lat, zoom)
    assert strict.lnglat_to_tile(lon, lat, zoom) == convert.lnglat_to_tile(lon, lat, zoom)
    assert strict.tile_to_lnglat(3, 4, zoom) == convert.tile_to_lnglat(3, 4, zoom)
    assert strict.tile_to_pixels(3, 4) == (768, 1024)
    assert strict.pixels_to_tile(768, 1024) == (2, 3)
    assert strict.resolution(3) == convert.resolution(3)
    assert strict.map_size(2) == 1024
    assert strict.meters_to_lnglat(0, 0) == convert.meters_to_lnglat(0, 0)


def test_configuration_is_exposed(strict):
    assert strict.tile_size == 256
    assert strict.origin_shift == pytest.approx(math.pi * 6378137.0)
    assert strict.initial_resolution == pytest.approx(2 * math.pi * 6378137.0 / 256)
    assert repr(strict) == "StrictConvert(tile_size=256)"


@pytest.mark.parametrize("lat", [90, -90, 90.5, -180])
def test_rejects_latitude_on_or_beyond_poles(strict, lat):
    with pytest.raises(CoordinateError) as excinfo:
        strict.lnglat_to_meters(0, lat)
    assert excinfo.value.name == "lat"
    assert excinfo.value.value == lat


def test_rejects_negative_zoom(strict):
    with pytest.raises(CoordinateError):
        strict.resolution(-1)
    with pytest.raises(CoordinateError):
        strict.lnglat_to_tile(10, 10, -2)


@pytest.mark.parametrize("value", [float("nan"), float("inf"), -float("inf")])
def test_rejects_non_finite_values(strict, value):
    with pytest.raises(CoordinateError):
        strict.pixels_to_meters(value, 0, 1)
    with pytest.raises(CoordinateError):
        strict.meters_to_pixels(0, value, 1)
    with pytest.raises(CoordinateError):
        strict.pixels_to_tile(value, 0)


def test_rejects_non_numeric_values(strict):
    with pytest.raises(CoordinateError):
        strict.lnglat_to_meters("abc", 10)


def test_errors_are_value_errors(strict):
    with pytest.raises(ValueError):
        strict.lnglat_to_meters(0, 90)
    with pytest.raises(ConvertError):
        strict.lnglat_to_meters(0, 90)


@pytest.mark.parametrize("tile_size", [0, -256, 256.0, True])
def test_rejects_bad_tile_size(tile_size):
    with pytest.raises(CoordinateError):
        StrictConvert(tile_size)
