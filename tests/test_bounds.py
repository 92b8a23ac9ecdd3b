#!/usr/bin/env python3
"""
瓦片范围与矩形区域瓦片计算测试
"""

import math

import pytest

from mercator_convert import (
    Convert,
    tile_bounds_meters,
    tile_bounds_lnglat,
    tile_range_in_bbox,
    tiles_in_bbox,
    tiles_in_bbox_zoom_range,
)

ORIGIN_SHIFT = math.pi * 6378137.0
MAX_LAT = 85.0511287798


@pytest.fixture
def convert():
    return Convert()


def test_world_tile_bounds_meters(convert):
    west, south, east, north = tile_bounds_meters(convert, 0, 0, 0)
    assert (west, south, east, north) == pytest.approx(
        (-ORIGIN_SHIFT, -ORIGIN_SHIFT, ORIGIN_SHIFT, ORIGIN_SHIFT)
    )


def test_tile_bounds_lnglat(convert):
    bounds = tile_bounds_lnglat(convert, 0, 0, 1)
    assert bounds == pytest.approx((-180.0, 0.0, 0.0, MAX_LAT), abs=1e-6)

    west, south, east, north = tile_bounds_lnglat(convert, 3, 5, 4)
    assert west < east
    assert south < north


def test_adjacent_tiles_share_edges(convert):
    a = tile_bounds_meters(convert, 5, 7, 4)
    right = tile_bounds_meters(convert, 6, 7, 4)
    below = tile_bounds_meters(convert, 5, 8, 4)
    assert a[2] == pytest.approx(right[0])
    assert a[1] == pytest.approx(below[3])


def test_tiles_in_bbox_whole_world(convert):
    tiles = tiles_in_bbox(convert, -180, -85, 180, 85, 1)
    assert tiles == [(0, 0), (0, 1), (1, 0), (1, 1)]
    assert len(tiles_in_bbox(convert, -180, -85, 180, 85, 3)) == 64


def test_tiles_in_bbox_single_tile(convert):
    assert tiles_in_bbox(convert, 10, 10, 20, 20, 1) == [(1, 0)]
    assert tiles_in_bbox(convert, 10, 10, 20, 20, 1, scheme="tms") == [(1, 1)]


def test_tiles_in_bbox_contains_corner_tiles(convert):
    zoom = 12
    tiles = set(tiles_in_bbox(convert, 116.3, 39.8, 116.5, 40.0, zoom))
    assert convert.lnglat_to_tile(116.3, 40.0, zoom) in tiles
    assert convert.lnglat_to_tile(116.5, 39.8, zoom) in tiles
    assert convert.lnglat_to_tile(116.4, 39.9, zoom) in tiles


def test_tiles_in_bbox_swapped_corners(convert):
    assert tiles_in_bbox(convert, 20, 20, 10, 10, 1) == tiles_in_bbox(convert, 10, 10, 20, 20, 1)


def test_tiles_in_bbox_zoom_range(convert):
    zoom_tiles = tiles_in_bbox_zoom_range(convert, 10, 10, 20, 20, 0, 2)
    assert sorted(zoom_tiles) == [0, 1, 2]
    assert zoom_tiles[0] == [(0, 0)]
    assert zoom_tiles[1] == [(1, 0)]


def test_west_edge_on_tile_boundary_adds_previous_column(convert):
    # 经度 0 在 1 级时正好是像素 256，按边界规则归入瓦片 0
    assert convert.lnglat_to_pixels(0, 15, 1)[0] == 256
    assert convert.lnglat_to_tile(0, 15, 1)[0] == 0
    assert tiles_in_bbox(convert, 0, 10, 20, 20, 1) == [(0, 0), (1, 0)]
    assert tiles_in_bbox(convert, 0.001, 10, 20, 20, 1) == [(1, 0)]


def test_map_edge_tile_is_clamped_to_zero(convert):
    # 经度 -180 对应像素 0，换算出的瓦片号为 -1
    assert convert.lnglat_to_tile(-180, 15, 1)[0] == -1
    assert tiles_in_bbox(convert, -180, 10, -170, 20, 1) == [(0, 0)]


def test_tile_range_in_bbox(convert):
    assert tile_range_in_bbox(convert, -180, -85, 180, 85, 1) == (0, 0, 1, 1)
    assert tile_range_in_bbox(convert, 10, 10, 20, 20, 1) == (1, 0, 1, 0)
    assert tile_range_in_bbox(convert, 10, 10, 20, 20, 1, scheme="tms") == (1, 1, 1, 1)


def test_tile_range_in_bbox_large_zoom_without_enumerating(convert):
    n = 2 ** 24
    assert tile_range_in_bbox(convert, -180, -90, 180, 90, 24) == (0, 0, n - 1, n - 1)


def test_tile_range_in_bbox_tms_flips_rows(convert):
    xyz = tile_range_in_bbox(convert, 116.3, 39.8, 116.5, 40.0, 10)
    tms = tile_range_in_bbox(convert, 116.3, 39.8, 116.5, 40.0, 10, scheme="tms")
    assert tms[0] == xyz[0] and tms[2] == xyz[2]
    assert tms[1] == 2 ** 10 - 1 - xyz[3]
    assert tms[3] == 2 ** 10 - 1 - xyz[1]


def test_bbox_with_nan_corner_is_empty(convert):
    # 纬度 100 换算为 nan
    assert tile_range_in_bbox(convert, 0, 0, 10, 100, 3) is None
    assert tiles_in_bbox(convert, 0, 0, 10, 100, 3) == []
    assert tiles_in_bbox(convert, float("nan"), 0, 10, 10, 3) == []


def test_bbox_reaching_south_pole_clamps(convert):
    # 纬度 -90 换算为无穷远，落到最后一行
    assert tile_range_in_bbox(convert, -10, -90, 10, 10, 2) == (1, 1, 2, 3)
