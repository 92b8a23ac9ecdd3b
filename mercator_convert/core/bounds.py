#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
瓦片范围计算模块

- 单个瓦片的地理范围（米 / 经纬度）
- 经纬度矩形范围覆盖的瓦片号范围和全部瓦片号
"""

import math
from typing import Dict, List, Optional, Tuple

from loguru import logger

from ..config import DEFAULT_SCHEME
from .convert import Convert
from .scheme import SchemeConverter, TileScheme


def tile_bounds_meters(convert: Convert, tx: int, ty: int, zoom: int) -> Tuple[float, float, float, float]:
    """
    获取单个瓦片的墨卡托范围 (west, south, east, north)

    左上角取瓦片自身的 tile_to_meters，右下角取 (tx + 1, ty + 1) 的 tile_to_meters
    """
    west, north = convert.tile_to_meters(tx, ty, zoom)
    east, south = convert.tile_to_meters(tx + 1, ty + 1, zoom)
    return west, south, east, north


def tile_bounds_lnglat(convert: Convert, tx: int, ty: int, zoom: int) -> Tuple[float, float, float, float]:
    """
    获取单个瓦片的经纬度范围 (west, south, east, north)
    """
    west, south, east, north = tile_bounds_meters(convert, tx, ty, zoom)
    west, south = convert.meters_to_lnglat(west, south)
    east, north = convert.meters_to_lnglat(east, north)
    return west, south, east, north


def tile_range_in_bbox(
    convert: Convert,
    west: float,
    south: float,
    east: float,
    north: float,
    zoom: int,
    scheme=DEFAULT_SCHEME,
) -> Optional[Tuple[int, int, int, int]]:
    """
    计算经纬度矩形范围覆盖的瓦片号范围，不生成瓦片列表

    Args:
        convert: 坐标转换器
        west: 西边界经度
        south: 南边界纬度
        east: 东边界经度
        north: 北边界纬度
        zoom: 缩放级别
        scheme: 行号方案 ('xyz' / 'tms')

    Returns:
        tuple: (min_x, min_y, max_x, max_y)，包含两端；
        角点换算结果为 nan（如纬度超出 ±90）时返回 None
    """
    target = TileScheme.parse(scheme)

    # 瓦片号有效范围是 0 到 n-1
    n = 2 ** zoom
    max_valid_tile = n - 1

    # 1. 左上角和右下角的瓦片号，沿用 pixels_to_tile 的边界规则
    min_x, min_y = convert.lnglat_to_tile(west, north, zoom)
    max_x, max_y = convert.lnglat_to_tile(east, south, zoom)
    if any(isinstance(v, float) and math.isnan(v) for v in (min_x, min_y, max_x, max_y)):
        return None

    # 纠正一下顺序，保证 min <= max
    if min_x > max_x:
        min_x, max_x = max_x, min_x
    if min_y > max_y:
        min_y, max_y = max_y, min_y

    # 2. 限制在有效范围 [0, max_valid_tile] 内，±inf 落到两端
    min_x = int(max(0, min(max_valid_tile, min_x)))
    min_y = int(max(0, min(max_valid_tile, min_y)))
    max_x = int(max(0, min(max_valid_tile, max_x)))
    max_y = int(max(0, min(max_valid_tile, max_y)))

    if target == TileScheme.TMS:
        min_y, max_y = SchemeConverter.xyz_to_tms(zoom, max_y), SchemeConverter.xyz_to_tms(zoom, min_y)
    return min_x, min_y, max_x, max_y


def tiles_in_bbox(
    convert: Convert,
    west: float,
    south: float,
    east: float,
    north: float,
    zoom: int,
    scheme=DEFAULT_SCHEME,
) -> List[Tuple[int, int]]:
    """
    计算经纬度矩形范围内的全部瓦片

    Returns:
        list: 按 (tx, ty) 排序的瓦片号列表，范围无效时为空列表
    """
    tile_range = tile_range_in_bbox(convert, west, south, east, north, zoom, scheme)
    if tile_range is None:
        logger.debug(f"缩放级别 {zoom}: 范围 ({west}, {south}, {east}, {north}) 无法换算为瓦片")
        return []

    min_x, min_y, max_x, max_y = tile_range
    tiles = [(x, y) for x in range(min_x, max_x + 1) for y in range(min_y, max_y + 1)]
    logger.debug(f"缩放级别 {zoom}: 范围 ({west}, {south}, {east}, {north}) 内瓦片数 = {len(tiles)}")
    return tiles


def tiles_in_bbox_zoom_range(
    convert: Convert,
    west: float,
    south: float,
    east: float,
    north: float,
    min_zoom: int,
    max_zoom: int,
    scheme=DEFAULT_SCHEME,
) -> Dict[int, List[Tuple[int, int]]]:
    """
    多个 zoom 级别的瓦片集合
    """
    zoom_tiles = {}
    for z in range(min_zoom, max_zoom + 1):
        zoom_tiles[z] = tiles_in_bbox(convert, west, south, east, north, z, scheme)
    return zoom_tiles
