#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
mercator_convert包

功能特性：
1. 经纬度、墨卡托米、像素坐标、瓦片号之间互相转换
2. 瓦片尺寸可配置，默认 256
3. 可选的严格模式，对超出范围的输入抛出异常
4. 支持XYZ和TMS坐标系统转换
5. 计算瓦片地理范围和矩形区域内的瓦片

版本：1.0
"""

from .core import (
    Convert,
    StrictConvert,
    TileScheme,
    SchemeConverter,
    tile_bounds_meters,
    tile_bounds_lnglat,
    tile_range_in_bbox,
    tiles_in_bbox,
    tiles_in_bbox_zoom_range,
    parse_zoom_levels,
)
from .exceptions import ConvertError, CoordinateError, SchemeError

__all__ = [
    'Convert',
    'StrictConvert',
    'TileScheme',
    'SchemeConverter',
    'tile_bounds_meters',
    'tile_bounds_lnglat',
    'tile_range_in_bbox',
    'tiles_in_bbox',
    'tiles_in_bbox_zoom_range',
    'parse_zoom_levels',
    'ConvertError',
    'CoordinateError',
    'SchemeError',
]
__version__ = '1.0'
