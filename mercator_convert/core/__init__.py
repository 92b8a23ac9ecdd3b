#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
坐标转换核心模块
"""

from mercator_convert.core.convert import Convert
from mercator_convert.core.strict import StrictConvert
from mercator_convert.core.scheme import TileScheme, SchemeConverter
from mercator_convert.core.bounds import (
    tile_bounds_meters,
    tile_bounds_lnglat,
    tile_range_in_bbox,
    tiles_in_bbox,
    tiles_in_bbox_zoom_range,
)
from mercator_convert.core.utils import parse_zoom_levels, parse_pair, parse_bbox

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
    'parse_pair',
    'parse_bbox',
]
