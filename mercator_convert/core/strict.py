#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
带输入校验的坐标转换器

与 Convert 提供同样的方法，区别是在计算前检查输入：
- 纬度必须在 (-90, 90) 之间
- 缩放级别必须为非负有限值
- 其余坐标必须是有限值

校验失败抛出 CoordinateError；输入合法时结果与 Convert 完全一致。
"""

import math
from typing import Tuple

from loguru import logger

from ..config import DEFAULT_TILE_SIZE
from ..exceptions import CoordinateError
from .convert import Convert


def _reject(name: str, value, reason: str):
    error = CoordinateError(name, value, reason)
    logger.warning(f"拒绝输入: {error}")
    raise error


def _check_finite(name: str, value):
    try:
        finite = math.isfinite(value)
    except TypeError:
        _reject(name, value, "不是数值")
    if not finite:
        _reject(name, value, "必须是有限值")


def _check_zoom(zoom):
    _check_finite("zoom", zoom)
    if zoom < 0:
        _reject("zoom", zoom, "缩放级别不能为负数")


def _check_lnglat(lon, lat):
    _check_finite("lon", lon)
    _check_finite("lat", lat)
    if not -90 < lat < 90:
        _reject("lat", lat, "纬度必须在 (-90, 90) 之间")


class StrictConvert:
    """
    校验输入后委托给 Convert 计算
    """

    def __init__(self, tile_size: int = DEFAULT_TILE_SIZE):
        if isinstance(tile_size, bool) or not isinstance(tile_size, int) or tile_size <= 0:
            _reject("tile_size", tile_size, "瓦片尺寸必须是正整数")
        self._convert = Convert(tile_size)

    @property
    def tile_size(self) -> int:
        return self._convert.tile_size

    @property
    def initial_resolution(self) -> float:
        return self._convert.initial_resolution

    @property
    def origin_shift(self) -> float:
        return self._convert.origin_shift

    def __repr__(self):
        return f"{self.__class__.__name__}(tile_size={self.tile_size})"

    def resolution(self, zoom: float) -> float:
        _check_zoom(zoom)
        return self._convert.resolution(zoom)

    def map_size(self, zoom: float) -> float:
        _check_zoom(zoom)
        return self._convert.map_size(zoom)

    def pixels_to_meters(self, px: float, py: float, zoom: float) -> Tuple[float, float]:
        _check_finite("px", px)
        _check_finite("py", py)
        _check_zoom(zoom)
        return self._convert.pixels_to_meters(px, py, zoom)

    def meters_to_pixels(self, mx: float, my: float, zoom: float) -> Tuple[float, float]:
        _check_finite("mx", mx)
        _check_finite("my", my)
        _check_zoom(zoom)
        return self._convert.meters_to_pixels(mx, my, zoom)

    def lnglat_to_meters(self, lon: float, lat: float) -> Tuple[float, float]:
        _check_lnglat(lon, lat)
        return self._convert.lnglat_to_meters(lon, lat)

    def meters_to_lnglat(self, mx: float, my: float) -> Tuple[float, float]:
        _check_finite("mx", mx)
        _check_finite("my", my)
        return self._convert.meters_to_lnglat(mx, my)

    def meters_to_tile(self, mx: float, my: float, zoom: float) -> Tuple[int, int]:
        _check_finite("mx", mx)
        _check_finite("my", my)
        _check_zoom(zoom)
        return self._convert.meters_to_tile(mx, my, zoom)

    def tile_to_meters(self, tx: int, ty: int, zoom: float) -> Tuple[float, float]:
        _check_finite("tx", tx)
        _check_finite("ty", ty)
        _check_zoom(zoom)
        return self._convert.tile_to_meters(tx, ty, zoom)

    def tile_to_pixels(self, tx: int, ty: int) -> Tuple[int, int]:
        _check_finite("tx", tx)
        _check_finite("ty", ty)
        return self._convert.tile_to_pixels(tx, ty)

    def pixels_to_tile(self, px: float, py: float) -> Tuple[int, int]:
        _check_finite("px", px)
        _check_finite("py", py)
        return self._convert.pixels_to_tile(px, py)

    def lnglat_to_tile(self, lon: float, lat: float, zoom: float) -> Tuple[int, int]:
        _check_lnglat(lon, lat)
        _check_zoom(zoom)
        return self._convert.lnglat_to_tile(lon, lat, zoom)

    def tile_to_lnglat(self, tx: int, ty: int, zoom: float) -> Tuple[float, float]:
        _check_finite("tx", tx)
        _check_finite("ty", ty)
        _check_zoom(zoom)
        return self._convert.tile_to_lnglat(tx, ty, zoom)

    def lnglat_to_pixels(self, lon: float, lat: float, zoom: float) -> Tuple[float, float]:
        _check_lnglat(lon, lat)
        _check_zoom(zoom)
        return self._convert.lnglat_to_pixels(lon, lat, zoom)

    def pixels_to_lnglat(self, px: float, py: float, zoom: float) -> Tuple[float, float]:
        _check_finite("px", px)
        _check_finite("py", py)
        _check_zoom(zoom)
        return self._convert.pixels_to_lnglat(px, py, zoom)
