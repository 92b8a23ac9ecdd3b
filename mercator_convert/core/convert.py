#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
球面墨卡托坐标转换模块

在四种坐标表示之间互相转换：
1. 经纬度 (lon, lat)，单位度
2. 墨卡托米 (mx, my)，原点在地图中心，y 向上
3. 像素坐标 (px, py)，原点在地图左上角，y 向下
4. 瓦片号 (tx, ty)，由像素坐标除以瓦片尺寸得到

所有方法都是纯函数，不做输入校验。纬度为 ±90 时处于墨卡托投影的奇点，
结果为极大值或无穷大，需要由调用方避免；需要校验时使用 StrictConvert。
"""

import math
from typing import Tuple

from loguru import logger

from ..config import EARTH_RADIUS, DEFAULT_TILE_SIZE


def _ieee_log(value: float) -> float:
    # math.log 对 0 和负数会抛异常，这里按浮点语义返回 -inf / nan
    if value > 0:
        return math.log(value)
    if value == 0:
        return -math.inf
    return math.nan


def _ieee_tan(value: float) -> float:
    if math.isinf(value):
        return math.nan
    return math.tan(value)


def _ieee_exp(value: float) -> float:
    try:
        return math.exp(value)
    except OverflowError:
        return math.inf


def _ieee_pow2(exponent: float) -> float:
    # 2 ** zoom 在指数过大时抛 OverflowError，这里返回 inf
    try:
        return 2.0 ** exponent
    except OverflowError:
        return math.inf


def _ieee_div(numerator: float, denominator: float) -> float:
    # 除以 0 时按浮点语义返回 ±inf / nan
    if denominator == 0:
        if numerator == 0 or math.isnan(numerator):
            return math.nan
        return math.copysign(math.inf, numerator) * math.copysign(1.0, denominator)
    return numerator / denominator


def _boundary_index(value: float, tile_size: int):
    # 瓦片号从 0 开始，所以向上取整后减 1；正好落在瓦片边界上的像素归入前一个瓦片
    if not math.isfinite(value):
        return value
    return math.floor(math.ceil(value / tile_size) - 1)


class Convert:
    """
    坐标转换器

    瓦片尺寸在构造时确定，之后不可修改，由它派生的初始分辨率和原点偏移量
    同样只读，因此同一个实例可以在多个线程之间共享。
    """

    def __init__(self, tile_size: int = DEFAULT_TILE_SIZE):
        """
        初始化转换器

        Args:
            tile_size: 瓦片尺寸（像素），默认 256
        """
        self._tile_size = tile_size
        # 0 级时每个像素代表的米数：赤道周长 / 瓦片尺寸
        self._initial_resolution = 2 * math.pi * EARTH_RADIUS / tile_size
        # 原点偏移量：赤道周长的一半
        self._origin_shift = 2 * math.pi * EARTH_RADIUS / 2.0
        logger.debug(
            f"初始化坐标转换器: tile_size={tile_size}, "
            f"initial_resolution={self._initial_resolution}, origin_shift={self._origin_shift}"
        )

    @property
    def tile_size(self) -> int:
        return self._tile_size

    @property
    def initial_resolution(self) -> float:
        return self._initial_resolution

    @property
    def origin_shift(self) -> float:
        return self._origin_shift

    def __repr__(self):
        return f"{self.__class__.__name__}(tile_size={self._tile_size})"

    def resolution(self, zoom: float) -> float:
        """
        当前层级的分辨率（米/像素），层级每加 1 分辨率减半
        """
        return _ieee_div(self._initial_resolution, _ieee_pow2(zoom))

    def map_size(self, zoom: float) -> float:
        """
        当前层级整张地图的像素宽度（也是高度）
        """
        return _ieee_pow2(zoom) * self._tile_size

    def pixels_to_meters(self, px: float, py: float, zoom: float) -> Tuple[float, float]:
        """
        像素坐标 -> 米

        公式：像素坐标 * 当前层级分辨率 - 原点偏移量。
        像素坐标 y 向下而米 y 向上，所以 y 方向先用地图像素高度减去像素坐标。

        Args:
            px: 像素 x
            py: 像素 y
            zoom: 缩放级别

        Returns:
            tuple: (mx, my)
        """
        res = self.resolution(zoom)
        mx = px * res - self._origin_shift
        my = (self.map_size(zoom) - py) * res - self._origin_shift
        return mx, my

    def meters_to_pixels(self, mx: float, my: float, zoom: float) -> Tuple[float, float]:
        """
        米 -> 像素坐标，pixels_to_meters 的逆运算

        Args:
            mx: 米 x
            my: 米 y
            zoom: 缩放级别

        Returns:
            tuple: (px, py)
        """
        res = self.resolution(zoom)
        px = _ieee_div(mx + self._origin_shift, res)
        py = _ieee_div(my + self._origin_shift, res)
        py = self.map_size(zoom) - py
        return px, py

    def lnglat_to_meters(self, lon: float, lat: float) -> Tuple[float, float]:
        """
        经纬度 -> 米（墨卡托正算）

        Args:
            lon: 经度
            lat: 纬度，必须在 (-90, 90) 内，±90 处结果无意义

        Returns:
            tuple: (mx, my)
        """
        mx = lon * self._origin_shift / 180.0
        my = _ieee_log(_ieee_tan((90 + lat) * math.pi / 360.0)) / (math.pi / 180.0)
        my = my * self._origin_shift / 180.0
        return mx, my

    def meters_to_lnglat(self, mx: float, my: float) -> Tuple[float, float]:
        """
        米 -> 经纬度（墨卡托反算）

        Args:
            mx: 米 x
            my: 米 y

        Returns:
            tuple: (lon, lat)
        """
        lon = (mx / self._origin_shift) * 180.0
        lat = (my / self._origin_shift) * 180.0
        lat = 180 / math.pi * (2 * math.atan(_ieee_exp(lat * math.pi / 180.0)) - math.pi / 2.0)
        return lon, lat

    def meters_to_tile(self, mx: float, my: float, zoom: float) -> Tuple[int, int]:
        # meter -> pixel -> tile
        px, py = self.meters_to_pixels(mx, my, zoom)
        return self.pixels_to_tile(px, py)

    def tile_to_meters(self, tx: int, ty: int, zoom: float) -> Tuple[float, float]:
        # tile -> pixel -> meter
        px, py = self.tile_to_pixels(tx, ty)
        return self.pixels_to_meters(px, py, zoom)

    def tile_to_pixels(self, tx: int, ty: int) -> Tuple[int, int]:
        """
        瓦片号 -> 瓦片左上角像素坐标

        例如瓦片尺寸为 256 时，瓦片 (3, 4) 的像素坐标为 (768, 1024)
        """
        return tx * self._tile_size, ty * self._tile_size

    def pixels_to_tile(self, px: float, py: float) -> Tuple[int, int]:
        """
        像素坐标 -> 瓦片号

        按 ceil(p / tile_size) - 1 计算，像素 (768, 1024) 对应瓦片 (2, 3)
        """
        tx = _boundary_index(px, self._tile_size)
        ty = _boundary_index(py, self._tile_size)
        return tx, ty

    def lnglat_to_tile(self, lon: float, lat: float, zoom: float) -> Tuple[int, int]:
        # lnglat -> pixel -> tile
        px, py = self.lnglat_to_pixels(lon, lat, zoom)
        return self.pixels_to_tile(px, py)

    def tile_to_lnglat(self, tx: int, ty: int, zoom: float) -> Tuple[float, float]:
        """
        瓦片号 -> 瓦片左上角（西北角）经纬度
        """
        min_x, min_y = self.tile_to_meters(tx, ty, zoom)
        return self.meters_to_lnglat(min_x, min_y)

    def lnglat_to_pixels(self, lon: float, lat: float, zoom: float) -> Tuple[float, float]:
        # lnglat -> meter -> pixel
        mx, my = self.lnglat_to_meters(lon, lat)
        return self.meters_to_pixels(mx, my, zoom)

    def pixels_to_lnglat(self, px: float, py: float, zoom: float) -> Tuple[float, float]:
        # pixel -> meter -> lnglat
        mx, my = self.pixels_to_meters(px, py, zoom)
        return self.meters_to_lnglat(mx, my)
