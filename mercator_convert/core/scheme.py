#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
瓦片坐标方案模块

支持XYZ和TMS坐标系统之间的转换：XYZ 的行号从地图顶部开始，
TMS 的行号从地图底部开始，两者只有 y 不同。
"""

from enum import Enum

from ..exceptions import SchemeError


class TileScheme(Enum):
    """
    瓦片行号方案枚举
    """
    XYZ = "xyz"
    TMS = "tms"

    @classmethod
    def parse(cls, scheme) -> "TileScheme":
        """
        将字符串（大小写不敏感）或枚举成员统一为枚举成员

        Raises:
            SchemeError: 未知的方案名称
        """
        if isinstance(scheme, cls):
            return scheme
        try:
            return cls(str(scheme).strip().lower())
        except ValueError:
            raise SchemeError(f"未知的瓦片坐标方案: {scheme!r}（只支持 xyz / tms）") from None


class SchemeConverter:
    """
    坐标方案转换类
    """

    @staticmethod
    def xyz_to_tms(zoom, y_xyz):
        """
        将XYZ坐标系统的y坐标转换为TMS坐标系统的y坐标

        Args:
            zoom: 缩放级别
            y_xyz: XYZ坐标系统的y坐标

        Returns:
            int: TMS坐标系统的y坐标
        """
        return (2 ** zoom - 1) - y_xyz

    @staticmethod
    def tms_to_xyz(zoom, y_tms):
        """
        将TMS坐标系统的y坐标转换为XYZ坐标系统的y坐标
        """
        return (2 ** zoom - 1) - y_tms

    @staticmethod
    def convert(zoom, y, from_scheme, to_scheme):
        """
        在不同坐标系统之间转换y坐标

        Args:
            zoom: 缩放级别
            y: 原始y坐标
            from_scheme: 原始坐标系统 ('xyz' / 'tms' 或 TileScheme)
            to_scheme: 目标坐标系统 ('xyz' / 'tms' 或 TileScheme)

        Returns:
            int: 转换后的y坐标
        """
        source = TileScheme.parse(from_scheme)
        target = TileScheme.parse(to_scheme)
        if source == target:
            return y

        if target == TileScheme.XYZ:
            return SchemeConverter.tms_to_xyz(zoom, y)
        return SchemeConverter.xyz_to_tms(zoom, y)
