#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
工具函数模块

解析命令行传入的缩放级别和坐标对
"""

import math

from ..exceptions import ConvertError


def parse_zoom_levels(zoom_arg):
    """
    解析缩放级别参数

    Args:
        zoom_arg: 缩放级别参数列表，每项可以是单个值或范围，如 "14" 或 "8-15"

    Returns:
        list: 去重并排序后的缩放级别列表；参数为空时返回 None

    Raises:
        ConvertError: 无法解析的缩放级别
    """
    if not zoom_arg:
        return None

    zoom_levels = []
    for arg in zoom_arg:
        arg = str(arg).strip()
        try:
            if '-' in arg:
                # 处理范围，如 8-15
                start, end = arg.split('-')
                start_zoom = int(start)
                end_zoom = int(end)
                if start_zoom > end_zoom:
                    start_zoom, end_zoom = end_zoom, start_zoom
                zoom_levels.extend(range(start_zoom, end_zoom + 1))
            else:
                # 处理单个值，如 14
                zoom_levels.append(int(arg))
        except ValueError:
            raise ConvertError(f"无法解析缩放级别: {arg!r}") from None

    return sorted(set(zoom_levels))


def parse_pair(text):
    """
    解析 "x,y" 形式的坐标对，nan / inf 视为无效

    Returns:
        tuple: (float, float)
    """
    return tuple(_parse_floats(text, 2))


def parse_bbox(text):
    """
    解析 "west,south,east,north" 形式的矩形范围
    """
    return tuple(_parse_floats(text, 4))


def _parse_floats(text, count):
    parts = [part.strip() for part in str(text).split(',')]
    if len(parts) != count:
        raise ConvertError(f"需要 {count} 个以逗号分隔的数值: {text!r}")
    try:
        values = [float(part) for part in parts]
    except ValueError:
        raise ConvertError(f"包含无法解析的数值: {text!r}") from None
    if not all(math.isfinite(v) for v in values):
        raise ConvertError(f"坐标必须是有限值: {text!r}")
    return values
