#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
配置常量模块

球面墨卡托（EPSG:3857）瓦片计算使用的固定参数
"""

# WGS-84 赤道半径（米）
EARTH_RADIUS = 6378137.0

# 默认瓦片尺寸（像素）
DEFAULT_TILE_SIZE = 256

# Web Mercator 正方形地图的纬度上限，超出后 y 方向不再落在地图范围内
MAX_LATITUDE = 85.0511287798

# 默认瓦片行号方案
DEFAULT_SCHEME = "xyz"
