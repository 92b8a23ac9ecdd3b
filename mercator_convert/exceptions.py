#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
异常定义模块
"""


class ConvertError(Exception):
    """
    坐标转换相关错误的基类
    """


class CoordinateError(ConvertError, ValueError):
    """
    严格模式下坐标、像素或缩放级别超出有效范围
    """

    def __init__(self, name: str, value, reason: str):
        self.name = name
        self.value = value
        self.reason = reason
        super().__init__(f"{name}={value!r} 无效: {reason}")


class SchemeError(ConvertError, ValueError):
    """
    未知的瓦片坐标方案（只支持 xyz / tms）
    """
