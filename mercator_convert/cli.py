#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
命令行接口模块

处理命令行参数解析，执行坐标转换并用表格输出结果
"""

import argparse
import sys

from loguru import logger
from rich.console import Console
from rich.table import Table

from .config import DEFAULT_TILE_SIZE, DEFAULT_SCHEME, MAX_LATITUDE
from .core import (
    Convert,
    StrictConvert,
    SchemeConverter,
    TileScheme,
    tile_bounds_meters,
    tile_bounds_lnglat,
    tile_range_in_bbox,
    parse_zoom_levels,
    parse_pair,
    parse_bbox,
)
from .exceptions import ConvertError

console = Console()
error_console = Console(stderr=True)

KINDS = ["lnglat", "meters", "pixels", "tile"]

# 不依赖缩放级别的转换
ZOOMLESS = {"lnglat_to_meters", "meters_to_lnglat", "tile_to_pixels", "pixels_to_tile"}


def setup_logging(verbose=False, log_file=None):
    """
    配置 loguru：stderr 输出，可选写入日志文件
    """
    logger.remove()
    logger.add(sys.stderr, level="DEBUG" if verbose else "INFO")
    if log_file:
        logger.add(log_file, level="DEBUG", rotation="10 MB")


def make_converter(tile_size, strict=False):
    """
    创建转换器；瓦片尺寸必须为正整数，否则后续计算没有意义
    """
    if tile_size <= 0:
        raise ConvertError(f"--tile-size 必须大于 0: {tile_size}")
    return StrictConvert(tile_size) if strict else Convert(tile_size)


def _fmt(value):
    if isinstance(value, float):
        return f"{value:.6f}"
    return str(value)


def _fmt_pair(pair):
    return ", ".join(_fmt(v) for v in pair)


def cmd_convert(args):
    if args.source == args.target:
        raise ConvertError("--from 和 --to 不能相同")

    method_name = f"{args.source}_to_{args.target}"
    needs_zoom = method_name not in ZOOMLESS
    if needs_zoom and args.zoom is None:
        raise ConvertError(f"{args.source} -> {args.target} 需要 --zoom")

    converter = make_converter(args.tile_size, args.strict)

    x, y = parse_pair(args.coord)
    if args.source == "tile":
        x, y = int(x), int(y)

    method = getattr(converter, method_name)
    result = method(x, y, args.zoom) if needs_zoom else method(x, y)
    logger.debug(f"{method_name}({x}, {y}, zoom={args.zoom}) -> {result}")

    table = Table(title="坐标转换")
    table.add_column("项目", style="cyan")
    table.add_column("值")
    table.add_row(args.source, _fmt_pair((x, y)))
    table.add_row(args.target, _fmt_pair(result))
    if needs_zoom:
        table.add_row("zoom", str(args.zoom))
    console.print(table)
    return result


def cmd_resolution(args):
    converter = make_converter(args.tile_size)
    zoom_levels = parse_zoom_levels(args.zoom)

    table = Table(title="分辨率")
    table.add_column("zoom", style="cyan")
    table.add_column("米/像素")
    table.add_column("地图像素宽度")
    for zoom in zoom_levels:
        table.add_row(str(zoom), _fmt(converter.resolution(zoom)), str(converter.map_size(zoom)))
    console.print(table)
    return zoom_levels


def cmd_bounds(args):
    converter = make_converter(args.tile_size)
    tx, ty = (int(v) for v in parse_pair(args.tile))
    # 输入为 TMS 行号时先翻回 XYZ
    ty = SchemeConverter.convert(args.zoom, ty, args.scheme, TileScheme.XYZ)

    meters = tile_bounds_meters(converter, tx, ty, args.zoom)
    degrees = tile_bounds_lnglat(converter, tx, ty, args.zoom)

    table = Table(title=f"瓦片范围 z={args.zoom}")
    table.add_column("边界", style="cyan")
    table.add_column("米")
    table.add_column("经纬度")
    for name, m, d in zip(["west", "south", "east", "north"], meters, degrees):
        table.add_row(name, _fmt(m), _fmt(d))
    console.print(table)
    return meters, degrees


def cmd_tiles(args):
    converter = make_converter(args.tile_size)
    west, south, east, north = parse_bbox(args.bbox)
    zoom_levels = parse_zoom_levels(args.zoom)

    table = Table(title="范围内瓦片")
    table.add_column("zoom", style="cyan")
    table.add_column("x 范围")
    table.add_column("y 范围")
    table.add_column("数量")
    counts = {}
    for zoom in zoom_levels:
        tile_range = tile_range_in_bbox(converter, west, south, east, north, zoom, args.scheme)
        if tile_range is None:
            counts[zoom] = 0
            table.add_row(str(zoom), "-", "-", "0")
            continue
        min_x, min_y, max_x, max_y = tile_range
        counts[zoom] = (max_x - min_x + 1) * (max_y - min_y + 1)
        table.add_row(str(zoom), f"{min_x}-{max_x}", f"{min_y}-{max_y}", str(counts[zoom]))
    console.print(table)
    return counts


def build_parser():
    parser = argparse.ArgumentParser(description="球面墨卡托坐标转换工具")
    parser.add_argument("-v", "--verbose", action="store_true", help="输出调试日志")
    parser.add_argument("--log-file", default=None, help="日志文件路径")
    subparsers = parser.add_subparsers(dest="cmd")

    common = argparse.ArgumentParser(add_help=False)
    common.add_argument("--tile-size", type=int, default=DEFAULT_TILE_SIZE, help="瓦片尺寸（像素）")

    p_convert = subparsers.add_parser("convert", parents=[common], help="在四种坐标之间转换")
    p_convert.add_argument("--from", dest="source", choices=KINDS, required=True)
    p_convert.add_argument("--to", dest="target", choices=KINDS, required=True)
    p_convert.add_argument("--coord", required=True, help="坐标对，如 116.4,39.9")
    p_convert.add_argument("--zoom", type=float, default=None)
    p_convert.add_argument("--strict", action="store_true", help="校验输入范围")

    p_res = subparsers.add_parser("resolution", parents=[common], help="各缩放级别的分辨率")
    p_res.add_argument("--zoom", nargs="+", required=True, help="缩放级别，如 14 或 0-5")

    p_bounds = subparsers.add_parser("bounds", parents=[common], help="单个瓦片的范围")
    p_bounds.add_argument("--tile", required=True, help="瓦片号，如 3,4")
    p_bounds.add_argument("--zoom", type=int, required=True)
    p_bounds.add_argument("--scheme", choices=[s.value for s in TileScheme], default=DEFAULT_SCHEME)

    p_tiles = subparsers.add_parser("tiles", parents=[common], help="矩形范围内的瓦片")
    p_tiles.add_argument(
        "--bbox", required=True,
        help=f"west,south,east,north（纬度建议在 ±{MAX_LATITUDE} 内）",
    )
    p_tiles.add_argument("--zoom", nargs="+", required=True, help="缩放级别，如 14 或 8-12")
    p_tiles.add_argument("--scheme", choices=[s.value for s in TileScheme], default=DEFAULT_SCHEME)

    return parser


def main(argv=None):
    parser = build_parser()
    # 以 "-" 开头的坐标（如 -97.7,30.2）需要写成 --coord=-97.7,30.2
    args = parser.parse_args(argv)
    setup_logging(args.verbose, args.log_file)

    commands = {
        "convert": cmd_convert,
        "resolution": cmd_resolution,
        "bounds": cmd_bounds,
        "tiles": cmd_tiles,
    }
    command = commands.get(args.cmd)
    if command is None:
        parser.print_help()
        return 1

    try:
        command(args)
    except ConvertError as e:
        logger.error(f"执行 {args.cmd} 失败: {e}")
        error_console.print(f"[bold red]错误:[/bold red] {e}")
        return 2
    return 0


if __name__ == "__main__":
    sys.exit(main())
