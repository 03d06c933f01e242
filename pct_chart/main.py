#!/usr/bin/env python3
"""
百分比变化分布图 - 命令行入口

使用方法:
    pct-chart render data.csv chart.svg --width 940   # 渲染为 SVG 文件
    pct-chart serve --port 8000                       # 启动 Web 服务
    pct-chart config --json config.json               # 导出默认配置
"""

import argparse
import asyncio
import logging
import sys
from pathlib import Path
from typing import List, Optional

from .config.defaults import DEFAULT_CONFIG
from .config.parameters import ChartConfig, load_config
from .core.data import load_dataset
from .core.errors import ChartError
from .visualization.renderer import ChartRenderer, RenderRequest

logger = logging.getLogger("pct_chart")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog='pct-chart', description='Percent change distribution chart')
    sub = parser.add_subparsers(dest='command', required=True)

    render = sub.add_parser('render', help='Render the chart to an SVG file')
    render.add_argument('data_file', help='Path or URL of the CSV data')
    render.add_argument('output', help='Output SVG path')
    render.add_argument('--width', type=float, default=None, help='Container width in px')
    render.add_argument('--config', default=None, help='JSON config file')

    serve = sub.add_parser('serve', help='Run the web app')
    serve.add_argument('--host', default='127.0.0.1')
    serve.add_argument('--port', type=int, default=8000)
    serve.add_argument('--config', default=None, help='JSON config file')

    config = sub.add_parser('config', help='Export the default config')
    config.add_argument('--json', dest='json_path', required=True, help='Output JSON path')

    return parser


def _load_config(path: Optional[str]) -> ChartConfig:
    if path:
        logger.info(f"Loading config: {path}")
        return load_config(path)
    return DEFAULT_CONFIG


def render_file(data_file: str, output: str, width: Optional[float], config: ChartConfig) -> int:
    """读取数据并渲染一次, 返回内容高度"""
    dataset = asyncio.run(load_dataset(data_file, config.label_column, config.value_column))
    renderer = ChartRenderer(config)
    result = renderer.render(RenderRequest(
        container=config.container,
        width=config.default_width if width is None else width,
        dataset=dataset,
    ))
    Path(output).write_text(result.svg, encoding='utf-8')
    logger.info(f"Saved {output} ({result.width:g}x{result.height}, mobile={result.is_mobile})")
    return result.height


def serve(host: str, port: int, config: ChartConfig):
    import uvicorn

    from .backend.main import create_app

    uvicorn.run(create_app(config), host=host, port=port)


def main(argv: Optional[List[str]] = None) -> int:
    """主函数"""
    logging.basicConfig(
        level=logging.INFO,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )
    args = build_parser().parse_args(argv)

    try:
        if args.command == 'config':
            DEFAULT_CONFIG.to_json(args.json_path)
            logger.info(f"Config exported to: {args.json_path}")
        elif args.command == 'render':
            config = _load_config(args.config)
            render_file(args.data_file, args.output, args.width, config)
        elif args.command == 'serve':
            serve(args.host, args.port, _load_config(args.config))
    except (ChartError, FileNotFoundError, ValueError) as e:
        logger.error(str(e))
        return 1
    return 0


if __name__ == '__main__':
    sys.exit(main())
