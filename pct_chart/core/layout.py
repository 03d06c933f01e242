"""
布局计算
根据容器宽度选择移动端/桌面端宽高比并计算图表尺寸
"""

import math
from dataclasses import dataclass
from typing import Dict, Optional, Tuple

from ..config.defaults import DEFAULT_CONFIG
from ..config.parameters import ChartConfig
from .errors import RenderPreconditionError


@dataclass(frozen=True)
class LayoutConfig:
    """布局模式"""
    container_width: float
    is_mobile: bool
    aspect_width: int
    aspect_height: int

    @property
    def aspect_ratio(self) -> Tuple[int, int]:
        return self.aspect_width, self.aspect_height


@dataclass(frozen=True)
class ChartGeometry:
    """图表尺寸 (不含边距) 与边距"""
    chart_width: float
    chart_height: int
    margins: Dict[str, int]

    @property
    def total_width(self) -> float:
        return self.chart_width + self.margins['left'] + self.margins['right']

    @property
    def total_height(self) -> int:
        return self.chart_height + self.margins['top'] + self.margins['bottom']


def resolve_layout(width: Optional[float], config: ChartConfig = DEFAULT_CONFIG) -> LayoutConfig:
    """宽度 <= 断点时为移动端 (4:3), 否则为桌面端 (16:9)"""
    if width is None or not math.isfinite(width) or width <= 0:
        raise RenderPreconditionError(f"容器宽度无效: {width!r}")
    if width > config.max_width:
        raise RenderPreconditionError(f"容器宽度 {width} 超过上限 {config.max_width}")

    is_mobile = width <= config.mobile_breakpoint
    aspect_width, aspect_height = config.aspect_ratio(is_mobile)
    return LayoutConfig(
        container_width=width,
        is_mobile=is_mobile,
        aspect_width=aspect_width,
        aspect_height=aspect_height,
    )


def compute_geometry(layout: LayoutConfig, config: ChartConfig = DEFAULT_CONFIG) -> ChartGeometry:
    """计算实际图表尺寸"""
    margins = config.margins
    width = layout.container_width

    chart_width = width - margins['left'] - margins['right']
    total_height = width * layout.aspect_height / layout.aspect_width
    if not math.isfinite(total_height):
        raise RenderPreconditionError(f"容器宽度 {width} 过大, 无法计算图表高度")
    chart_height = math.ceil(total_height) - margins['top'] - margins['bottom']

    if chart_width <= 0 or chart_height <= 0:
        raise RenderPreconditionError(
            f"容器宽度 {width} 不足以容纳边距 (图表尺寸 {chart_width}x{chart_height})"
        )

    return ChartGeometry(chart_width=chart_width, chart_height=chart_height, margins=margins)
