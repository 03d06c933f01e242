"""
图表几何
将一次渲染需要绘制的全部元素计算为纯数据 (坐标轴、网格、零线、柱体)
"""

import logging
from dataclasses import dataclass
from typing import Optional, Tuple

from ..config.defaults import DEFAULT_CONFIG
from ..config.parameters import ChartConfig
from .data import Dataset
from .errors import EmptyDatasetError
from .layout import ChartGeometry, LayoutConfig, resolve_layout, compute_geometry
from .scales import Scales, build_scales, format_x_tick, format_y_tick

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Tick:
    """刻度: position 为横坐标 (横轴) 或纵坐标 (纵轴)"""
    value: str
    position: float
    label: str
    classes: Tuple[str, ...] = ('tick',)


@dataclass(frozen=True)
class Line:
    x1: float
    y1: float
    x2: float
    y2: float
    css_class: str


@dataclass(frozen=True)
class Bar:
    label: str
    value: float
    x: float
    y: float
    width: float
    height: float

    @property
    def classes(self) -> Tuple[str, ...]:
        return ('bar', f'bar-{self.label}')

    @property
    def is_negative(self) -> bool:
        return self.value < 0


@dataclass(frozen=True)
class ChartScene:
    """
    一次渲染的全部几何信息

    坐标均相对于图表区域左上角 (已扣除上、左边距)。横轴刻度位于横轴组内,
    横轴组整体平移 (x_axis_offset, chart_height)。
    """
    layout: LayoutConfig
    geometry: ChartGeometry
    scales: Scales
    x_axis_offset: float
    x_ticks: Tuple[Tick, ...]
    extra_tick: Tick
    y_ticks: Tuple[Tick, ...]
    grid_lines: Tuple[Line, ...]
    zero_marker: Optional[Line]
    bars: Tuple[Bar, ...]
    zero_line: Optional[Line]
    tick_size: int

    @property
    def domain(self) -> Tuple[float, float]:
        return self.scales.y.domain

    @property
    def width(self) -> float:
        return self.geometry.total_width

    @property
    def height(self) -> int:
        return self.geometry.total_height


def _x_ticks(scales: Scales) -> Tuple[Tick, ...]:
    x = scales.x
    ticks = []
    for i, label in enumerate(x.labels):
        classes = ('tick', 'zero') if label == '0' else ('tick',)
        ticks.append(Tick(value=label, position=x.center(label),
                          label=format_x_tick(label, i), classes=classes))
    return tuple(ticks)


def _extra_tick(scales: Scales, config: ChartConfig) -> Tick:
    """手动补充的最左侧刻度 (例如 -20%), 不属于自动刻度集合"""
    x = scales.x
    first = x.labels[0]
    position = x(first) - (x.band_width / 2) * 1.15
    return Tick(value=config.extra_tick_label, position=position,
                label=config.extra_tick_label, classes=('tick', 'extra'))


def _bar(record, scales: Scales) -> Bar:
    """柱体始终以零线为基准: 负值向下, 非负值向上"""
    x, y = scales.x, scales.y
    zero = y(0)
    value_px = y(record.count)
    if record.count < 0:
        top, height = zero, value_px - zero
    else:
        top, height = value_px, zero - value_px
    return Bar(label=record.label, value=record.count, x=x(record.label),
               y=top, width=x.band_width, height=height)


def build_scene(width: float, dataset: Dataset, config: ChartConfig = DEFAULT_CONFIG) -> ChartScene:
    """
    计算一次渲染的几何信息

    Args:
        width: 容器宽度 (px)
        dataset: 已格式化的数据集
        config: 图表配置

    Raises:
        RenderPreconditionError: 宽度无效
        EmptyDatasetError: 数据集为空
    """
    if not len(dataset):
        raise EmptyDatasetError("数据集为空, 无法渲染")

    layout = resolve_layout(width, config)
    geometry = compute_geometry(layout, config)
    scales = build_scales(geometry, dataset, config)
    x, y = scales.x, scales.y
    chart_width, chart_height = geometry.chart_width, geometry.chart_height
    tick_size = config.tick_size

    y_values = y.ticks(config.ticks_y)
    y_ticks = tuple(
        Tick(value=format_y_tick(v), position=y(v), label=format_y_tick(v))
        for v in y_values
    )
    grid_lines = tuple(
        Line(x1=0, y1=y(v), x2=chart_width, y2=y(v), css_class='grid')
        for v in y_values
    )

    zero_marker = None
    if '0' in x:
        zero_x = x('0') + x.band_width * 1.05
        zero_marker = Line(x1=zero_x, y1=-tick_size, x2=zero_x,
                           y2=chart_height + tick_size, css_class='zero')

    zero_line = None
    if y.domain[0] < 0:
        zero_line = Line(x1=0, y1=y(0), x2=chart_width, y2=y(0), css_class='zero-line')

    scene = ChartScene(
        layout=layout,
        geometry=geometry,
        scales=scales,
        x_axis_offset=(x.band_width / 2) * 1.1,
        x_ticks=_x_ticks(scales),
        extra_tick=_extra_tick(scales, config),
        y_ticks=y_ticks,
        grid_lines=grid_lines,
        zero_marker=zero_marker,
        bars=tuple(_bar(r, scales) for r in dataset),
        zero_line=zero_line,
        tick_size=tick_size,
    )
    logger.debug(f"Scene built: width={width}, mobile={layout.is_mobile}, domain={y.domain}")
    return scene
