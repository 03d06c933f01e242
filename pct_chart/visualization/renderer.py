"""
图表渲染
清空容器后重新绘制坐标轴、网格、零线与柱体, 并通知父页面新高度
"""

import logging
from dataclasses import dataclass, field
from typing import Dict, Optional

import matplotlib.patches as mpatches

from ..config.defaults import DEFAULT_CONFIG
from ..config.parameters import ChartConfig
from ..core.data import Dataset
from ..core.scene import ChartScene, build_scene
from .base import Visualizer
from .frame import FrameNotifier, LoggingFrameNotifier

logger = logging.getLogger(__name__)


@dataclass
class ChartContainer:
    """页面容器: 保存当前图表标记, 每次渲染整体替换"""
    selector: str
    markup: str = ''
    render_count: int = 0

    def clear(self):
        self.markup = ''

    def replace(self, markup: str):
        self.clear()
        self.markup = markup
        self.render_count += 1


@dataclass(frozen=True)
class RenderRequest:
    container: str
    width: float
    dataset: Dataset


@dataclass(frozen=True)
class RenderResult:
    scene: ChartScene
    svg: str
    markup: str

    @property
    def width(self) -> float:
        return self.scene.width

    @property
    def height(self) -> int:
        return self.scene.height

    @property
    def is_mobile(self) -> bool:
        return self.scene.layout.is_mobile


class ChartRenderer(Visualizer):
    """百分比变化分布柱状图"""

    def __init__(self, config: ChartConfig = DEFAULT_CONFIG,
                 notifier: Optional[FrameNotifier] = None):
        super().__init__(font_size=config.font_size)
        self.config = config
        self.colors = config.colors
        self.notifier = notifier or LoggingFrameNotifier()
        self.containers: Dict[str, ChartContainer] = {}

    def container(self, selector: str) -> ChartContainer:
        if selector not in self.containers:
            self.containers[selector] = ChartContainer(selector)
        return self.containers[selector]

    def render(self, request: RenderRequest) -> RenderResult:
        """
        渲染图表

        Raises:
            RenderPreconditionError: 容器宽度无效
            EmptyDatasetError: 数据集为空
        """
        scene = build_scene(request.width, request.dataset, self.config)
        svg = self.save(self.generate(scene))
        markup = f'<div class="graphic-wrapper">{svg[svg.index("<svg"):]}</div>'

        self.container(request.container).replace(markup)
        logger.debug(f"Rendered {request.container} at width {request.width}")

        # 通知父页面新高度
        self.notifier.resize(scene.height)

        return RenderResult(scene=scene, svg=svg, markup=markup)

    def generate(self, scene: ChartScene):
        """按几何信息绘制, 返回 matplotlib Figure"""
        geometry = scene.geometry
        margins = geometry.margins

        fig, ax = self.new_figure(geometry.total_width, geometry.total_height)
        # 坐标与 SVG 一致: 原点为图表区域左上角, y 向下
        ax.set_xlim(-margins['left'], geometry.chart_width + margins['right'])
        ax.set_ylim(geometry.chart_height + margins['bottom'], -margins['top'])

        self._draw_x_axis(ax, scene)
        self._draw_y_axis(ax, scene)
        self._draw_grid(ax, scene)
        self._draw_bars(ax, scene)

        if scene.zero_line is not None:
            line = scene.zero_line
            ax.plot([line.x1, line.x2], [line.y1, line.y2], color=self.colors['zero'],
                     linewidth=1, gid='zero-line')

        return fig

    def _draw_tick(self, ax, x: float, label: str, top: float, gid: Optional[str] = None):
        size = self.config.tick_size
        ax.plot([x, x], [top, top + size], color=self.colors['axis'], linewidth=1, gid=gid)
        if label:
            ax.text(x, top + size + self.config.tick_padding, label,
                    ha='center', va='top', color=self.colors['text'])

    def _draw_x_axis(self, ax, scene: ChartScene):
        top = scene.geometry.chart_height
        offset = scene.x_axis_offset

        for tick in scene.x_ticks:
            gid = 'tick-zero' if 'zero' in tick.classes else None
            self._draw_tick(ax, offset + tick.position, tick.label, top, gid=gid)

        # 手动补充的刻度
        extra = scene.extra_tick
        self._draw_tick(ax, offset + extra.position, extra.label, top, gid='tick-extra')

    def _draw_y_axis(self, ax, scene: ChartScene):
        size = scene.tick_size
        for tick in scene.y_ticks:
            ax.plot([-size, 0], [tick.position, tick.position],
                    color=self.colors['axis'], linewidth=1)
            ax.text(-(size + self.config.tick_padding), tick.position, tick.label,
                    ha='right', va='center', color=self.colors['text'])

    def _draw_grid(self, ax, scene: ChartScene):
        for line in scene.grid_lines:
            ax.plot([line.x1, line.x2], [line.y1, line.y2],
                    color=self.colors['grid'], linewidth=1, zorder=0)

        if scene.zero_marker is not None:
            line = scene.zero_marker
            ax.plot([line.x1, line.x2], [line.y1, line.y2],
                    color=self.colors['zero'], linewidth=2, zorder=1, gid='zero')

    def _draw_bars(self, ax, scene: ChartScene):
        for bar in scene.bars:
            color = self.colors['bar_negative'] if bar.is_negative else self.colors['bar']
            rect = mpatches.Rectangle((bar.x, bar.y), bar.width, bar.height,
                                      facecolor=color, edgecolor='none', zorder=2)
            rect.set_gid(f'bar-{bar.label}')
            ax.add_patch(rect)
