"""
可视化模块
"""

from .base import Visualizer
from .frame import FrameNotifier, LoggingFrameNotifier
from .renderer import ChartContainer, ChartRenderer, RenderRequest, RenderResult

__all__ = [
    'Visualizer',
    'FrameNotifier',
    'LoggingFrameNotifier',
    'ChartContainer',
    'ChartRenderer',
    'RenderRequest',
    'RenderResult',
]
