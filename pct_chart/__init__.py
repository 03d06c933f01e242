"""
Percent Change Distribution Chart
响应式百分比变化分布柱状图: 数据加载、布局、比例尺与 SVG 渲染
"""

from .config.parameters import ChartConfig, load_config
from .config.defaults import DEFAULT_CONFIG
from .core.data import Dataset, Record, format_data, load_dataset
from .core.scene import build_scene
from .visualization.renderer import ChartRenderer, RenderRequest

__all__ = [
    'ChartConfig',
    'load_config',
    'DEFAULT_CONFIG',
    'Dataset',
    'Record',
    'format_data',
    'load_dataset',
    'build_scene',
    'ChartRenderer',
    'RenderRequest',
]
