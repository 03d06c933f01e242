"""
核心模块
数据、布局、比例尺与图表几何
"""

from .errors import (
    ChartError,
    DataLoadError,
    DataFormatError,
    EmptyDatasetError,
    RenderPreconditionError,
)
from .data import Record, Dataset, format_data, load_dataset
from .layout import LayoutConfig, ChartGeometry, resolve_layout, compute_geometry
from .scales import CategoricalScale, LinearScale, Scales, build_scales
from .scene import ChartScene, build_scene

__all__ = [
    'ChartError',
    'DataLoadError',
    'DataFormatError',
    'EmptyDatasetError',
    'RenderPreconditionError',
    'Record',
    'Dataset',
    'format_data',
    'load_dataset',
    'LayoutConfig',
    'ChartGeometry',
    'resolve_layout',
    'compute_geometry',
    'CategoricalScale',
    'LinearScale',
    'Scales',
    'build_scales',
    'ChartScene',
    'build_scene',
]
