"""
比例尺与坐标轴刻度
横轴为分类比例尺 (每个标签一个带), 纵轴为线性比例尺
"""

import math
from dataclasses import dataclass
from typing import Dict, List, Sequence, Tuple

import numpy as np

from ..config.defaults import DEFAULT_CONFIG
from ..config.parameters import ChartConfig
from ..utils.helpers import js_round, format_number
from .data import Dataset
from .layout import ChartGeometry


@dataclass(frozen=True)
class CategoricalScale:
    """分类比例尺: 标签 -> 带起点 (px)"""
    bands: Dict[str, float]
    band_width: float
    step: float

    @property
    def labels(self) -> Tuple[str, ...]:
        return tuple(self.bands)

    def __call__(self, label: str) -> float:
        return self.bands[label]

    def __contains__(self, label: str) -> bool:
        return label in self.bands

    def center(self, label: str) -> float:
        return self.bands[label] + self.band_width / 2


@dataclass(frozen=True)
class LinearScale:
    """线性比例尺: domain -> range"""
    domain: Tuple[float, float]
    range: Tuple[float, float]

    def __call__(self, value: float) -> float:
        d0, d1 = self.domain
        r0, r1 = self.range
        if d1 == d0:
            return r0
        return r0 + (value - d0) / (d1 - d0) * (r1 - r0)

    def ticks(self, count: int = 10) -> List[float]:
        return linear_ticks(self.domain, count)


@dataclass(frozen=True)
class Scales:
    x: CategoricalScale
    y: LinearScale


def categorical_scale(labels: Sequence[str], extent: Tuple[float, float],
                      padding: float = 0.1) -> CategoricalScale:
    """
    分类比例尺 (整像素对齐)

    外边距与内边距相同, 所有带在范围内居中。
    """
    labels = list(dict.fromkeys(labels))
    start, stop = extent
    n = len(labels)
    if n == 0:
        return CategoricalScale(bands={}, band_width=0, step=0)

    step = math.floor((stop - start) / (n - padding + 2 * padding))
    offset = start + js_round((stop - start - (n - padding) * step) / 2)
    bands = {label: offset + step * i for i, label in enumerate(labels)}
    return CategoricalScale(bands=bands, band_width=js_round(step * (1 - padding)), step=step)


def linear_scale(domain: Tuple[float, float], extent: Tuple[float, float]) -> LinearScale:
    return LinearScale(domain=(float(domain[0]), float(domain[1])),
                       range=(float(extent[0]), float(extent[1])))


def tick_step(span: float, count: int) -> float:
    """刻度步长: {1, 2, 5} x 10^k"""
    step = 10 ** math.floor(math.log10(span / count))
    err = count / span * step
    if err <= 0.15:
        step *= 10
    elif err <= 0.35:
        step *= 5
    elif err <= 0.75:
        step *= 2
    return step


def linear_ticks(domain: Tuple[float, float], count: int = 10) -> List[float]:
    """线性刻度 (近似 count 个)"""
    lo, hi = sorted(domain)
    if hi == lo:
        return [lo]

    step = tick_step(hi - lo, count)
    start = math.ceil(lo / step) * step
    stop = math.floor(hi / step) * step + step * 0.5
    ticks = np.round(np.arange(start, stop, step), 10)
    return [float(t) + 0.0 for t in ticks]


def value_domain(values: Sequence[float], factor: int = 50) -> Tuple[float, float]:
    """
    纵轴范围

    最小值向下取整到 factor 的倍数且不大于 0, 最大值向上取整到 factor 的倍数。
    """
    values = np.asarray(values, dtype=float)
    lo = float((np.floor(values / factor) * factor).min())
    hi = float((np.ceil(values / factor) * factor).max())
    if lo > 0:
        lo = 0.0
    # 避免 -0.0
    return lo + 0.0, hi + 0.0


def format_x_tick(value: str, index: int) -> str:
    """横轴标签隔一个显示 (按序号奇偶, 不按数值)"""
    if index % 2 == 1:
        return f"{value}%"
    return ''


def format_y_tick(value: float) -> str:
    return format_number(value)


def build_scales(geometry: ChartGeometry, dataset: Dataset,
                 config: ChartConfig = DEFAULT_CONFIG) -> Scales:
    """根据图表尺寸和数据构建横纵比例尺"""
    x = categorical_scale(dataset.distinct_labels, (0, geometry.chart_width),
                          padding=config.band_padding)
    domain = value_domain(dataset.values, config.round_ticks_factor)
    y = linear_scale(domain, (geometry.chart_height, 0))
    return Scales(x=x, y=y)
