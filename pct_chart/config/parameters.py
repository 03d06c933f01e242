"""
图表参数配置
支持JSON配置文件加载和参数管理
"""

import json
import os
from dataclasses import dataclass, asdict, field
from typing import Dict, Tuple
from pathlib import Path

from .colors import COLORS

PACKAGE_DIR = Path(__file__).resolve().parents[1]
DEFAULT_DATA_PATH = str(PACKAGE_DIR / "data" / "pct_change_distribution.csv")


@dataclass
class ChartConfig:
    """图表配置参数"""

    # 数据参数
    data_path: str = DEFAULT_DATA_PATH
    label_column: str = 'pct_change'
    value_column: str = 'count'

    # 页面参数
    container: str = '#graphic'
    default_width: int = 940
    mobile_breakpoint: int = 600
    max_width: int = 100000

    # 宽高比 (宽, 高)
    mobile_aspect_width: int = 4
    mobile_aspect_height: int = 3
    desktop_aspect_width: int = 16
    desktop_aspect_height: int = 9

    # 边距 (px)
    margin_top: int = 10
    margin_right: int = 15
    margin_bottom: int = 30
    margin_left: int = 40

    # 坐标轴参数
    ticks_y: int = 4
    round_ticks_factor: int = 50
    band_padding: float = 0.1
    tick_size: int = 6
    tick_padding: int = 3
    extra_tick_label: str = '-20%'
    font_size: int = 12

    # 重绘节流 (ms)
    throttle_ms: int = 250

    colors: Dict[str, str] = field(default_factory=lambda: dict(COLORS))

    @property
    def margins(self) -> Dict[str, int]:
        """边距字典"""
        return {
            'top': self.margin_top,
            'right': self.margin_right,
            'bottom': self.margin_bottom,
            'left': self.margin_left,
        }

    @property
    def throttle_interval(self) -> float:
        """节流窗口 (秒)"""
        return self.throttle_ms / 1000.0

    def aspect_ratio(self, is_mobile: bool) -> Tuple[int, int]:
        """返回 (宽, 高) 比例"""
        if is_mobile:
            return self.mobile_aspect_width, self.mobile_aspect_height
        return self.desktop_aspect_width, self.desktop_aspect_height

    def to_dict(self) -> dict:
        """转换为字典"""
        return asdict(self)

    def to_json(self, filepath: str, indent: int = 2):
        """保存为JSON文件"""
        with open(filepath, 'w', encoding='utf-8') as f:
            json.dump(self.to_dict(), f, indent=indent, ensure_ascii=False)

    @classmethod
    def from_dict(cls, data: dict) -> 'ChartConfig':
        """从字典创建配置"""
        return cls(**data)

    @classmethod
    def from_json(cls, filepath: str) -> 'ChartConfig':
        """从JSON文件加载配置"""
        with open(filepath, 'r', encoding='utf-8') as f:
            data = json.load(f)
        return cls.from_dict(data)


def load_config(filepath: str) -> ChartConfig:
    """
    加载配置文件

    Args:
        filepath: 配置文件路径（JSON格式）

    Returns:
        ChartConfig实例
    """
    if not os.path.exists(filepath):
        raise FileNotFoundError(f"配置文件不存在: {filepath}")

    ext = Path(filepath).suffix.lower()

    if ext == '.json':
        return ChartConfig.from_json(filepath)
    else:
        raise ValueError(f"不支持的配置文件格式: {ext}")
