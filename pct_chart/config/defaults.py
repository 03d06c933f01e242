"""
默认配置
"""

from .parameters import ChartConfig

DEFAULT_CONFIG = ChartConfig()
