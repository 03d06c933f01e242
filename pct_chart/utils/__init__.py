"""
工具模块
"""

from .helpers import js_round, format_number
from .throttle import Throttle

__all__ = [
    'js_round',
    'format_number',
    'Throttle',
]
