"""
颜色定义
"""

# 柱体颜色
COLOR_BAR = '#17807e'
COLOR_BAR_NEGATIVE = '#c4524b'

# 坐标轴与网格
COLOR_AXIS = '#666666'
COLOR_TEXT = '#454545'
COLOR_GRID = '#e3e3e3'

# 零值强调线
COLOR_ZERO = '#222222'

COLORS = {
    'bar': COLOR_BAR,
    'bar_negative': COLOR_BAR_NEGATIVE,
    'axis': COLOR_AXIS,
    'text': COLOR_TEXT,
    'grid': COLOR_GRID,
    'zero': COLOR_ZERO,
}
