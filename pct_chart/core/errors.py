"""
图表错误类型
"""


class ChartError(Exception):
    """图表错误基类"""

    kind = "chart_error"


class DataLoadError(ChartError):
    """CSV 数据读取失败 (网络/IO/解析)"""

    kind = "data_load"


class DataFormatError(ChartError):
    """数值字段无法转换"""

    kind = "data_format"


class EmptyDatasetError(DataFormatError):
    """数据集为空"""

    kind = "empty_dataset"


class RenderPreconditionError(ChartError):
    """渲染前置条件不满足 (容器宽度无效等)"""

    kind = "render_precondition"
