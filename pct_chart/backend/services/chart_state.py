"""
应用状态
启动时加载一次数据集, 之后只读
"""

import logging
from dataclasses import dataclass
from typing import Optional

from ...config.parameters import ChartConfig
from ...core.data import Dataset, load_dataset
from ...core.errors import ChartError, DataLoadError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ChartState:
    """图表状态: 配置 + 已加载的数据集 (或加载错误)"""
    config: ChartConfig
    dataset: Optional[Dataset] = None
    error: Optional[ChartError] = None

    @property
    def loaded(self) -> bool:
        return self.dataset is not None

    def require_dataset(self) -> Dataset:
        """返回数据集, 未加载时抛出加载错误"""
        if self.dataset is None:
            raise self.error or DataLoadError("数据集尚未加载")
        return self.dataset


async def create_chart_state(config: ChartConfig) -> ChartState:
    """加载数据集; 失败时保留错误, 不重试"""
    try:
        dataset = await load_dataset(config.data_path, config.label_column, config.value_column)
    except ChartError as e:
        logger.error(f"Failed to load dataset from {config.data_path}: {e}")
        return ChartState(config=config, error=e)
    return ChartState(config=config, dataset=dataset)
