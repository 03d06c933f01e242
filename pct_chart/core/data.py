"""
数据加载与格式化
读取 CSV 并将数值列转换为数字
"""

import asyncio
import logging
from dataclasses import dataclass
from typing import Any, Iterable, Mapping, Tuple, Union

import numpy as np
import pandas as pd

from .errors import DataLoadError, DataFormatError, EmptyDatasetError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Record:
    """单行数据: 百分比区间标签 + 数量"""
    label: str
    count: Union[int, float]


@dataclass(frozen=True)
class Dataset:
    """有序、只读的数据集"""
    records: Tuple[Record, ...]

    def __len__(self) -> int:
        return len(self.records)

    def __iter__(self):
        return iter(self.records)

    @property
    def labels(self) -> Tuple[str, ...]:
        return tuple(r.label for r in self.records)

    @property
    def distinct_labels(self) -> Tuple[str, ...]:
        """去重后的标签 (保持首次出现顺序)"""
        return tuple(dict.fromkeys(self.labels))

    @property
    def values(self) -> np.ndarray:
        return np.array([r.count for r in self.records], dtype=float)


def _to_number(value: float) -> Union[int, float]:
    """整数值保持为 int"""
    value = float(value)
    if value.is_integer():
        return int(value)
    return value


def format_data(rows: Union[pd.DataFrame, Iterable[Mapping[str, Any]]],
                label_column: str = 'pct_change',
                value_column: str = 'count') -> Dataset:
    """
    将数值列转换为数字

    Args:
        rows: 原始记录 (DataFrame 或字典序列), 数值列为文本
        label_column: 标签列名
        value_column: 数值列名

    Returns:
        Dataset实例

    Raises:
        DataFormatError: 缺少列或数值无法转换
        EmptyDatasetError: 没有任何记录
    """
    if isinstance(rows, pd.DataFrame):
        frame = rows.copy()
    else:
        frame = pd.DataFrame(list(rows))

    if frame.empty:
        raise EmptyDatasetError("数据集为空")

    for column in (label_column, value_column):
        if column not in frame.columns:
            raise DataFormatError(f"缺少列: {column}")

    raw = frame[value_column]
    if not pd.api.types.is_numeric_dtype(raw):
        raw = raw.astype(str).str.strip()

    counts = pd.to_numeric(raw, errors='coerce')
    values = counts.to_numpy(dtype=float, na_value=np.nan)
    bad = ~np.isfinite(values)
    if bad.any():
        row = int(np.flatnonzero(bad)[0])
        raise DataFormatError(
            f"第 {row + 1} 行 {value_column} 不是有效数字: {frame[value_column].iloc[row]!r}"
        )

    labels = frame[label_column].astype(str)
    records = tuple(
        Record(label=label, count=_to_number(count))
        for label, count in zip(labels, values)
    )
    return Dataset(records=records)


def read_csv(source: str) -> pd.DataFrame:
    """读取 CSV (本地路径或 URL), 所有列保持为文本"""
    try:
        return pd.read_csv(source, dtype=str, keep_default_na=False)
    except pd.errors.EmptyDataError:
        raise EmptyDatasetError(f"CSV 为空: {source}")
    except (OSError, ValueError) as e:
        # ParserError 是 ValueError 的子类; URL 错误为 OSError
        raise DataLoadError(f"无法读取 CSV {source}: {e}") from e


async def load_dataset(source: str,
                       label_column: str = 'pct_change',
                       value_column: str = 'count') -> Dataset:
    """异步加载并格式化数据集 (在线程中读取, 不阻塞事件循环)"""
    frame = await asyncio.to_thread(read_csv, source)
    dataset = format_data(frame, label_column, value_column)
    logger.info(f"Loaded {len(dataset)} records from {source}")
    return dataset
