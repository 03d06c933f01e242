"""
Pydantic 数据模型定义
"""

from dataclasses import asdict
from typing import Dict, List, Optional, Union

from pydantic import BaseModel, Field

from ...core.data import Dataset
from ...core.scene import ChartScene


# ==================== WebSocket 消息 ====================

class WidthPayload(BaseModel):
    """INIT / RESIZE 消息"""
    width: float = Field(..., gt=0, description="容器宽度 (px)")


class RenderPayload(BaseModel):
    """RENDER 消息: 替换容器内容的标记"""
    markup: str
    width: float
    height: int
    is_mobile: bool


class HeightPayload(BaseModel):
    """HEIGHT 消息: 父页面高度通知"""
    height: int


class ErrorPayload(BaseModel):
    """ERROR 消息"""
    kind: str
    message: str


# ==================== 数据模型 ====================

class RecordModel(BaseModel):
    label: str
    count: Union[int, float]


class DatasetResponse(BaseModel):
    """数据集"""
    count: int
    records: List[RecordModel]

    @classmethod
    def from_dataset(cls, dataset: Dataset) -> "DatasetResponse":
        return cls(
            count=len(dataset),
            records=[RecordModel(label=r.label, count=r.count) for r in dataset],
        )


# ==================== 图表几何 ====================

class TickModel(BaseModel):
    value: str
    position: float
    label: str
    classes: List[str]


class LineModel(BaseModel):
    x1: float
    y1: float
    x2: float
    y2: float
    css_class: str


class BarModel(BaseModel):
    label: str
    value: float
    x: float
    y: float
    width: float
    height: float
    classes: List[str]


class LayoutModel(BaseModel):
    container_width: float
    is_mobile: bool
    aspect_width: int
    aspect_height: int


class GeometryModel(BaseModel):
    chart_width: float
    chart_height: int
    margins: Dict[str, int]
    total_width: float
    total_height: int


class SceneResponse(BaseModel):
    """一次渲染的几何信息"""
    layout: LayoutModel
    geometry: GeometryModel
    domain: List[float]
    band_width: float
    x_axis_offset: float
    x_ticks: List[TickModel]
    extra_tick: TickModel
    y_ticks: List[TickModel]
    grid_lines: List[LineModel]
    zero_marker: Optional[LineModel] = None
    bars: List[BarModel]
    zero_line: Optional[LineModel] = None

    @classmethod
    def from_scene(cls, scene: ChartScene) -> "SceneResponse":
        geometry = scene.geometry

        def line(value):
            return LineModel(**asdict(value)) if value is not None else None

        return cls(
            layout=LayoutModel(**asdict(scene.layout)),
            geometry=GeometryModel(
                chart_width=geometry.chart_width,
                chart_height=geometry.chart_height,
                margins=geometry.margins,
                total_width=geometry.total_width,
                total_height=geometry.total_height,
            ),
            domain=list(scene.domain),
            band_width=scene.scales.x.band_width,
            x_axis_offset=scene.x_axis_offset,
            x_ticks=[TickModel(**asdict(t)) for t in scene.x_ticks],
            extra_tick=TickModel(**asdict(scene.extra_tick)),
            y_ticks=[TickModel(**asdict(t)) for t in scene.y_ticks],
            grid_lines=[line(g) for g in scene.grid_lines],
            zero_marker=line(scene.zero_marker),
            bars=[BarModel(**asdict(b), classes=list(b.classes)) for b in scene.bars],
            zero_line=line(scene.zero_line),
        )
