"""
图表 API 路由
提供数据集、SVG 与几何信息
"""

import logging
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query, Request
from fastapi.responses import Response

from ...core.errors import ChartError
from ...core.scene import build_scene
from ...visualization.renderer import RenderRequest
from ..models.schemas import DatasetResponse, SceneResponse
from ..services.chart_state import ChartState

router = APIRouter()
logger = logging.getLogger(__name__)


def get_chart_state(request: Request) -> ChartState:
    """获取已加载的图表状态, 数据未加载时返回 503"""
    state: Optional[ChartState] = getattr(request.app.state, "chart_state", None)
    if state is None or not state.loaded:
        detail = str(state.error) if state is not None and state.error else "数据集尚未加载"
        raise HTTPException(status_code=503, detail=detail)
    return state


@router.get("/data", response_model=DatasetResponse)
async def get_data(state: ChartState = Depends(get_chart_state)):
    """获取数据集"""
    return DatasetResponse.from_dataset(state.dataset)


@router.get("/svg")
async def get_svg(
    request: Request,
    width: Optional[float] = Query(None, description="容器宽度 (px)"),
    state: ChartState = Depends(get_chart_state),
):
    """渲染图表为 SVG"""
    width = state.config.default_width if width is None else width
    renderer = request.app.state.renderer
    try:
        result = renderer.render(RenderRequest(
            container=state.config.container,
            width=width,
            dataset=state.dataset,
        ))
    except ChartError as e:
        logger.warning(f"SVG render failed: {e}")
        raise HTTPException(status_code=422, detail=str(e))

    return Response(content=result.svg, media_type="image/svg+xml")


@router.get("/scene", response_model=SceneResponse)
async def get_scene(
    width: Optional[float] = Query(None, description="容器宽度 (px)"),
    state: ChartState = Depends(get_chart_state),
):
    """获取图表几何信息"""
    width = state.config.default_width if width is None else width
    try:
        scene = build_scene(width, state.dataset, state.config)
    except ChartError as e:
        raise HTTPException(status_code=422, detail=str(e))
    return SceneResponse.from_scene(scene)
