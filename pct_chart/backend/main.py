"""
百分比变化分布图 - FastAPI 后端
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from ..config.defaults import DEFAULT_CONFIG
from ..config.parameters import ChartConfig
from ..visualization.renderer import ChartRenderer
from .api import chart_router, page_router, websocket_router
from .core.session_manager import ChartSessionManager
from .services.chart_state import create_chart_state

# 配置日志
logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)


def create_app(config: ChartConfig = DEFAULT_CONFIG) -> FastAPI:
    """创建应用"""

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """应用生命周期管理: 启动时加载一次数据集"""
        logger.info("Starting chart backend...")

        state = await create_chart_state(config)
        app.state.chart_state = state
        app.state.renderer = ChartRenderer(config)
        app.state.session_manager = ChartSessionManager(state)

        if state.loaded:
            logger.info(f"Backend initialized with {len(state.dataset)} records")
        else:
            logger.error("Backend started without data; chart will not render")

        yield

        logger.info("Shutting down backend...")
        await app.state.session_manager.shutdown()
        logger.info("Backend shutdown complete")

    app = FastAPI(
        title="Percent Change Distribution Chart API",
        description="响应式百分比变化分布柱状图",
        version="1.0.0",
        lifespan=lifespan,
        docs_url="/api/docs",
        redoc_url="/api/redoc",
        openapi_url="/api/openapi.json"
    )
    app.state.config = config

    # 允许任意页面嵌入
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["GET"],
        allow_headers=["*"],
    )

    # 注册路由
    app.include_router(page_router, tags=["页面"])
    app.include_router(chart_router, prefix="/api/chart", tags=["图表"])
    app.include_router(websocket_router, prefix="/api/ws", tags=["WebSocket"])

    @app.get("/api")
    async def root():
        """API 根路径"""
        return {
            "name": "Percent Change Distribution Chart API",
            "version": "1.0.0",
            "docs": "/api/docs",
            "status": "running"
        }

    @app.get("/health")
    async def health_check():
        """健康检查"""
        state = getattr(app.state, "chart_state", None)
        manager = getattr(app.state, "session_manager", None)
        return {
            "status": "healthy" if state is not None and state.loaded else "degraded",
            "data_loaded": bool(state is not None and state.loaded),
            "sessions": manager.connection_count if manager else 0,
        }

    return app


app = create_app()
