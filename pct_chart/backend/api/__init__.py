# API 路由包
from .chart import router as chart_router
from .page import router as page_router
from .websocket import router as websocket_router

__all__ = [
    "chart_router",
    "page_router",
    "websocket_router",
]
