"""
WebSocket 路由
"""

import logging
from typing import Optional

from fastapi import APIRouter, WebSocket

router = APIRouter()
logger = logging.getLogger(__name__)


async def _handle(websocket: WebSocket, session_id: Optional[str] = None):
    manager = getattr(websocket.app.state, "session_manager", None)

    if manager is None:
        logger.error("Session manager not initialized")
        await websocket.close(code=1011)
        return

    await manager.handle_session(websocket, session_id)


@router.websocket("/chart")
async def chart_endpoint(websocket: WebSocket):
    """图表 WebSocket 端点"""
    await _handle(websocket)


@router.websocket("/chart/{session_id}")
async def chart_session_endpoint(websocket: WebSocket, session_id: str):
    """带会话 ID 的 WebSocket 端点"""
    await _handle(websocket, session_id)
