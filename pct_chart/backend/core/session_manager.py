"""
图表会话管理器
每个 WebSocket 连接一个会话: INIT 立即渲染, RESIZE 经节流后渲染
"""

import asyncio
import json
import logging
import uuid
from typing import Dict, Optional

from fastapi import WebSocket, WebSocketDisconnect
from pydantic import ValidationError

from ...core.errors import ChartError
from ...utils.throttle import Throttle
from ...visualization.renderer import ChartRenderer, RenderRequest
from ..models.schemas import ErrorPayload, RenderPayload, WidthPayload
from ..services.chart_state import ChartState
from ..services.frame_notifier import MessageFrameNotifier

logger = logging.getLogger(__name__)


class ChartSession:
    """图表会话"""

    def __init__(self, session_id: str, websocket: WebSocket, state: ChartState):
        self.session_id = session_id
        self.websocket = websocket
        self.notifier = MessageFrameNotifier()
        self.renderer = ChartRenderer(state.config, self.notifier)
        self.throttle: Optional[Throttle] = None
        self.lock = asyncio.Lock()
        self.width: Optional[float] = None
        self.render_count = 0


class ChartSessionManager:
    """WebSocket 图表会话管理器"""

    def __init__(self, state: ChartState):
        self.state = state
        self.sessions: Dict[str, ChartSession] = {}

    @property
    def connection_count(self) -> int:
        return len(self.sessions)

    async def handle_session(self, websocket: WebSocket, session_id: Optional[str] = None):
        """处理会话连接"""
        if session_id is not None and session_id in self.sessions:
            logger.warning(f"Session id already in use: {session_id}")
            await websocket.close(code=1008)
            return

        await websocket.accept()

        session_id = session_id or f"chart_{uuid.uuid4().hex[:8]}"
        session = ChartSession(session_id, websocket, self.state)
        session.throttle = Throttle(
            lambda width: self._render(session, width),
            interval=self.state.config.throttle_interval,
        )
        self.sessions[session_id] = session

        logger.info(f"Session connected: {session_id}, total: {self.connection_count}")

        try:
            while True:
                text = await websocket.receive_text()
                try:
                    data = json.loads(text)
                except ValueError:
                    await self._send_error(session, "invalid_message", "消息不是有效的 JSON")
                    continue
                await self._handle_message(session, data)
        except WebSocketDisconnect:
            pass
        except Exception as e:
            logger.error(f"Session {session_id} failed: {e}", exc_info=True)
            await websocket.close(code=1011)
        finally:
            await self._end_session(session)

    async def _handle_message(self, session: ChartSession, data: dict):
        """处理会话消息"""
        msg_type = data.get("type") if isinstance(data, dict) else None

        if msg_type == "INIT":
            width = await self._parse_width(session, data)
            if width is not None:
                await self._render(session, width)
        elif msg_type == "RESIZE":
            width = await self._parse_width(session, data)
            if width is not None:
                session.throttle.submit(width)
        elif msg_type == "ping":
            await self._send(session, {"type": "pong"})
        else:
            await self._send_error(session, "invalid_message", f"未知消息类型: {msg_type!r}")

    async def _parse_width(self, session: ChartSession, data: dict) -> Optional[float]:
        try:
            payload = WidthPayload.model_validate(data.get("payload") or {})
        except ValidationError as e:
            await self._send_error(session, "render_precondition", f"宽度无效: {e.errors()[0]['msg']}")
            return None
        return payload.width

    async def _render(self, session: ChartSession, width: float):
        """渲染并发送 RENDER 与 HEIGHT 消息 (同一会话串行)"""
        async with session.lock:
            session.width = width
            try:
                dataset = self.state.require_dataset()
                result = session.renderer.render(RenderRequest(
                    container=self.state.config.container,
                    width=width,
                    dataset=dataset,
                ))
            except ChartError as e:
                logger.warning(f"Render failed for session {session.session_id}: {e}")
                await self._send_error(session, e.kind, str(e))
                return

            session.render_count += 1
            await self._send(session, {
                "type": "RENDER",
                "payload": RenderPayload(
                    markup=result.markup,
                    width=result.width,
                    height=result.height,
                    is_mobile=result.is_mobile,
                ).model_dump()
            })
            for message in session.notifier.drain():
                await self._send(session, message)

    async def _send_error(self, session: ChartSession, kind: str, message: str):
        await self._send(session, {
            "type": "ERROR",
            "payload": ErrorPayload(kind=kind, message=message).model_dump()
        })

    async def _send(self, session: ChartSession, message: dict):
        """发送消息"""
        try:
            await session.websocket.send_json(message)
        except Exception as e:
            logger.error(f"Failed to send message to session {session.session_id}: {e}")

    async def _end_session(self, session: ChartSession):
        """结束会话"""
        if self.sessions.get(session.session_id) is session:
            del self.sessions[session.session_id]
        if session.throttle is not None:
            session.throttle.cancel()
        logger.info(f"Session ended: {session.session_id}")

    async def shutdown(self):
        """关闭所有会话"""
        for session in list(self.sessions.values()):
            await self._end_session(session)
        logger.info("Session manager shutdown complete")
