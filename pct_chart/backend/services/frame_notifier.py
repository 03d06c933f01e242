"""
WebSocket 高度通知
渲染后将 HEIGHT 消息放入待发送队列, 由会话在 RENDER 之后发送
"""

from typing import List

from ...visualization.frame import FrameNotifier
from ..models.schemas import HeightPayload


class MessageFrameNotifier(FrameNotifier):
    """收集高度通知消息"""

    def __init__(self):
        self.outbox: List[dict] = []

    def resize(self, height: int):
        self.outbox.append({
            "type": "HEIGHT",
            "payload": HeightPayload(height=height).model_dump()
        })

    def drain(self) -> List[dict]:
        messages, self.outbox = self.outbox, []
        return messages
