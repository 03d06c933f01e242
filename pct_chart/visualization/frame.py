"""
父页面高度通知
每次渲染后调用一次, 让嵌入页面调整 iframe 高度
"""

import logging

logger = logging.getLogger(__name__)


class FrameNotifier:
    """高度通知接口"""

    def resize(self, height: int):
        raise NotImplementedError


class LoggingFrameNotifier(FrameNotifier):
    """仅记录日志 (命令行渲染时使用)"""

    def __init__(self):
        self.last_height = None

    def resize(self, height: int):
        self.last_height = height
        logger.info(f"Frame height: {height}px")
