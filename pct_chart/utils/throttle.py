"""
节流器
将窗口内的多次事件合并为一次调用 (尾沿触发, 使用窗口内最后一个值)
"""

import asyncio
import inspect
import logging
from typing import Any, Awaitable, Callable, Optional, Set, Union

logger = logging.getLogger(__name__)


class Throttle:
    """
    尾沿节流

    空闲状态下收到第一个事件时开启一个窗口; 窗口内后续事件只覆盖待处理的值
    (合并, 不排队); 窗口结束时以最新值调用一次回调。
    例如 250ms 窗口下, 0/50/100/400ms 的事件只触发两次回调 (约 250ms 和 650ms)。
    """

    def __init__(self, callback: Callable[[Any], Union[None, Awaitable[None]]], interval: float = 0.25):
        self.callback = callback
        self.interval = interval
        self.call_count = 0
        self._latest: Any = None
        self._handle: Optional[asyncio.TimerHandle] = None
        self._tasks: Set[asyncio.Task] = set()

    @property
    def pending(self) -> bool:
        """是否有等待触发的窗口"""
        return self._handle is not None

    def submit(self, value: Any):
        """提交事件 (必须在事件循环内调用)"""
        self._latest = value
        if self._handle is None:
            loop = asyncio.get_running_loop()
            self._handle = loop.call_later(self.interval, self._fire)

    def _fire(self):
        self._handle = None
        value, self._latest = self._latest, None
        self.call_count += 1
        result = self.callback(value)
        if inspect.isawaitable(result):
            task = asyncio.ensure_future(result)
            self._tasks.add(task)
            task.add_done_callback(self._on_done)

    def _on_done(self, task: asyncio.Task):
        self._tasks.discard(task)
        if task.cancelled():
            return
        error = task.exception()
        if error is not None:
            logger.error(f"Throttled callback failed: {error}", exc_info=error)

    async def wait(self):
        """等待所有进行中的回调完成"""
        if self._tasks:
            await asyncio.shield(asyncio.gather(*self._tasks, return_exceptions=True))

    def cancel(self):
        """取消待触发的窗口与正在执行的回调"""
        if self._handle is not None:
            self._handle.cancel()
            self._handle = None
        for task in list(self._tasks):
            task.cancel()
        self._latest = None
