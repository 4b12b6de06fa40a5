# fx_translator/lifecycle.py
"""本模块提供绑定在调度器生命周期上的后台缓存清理任务。"""

import asyncio
import contextlib

import structlog

from fx_translator.cache import TranslationCache

logger = structlog.get_logger(__name__)


class CacheSweeper:
    """按固定周期调用 `TranslationCache.sweep()` 的后台任务。"""

    def __init__(
        self, cache: TranslationCache, interval: float, initial_delay: float
    ):
        if interval <= 0:
            raise ValueError("清理间隔必须为正数")
        self.cache = cache
        self.interval = interval
        self.initial_delay = initial_delay
        self._task: asyncio.Task[None] | None = None

    @property
    def running(self) -> bool:
        return self._task is not None and not self._task.done()

    def start(self) -> None:
        """在当前事件循环中启动清理任务。重复调用无副作用。"""
        if self.running:
            return
        self._task = asyncio.create_task(self._run(), name="fx-translator-cache-sweeper")
        logger.debug(
            "缓存清理任务已启动。",
            interval=self.interval,
            initial_delay=self.initial_delay,
        )

    async def stop(self) -> None:
        """取消清理任务并等待其退出。"""
        if self._task is None:
            return
        task, self._task = self._task, None
        task.cancel()
        with contextlib.suppress(asyncio.CancelledError):
            await task
        logger.debug("缓存清理任务已停止。")

    async def _run(self) -> None:
        await asyncio.sleep(self.initial_delay)
        while True:
            try:
                removed = self.cache.sweep()
                if removed:
                    logger.info("已清理过期的缓存条目。", removed=removed)
            except Exception:
                logger.error("清理缓存时发生未知错误", exc_info=True)
            await asyncio.sleep(self.interval)
