# fx_translator/dispatcher.py
"""本模块包含 FX Translator 的翻译调度器，是所有翻译请求的唯一入口。"""

import asyncio
from collections.abc import Mapping
from types import TracebackType
from typing import Any

import httpx
import structlog

from fx_translator.cache import TranslationCache
from fx_translator.config import ConfigProvider
from fx_translator.engines import BaseTranslationEngine, create_engines
from fx_translator.exceptions import (
    DispatcherNotInitializedError,
    DispatcherShutdownError,
    EngineNotFoundError,
    TranslationDispatchError,
)
from fx_translator.lifecycle import CacheSweeper
from fx_translator.types import EngineName, TranslationRequest

logger = structlog.get_logger(__name__)


class TranslationDispatcher:
    """
    异步翻译调度器。

    负责输入校验、缓存查询、选择当前配置的引擎，并在一个有上限的工作池中
    执行引擎调用。配置通过 `config_provider` 在每次请求时重新读取，因此
    引擎切换、凭据修改和缓存开关都会立即生效。
    """

    def __init__(
        self,
        config_provider: ConfigProvider,
        *,
        cache: TranslationCache | None = None,
        engines: Mapping[EngineName, BaseTranslationEngine[Any]] | None = None,
        http_client: httpx.AsyncClient | None = None,
    ):
        self._config_provider = config_provider
        config = config_provider()

        # 以下资源参数只在构造时读取一次
        self.max_workers = config.dispatcher.max_workers
        self.shutdown_grace_period = config.dispatcher.shutdown_grace_period
        self.cache = cache or TranslationCache(config.cache)
        self._sweeper = CacheSweeper(
            self.cache,
            interval=config.cache.sweep_interval,
            initial_delay=config.cache.sweep_initial_delay,
        )

        self._http_client = http_client
        self._owns_http_client = http_client is None
        self._engines: dict[EngineName, BaseTranslationEngine[Any]] | None = (
            dict(engines) if engines is not None else None
        )

        self._semaphore = asyncio.Semaphore(self.max_workers)
        self._active_tasks: set[asyncio.Task[str]] = set()
        self.initialized = False
        self._shutting_down = False

    async def initialize(self) -> None:
        """创建 HTTP 客户端与引擎实例，并启动周期性的缓存清理。"""
        if self.initialized:
            return
        if self._shutting_down:
            raise DispatcherShutdownError("调度器已关闭，无法重新初始化。")
        if self._engines is None:
            if self._http_client is None:
                self._http_client = httpx.AsyncClient()
            self._engines = create_engines(self._http_client)
        self._sweeper.start()
        self.initialized = True
        logger.info(
            "翻译调度器初始化完成。",
            max_workers=self.max_workers,
            engines=sorted(name.value for name in self._engines),
        )

    async def __aenter__(self) -> "TranslationDispatcher":
        await self.initialize()
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        await self.shutdown()

    @property
    def in_flight(self) -> int:
        """尚未完成的翻译任务数。"""
        return len(self._active_tasks)

    def translate(
        self, text: str, source_lang: str, target_lang: str
    ) -> "asyncio.Future[str]":
        """
        提交一次翻译，立即返回一个异步句柄。

        缓存命中时返回一个已完成的 Future；否则返回一个在工作池中执行的 Task。
        引擎或配置读取失败会以 `TranslationDispatchError` 的形式出现在句柄上，
        原始异常保存在其 `__cause__` 中。

        Raises:
            InputValidationError: 文本为空或只包含空白（同步抛出）。
            DispatcherShutdownError: 调度器已关闭。
            DispatcherNotInitializedError: 尚未调用 `initialize()`。
        """
        request = TranslationRequest.create(text, source_lang, target_lang)
        if self._shutting_down:
            raise DispatcherShutdownError("调度器已关闭，不再接受新的翻译任务。")
        if not self.initialized:
            raise DispatcherNotInitializedError(
                "调度器尚未初始化，请先调用 initialize()。"
            )

        loop = asyncio.get_running_loop()
        try:
            cache_enabled = self._config_provider().enable_cache
        except Exception as e:
            logger.warning("读取配置失败。", error_type=type(e).__name__, error=str(e))
            error = TranslationDispatchError(f"翻译失败: {e}")
            error.__cause__ = e
            failed: asyncio.Future[str] = loop.create_future()
            failed.set_exception(error)
            return failed

        if cache_enabled:
            entry = self.cache.get(request.cache_key)
            if entry is not None:
                logger.debug(
                    "缓存命中。",
                    source_lang=request.source_lang,
                    target_lang=request.target_lang,
                )
                future: asyncio.Future[str] = loop.create_future()
                future.set_result(entry.translation)
                return future

        task = loop.create_task(self._dispatch(request))
        self._active_tasks.add(task)
        task.add_done_callback(self._active_tasks.discard)
        return task

    async def _dispatch(self, request: TranslationRequest) -> str:
        engine_name: EngineName | None = None
        async with self._semaphore:
            try:
                config = self._config_provider()
                engine_name = config.translator_engine
                engine = self._get_engine(engine_name)
                translated = await engine.translate(
                    request.text,
                    request.source_lang,
                    request.target_lang,
                    config.engine_config(engine_name),
                )
                # 只有在缓存仍处于开启状态时才写入
                if self._config_provider().enable_cache:
                    self.cache.put(request.cache_key, translated)
                logger.debug("翻译完成。", engine=engine_name.value)
            except Exception as e:
                logger.warning(
                    "翻译失败。",
                    engine=engine_name.value if engine_name else None,
                    error_type=type(e).__name__,
                    error=str(e),
                )
                raise TranslationDispatchError(f"翻译失败: {e}") from e

        return translated

    def _get_engine(self, engine_name: EngineName) -> BaseTranslationEngine[Any]:
        if self._engines is None:
            raise DispatcherNotInitializedError(
                "调度器尚未初始化，请先调用 initialize()。"
            )
        engine = self._engines.get(engine_name)
        if engine is None:
            raise EngineNotFoundError(f"引擎 '{engine_name.value}' 没有对应的适配器。")
        return engine

    def clear_cache(self) -> None:
        """立即清空翻译缓存。"""
        self.cache.clear()
        logger.info("翻译缓存已清空。")

    def clean_expired_cache(self) -> int:
        """同步移除所有过期的缓存条目，返回移除的数量。"""
        return self.cache.sweep()

    async def shutdown(self) -> None:
        """
        优雅地关闭调度器。

        停止接受新任务与缓存清理，在宽限期内等待进行中的任务完成，
        超时后取消剩余任务，最后关闭由调度器创建的 HTTP 客户端。
        """
        if self._shutting_down:
            return
        self._shutting_down = True
        logger.info("开始关闭翻译调度器...", in_flight=len(self._active_tasks))

        await self._sweeper.stop()

        pending = set(self._active_tasks)
        if pending:
            _, still_running = await asyncio.wait(
                pending, timeout=self.shutdown_grace_period
            )
            if still_running:
                logger.warning(
                    "宽限期已过，正在取消未完成的翻译任务。",
                    cancelled=len(still_running),
                )
                for task in still_running:
                    task.cancel()
                await asyncio.gather(*still_running, return_exceptions=True)

        if self._owns_http_client and self._http_client is not None:
            await self._http_client.aclose()
        self.initialized = False
        logger.info("翻译调度器已关闭。")
