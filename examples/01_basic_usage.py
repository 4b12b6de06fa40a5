# examples/01_basic_usage.py
"""FX Translator 的基础用法演示：并发提交翻译，并观察缓存命中。"""

import sys
from pathlib import Path

PROJECT_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

import asyncio  # noqa: E402

import structlog  # noqa: E402

from fx_translator import (  # noqa: E402
    TranslationDispatcher,
    TranslationDispatchError,
    TranslatorConfig,
)
from fx_translator.logging_config import setup_logging  # noqa: E402

log = structlog.get_logger("basic_usage")


async def main() -> None:
    setup_logging(log_level="INFO", log_format="console")
    config = TranslatorConfig()

    async with TranslationDispatcher(lambda: config) as dispatcher:
        messages = [
            "Hello everyone!",
            "Does anyone want to trade?",
            "Meet me at spawn.",
        ]
        log.info("▶️ 步骤 1: 并发提交翻译任务...", count=len(messages))
        tasks = [
            dispatcher.translate(text, config.source_language, "es")
            for text in messages
        ]
        for text, outcome in zip(
            messages, await asyncio.gather(*tasks, return_exceptions=True)
        ):
            if isinstance(outcome, TranslationDispatchError):
                log.error("❌ 翻译失败", original=text, error=str(outcome))
            else:
                log.info("✅ 翻译完成", original=text, translation=outcome)

        log.info("▶️ 步骤 2: 再次翻译同一条消息，应直接命中缓存...")
        handle = dispatcher.translate(messages[0], config.source_language, "es")
        log.info(
            "缓存命中" if handle.done() else "缓存未命中",
            cache_size=dispatcher.cache.size,
        )
        try:
            log.info("✅ 翻译完成", translation=await handle)
        except TranslationDispatchError as e:
            log.error("❌ 翻译失败", error=str(e))


if __name__ == "__main__":
    asyncio.run(main())
