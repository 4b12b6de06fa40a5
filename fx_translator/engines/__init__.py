# fx_translator/engines/__init__.py
"""
翻译引擎适配器。

引擎集合是固定的，每个 `EngineName` 在 `ENGINE_REGISTRY` 中恰好对应一个适配器类。
"""

from typing import Any

import httpx

from fx_translator.engines.azure import AzureEngine, AzureEngineConfig
from fx_translator.engines.base import BaseEngineConfig, BaseTranslationEngine
from fx_translator.engines.deepl import DeepLEngine, DeepLEngineConfig
from fx_translator.engines.google import GoogleEngine, GoogleEngineConfig
from fx_translator.engines.libretranslate import (
    LibreTranslateEngine,
    LibreTranslateEngineConfig,
)
from fx_translator.types import EngineName

ENGINE_REGISTRY: dict[EngineName, type[BaseTranslationEngine[Any]]] = {
    EngineName.GOOGLE: GoogleEngine,
    EngineName.DEEPL: DeepLEngine,
    EngineName.AZURE: AzureEngine,
    EngineName.LIBRETRANSLATE: LibreTranslateEngine,
}


def create_engines(
    client: httpx.AsyncClient,
) -> dict[EngineName, BaseTranslationEngine[Any]]:
    """为每个已注册的引擎创建一个共享同一 HTTP 客户端的实例。"""
    return {name: engine_class(client) for name, engine_class in ENGINE_REGISTRY.items()}


__all__ = [
    "ENGINE_REGISTRY",
    "AzureEngine",
    "AzureEngineConfig",
    "BaseEngineConfig",
    "BaseTranslationEngine",
    "DeepLEngine",
    "DeepLEngineConfig",
    "GoogleEngine",
    "GoogleEngineConfig",
    "LibreTranslateEngine",
    "LibreTranslateEngineConfig",
    "create_engines",
]
