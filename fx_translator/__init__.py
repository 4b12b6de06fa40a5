# fx_translator/__init__.py
"""FX Translator: 一个带缓存与有界并发的多引擎翻译调度器。

该模块导出调度器、配置模型和异常类型，供聊天界面或命令行等上层组件使用。
"""

__version__ = "1.0.0"

from .cache import CacheConfig, TranslationCache
from .config import TranslatorConfig
from .dispatcher import TranslationDispatcher
from .exceptions import (
    APIError,
    ConfigurationError,
    InputValidationError,
    ProtocolError,
    TranslationDispatchError,
    TranslatorError,
)
from .types import EngineName, Language

__all__ = [
    "__version__",
    "TranslationDispatcher",
    "TranslatorConfig",
    "TranslationCache",
    "CacheConfig",
    "EngineName",
    "Language",
    "TranslatorError",
    "InputValidationError",
    "ConfigurationError",
    "APIError",
    "ProtocolError",
    "TranslationDispatchError",
]
