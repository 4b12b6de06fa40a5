# fx_translator/config.py
"""
本模块定义了 FX Translator 的配置模型。

配置通过 pydantic-settings 从环境变量（前缀 `FXT_`，嵌套分隔符 `__`）
和可选的 `.env` 文件加载，例如 `FXT_TRANSLATOR_ENGINE=deepl`、
`FXT_DEEPL__API_KEY=...`。
"""

from collections.abc import Callable
from typing import Literal

from pydantic import BaseModel, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from fx_translator.cache import CacheConfig
from fx_translator.engines import (
    AzureEngineConfig,
    BaseEngineConfig,
    DeepLEngineConfig,
    GoogleEngineConfig,
    LibreTranslateEngineConfig,
)
from fx_translator.types import AUTO_DETECT, EngineName, Language
from fx_translator.utils import validate_lang_codes, validate_source_lang_code


class LoggingConfig(BaseModel):
    level: str = "INFO"
    format: Literal["json", "console"] = "console"


class DispatcherConfig(BaseModel):
    """调度器的资源配置。只在调度器构造时读取一次。"""

    max_workers: int = Field(default=3, gt=0, description="同时进行的引擎调用上限")
    shutdown_grace_period: float = Field(
        default=5.0, ge=0, description="停机时等待进行中任务的最长时间（秒）"
    )


class TranslatorConfig(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="FXT_",
        env_nested_delimiter="__",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    enabled: bool = True
    translator_engine: EngineName = EngineName.GOOGLE
    source_language: str = Language.AUTO.value
    target_language: str = Language.ENGLISH.value
    enable_cache: bool = True

    # 命令行输出选项
    show_loading_message: bool = True
    show_translated_prefix: bool = False
    preserve_message_colors: bool = True

    google: GoogleEngineConfig = Field(default_factory=GoogleEngineConfig)
    deepl: DeepLEngineConfig = Field(default_factory=DeepLEngineConfig)
    azure: AzureEngineConfig = Field(default_factory=AzureEngineConfig)
    libretranslate: LibreTranslateEngineConfig = Field(
        default_factory=LibreTranslateEngineConfig
    )

    cache: CacheConfig = Field(default_factory=CacheConfig)
    dispatcher: DispatcherConfig = Field(default_factory=DispatcherConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    @field_validator("source_language")
    @classmethod
    def validate_source_language(cls, v: str) -> str:
        validate_source_lang_code(v)
        return v

    @field_validator("target_language")
    @classmethod
    def validate_target_language(cls, v: str) -> str:
        if v == AUTO_DETECT:
            raise ValueError("目标语言不能是 'auto'")
        validate_lang_codes([v])
        return v

    def engine_config(self, engine: EngineName) -> BaseEngineConfig:
        """返回指定引擎的配置（含凭据）。"""
        config: BaseEngineConfig = getattr(self, engine.value)
        return config


ConfigProvider = Callable[[], TranslatorConfig]
"""返回当前配置的零参数可调用对象。调度器在每次请求时都会调用它。"""
