# fx_translator/engines/base.py
"""
本模块定义了所有翻译引擎适配器必须继承的抽象基类（ABC）。

引擎只负责各自服务商的协议细节：请求构造、鉴权与响应解析。
并发控制、缓存与错误汇总由调度器负责。
"""

from abc import ABC, abstractmethod
from typing import Any, ClassVar, Generic, TypeVar

import httpx
import structlog
from pydantic import BaseModel, Field, SecretStr

from fx_translator.exceptions import APIError, ConfigurationError, ProtocolError
from fx_translator.types import EngineName

logger = structlog.get_logger(__name__)

_ConfigType = TypeVar("_ConfigType", bound="BaseEngineConfig")


class BaseEngineConfig(BaseModel):
    """所有引擎配置模型的基类，提供每次调用独立的连接与读取超时。"""

    timeout_connect: float = Field(default=5.0, gt=0, description="连接超时（秒）")
    timeout_read: float = Field(default=10.0, gt=0, description="读取超时（秒）")

    @property
    def timeout(self) -> httpx.Timeout:
        return httpx.Timeout(self.timeout_read, connect=self.timeout_connect)


class BaseTranslationEngine(ABC, Generic[_ConfigType]):
    """翻译引擎的纯异步抽象基类。"""

    CONFIG_MODEL: ClassVar[type[BaseEngineConfig]]
    NAME: ClassVar[EngineName]
    DISPLAY_NAME: ClassVar[str]

    def __init__(self, client: httpx.AsyncClient):
        self.client = client

    @property
    def name(self) -> str:
        return self.NAME.value

    @classmethod
    def is_configured(cls, config: _ConfigType) -> bool:
        """当前配置是否足以发起调用。无需凭据的引擎总是返回 True。"""
        return True

    async def translate(
        self, text: str, source_lang: str, target_lang: str, config: _ConfigType
    ) -> str:
        """
        [模板方法] 执行一次翻译，并把底层传输异常包装为 `APIError`。

        Args:
            text: 待翻译文本。
            source_lang: 源语言代码，或 "auto"。
            target_lang: 目标语言代码。
            config: 本次调用时读取到的引擎配置（含凭据）。

        Returns:
            翻译后的文本。

        Raises:
            ConfigurationError: 缺少必要的凭据。
            APIError: 网络失败、超时或非 200 状态码。
            ProtocolError: 响应结构与预期不符。
        """
        logger.debug(
            "正在调用翻译引擎...",
            engine=self.name,
            source_lang=source_lang,
            target_lang=target_lang,
            text_length=len(text),
        )
        try:
            return await self._execute_translation(
                text, source_lang, target_lang, config
            )
        except httpx.TimeoutException as e:
            raise APIError(
                f"{self.DISPLAY_NAME} 请求超时: {e!r}", engine=self.name
            ) from e
        except httpx.HTTPError as e:
            raise APIError(
                f"{self.DISPLAY_NAME} 网络请求失败: {e}", engine=self.name
            ) from e

    @abstractmethod
    async def _execute_translation(
        self, text: str, source_lang: str, target_lang: str, config: _ConfigType
    ) -> str:
        """[子类实现] 真正执行单次翻译的逻辑。"""
        ...

    def _require_api_key(self, api_key: SecretStr | None, env_var: str) -> str:
        """在发起任何网络请求之前确认 API 密钥已配置。"""
        value = api_key.get_secret_value().strip() if api_key is not None else ""
        if not value:
            raise ConfigurationError(
                f"{self.DISPLAY_NAME} API 密钥未配置 ({env_var})，请在设置中填写。"
            )
        return value

    def _ensure_ok(self, response: httpx.Response) -> None:
        if response.status_code != 200:
            body = response.text
            raise APIError(
                f"{self.DISPLAY_NAME} API 错误 (HTTP {response.status_code}): {body}",
                engine=self.name,
                status_code=response.status_code,
                body=body,
            )

    def _parse_json(self, response: httpx.Response) -> Any:
        try:
            return response.json()
        except ValueError as e:
            raise ProtocolError(
                f"{self.DISPLAY_NAME} 返回的响应不是合法的 JSON",
                engine=self.name,
                status_code=response.status_code,
                body=response.text,
            ) from e

    def _protocol_error(self, message: str, response: httpx.Response) -> ProtocolError:
        return ProtocolError(
            f"{self.DISPLAY_NAME} {message}",
            engine=self.name,
            status_code=response.status_code,
            body=response.text,
        )
