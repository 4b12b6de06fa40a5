# fx_translator/engines/libretranslate.py
"""提供一个使用 LibreTranslate 公共实例的翻译引擎。"""

from pydantic import SecretStr

from fx_translator.engines.base import BaseEngineConfig, BaseTranslationEngine
from fx_translator.types import EngineName

LIBRETRANSLATE_ENDPOINT = "https://libretranslate.com/translate"


class LibreTranslateEngineConfig(BaseEngineConfig):
    """LibreTranslate 引擎的配置模型。"""

    api_key: SecretStr | None = None
    endpoint: str = LIBRETRANSLATE_ENDPOINT
    alternatives: int = 3


class LibreTranslateEngine(BaseTranslationEngine[LibreTranslateEngineConfig]):
    """LibreTranslate 翻译引擎，API 密钥放在请求体中。"""

    CONFIG_MODEL = LibreTranslateEngineConfig
    NAME = EngineName.LIBRETRANSLATE
    DISPLAY_NAME = "LibreTranslate"

    @classmethod
    def is_configured(cls, config: LibreTranslateEngineConfig) -> bool:
        return bool(config.api_key and config.api_key.get_secret_value().strip())

    async def _execute_translation(
        self,
        text: str,
        source_lang: str,
        target_lang: str,
        config: LibreTranslateEngineConfig,
    ) -> str:
        api_key = self._require_api_key(
            config.api_key, "FXT_LIBRETRANSLATE__API_KEY"
        )
        response = await self.client.post(
            config.endpoint,
            json={
                "q": text,
                "source": source_lang,
                "target": target_lang,
                "format": "text",
                "alternatives": config.alternatives,
                "api_key": api_key,
            },
            timeout=config.timeout,
        )
        self._ensure_ok(response)
        payload = self._parse_json(response)

        translated = (
            payload.get("translatedText") if isinstance(payload, dict) else None
        )
        if not isinstance(translated, str):
            raise self._protocol_error("返回的响应缺少 'translatedText' 字段", response)
        return translated
