# fx_translator/engines/deepl.py
"""提供一个使用 DeepL 官方 API 的翻译引擎。"""

from typing import Any

from pydantic import Field, SecretStr

from fx_translator.engines.base import BaseEngineConfig, BaseTranslationEngine
from fx_translator.types import AUTO_DETECT, EngineName

DEEPL_FREE_API = "https://api-free.deepl.com/v2/translate"
DEEPL_PRO_API = "https://api.deepl.com/v2/translate"

# DeepL 对部分语言使用固定的代码
_DEEPL_LANG_OVERRIDES = {
    "en": "EN",
    "zh": "ZH",
    "pt": "PT",
}


def to_deepl_lang_code(lang_code: str) -> str:
    """把通用语言代码转换为 DeepL 使用的大写代码，'auto' 保持不变。"""
    if lang_code == AUTO_DETECT:
        return AUTO_DETECT
    return _DEEPL_LANG_OVERRIDES.get(lang_code.lower(), lang_code.upper())


class DeepLEngineConfig(BaseEngineConfig):
    """DeepL 引擎的配置模型。"""

    api_key: SecretStr | None = None
    use_free_api: bool = Field(default=True, description="使用免费版端点")

    @property
    def endpoint(self) -> str:
        return DEEPL_FREE_API if self.use_free_api else DEEPL_PRO_API


class DeepLEngine(BaseTranslationEngine[DeepLEngineConfig]):
    """DeepL 翻译引擎，使用 `DeepL-Auth-Key` 头进行鉴权。"""

    CONFIG_MODEL = DeepLEngineConfig
    NAME = EngineName.DEEPL
    DISPLAY_NAME = "DeepL"

    @classmethod
    def is_configured(cls, config: DeepLEngineConfig) -> bool:
        return bool(config.api_key and config.api_key.get_secret_value().strip())

    async def _execute_translation(
        self,
        text: str,
        source_lang: str,
        target_lang: str,
        config: DeepLEngineConfig,
    ) -> str:
        """[实现] 调用 DeepL `/v2/translate` 接口。"""
        api_key = self._require_api_key(config.api_key, "FXT_DEEPL__API_KEY")

        body: dict[str, Any] = {
            "text": [text],
            "target_lang": to_deepl_lang_code(target_lang),
        }
        deepl_source = to_deepl_lang_code(source_lang)
        if deepl_source != AUTO_DETECT:
            body["source_lang"] = deepl_source

        response = await self.client.post(
            config.endpoint,
            json=body,
            headers={"Authorization": f"DeepL-Auth-Key {api_key}"},
            timeout=config.timeout,
        )
        self._ensure_ok(response)
        payload = self._parse_json(response)

        translations = (
            payload.get("translations") if isinstance(payload, dict) else None
        )
        if not isinstance(translations, list) or not translations:
            raise self._protocol_error("返回了空的 'translations' 列表", response)
        first = translations[0]
        if not isinstance(first, dict) or not isinstance(first.get("text"), str):
            raise self._protocol_error("返回的译文缺少 'text' 字段", response)
        return first["text"]
