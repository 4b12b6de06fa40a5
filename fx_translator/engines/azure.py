# fx_translator/engines/azure.py
"""提供一个使用 Azure AI Translator (v3.0) 的翻译引擎。"""

import uuid

from pydantic import SecretStr, field_validator

from fx_translator.engines.base import BaseEngineConfig, BaseTranslationEngine
from fx_translator.types import AUTO_DETECT, EngineName

AZURE_GLOBAL_ENDPOINT = "https://api.cognitive.microsofttranslator.com"
AZURE_API_VERSION = "3.0"


class AzureEngineConfig(BaseEngineConfig):
    """Azure 引擎的配置模型。"""

    api_key: SecretStr | None = None
    region: str = "eastus"
    endpoint: str = AZURE_GLOBAL_ENDPOINT

    @field_validator("endpoint", mode="before")
    @classmethod
    def _normalize_endpoint(cls, v: object) -> object:
        # 空字符串回退到全局端点，并去掉结尾的斜杠
        if isinstance(v, str):
            v = v.strip().rstrip("/")
            return v or AZURE_GLOBAL_ENDPOINT
        return v


class AzureEngine(BaseTranslationEngine[AzureEngineConfig]):
    """Azure 翻译引擎，使用订阅密钥与区域头进行鉴权。"""

    CONFIG_MODEL = AzureEngineConfig
    NAME = EngineName.AZURE
    DISPLAY_NAME = "Azure Translator"

    @classmethod
    def is_configured(cls, config: AzureEngineConfig) -> bool:
        return bool(config.api_key and config.api_key.get_secret_value().strip())

    async def _execute_translation(
        self,
        text: str,
        source_lang: str,
        target_lang: str,
        config: AzureEngineConfig,
    ) -> str:
        """[实现] 调用 Azure `/translate` 接口。"""
        api_key = self._require_api_key(config.api_key, "FXT_AZURE__API_KEY")

        params = {"api-version": AZURE_API_VERSION, "to": target_lang}
        if source_lang != AUTO_DETECT:
            params["from"] = source_lang

        headers = {
            "Ocp-Apim-Subscription-Key": api_key,
            "X-ClientTraceId": str(uuid.uuid4()),
        }
        if config.region.strip():
            headers["Ocp-Apim-Subscription-Region"] = config.region.strip()

        response = await self.client.post(
            f"{config.endpoint}/translate",
            params=params,
            json=[{"Text": text}],
            headers=headers,
            timeout=config.timeout,
        )
        self._ensure_ok(response)
        payload = self._parse_json(response)

        if not isinstance(payload, list) or not payload:
            raise self._protocol_error("返回了空的结果列表", response)
        first = payload[0]
        translations = first.get("translations") if isinstance(first, dict) else None
        if not isinstance(translations, list) or not translations:
            raise self._protocol_error("返回了空的 'translations' 列表", response)
        item = translations[0]
        if not isinstance(item, dict) or not isinstance(item.get("text"), str):
            raise self._protocol_error("返回的译文缺少 'text' 字段", response)
        return item["text"]
