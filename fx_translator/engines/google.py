# fx_translator/engines/google.py
"""提供一个使用 Google 翻译公开（免鉴权）接口的翻译引擎。"""

from typing import Any

from fx_translator.engines.base import BaseEngineConfig, BaseTranslationEngine
from fx_translator.types import EngineName

GOOGLE_ENDPOINT = "https://translate.googleapis.com/translate_a/single"


class GoogleEngineConfig(BaseEngineConfig):
    """Google 引擎的配置模型。该接口无需任何凭据。"""

    endpoint: str = GOOGLE_ENDPOINT
    user_agent: str = "Mozilla/5.0"


class GoogleEngine(BaseTranslationEngine[GoogleEngineConfig]):
    """通过 `translate_a/single` 端点翻译，解析其嵌套数组响应。"""

    CONFIG_MODEL = GoogleEngineConfig
    NAME = EngineName.GOOGLE
    DISPLAY_NAME = "Google Translate"

    async def _execute_translation(
        self,
        text: str,
        source_lang: str,
        target_lang: str,
        config: GoogleEngineConfig,
    ) -> str:
        """[实现] 发送 GET 请求，并拼接所有分段的译文。"""
        response = await self.client.get(
            config.endpoint,
            params={
                "client": "gtx",
                "sl": source_lang,
                "tl": target_lang,
                "dt": "t",
                "q": text,
            },
            headers={"User-Agent": config.user_agent},
            timeout=config.timeout,
        )
        self._ensure_ok(response)
        payload = self._parse_json(response)

        if not isinstance(payload, list) or not payload:
            raise self._protocol_error("返回的响应不是预期的嵌套数组", response)
        segments: Any = payload[0]
        if not isinstance(segments, list) or not segments:
            raise self._protocol_error("响应中缺少译文分段", response)

        # 长文本会被拆成多个分段，必须按顺序全部拼接
        parts: list[str] = []
        for segment in segments:
            if (
                not isinstance(segment, list)
                or not segment
                or not isinstance(segment[0], str)
            ):
                raise self._protocol_error(f"译文分段格式无效: {segment!r}", response)
            parts.append(segment[0])
        return "".join(parts)
