# tests/unit/engines/test_deepl.py
"""针对 `DeepLEngine` 的单元测试。"""

import json

import pytest

from fx_translator.engines.deepl import (
    DEEPL_FREE_API,
    DEEPL_PRO_API,
    DeepLEngine,
    DeepLEngineConfig,
    to_deepl_lang_code,
)
from fx_translator.exceptions import APIError, ConfigurationError, ProtocolError
from tests.helpers.fakes import engine_with_transport, json_responder, text_responder


@pytest.fixture
def config() -> DeepLEngineConfig:
    return DeepLEngineConfig(api_key="deepl-key")


@pytest.mark.asyncio
async def test_translate_success(config: DeepLEngineConfig) -> None:
    responder = json_responder({"translations": [{"text": "Hallo"}]})
    async with engine_with_transport(DeepLEngine, responder) as (engine, transport):
        result = await engine.translate("Hello", "en", "de", config)

    assert result == "Hallo"
    request = transport.requests[0]
    assert request.method == "POST"
    assert str(request.url) == DEEPL_FREE_API
    assert request.headers["Authorization"] == "DeepL-Auth-Key deepl-key"
    assert json.loads(request.content) == {
        "text": ["Hello"],
        "target_lang": "DE",
        "source_lang": "EN",
    }


@pytest.mark.asyncio
async def test_auto_source_is_omitted(config: DeepLEngineConfig) -> None:
    responder = json_responder({"translations": [{"text": "你好"}]})
    async with engine_with_transport(DeepLEngine, responder) as (engine, transport):
        await engine.translate("Hello", "auto", "zh", config)

    body = json.loads(transport.requests[0].content)
    assert "source_lang" not in body
    assert body["target_lang"] == "ZH"


@pytest.mark.asyncio
async def test_pro_endpoint() -> None:
    config = DeepLEngineConfig(api_key="deepl-key", use_free_api=False)
    responder = json_responder({"translations": [{"text": "Hallo"}]})
    async with engine_with_transport(DeepLEngine, responder) as (engine, transport):
        await engine.translate("Hello", "auto", "de", config)

    assert str(transport.requests[0].url) == DEEPL_PRO_API


@pytest.mark.parametrize("api_key", [None, "", "   "])
@pytest.mark.asyncio
async def test_missing_api_key_makes_no_request(api_key: str | None) -> None:
    """未配置密钥时在发送任何请求之前失败。"""
    config = DeepLEngineConfig(api_key=api_key)
    responder = json_responder({"translations": [{"text": "Hallo"}]})
    async with engine_with_transport(DeepLEngine, responder) as (engine, transport):
        with pytest.raises(ConfigurationError, match="API 密钥未配置"):
            await engine.translate("Hello", "auto", "de", config)

    assert transport.requests == []
    assert DeepLEngine.is_configured(config) is False


@pytest.mark.asyncio
async def test_non_200_raises_api_error(config: DeepLEngineConfig) -> None:
    responder = text_responder('{"message":"Quota exceeded"}', status_code=456)
    async with engine_with_transport(DeepLEngine, responder) as (engine, _):
        with pytest.raises(APIError) as excinfo:
            await engine.translate("Hello", "auto", "de", config)

    assert excinfo.value.status_code == 456
    assert "HTTP 456" in str(excinfo.value)
    assert "Quota exceeded" in str(excinfo.value)
    assert excinfo.value.engine == "deepl"


@pytest.mark.parametrize(
    ("payload", "message"),
    [
        ({"translations": []}, "空的 'translations' 列表"),
        ({}, "空的 'translations' 列表"),
        ([], "空的 'translations' 列表"),
        ({"translations": [{"detected_source_language": "EN"}]}, "缺少 'text' 字段"),
    ],
)
@pytest.mark.asyncio
async def test_malformed_payload_raises_protocol_error(
    config: DeepLEngineConfig, payload: object, message: str
) -> None:
    async with engine_with_transport(DeepLEngine, json_responder(payload)) as (
        engine,
        _,
    ):
        with pytest.raises(ProtocolError, match=message):
            await engine.translate("Hello", "auto", "de", config)


@pytest.mark.parametrize(
    ("code", "expected"),
    [("en", "EN"), ("zh", "ZH"), ("pt", "PT"), ("de", "DE"), ("auto", "auto")],
)
def test_to_deepl_lang_code(code: str, expected: str) -> None:
    assert to_deepl_lang_code(code) == expected
