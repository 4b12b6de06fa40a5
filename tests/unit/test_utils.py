# tests/unit/test_utils.py
"""针对 `fx_translator.utils` 中工具函数的单元测试。"""

import pytest

from fx_translator.utils import (
    strip_chat_prefix,
    strip_color_codes,
    validate_lang_codes,
    validate_source_lang_code,
)


@pytest.mark.parametrize("code", ["en", "zh", "pt", "zh-CN", "en-US", "uk"])
def test_validate_lang_codes_accepts_valid_codes(code: str) -> None:
    validate_lang_codes([code])


@pytest.mark.parametrize("code", ["german", "e", "123", "a-DE"])
def test_validate_lang_codes_rejects_invalid_codes(code: str) -> None:
    with pytest.raises(ValueError, match="格式无效"):
        validate_lang_codes([code])


def test_validate_source_lang_code_allows_auto() -> None:
    validate_source_lang_code("auto")
    validate_source_lang_code("de")
    with pytest.raises(ValueError):
        validate_source_lang_code("123")


@pytest.mark.parametrize(
    ("message", "expected"),
    [
        ("<Steve> hola amigo", "hola amigo"),
        ("<Steve>hola", "hola"),
        ("hola <Steve> amigo", "hola <Steve> amigo"),
        ("no prefix", "no prefix"),
        ("", ""),
    ],
)
def test_strip_chat_prefix(message: str, expected: str) -> None:
    assert strip_chat_prefix(message) == expected


def test_strip_chat_prefix_only_removes_first_prefix() -> None:
    assert strip_chat_prefix("<A> <B> hi") == "<B> hi"


@pytest.mark.parametrize(
    ("text", "expected"),
    [
        ("§aHello §lWorld", "Hello World"),
        ("§AHello§R", "Hello"),
        ("§x§f§f§0§0§0§0Red text", "Red text"),
        ("plain", "plain"),
        ("50§ discount", "50§ discount"),
    ],
)
def test_strip_color_codes(text: str, expected: str) -> None:
    assert strip_color_codes(text) == expected
