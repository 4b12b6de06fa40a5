# fx_translator/types.py
"""本模块定义了 FX Translator 的核心数据类型。"""

from __future__ import annotations

import hashlib
from enum import Enum

from pydantic import BaseModel, ConfigDict, field_validator

from fx_translator.exceptions import InputValidationError

AUTO_DETECT = "auto"
"""源语言的哨兵值，表示将语言检测交给远端 API。"""


class EngineName(str, Enum):
    """所有受支持的翻译引擎。这是一个封闭的集合。"""

    GOOGLE = "google"
    DEEPL = "deepl"
    AZURE = "azure"
    LIBRETRANSLATE = "libretranslate"


class Language(str, Enum):
    """设置界面中提供的语言菜单。"""

    AUTO = "auto"
    ENGLISH = "en"
    SPANISH = "es"
    FRENCH = "fr"
    GERMAN = "de"
    ITALIAN = "it"
    PORTUGUESE = "pt"
    RUSSIAN = "ru"
    JAPANESE = "ja"
    CHINESE = "zh"
    KOREAN = "ko"
    ARABIC = "ar"
    DUTCH = "nl"
    POLISH = "pl"
    TURKISH = "tr"
    SWEDISH = "sv"
    HINDI = "hi"
    CZECH = "cs"
    DANISH = "da"
    FINNISH = "fi"
    GREEK = "el"
    HUNGARIAN = "hu"
    INDONESIAN = "id"
    NORWEGIAN = "no"
    ROMANIAN = "ro"
    UKRAINIAN = "uk"
    VIETNAMESE = "vi"


def build_cache_key(source_lang: str, target_lang: str, text: str) -> str:
    """为一次翻译生成确定性的缓存键，原文只以哈希形式出现。"""
    text_hash = hashlib.sha256(text.encode("utf-8")).hexdigest()
    return f"{source_lang}:{target_lang}:{text_hash}"


class TranslationRequest(BaseModel):
    """表示一次翻译调用，每次调用时临时创建。"""

    model_config = ConfigDict(frozen=True)

    text: str
    source_lang: str = AUTO_DETECT
    target_lang: str

    @field_validator("text")
    @classmethod
    def _text_must_not_be_blank(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("待翻译的文本不能为空")
        return v

    @classmethod
    def create(
        cls, text: str | None, source_lang: str, target_lang: str
    ) -> TranslationRequest:
        """
        创建请求对象，并把空白文本转换为 `InputValidationError`。

        Raises:
            InputValidationError: 如果 `text` 为 None、空字符串或只包含空白。
        """
        if text is None or not text.strip():
            raise InputValidationError("待翻译的文本不能为空")
        return cls(text=text, source_lang=source_lang, target_lang=target_lang)

    @property
    def cache_key(self) -> str:
        return build_cache_key(self.source_lang, self.target_lang, self.text)


class CacheEntry(BaseModel):
    """缓存中的一条翻译记录。创建后不可变，更新时整体替换。"""

    model_config = ConfigDict(frozen=True)

    translation: str
    created_at: float
