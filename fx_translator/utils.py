# fx_translator/utils.py
"""
本模块包含项目范围内的通用工具函数。
语言代码校验基于 langcodes 库，聊天文本清理用于命令行入口。
"""

import re

from langcodes import Language
from langcodes.tag_parser import LanguageTagError

from fx_translator.types import AUTO_DETECT

# 语言子标签应该由 2-3 个字母组成 (BCP 47)
LANGUAGE_SUBTAG_PATTERN = re.compile(r"^[a-zA-Z]{2,3}$")

# 形如 "<PlayerName> " 的聊天前缀
CHAT_PREFIX_PATTERN = re.compile(r"^<[^>]+>\s*")

# 十六进制颜色 (§x§r§r§g§g§b§b) 必须先于单个格式代码处理
_HEX_COLOR_PATTERN = re.compile(r"§x(§[0-9a-f]){6}", re.IGNORECASE)
_FORMAT_CODE_PATTERN = re.compile(r"§[0-9a-fk-or]", re.IGNORECASE)


def validate_lang_codes(lang_codes: list[str]) -> None:
    """使用 `langcodes` 库校验语言代码列表中的每个代码是否符合 BCP 47 规范。"""
    for code in lang_codes:
        try:
            lang = Language.get(code)
            if not lang.language or not LANGUAGE_SUBTAG_PATTERN.match(lang.language):
                raise LanguageTagError(
                    f"Tag '{code}' lacks a valid 2-3 letter language subtag."
                )
        except LanguageTagError as e:
            raise ValueError(f"提供的语言代码 '{code}' 格式无效。原因: {e}") from e


def validate_source_lang_code(code: str) -> None:
    """校验源语言代码；与目标语言不同，源语言允许使用 'auto'。"""
    if code == AUTO_DETECT:
        return
    validate_lang_codes([code])


def strip_chat_prefix(message: str) -> str:
    """移除消息开头的 "<PlayerName> " 聊天前缀。"""
    if not message:
        return message
    return CHAT_PREFIX_PATTERN.sub("", message, count=1)


def strip_color_codes(text: str) -> str:
    """移除文本中的 '§' 颜色与格式代码。"""
    text = _HEX_COLOR_PATTERN.sub("", text)
    return _FORMAT_CODE_PATTERN.sub("", text)
