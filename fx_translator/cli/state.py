# fx_translator/cli/state.py
"""定义 CLI 应用的共享状态对象。"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from fx_translator.config import TranslatorConfig


class State:
    """一个简单的类，用于通过 Typer 上下文传递共享状态。"""

    def __init__(self, config: "TranslatorConfig") -> None:
        self.config = config


@dataclass(frozen=True)
class OutputOptions:
    """单次命令的输出选项，显式传给渲染函数而不是放在全局标志里。"""

    show_translated_prefix: bool = False
    color: str = "green"
