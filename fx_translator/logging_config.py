# fx_translator/logging_config.py
"""
本模块负责集中配置项目的日志系统。

`console` 格式使用 Rich 把每条日志渲染为带标题的面板，便于在终端中阅读；
`json` 格式输出机器可读的单行 JSON，适合生产环境收集。
"""

import logging
from collections.abc import MutableMapping
from typing import Any, Literal

import structlog
from rich.console import Console, Group, RenderableType
from rich.panel import Panel
from rich.table import Table
from rich.text import Text
from structlog.typing import Processor

APP_LOGGER_NAME = "fx_translator"


class PanelRenderer:
    """把 structlog 事件渲染为 Rich 面板的最终处理器。"""

    _LEVEL_STYLES = {
        "debug": ("blue", "DEBUG   "),
        "info": ("green", "INFO    "),
        "warning": ("yellow", "WARNING "),
        "error": ("bold red", "ERROR   "),
        "critical": ("bold magenta", "CRITICAL"),
    }

    def __init__(
        self,
        kv_truncate_at: int = 80,
        show_timestamp: bool = True,
        show_logger_name: bool = True,
        kv_key_width: int = 15,
    ):
        self._console = Console()
        self._kv_truncate_at = kv_truncate_at
        self._show_timestamp = show_timestamp
        self._show_logger_name = show_logger_name
        self._kv_key_width = kv_key_width

    def __call__(
        self, logger: Any, name: str, event_dict: MutableMapping[str, Any]
    ) -> str:
        event = str(event_dict.pop("event", "")).strip()
        if not event:
            return ""

        timestamp = event_dict.pop("timestamp", "")
        level = event_dict.pop("level", "info").lower()
        logger_name = event_dict.pop("logger", "unknown")
        style, level_text = self._LEVEL_STYLES.get(level, ("default", level.upper()))

        title_parts = [f"[{style}]{level_text}[/]"]
        if self._show_logger_name:
            title_parts.append(f"[cyan dim]({logger_name})[/]")

        renderables: list[RenderableType] = [Text(event, justify="left")]
        if event_dict:
            renderables.append(self._render_kv(event_dict))

        subtitle = (
            Text(str(timestamp), style="dim")
            if self._show_timestamp and timestamp
            else None
        )
        with self._console.capture() as capture:
            self._console.print(
                Panel(
                    Group(*renderables),
                    title=Text.from_markup(" ".join(title_parts)),
                    title_align="left",
                    subtitle=subtitle,
                    subtitle_align="right",
                    border_style=style,
                    expand=False,
                )
            )
        return capture.get().rstrip()

    def _render_kv(self, kv: MutableMapping[str, Any]) -> Table:
        # 固定宽度的键列让多行键值对保持垂直对齐
        table = Table(show_header=False, show_edge=False, box=None, padding=(0, 1))
        table.add_column(style="dim", justify="right", width=self._kv_key_width)
        table.add_column(style="bright_white", overflow="fold")
        for key, value in sorted(kv.items()):
            value_repr = repr(value)
            if len(value_repr) > self._kv_truncate_at or "\n" in value_repr:
                if value_repr[:1] in ("'", '"') and value_repr[-1:] == value_repr[:1]:
                    value_repr = value_repr[1:-1]
            table.add_row(f"{key} :", Text(value_repr))
        return table


class _PassthroughFormatter(logging.Formatter):
    """直接输出 structlog 已经渲染好的字符串。"""

    def format(self, record: logging.LogRecord) -> str:
        return str(record.getMessage())


def setup_logging(
    log_level: str = "INFO",
    log_format: Literal["json", "console"] = "console",
    show_timestamp: bool = True,
    show_logger_name: bool = True,
) -> None:
    """
    配置全局的 structlog 日志系统。这是整个应用的日志配置入口。

    Args:
        log_level: 本项目日志记录器的最低级别 (DEBUG, INFO, WARNING, ERROR)。
        log_format: 'console' 输出 Rich 面板，'json' 输出单行 JSON。
        show_timestamp: 是否在日志中包含时间戳。
        show_logger_name: 是否显示日志记录器的名称。
    """
    processors: list[Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
    ]
    if log_format == "console":
        processors.insert(
            3, structlog.processors.TimeStamper(fmt="%Y-%m-%d %H:%M:%S", utc=False)
        )
        processors.append(
            PanelRenderer(
                show_timestamp=show_timestamp, show_logger_name=show_logger_name
            )
        )
    else:
        processors.insert(3, structlog.processors.TimeStamper(fmt="iso", utc=True))
        processors.append(structlog.processors.JSONRenderer(ensure_ascii=False))

    structlog.configure(
        processors=processors,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    handler = logging.StreamHandler()
    handler.setFormatter(_PassthroughFormatter())

    # 根记录器保持较高级别，避免第三方库（如 httpx）的噪音
    root_logger = logging.getLogger()
    root_logger.handlers.clear()
    root_logger.addHandler(handler)
    root_logger.setLevel(logging.WARNING)

    app_logger = logging.getLogger(APP_LOGGER_NAME)
    app_logger.setLevel(log_level.upper())
    app_logger.propagate = True

    structlog.get_logger("fx_translator.logging_config").debug(
        "日志系统已配置完成。", log_format=log_format, app_log_level=log_level.upper()
    )
