# fx_translator/cli/main.py
"""FX Translator CLI 的主入口点。"""

import asyncio
from typing import Annotated

import structlog
import typer
from rich.console import Console
from rich.table import Table
from rich.text import Text

import fx_translator
from fx_translator.cli.state import OutputOptions, State
from fx_translator.config import TranslatorConfig
from fx_translator.dispatcher import TranslationDispatcher
from fx_translator.engines import ENGINE_REGISTRY
from fx_translator.exceptions import TranslatorError
from fx_translator.logging_config import setup_logging
from fx_translator.types import EngineName, Language
from fx_translator.utils import (
    strip_chat_prefix,
    strip_color_codes,
    validate_lang_codes,
    validate_source_lang_code,
)

logger = structlog.get_logger(__name__)

app = typer.Typer(
    name="fx-translator",
    help="🌐 FX Translator: 多引擎翻译调度器（Google / DeepL / Azure / LibreTranslate）。",
    add_completion=False,
    no_args_is_help=True,
)

console = Console()


def version_callback(value: bool) -> None:
    """处理 --version 选项的回调函数。"""
    if value:
        console.print(
            f"FX Translator [bold cyan]v{fx_translator.__version__}[/bold cyan]"
        )
        raise typer.Exit()


@app.callback()
def main(
    ctx: typer.Context,
    version: Annotated[
        bool | None,
        typer.Option(
            "--version",
            "-v",
            help="显示版本信息并退出。",
            callback=version_callback,
            is_eager=True,
        ),
    ] = None,
) -> None:
    """主回调函数，在任何子命令执行前加载配置并初始化日志。"""
    try:
        config = TranslatorConfig()
        setup_logging(log_level=config.logging.level, log_format=config.logging.format)
        ctx.obj = State(config=config)
    except Exception as e:
        console.print("[bold red]❌ 启动失败：无法加载配置或初始化日志。[/bold red]")
        console.print(f"[dim]{e}[/dim]")
        raise typer.Exit(code=1) from e


async def _async_translate(
    config: TranslatorConfig, text: str, source_lang: str, target_lang: str
) -> str:
    """创建一个临时调度器完成单次翻译，并在结束后关闭它。"""
    async with TranslationDispatcher(lambda: config) as dispatcher:
        return await dispatcher.translate(text, source_lang, target_lang)


def render_translation(translated: str, options: OutputOptions) -> None:
    """按照本次命令的输出选项打印译文。"""
    line = Text()
    if options.show_translated_prefix:
        line.append("已翻译: ", style="dim")
    line.append(translated, style=options.color)
    console.print(line)


@app.command("translate")
def translate(
    ctx: typer.Context,
    words: Annotated[list[str], typer.Argument(help="要翻译的消息。")],
    source: Annotated[
        str | None,
        typer.Option("--source", "-s", help="源语言代码，默认读取配置。"),
    ] = None,
    target: Annotated[
        str | None,
        typer.Option("--target", "-t", help="目标语言代码，默认读取配置。"),
    ] = None,
    engine: Annotated[
        EngineName | None,
        typer.Option("--engine", "-e", help="本次使用的翻译引擎。"),
    ] = None,
) -> None:
    """翻译一条消息并打印结果。"""
    state: State = ctx.obj
    config = state.config
    if engine is not None:
        config = config.model_copy(update={"translator_engine": engine})

    if not config.enabled:
        console.print("[bold red]❌ 翻译功能已在设置中禁用。[/bold red]")
        raise typer.Exit(code=1)

    message = strip_chat_prefix(" ".join(words))
    if not config.preserve_message_colors:
        message = strip_color_codes(message)
    if not message.strip():
        console.print("[bold red]❌ 没有可翻译的文本。[/bold red]")
        raise typer.Exit(code=1)

    source_lang = source or config.source_language
    target_lang = target or config.target_language
    try:
        validate_source_lang_code(source_lang)
        validate_lang_codes([target_lang])
    except ValueError as e:
        console.print(f"[bold red]❌ 语言代码错误: {e}[/bold red]")
        raise typer.Exit(code=1) from e

    if config.show_loading_message:
        console.print(
            f"[dim]正在使用 {config.translator_engine.value} 翻译 "
            f"({source_lang} → {target_lang})...[/dim]"
        )

    try:
        translated = asyncio.run(
            _async_translate(config, message, source_lang, target_lang)
        )
    except TranslatorError as e:
        console.print(Text(f"❌ 翻译失败: {e}", style="bold red"))
        logger.debug("翻译命令失败", exc_info=True)
        raise typer.Exit(code=1) from e

    render_translation(
        translated,
        OutputOptions(show_translated_prefix=config.show_translated_prefix),
    )


@app.command("engines")
def list_engines(ctx: typer.Context) -> None:
    """列出所有翻译引擎及其凭据状态。"""
    state: State = ctx.obj
    config = state.config

    table = Table(title="翻译引擎")
    table.add_column("名称", style="cyan")
    table.add_column("服务")
    table.add_column("当前")
    table.add_column("凭据")
    for name, engine_class in ENGINE_REGISTRY.items():
        engine_config = config.engine_config(name)
        configured = engine_class.is_configured(engine_config)
        table.add_row(
            name.value,
            engine_class.DISPLAY_NAME,
            "✅" if name is config.translator_engine else "",
            "已配置" if configured else "[yellow]缺失[/yellow]",
        )
    console.print(table)


@app.command("languages")
def list_languages() -> None:
    """列出内置的语言菜单。"""
    table = Table(title="语言")
    table.add_column("代码", style="cyan")
    table.add_column("名称")
    for language in Language:
        table.add_row(language.value, language.name.title())
    console.print(table)
