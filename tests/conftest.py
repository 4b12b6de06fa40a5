# tests/conftest.py
"""项目全局共享的测试 Fixtures。"""

import logging
import os
from collections.abc import Generator
from typing import Any

import pytest
import structlog
from pytest_mock import MockerFixture
from rich.console import Console

from fx_translator.logging_config import APP_LOGGER_NAME


@pytest.fixture(scope="session", autouse=True)
def disable_rich_colors_for_tests(
    session_mocker: MockerFixture,
) -> Generator[None, None, None]:
    """全局禁用 rich 库的颜色输出，以确保测试结果的确定性。"""
    original_init = Console.__init__

    def new_init(self: Console, *args: Any, **kwargs: Any) -> None:
        kwargs["force_terminal"] = False
        kwargs["color_system"] = None
        kwargs.setdefault("width", 200)
        original_init(self, *args, **kwargs)

    session_mocker.patch("rich.console.Console.__init__", new=new_init)
    yield


@pytest.fixture(autouse=True)
def isolate_environment(
    monkeypatch: pytest.MonkeyPatch, tmp_path: Any
) -> Generator[None, None, None]:
    """移除外部的 FXT_ 环境变量，并在临时目录中运行，避免读取本地 .env 文件。"""
    for key in list(os.environ):
        if key.startswith("FXT_"):
            monkeypatch.delenv(key, raising=False)
    monkeypatch.chdir(tmp_path)
    yield


@pytest.fixture(autouse=True)
def reset_logging() -> Generator[None, None, None]:
    """恢复被 `setup_logging` 修改的标准库与 structlog 日志配置。"""
    root_logger = logging.getLogger()
    app_logger = logging.getLogger(APP_LOGGER_NAME)
    handlers = root_logger.handlers[:]
    root_level, app_level = root_logger.level, app_logger.level
    yield
    root_logger.handlers[:] = handlers
    root_logger.setLevel(root_level)
    app_logger.setLevel(app_level)
    structlog.reset_defaults()
