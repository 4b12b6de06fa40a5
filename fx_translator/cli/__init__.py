# fx_translator/cli/__init__.py
"""FX Translator CLI 模块入口。"""

from fx_translator.cli.main import app

__all__ = ["app"]
