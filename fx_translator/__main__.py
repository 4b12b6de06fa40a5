# fx_translator/__main__.py
"""支持 `python -m fx_translator` 的方式调用命令行。"""

from fx_translator.cli import app

if __name__ == "__main__":
    app()
