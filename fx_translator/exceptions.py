# fx_translator/exceptions.py
"""
本模块定义了 FX Translator 项目中所有自定义的、语义化的异常类型。

调用方可以捕获 `TranslatorError` 来处理所有源自本项目的预期错误，
也可以根据具体的子类型区分输入错误、配置错误、传输错误和协议错误。
"""

from __future__ import annotations


class TranslatorError(Exception):
    """所有 FX Translator 自定义异常的通用基类。"""

    pass


class InputValidationError(TranslatorError, ValueError):
    """
    表示翻译请求本身不合法，例如待翻译文本为空或只包含空白字符。
    此类错误在任何网络或缓存访问之前同步抛出。
    """

    pass


class ConfigurationError(TranslatorError):
    """
    表示在加载、解析或验证配置时发生的错误。
    例如，所选引擎需要的 API 密钥未配置。
    """

    pass


class EngineNotFoundError(TranslatorError, KeyError):
    """
    表示当前配置的引擎没有对应的适配器。
    继承自 KeyError 是为了保持与字典查找行为的一致性。
    """

    def __str__(self) -> str:
        # KeyError 默认会给消息加上引号
        return str(self.args[0]) if self.args else ""


class APIError(TranslatorError):
    """
    表示与外部翻译服务 API 交互时发生的错误。
    例如，网络超时、连接失败或服务返回了非 200 的状态码。
    """

    def __init__(
        self,
        message: str,
        *,
        engine: str | None = None,
        status_code: int | None = None,
        body: str | None = None,
    ) -> None:
        super().__init__(message)
        self.engine = engine
        self.status_code = status_code
        self.body = body


class ProtocolError(APIError):
    """表示服务返回了成功状态码，但响应体与预期结构不符（字段缺失、结果为空等）。"""

    pass


class TranslationDispatchError(TranslatorError):
    """
    调度器交付给调用方的统一失败值。
    原始异常保存在 `__cause__` 中，其描述会包含在消息里。
    """

    pass


class DispatcherNotInitializedError(TranslatorError):
    """表示在调用 `initialize()` 之前就提交了翻译任务。"""

    pass


class DispatcherShutdownError(TranslatorError):
    """表示调度器已经关闭，不再接受新的翻译任务。"""

    pass
