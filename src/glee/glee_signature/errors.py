"""签名搜索的异常类型。"""


class GleeError(Exception):
    """所有glee异常的基类。"""


class UnsupportedLanguageError(GleeError):
    """没有为该语言标签注册提取能力。"""

    def __init__(self, language: str) -> None:
        self.language = language
        super().__init__(f"language {language} not supported")


class InvalidQueryError(GleeError, ValueError):
    """查询模式无法解析（必须且只能包含一个 ' -> ' 分隔符）。"""
