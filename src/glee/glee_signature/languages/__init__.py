"""语言支持实现模块。

包含各种编程语言的签名提取支持。
"""

from .go_language import GoLanguageSupport
from .python_language import PythonLanguageSupport
from .rust_language import RustLanguageSupport

__all__ = ["GoLanguageSupport", "PythonLanguageSupport", "RustLanguageSupport"]
