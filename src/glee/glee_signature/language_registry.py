"""语言注册表。

管理所有语言支持的注册和发现机制：
文件扩展名 -> 语言标签（供目录遍历使用），语言标签 -> 签名提取能力。
"""

import os
from typing import Dict
from typing import List
from typing import Optional
from typing import Set

from glee.glee_utils.output import OutputType
from glee.glee_utils.output import PrettyOutput

from .base_language import BaseLanguageSupport
from .errors import UnsupportedLanguageError
from .function_record import FunctionRecord
from .tree_sitter_extractor import SignatureExtractor


class LanguageRegistry:
    """语言支持注册表。

    负责管理所有已注册的语言支持，提供语言检测和提取器工厂方法。
    """

    def __init__(self) -> None:
        self._languages: Dict[str, BaseLanguageSupport] = {}
        self._extension_map: Dict[str, str] = {}  # extension -> language_name

    def register(self, language_support: BaseLanguageSupport) -> None:
        """注册一个语言支持。

        Args:
            language_support: 语言支持实例
        """
        lang_name = language_support.language_name
        self._languages[lang_name] = language_support

        # 注册文件扩展名映射
        for ext in language_support.file_extensions:
            # 如果扩展名已存在，记录警告但不覆盖（保留第一个注册的）
            if ext in self._extension_map and self._extension_map[ext] != lang_name:
                PrettyOutput.print(
                    f"Extension {ext} already registered for "
                    f"{self._extension_map[ext]}, ignoring registration for {lang_name}",
                    OutputType.WARNING,
                )
            else:
                self._extension_map[ext] = lang_name

    def unregister(self, language_name: str) -> None:
        """取消注册一个语言支持。

        Args:
            language_name: 语言名称
        """
        if language_name in self._languages:
            self._languages.pop(language_name)
            # 移除扩展名映射
            extensions_to_remove = [
                ext
                for ext, lang in self._extension_map.items()
                if lang == language_name
            ]
            for ext in extensions_to_remove:
                del self._extension_map[ext]

    def detect_language(self, file_path: str) -> Optional[str]:
        """根据文件路径检测编程语言。

        Args:
            file_path: 文件路径

        Returns:
            语言名称，如果无法检测则返回None
        """
        _, ext = os.path.splitext(file_path)
        return self._extension_map.get(ext)

    def get_language_support(self, language_name: str) -> Optional[BaseLanguageSupport]:
        return self._languages.get(language_name)

    def get_extractor(self, language_name: str) -> SignatureExtractor:
        """获取指定语言的签名提取器。

        Args:
            language_name: 语言名称

        Returns:
            SignatureExtractor实例

        Raises:
            UnsupportedLanguageError: 语言未注册或其语法不可用
        """
        lang_support = self.get_language_support(language_name)
        if lang_support is None:
            raise UnsupportedLanguageError(language_name)
        extractor = lang_support.create_extractor()
        if extractor is None:
            raise UnsupportedLanguageError(language_name)
        return extractor

    def get_supported_languages(self) -> Set[str]:
        """获取所有已注册的语言名称集合。"""
        return set(self._languages.keys())

    def get_extensions(self, language_name: str) -> List[str]:
        """获取映射到指定语言的扩展名（排序后）。"""
        return sorted(
            ext for ext, lang in self._extension_map.items() if lang == language_name
        )

    def is_supported(self, file_path: str) -> bool:
        """检查文件是否被支持。"""
        return self.detect_language(file_path) is not None


def register_builtin_languages(registry: LanguageRegistry) -> None:
    """注册语法包已安装的内置语言。"""
    from .languages import GoLanguageSupport
    from .languages import PythonLanguageSupport
    from .languages import RustLanguageSupport

    for support in (GoLanguageSupport(), RustLanguageSupport(), PythonLanguageSupport()):
        if support.is_available():
            registry.register(support)
        else:
            PrettyOutput.print(
                f"tree-sitter grammar for {support.language_name} not installed",
                OutputType.DEBUG,
            )


# 全局注册表实例
_registry: Optional[LanguageRegistry] = None


def get_registry() -> LanguageRegistry:
    """获取全局语言注册表实例（首次调用时注册内置语言）。

    Returns:
        全局LanguageRegistry实例
    """
    global _registry
    if _registry is None:
        _registry = LanguageRegistry()
        register_builtin_languages(_registry)
    return _registry


def register_language(language_support: BaseLanguageSupport) -> None:
    """注册一个语言支持（便捷函数）。"""
    get_registry().register(language_support)


def detect_language(file_path: str) -> Optional[str]:
    """检测文件的语言（便捷函数）。"""
    return get_registry().detect_language(file_path)


def extract_functions(
    source: bytes,
    language: str,
    path: str,
    registry: Optional[LanguageRegistry] = None,
) -> List[FunctionRecord]:
    """从源码中提取函数签名。

    Args:
        source: 源码字节
        language: 语言标签
        path: 文件标识，原样写入记录
        registry: 语言注册表，默认使用全局注册表

    Raises:
        UnsupportedLanguageError: 语言标签没有注册提取能力
    """
    registry = registry or get_registry()
    return registry.get_extractor(language).extract(source, path)
