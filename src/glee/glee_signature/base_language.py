"""基础语言支持抽象类。

定义所有语言支持需要实现的接口，便于扩展新的语言支持。
每种语言通过三个tree-sitter查询描述函数签名：

- declaration_query: 定位函数声明及其名称，捕获 ``@func`` 与 ``@name``
- input_query: 参数类型，捕获 ``@type``，并用 ``@func`` 标记所属声明
- output_query: 返回类型，捕获 ``@type``，并用 ``@func`` 标记所属声明
"""

import os
from abc import ABC
from abc import abstractmethod
from typing import Optional
from typing import Set

from tree_sitter import Language

from .tree_sitter_extractor import SignatureExtractor


class BaseLanguageSupport(ABC):
    """语言支持的基础抽象类。

    所有语言支持类都应该继承此类并实现所需的属性。
    """

    @property
    @abstractmethod
    def language_name(self) -> str:
        """返回语言名称（如 'go', 'rust', 'python'）。"""
        pass

    @property
    @abstractmethod
    def file_extensions(self) -> Set[str]:
        """返回该语言支持的文件扩展名集合（如 {'.py', '.pyi'}）。"""
        pass

    @property
    @abstractmethod
    def tree_sitter_language(self) -> Optional[Language]:
        """返回tree-sitter语法对象，语法包不可用时返回None。"""
        pass

    @property
    @abstractmethod
    def declaration_query(self) -> str:
        pass

    @property
    @abstractmethod
    def input_query(self) -> str:
        pass

    @property
    @abstractmethod
    def output_query(self) -> str:
        pass

    def is_available(self) -> bool:
        """语法包是否已安装。"""
        return self.tree_sitter_language is not None

    def create_extractor(self) -> Optional[SignatureExtractor]:
        """创建并返回该语言的签名提取器实例。

        Returns:
            SignatureExtractor实例，如果语法不可用则返回None
        """
        language = self.tree_sitter_language
        if language is None:
            return None
        return SignatureExtractor(
            language,
            declaration_query=self.declaration_query,
            input_query=self.input_query,
            output_query=self.output_query,
        )

    def is_source_file(self, file_path: str) -> bool:
        """检查文件是否为该语言的源文件。

        Args:
            file_path: 文件路径

        Returns:
            如果是该语言的源文件返回True，否则返回False
        """
        _, ext = os.path.splitext(file_path)
        return ext in self.file_extensions

    def detect_language(self, file_path: str) -> Optional[str]:
        """检测文件是否属于该语言。

        Args:
            file_path: 文件路径

        Returns:
            如果属于该语言返回language_name，否则返回None
        """
        if self.is_source_file(file_path):
            return self.language_name
        return None
