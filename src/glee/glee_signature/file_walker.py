"""文件发现模块。

遍历目录树，按注册表的扩展名映射挑选源文件，并提供统一的目录忽略逻辑。
"""

import fnmatch
import os
from typing import Iterable
from typing import Iterator
from typing import List
from typing import NamedTuple
from typing import Optional
from typing import Set

from .language_registry import LanguageRegistry
from .language_registry import get_registry


class SourceFile(NamedTuple):
    """待提取的源文件。"""

    language: str
    path: str


class FileIgnorePatterns:
    """文件忽略模式集合。

    只包含不会存放可搜索源码的目录；vendor、tests 等目录照常搜索。
    """

    # 版本控制目录
    VCS_DIRS: Set[str] = {".git", ".svn", ".hg", ".bzr"}

    # Python 相关
    PYTHON_DIRS: Set[str] = {
        "__pycache__",
        ".pytest_cache",
        ".mypy_cache",
        ".ruff_cache",
        ".tox",
        ".eggs",
        "*.egg-info",
    }
    PYTHON_VENV_DIRS: Set[str] = {"venv", ".venv", "virtualenv"}

    # Node.js 相关
    NODE_DIRS: Set[str] = {"node_modules"}

    # 编辑器目录
    OTHER_DIRS: Set[str] = {".idea", ".vscode"}

    @classmethod
    def get_default_ignore_dirs(cls) -> Set[str]:
        """获取默认忽略的目录名称集合。"""
        return (
            cls.VCS_DIRS
            | cls.PYTHON_DIRS
            | cls.PYTHON_VENV_DIRS
            | cls.NODE_DIRS
            | cls.OTHER_DIRS
        )


class FileIgnoreFilter:
    """文件忽略过滤器。"""

    def __init__(self, ignore_dirs: Optional[Iterable[str]] = None) -> None:
        """初始化文件忽略过滤器。

        Args:
            ignore_dirs: 额外要忽略的目录名称或通配模式，与默认集合合并
        """
        self.ignore_dirs = FileIgnorePatterns.get_default_ignore_dirs() | set(
            ignore_dirs or ()
        )

    def should_ignore_dir(self, dir_name: str) -> bool:
        """判断是否应该忽略某个目录（目录名，不包含路径）。"""
        return any(fnmatch.fnmatch(dir_name, pattern) for pattern in self.ignore_dirs)


def discover_files(
    root: str = ".",
    registry: Optional[LanguageRegistry] = None,
    ignore_dirs: Optional[Iterable[str]] = None,
) -> List[SourceFile]:
    """按确定的顺序列出root下所有受支持的源文件。

    每个目录的条目按名称排序，子目录在其排序位置处递归展开（与
    Go 的 filepath.Walk 顺序一致）；不跟随目录符号链接，无法访问的
    目录被跳过。root本身是文件时，只在受支持时返回它。

    Args:
        root: 搜索根目录或单个文件
        registry: 语言注册表，默认使用全局注册表
        ignore_dirs: 额外忽略的目录名称或通配模式

    Returns:
        SourceFile列表，顺序即发现顺序
    """
    registry = registry or get_registry()

    if os.path.isfile(root):
        language = registry.detect_language(root)
        return [SourceFile(language, root)] if language else []

    ignore_filter = FileIgnoreFilter(ignore_dirs)
    files: List[SourceFile] = []
    for path in _walk(root, ignore_filter):
        language = registry.detect_language(path)
        if language:
            files.append(SourceFile(language, path))
    return files


def _walk(directory: str, ignore_filter: FileIgnoreFilter) -> Iterator[str]:
    try:
        with os.scandir(directory) as it:
            entries = sorted(it, key=lambda entry: entry.name)
    except OSError:
        return

    for entry in entries:
        try:
            is_dir = entry.is_dir(follow_symlinks=False)
        except OSError:
            continue
        if is_dir:
            if not ignore_filter.should_ignore_dir(entry.name):
                yield from _walk(entry.path, ignore_filter)
        else:
            yield entry.path
