"""包含匹配（includes）模式。

结构化预过滤：查询每一侧请求的每个类型，都必须能在候选函数同一侧的
某个实际类型中找到（子串/模式匹配，顺序与重复次数无关）。
这只是类型兼容性的近似，不做类型变量的一致性绑定。
"""

import re
from enum import Enum
from typing import Iterable
from typing import List
from typing import Pattern
from typing import Sequence

from .errors import InvalidQueryError
from .function_record import FunctionRecord
from .query import SignatureQuery

# 需要按字面量比较的元字符
ESCAPED_CHARS = ("[", "]", "*", ".", "{", "}", "(", ")")


class MatchMode(Enum):
    """匹配模式选择器。"""

    DEFAULT = "default"
    INCLUDES = "includes"

    @classmethod
    def from_name(cls, name: str) -> "MatchMode":
        """未识别的名称按 default 处理。"""
        for mode in cls:
            if mode.value == name:
                return mode
        return cls.DEFAULT


def escape_type(token: str) -> str:
    for char in ESCAPED_CHARS:
        token = token.replace(char, "\\" + char)
    return token


def compile_types(tokens: Sequence[str]) -> List[Pattern[str]]:
    """把请求的类型编译为正则表达式。

    Raises:
        InvalidQueryError: 转义后仍不是合法模式（例如以 ``+`` 开头）
    """
    patterns = []
    for token in tokens:
        try:
            patterns.append(re.compile(escape_type(token)))
        except re.error as e:
            raise InvalidQueryError(f"invalid type in query: {token!r}: {e}") from e
    return patterns


def contains(items: Sequence[str], tests: Sequence[Pattern[str]]) -> bool:
    """每个请求模式都至少命中一个实际类型时返回True。"""
    for test in tests:
        if not any(test.search(item) for item in items):
            return False
    return True


class IncludesMatcher:
    """Reusable containment check for one parsed query."""

    def __init__(self, query: SignatureQuery) -> None:
        self.query = query
        self._inputs = compile_types(query.inputs)
        self._outputs = compile_types(query.outputs)

    def __call__(self, record: FunctionRecord) -> bool:
        # 数量不足时直接排除
        if len(record.args) < len(self._inputs) or len(record.rets) < len(
            self._outputs
        ):
            return False
        return contains(record.args, self._inputs) and contains(
            record.rets, self._outputs
        )


def matches(record: FunctionRecord, query: SignatureQuery) -> bool:
    return IncludesMatcher(query)(record)


def filter_includes(
    records: Iterable[FunctionRecord], query: SignatureQuery
) -> List[FunctionRecord]:
    """保留通过包含匹配的记录，保持原有顺序。"""
    matcher = IncludesMatcher(query)
    return [record for record in records if matcher(record)]
