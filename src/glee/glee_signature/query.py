"""查询解析模块。

把用户输入的签名模式（例如 ``(int, string) -> (bool, error)``）
解析为有序的输入/输出类型列表。
"""

from dataclasses import dataclass
from typing import List

from .errors import InvalidQueryError
from .function_record import canonical_signature

ARROW = " -> "


@dataclass(frozen=True)
class SignatureQuery:
    """解析后的查询。

    pattern 保留用户原始输入；canonical 是与函数规范签名同格式的排序键。
    """

    pattern: str
    inputs: List[str]
    outputs: List[str]

    @property
    def canonical(self) -> str:
        """按规范签名格式重新渲染查询，空白与括号写法不再影响距离。"""
        return canonical_signature(self.inputs, self.outputs)


def _split_types(segment: str) -> List[str]:
    return [piece.strip() for piece in segment.split(",")]


def parse_query(pattern: str) -> SignatureQuery:
    """解析签名模式。

    所有括号先替换为空格，再按字面量 ``" -> "`` 切分；切分结果必须恰好两段。
    空的一侧会得到单个空字符串，而不是空列表。

    Args:
        pattern: 用户输入的签名模式

    Returns:
        SignatureQuery实例

    Raises:
        InvalidQueryError: 模式中没有或有多个箭头分隔符
    """
    text = pattern.replace("(", " ").replace(")", " ")
    segments = text.split(ARROW)
    if len(segments) != 2:
        raise InvalidQueryError(
            f"invalid input: {pattern!r} (expected '(T, ...) -> (T, ...)')"
        )
    return SignatureQuery(
        pattern=pattern,
        inputs=_split_types(segments[0]),
        outputs=_split_types(segments[1]),
    )
