from typing import Dict
from typing import Iterator
from typing import List
from typing import Tuple

from tree_sitter import Language
from tree_sitter import Node
from tree_sitter import Parser
from tree_sitter import Query
from tree_sitter import QueryCursor

from .function_record import FunctionRecord

# 查询约定的捕获名
FUNC_CAPTURE = "func"
NAME_CAPTURE = "name"
TYPE_CAPTURE = "type"


def _node_text(node: Node) -> str:
    if node.text is None:
        return ""
    return node.text.decode("utf8", errors="replace")


def _node_key(node: Node) -> Tuple[int, int, str]:
    return (node.start_byte, node.end_byte, node.type)


class SignatureExtractor:
    """
    Extracts function signatures from source code using tree-sitter.

    The language-specific details are three queries: one that locates
    function declarations and their names, and two that collect the
    parameter and return type nodes of a single declaration.
    Queries are compiled once and shared; every call to ``extract`` builds
    its own parser, so one extractor can serve several threads.
    """

    def __init__(
        self,
        language: Language,
        declaration_query: str,
        input_query: str,
        output_query: str,
    ) -> None:
        self.language = language
        self.declaration_query = Query(language, declaration_query)
        self.input_query = Query(language, input_query)
        self.output_query = Query(language, output_query)

    def extract(self, source: bytes, path: str) -> List[FunctionRecord]:
        """
        Parses the code and returns one FunctionRecord per declaration.

        tree-sitter recovers from local syntax errors, so malformed regions
        only lose their own declarations.
        """
        if isinstance(source, str):
            source = source.encode("utf8")
        # 空内容直接返回
        if not source.strip():
            return []

        parser = Parser(self.language)
        tree = parser.parse(source)

        records = []
        for func_node, name_node in self._declarations(tree.root_node):
            point = func_node.start_point
            records.append(
                FunctionRecord(
                    path=path,
                    location=(point[0], point[1]),
                    name=_node_text(name_node),
                    args=self._types(func_node, self.input_query),
                    rets=self._types(func_node, self.output_query),
                )
            )
        return records

    def _declarations(self, root: Node) -> Iterator[Tuple[Node, Node]]:
        cursor = QueryCursor(self.declaration_query)
        # matches 返回格式: [(pattern_index, {capture_name: [nodes]})]
        for _, captures in cursor.matches(root):
            funcs = captures.get(FUNC_CAPTURE)
            names = captures.get(NAME_CAPTURE)
            if not funcs or not names:
                continue
            yield funcs[0], names[0]

    def _types(self, func_node: Node, query: Query) -> Tuple[str, ...]:
        """Collects captured type texts of one declaration in source order."""
        cursor = QueryCursor(query)
        owner = _node_key(func_node)
        found: Dict[Tuple[int, int, str], Node] = {}
        for _, captures in cursor.matches(func_node):
            # 嵌套声明的类型不属于当前声明
            owners = captures.get(FUNC_CAPTURE)
            if owners and _node_key(owners[0]) != owner:
                continue
            for node in captures.get(TYPE_CAPTURE, []):
                found.setdefault(_node_key(node), node)

        ordered = sorted(found.values(), key=lambda node: node.start_byte)
        return tuple(_node_text(node) for node in ordered)
