"""Python语言支持实现。

只有带类型注解的参数会产生类型，未注解的参数（包括self）被忽略。
"""

from typing import Optional
from typing import Set

from tree_sitter import Language

from ..base_language import BaseLanguageSupport

# --- Python Signature Queries ---

PYTHON_DECLARATION_QUERY = """
(function_definition
  name: (identifier) @name) @func
"""

PYTHON_INPUT_QUERY = """
(function_definition
  parameters: (parameters
    [
      (typed_parameter
        type: (type) @type)
      (typed_default_parameter
        type: (type) @type)
    ])) @func
"""

PYTHON_OUTPUT_QUERY = """
(function_definition
  return_type: (type) @type) @func
"""

# --- Python Language Setup ---

try:
    import tree_sitter_python

    PYTHON_LANGUAGE: Optional[Language] = Language(tree_sitter_python.language())
except ImportError:
    PYTHON_LANGUAGE = None


class PythonLanguageSupport(BaseLanguageSupport):
    """Python语言支持类。"""

    @property
    def language_name(self) -> str:
        return "python"

    @property
    def file_extensions(self) -> Set[str]:
        return {".py", ".pyi"}

    @property
    def tree_sitter_language(self) -> Optional[Language]:
        return PYTHON_LANGUAGE

    @property
    def declaration_query(self) -> str:
        return PYTHON_DECLARATION_QUERY

    @property
    def input_query(self) -> str:
        return PYTHON_INPUT_QUERY

    @property
    def output_query(self) -> str:
        return PYTHON_OUTPUT_QUERY
