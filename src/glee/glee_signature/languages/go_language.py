"""Go语言支持实现。"""

from typing import Optional
from typing import Set

from tree_sitter import Language

from ..base_language import BaseLanguageSupport

# --- Go Signature Queries ---

GO_DECLARATION_QUERY = """
[
  (function_declaration
    name: (identifier) @name)
  (method_declaration
    name: (field_identifier) @name)
] @func
"""

GO_INPUT_QUERY = """
(function_declaration
  parameters: (parameter_list
    (parameter_declaration
      type: (_) @type))) @func

(method_declaration
  parameters: (parameter_list
    (parameter_declaration
      type: (_) @type))) @func
"""

# A single unparenthesized result is matched by node kind.
GO_OUTPUT_QUERY = """
(function_declaration
  result: (parameter_list
    (parameter_declaration
      type: (_) @type))) @func

(function_declaration
  result: [
    (type_identifier)
    (qualified_type)
    (pointer_type)
    (slice_type)
    (array_type)
    (map_type)
    (channel_type)
    (generic_type)
    (function_type)
    (interface_type)
  ] @type) @func

(method_declaration
  result: (parameter_list
    (parameter_declaration
      type: (_) @type))) @func

(method_declaration
  result: [
    (type_identifier)
    (qualified_type)
    (pointer_type)
    (slice_type)
    (array_type)
    (map_type)
    (channel_type)
    (generic_type)
    (function_type)
    (interface_type)
  ] @type) @func
"""

# --- Go Language Setup ---

try:
    import tree_sitter_go

    GO_LANGUAGE: Optional[Language] = Language(tree_sitter_go.language())
except ImportError:
    GO_LANGUAGE = None


class GoLanguageSupport(BaseLanguageSupport):
    """Go语言支持类。"""

    @property
    def language_name(self) -> str:
        return "go"

    @property
    def file_extensions(self) -> Set[str]:
        return {".go"}

    @property
    def tree_sitter_language(self) -> Optional[Language]:
        return GO_LANGUAGE

    @property
    def declaration_query(self) -> str:
        return GO_DECLARATION_QUERY

    @property
    def input_query(self) -> str:
        return GO_INPUT_QUERY

    @property
    def output_query(self) -> str:
        return GO_OUTPUT_QUERY
