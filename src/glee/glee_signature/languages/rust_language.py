"""Rust语言支持实现。

元组返回类型按元素拆分，其余返回类型作为单个不透明类型。
"""

from typing import Optional
from typing import Set

from tree_sitter import Language

from ..base_language import BaseLanguageSupport

# --- Rust Signature Queries ---

RUST_DECLARATION_QUERY = """
(function_item
  name: (identifier) @name) @func

(function_signature_item
  name: (identifier) @name) @func
"""

RUST_INPUT_QUERY = """
(function_item
  parameters: (parameters
    (parameter
      type: (_) @type))) @func

(function_signature_item
  parameters: (parameters
    (parameter
      type: (_) @type))) @func
"""

RUST_OUTPUT_QUERY = """
(function_item
  return_type: (tuple_type
    (_) @type)) @func

(function_item
  return_type: [
    (type_identifier)
    (primitive_type)
    (generic_type)
    (reference_type)
    (scoped_type_identifier)
    (array_type)
    (pointer_type)
    (function_type)
    (dynamic_type)
    (abstract_type)
  ] @type) @func

(function_signature_item
  return_type: (tuple_type
    (_) @type)) @func

(function_signature_item
  return_type: [
    (type_identifier)
    (primitive_type)
    (generic_type)
    (reference_type)
    (scoped_type_identifier)
    (array_type)
    (pointer_type)
    (function_type)
    (dynamic_type)
    (abstract_type)
  ] @type) @func
"""

# --- Rust Language Setup ---

try:
    import tree_sitter_rust

    RUST_LANGUAGE: Optional[Language] = Language(tree_sitter_rust.language())
except ImportError:
    RUST_LANGUAGE = None


class RustLanguageSupport(BaseLanguageSupport):
    """Rust语言支持类。"""

    @property
    def language_name(self) -> str:
        return "rust"

    @property
    def file_extensions(self) -> Set[str]:
        return {".rs"}

    @property
    def tree_sitter_language(self) -> Optional[Language]:
        return RUST_LANGUAGE

    @property
    def declaration_query(self) -> str:
        return RUST_DECLARATION_QUERY

    @property
    def input_query(self) -> str:
        return RUST_INPUT_QUERY

    @property
    def output_query(self) -> str:
        return RUST_OUTPUT_QUERY
