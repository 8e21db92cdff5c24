"""glee签名搜索模块。

提供函数签名提取、查询解析、包含匹配和按编辑距离排序的功能。
"""

from .base_language import BaseLanguageSupport
from .errors import GleeError
from .errors import InvalidQueryError
from .errors import UnsupportedLanguageError
from .file_walker import SourceFile
from .file_walker import discover_files
from .function_record import FunctionRecord
from .function_record import RankedResult
from .function_record import canonicalize
from .function_record import render
from .language_registry import LanguageRegistry
from .language_registry import extract_functions
from .language_registry import get_registry
from .language_registry import register_language
from .matcher import MatchMode
from .matcher import filter_includes
from .matcher import matches
from .pipeline import FileOutcome
from .pipeline import SearchReport
from .pipeline import SignatureSearch
from .query import SignatureQuery
from .query import parse_query
from .ranking import edit_distance
from .ranking import rank
from .ranking import truncate
from .tree_sitter_extractor import SignatureExtractor

__all__ = [
    # Errors
    "GleeError",
    "InvalidQueryError",
    "UnsupportedLanguageError",
    # Records
    "FunctionRecord",
    "RankedResult",
    "canonicalize",
    "render",
    # Extraction
    "BaseLanguageSupport",
    "LanguageRegistry",
    "SignatureExtractor",
    "extract_functions",
    "get_registry",
    "register_language",
    # Discovery
    "SourceFile",
    "discover_files",
    # Query and matching
    "SignatureQuery",
    "parse_query",
    "MatchMode",
    "matches",
    "filter_includes",
    # Ranking
    "edit_distance",
    "rank",
    "truncate",
    # Pipeline
    "FileOutcome",
    "SearchReport",
    "SignatureSearch",
]
