"""签名搜索流水线。

文件发现 -> 并发提取 -> （可选）包含匹配过滤 -> 按编辑距离排序 -> 截断输出。
每个文件的提取结果单独记录，单个文件失败不会中断整个搜索。
"""

import concurrent.futures
import os
import sys
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass
from dataclasses import field
from typing import Dict
from typing import List
from typing import Optional
from typing import Sequence

from tqdm import tqdm

from glee.glee_utils.output import OutputType
from glee.glee_utils.output import PrettyOutput

from .errors import UnsupportedLanguageError
from .file_walker import SourceFile
from .function_record import FunctionRecord
from .function_record import RankedResult
from .function_record import render
from .language_registry import LanguageRegistry
from .language_registry import get_registry
from .matcher import IncludesMatcher
from .matcher import MatchMode
from .query import parse_query
from .ranking import rank
from .ranking import truncate
from .tree_sitter_extractor import SignatureExtractor


@dataclass
class FileOutcome:
    """单个文件的提取结果：成功时带记录，失败时带异常。"""

    source: SourceFile
    records: List[FunctionRecord] = field(default_factory=list)
    error: Optional[Exception] = None

    @property
    def ok(self) -> bool:
        return self.error is None


@dataclass
class SearchReport:
    """一次搜索的完整结果。"""

    results: List[RankedResult]
    outcomes: List[FileOutcome]
    candidate_count: int = 0

    @property
    def failed(self) -> List[FileOutcome]:
        return [outcome for outcome in self.outcomes if not outcome.ok]

    def lines(self) -> List[str]:
        return format_results(self.results)


def format_results(results: Sequence[RankedResult]) -> List[str]:
    return [render(result.record) for result in results]


def read_source(path: str) -> bytes:
    with open(path, "rb") as f:
        return f.read()


class SignatureSearch:
    """Runs one signature search over a list of discovered files."""

    def __init__(
        self,
        registry: Optional[LanguageRegistry] = None,
        max_workers: Optional[int] = None,
        show_progress: bool = False,
    ) -> None:
        self.registry = registry or get_registry()
        self.max_workers = max_workers
        self.show_progress = show_progress

    def run(
        self,
        pattern: str,
        files: Sequence[SourceFile],
        mode: MatchMode = MatchMode.DEFAULT,
    ) -> SearchReport:
        """执行搜索。

        查询在读取任何文件之前解析，非法查询直接抛出 InvalidQueryError。
        排序键是查询的规范形式，与函数的规范签名格式一致。
        """
        query = parse_query(pattern)
        matcher = IncludesMatcher(query) if mode == MatchMode.INCLUDES else None

        outcomes = self.extract_all(files)
        records = [record for outcome in outcomes for record in outcome.records]
        candidate_count = len(records)

        if matcher is not None:
            records = [record for record in records if matcher(record)]

        results = list(truncate(rank(records, query.canonical)))
        return SearchReport(
            results=results, outcomes=outcomes, candidate_count=candidate_count
        )

    def extract_all(self, files: Sequence[SourceFile]) -> List[FileOutcome]:
        """并发提取所有文件，返回顺序与files一致。"""
        extractors = self._resolve_extractors(files)
        outcomes: List[Optional[FileOutcome]] = [None] * len(files)

        with tqdm(
            total=len(files),
            desc="Processing files",
            unit="file",
            file=sys.stderr,
            disable=not self.show_progress,
        ) as pbar:
            with ThreadPoolExecutor(max_workers=self.max_workers) as executor:
                future_to_index = {
                    executor.submit(self._extract_file, source, extractors): index
                    for index, source in enumerate(files)
                }
                for future in concurrent.futures.as_completed(future_to_index):
                    index = future_to_index[future]
                    outcome = future.result()
                    outcomes[index] = outcome
                    pbar.set_postfix_str(os.path.basename(outcome.source.path))
                    pbar.update(1)

        finished = [outcome for outcome in outcomes if outcome is not None]
        self._report_failures(finished)
        return finished

    def _resolve_extractors(
        self, files: Sequence[SourceFile]
    ) -> Dict[str, SignatureExtractor]:
        # 查询只编译一次，在主线程完成后再分发给工作线程
        extractors: Dict[str, SignatureExtractor] = {}
        for language in sorted({source.language for source in files}):
            try:
                extractors[language] = self.registry.get_extractor(language)
            except UnsupportedLanguageError:
                continue
        return extractors

    @staticmethod
    def _extract_file(
        source: SourceFile, extractors: Dict[str, SignatureExtractor]
    ) -> FileOutcome:
        extractor = extractors.get(source.language)
        if extractor is None:
            return FileOutcome(source, error=UnsupportedLanguageError(source.language))
        try:
            content = read_source(source.path)
        except OSError as e:
            return FileOutcome(source, error=e)
        try:
            records = extractor.extract(content, source.path)
        except Exception as e:
            # 无法得到语法树的文件贡献零条记录
            return FileOutcome(source, error=e)
        return FileOutcome(source, records=records)

    @staticmethod
    def _report_failures(outcomes: Sequence[FileOutcome]) -> None:
        unsupported: Dict[str, int] = {}
        for outcome in outcomes:
            if outcome.ok:
                continue
            if isinstance(outcome.error, UnsupportedLanguageError):
                language = outcome.error.language
                unsupported[language] = unsupported.get(language, 0) + 1
                continue
            PrettyOutput.print(
                f"跳过文件 {outcome.source.path}: {outcome.error}",
                OutputType.WARNING,
            )
        for language, count in unsupported.items():
            PrettyOutput.print(
                f"language {language} not supported, skipped {count} file(s)",
                OutputType.WARNING,
            )
