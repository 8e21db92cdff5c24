# -*- coding: utf-8 -*-
"""
签名搜索命令行接口

使用 typer 提供命令行交互：
    glee "(int, string) -> (bool, error)" [ROOT] --match includes
"""

from typing import Optional

import typer

from glee.glee_utils.config import get_ignore_dirs
from glee.glee_utils.config import get_match_mode
from glee.glee_utils.config import get_max_workers
from glee.glee_utils.config import is_show_progress
from glee.glee_utils.output import OutputType
from glee.glee_utils.output import PrettyOutput
from glee.glee_utils.utils import init_env

from .errors import InvalidQueryError
from .file_walker import discover_files
from .language_registry import get_registry
from .matcher import MatchMode
from .pipeline import SignatureSearch

app = typer.Typer(help="按类型签名搜索代码中的函数")


def _list_languages() -> None:
    registry = get_registry()
    for language in sorted(registry.get_supported_languages()):
        typer.echo(f"{language}: {', '.join(registry.get_extensions(language))}")


@app.command()
def cli(
    signature: Optional[str] = typer.Argument(
        None, help="签名模式，例如 '(int, string) -> (bool, error)'"
    ),
    root: str = typer.Argument(".", help="搜索根目录"),
    match: Optional[str] = typer.Option(
        None, "--match", "-m", help="matching algorithm (options: includes, default)"
    ),
    workers: Optional[int] = typer.Option(
        None, "--workers", "-w", min=1, help="并发提取的线程数"
    ),
    config_file: Optional[str] = typer.Option(
        None, "--config", "-c", help="配置文件路径（默认 ~/.glee/config.yaml）"
    ),
    progress: Optional[bool] = typer.Option(
        None, "--progress/--no-progress", help="是否显示文件处理进度"
    ),
    list_languages: bool = typer.Option(
        False, "--list-languages", help="列出支持的语言及扩展名"
    ),
) -> None:
    init_env(config_file)

    if list_languages:
        _list_languages()
        return

    if not signature:
        PrettyOutput.print("Usage: glee <signature> [root]", OutputType.ERROR)
        raise typer.Exit(code=1)

    mode = MatchMode.from_name(match if match is not None else get_match_mode())
    show_progress = progress if progress is not None else is_show_progress()
    registry = get_registry()

    search = SignatureSearch(
        registry=registry,
        max_workers=workers if workers is not None else get_max_workers(),
        show_progress=show_progress,
    )
    files = discover_files(root, registry, ignore_dirs=get_ignore_dirs())

    try:
        report = search.run(signature, files, mode)
    except InvalidQueryError as e:
        PrettyOutput.print(str(e), OutputType.ERROR)
        raise typer.Exit(code=1)

    if show_progress:
        PrettyOutput.print(
            f"{len(files)} files, {report.candidate_count} functions, "
            f"{len(report.results)} shown",
            OutputType.INFO,
        )
    for line in report.lines():
        typer.echo(line)


def main() -> None:
    """Application entry point"""
    app()


if __name__ == "__main__":
    main()
