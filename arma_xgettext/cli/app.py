"""
CLI 入口模块 - 使用 Typer 构建命令行界面

提取流程：
1. 加载配置并合并命令行选项
2. 扫描文件和目录
3. 生成 PO 模板或报告
"""

import logging
import sys
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape

from arma_xgettext.core import (
    ArmaGettextError,
    Catalog,
    ExtractorConfig,
    ScanResult,
    check_format_strings,
    load_config,
    scan_paths,
)
from arma_xgettext.core.scanner import extract_stream
from arma_xgettext.reporters import JsonReporter, PoReporter, Reporter, RichReporter

# 创建 Typer 应用实例
app = typer.Typer(
    name="arma-xgettext",
    help="arma-xgettext: extract translatable strings from Arma SQF and config sources.",
    add_completion=False,
)

# Rich Console 用于输出
console = Console()
err_console = Console(stderr=True)

STDIN_NAME = "-"


def setup_logging(verbose: bool = False) -> None:
    """把包日志输出到 stderr 上的 RichHandler"""
    package_logger = logging.getLogger("arma_xgettext")
    for handler in list(package_logger.handlers):
        if isinstance(handler, RichHandler):
            package_logger.removeHandler(handler)
    handler = RichHandler(console=err_console, show_time=False, show_path=False)
    handler.setFormatter(logging.Formatter("%(message)s"))
    package_logger.addHandler(handler)
    package_logger.setLevel(logging.DEBUG if verbose else logging.WARNING)


def merge_options(
    config: ExtractorConfig,
    keywords: Optional[list[str]],
    no_default_keywords: bool,
    flags: Optional[list[str]],
    extract_all: bool,
    add_comments: Optional[str],
    output_format: Optional[str],
    encoding: Optional[str],
    exclude: Optional[list[str]],
) -> ExtractorConfig:
    """命令行选项覆盖配置文件中的值，列表类选项追加"""
    merged = ExtractorConfig(
        keywords=config.keywords + list(keywords or []),
        default_keywords=config.default_keywords and not no_default_keywords,
        flags=config.flags + list(flags or []),
        extract_all=config.extract_all or extract_all,
        add_comments=add_comments if add_comments is not None else config.add_comments,
        encoding=encoding or config.encoding,
        exclude=config.exclude + list(exclude or []),
        output_format=output_format or config.output_format,
    )
    merged.validate("command line")
    return merged


def get_reporter(output_format: str, output) -> Reporter:
    """获取对应的报告器"""
    if output_format == "json":
        return JsonReporter(output)
    if output_format == "rich":
        return RichReporter(Console(file=output) if output is not None else console)
    return PoReporter(output)


def run_extraction(paths: list[str], config: ExtractorConfig, verbose: bool) -> tuple[Catalog, ScanResult]:
    options = config.to_options()
    catalog = config.new_catalog()
    result = ScanResult()

    def on_file_scanned(file_path: str) -> None:
        if verbose:
            err_console.print(f"[dim]  {file_path}[/dim]")

    for path in paths:
        if path == STDIN_NAME:
            extract_stream(sys.stdin, "standard input", STDIN_NAME, options, catalog)
            result.files.append(STDIN_NAME)
            continue
        partial = scan_paths(
            [Path(path)],
            options,
            catalog,
            encoding=config.encoding,
            exclude=config.exclude,
            on_file=on_file_scanned,
        )
        result.files.extend(partial.files)
        result.errors.extend(partial.errors)
    return catalog, result


@app.command()
def extract(
    paths: list[str] = typer.Argument(
        ...,
        help="Source files or directories to scan ('-' reads standard input)",
    ),
    output: Optional[Path] = typer.Option(
        None,
        "--output",
        "-o",
        help="Write the result to this file instead of standard output",
    ),
    keyword: Optional[list[str]] = typer.Option(
        None,
        "--keyword",
        "-k",
        help="Additional keyword spec, e.g. 'STRT:1' or 'LSTRING:1c,2'",
    ),
    no_default_keywords: bool = typer.Option(
        False,
        "--no-default-keywords",
        help="Do not look for the default keyword 'localize'",
    ),
    extract_all: bool = typer.Option(
        False,
        "--extract-all",
        "-a",
        help="Extract every string literal",
    ),
    add_comments: Optional[str] = typer.Option(
        None,
        "--add-comments",
        "-c",
        help="Keep comments preceding keywords, starting at the line that begins with TAG ('' keeps all)",
    ),
    flag: Optional[list[str]] = typer.Option(
        None,
        "--flag",
        help="Format flag spec, e.g. 'hint:1:arma-format'",
    ),
    output_format: Optional[str] = typer.Option(
        None,
        "--format",
        "-f",
        help="Output format: po (default), json or rich",
    ),
    encoding: Optional[str] = typer.Option(
        None,
        "--from-code",
        help="Encoding of the source files (default utf-8)",
    ),
    exclude: Optional[list[str]] = typer.Option(
        None,
        "--exclude",
        "-x",
        help="Gitignore-style pattern to skip while walking directories",
    ),
    config_path: Optional[Path] = typer.Option(
        None,
        "--config",
        help="Configuration file (default: arma-xgettext.toml or pyproject.toml in the current directory)",
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Show detailed output",
    ),
) -> None:
    """
    Extract translatable strings into a PO template.

    Examples:
        arma-xgettext extract addons/ -o stringtable.pot
        arma-xgettext extract fn_init.sqf -k STRT:1 --format rich
        arma-xgettext extract . -c TRANSLATORS: --flag hint:1:arma-format
    """
    setup_logging(verbose)

    try:
        config = merge_options(
            load_config(config_path),
            keyword,
            no_default_keywords,
            flag,
            extract_all,
            add_comments,
            output_format,
            encoding,
            exclude,
        )
        catalog, result = run_extraction(paths, config, verbose)
    except ArmaGettextError as e:
        err_console.print(f"[red]Error:[/red] {escape(str(e))}")
        raise typer.Exit(1)

    if output is not None:
        with open(output, "w", encoding="utf-8", newline="\n") as f:
            get_reporter(config.output_format, f).report(catalog, result)
    else:
        get_reporter(config.output_format, None).report(catalog, result)

    if verbose:
        err_console.print(f"[dim]Extracted {len(catalog)} messages from {len(result.files)} files[/dim]")

    if result.errors or catalog.format_errors:
        raise typer.Exit(1)


@app.command("check-format")
def check_format_command(
    template: str = typer.Argument(..., help="Original string (msgid)"),
    translation: str = typer.Argument(..., help="Translated string (msgstr)"),
) -> None:
    """
    Check that a translation uses the same %1..%N arguments as its template.

    Examples:
        arma-xgettext check-format "%1 killed %2" "%2 wurde von %1 getötet"
    """
    problems: list[str] = []
    if check_format_strings(template, translation, problems.append):
        for problem in problems:
            console.print(f"[red]Error:[/red] {escape(problem)}")
        raise typer.Exit(1)
    console.print("[green]OK[/green]")


@app.command()
def version() -> None:
    """Show the version of arma-xgettext."""
    from arma_xgettext import __version__
    console.print(f"[bold]arma-xgettext[/bold] v{__version__}")


if __name__ == "__main__":
    app()
