"""
核心扫描函数

为每个文件组装完整的处理流水线：

    RawReader -> LineSplicer -> CommentFilter -> Tokenizer -> HashFilter
    -> DirectiveInterpreter -> BlankFilter -> LiteralConcatenator
    -> HighLevelLexer -> CallExtractor -> Catalog

每个文件都有独立的 ScanState，关键字表、标志表和消息目录在文件之间共享。
"""

import io
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Callable, Iterable, Optional, TextIO

from arma_xgettext.core.catalog import Catalog
from arma_xgettext.core.errors import ScanError
from arma_xgettext.core.flags import DEFAULT_FLAGS, FlagContextTable
from arma_xgettext.core.keywords import KeywordTable, build_keyword_table
from arma_xgettext.core.scanner.directives import (
    BlankFilter,
    DirectiveInterpreter,
    HashFilter,
    LiteralConcatenator,
)
from arma_xgettext.core.scanner.extractor import CallExtractor
from arma_xgettext.core.scanner.lexer import HighLevelLexer
from arma_xgettext.core.scanner.models import FileError, ScanResult, ScanState
from arma_xgettext.core.scanner.patterns import language_for
from arma_xgettext.core.scanner.stream import CommentFilter, LineSplicer, RawReader
from arma_xgettext.core.scanner.tokenizer import Tokenizer
from arma_xgettext.filters import PathspecFilter

logger = logging.getLogger(__name__)

# 进度回调类型
ProgressCallback = Callable[[str], None]


@dataclass(frozen=True)
class ScanOptions:
    """
    扫描选项，在同一次运行的所有文件之间共享

    Attributes:
        keywords: 关键字表
        flags: 标志上下文表
        extract_all: 提取所有字符串字面量，而不仅是关键字调用中的
    """
    keywords: KeywordTable = field(default_factory=build_keyword_table)
    flags: FlagContextTable = field(default_factory=lambda: FlagContextTable(DEFAULT_FLAGS))
    extract_all: bool = False


def default_options() -> ScanOptions:
    """默认关键字 localize 与默认格式标志"""
    return ScanOptions()


def extract_stream(
    fp: TextIO,
    real_filename: str,
    logical_filename: str,
    options: ScanOptions,
    catalog: Catalog,
) -> None:
    """
    从已打开的文本流中提取消息

    Args:
        fp: 以 newline="" 打开的文本流
        real_filename: 真实文件名，用于报告读取错误
        logical_filename: 写入引用位置的文件名
        options: 扫描选项
        catalog: 结果写入的消息目录

    Raises:
        ScanError: 读取失败
    """
    state = ScanState(logical_file_name=logical_filename)
    raw = RawReader(fp, real_filename)
    splicer = LineSplicer(raw, state)
    chars = CommentFilter(splicer, state)
    tokens = LiteralConcatenator(
        BlankFilter(DirectiveInterpreter(HashFilter(Tokenizer(chars, splicer, state)), state), state)
    )
    lexer = HighLevelLexer(tokens, options.keywords, state)
    extractor = CallExtractor(lexer, catalog, options.flags, state, extract_all=options.extract_all)

    logger.debug(f"Extracting from {real_filename}")
    extractor.extract_all_calls()


def extract_string(
    text: str,
    file_name: str = "<string>",
    options: Optional[ScanOptions] = None,
    catalog: Optional[Catalog] = None,
) -> Catalog:
    """从字符串中提取消息，返回消息目录"""
    if options is None:
        options = default_options()
    if catalog is None:
        catalog = Catalog()
    extract_stream(io.StringIO(text, newline=""), file_name, file_name, options, catalog)
    return catalog


def extract_file(
    path: Path,
    options: Optional[ScanOptions] = None,
    catalog: Optional[Catalog] = None,
    logical_filename: Optional[str] = None,
    encoding: str = "utf-8",
) -> Catalog:
    """
    从单个文件中提取消息

    Raises:
        ScanError: 文件无法打开或读取
    """
    if options is None:
        options = default_options()
    if catalog is None:
        catalog = Catalog()
    real_filename = str(path)
    try:
        fp = open(path, encoding=encoding, newline="")
    except OSError as e:
        raise ScanError(real_filename, e.strerror or str(e)) from e
    with fp:
        extract_stream(fp, real_filename, logical_filename or path.as_posix(), options, catalog)
    return catalog


def scan_paths(
    paths: Iterable[Path],
    options: Optional[ScanOptions] = None,
    catalog: Optional[Catalog] = None,
    encoding: str = "utf-8",
    exclude: Iterable[str] = (),
    on_file: Optional[ProgressCallback] = None,
) -> ScanResult:
    """
    扫描文件和目录

    明确给出的文件总是被扫描；目录会被递归遍历，只扫描已知扩展名
    且未被 .gitignore 或 exclude 排除的文件。单个文件失败不会中断扫描，
    失败记录在 ScanResult.errors 中。
    """
    if options is None:
        options = default_options()
    if catalog is None:
        catalog = Catalog()
    exclude = list(exclude)
    result = ScanResult()

    for path in paths:
        if path.is_dir():
            path_filter = PathspecFilter(path, exclude)
            files = [p for p in path_filter.walk() if language_for(p.name)]
            logger.info(f"Found {len(files)} source files under {path}")
        else:
            files = [path]

        for file_path in files:
            name = file_path.as_posix()
            if on_file:
                on_file(name)
            try:
                extract_file(file_path, options, catalog, name, encoding)
            except ScanError as e:
                logger.error(str(e))
                result.errors.append(FileError(file_path=name, reason=e.reason))
                continue
            result.files.append(name)

    return result
