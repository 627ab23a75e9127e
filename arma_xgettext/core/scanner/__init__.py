"""
Scanner 模块 - 从 Arma 源文件中提取可翻译字符串

逐层的处理流水线：
- models.py: 数据类定义
- patterns.py: 文件扩展名
- stream.py: 行尾规范化、续行、注释
- tokenizer.py: 预处理词法单元
- directives.py: 预处理指令与字面量拼接
- lexer.py: 高层词法单元
- extractor.py: 调用提取
- core.py: 主扫描函数
"""

from arma_xgettext.core.scanner.models import (
    EOF,
    ScanState,
    Token,
    TokenType,
    HighLevelToken,
    HighLevelType,
    FileError,
    ScanResult,
)
from arma_xgettext.core.scanner.patterns import (
    EXTENSION_TO_LANGUAGE,
    language_for,
)
from arma_xgettext.core.scanner.stream import (
    PushbackBuffer,
    RawReader,
    LineSplicer,
    CommentFilter,
)
from arma_xgettext.core.scanner.tokenizer import (
    Tokenizer,
    normalize_dollar_literal,
)
from arma_xgettext.core.scanner.directives import (
    HashFilter,
    DirectiveInterpreter,
    BlankFilter,
    LiteralConcatenator,
)
from arma_xgettext.core.scanner.lexer import HighLevelLexer
from arma_xgettext.core.scanner.extractor import CallExtractor
from arma_xgettext.core.scanner.core import (
    ScanOptions,
    default_options,
    extract_stream,
    extract_string,
    extract_file,
    scan_paths,
)

__all__ = [
    # Models
    "EOF",
    "ScanState",
    "Token",
    "TokenType",
    "HighLevelToken",
    "HighLevelType",
    "FileError",
    "ScanResult",
    # Patterns
    "EXTENSION_TO_LANGUAGE",
    "language_for",
    # Pipeline
    "PushbackBuffer",
    "RawReader",
    "LineSplicer",
    "CommentFilter",
    "Tokenizer",
    "normalize_dollar_literal",
    "HashFilter",
    "DirectiveInterpreter",
    "BlankFilter",
    "LiteralConcatenator",
    "HighLevelLexer",
    "CallExtractor",
    # Core
    "ScanOptions",
    "default_options",
    "extract_stream",
    "extract_string",
    "extract_file",
    "scan_paths",
]
