"""
Core Layer - 核心层

包含格式字符串校验、关键字与标志表、消息目录和源文件扫描器。
"""

from arma_xgettext.core.errors import (
    ArmaGettextError,
    ScanError,
    ConfigError,
    KeywordSpecError,
    FlagSpecError,
    InvalidFormatError,
)
from arma_xgettext.core.format import (
    FormatSpec,
    parse_format,
    is_valid_format,
    check_format,
    check_format_strings,
)
from arma_xgettext.core.keywords import (
    DEFAULT_KEYWORDS,
    CallShape,
    KeywordTable,
    build_keyword_table,
    split_keyword_spec,
)
from arma_xgettext.core.flags import (
    DEFAULT_FLAGS,
    FormatDecision,
    FlagContext,
    FlagContextTable,
)
from arma_xgettext.core.models import Position
from arma_xgettext.core.catalog import (
    Catalog,
    Message,
    FormatIssue,
)
from arma_xgettext.core.arglist import ArgListParser
from arma_xgettext.core.scanner import (
    ScanOptions,
    ScanResult,
    default_options,
    extract_file,
    extract_string,
    scan_paths,
)
from arma_xgettext.core.config import (
    ExtractorConfig,
    load_config,
)

__all__ = [
    # errors
    "ArmaGettextError",
    "ScanError",
    "ConfigError",
    "KeywordSpecError",
    "FlagSpecError",
    "InvalidFormatError",
    # format
    "FormatSpec",
    "parse_format",
    "is_valid_format",
    "check_format",
    "check_format_strings",
    # keywords
    "DEFAULT_KEYWORDS",
    "CallShape",
    "KeywordTable",
    "build_keyword_table",
    "split_keyword_spec",
    # flags
    "DEFAULT_FLAGS",
    "FormatDecision",
    "FlagContext",
    "FlagContextTable",
    # catalog
    "Position",
    "Catalog",
    "Message",
    "FormatIssue",
    "ArgListParser",
    # scanner
    "ScanOptions",
    "ScanResult",
    "default_options",
    "extract_file",
    "extract_string",
    "scan_paths",
    # config
    "ExtractorConfig",
    "load_config",
]
