"""
配置加载

配置可以写在 arma-xgettext.toml 中，也可以写在 pyproject.toml 的
[tool.arma-xgettext] 表中：

    [tool.arma-xgettext]
    keywords = ["STRT:1", "LSTRING:1c,2"]
    default-keywords = true
    flags = ["hint:1:arma-format"]
    add-comments = "TRANSLATORS:"
    exclude = ["addons/dev_*/"]

命令行选项覆盖文件中的值。
"""

import logging
import sys
from dataclasses import dataclass, field, fields
from pathlib import Path
from typing import Any, Optional

from arma_xgettext.core.catalog import Catalog
from arma_xgettext.core.errors import ConfigError
from arma_xgettext.core.flags import DEFAULT_FLAGS, FlagContextTable
from arma_xgettext.core.keywords import build_keyword_table
from arma_xgettext.core.scanner.core import ScanOptions

if sys.version_info >= (3, 11):
    import tomllib
else:
    import tomli as tomllib

logger = logging.getLogger(__name__)

CONFIG_FILE_NAME = "arma-xgettext.toml"
PYPROJECT_TABLE = "arma-xgettext"

OUTPUT_FORMATS = ("po", "json", "rich")


@dataclass
class ExtractorConfig:
    """
    提取配置

    Attributes:
        keywords: 额外的关键字规格，如 "STRT:1"
        default_keywords: 是否保留默认关键字 localize
        flags: 额外的标志规格，如 "hint:1:arma-format"
        extract_all: 提取所有字符串字面量
        add_comments: 注释标记；None 不保留注释，空字符串保留全部
        encoding: 源文件编码
        exclude: 目录扫描时额外排除的 gitignore 风格模式
        output_format: 输出格式 (po, json, rich)
    """
    keywords: list[str] = field(default_factory=list)
    default_keywords: bool = True
    flags: list[str] = field(default_factory=list)
    extract_all: bool = False
    add_comments: Optional[str] = None
    encoding: str = "utf-8"
    exclude: list[str] = field(default_factory=list)
    output_format: str = "po"

    @classmethod
    def from_dict(cls, data: dict[str, Any], source: str = "<config>") -> "ExtractorConfig":
        """从 TOML 表构造配置，键名可以使用 - 或 _"""
        known = {f.name: f for f in fields(cls)}
        values: dict[str, Any] = {}
        for key, value in data.items():
            name = key.replace("-", "_")
            if name not in known:
                raise ConfigError(f"{source}: unknown option '{key}'")
            values[name] = value

        config = cls(**values)
        config.validate(source)
        return config

    def validate(self, source: str = "<config>") -> None:
        for name in ("keywords", "flags", "exclude"):
            value = getattr(self, name)
            if not isinstance(value, list) or not all(isinstance(item, str) for item in value):
                raise ConfigError(f"{source}: '{name}' must be a list of strings")
        for name in ("default_keywords", "extract_all"):
            if not isinstance(getattr(self, name), bool):
                raise ConfigError(f"{source}: '{name}' must be a boolean")
        if self.add_comments is not None and not isinstance(self.add_comments, str):
            raise ConfigError(f"{source}: 'add_comments' must be a string")
        if self.output_format not in OUTPUT_FORMATS:
            raise ConfigError(
                f"{source}: unknown output format '{self.output_format}', "
                f"expected one of {', '.join(OUTPUT_FORMATS)}"
            )

    def to_options(self) -> ScanOptions:
        """
        构造扫描选项

        Raises:
            KeywordSpecError: 关键字规格无效
            FlagSpecError: 标志规格无效
        """
        keywords = build_keyword_table(self.keywords, default_keywords=self.default_keywords)
        flags = FlagContextTable(DEFAULT_FLAGS + tuple(self.flags))
        return ScanOptions(keywords=keywords, flags=flags, extract_all=self.extract_all)

    def new_catalog(self) -> Catalog:
        return Catalog(comment_tag=self.add_comments)


def _read_toml(path: Path) -> dict[str, Any]:
    try:
        with open(path, "rb") as f:
            return tomllib.load(f)
    except OSError as e:
        raise ConfigError(f"cannot read {path}: {e.strerror or e}") from e
    except tomllib.TOMLDecodeError as e:
        raise ConfigError(f"{path}: {e}") from e


def find_config(start: Path) -> Optional[Path]:
    """在 start 目录中查找 arma-xgettext.toml 或带 [tool.arma-xgettext] 的 pyproject.toml"""
    candidate = start / CONFIG_FILE_NAME
    if candidate.is_file():
        return candidate
    pyproject = start / "pyproject.toml"
    if pyproject.is_file() and PYPROJECT_TABLE in _read_toml(pyproject).get("tool", {}):
        return pyproject
    return None


def load_config(path: Optional[Path] = None, search_dir: Optional[Path] = None) -> ExtractorConfig:
    """
    加载配置

    Args:
        path: 明确指定的配置文件；为 None 时在 search_dir（默认当前目录）中查找
        search_dir: 查找配置文件的目录

    Returns:
        ExtractorConfig，找不到配置文件时返回默认配置

    Raises:
        ConfigError: 配置文件无法读取或包含无效选项
    """
    if path is None:
        path = find_config(search_dir or Path.cwd())
        if path is None:
            logger.debug("No configuration file found, using defaults")
            return ExtractorConfig()
    elif not path.is_file():
        raise ConfigError(f"configuration file {path} does not exist")

    data = _read_toml(path)
    if path.name == "pyproject.toml":
        data = data.get("tool", {}).get(PYPROJECT_TABLE, {})
    logger.debug(f"Loaded configuration from {path}")
    return ExtractorConfig.from_dict(data, source=str(path))
