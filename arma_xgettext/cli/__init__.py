"""
CLI Layer - 命令行接口层

提供命令行入口。
"""

from arma_xgettext.cli.app import app, extract, check_format_command, version

__all__ = [
    "app",
    "extract",
    "check_format_command",
    "version",
]
