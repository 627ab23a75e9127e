"""
异常定义

扫描、配置和格式字符串校验使用的异常层次。
"""

from typing import Optional


class ArmaGettextError(Exception):
    """所有 arma-xgettext 错误的基类"""
    pass


class ScanError(ArmaGettextError):
    """源文件无法读取（致命错误，当前文件的扫描中止）"""

    def __init__(self, real_filename: str, reason: str):
        super().__init__(f'error while reading "{real_filename}": {reason}')
        self.real_filename = real_filename
        self.reason = reason


class ConfigError(ArmaGettextError):
    """配置文件或命令行选项无效"""
    pass


class KeywordSpecError(ConfigError):
    """关键字规格字符串无法解析"""

    def __init__(self, spec: str, reason: str):
        super().__init__(f"invalid keyword specification '{spec}': {reason}")
        self.spec = spec
        self.reason = reason


class FlagSpecError(ConfigError):
    """标志规格字符串无法解析"""

    def __init__(self, spec: str, reason: str):
        super().__init__(f"invalid flag specification '{spec}': {reason}")
        self.spec = spec
        self.reason = reason


class InvalidFormatError(ArmaGettextError, ValueError):
    """
    格式字符串无效

    Attributes:
        reason: 人类可读的错误描述
        offset: 出错字符在字符串中的位置 (0-based)
    """

    def __init__(self, reason: str, offset: Optional[int] = None):
        super().__init__(reason)
        self.reason = reason
        self.offset = offset


class PushbackOverflowError(RuntimeError):
    """
    回退缓冲区溢出

    说明上层词法分析超出了设计的前瞻深度，属于程序错误，不应被捕获。
    """
    pass
