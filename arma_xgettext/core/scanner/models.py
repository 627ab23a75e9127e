"""
数据模型定义

包含扫描器各层使用的数据类：位置、词法单元、扫描状态和扫描结果。
"""

from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Optional

from arma_xgettext.core.keywords import CallShape
from arma_xgettext.core.models import CommentSnapshot, Position

# 字符流结束标记
EOF = ""


@dataclass
class ScanState:
    """
    单个文件扫描期间的共享状态

    每次扫描新文件时重新创建，不跨文件复用。

    Attributes:
        logical_file_name: 当前逻辑文件名
        line_number: 当前逻辑行号
        newline_count: 已跳过的行尾数量（用于注释相邻判断）
        last_comment_line: 最近一个注释结束时的 newline_count
        last_non_comment_line: 最近一个非注释词法单元出现时的 newline_count
        comment: 当前注释快照
    """
    logical_file_name: str
    line_number: int = 1
    newline_count: int = 0
    last_comment_line: int = -1
    last_non_comment_line: int = -1
    comment: CommentSnapshot = ()

    def position(self, line_number: Optional[int] = None) -> Position:
        return Position(self.logical_file_name, self.line_number if line_number is None else line_number)

    def add_comment(self, fragment: str) -> None:
        # 总是创建新元组，已被词法单元引用的快照保持不变
        self.comment = self.comment + (fragment,)

    def reset_comment(self) -> None:
        self.comment = ()


class TokenType(Enum):
    EOF = auto()
    EOLN = auto()
    EOLN_EXPLICIT = auto()     # \n (不在字符串内)
    HASH = auto()              # #
    LPAREN = auto()            # (
    RPAREN = auto()            # )
    LSQBR = auto()             # [
    RSQBR = auto()             # ]
    COMMA = auto()             # ,
    COLON = auto()             # :
    NAME = auto()              # abc
    NUMBER = auto()            # 2.7
    STRING_LITERAL = auto()    # "abc", 'abc'
    DOLLAR_LITERAL = auto()    # $STR_myTag_strName
    SYMBOL = auto()            # < > = 等
    WHITE_SPACE = auto()


@dataclass
class Token:
    """
    预处理词法单元

    Attributes:
        type: 类型
        line_number: 词法单元开始时的逻辑行号
        text: 名称、字符串和 $ 字面量的文本
        number: 数字的整数值
        comment: 字符串和 $ 字面量附带的注释快照
    """
    type: TokenType
    line_number: int = 0
    text: Optional[str] = None
    number: int = 0
    comment: CommentSnapshot = ()

    def is_literal(self) -> bool:
        return self.type in (TokenType.STRING_LITERAL, TokenType.EOLN_EXPLICIT)


class HighLevelType(Enum):
    EOF = auto()
    KEYWORD = auto()
    SYMBOL = auto()
    LPAREN = auto()
    RPAREN = auto()
    LSQBR = auto()
    RSQBR = auto()
    COMMA = auto()
    COLON = auto()
    STRING_LITERAL = auto()
    DOLLAR_LITERAL = auto()
    OTHER = auto()


@dataclass
class HighLevelToken:
    """
    提取器使用的高层词法单元

    Attributes:
        type: 类型
        text: 关键字、符号名和字面量的文本
        shapes: 关键字的调用形状
        comment: 字面量的注释快照
        position: 关键字和字面量的逻辑位置
    """
    type: HighLevelType
    text: Optional[str] = None
    shapes: tuple[CallShape, ...] = ()
    comment: CommentSnapshot = ()
    position: Optional[Position] = None


@dataclass
class FileError:
    """
    无法扫描的文件

    Attributes:
        file_path: 文件路径
        reason: 失败原因
    """
    file_path: str
    reason: str


@dataclass
class ScanResult:
    """
    多文件扫描结果

    Attributes:
        files: 成功扫描的文件
        errors: 扫描失败的文件
    """
    files: list[str] = field(default_factory=list)
    errors: list[FileError] = field(default_factory=list)
