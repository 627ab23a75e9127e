"""
共享数据模型

目录和扫描器共同使用的位置与注释快照类型。
"""

from dataclasses import dataclass

# 注释快照：不可变的注释片段序列，可被多个词法单元共享
CommentSnapshot = tuple[str, ...]


@dataclass(frozen=True)
class Position:
    """
    逻辑位置

    Attributes:
        file_name: 逻辑文件名（可被 #line 指令改写）
        line_number: 逻辑行号 (1-based)
    """
    file_name: str
    line_number: int

    def __str__(self) -> str:
        return f"{self.file_name}:{self.line_number}"
