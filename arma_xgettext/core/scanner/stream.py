"""
字符流规范化

逐层包装的字符过滤器，每一层拥有其下一层以及自己的固定容量回退缓冲区：

1. RawReader: 统一行尾 (\\r, \\n, \\r\\n -> \\n)
2. LineSplicer: 删除反斜杠续行，统计逻辑行号
3. CommentFilter: 将注释替换为单个分隔符，并记录注释文本

Arma 文件不使用三字符组 (trigraph)，因此没有对应的层。
"""

import logging
from typing import TextIO

from arma_xgettext.core.errors import PushbackOverflowError, ScanError
from arma_xgettext.core.scanner.models import EOF, ScanState

logger = logging.getLogger(__name__)

READ_CHUNK_SIZE = 8192


class PushbackBuffer:
    """固定容量的回退缓冲区"""

    def __init__(self, capacity: int, layer: str):
        self.capacity = capacity
        self.layer = layer
        self._items: list = []

    def push(self, item) -> None:
        if len(self._items) >= self.capacity:
            raise PushbackOverflowError(
                f"{self.layer}: pushback capacity of {self.capacity} exceeded"
            )
        self._items.append(item)

    def pop(self):
        return self._items.pop()

    def __bool__(self) -> bool:
        return bool(self._items)

    def __len__(self) -> int:
        return len(self._items)


class RawReader:
    """
    读取原始字符并统一行尾

    文件应以 newline="" 打开，以便在这里处理 \\r。
    读取错误被视为致命错误，以 ScanError 报告真实文件名。
    """

    def __init__(self, fp: TextIO, real_filename: str):
        self._fp = fp
        self.real_filename = real_filename
        self._buffer = ""
        self._offset = 0
        self._at_eof = False
        self._pushback = PushbackBuffer(1, "raw reader")

    def _read(self) -> str:
        if self._offset >= len(self._buffer):
            if self._at_eof:
                return EOF
            try:
                self._buffer = self._fp.read(READ_CHUNK_SIZE)
            except OSError as e:
                raise ScanError(self.real_filename, e.strerror or str(e)) from e
            except UnicodeDecodeError as e:
                raise ScanError(self.real_filename, str(e)) from e
            self._offset = 0
            if not self._buffer:
                self._at_eof = True
                return EOF
        c = self._buffer[self._offset]
        self._offset += 1
        return c

    def get(self) -> str:
        if self._pushback:
            return self._pushback.pop()
        c = self._read()
        if c == '\r':
            c1 = self._read()
            if c1 != EOF and c1 != '\n':
                self._pushback.push(c1)
            # CR 或 CR/LF 行尾
            return '\n'
        return c

    def unget(self, c: str) -> None:
        if c != EOF:
            self._pushback.push(c)


class LineSplicer:
    """
    合并以反斜杠结尾的行并维护逻辑行号

    每个保留下来的 \\n 使行号加一；被删除的 "\\\\\\n" 同样加一，但不产生换行。
    """

    def __init__(self, raw: RawReader, state: ScanState):
        self._raw = raw
        self._state = state
        self._pushback = PushbackBuffer(2, "line splicer")

    def get(self) -> str:
        if self._pushback:
            c = self._pushback.pop()
            if c == '\n':
                self._state.line_number += 1
            return c
        while True:
            c = self._raw.get()
            if c == '\n':
                self._state.line_number += 1
                return c
            if c != '\\':
                return c
            c = self._raw.get()
            if c != '\n':
                self._raw.unget(c)
                return '\\'
            self._state.line_number += 1

    def unget(self, c: str) -> None:
        if c == EOF:
            return
        if c == '\n':
            self._state.line_number -= 1
        self._pushback.push(c)


class CommentFilter:
    """
    将注释替换为分隔符

    /* ... */ 替换为一个空格，// ... 替换为行尾本身。
    注释文本按物理行拆分为片段，写入当前的注释快照。
    未结束的块注释静默地延续到文件末尾。
    """

    def __init__(self, splicer: LineSplicer, state: ScanState):
        self._splicer = splicer
        self._state = state

    def _line_end(self, buffer: list[str], chars_to_remove: int) -> None:
        if chars_to_remove:
            del buffer[-chars_to_remove:]
        self._state.add_comment(''.join(buffer).rstrip(' \t'))

    def get(self) -> str:
        c = self._splicer.get()
        if c != '/':
            return c
        c = self._splicer.get()
        if c == '*':
            self._block_comment()
            self._state.last_comment_line = self._state.newline_count
            return ' '
        if c == '/':
            self._line_comment()
            self._state.last_comment_line = self._state.newline_count
            return '\n'
        self._splicer.unget(c)
        return '/'

    def _block_comment(self) -> None:
        buffer: list[str] = []
        last_was_star = False
        while True:
            c = self._splicer.get()
            if c == EOF:
                return
            # 跳过每行开头的空白，但保留行尾
            if not (not buffer and c in ' \t'):
                buffer.append(c)
            if c == '\n':
                self._line_end(buffer, 1)
                buffer = []
                last_was_star = False
            elif c == '*':
                last_was_star = True
            elif c == '/' and last_was_star:
                self._line_end(buffer, 2)
                return
            else:
                last_was_star = False

    def _line_comment(self) -> None:
        buffer: list[str] = []
        while True:
            c = self._splicer.get()
            if c == '\n' or c == EOF:
                break
            if not (not buffer and c in ' \t'):
                buffer.append(c)
        self._line_end(buffer, 0)

    def unget(self, c: str) -> None:
        self._splicer.unget(c)
