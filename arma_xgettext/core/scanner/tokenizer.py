"""
词法分析

将去除注释后的字符流转换为预处理词法单元。仅根据首字符分派：
名称、$ 字面量、数字、字符串、显式换行 \\n、标点、空白、行尾和其他符号。
"""

import logging
import re

from arma_xgettext.core.scanner.models import EOF, ScanState, Token, TokenType
from arma_xgettext.core.scanner.stream import CommentFilter, LineSplicer, PushbackBuffer

logger = logging.getLogger(__name__)

PUNCTUATION: dict[str, TokenType] = {
    '(': TokenType.LPAREN,
    ')': TokenType.RPAREN,
    '[': TokenType.LSQBR,
    ']': TokenType.RSQBR,
    ',': TokenType.COMMA,
    '#': TokenType.HASH,
    ':': TokenType.COLON,
}

WHITESPACE = ' \t\f'

_LEADING_INTEGER = re.compile(r'[0-9]*')


def is_identifier_start(c: str) -> bool:
    return c != EOF and c.isascii() and (c.isalpha() or c == '_')


def is_identifier_char(c: str) -> bool:
    return c != EOF and c.isascii() and (c.isalnum() or c == '_')


def is_digit(c: str) -> bool:
    return c != EOF and c in '0123456789'


def _number_value(text: str) -> int:
    # 与 atol 一致：只取开头的十进制数字
    digits = _LEADING_INTEGER.match(text).group(0)
    return int(digits) if digits else 0


def normalize_dollar_literal(name: str) -> str:
    """将 $ 字面量的 str 前缀统一为小写，其余部分保持原样"""
    if len(name) >= 3 and name[:3].lower() == "str":
        return "str" + name[3:]
    return name


class Tokenizer:
    """预处理词法单元流，支持一个词法单元的回退"""

    def __init__(self, chars: CommentFilter, splicer: LineSplicer, state: ScanState):
        self._chars = chars
        # 字符串内部不识别注释，直接从续行层读取
        self._splicer = splicer
        self._state = state
        self._pushback = PushbackBuffer(1, "tokenizer")

    def unget(self, token: Token) -> None:
        if token.type != TokenType.EOF:
            self._pushback.push(token)

    def next_token(self) -> Token:
        if self._pushback:
            return self._pushback.pop()

        line_number = self._state.line_number
        c = self._chars.get()

        if c == EOF:
            return Token(TokenType.EOF, line_number)
        if c == '\n':
            return Token(TokenType.EOLN, line_number)
        if c in WHITESPACE:
            self._skip_whitespace()
            return Token(TokenType.WHITE_SPACE, line_number)
        if is_identifier_start(c):
            return Token(TokenType.NAME, line_number, text=self._read_identifier(c))
        if c == '$':
            return self._read_dollar_literal(line_number)
        if c == '.':
            c1 = self._chars.get()
            self._chars.unget(c1)
            if not is_digit(c1):
                return Token(TokenType.SYMBOL, line_number)
            return self._read_number(c, line_number)
        if is_digit(c):
            return self._read_number(c, line_number)
        if c in ('"', "'"):
            return self._read_string(c, line_number)
        if c in PUNCTUATION:
            return Token(PUNCTUATION[c], line_number)
        if c == '\\':
            c1 = self._chars.get()
            if c1 == 'n':
                return Token(
                    TokenType.EOLN_EXPLICIT,
                    line_number,
                    text="\n",
                    comment=self._state.comment,
                )
            self._chars.unget(c1)
        # 运算符无需逐一区分，只要知道它们不是字符串、关键字或感兴趣的标点
        return Token(TokenType.SYMBOL, line_number)

    def _skip_whitespace(self) -> None:
        while True:
            c = self._chars.get()
            if c == EOF or c not in WHITESPACE:
                self._chars.unget(c)
                return

    def _read_identifier(self, first: str) -> str:
        chars = [first]
        while True:
            c = self._chars.get()
            if not is_identifier_char(c):
                self._chars.unget(c)
                return ''.join(chars)
            chars.append(c)

    def _read_dollar_literal(self, line_number: int) -> Token:
        c = self._chars.get()
        if not is_identifier_start(c):
            # 单独的 $ 视为普通符号
            self._chars.unget(c)
            return Token(TokenType.SYMBOL, line_number)
        name = normalize_dollar_literal(self._read_identifier(c))
        return Token(
            TokenType.DOLLAR_LITERAL,
            line_number,
            text=name,
            comment=self._state.comment,
        )

    def _read_number(self, first: str, line_number: int) -> Token:
        """
        预处理数字比语言本身的数字更宽松：字母、数字、小数点以及
        带可选符号的指数都被并入同一个词法单元。
        """
        chars = [first]
        while True:
            c = self._chars.get()
            if c in ('e', 'E'):
                chars.append(c)
                c = self._chars.get()
                if c in ('+', '-'):
                    chars.append(c)
                else:
                    self._chars.unget(c)
                continue
            if c != EOF and c.isascii() and (c.isalnum() or c == '.'):
                chars.append(c)
                continue
            self._chars.unget(c)
            break
        text = ''.join(chars)
        return Token(TokenType.NUMBER, line_number, text=text, number=_number_value(text))

    def _read_string(self, quote: str, line_number: int) -> Token:
        """
        读取字符串字面量

        - 同种引号连续出现两次表示一个字面引号
        - 另一种引号不是特殊字符
        - 没有反斜杠转义
        - 遇到换行时给出警告并在此处结束，换行被放回重新处理
        - 遇到文件末尾时静默结束
        """
        chars: list[str] = []
        while True:
            c = self._splicer.get()
            if c == quote:
                c = self._splicer.get()
                if c == quote:
                    chars.append(c)
                    continue
                self._splicer.unget(c)
                break
            if c == EOF:
                break
            if c == '\n':
                logger.warning(
                    f"{self._state.logical_file_name}:{self._state.line_number - 1}: "
                    f"warning: unterminated string literal"
                )
                self._splicer.unget(c)
                break
            chars.append(c)
        return Token(
            TokenType.STRING_LITERAL,
            line_number,
            text=''.join(chars),
            comment=self._state.comment,
        )
