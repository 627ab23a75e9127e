"""
预处理指令与字面量拼接

- HashFilter: 只保留行首的 #，行中的 # 变为普通符号
- DirectiveInterpreter: 执行 #line 类指令，#define 之后的内容按普通输入处理，
  其他指令直接丢弃（不做宏展开）
- BlankFilter: 丢弃空白和行尾，维护注释与关键字的相邻关系
- LiteralConcatenator: 拼接相邻的字符串字面量
"""

import logging

from arma_xgettext.core.scanner.models import ScanState, Token, TokenType
from arma_xgettext.core.scanner.stream import PushbackBuffer
from arma_xgettext.core.scanner.tokenizer import Tokenizer

logger = logging.getLogger(__name__)


class HashFilter:
    """识别行首的 #（允许前导空白），把行中的 # 转为符号"""

    def __init__(self, tokenizer: Tokenizer):
        self._tokenizer = tokenizer
        # 行首为 False，其余为 True
        self._middle = False

    def next_token(self) -> Token:
        token = self._tokenizer.next_token()
        if token.type in (TokenType.EOLN, TokenType.EOF):
            self._middle = False
            return token
        if self._middle:
            if token.type == TokenType.HASH:
                token.type = TokenType.SYMBOL
            return token
        if token.type == TokenType.WHITE_SPACE:
            following = self._tokenizer.next_token()
            if following.type == TokenType.HASH:
                token = following
            else:
                self._tokenizer.unget(following)
        self._middle = True
        return token


class DirectiveInterpreter:
    """
    执行预处理指令

    只关心行号指令:
        #line 12 "file.sqf"
        # 12 "file.sqf"
    遇到 #define 时立即返回 define 这个名称，指令体当作普通输入，
    这样可以大致覆盖宏定义中的字符串而不做宏替换。
    """

    def __init__(self, source: HashFilter, state: ScanState):
        self._source = source
        self._state = state
        self._pushback = PushbackBuffer(2, "directive interpreter")

    def unget(self, token: Token) -> None:
        if token.type != TokenType.EOF:
            self._pushback.push(token)

    def next_token(self) -> Token:
        if self._pushback:
            return self._pushback.pop()
        while True:
            token = self._source.next_token()
            if token.type != TokenType.HASH:
                return token

            directive: list[Token] = []
            while True:
                token = self._source.next_token()
                if token.type in (TokenType.EOLN, TokenType.EOF):
                    break
                # 指令中的空白没有意义
                if token.type == TokenType.WHITE_SPACE:
                    continue
                if not directive and token.type == TokenType.NAME and token.text == "define":
                    return token
                directive.append(token)

            self._apply(directive)
            # 指令行打断注释与关键字的相邻关系
            self._state.reset_comment()

    def _apply(self, directive: list[Token]) -> None:
        types = [token.type for token in directive]
        if (
            len(directive) >= 3
            and types[0] == TokenType.NAME
            and directive[0].text == "line"
            and types[1] == TokenType.NUMBER
            and types[2] == TokenType.STRING_LITERAL
        ):
            self._set_position(directive[2].text, directive[1].number)
        elif (
            len(directive) >= 2
            and types[0] == TokenType.NUMBER
            and types[1] == TokenType.STRING_LITERAL
        ):
            self._set_position(directive[1].text, directive[0].number)
        elif directive:
            logger.debug(
                f"{self._state.logical_file_name}:{self._state.line_number - 1}: "
                f"ignoring directive {directive[0].text or directive[0].type.name}"
            )

    def _set_position(self, file_name: str, line_number: int) -> None:
        logger.debug(f"Line directive: now at {file_name}:{line_number}")
        self._state.logical_file_name = file_name
        self._state.line_number = line_number


class BlankFilter:
    """
    丢弃空白和行尾

    注释只有紧挨在关键字之前才与之关联：如果注释结束后出现过含有
    非空白词法单元的行，在下一个行尾处清空注释快照。
    """

    def __init__(self, source: DirectiveInterpreter, state: ScanState):
        self._source = source
        self._state = state

    def next_token(self) -> Token:
        while True:
            token = self._source.next_token()
            if token.type == TokenType.WHITE_SPACE:
                continue
            if token.type == TokenType.EOLN:
                self._state.newline_count += 1
                if self._state.last_non_comment_line > self._state.last_comment_line:
                    self._state.reset_comment()
                continue
            return token

    def unget(self, token: Token) -> None:
        self._source.unget(token)


class LiteralConcatenator:
    """
    拼接相邻的字符串字面量

    显式换行 \\n 也算字面量，因此 "a" \\n "b" 得到 "a\\nb"。
    单独出现的显式换行被当作普通字符串字面量。
    """

    def __init__(self, source: BlankFilter):
        self._source = source

    def next_token(self) -> Token:
        token = self._source.next_token()
        if not token.is_literal():
            return token
        parts = [token.text]
        while True:
            following = self._source.next_token()
            if not following.is_literal():
                self._source.unget(following)
                break
            parts.append(following.text)
        token.type = TokenType.STRING_LITERAL
        token.text = ''.join(parts)
        return token
