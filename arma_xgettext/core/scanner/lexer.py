"""
高层词法单元

把预处理词法单元映射到提取器使用的小字母表，并查询关键字表。
"""

from arma_xgettext.core.keywords import KeywordTable
from arma_xgettext.core.scanner.directives import LiteralConcatenator
from arma_xgettext.core.scanner.models import (
    HighLevelToken,
    HighLevelType,
    ScanState,
    TokenType,
)

_SIMPLE_TYPES: dict[TokenType, HighLevelType] = {
    TokenType.LPAREN: HighLevelType.LPAREN,
    TokenType.RPAREN: HighLevelType.RPAREN,
    TokenType.LSQBR: HighLevelType.LSQBR,
    TokenType.RSQBR: HighLevelType.RSQBR,
    TokenType.COMMA: HighLevelType.COMMA,
    TokenType.COLON: HighLevelType.COLON,
}


class HighLevelLexer:
    """将名称分类为关键字或普通符号，其余词法单元按类型归并"""

    def __init__(self, source: LiteralConcatenator, keywords: KeywordTable, state: ScanState):
        self._source = source
        self._keywords = keywords
        self._state = state

    def next_token(self) -> HighLevelToken:
        token = self._source.next_token()
        if token.type == TokenType.EOF:
            return HighLevelToken(HighLevelType.EOF)

        self._state.last_non_comment_line = self._state.newline_count

        if token.type == TokenType.NAME:
            shapes = self._keywords.get(token.text)
            if shapes is not None:
                return HighLevelToken(
                    HighLevelType.KEYWORD,
                    text=token.text,
                    shapes=shapes,
                    position=self._state.position(token.line_number),
                )
            return HighLevelToken(HighLevelType.SYMBOL, text=token.text)

        if token.type in (TokenType.STRING_LITERAL, TokenType.DOLLAR_LITERAL):
            high_type = (
                HighLevelType.STRING_LITERAL
                if token.type == TokenType.STRING_LITERAL
                else HighLevelType.DOLLAR_LITERAL
            )
            return HighLevelToken(
                high_type,
                text=token.text,
                comment=token.comment,
                position=self._state.position(token.line_number),
            )

        return HighLevelToken(_SIMPLE_TYPES.get(token.type, HighLevelType.OTHER))
