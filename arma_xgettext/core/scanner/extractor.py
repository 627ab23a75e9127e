"""
调用提取

文件被切分为高层词法单元后，按括号递归下降，寻找

    keyword ( ... msgid ... )
    keyword [ ... msgid ... ]
    keyword "msgid"

这样的形式。参数之前或参数之间可以嵌套相同形式的子表达式，所以使用递归。
语法错误留给游戏引擎报告，这里假设输入是合法的脚本。
"""

import logging
from enum import Enum

from arma_xgettext.core.arglist import ArgListParser
from arma_xgettext.core.catalog import Catalog
from arma_xgettext.core.flags import (
    NULL_CONTEXT,
    FlagContext,
    FlagContextIterator,
    FlagContextTable,
    inherited_context,
    null_iterator,
    passthrough_iterator,
)
from arma_xgettext.core.scanner.lexer import HighLevelLexer
from arma_xgettext.core.scanner.models import HighLevelToken, HighLevelType, ScanState

logger = logging.getLogger(__name__)


class ExtractorState(Enum):
    SEEKING = "seeking"
    AFTER_KEYWORD = "after_keyword"


class CallExtractor:
    """在高层词法单元流上递归下降，把字面量交给消息目录"""

    def __init__(
        self,
        lexer: HighLevelLexer,
        catalog: Catalog,
        flags: FlagContextTable,
        state: ScanState,
        extract_all: bool = False,
    ):
        self._lexer = lexer
        self._catalog = catalog
        self._flags = flags
        self._state = state
        self._extract_all = extract_all

    def extract_all_calls(self) -> None:
        """提取整个文件；遇到不匹配的右括号时从顶层重新开始"""
        while not self.extract_parenthesized(NULL_CONTEXT, null_iterator(), ArgListParser(self._catalog)):
            logger.debug(
                f"{self._state.logical_file_name}:{self._state.line_number}: "
                f"unbalanced closing delimiter, restarting"
            )

    def extract_parenthesized(
        self,
        outer_context: FlagContext,
        context_iter: FlagContextIterator,
        argparser: ArgListParser,
    ) -> bool:
        """
        提取消息直到下一个匹配的右括号

        Returns:
            遇到文件末尾返回 True，遇到右括号返回 False
        """
        arg = 1
        state = ExtractorState.SEEKING
        # 最近一个关键字的调用形状，仅在 AFTER_KEYWORD 状态下有效
        next_shapes = ()
        # 下一个 ( 使用的上下文迭代器
        next_context_iter = passthrough_iterator()
        inner_context = inherited_context(outer_context, context_iter.advance())

        while True:
            token = self._lexer.next_token()
            kind = token.type

            if kind == HighLevelType.KEYWORD:
                next_shapes = token.shapes
                state = ExtractorState.AFTER_KEYWORD
                next_context_iter = self._flags.lookup(token.text)

            elif kind == HighLevelType.SYMBOL:
                state = ExtractorState.SEEKING
                next_context_iter = self._flags.lookup(token.text)

            elif kind in (HighLevelType.LPAREN, HighLevelType.LSQBR):
                # 圆括号和方括号不加区分，它们总是成对出现
                shapes = next_shapes if state == ExtractorState.AFTER_KEYWORD else None
                if self.extract_parenthesized(
                    inner_context, next_context_iter, ArgListParser(self._catalog, shapes)
                ):
                    argparser.done(arg)
                    return True
                next_context_iter = null_iterator()
                state = ExtractorState.SEEKING

            elif kind in (HighLevelType.RPAREN, HighLevelType.RSQBR):
                argparser.done(arg)
                return False

            elif kind == HighLevelType.COMMA:
                arg += 1
                inner_context = inherited_context(outer_context, context_iter.advance())
                next_context_iter = passthrough_iterator()
                state = ExtractorState.SEEKING

            elif kind == HighLevelType.COLON:
                next_context_iter = null_iterator()
                state = ExtractorState.SEEKING

            elif kind == HighLevelType.STRING_LITERAL:
                self._string_literal(token, state, next_shapes, argparser, arg, inner_context)
                next_context_iter = null_iterator()
                state = ExtractorState.SEEKING

            elif kind == HighLevelType.DOLLAR_LITERAL:
                # $STR_xxx 总是直接作为消息
                self._catalog.remember(None, token.text, inner_context, token.position, token.comment)
                next_context_iter = null_iterator()
                state = ExtractorState.SEEKING

            elif kind == HighLevelType.OTHER:
                next_context_iter = null_iterator()
                state = ExtractorState.SEEKING

            elif kind == HighLevelType.EOF:
                argparser.done(arg)
                return True

            else:
                raise AssertionError(f"unexpected token type {kind}")

    def _string_literal(
        self,
        token: HighLevelToken,
        state: ExtractorState,
        next_shapes,
        argparser: ArgListParser,
        arg: int,
        inner_context: FlagContext,
    ) -> None:
        if self._extract_all:
            self._catalog.remember(None, token.text, inner_context, token.position, token.comment)
        elif state == ExtractorState.AFTER_KEYWORD:
            # 关键字后直接跟字符串也是一次调用：localize "STR_x"
            call = ArgListParser(self._catalog, next_shapes)
            call.remember(1, token.text, inner_context, token.position, token.comment)
            call.done(1)
        else:
            argparser.remember(arg, token.text, inner_context, token.position, token.comment)
