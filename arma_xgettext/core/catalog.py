"""
消息目录

提取器把每个找到的字面量交给 Catalog.remember()。相同 (msgctxt, msgid)
的消息被合并：引用位置、注释和格式标志累加。
"""

import logging
from dataclasses import dataclass, field
from typing import Iterator, Optional

from arma_xgettext.core.errors import InvalidFormatError
from arma_xgettext.core.flags import FORMAT_NAME, FlagContext, FormatDecision
from arma_xgettext.core.format import ErrorLogger, check_format_strings, parse_format
from arma_xgettext.core.models import CommentSnapshot, Position

logger = logging.getLogger(__name__)

_DECISION_FLAGS: dict[FormatDecision, str] = {
    FormatDecision.YES: FORMAT_NAME,
    FormatDecision.NO: f"no-{FORMAT_NAME}",
    FormatDecision.POSSIBLE: f"possible-{FORMAT_NAME}",
    FormatDecision.IMPOSSIBLE: f"impossible-{FORMAT_NAME}",
}


@dataclass
class Message:
    """
    提取出的消息

    Attributes:
        msgid: 消息文本
        msgctxt: 消息上下文
        msgid_plural: 复数形式
        references: 出现位置
        comments: 源代码中紧挨着的注释
        extracted_comments: 关键字规格中给出的注释
        flags: 格式标志，如 arma-format
    """
    msgid: str
    msgctxt: Optional[str] = None
    msgid_plural: Optional[str] = None
    references: list[Position] = field(default_factory=list)
    comments: list[str] = field(default_factory=list)
    extracted_comments: list[str] = field(default_factory=list)
    flags: list[str] = field(default_factory=list)

    @property
    def key(self) -> tuple[Optional[str], str]:
        return (self.msgctxt, self.msgid)

    def add_flag(self, flag: str) -> None:
        if flag in self.flags:
            return
        possible = f"possible-{FORMAT_NAME}"
        if flag == possible and any(f != possible and f.endswith(FORMAT_NAME) for f in self.flags):
            return
        if flag != possible and possible in self.flags:
            self.flags.remove(possible)
        self.flags.append(flag)


@dataclass
class FormatIssue:
    """标记为 arma-format 但无法解析的消息"""
    position: Position
    msgid: str
    reason: str


class Catalog:
    """
    消息目录

    Args:
        comment_tag: 注释选择策略。None 不保留注释，空字符串保留全部，
            其他值只保留从第一个以该标记开头的注释行起的内容。
    """

    def __init__(self, comment_tag: Optional[str] = None):
        self.comment_tag = comment_tag
        self._messages: dict[tuple[Optional[str], str], Message] = {}
        self.format_errors: list[FormatIssue] = []

    def __iter__(self) -> Iterator[Message]:
        return iter(self._messages.values())

    def __len__(self) -> int:
        return len(self._messages)

    def get(self, msgid: str, msgctxt: Optional[str] = None) -> Optional[Message]:
        return self._messages.get((msgctxt, msgid))

    @property
    def messages(self) -> list[Message]:
        return list(self._messages.values())

    def remember(
        self,
        msgctxt: Optional[str],
        msgid: str,
        context: FlagContext,
        position: Position,
        comment: CommentSnapshot = (),
        msgid_plural: Optional[str] = None,
        xcomments: tuple[str, ...] = (),
    ) -> Optional[Message]:
        """记录一条消息，返回合并后的目录条目"""
        if msgid == "":
            logger.warning(
                f"{position}: warning: Empty msgid. It is reserved by GNU gettext: "
                f'gettext("") returns the header entry with meta information, '
                f"not the empty string."
            )
            return None

        key = (msgctxt, msgid)
        message = self._messages.get(key)
        if message is None:
            message = Message(msgid=msgid, msgctxt=msgctxt)
            self._messages[key] = message
            logger.debug(f"{position}: new message {msgid!r}")
        if msgid_plural is not None and message.msgid_plural is None:
            message.msgid_plural = msgid_plural
        if position not in message.references:
            message.references.append(position)
        for line in self._select_comments(comment):
            if line not in message.comments:
                message.comments.append(line)
        for line in xcomments:
            if line not in message.extracted_comments:
                message.extracted_comments.append(line)

        flag = self._decide_format(msgid, context, position)
        if msgid_plural is not None:
            flag = flag or self._decide_format(msgid_plural, context, position)
        if flag:
            message.add_flag(flag)
        return message

    def _select_comments(self, comment: CommentSnapshot) -> list[str]:
        if self.comment_tag is None:
            return []
        if self.comment_tag == "":
            return list(comment)
        for i, line in enumerate(comment):
            if line.lstrip().startswith(self.comment_tag):
                return list(comment[i:])
        return []

    def _decide_format(self, text: str, context: FlagContext, position: Position) -> Optional[str]:
        decision = context.is_format
        if decision == FormatDecision.UNDECIDED:
            try:
                spec = parse_format(text)
            except InvalidFormatError:
                return None
            return _DECISION_FLAGS[FormatDecision.POSSIBLE] if spec.directives else None
        if decision == FormatDecision.YES:
            try:
                parse_format(text)
            except InvalidFormatError as e:
                logger.error(f"{position}: '{text}' is not a valid Arma format string: {e.reason}")
                self.format_errors.append(FormatIssue(position, text, e.reason))
        return _DECISION_FLAGS[decision]

    def check_translation(
        self,
        msgid: str,
        msgstr: str,
        error_logger: Optional[ErrorLogger] = None,
    ) -> bool:
        """校验译文与原文引用的参数是否一致，返回 True 表示无效"""
        return check_format_strings(msgid, msgstr, error_logger)
