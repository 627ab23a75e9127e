"""Argument binding for one keyword call.

An ``ArgListParser`` belongs to exactly one call frame of the extractor.
String literals found at the top level of the call are bound to argument
positions; when the call is closed the first call shape that is fully
satisfied produces one catalog message.
"""

import logging
from dataclasses import dataclass
from typing import Optional, Sequence

from arma_xgettext.core.catalog import Catalog
from arma_xgettext.core.flags import FlagContext
from arma_xgettext.core.keywords import CallShape
from arma_xgettext.core.models import CommentSnapshot, Position

logger = logging.getLogger(__name__)


@dataclass
class BoundLiteral:
    text: str
    context: FlagContext
    position: Position
    comment: CommentSnapshot = ()


@dataclass
class _Alternative:
    shape: CallShape
    msgctxt: Optional[BoundLiteral] = None
    msgid: Optional[BoundLiteral] = None
    msgid_plural: Optional[BoundLiteral] = None

    def bind(self, argnum: int, literal: BoundLiteral) -> None:
        # 同一参数位置只取第一个字面量
        if argnum == self.shape.argnumc and self.msgctxt is None:
            self.msgctxt = literal
        elif argnum == self.shape.argnum1 and self.msgid is None:
            self.msgid = literal
        elif argnum == self.shape.argnum2 and self.msgid_plural is None:
            self.msgid_plural = literal

    def is_complete(self, argnum: int) -> bool:
        if self.shape.argtotal and self.shape.argtotal != argnum:
            return False
        if self.msgid is None:
            return False
        if self.shape.argnumc and self.msgctxt is None:
            return False
        if self.shape.argnum2 and self.msgid_plural is None:
            return False
        return True


class ArgListParser:
    """Collects the message-bearing arguments of one call."""

    def __init__(self, catalog: Catalog, shapes: Optional[Sequence[CallShape]] = None):
        self._catalog = catalog
        self._alternatives = [_Alternative(shape) for shape in shapes or ()]
        self._finished = False

    def wants(self, argnum: int) -> bool:
        return any(alt.shape.is_message_argument(argnum) for alt in self._alternatives)

    def remember(
        self,
        argnum: int,
        text: str,
        context: FlagContext,
        position: Position,
        comment: CommentSnapshot = (),
    ) -> None:
        if not self.wants(argnum):
            return
        literal = BoundLiteral(text, context, position, comment)
        for alternative in self._alternatives:
            alternative.bind(argnum, literal)

    def done(self, argnum: int) -> None:
        """The call has ended after ``argnum`` arguments."""
        if self._finished:
            return
        self._finished = True
        for alternative in self._alternatives:
            if not alternative.is_complete(argnum):
                continue
            msgid = alternative.msgid
            self._catalog.remember(
                alternative.msgctxt.text if alternative.msgctxt else None,
                msgid.text,
                msgid.context,
                msgid.position,
                msgid.comment,
                msgid_plural=alternative.msgid_plural.text if alternative.msgid_plural else None,
                xcomments=alternative.shape.xcomments,
            )
            return
        if any(alt.msgid is not None for alt in self._alternatives):
            logger.debug(f"Call with {argnum} arguments matches no call shape")
