"""Flag contexts.

A flag context tells whether a string found at some argument position is
an Arma format string. Contexts are attached to argument positions of
named calls (``format:1:arma-format``), flow into nested groups, and are
refined position by position while the extractor walks a call.
"""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Optional

from arma_xgettext.core.errors import FlagSpecError

logger = logging.getLogger(__name__)

FORMAT_NAME = "arma-format"

DEFAULT_FLAGS: tuple[str, ...] = (
    "localize:1:pass-arma-format",
    "format:1:arma-format",
    "formatText:1:arma-format",
)


class FormatDecision(Enum):
    UNDECIDED = "undecided"
    YES = "yes"
    NO = "no"
    POSSIBLE = "possible"
    IMPOSSIBLE = "impossible"


@dataclass(frozen=True)
class FlagContext:
    """
    Format decision for one argument position.

    Attributes:
        is_format: what is known about the string at this position
        pass_format: take the decision from the enclosing context instead
    """
    is_format: FormatDecision = FormatDecision.UNDECIDED
    pass_format: bool = False


NULL_CONTEXT = FlagContext()
PASSTHROUGH_CONTEXT = FlagContext(pass_format=True)


def inherited_context(outer: FlagContext, modifier: FlagContext) -> FlagContext:
    """Apply ``modifier`` to the context of the enclosing group."""
    if modifier.pass_format:
        return FlagContext(is_format=outer.is_format)
    return modifier


class FlagContextIterator:
    """Yields the context of argument 1, 2, ... of one call."""

    def __init__(self, contexts: Optional[dict[int, FlagContext]] = None, passthrough: bool = False):
        self._contexts = contexts or {}
        self._passthrough = passthrough
        self._argnum = 0

    def advance(self) -> FlagContext:
        self._argnum += 1
        if self._passthrough:
            return PASSTHROUGH_CONTEXT
        return self._contexts.get(self._argnum, NULL_CONTEXT)


def null_iterator() -> FlagContextIterator:
    return FlagContextIterator()


def passthrough_iterator() -> FlagContextIterator:
    return FlagContextIterator(passthrough=True)


def _parse_flag(spec: str, flag: str) -> FlagContext:
    prefixes = {
        "pass-": None,
        "no-": FormatDecision.NO,
        "possible-": FormatDecision.POSSIBLE,
        "impossible-": FormatDecision.IMPOSSIBLE,
    }
    for prefix, decision in prefixes.items():
        if flag.startswith(prefix):
            if flag[len(prefix):] != FORMAT_NAME:
                break
            if decision is None:
                return PASSTHROUGH_CONTEXT
            return FlagContext(is_format=decision)
    if flag == FORMAT_NAME:
        return FlagContext(is_format=FormatDecision.YES)
    raise FlagSpecError(spec, f"unknown flag '{flag}'")


class FlagContextTable:
    """Maps call names to the flag contexts of their arguments."""

    def __init__(self, specs: tuple[str, ...] = ()):
        self._table: dict[str, dict[int, FlagContext]] = {}
        for spec in specs:
            self.record(spec)

    def record(self, spec: str) -> None:
        """Register ``name:argnum:flag``."""
        parts = spec.split(':')
        if len(parts) != 3:
            raise FlagSpecError(spec, "expected name:argnum:flag")
        name, argnum, flag = (part.strip() for part in parts)
        if not name:
            raise FlagSpecError(spec, "missing name")
        if not argnum.isdigit() or int(argnum) == 0:
            raise FlagSpecError(spec, f"bad argument number '{argnum}'")
        self._table.setdefault(name, {})[int(argnum)] = _parse_flag(spec, flag)
        logger.debug(f"Recorded flag {flag} for {name} argument {argnum}")

    def lookup(self, name: str) -> FlagContextIterator:
        contexts = self._table.get(name)
        if contexts is None:
            return null_iterator()
        return FlagContextIterator(contexts)
