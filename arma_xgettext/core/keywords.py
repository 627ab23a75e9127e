"""Keyword call shapes.

A keyword specification has the form ``name[:argspec[,argspec...]]``
where each argspec is one of

- ``N``: the singular message (first occurrence) or the plural message
  (second occurrence) is argument N,
- ``Nc``: argument N is the message context,
- ``Nt``: the call must have exactly N arguments,
- ``"text"``: an extracted comment attached to every message found.
"""

import logging
import re
from collections.abc import Iterator, Mapping
from dataclasses import dataclass, field
from typing import Iterable, Optional

from arma_xgettext.core.errors import KeywordSpecError

logger = logging.getLogger(__name__)

DEFAULT_KEYWORDS: tuple[str, ...] = ("localize",)

_NAME_RE = re.compile(r'^[A-Za-z_][A-Za-z0-9_]*$')
_ARG_RE = re.compile(r'^([0-9]+)([ct]?)$')


@dataclass(frozen=True)
class CallShape:
    """
    Which arguments of a keyword call carry translatable text.

    Attributes:
        argnum1: argument holding the singular message (1-based)
        argnum2: argument holding the plural message, 0 if none
        argnumc: argument holding the message context, 0 if none
        argtotal: required number of arguments, 0 if any
        xcomments: extracted comments added to the message
    """
    argnum1: int = 1
    argnum2: int = 0
    argnumc: int = 0
    argtotal: int = 0
    xcomments: tuple[str, ...] = ()

    def is_message_argument(self, argnum: int) -> bool:
        return argnum in (self.argnum1, self.argnum2, self.argnumc)


def _split_argspecs(spec: str, argspec: str) -> list[str]:
    items: list[str] = []
    current = []
    in_quote = False
    for c in argspec:
        if c == '"':
            in_quote = not in_quote
        if c == ',' and not in_quote:
            items.append(''.join(current))
            current = []
        else:
            current.append(c)
    if in_quote:
        raise KeywordSpecError(spec, "unterminated comment")
    items.append(''.join(current))
    return items


def split_keyword_spec(spec: str) -> tuple[str, CallShape]:
    """Parse a keyword specification into its name and call shape."""
    name, colon, argspec = spec.partition(':')
    if not _NAME_RE.match(name):
        raise KeywordSpecError(spec, f"'{name}' is not an identifier")
    if not colon:
        return name, CallShape()
    if not argspec:
        raise KeywordSpecError(spec, "empty argument specification")

    positional: list[int] = []
    argnumc = 0
    argtotal = 0
    xcomments: list[str] = []
    for item in _split_argspecs(spec, argspec):
        item = item.strip()
        if len(item) >= 2 and item[0] == '"' and item[-1] == '"':
            xcomments.append(item[1:-1])
            continue
        match = _ARG_RE.match(item)
        if not match or int(match.group(1)) == 0:
            raise KeywordSpecError(spec, f"bad argument '{item}'")
        number, suffix = int(match.group(1)), match.group(2)
        if suffix == 'c':
            if argnumc:
                raise KeywordSpecError(spec, "more than one context argument")
            argnumc = number
        elif suffix == 't':
            if argtotal:
                raise KeywordSpecError(spec, "more than one total argument count")
            argtotal = number
        else:
            if len(positional) == 2:
                raise KeywordSpecError(spec, "more than two message arguments")
            positional.append(number)

    if not positional:
        if argnumc:
            raise KeywordSpecError(spec, "context argument without a message argument")
        positional.append(1)
    argnum1 = positional[0]
    argnum2 = positional[1] if len(positional) > 1 else 0
    used = [n for n in (argnum1, argnum2, argnumc) if n]
    if len(set(used)) != len(used):
        raise KeywordSpecError(spec, "the same argument is used twice")
    if argtotal and max(used) > argtotal:
        raise KeywordSpecError(spec, "argument number exceeds the total argument count")
    return name, CallShape(
        argnum1=argnum1,
        argnum2=argnum2,
        argnumc=argnumc,
        argtotal=argtotal,
        xcomments=tuple(xcomments),
    )


class KeywordTable(Mapping[str, tuple[CallShape, ...]]):
    """Read-only lookup from identifier to its call shapes."""

    def __init__(self, shapes: Optional[Mapping[str, Iterable[CallShape]]] = None):
        self._shapes: dict[str, tuple[CallShape, ...]] = {
            name: tuple(value) for name, value in (shapes or {}).items()
        }

    def __getitem__(self, name: str) -> tuple[CallShape, ...]:
        return self._shapes[name]

    def __iter__(self) -> Iterator[str]:
        return iter(self._shapes)

    def __len__(self) -> int:
        return len(self._shapes)

    def __repr__(self) -> str:
        return f"KeywordTable({sorted(self._shapes)})"


@dataclass
class KeywordTableBuilder:
    """
    Collects keyword specifications before a scan.

    ``add(None)`` (or an empty string) turns the default keywords off,
    mirroring a bare ``--keyword`` option.
    """
    default_keywords: bool = True
    _shapes: dict[str, list[CallShape]] = field(default_factory=dict)

    def add(self, spec: Optional[str]) -> "KeywordTableBuilder":
        if not spec:
            self.default_keywords = False
            return self
        name, shape = split_keyword_spec(spec)
        shapes = self._shapes.setdefault(name, [])
        if shape not in shapes:
            shapes.append(shape)
        logger.debug(f"Registered keyword {name} {shape}")
        return self

    def build(self) -> KeywordTable:
        if self.default_keywords:
            for spec in DEFAULT_KEYWORDS:
                name, shape = split_keyword_spec(spec)
                shapes = self._shapes.setdefault(name, [])
                if shape not in shapes:
                    shapes.append(shape)
        return KeywordTable(self._shapes)


def build_keyword_table(specs: Iterable[Optional[str]] = (), default_keywords: bool = True) -> KeywordTable:
    builder = KeywordTableBuilder(default_keywords=default_keywords)
    for spec in specs:
        builder.add(spec)
    return builder.build()
