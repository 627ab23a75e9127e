"""Arma format strings.

Format strings are consumed by the SQF ``format`` and ``formatText``
commands. A directive starts with ``%`` and is followed by the number of
the argument to put at that position. Numbers are 0-based positions in
the argument list of this module's analysis; ``%%`` is not an escape, a
literal percent sign has to be passed in as an argument instead::

    format ["146%1", "%"];
"""

from dataclasses import dataclass
from typing import Callable, Optional

from arma_xgettext.core.errors import InvalidFormatError

# Directive numbers at or above this bound are rejected.
MAX_ARGUMENT_INDEX = 8192

ErrorLogger = Callable[[str], None]


@dataclass(frozen=True)
class FormatSpec:
    """
    Parsed format string.

    Attributes:
        directives: number of ``%n`` directives
        args_used: argument numbers referenced at least once
        arg_count: highest referenced argument number + 1
    """
    directives: int = 0
    args_used: frozenset[int] = frozenset()
    arg_count: int = 0

    def is_used(self, index: int) -> bool:
        return index in self.args_used


def parse_format(text: str) -> FormatSpec:
    """
    Parse ``text`` as an Arma format string.

    Raises:
        InvalidFormatError: for a ``%`` at the end of the string, a ``%``
            followed by anything but a digit, or a directive number that
            is too large.
    """
    directives = 0
    args_used: set[int] = set()
    arg_count = 0
    length = len(text)
    i = 0
    while i < length:
        c = text[i]
        i += 1
        if c != '%':
            continue
        if i >= length:
            raise InvalidFormatError("The string ends in the middle of a directive.", i - 1)
        if not text[i].isdigit() or not text[i].isascii():
            raise InvalidFormatError(
                f"In the directive number {directives + 1}, the character "
                f"'{text[i]}' is not a valid conversion specifier.",
                i,
            )
        start = i
        while i < length and text[i].isascii() and text[i].isdigit():
            i += 1
        number = int(text[start:i])
        if number >= MAX_ARGUMENT_INDEX:
            raise InvalidFormatError(
                f"In the directive number {directives + 1}, the argument number "
                f"{number} exceeds the limit of {MAX_ARGUMENT_INDEX - 1}.",
                start,
            )
        directives += 1
        args_used.add(number)
        arg_count = max(arg_count, number + 1)
    return FormatSpec(directives=directives, args_used=frozenset(args_used), arg_count=arg_count)


def is_valid_format(text: str) -> bool:
    try:
        parse_format(text)
    except InvalidFormatError:
        return False
    return True


def check_format(
    msgid_spec: FormatSpec,
    msgstr_spec: FormatSpec,
    error_logger: Optional[ErrorLogger] = None,
    pretty_msgid: str = "msgid",
    pretty_msgstr: str = "msgstr",
) -> bool:
    """
    Compare the arguments referenced by a template and its translation.

    Every argument number used on one side must be used on the other: a
    translator can neither drop a ``%n`` (the game warns about a missing
    argument) nor invent one. Only the first mismatch is reported.

    Returns:
        True if the pair is invalid.
    """
    for i in range(max(msgid_spec.arg_count, msgstr_spec.arg_count)):
        used1 = msgid_spec.is_used(i)
        used2 = msgstr_spec.is_used(i)
        if used1 == used2:
            continue
        if error_logger is not None:
            if used1:
                error_logger(
                    f"a format specification for argument {i} doesn't exist in '{pretty_msgstr}'"
                )
            else:
                error_logger(
                    f"a format specification for argument {i}, as in '{pretty_msgstr}', "
                    f"doesn't exist in '{pretty_msgid}'"
                )
        return True
    return False


def check_format_strings(
    template: str,
    translation: str,
    error_logger: Optional[ErrorLogger] = None,
) -> bool:
    """Parse both strings and compare them; parse errors count as invalid."""
    try:
        msgid_spec = parse_format(template)
    except InvalidFormatError as e:
        if error_logger is not None:
            error_logger(f"'msgid' is not a valid Arma format string: {e.reason}")
        return True
    try:
        msgstr_spec = parse_format(translation)
    except InvalidFormatError as e:
        if error_logger is not None:
            error_logger(f"'msgstr' is not a valid Arma format string: {e.reason}")
        return True
    return check_format(msgid_spec, msgstr_spec, error_logger)
