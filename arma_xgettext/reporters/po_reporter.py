"""
PO 报告器 - 输出 gettext PO 模板 (.pot)
"""

import sys
from datetime import datetime
from typing import TextIO

from arma_xgettext.core.catalog import Catalog, Message
from arma_xgettext.core.scanner.models import ScanResult

# 引用行的最大宽度
PAGE_WIDTH = 79

HEADER_TEMPLATE = """\
# SOME DESCRIPTIVE TITLE.
# Copyright (C) YEAR THE PACKAGE'S COPYRIGHT HOLDER
# This file is distributed under the same license as the PACKAGE package.
# FIRST AUTHOR <EMAIL@ADDRESS>, YEAR.
#
#, fuzzy
msgid ""
msgstr ""
"Project-Id-Version: PACKAGE VERSION\\n"
"Report-Msgid-Bugs-To: \\n"
"POT-Creation-Date: {creation_date}\\n"
"PO-Revision-Date: YEAR-MO-DA HO:MI+ZONE\\n"
"Last-Translator: FULL NAME <EMAIL@ADDRESS>\\n"
"Language-Team: LANGUAGE <LL@li.org>\\n"
"Language: \\n"
"MIME-Version: 1.0\\n"
"Content-Type: text/plain; charset=UTF-8\\n"
"Content-Transfer-Encoding: 8bit\\n"
"""

PLURAL_FORMS_LINE = '"Plural-Forms: nplurals=INTEGER; plural=EXPRESSION;\\n"\n'

_ESCAPES = {
    "\\": "\\\\",
    '"': '\\"',
    "\n": "\\n",
    "\t": "\\t",
    "\r": "\\r",
    "\a": "\\a",
    "\b": "\\b",
    "\f": "\\f",
    "\v": "\\v",
}


def escape(text: str) -> str:
    return "".join(_ESCAPES.get(c, c) for c in text)


def format_po_string(keyword: str, text: str) -> str:
    """
    格式化一个 PO 字段

    含有内部换行的字符串按行拆开：
        msgid ""
        "first\\n"
        "second"
    """
    lines = text.split("\n")
    if len(lines) <= 1 or (len(lines) == 2 and lines[1] == ""):
        return f'{keyword} "{escape(text)}"\n'
    parts = [line + "\n" for line in lines[:-1]]
    if lines[-1]:
        parts.append(lines[-1])
    body = "".join(f'"{escape(part)}"\n' for part in parts)
    return f'{keyword} ""\n{body}'


def _reference_lines(message: Message) -> list[str]:
    lines: list[str] = []
    current = "#:"
    for position in message.references:
        ref = str(position)
        if len(current) + 1 + len(ref) > PAGE_WIDTH and current != "#:":
            lines.append(current)
            current = "#:"
        current += " " + ref
    if current != "#:":
        lines.append(current)
    return lines


def format_message(message: Message) -> str:
    out: list[str] = []
    for line in message.comments:
        out.append(f"#. {line.strip()}".rstrip() + "\n")
    for line in message.extracted_comments:
        out.append(f"#. {line}\n")
    for line in _reference_lines(message):
        out.append(line + "\n")
    if message.flags:
        out.append("#, " + ", ".join(message.flags) + "\n")
    if message.msgctxt is not None:
        out.append(format_po_string("msgctxt", message.msgctxt))
    out.append(format_po_string("msgid", message.msgid))
    if message.msgid_plural is not None:
        out.append(format_po_string("msgid_plural", message.msgid_plural))
        out.append('msgstr[0] ""\n')
        out.append('msgstr[1] ""\n')
    else:
        out.append('msgstr ""\n')
    return "".join(out)


class PoReporter:
    """PO 模板报告器"""

    def __init__(self, output: TextIO | None = None, creation_date: datetime | None = None):
        self.output = output or sys.stdout
        self.creation_date = creation_date

    def header(self, catalog: Catalog) -> str:
        date = self.creation_date or datetime.now().astimezone()
        header = HEADER_TEMPLATE.format(creation_date=date.strftime("%Y-%m-%d %H:%M%z"))
        if any(message.msgid_plural is not None for message in catalog):
            header += PLURAL_FORMS_LINE
        return header

    def report(self, catalog: Catalog, result: ScanResult) -> None:
        """写出 PO 模板"""
        entries = [self.header(catalog)]
        entries.extend(format_message(message) for message in catalog)
        self.output.write("\n".join(entries))
