"""
Reporters Layer - 报告层

包含 PO 模板报告器、Rich 终端报告器和 JSON 报告器。
"""

from arma_xgettext.reporters.base import Reporter
from arma_xgettext.reporters.po_reporter import PoReporter
from arma_xgettext.reporters.rich_reporter import RichReporter
from arma_xgettext.reporters.json_reporter import JsonReporter

__all__ = [
    "Reporter",
    "PoReporter",
    "RichReporter",
    "JsonReporter",
]
