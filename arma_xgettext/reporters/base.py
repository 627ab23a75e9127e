"""
报告器基类 - 定义报告器接口
"""

from typing import Protocol

from arma_xgettext.core.catalog import Catalog
from arma_xgettext.core.scanner.models import ScanResult


class Reporter(Protocol):
    """报告器协议"""

    def report(self, catalog: Catalog, result: ScanResult) -> None:
        """生成报告"""
        ...
