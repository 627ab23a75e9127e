"""
JSON 报告器 - 输出 JSON 格式的消息目录
"""

import json
import sys
from typing import Any, TextIO

from arma_xgettext.core.catalog import Catalog, Message
from arma_xgettext.core.scanner.models import ScanResult


def message_to_dict(message: Message) -> dict[str, Any]:
    return {
        "msgctxt": message.msgctxt,
        "msgid": message.msgid,
        "msgid_plural": message.msgid_plural,
        "references": [str(position) for position in message.references],
        "comments": list(message.comments),
        "extracted_comments": list(message.extracted_comments),
        "flags": list(message.flags),
    }


class JsonReporter:
    """JSON 报告器"""

    def __init__(self, output: TextIO | None = None):
        self.output = output or sys.stdout

    def report(self, catalog: Catalog, result: ScanResult) -> None:
        """生成 JSON 格式报告"""
        report_data = {
            "messages": [message_to_dict(message) for message in catalog],
            "files": list(result.files),
            "errors": [
                {"file_path": error.file_path, "reason": error.reason}
                for error in result.errors
            ],
            "format_errors": [
                {
                    "position": str(issue.position),
                    "msgid": issue.msgid,
                    "reason": issue.reason,
                }
                for issue in catalog.format_errors
            ],
            "summary": {
                "messages": len(catalog),
                "files": len(result.files),
                "errors": len(result.errors),
                "format_errors": len(catalog.format_errors),
            },
        }

        json_str = json.dumps(report_data, indent=2, ensure_ascii=False)
        print(json_str, file=self.output)
