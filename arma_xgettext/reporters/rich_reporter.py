"""
Rich 终端报告器 - 以表格列出提取出的消息
"""

from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from arma_xgettext.core.catalog import Catalog
from arma_xgettext.core.scanner.models import ScanResult

# 表格中 msgid 的最大显示长度
MAX_MSGID_WIDTH = 60


class RichReporter:
    """Rich 终端报告器"""

    def __init__(self, console: Console | None = None):
        self.console = console or Console()

    def report(self, catalog: Catalog, result: ScanResult) -> None:
        """生成 Rich 格式报告"""
        self.console.print()
        self._print_messages(catalog)
        if result.errors or catalog.format_errors:
            self._print_problems(catalog, result)
        self._print_summary(catalog, result)

    def _print_messages(self, catalog: Catalog) -> None:
        self.console.print("[bold]◆ Messages[/bold]")
        self.console.print()

        table = Table(show_header=True, header_style="bold cyan", box=None)
        table.add_column("msgid", style="green", max_width=MAX_MSGID_WIDTH)
        table.add_column("context", style="magenta")
        table.add_column("references", style="dim")
        table.add_column("flags", style="yellow")

        for message in catalog:
            table.add_row(
                escape(message.msgid),
                escape(message.msgctxt or ""),
                "\n".join(str(position) for position in message.references),
                ", ".join(message.flags),
            )
        self.console.print(table)

    def _print_problems(self, catalog: Catalog, result: ScanResult) -> None:
        self.console.print()
        self.console.print("[bold]◆ Problems[/bold]")
        self.console.print()
        for error in result.errors:
            self.console.print(f"  [red]✗ {escape(error.file_path)}[/red]: {escape(error.reason)}")
        for issue in catalog.format_errors:
            self.console.print(f"  [yellow]⚠ {escape(str(issue.position))}[/yellow]: {escape(issue.reason)}")
            self.console.print(f"     [dim]{escape(issue.msgid)}[/dim]")

    def _print_summary(self, catalog: Catalog, result: ScanResult) -> None:
        self.console.print()
        style = "red" if result.errors else "green"
        self.console.print(Panel(
            f"{len(catalog)} messages from {len(result.files)} files, "
            f"{len(result.errors)} unreadable files, "
            f"{len(catalog.format_errors)} invalid format strings",
            border_style=style,
        ))
