"""Terminal reporter using Rich library."""

from pathlib import Path

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from component_usage.models import ScanResult


class TerminalReporter:
    """Prints scan progress and summaries to the terminal."""

    def __init__(self, console: Console | None = None, color: bool = True) -> None:
        """Initialize terminal reporter.

        Args:
            console: Console to print to (a new one is created if omitted)
            color: If True, use colored output
        """
        self.console = console or Console(color_system="auto" if color else None)

    def print_start(self, root: Path, target_module: str) -> None:
        """Announce the scan."""
        self.console.print(
            f"[bold cyan]Scanning {escape(str(root))} for components from {escape(target_module)}...[/bold cyan]",
            highlight=False,
        )

    def print_summary(self, result: ScanResult, report_path: Path) -> None:
        """Print end-of-scan totals.

        Args:
            result: Completed scan result
            report_path: Where the report was written
        """
        self.console.print(f"[green]Report generated: {escape(str(report_path))}[/green]", highlight=False)
        self.console.print(f"Found {len(result.imports)} imported components")
        self.console.print(f"JSX usage: {result.total_markup} instances")
        self.console.print(f"Function call usage: {result.total_calls} instances")

        skipped = result.files_failed + result.directories_failed
        if skipped:
            self.console.print(
                f"[yellow]Skipped {result.files_failed} file(s) and "
                f"{result.directories_failed} directory(ies) due to errors[/yellow]"
            )

    def print_usage_table(self, result: ScanResult, limit: int = 20) -> None:
        """Print the most used keys.

        Args:
            result: Completed scan result
            limit: Maximum number of rows
        """
        rows: list[tuple[str, str, int, int]] = []

        for kind, instances in (("JSX", result.markup_instances), ("call", result.call_instances)):
            for key, occurrences in instances.items():
                rows.append((key, kind, len(occurrences), len(set(occurrences))))

        if not rows:
            self.console.print("[dim]No usage found.[/dim]")
            return

        rows.sort(key=lambda row: (-row[2], row[0], row[1]))

        table = Table(
            title="Component Usage",
            show_header=True,
            header_style="bold cyan",
        )

        table.add_column("Component", style="bold")
        table.add_column("Kind", justify="center")
        table.add_column("Instances", justify="right")
        table.add_column("Files", justify="right")

        for key, kind, count, file_count in rows[:limit]:
            table.add_row(key, kind, str(count), str(file_count))

        self.console.print(table)
