"""CLI interface using Typer."""

import logging
from pathlib import Path

import typer
from rich.console import Console

from component_usage.config import Config
from component_usage.reporters.terminal import TerminalReporter
from component_usage.reporters.text import TextReporter
from component_usage.scanner.usage_mapper import UsageMapper

# Set up logging
logging.basicConfig(
    level=logging.INFO,
    format="%(levelname)s: %(message)s",
)
logger = logging.getLogger(__name__)

app = typer.Typer(
    name="component-usage",
    help="Report how a module's exports are imported and used across a source tree",
    add_completion=False,
)

console = Console()


def _version_callback(value: bool) -> None:
    if value:
        from component_usage import __version__

        console.print(f"[bold]Component Usage Scanner[/bold] v{__version__}")
        raise typer.Exit(0)


@app.command()
def scan(
    root: Path = typer.Argument(
        None,
        help="Root directory to scan (defaults to the current directory)",
        show_default=False,
    ),
    module: str = typer.Option(
        None,
        "--module",
        "-m",
        help="Target module name (overrides the configured one)",
    ),
    output: Path = typer.Option(
        None,
        "--output",
        "-o",
        help="Report path (defaults to component-usage-report.txt in the current directory)",
    ),
    config_file: Path = typer.Option(
        None,
        "--config",
        "-c",
        help="Path to a TOML configuration file",
    ),
    merged: bool = typer.Option(
        False,
        "--merged",
        help="List JSX and function call usages in a single section",
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Show debug logging and a usage table",
    ),
    version: bool = typer.Option(
        False,
        "--version",
        callback=_version_callback,
        is_eager=True,
        help="Show version information and exit",
    ),
) -> None:
    """Scan a source tree for imports and usages of one module."""

    if verbose:
        logging.getLogger().setLevel(logging.DEBUG)

    config = Config(config_file)
    target_module = module or config.target_module

    if root is None:
        root = Path.cwd()

    terminal_reporter = TerminalReporter(console=console)
    terminal_reporter.print_start(root, target_module)

    try:
        mapper = UsageMapper(root, config=config, target_module=target_module)
        result = mapper.scan()

        report_path = output or Path.cwd() / config.report_filename
        text_reporter = TextReporter(target_module, merged=merged or config.merged_report)
        text_reporter.generate_report(result, report_path)

    except Exception as e:
        if verbose:
            logger.exception("Scan failed")
        console.print(f"Error: {e}", style="red", markup=False, highlight=False)
        raise typer.Exit(1)

    terminal_reporter.print_summary(result, report_path)

    if verbose:
        terminal_reporter.print_usage_table(result)
