"""Lineage Tracker CLI - map variable declarations to their scoped references."""
from pathlib import Path
from typing import Optional

import typer
from rich.markup import escape

from .analyzer.lineage import REPORT_ORDERS, DataLineageTracker
from .config import SUPPORTED_LANGUAGES, __version__, get_config
from .report import render_graph, render_lineage, render_report
from .utils.safe_console import SafeConsole

app = typer.Typer(
    name="lineage-tracker",
    help="Static map of variable declarations, their scopes and references in one source file",
    add_completion=False,
)
console = SafeConsole(emoji=False)
err_console = SafeConsole(stderr=True, emoji=False)


def _version_callback(value: bool):
    if value:
        console.print(f"lineage-tracker {__version__}")
        raise typer.Exit()


@app.command()
def analyze(
    file_path: Path = typer.Argument(..., help="JavaScript/TypeScript source file to analyze"),
    variable: Optional[str] = typer.Option(None, "--variable", "-v", help="Only print the lineage of this variable"),
    graph: bool = typer.Option(False, "--graph", help="Also print the scope graph"),
    order: Optional[str] = typer.Option(None, "--order", help="Report order: 'declaration' or 'name'"),
    language: Optional[str] = typer.Option(None, "--language", "-l", help="Grammar: javascript, typescript or tsx (default: by extension)"),
    version: bool = typer.Option(False, "--version", callback=_version_callback, is_eager=True, help="Show version and exit"),
):
    """Analyze FILE and report every variable's declaration scope and references."""
    try:
        config = get_config()
    except ValueError as e:
        err_console.print(f"[bold red]Configuration error:[/bold red] {escape(str(e))}")
        raise typer.Exit(1)

    order = (order or config.report_order).lower()
    if order not in REPORT_ORDERS:
        err_console.print(f"[bold red]Error:[/bold red] --order must be one of {', '.join(REPORT_ORDERS)}")
        raise typer.Exit(1)

    language = language or config.language
    if language and language not in SUPPORTED_LANGUAGES:
        err_console.print(f"[bold red]Error:[/bold red] --language must be one of {', '.join(SUPPORTED_LANGUAGES)}")
        raise typer.Exit(1)

    tracker = DataLineageTracker(use_scope_cache=config.scope_cache_enabled)
    try:
        tracker.analyze_file(file_path, language=language)
    except (OSError, ValueError) as e:
        err_console.print(f"[bold red]Error:[/bold red] {escape(str(e))}")
        raise typer.Exit(1)

    if variable is not None:
        render_lineage(tracker.get_full_lineage(variable), console, variable)
    else:
        render_report(tracker, console, file_path=file_path, order=order)

    if graph:
        render_graph(tracker.build_graph(), console)


if __name__ == "__main__":
    app()
