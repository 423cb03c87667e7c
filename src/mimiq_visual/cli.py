"""
Command-line interface for MIMIQ Visual.

Usage:
    mimiq-visual report PATH     Print a simulation report
    mimiq-visual hist PATH       Save a histogram of measurement outcomes
    mimiq-visual colors          Show the plot color palette
"""

import json
from pathlib import Path
from typing import Annotated

import matplotlib.pyplot as plt
import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from mimiq_visual import __version__
from mimiq_visual.data import QP_COLORS, Results, ResultsError, load_results
from mimiq_visual.log import LogLevel, setup_default_logging
from mimiq_visual.visualizations import (
    DEFAULT_HIST_OUTCOMES,
    DEFAULT_REPORT_OUTCOMES,
    hist,
    printreport,
)

app = typer.Typer(
    name="mimiq-visual",
    help="Reports and histograms for quantum circuit simulation results",
    add_completion=False,
)
console = Console()
err_console = Console(stderr=True)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        console.print(f"mimiq-visual version {__version__}")
        raise typer.Exit()


@app.callback()  # type: ignore[misc]
def main(
    version: Annotated[
        bool,
        typer.Option(
            "--version",
            "-v",
            help="Show version and exit.",
            callback=version_callback,
            is_eager=True,
        ),
    ] = False,
    log_level: Annotated[
        LogLevel,
        typer.Option("--log-level", help="Logging level.", case_sensitive=False),
    ] = LogLevel.WARNING,
) -> None:
    """MIMIQ Visual - simulation result reports."""
    setup_default_logging(log_level)


def _load_or_exit(path: Path) -> Results:
    try:
        return load_results(path)
    except (OSError, json.JSONDecodeError, ResultsError) as exc:
        err_console.print(
            f"[red]Error:[/] cannot load {escape(str(path))}: {escape(str(exc))}"
        )
        raise typer.Exit(code=1) from exc


@app.command()  # type: ignore[misc]
def report(
    path: Annotated[Path, typer.Argument(help="JSON results file")],
    max_outcomes: Annotated[
        int,
        typer.Option("--max-outcomes", "-n", help="Maximum outcomes to list"),
    ] = DEFAULT_REPORT_OUTCOMES,
) -> None:
    """Print a report on a results file."""
    res = _load_or_exit(path)
    try:
        printreport(res, max_outcomes=max_outcomes, console=console)
    except KeyError as exc:
        err_console.print(f"[red]Error:[/] missing result field {exc} in {path}")
        raise typer.Exit(code=1) from exc


@app.command("hist")  # type: ignore[misc]
def hist_command(
    path: Annotated[Path, typer.Argument(help="JSON results file")],
    max_outcomes: Annotated[
        int,
        typer.Option("--max-outcomes", "-n", help="Maximum outcomes to plot"),
    ] = DEFAULT_HIST_OUTCOMES,
    output: Annotated[
        Path | None,
        typer.Option("--output", "-o", help="Image file (default: <PATH>_hist.svg)"),
    ] = None,
) -> None:
    """Save a histogram of the measurement outcomes in a results file."""
    res = _load_or_exit(path)
    if output is None:
        output = path.with_name(f"{path.stem}_hist.svg")

    fig = hist(res, max_outcomes=max_outcomes)
    try:
        fig.savefig(output)
    except (OSError, ValueError) as exc:
        err_console.print(f"[red]Error:[/] cannot write {output}: {exc}")
        raise typer.Exit(code=1) from exc
    finally:
        plt.close(fig)

    console.print(f"Histogram saved to [bold]{output}[/]")


@app.command()  # type: ignore[misc]
def colors() -> None:
    """Display the plot color palette."""
    table = Table(title="Color Palette")

    table.add_column("Name", style="cyan", no_wrap=True)
    table.add_column("Hex")
    table.add_column("Swatch", justify="center")

    for i, color in enumerate(QP_COLORS, start=1):
        table.add_row(f"QP_COLOR{i}", color, f"[on {color}]      [/]")

    console.print(table)


if __name__ == "__main__":
    app()
