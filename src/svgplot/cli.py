"""svgplot CLI — render quick SVG charts from delimited text."""

from __future__ import annotations

import logging
from pathlib import Path

import click
from rich.console import Console
from rich.table import Table as RichTable

from . import __version__
from .config import OutputSettings
from .core.models import ChartType
from .core.parser import scan_pairs, scan_values
from .pipeline import render_chart

console = Console()


def _setup_logging(verbose: bool) -> None:
    level = logging.DEBUG if verbose else logging.WARNING
    logging.basicConfig(
        level=level,
        format="%(asctime)s [%(name)s] %(levelname)s: %(message)s",
        datefmt="%H:%M:%S",
    )


@click.group()
@click.version_option(version=__version__, prog_name="svgplot")
@click.option("-v", "--verbose", is_flag=True, default=False, help="Enable debug logging.")
def main(verbose: bool):
    """svgplot — Render line, bar, scatter and pie charts to SVG."""
    _setup_logging(verbose)


def _chart_command(chart_type: ChartType, data_help: str):
    """Build the click command for one chart type."""

    @click.argument("data")
    @click.option("-t", "--title", default=None, help="Chart title.")
    @click.option(
        "-o", "--output",
        "output_dir",
        type=click.Path(file_okay=False),
        envvar="SVGPLOT_OUTPUT_DIR",
        default=".",
        help="Output directory (default: current directory).",
    )
    @click.option("--no-open", is_flag=True, default=False, help="Do not open the chart in a viewer.")
    @click.option("--unique", is_flag=True, default=False, help="Add a random suffix to the file name.")
    def command(data: str, title: str | None, output_dir: str, no_open: bool, unique: bool):
        settings = OutputSettings(
            output_dir=Path(output_dir),
            open_viewer=not no_open,
            unique_names=unique,
        )
        result = render_chart(chart_type, data, title, settings=settings)

        if not result.success:
            console.print(f"[bold red]✗ {chart_type.value} chart failed:[/] {result.error}")
            raise SystemExit(1)

        console.print(f"[green]✓[/] {result.output_path} [dim]({result.points} points)[/dim]")
        if result.discarded:
            console.print(f"[yellow]⚠  {result.discarded} malformed token(s) skipped[/]")

    command.__doc__ = f"Render a {chart_type.value} chart. DATA: {data_help}"
    return main.command(name=chart_type.value)(command)


line = _chart_command(ChartType.LINE, '"x1:y1,x2:y2,..."')
bar = _chart_command(ChartType.BAR, '"v1,v2,..." or "x1:y1,x2:y2,..."')
scatter = _chart_command(ChartType.SCATTER, '"x1:y1,x2:y2,..."')
pie = _chart_command(ChartType.PIE, '"v1,v2,..."')


@main.command()
@click.argument("data")
@click.option("--pairs", is_flag=True, default=False, help='Parse DATA as "x:y" pairs.')
def inspect(data: str, pairs: bool):
    """Parse DATA and show which values would be plotted."""
    report = scan_pairs(data) if pairs else scan_values(data)

    table = RichTable(title="Parsed Data", show_lines=False)
    table.add_column("#", style="dim", justify="right")
    if pairs:
        table.add_column("X", style="bold cyan", justify="right")
        table.add_column("Y", style="bold", justify="right")
        for i, p in enumerate(report.points):
            table.add_row(str(i), f"{p.x:g}", f"{p.y:g}")
    else:
        table.add_column("Value", style="bold cyan", justify="right")
        for i, v in enumerate(report.values):
            table.add_row(str(i), f"{v:g}")

    console.print(table)
    console.print(f"[dim]Discarded tokens: {report.discarded}[/dim]")


if __name__ == "__main__":
    main()
