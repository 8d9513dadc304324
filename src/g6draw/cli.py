"""CLI interface for g6draw using Typer framework."""

import json as jsonlib
import logging
import signal
import sys
from pathlib import Path
from typing import Annotated, List, Optional

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from g6draw import __description__, __version__
from g6draw.config import (
    G6DrawConfig,
    GridKind,
    LayoutConfig,
    LogLevel,
    StyleConfig,
    load_config,
)
from g6draw.errors import G6DrawError
from g6draw.graph import DrawingGenerator, SvgRenderer
from g6draw.highlight import parse_selector, selectors_from_graph6
from g6draw.parser.graph6 import decode, encode

app = typer.Typer(
    name="g6draw",
    help=__description__,
    add_completion=False,
    rich_markup_mode="rich"
)

# Status output goes to stderr so SVG written to stdout stays clean
console = Console(stderr=True)

_LOG_LEVELS = {
    LogLevel.ERROR.value: logging.ERROR,
    LogLevel.WARN.value: logging.WARNING,
    LogLevel.INFO.value: logging.INFO,
    LogLevel.DEBUG.value: logging.DEBUG,
}


def _signal_handler(signum: int, frame) -> None:
    """Abort a long layout run on interrupt."""
    console.print("\n[yellow]Interrupted - aborting[/yellow]")
    raise typer.Exit(130)


def _setup_signal_handlers():
    """Setup signal handlers for graceful shutdown."""
    try:
        signal.signal(signal.SIGINT, _signal_handler)
        if hasattr(signal, 'SIGTERM'):  # SIGTERM not available on Windows
            signal.signal(signal.SIGTERM, _signal_handler)
    except (OSError, ValueError):
        # Not in the main thread (e.g. under a test runner)
        pass


def _configure_logging(config: G6DrawConfig, verbose: bool) -> None:
    level = logging.DEBUG if verbose else _LOG_LEVELS[LogLevel(config.logging.level).value]
    logging.basicConfig(
        level=level,
        stream=sys.stderr,
        format="%(levelname)s %(name)s: %(message)s",
    )
    logging.getLogger("g6draw").setLevel(level)


def version_callback(value: bool) -> None:
    """Show version information and exit."""
    if value:
        console.print(f"g6draw version {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: Annotated[
        bool,
        typer.Option("--version", "-v", callback=version_callback, help="Show version and exit")
    ] = False,
) -> None:
    """g6draw - Render graph6-encoded graphs as SVG diagrams."""
    _setup_signal_handlers()


def _read_graph6(graph6: str | None, input_file: Path | None) -> str:
    """Pick the graph6 text from the argument, a file or stdin.

    graph6 files hold one graph per line; the first non-empty line is used.
    """
    if graph6 is not None:
        return graph6.strip()

    if input_file is not None:
        if not input_file.exists():
            console.print(f"[red]Error:[/red] Input file not found: {input_file}")
            raise typer.Exit(1)
        text = input_file.read_text(encoding="ascii", errors="replace")
    else:
        text = sys.stdin.read()

    for line in text.splitlines():
        if line.strip():
            return line.strip()

    console.print("[red]Error:[/red] No graph6 input given")
    raise typer.Exit(1)


def _apply_overrides(
    config: G6DrawConfig,
    seed: int | None,
    iterations: int | None,
    labels: bool | None,
    edge_labels: bool | None,
    grid: GridKind | None = None,
    grid_size: float | None = None,
) -> G6DrawConfig:
    """Apply command-line overrides, validating the merged sections."""
    layout_updates = {}
    if seed is not None:
        layout_updates["seed"] = seed
    if iterations is not None:
        layout_updates["iterations"] = iterations
    if grid is not None:
        layout_updates["grid"] = grid
    if grid_size is not None:
        layout_updates["grid_size"] = grid_size

    style_updates = {}
    if labels is not None:
        style_updates["vertex_labels"] = labels
    if edge_labels is not None:
        style_updates["edge_labels"] = edge_labels

    return config.model_copy(update={
        "layout": LayoutConfig(**{**config.layout.model_dump(), **layout_updates}),
        "style": StyleConfig(**{**config.style.model_dump(), **style_updates}),
    })


@app.command()
def draw(
    graph6: Annotated[
        Optional[str],
        typer.Argument(help="graph6 string (default: read --input or stdin)")
    ] = None,
    input_file: Annotated[
        Optional[Path],
        typer.Option("--input", "-i", help="File containing graph6 data (first graph is used)")
    ] = None,
    out: Annotated[
        Optional[Path],
        typer.Option("--out", "-o", help="Output SVG file path (default: stdout)")
    ] = None,
    highlight: Annotated[
        Optional[List[str]],
        typer.Option("--highlight", "-H", help="Vertex '3' or edge '0-1' to highlight (repeatable)")
    ] = None,
    highlight_g6: Annotated[
        Optional[str],
        typer.Option("--highlight-g6", help="graph6 string whose edges are highlighted")
    ] = None,
    config: Annotated[
        Optional[Path],
        typer.Option("--config", "-c", help="Configuration file path (default: search for .g6draw.json)")
    ] = None,
    seed: Annotated[
        Optional[int],
        typer.Option("--seed", help="Seed for the initial layout jitter (default: vertex count)")
    ] = None,
    iterations: Annotated[
        Optional[int],
        typer.Option("--iterations", min=1, help="Number of layout iterations")
    ] = None,
    labels: Annotated[
        Optional[bool],
        typer.Option("--labels/--no-labels", help="Draw vertex index labels")
    ] = None,
    edge_labels: Annotated[
        Optional[bool],
        typer.Option("--edge-labels/--no-edge-labels", help="Draw edge index labels")
    ] = None,
    grid: Annotated[
        Optional[GridKind],
        typer.Option("--grid", help="Snap the finished layout onto a square or circular grid")
    ] = None,
    grid_size: Annotated[
        Optional[float],
        typer.Option("--grid-size", help="Grid spacing in ideal edge lengths")
    ] = None,
    verbose: Annotated[
        bool,
        typer.Option("--verbose", help="Enable debug logging")
    ] = False,
) -> None:
    """Lay out a graph6 graph and render it as SVG."""
    try:
        g6_config = load_config(config)
        g6_config = _apply_overrides(
            g6_config, seed, iterations, labels, edge_labels, grid, grid_size
        )
    except (FileNotFoundError, ValueError) as e:
        console.print(f"[red]Error:[/red] {escape(str(e))}")
        raise typer.Exit(1)

    _configure_logging(g6_config, verbose)

    text = _read_graph6(graph6, input_file)

    try:
        selectors = [parse_selector(item) for item in highlight or []]
        if highlight_g6:
            selectors.extend(selectors_from_graph6(highlight_g6.strip()))

        generator = DrawingGenerator(g6_config)
        generator.add_renderer(SvgRenderer())
        rendered = generator.draw(text, selectors)
    except G6DrawError as e:
        console.print(f"[red]Error:[/red] {escape(str(e))}")
        raise typer.Exit(1)

    if out:
        output_file = out.resolve()
        with open(output_file, "w", encoding="utf-8") as f:
            f.write(rendered)
        console.print(f"[green]SVG written:[/green] {output_file}")
    else:
        typer.echo(rendered, nl=False)


@app.command()
def info(
    graph6: Annotated[
        str,
        typer.Argument(help="graph6 string")
    ],
    json: Annotated[
        bool,
        typer.Option("--json", help="Print a JSON summary instead of a table")
    ] = False,
) -> None:
    """Show vertex, edge and component statistics for a graph6 graph."""
    try:
        graph = decode(graph6.strip())
    except G6DrawError as e:
        console.print(f"[red]Error:[/red] {escape(str(e))}")
        raise typer.Exit(1)

    degrees = sorted((graph.degree(v) for v in graph.vertices()), reverse=True)
    summary = {
        "vertices": graph.vertex_count(),
        "edges": graph.edge_count(),
        "components": len(graph.components()),
        "degree_sequence": degrees,
        "graph6": encode(graph),
    }

    if json:
        typer.echo(jsonlib.dumps(summary, indent=2))
        return

    table = Table(title="Graph summary")
    table.add_column("Property", style="cyan")
    table.add_column("Value")
    table.add_row("Vertices", str(summary["vertices"]))
    table.add_row("Edges", str(summary["edges"]))
    table.add_row("Components", str(summary["components"]))
    table.add_row("Degree sequence", " ".join(str(d) for d in degrees) or "-")
    table.add_row("Canonical graph6", escape(summary["graph6"]))
    Console().print(table)


if __name__ == "__main__":
    app()
