"""DFS command for preorder numbering and edge classification."""

from pathlib import Path

import click
from rich.console import Console

from classic_algos.analysis.edge_classifier import classify_edges
from classic_algos.analysis.result_presenter import (
    dfs_to_dataframe,
    display_dfs_tables,
    export_dfs_to_csv,
    format_dfs_text,
)
from classic_algos.core.parsing import STDIN_PATH, parse_graph, read_input
from classic_algos.error.cmd import handle_command_errors

console = Console()


@click.command()
@click.argument("input_file", required=False, default=STDIN_PATH)
@click.option(
    "--format",
    "-f",
    "output_format",
    type=click.Choice(["text", "table", "csv"]),
    default=None,
    help="Output format (default: from config, usually text)",
)
@click.option(
    "--output",
    "-o",
    type=click.Path(path_type=Path, dir_okay=False),
    help="Write classified edges to this CSV file",
)
@click.pass_context
@handle_command_errors
def dfs(ctx, input_file: str, output_format: str | None, output: Path | None):
    """Classify the edges of a directed graph with depth-first search.

    Reads "N E" followed by E lines "tail head" and prints the nodes in
    preorder followed by each edge with its type:

    \b
    - t: tree edge
    - f: forward edge
    - b: back edge
    - c: cross edge

    \b
    INPUT_FILE: Graph file (default: stdin)
    """
    config = ctx.obj["config"]
    output_format = output_format or config.output.default_format

    graph = parse_graph(read_input(input_file))
    result = classify_edges(graph)

    if output:
        output_file = export_dfs_to_csv(result, output)
        console.print(f"[green]✓ Saved:[/green] {output_file}", highlight=False)
        return

    if output_format == "table":
        display_dfs_tables(result, console)
    elif output_format == "csv":
        click.echo(dfs_to_dataframe(result).to_csv(index=False), nl=False)
    else:
        click.echo(format_dfs_text(result))
