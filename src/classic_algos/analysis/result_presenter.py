"""Presentation layer for algorithm results.

This module renders results in three ways, keeping formatting out of the
algorithms and the commands:
- Plain text in the line-oriented output format
- Rich tables for interactive use
- pandas DataFrames / CSV for the DFS edge listing
"""

from pathlib import Path

import pandas as pd
from rich.console import Console
from rich.table import Table

from classic_algos.analysis.edit_distance import EditDistanceResult, EditOperation
from classic_algos.analysis.graph_types import DfsResult, EdgeType

EDGE_TYPE_STYLES = {
    EdgeType.TREE: "green",
    EdgeType.FORWARD: "cyan",
    EdgeType.BACK: "red",
    EdgeType.CROSS: "yellow",
    EdgeType.UNCLASSIFIED: "dim",
}


def format_dfs_text(result: DfsResult) -> str:
    """Format a DFS result as text.

    The first line holds the node ids in preorder, space separated. Each
    following line is "tail head type" for one input edge, in input order,
    with type one of t, f, b, c.
    """
    lines = [" ".join(str(node) for node in result.preorder)]
    lines.extend(f"{edge.tail} {edge.head} {edge.edge_type.value}" for edge in result.edges)
    return "\n".join(lines)


def format_edit_distance_text(result: EditDistanceResult) -> str:
    """Format an edit distance result as three lines: distance, aligned_1, aligned_2."""
    return f"{result.distance}\n{result.aligned_1}\n{result.aligned_2}"


def format_connect_text(min_edges: int) -> str:
    return str(min_edges)


def dfs_to_dataframe(result: DfsResult) -> pd.DataFrame:
    """Convert classified edges to a DataFrame.

    Returns:
        DataFrame with columns tail, head, type (single letter code), one row
        per input edge in input order.
    """
    return pd.DataFrame(
        {
            "tail": [edge.tail for edge in result.edges],
            "head": [edge.head for edge in result.edges],
            "type": [edge.edge_type.value for edge in result.edges],
        },
        columns=["tail", "head", "type"],
    )


def export_dfs_to_csv(result: DfsResult, output_path: str | Path) -> Path:
    """Write classified edges to a CSV file.

    Args:
        result: DFS result to export
        output_path: Destination CSV path (parent directories are created)

    Returns:
        Path of the written file
    """
    output_path = Path(output_path)
    output_path.parent.mkdir(parents=True, exist_ok=True)
    dfs_to_dataframe(result).to_csv(output_path, index=False)
    return output_path


def display_dfs_tables(result: DfsResult, console: Console) -> None:
    """Display a DFS result as Rich tables.

    Displays three tables:
    1. Node order (node, preorder and postorder numbers, in discovery order)
    2. Classified edges
    3. Edge type counts
    """
    node_table = Table(title="DFS Node Order")
    node_table.add_column("Node", style="cyan", justify="right")
    node_table.add_column("Preorder", style="green", justify="right")
    node_table.add_column("Postorder", style="green", justify="right")
    for node in result.preorder:
        node_table.add_row(
            str(node),
            str(result.preorder_numbers[node]),
            str(result.postorder_numbers[node]),
        )
    console.print(node_table)

    edge_table = Table(title="Edge Classification")
    edge_table.add_column("Tail", style="cyan", justify="right")
    edge_table.add_column("Head", style="cyan", justify="right")
    edge_table.add_column("Type")
    for edge in result.edges:
        style = EDGE_TYPE_STYLES[edge.edge_type]
        edge_table.add_row(
            str(edge.tail), str(edge.head), f"[{style}]{edge.edge_type.label}[/{style}]"
        )
    console.print(edge_table)

    _display_edge_type_counts_table(result, console)


def _display_edge_type_counts_table(result: DfsResult, console: Console) -> None:
    counts_table = Table(title="Edge Type Counts")
    counts_table.add_column("Type", style="cyan")
    counts_table.add_column("Count", style="green", justify="right")
    for edge_type, count in result.count_by_type().items():
        counts_table.add_row(edge_type.label, str(count))
    console.print(counts_table)


def display_edit_distance_table(result: EditDistanceResult, console: Console) -> None:
    """Display an edit distance result and its column-by-column alignment."""
    console.print(f"[bold]Edit distance:[/bold] {result.distance}")

    alignment_table = Table(title="Alignment")
    alignment_table.add_column("#", style="dim", justify="right")
    alignment_table.add_column("String 1", style="cyan")
    alignment_table.add_column("String 2", style="cyan")
    alignment_table.add_column("Operation")

    operations = result.operations()
    for position, (char_1, char_2, operation) in enumerate(
        zip(result.aligned_1, result.aligned_2, operations), start=1
    ):
        style = "green" if operation is EditOperation.MATCH else "yellow"
        alignment_table.add_row(
            str(position), repr(char_1), repr(char_2), f"[{style}]{operation.value}[/{style}]"
        )
    console.print(alignment_table)
