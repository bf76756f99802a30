"""Connect command for counting the edges needed to connect a graph."""

import click

from classic_algos.analysis.result_presenter import format_connect_text
from classic_algos.analysis.union_find import count_min_connecting_edges
from classic_algos.core.parsing import STDIN_PATH, parse_graph, read_input
from classic_algos.error.cmd import handle_command_errors


@click.command()
@click.argument("input_file", required=False, default=STDIN_PATH)
@handle_command_errors
def connect(input_file: str):
    """Count the edges needed to connect an undirected graph.

    Reads "N E" followed by E lines "v1 v2" and prints the minimum number of
    edges that must be added so every node is reachable from every other.

    \b
    INPUT_FILE: Graph file (default: stdin)
    """
    graph = parse_graph(read_input(input_file))
    click.echo(format_connect_text(count_min_connecting_edges(graph.node_count, graph.edges)))
