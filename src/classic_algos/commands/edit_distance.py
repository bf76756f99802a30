"""Edit distance command for string alignment."""

import click
from rich.console import Console

from classic_algos.analysis.edit_distance import calculate_edit_distance
from classic_algos.analysis.result_presenter import (
    display_edit_distance_table,
    format_edit_distance_text,
)
from classic_algos.core.parsing import STDIN_PATH, parse_string_pair, read_input
from classic_algos.error.cmd import handle_command_errors

console = Console()

EDIT_DISTANCE_FORMATS = ("text", "table")


@click.command("edit-distance")
@click.argument("input_file", required=False, default=STDIN_PATH)
@click.option(
    "--format",
    "-f",
    "output_format",
    type=click.Choice(EDIT_DISTANCE_FORMATS),
    default=None,
    help="Output format (default: from config, usually text)",
)
@click.option("--gap", help="Gap character for the alignment (default: from config, a space)")
@click.pass_context
@handle_command_errors
def edit_distance(ctx, input_file: str, output_format: str | None, gap: str | None):
    """Compute the edit distance between two lines of text.

    Prints the distance, then both strings aligned with gap characters.

    \b
    INPUT_FILE: Two-line text file (default: stdin)
    """
    config = ctx.obj["config"]
    output_format = output_format or config.output.default_format
    if output_format not in EDIT_DISTANCE_FORMATS:
        raise ValueError(
            f"Output format '{output_format}' is not supported by edit-distance "
            f"(choose from: {', '.join(EDIT_DISTANCE_FORMATS)})"
        )
    gap_marker = gap if gap is not None else config.output.gap_marker
    if len(gap_marker) != 1:
        raise ValueError(f"Gap must be a single character, got {gap_marker!r}")

    s1, s2 = parse_string_pair(read_input(input_file))
    result = calculate_edit_distance(s1, s2, gap_marker=gap_marker)

    if output_format == "table":
        display_edit_distance_table(result, console)
    else:
        click.echo(format_edit_distance_text(result))
