"""CLI entry point for classic-algos tool."""

import logging
from pathlib import Path

import click
from rich.console import Console
from rich.logging import RichHandler

from classic_algos.commands import connect, dfs, edit_distance
from classic_algos.core.config import load_config
from classic_algos.error.cmd import handle_command_errors


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        force=True,
    )


@click.group()
@click.version_option(version="0.1.0", prog_name="classic-algos")
@click.option(
    "--config",
    "config_path",
    type=click.Path(path_type=Path, dir_okay=False),
    help="Path to JSON configuration file",
)
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging")
@click.pass_context
@handle_command_errors
def main(ctx, config_path: Path | None, verbose: bool):
    """Classical Graph and String Algorithms.

    DFS edge classification, edit distance with alignment, and union-find
    connectivity from the command line.
    """
    ctx.ensure_object(dict)
    config = load_config(config_path)
    ctx.obj["config"] = config
    _configure_logging(verbose or config.verbose)


# Register commands
main.add_command(dfs.dfs)
main.add_command(edit_distance.edit_distance)
main.add_command(connect.connect)


if __name__ == "__main__":
    main()
