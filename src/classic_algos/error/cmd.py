import functools
from typing import Callable

import click
from rich.console import Console

console = Console(stderr=True)


def handle_command_errors(func: Callable) -> Callable:
    @functools.wraps(func)
    def wrapper(*args, **kwargs):
        try:
            return func(*args, **kwargs)
        except click.ClickException:
            raise
        except FileNotFoundError as e:
            console.print(f"[red]Error:[/red] {e}", highlight=False)
            raise click.Abort() from e
        except ValueError as e:
            console.print(f"[red]Error:[/red] {e}", highlight=False)
            raise click.Abort() from e
        except Exception as e:
            console.print(f"[red]Unexpected error:[/red] {e}", highlight=False)
            raise click.Abort() from e

    return wrapper
