"""Output formatting for treewalk."""

from collections.abc import Sequence

import typer

from treewalk.exceptions import ClassificationError
from treewalk.exceptions import TraversalError


def print_files(files: Sequence[str], null_separated: bool = False) -> None:
    """Print the file listing to stdout.

    Args:
        files: Relative paths in walk order
        null_separated: If True, terminate each path with NUL instead of a
            newline (for xargs -0)
    """
    if null_separated:
        typer.echo("".join(f"{path}\0" for path in files), nl=False)
        return
    for path in files:
        typer.echo(path)


def print_count(files: Sequence[str]) -> None:
    """Print the number of files found."""
    typer.echo(str(len(files)))


def print_traversal_error(error: TraversalError) -> None:
    """Print traversal error to stderr.

    Args:
        error: The failure that aborted the walk
    """
    typer.secho(f"✗ {error}", fg=typer.colors.RED, bold=True, err=True)
    if isinstance(error, ClassificationError):
        typer.secho(
            "   The entry may have been removed while the walk was running.",
            err=True,
        )
    typer.secho("   No files were listed.", fg=typer.colors.BRIGHT_BLACK, err=True)
