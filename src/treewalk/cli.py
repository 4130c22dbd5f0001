"""Command-line interface for treewalk."""

import asyncio
import logging
from pathlib import Path
from typing import Annotated

import typer

from treewalk import __version__
from treewalk.config import WalkerConfig
from treewalk.exceptions import ConfigValidationError
from treewalk.exceptions import ConfigVersionError
from treewalk.exceptions import TraversalError
from treewalk.output import print_count
from treewalk.output import print_files
from treewalk.output import print_traversal_error
from treewalk.walker import awalk
from treewalk.walker import walk

logger = logging.getLogger(__name__)

app = typer.Typer(help="List every file beneath a directory")


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        typer.echo(f"treewalk {__version__}")
        raise typer.Exit()


def configure_logging(verbose: bool) -> None:
    """Send treewalk log records to the current stderr.

    Replaces any handler from an earlier run so repeated invocations in one
    process each log at their own level.
    """
    package_logger = logging.getLogger("treewalk")
    for handler in list(package_logger.handlers):
        package_logger.removeHandler(handler)

    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter("%(levelname)s %(name)s: %(message)s"))
    package_logger.addHandler(handler)
    package_logger.setLevel(logging.DEBUG if verbose else logging.WARNING)


@app.command()
def list_files(
    root: Annotated[Path, typer.Argument(help="Directory to walk")],
    jobs: Annotated[
        int | None,
        typer.Option(
            "--jobs", "-j", min=1, help="Maximum concurrent filesystem calls"
        ),
    ] = None,
    sequential: Annotated[
        bool | None,
        typer.Option("--sequential/--concurrent", help="Visit one entry at a time"),
    ] = None,
    sort: Annotated[
        bool | None,
        typer.Option("--sort/--no-sort", help="Sort each directory listing by name"),
    ] = None,
    null: Annotated[
        bool, typer.Option("--null", "-0", help="Separate paths with NUL")
    ] = False,
    count: Annotated[
        bool, typer.Option("--count", help="Only print the number of files")
    ] = False,
    verbose: Annotated[
        bool, typer.Option("--verbose", "-v", help="Log debug output to stderr")
    ] = False,
    config_path: Annotated[
        Path | None,
        typer.Option("--config", help="Config file (default: user config dir)"),
    ] = None,
    version: Annotated[
        bool | None,
        typer.Option(
            "--version", callback=version_callback, is_eager=True, help="Show version"
        ),
    ] = None,
) -> None:
    """List every file beneath ROOT, relative to ROOT."""
    configure_logging(verbose)

    try:
        config = WalkerConfig.load(config_path)
    except (ConfigValidationError, ConfigVersionError) as e:
        typer.secho(f"✗ Config error: {e}", fg=typer.colors.RED, bold=True, err=True)
        raise typer.Exit(1) from None

    if jobs is None:
        jobs = config.max_concurrency
    if sequential is None:
        sequential = config.sequential
    if sort is None:
        sort = config.sort_entries

    try:
        if sequential:
            logger.debug("Walking %s sequentially", root)
            files = walk(root, sort_entries=sort)
        else:
            logger.debug("Walking %s with max_concurrency=%s", root, jobs)
            files = asyncio.run(awalk(root, max_concurrency=jobs, sort_entries=sort))
    except TraversalError as e:
        print_traversal_error(e)
        raise typer.Exit(1) from None

    if count:
        print_count(files)
    else:
        print_files(files, null_separated=null)


def main() -> None:
    """Main entry point for the treewalk CLI."""
    app()


if __name__ == "__main__":
    main()
