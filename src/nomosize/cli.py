"""Command-line interface for nomosize."""

from pathlib import Path
from typing import Annotated

import typer

from nomosize import __version__
from nomosize.aggregate import merge_versions
from nomosize.aggregate import sort_aggregated
from nomosize.aggregate import sort_packages
from nomosize.aggregate import total_disk_usage
from nomosize.discovery import discover_packages
from nomosize.manifest import MANIFEST_NAME
from nomosize.models import SortKey
from nomosize.output import print_aggregated
from nomosize.output import print_failures
from nomosize.output import print_listed_total
from nomosize.output import print_packages
from nomosize.output import print_summary
from nomosize.paths import normalize_root

app = typer.Typer(help="Calculate node_modules dependency sizes")


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        typer.echo(f"nomosize {__version__}")
        raise typer.Exit()


@app.command()
def report(
    root: Annotated[
        Path,
        typer.Argument(
            help="The app root where top-level package.json and node_modules are"
        ),
    ],
    top: Annotated[
        int,
        typer.Option("--top", "-t", min=0, help="How many packages to display"),
    ] = 10,
    sort: Annotated[
        SortKey,
        typer.Option("--sort", "-s", help="How to sort packages (with --merge)"),
    ] = SortKey.SIZE,
    merge: Annotated[
        bool,
        typer.Option("--merge", "-m", help="Merge multiple versions into one record"),
    ] = False,
    version: Annotated[
        bool | None,
        typer.Option(
            "--version", callback=version_callback, is_eager=True, help="Show version"
        ),
    ] = None,
) -> None:
    """Calculate node_modules dependency sizes."""
    try:
        root = normalize_root(root)
    except (FileNotFoundError, NotADirectoryError) as e:
        typer.secho(f"✗ {e}", fg=typer.colors.RED, bold=True, err=True)
        raise typer.Exit(1) from None

    if not (root / MANIFEST_NAME).is_file():
        typer.secho(
            f"⚠ No {MANIFEST_NAME} in {root}, is this a project root?",
            fg=typer.colors.YELLOW,
            err=True,
        )

    result = discover_packages(root)
    print_failures(result.failures)

    total = total_disk_usage(result.packages)
    print_summary(len(result.packages), total)

    if merge:
        merged = sort_aggregated(merge_versions(result.packages), sort)[:top]
        print_aggregated(merged, root)
        listed = total_disk_usage(merged)
    else:
        packages = sort_packages(result.packages)[:top]
        print_packages(packages, root)
        listed = total_disk_usage(packages)

    print_listed_total(listed, total)


def main() -> None:
    """Main entry point for the nomosize CLI."""
    app()


if __name__ == "__main__":
    main()
