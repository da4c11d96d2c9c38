"""Output formatting for nomosize reports."""

from collections.abc import Sequence
from pathlib import Path

import typer
from rich import box
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from nomosize.models import AggregatedPackage
from nomosize.models import Package
from nomosize.models import ScanFailure

_UNITS = ("KiB", "MiB", "GiB", "TiB", "PiB")


def format_size(num_bytes: int) -> str:
    """Format a byte count with binary units.

    Args:
        num_bytes: Non-negative number of bytes

    Returns:
        e.g. "512 B", "1.50 KiB", "3.00 GiB"

    Raises:
        ValueError: If num_bytes is negative
    """
    if num_bytes < 0:
        raise ValueError(f"Size cannot be negative: {num_bytes}")
    if num_bytes < 1024:
        return f"{num_bytes} B"

    size = float(num_bytes)
    for unit in _UNITS:
        size /= 1024.0
        if size < 1024.0 or unit == _UNITS[-1]:
            break
    return f"{size:.2f} {unit}"


def print_failures(failures: Sequence[ScanFailure]) -> None:
    """Print one warning line per skipped directory to stderr."""
    for failure in failures:
        typer.secho(f"⚠ {failure.message}", fg=typer.colors.YELLOW, err=True)


def print_summary(count: int, total: int) -> None:
    typer.echo(f"Found {count} package(s), consuming {format_size(total)} total")


def print_packages(packages: Sequence[Package], root: Path) -> None:
    """Print a table with one row per installed package.

    Args:
        packages: Packages to list, already sorted and truncated
        root: Project root, paths are shown relative to it
    """
    table = _new_table()
    for package in packages:
        table.add_row(
            escape(package.name),
            escape(package.version),
            format_size(package.disk_usage),
            _display_path(package.path, root),
        )
    Console().print(table)


def print_aggregated(packages: Sequence[AggregatedPackage], root: Path) -> None:
    """Print a table with one row per package name, all versions stacked.

    Args:
        packages: Merged packages to list, already sorted and truncated
        root: Project root, paths are shown relative to it
    """
    table = _new_table()
    for package in packages:
        table.add_row(
            escape(package.name),
            escape("\n".join(package.versions)),
            format_size(package.disk_usage),
            "\n".join(_display_path(path, root) for path in package.paths),
        )
    Console().print(table)


def print_listed_total(listed: int, total: int) -> None:
    """Print how much of the total the listed rows account for."""
    percent = listed / total * 100.0 if total > 0 else 0.0
    typer.echo(
        f"The size of the packages listed above = {format_size(listed)} "
        f"(~{percent:.1f}% of the whole bloat)"
    )


def _new_table() -> Table:
    table = Table(box=box.SIMPLE, show_header=True, header_style="bold cyan")
    table.add_column("Package", overflow="fold")
    table.add_column("Version(s)", no_wrap=True)
    table.add_column("Disk Usage", justify="right", no_wrap=True)
    # Paths fold onto extra lines, never truncated
    table.add_column("Path(s)", style="bright_black", overflow="fold", min_width=24)
    return table


def _display_path(path: Path, root: Path) -> str:
    """Format path for display, relative to the project root if possible.

    Args:
        path: Path to format
        root: Project root

    Returns:
        Relative path string, or path as-is when not under root, escaped
        for rich markup
    """
    try:
        return escape(str(path.relative_to(root)))
    except ValueError:
        return escape(str(path))
