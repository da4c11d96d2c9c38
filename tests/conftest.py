"""Shared fixtures for nomosize tests."""

import json
from pathlib import Path

import pytest


def write_package(
    package_dir: Path,
    name: str,
    version: str = "1.0.0",
    files: dict[str, int] | None = None,
) -> int:
    """Create a package directory with a manifest and files of given sizes.

    Returns:
        Expected disk usage of the package (manifest included)
    """
    package_dir.mkdir(parents=True, exist_ok=True)
    manifest = package_dir / "package.json"
    manifest.write_text(json.dumps({"name": name, "version": version}))

    total = manifest.stat().st_size
    for rel_path, size in (files or {}).items():
        file_path = package_dir / rel_path
        file_path.parent.mkdir(parents=True, exist_ok=True)
        file_path.write_bytes(b"x" * size)
        total += size
    return total


@pytest.fixture
def make_package():
    """Factory fixture for package directories, see write_package()."""
    return write_package


def read_path_column(output: str) -> str:
    """Join the text of a rendered table's Path(s) column, folded lines included.

    The column's start is taken from the header row, so paths that rich
    folds over several lines come back as one contiguous string.
    """
    lines = output.splitlines()
    header_index = next(i for i, line in enumerate(lines) if "Path(s)" in line)
    start = lines[header_index].index("Path(s)")
    return "".join(line[start:].strip() for line in lines[header_index + 1 :])


@pytest.fixture
def path_column():
    """Extractor for the Path(s) column of a report, see read_path_column()."""
    return read_path_column
