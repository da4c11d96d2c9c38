"""Discovery of installed packages under node_modules."""

import stat
from collections.abc import Iterator
from pathlib import Path

from nomosize.exceptions import EntryAccessError
from nomosize.exceptions import ManifestError
from nomosize.files import calc_disk_usage
from nomosize.files import classify_entry
from nomosize.manifest import read_manifest
from nomosize.models import EntryKind
from nomosize.models import Package
from nomosize.models import ScanFailure
from nomosize.models import ScanResult

NODE_MODULES = "node_modules"


def discover_packages(root: Path) -> ScanResult:
    """Find every package installed under root/node_modules, at any depth.

    Packages nested in another package's own node_modules are listed right
    after the package that contains them. Directories that cannot be read
    or lack a valid package.json are skipped and recorded as failures.

    Args:
        root: Project directory (or package directory) containing node_modules

    Returns:
        ScanResult with packages in discovery order and any failures.
        Empty if root has no node_modules directory.
    """
    result = ScanResult()
    node_modules = root / NODE_MODULES
    if not node_modules.is_dir():
        return result

    for entry in _walk_node_modules(node_modules, result.failures):
        # INTERIOR_SKIP never occurs here, _walk_node_modules skips package interiors
        kind = classify_entry(entry.relative_to(node_modules).parts)
        if not kind.is_candidate:
            continue

        try:
            manifest = read_manifest(entry)
        except ManifestError as e:
            result.failures.append(ScanFailure(path=entry, error=e))
            continue

        result.packages.append(
            Package(
                name=manifest.name,
                version=manifest.version,
                path=entry,
                disk_usage=calc_disk_usage(entry),
            )
        )
        result.extend(discover_packages(entry))

    return result


def _walk_node_modules(
    node_modules: Path, failures: list[ScanFailure]
) -> Iterator[Path]:
    """Yield directories in node_modules, descending only into @scope groups.

    Interior directories of a package are not yielded here; nested
    node_modules are reached by discover_packages() recursing into each
    package it finds.
    """
    for child in _subdirectories(node_modules, failures):
        yield child
        if classify_entry((child.name,)) is EntryKind.SCOPE_GROUP:
            yield from _subdirectories(child, failures)


def _subdirectories(directory: Path, failures: list[ScanFailure]) -> list[Path]:
    """List the real (non-symlink) subdirectories of directory, sorted by name."""
    try:
        children = sorted(directory.iterdir())
    except OSError as e:
        failures.append(_access_failure(directory, e))
        return []

    subdirectories = []
    for child in children:
        try:
            mode = child.lstat().st_mode
        except OSError as e:
            failures.append(_access_failure(child, e))
            continue
        if stat.S_ISDIR(mode):
            subdirectories.append(child)

    return subdirectories


def _access_failure(path: Path, error: OSError) -> ScanFailure:
    return ScanFailure(
        path=path, error=EntryAccessError(path, error.strerror or str(error))
    )
