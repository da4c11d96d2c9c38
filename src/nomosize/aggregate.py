"""Merging and ranking of discovered packages."""

from collections.abc import Iterable
from collections.abc import Sequence

from nomosize.models import AggregatedPackage
from nomosize.models import Package
from nomosize.models import SortKey


def merge_versions(packages: Iterable[Package]) -> list[AggregatedPackage]:
    """Combine all installed copies of each package name into one record.

    Args:
        packages: Packages in discovery order

    Returns:
        One AggregatedPackage per distinct name (exact, case-sensitive
        match), in order of first appearance. Versions and paths keep
        discovery order.
    """
    by_name: dict[str, list[Package]] = {}
    for package in packages:
        by_name.setdefault(package.name, []).append(package)

    return [
        AggregatedPackage(
            name=name,
            versions=tuple(p.version for p in copies),
            paths=tuple(p.path for p in copies),
            disk_usage=sum(p.disk_usage for p in copies),
        )
        for name, copies in by_name.items()
    ]


def sort_packages(packages: Iterable[Package]) -> list[Package]:
    """Sort packages by disk usage, largest first."""
    return sorted(packages, key=lambda p: p.disk_usage, reverse=True)


def sort_aggregated(
    packages: Iterable[AggregatedPackage], key: SortKey = SortKey.SIZE
) -> list[AggregatedPackage]:
    """Sort merged packages, largest (or most versions) first.

    Args:
        packages: Merged packages to rank
        key: SIZE ranks by summed disk usage, VERSIONS by the number of
            distinct versions installed

    Returns:
        New sorted list. Ties keep their input order.
    """
    if key == SortKey.VERSIONS:
        return sorted(packages, key=lambda p: p.distinct_versions, reverse=True)
    return sorted(packages, key=lambda p: p.disk_usage, reverse=True)


def total_disk_usage(packages: Sequence[Package | AggregatedPackage]) -> int:
    return sum(p.disk_usage for p in packages)
