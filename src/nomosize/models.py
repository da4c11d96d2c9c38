"""Data models for nomosize."""

from dataclasses import dataclass
from dataclasses import field
from enum import Enum
from enum import auto
from pathlib import Path
from typing import Self

from nomosize.exceptions import NomosizeError


@dataclass(frozen=True)
class Manifest:
    """The fields of package.json that identify a package."""

    name: str
    version: str


@dataclass(frozen=True)
class Package:
    """One installed copy of a package."""

    name: str  # As declared in package.json, scope included
    version: str
    path: Path  # Package directory
    disk_usage: int  # Bytes of regular files beneath path


@dataclass(frozen=True)
class AggregatedPackage:
    """All installed copies of one package name."""

    name: str
    versions: tuple[str, ...]  # Discovery order, one per copy
    paths: tuple[Path, ...]
    disk_usage: int  # Sum over all copies

    @property
    def distinct_versions(self) -> int:
        """Number of different versions installed."""
        return len(set(self.versions))


class EntryKind(Enum):
    """What a directory under node_modules is, judged by its position."""

    SCOPE_GROUP = auto()  # node_modules/@scope
    BIN_DIR = auto()  # node_modules/.bin
    TOP_LEVEL_CANDIDATE = auto()  # node_modules/pkg
    INTERIOR_SKIP = auto()  # node_modules/pkg/anything
    SCOPED_CANDIDATE = auto()  # node_modules/@scope/pkg

    @property
    def is_candidate(self) -> bool:
        """Whether this entry may be a package root."""
        return self in (EntryKind.TOP_LEVEL_CANDIDATE, EntryKind.SCOPED_CANDIDATE)


class SortKey(str, Enum):
    """How to rank merged packages."""

    SIZE = "size"
    VERSIONS = "versions"


@dataclass(frozen=True)
class ScanFailure:
    """A directory that was skipped during a scan, and why."""

    path: Path
    error: NomosizeError

    @property
    def message(self) -> str:
        return str(self.error)


@dataclass
class ScanResult:
    """Packages found by a scan, plus everything that had to be skipped."""

    packages: list[Package] = field(default_factory=list)
    failures: list[ScanFailure] = field(default_factory=list)

    def extend(self, other: Self) -> None:
        """Append another result after this one, keeping order."""
        self.packages.extend(other.packages)
        self.failures.extend(other.failures)
