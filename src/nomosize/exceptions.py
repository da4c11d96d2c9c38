"""Custom exceptions for nomosize."""

from pathlib import Path


class NomosizeError(Exception):
    """Base exception for nomosize."""


class ManifestError(NomosizeError):
    """package.json could not be read."""

    def __init__(self, manifest_path: Path, reason: str):
        self.manifest_path = manifest_path
        self.reason = reason
        super().__init__(f"{manifest_path}: {reason}")


class ManifestMissingError(ManifestError):
    """package.json does not exist."""

    def __init__(self, manifest_path: Path):
        super().__init__(manifest_path, "no package.json")


class ManifestParseError(ManifestError):
    """package.json is not valid JSON or lacks a name/version."""


class EntryAccessError(NomosizeError):
    """A node_modules entry could not be inspected."""

    def __init__(self, path: Path, reason: str):
        self.path = path
        self.reason = reason
        super().__init__(f"failed to access entry {path}: {reason}")
