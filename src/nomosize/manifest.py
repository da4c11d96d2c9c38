"""Reading package.json manifests."""

import json
from pathlib import Path

from nomosize.exceptions import ManifestError
from nomosize.exceptions import ManifestMissingError
from nomosize.exceptions import ManifestParseError
from nomosize.models import Manifest

MANIFEST_NAME = "package.json"


def read_manifest(package_dir: Path) -> Manifest:
    """Read the name and version declared in a package directory.

    Args:
        package_dir: Directory expected to hold a package.json

    Returns:
        Manifest with the declared name and version

    Raises:
        ManifestMissingError: If there is no package.json in package_dir
        ManifestParseError: If package.json is not a JSON object with
            non-empty string "name" and "version" fields
        ManifestError: If package.json exists but cannot be read
    """
    manifest_path = package_dir / MANIFEST_NAME

    try:
        text = manifest_path.read_text(encoding="utf-8")
    except (FileNotFoundError, NotADirectoryError):
        raise ManifestMissingError(manifest_path) from None
    except UnicodeDecodeError as e:
        raise ManifestParseError(manifest_path, f"not valid UTF-8: {e}") from e
    except OSError as e:
        raise ManifestError(manifest_path, e.strerror or str(e)) from e

    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        raise ManifestParseError(manifest_path, f"invalid JSON: {e}") from e

    if not isinstance(data, dict):
        raise ManifestParseError(manifest_path, "top level is not an object")

    return Manifest(
        name=_required_string(data, "name", manifest_path),
        version=_required_string(data, "version", manifest_path),
    )


def _required_string(data: dict, key: str, manifest_path: Path) -> str:
    if key not in data:
        raise ManifestParseError(manifest_path, f"missing '{key}' field")

    value = data[key]
    if not isinstance(value, str) or not value:
        raise ManifestParseError(
            manifest_path, f"'{key}' must be a non-empty string, got {value!r}"
        )
    return value
