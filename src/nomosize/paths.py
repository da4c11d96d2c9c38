"""Path normalization and validation utilities."""

from pathlib import Path


def normalize_root(root: Path) -> Path:
    """Normalize and validate the project root.

    Args:
        root: Directory holding package.json and node_modules

    Returns:
        Absolute path to the project root

    Raises:
        FileNotFoundError: If root does not exist
        NotADirectoryError: If root is not a directory
    """
    root = root.resolve()

    if not root.exists():
        raise FileNotFoundError(f"Project root does not exist: {root}")
    if not root.is_dir():
        raise NotADirectoryError(f"Project root is not a directory: {root}")

    return root
