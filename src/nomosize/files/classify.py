"""Classification of directories found under node_modules."""

from collections.abc import Sequence

from nomosize.models import EntryKind

BIN_DIR_NAME = ".bin"
SCOPE_PREFIX = "@"


def classify_entry(parts: Sequence[str]) -> EntryKind:
    """Classify a directory by its path components relative to node_modules.

    Args:
        parts: Path components, e.g. ("lodash",) or ("@babel", "core")

    Returns:
        EntryKind for the directory

    Raises:
        ValueError: If parts is empty
    """
    if not parts:
        raise ValueError("Cannot classify node_modules itself")

    scoped = parts[0].startswith(SCOPE_PREFIX)

    if len(parts) == 1:
        if scoped:
            return EntryKind.SCOPE_GROUP
        if parts[0] == BIN_DIR_NAME:
            return EntryKind.BIN_DIR
        return EntryKind.TOP_LEVEL_CANDIDATE

    if scoped:
        return EntryKind.SCOPED_CANDIDATE
    return EntryKind.INTERIOR_SKIP
