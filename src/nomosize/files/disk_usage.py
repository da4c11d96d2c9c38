"""Disk usage of directory trees."""

import stat
from pathlib import Path


def calc_disk_usage(path: Path) -> int:
    """Sum the sizes of all regular files beneath a directory.

    Symlinks are neither followed nor counted. Directories that cannot be
    listed and entries that cannot be stat'ed contribute nothing.

    Args:
        path: Directory to measure

    Returns:
        Total size in bytes (0 if path is not a directory)
    """
    total = 0
    for dirpath, dirnames, filenames in path.walk():
        # Path.walk() reports symlinks (even to directories) as filenames
        for filename in filenames:
            try:
                st = (dirpath / filename).lstat()
            except OSError:
                continue
            if stat.S_ISREG(st.st_mode):
                total += st.st_size

    return total
