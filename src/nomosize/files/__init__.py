"""Filesystem operations for nomosize."""

from nomosize.files.classify import classify_entry
from nomosize.files.disk_usage import calc_disk_usage

__all__ = [
    "calc_disk_usage",
    "classify_entry",
]
