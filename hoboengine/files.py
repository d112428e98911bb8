"""File-system helpers."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Union

PathLike = Union[str, "os.PathLike[str]"]


def newer_than(path: PathLike, other: PathLike) -> bool:
    """Return True if ``path`` was modified after ``other``; False if either is unreadable."""
    try:
        first = Path(path).stat().st_mtime_ns
        second = Path(other).stat().st_mtime_ns
    except OSError:
        return False
    return first > second


def exists(path: PathLike) -> bool:
    return Path(path).exists()


def create_directory(path: PathLike) -> None:
    """Create ``path`` and any missing parents."""
    Path(path).mkdir(parents=True, exist_ok=True)


def ensure_directory(path: PathLike) -> None:
    """Create ``path`` unless something already exists there."""
    if not exists(path):
        create_directory(path)


def read_file(path: PathLike) -> str:
    """Return the text of ``path``, or an empty string if it cannot be read."""
    try:
        return Path(path).read_text()
    except (OSError, UnicodeDecodeError):
        return ""