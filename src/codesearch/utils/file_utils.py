"""File utility functions."""

from __future__ import annotations

from pathlib import Path
from typing import Iterable


def is_binary_file(path: Path) -> bool:
    """Check if file is binary by looking for null bytes."""
    with path.open("rb") as f:
        sample = f.read(2048)
    return b"\x00" in sample


def has_extension(name: str, extensions: Iterable[str]) -> bool:
    """Check if a file name ends with one of the given extensions (case-sensitive)."""
    return name.endswith(tuple(extensions))
