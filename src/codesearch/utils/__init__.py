"""Utility functions for codesearch."""

from .file_utils import (
    has_extension,
    is_binary_file,
)

__all__ = [
    "has_extension",
    "is_binary_file",
]
