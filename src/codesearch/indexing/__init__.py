"""Indexing functionality for codesearch."""

from .indexer import DefaultIndexer, LengthMismatchError, build_index, check_lengths, make_ids

__all__ = [
    "DefaultIndexer",
    "LengthMismatchError",
    "build_index",
    "check_lengths",
    "make_ids",
]
