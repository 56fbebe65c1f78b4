"""Search functionality for codesearch."""

from .searcher import CollectionNotFoundError, DefaultSearcher, format_match, search_code, to_matches

__all__ = [
    "CollectionNotFoundError",
    "DefaultSearcher",
    "format_match",
    "search_code",
    "to_matches",
]
