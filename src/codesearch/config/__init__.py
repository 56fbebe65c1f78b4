"""Configuration management for codesearch."""

from .manager import (
    DEFAULT_CONFIG,
    DEFAULT_EXTENSIONS,
    load_config,
    normalize_extensions,
)

__all__ = [
    "DEFAULT_CONFIG",
    "DEFAULT_EXTENSIONS",
    "load_config",
    "normalize_extensions",
]
