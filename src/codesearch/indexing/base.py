"""Indexer Interface."""

from __future__ import annotations

from typing import Dict
from pathlib import Path


class Indexer:
    """Abstract base class for line indexing."""

    def index(self, directory: Path, cfg: Dict) -> int:
        raise NotImplementedError
