"""Data models for codesearch."""

from __future__ import annotations

import dataclasses
from typing import Dict, List, Union

from pydantic import BaseModel, Field


@dataclasses.dataclass(frozen=True)
class LineRecord:
    """A single non-blank source line and where it came from."""

    content: str
    file: str
    line_number: int


@dataclasses.dataclass
class IndexedEntry:
    """A line ready to be written to the vector store."""

    id: str
    embedding: List[float]
    metadata: Dict[str, Union[str, int]]
    document: str


class Match(BaseModel):
    file: str
    line_number: int
    content: str
    distance: float = Field(ge=0.0)
