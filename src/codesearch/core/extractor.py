"""Split source files into line records."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable, List

from ..utils import has_extension, is_binary_file
from .models import LineRecord

logger = logging.getLogger(__name__)


def split_lines(text: str, file: str) -> List[LineRecord]:
    """Split text into trimmed, non-empty line records.

    Line numbers are assigned before blank lines are dropped, so they
    always match the position in the original file.
    """
    records: List[LineRecord] = []
    for index, line in enumerate(text.split("\n")):
        content = line.strip()
        if content:
            records.append(LineRecord(content=content, file=file, line_number=index + 1))
    return records


def iter_code_files(directory: Path, extensions: Iterable[str]) -> List[Path]:
    extensions = list(extensions)
    return sorted(
        (p for p in directory.iterdir() if p.is_file() and has_extension(p.name, extensions)),
        key=lambda p: p.name,
    )


def read_code_files(directory: Path, extensions: Iterable[str]) -> List[LineRecord]:
    """Read matching files in ``directory`` and return their non-blank lines.

    Args:
        directory: Directory to scan (not recursive)
        extensions: Accepted file name suffixes, e.g. ``[".js", ".py"]``

    Returns:
        Line records in file-then-line order, or an empty list if the
        directory or any file could not be read.
    """
    directory = Path(directory)
    code_data: List[LineRecord] = []
    try:
        for fp in iter_code_files(directory, extensions):
            if is_binary_file(fp):
                logger.warning(f"Skipping binary file: {fp}")
                continue
            text = fp.read_text(encoding="utf-8")
            code_data.extend(split_lines(text, fp.name))
    except (OSError, UnicodeDecodeError) as e:
        logger.error(f"Error reading code files from {directory}: {e}")
        return []
    return code_data
