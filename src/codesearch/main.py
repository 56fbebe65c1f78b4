"""Index the configured directory, then run a demonstration query."""

from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import Dict, Optional

from .config import load_config
from .indexing import LengthMismatchError, build_index
from .search import format_match, search_code

logger = logging.getLogger(__name__)


def run(cfg: Dict) -> int:
    print("Indexing code files...")
    try:
        build_index(Path(cfg["code_dir"]), cfg)
    except LengthMismatchError as e:
        logger.error(f"Error storing code in vector DB: {e}")
        return 1
    except Exception as e:
        logger.error(f"Error storing code in vector DB: {e}")

    query = cfg["search"]["demo_query"]
    print(f'\nSearching for: "{query}"')
    matches = search_code(query, cfg)

    if not matches:
        print("No matches found.")
    else:
        print("\nSearch Results:")
        for match in matches:
            print(format_match(match))
    return 0


def main(cfg: Optional[Dict] = None) -> int:
    logging.basicConfig(
        stream=sys.stderr,
        level=logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    return run(cfg or load_config())
