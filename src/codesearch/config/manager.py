"""Configuration management for codesearch."""

from __future__ import annotations

import copy
import os
from typing import Dict, List


DEFAULT_EXTENSIONS: List[str] = [".js", ".py", ".txt"]

DEFAULT_CONFIG: Dict = {
    "code_dir": "./code_files",
    "extensions": DEFAULT_EXTENSIONS,
    "collection_name": "code_vectors",
    # "positional" -> line_<n>, "content" -> sha256 of file:line:content
    "id_scheme": "positional",
    "embedding": {
        "backend": "http",
        "base_url": "http://127.0.0.1:8080",
        "model": "sentence-transformers/all-MiniLM-L6-v2",
        "timeout": None,
    },
    "search": {
        "top_k": 5,
        "demo_query": "function factorial",
    },
    "vector_store": {
        "backend": "qdrant",
        "distance": "cosine",
        "batch_size": 100,
        "qdrant": {
            "host": "localhost",
            "port": 6333,
            "location": None,
        },
    },
}


def normalize_extensions(extensions: List[str]) -> List[str]:
    """Normalize extension list to lowercase, dot-prefixed, deduplicated.

    Examples:
        ['js', '.PY', '.js'] -> ['.js', '.py']
    """
    out: List[str] = []
    seen: set[str] = set()
    for ext in extensions:
        ext = ext.strip().lower()
        if not ext:
            continue
        if not ext.startswith("."):
            ext = "." + ext
        if ext not in seen:
            seen.add(ext)
            out.append(ext)
    return out


def load_config() -> Dict:
    """Load configuration.

    Returns a copy of the default configuration with environment overrides applied.
    """
    config = copy.deepcopy(DEFAULT_CONFIG)

    # Override from environment
    config["code_dir"] = os.getenv("CODESEARCH_CODE_DIR", config["code_dir"])
    config["collection_name"] = os.getenv("CODESEARCH_COLLECTION", config["collection_name"])
    config["embedding"]["base_url"] = os.getenv("EMBEDDING_BASE_URL", config["embedding"]["base_url"])
    config["embedding"]["model"] = os.getenv("EMBEDDING_MODEL", config["embedding"]["model"])
    config["vector_store"]["qdrant"]["host"] = os.getenv("QDRANT_HOST", "localhost")
    config["vector_store"]["qdrant"]["port"] = int(os.getenv("QDRANT_PORT", "6333"))

    config["extensions"] = normalize_extensions(config["extensions"])

    return config
