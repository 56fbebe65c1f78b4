"""Shared fixtures for codesearch tests."""

import copy
import sys
from pathlib import Path

import pytest

_src_dir = Path(__file__).parent.parent / "src"
if str(_src_dir) not in sys.path:
    sys.path.insert(0, str(_src_dir))

from codesearch.config import DEFAULT_CONFIG  # noqa: E402
from codesearch.core import Embedder  # noqa: E402


class FakeEmbedder(Embedder):
    """Deterministic bag-of-characters embedder."""

    def __init__(self, dim: int = 16):
        self.dim = dim
        self.calls = []

    def embed(self, texts):
        self.calls.append(list(texts))
        vectors = []
        for text in texts:
            vec = [0.0] * self.dim
            for ch in text:
                vec[ord(ch) % self.dim] += 1.0
            vectors.append(self._check_dimension(vec))
        return vectors


@pytest.fixture
def cfg():
    config = copy.deepcopy(DEFAULT_CONFIG)
    config["vector_store"]["qdrant"]["location"] = ":memory:"
    return config


@pytest.fixture
def fake_embedder():
    return FakeEmbedder()


@pytest.fixture
def code_dir(tmp_path: Path) -> Path:
    d = tmp_path / "code_files"
    d.mkdir()
    return d
