from unittest import mock

import pytest

from codesearch.core import EmbeddingError
from codesearch.indexing import LengthMismatchError, build_index, check_lengths, make_ids
from codesearch.core import LineRecord
from codesearch.storage import VectorStore


def test_check_lengths_names_every_length():
    with pytest.raises(LengthMismatchError) as excinfo:
        check_lengths(["line_0", "line_1", "line_2"], [[0.1], [0.2]], ["a", "b", "c"], [{}, {}, {}])

    assert str(excinfo.value) == "Mismatched lengths: ids=3, embeddings=2, texts=3, metadatas=3"


def test_mismatch_does_not_touch_store(cfg, code_dir):
    (code_dir / "a.py").write_text("one\ntwo\nthree\n")
    store = mock.Mock(spec=VectorStore)
    embedder = mock.Mock()
    embedder.embed.return_value = [[1.0, 0.0], [0.0, 1.0]]

    with pytest.raises(LengthMismatchError):
        build_index(code_dir, cfg, embedder=embedder, store=store)

    store.get_or_create_collection.assert_not_called()
    store.add.assert_not_called()


def test_index_builds_parallel_arrays(cfg, code_dir, fake_embedder):
    (code_dir / "a.py").write_text("def f():\n\n    return 1\n")
    store = mock.Mock(spec=VectorStore)

    count = build_index(code_dir, cfg, embedder=fake_embedder, store=store)

    assert count == 2
    store.get_or_create_collection.assert_called_once_with(vector_dim=fake_embedder.dim)
    store.add.assert_called_once()
    kwargs = store.add.call_args.kwargs
    assert kwargs["ids"] == ["line_0", "line_1"]
    assert kwargs["documents"] == ["def f():", "return 1"]
    assert kwargs["metadatas"] == [
        {"file": "a.py", "line_number": 1},
        {"file": "a.py", "line_number": 3},
    ]
    assert len(kwargs["embeddings"]) == 2


def test_empty_directory_is_a_no_op(cfg, code_dir, fake_embedder, capsys):
    store = mock.Mock(spec=VectorStore)

    assert build_index(code_dir, cfg, embedder=fake_embedder, store=store) == 0

    assert "No code files found to index." in capsys.readouterr().out
    assert fake_embedder.calls == []
    store.add.assert_not_called()


def test_embedding_failure_propagates(cfg, code_dir):
    (code_dir / "a.py").write_text("x = 1\n")
    store = mock.Mock(spec=VectorStore)
    embedder = mock.Mock()
    embedder.embed.side_effect = EmbeddingError("HTTP error! status: 500")

    with pytest.raises(EmbeddingError):
        build_index(code_dir, cfg, embedder=embedder, store=store)
    store.add.assert_not_called()


def test_content_ids_are_stable_and_distinct():
    records = [
        LineRecord(content="x = 1", file="a.py", line_number=1),
        LineRecord(content="x = 1", file="b.py", line_number=1),
    ]

    first = make_ids(records, "content")

    assert first == make_ids(list(records), "content")
    assert first[0] != first[1]
    assert make_ids(records) == ["line_0", "line_1"]


def test_unknown_id_scheme():
    with pytest.raises(ValueError):
        make_ids([], "random")
