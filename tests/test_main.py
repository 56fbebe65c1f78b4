from unittest import mock

from codesearch import main as driver
from codesearch.core import EmbeddingError, Match
from codesearch.indexing import LengthMismatchError


def test_prints_results(cfg, capsys):
    matches = [Match(file="factorial.js", line_number=1, content="function factorial(n) {", distance=0.0421)]
    with mock.patch.object(driver, "build_index", return_value=1), \
            mock.patch.object(driver, "search_code", return_value=matches) as search:
        assert driver.run(cfg) == 0

    out = capsys.readouterr().out
    assert "Indexing code files..." in out
    assert 'Searching for: "function factorial"' in out
    assert "Search Results:" in out
    assert "File: factorial.js, Line: 1, Content: function factorial(n) {, Distance: 0.042" in out
    search.assert_called_once_with("function factorial", cfg)


def test_no_matches(cfg, capsys):
    with mock.patch.object(driver, "build_index", return_value=0), \
            mock.patch.object(driver, "search_code", return_value=[]):
        assert driver.run(cfg) == 0

    assert "No matches found." in capsys.readouterr().out


def test_indexing_error_still_runs_query(cfg, caplog):
    with mock.patch.object(driver, "build_index", side_effect=EmbeddingError("HTTP error! status: 500")), \
            mock.patch.object(driver, "search_code", return_value=[]) as search:
        assert driver.run(cfg) == 0

    search.assert_called_once()
    assert "status: 500" in caplog.text


def test_length_mismatch_is_fatal(cfg):
    with mock.patch.object(driver, "build_index", side_effect=LengthMismatchError("Mismatched lengths")), \
            mock.patch.object(driver, "search_code") as search:
        assert driver.run(cfg) == 1

    search.assert_not_called()
