# tests/test_lexicon_word_files.py
"""Word-list file parsing: comments, weights, strict vs degrading loaders."""

from __future__ import annotations

import logging

import pytest

from lexicon_sentiment.analysis.lexicon import word_files as W


def test_parse_skips_blank_and_comment_lines():
    lines = ["# header", "", "   ", "good", "  great  ", "#not an entry"]
    assert W.parse_word_lines(lines) == {"good": None, "great": None}


def test_parse_trailing_weight_and_multiword_entries():
    lines = ["superb 1.5", "thumbs up", "waste of time -1.5", "nan nan"]
    out = W.parse_word_lines(lines)
    assert out["superb"] == 1.5
    assert out["thumbs up"] is None
    assert out["waste of time"] == -1.5
    # non-finite numbers are not weights
    assert out["nan nan"] is None


def test_numeric_last_field_is_a_weight_even_when_unweighted():
    out = W.parse_word_lines(["top 10", "10", "number one 1"])
    assert out == {"top": 10.0, "10": None, "number one": 1.0}


def test_parse_repeated_entry_keeps_last_weight():
    assert W.parse_word_lines(["very 0.2", "very 0.4"], weighted=True) == {"very": 0.4}


def test_weighted_category_requires_numeric_weight():
    with pytest.raises(W.WordListFormatError) as exc:
        W.parse_word_lines(["very 0.3", "really"], weighted=True, source="boosters.txt")
    assert "boosters.txt:2" in str(exc.value)


def test_read_word_list_strips_bom(tmp_path):
    p = tmp_path / "pos.txt"
    p.write_bytes("\ufeffgood\nnice 2\n".encode("utf-8"))
    assert W.read_word_list(p) == {"good": None, "nice": 2.0}


def test_load_word_list_ok(tmp_path):
    p = tmp_path / "neg.txt"
    p.write_text("# negatives\nbad\nawful 1.5\n", encoding="utf-8")
    res = W.load_word_list(p)
    assert res.ok is True
    assert res.entries == {"bad": None, "awful": 1.5}
    assert res.mtime == p.stat().st_mtime


def test_load_word_list_missing_file_degrades(tmp_path, caplog):
    with caplog.at_level(logging.WARNING):
        res = W.load_word_list(tmp_path / "missing.txt")
    assert res.ok is False
    assert res.entries == {}
    assert res.mtime is None
    assert "not found" in caplog.text


def test_load_word_list_malformed_degrades(tmp_path, caplog):
    p = tmp_path / "boosters.txt"
    p.write_text("very 0.3\nreally\n", encoding="utf-8")
    with caplog.at_level(logging.WARNING):
        res = W.load_word_list(p, weighted=True)
    assert res.ok is False
    assert res.entries == {}
    assert "Malformed" in caplog.text


def test_load_word_list_undecodable_degrades(tmp_path, caplog):
    p = tmp_path / "latin1.txt"
    p.write_bytes(b"caf\xe9\n")
    with caplog.at_level(logging.WARNING):
        res = W.load_word_list(p)
    assert res.ok is False and res.entries == {}
