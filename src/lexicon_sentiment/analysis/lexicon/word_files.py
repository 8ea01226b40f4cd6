# lexicon_sentiment/analysis/lexicon/word_files.py

"""
word_files.py.

Does: Read plain-text word lists (UTF-8, one entry per line, '#' comments,
      optional trailing numeric weight) for lexicon construction.
Returns: load_word_list() -> WordListLoad (never raises: failures degrade to
         an empty list and a warning); read_word_list() for strict callers.
Used by: Lexicon snapshot construction on load/refresh only.
"""
from __future__ import annotations

import logging
import math
import os
from collections.abc import Iterable
from dataclasses import dataclass, field
from pathlib import Path

__all__ = [
    "WordListFormatError",
    "WordListLoad",
    "parse_word_lines",
    "read_word_list",
    "load_word_list",
]

log = logging.getLogger(__name__)


class WordListFormatError(ValueError):
    """Raise when a word-list line cannot be parsed."""


@dataclass(frozen=True)
class WordListLoad:
    """Outcome of loading one file: entries (maybe empty) plus what was read."""
    path: Path
    entries: dict[str, float | None] = field(default_factory=dict)
    mtime: float | None = None
    ok: bool = True


def _parse_weight(raw: str) -> float | None:
    try:
        w = float(raw)
    except ValueError:
        return None
    return w if math.isfinite(w) else None


def parse_word_lines(
    lines: Iterable[str], *, weighted: bool = False, source: str = "<lines>"
) -> dict[str, float | None]:
    """
    Does: Parse lines into {entry: weight-or-None}, skipping blanks and '#' lines.
          "superb 1.5" carries a weight; "thumbs up" does not.
          For weighted categories a missing/non-numeric weight is an error.
          A numeric last field is always read as the weight, in every
          category: "top 10" is entry "top" with weight 10.0. A single-field
          line ("10") is an entry.
    Returns: Entries in file order (a repeated entry keeps its last weight).
    """
    out: dict[str, float | None] = {}
    for lineno, raw in enumerate(lines, start=1):
        line = raw.strip()
        if not line or line.startswith("#"):
            continue
        parts = line.split()
        weight = _parse_weight(parts[-1]) if len(parts) > 1 else None
        if weight is not None:
            entry = " ".join(parts[:-1])
        elif weighted:
            raise WordListFormatError(f"{source}:{lineno}: expected '<entry> <weight>', got {line!r}")
        else:
            entry = " ".join(parts)
        out[entry] = weight
    return out


def read_word_list(path: str | os.PathLike[str], *, weighted: bool = False) -> dict[str, float | None]:
    """Strict variant: propagate OSError / UnicodeDecodeError / WordListFormatError."""
    p = Path(path)
    with p.open("r", encoding="utf-8-sig") as f:
        return parse_word_lines(f, weighted=weighted, source=p.name)


def load_word_list(path: str | os.PathLike[str], *, weighted: bool = False) -> WordListLoad:
    """
    Does: Load one word-list file, degrading to an empty list on any
          missing/unreadable/malformed file (logged as a warning).
    Returns: WordListLoad with entries, mtime (None when missing) and ok flag.
    """
    p = Path(path)
    try:
        mtime = p.stat().st_mtime
    except OSError:
        log.warning("Word list file not found: %s", p)
        return WordListLoad(path=p, ok=False)
    try:
        entries = read_word_list(p, weighted=weighted)
    except (OSError, UnicodeDecodeError) as e:
        log.warning("Cannot read word list %s: %s", p, e)
        return WordListLoad(path=p, mtime=mtime, ok=False)
    except WordListFormatError as e:
        log.warning("Malformed word list %s (ignored): %s", p, e)
        return WordListLoad(path=p, mtime=mtime, ok=False)
    log.debug("Loaded %d entries from %s", len(entries), p)
    return WordListLoad(path=p, entries=entries, mtime=mtime)
