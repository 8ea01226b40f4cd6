# lexicon_sentiment/analysis/token/segment.py

"""
segment.py.

Does: Split raw text into an ordered token sequence partitioned into
      punctuation-delimited clauses, using a configurable separator pattern.
Returns: Segmenter.segment() -> tuple[Token, ...]; group_clauses() -> list of clause tuples.
Used by: Lexicon snapshots (entry normalization) and the compound scorer.
"""
from __future__ import annotations

import logging
import re
from collections.abc import Iterable, Iterator, Sequence
from itertools import groupby

from lexicon_sentiment.analysis.token.normalize import (
    normalize_token,
    protect_contractions,
    restore_contractions,
    unicode_hygiene,
)
from lexicon_sentiment.analysis.types import Token

__all__ = [
    "DEFAULT_SEPARATOR",
    "DEFAULT_PUNCTUATION_BREAKS",
    "Segmenter",
    "group_clauses",
]

# ── Logging ──────────────────────────────────────────────────────────────────
log = logging.getLogger(__name__)

DEFAULT_SEPARATOR = r"\W+"
DEFAULT_PUNCTUATION_BREAKS: tuple[str, ...] = (".", "!", "?", ",", ";", ":")


class Segmenter:
    """
    Tokenizer + clause splitter.

    A clause ends at any token that is a punctuation break, or that is
    immediately followed by a separator containing one. Blank tokens are
    dropped without shifting clause ids, so ids stay contiguous from 0.
    """

    def __init__(
        self,
        separator: str | re.Pattern[str] = DEFAULT_SEPARATOR,
        *,
        case_sensitive: bool = False,
        punctuation_breaks: Iterable[str] = DEFAULT_PUNCTUATION_BREAKS,
        normalize_hyphens: bool = True,
        preserve_contractions: bool = True,
    ) -> None:
        self._pattern = separator if isinstance(separator, re.Pattern) else re.compile(separator)
        if self._pattern.fullmatch(""):
            raise ValueError(f"Word separator {self._pattern.pattern!r} matches the empty string")
        self.case_sensitive = case_sensitive
        self.normalize_hyphens = normalize_hyphens
        self.preserve_contractions = preserve_contractions
        self.punctuation_breaks = frozenset(b.strip() for b in punctuation_breaks if b and b.strip())
        self._break_chars = frozenset(b for b in self.punctuation_breaks if len(b) == 1)
        self._break_multi = tuple(sorted(b for b in self.punctuation_breaks if len(b) > 1))

    @property
    def separator(self) -> str:
        return self._pattern.pattern

    def __repr__(self) -> str:
        return (
            f"Segmenter(separator={self.separator!r}, case_sensitive={self.case_sensitive}, "
            f"breaks={sorted(self.punctuation_breaks)})"
        )

    # ── Helpers ──────────────────────────────────────────────────────────────
    def _prepare(self, text: str) -> str:
        s = unicode_hygiene(text)
        if self.normalize_hyphens:
            s = s.replace("-", " ")
        if self.preserve_contractions:
            s = protect_contractions(s)
        return s

    def _chunks(self, text: str) -> Iterator[tuple[str, str]]:
        """Yield (raw_token, separator_that_follows) pairs in order."""
        pos = 0
        for m in self._pattern.finditer(text):
            if m.start() == m.end():
                continue
            yield text[pos : m.start()], m.group()
            pos = m.end()
        yield text[pos:], ""

    def _contains_break(self, sep: str) -> bool:
        if any(ch in self._break_chars for ch in sep):
            return True
        return any(b in sep for b in self._break_multi)

    def _strip_breaks(self, raw: str) -> tuple[str, bool, bool]:
        """Return (core, leading_break, trailing_break) for one raw token."""
        s = raw.strip()
        if not s:
            return "", False, False
        if s in self.punctuation_breaks:
            return "", False, True
        core = s.lstrip("".join(self._break_chars))
        leading = len(core) != len(s)
        stripped = core.rstrip("".join(self._break_chars))
        trailing = len(stripped) != len(core)
        return stripped, leading, trailing

    # ── Public API ───────────────────────────────────────────────────────────
    def segment(self, text: str | None) -> tuple[Token, ...]:
        """
        Does: Tokenize `text` and assign clause ids.
        Returns: Tuple of Token in reading order (empty for blank input).
        """
        if not isinstance(text, str) or not text.strip():
            return ()

        tokens: list[Token] = []
        clause = 0
        pending_break = False
        for raw, sep in self._chunks(self._prepare(text)):
            core, leading, trailing = self._strip_breaks(raw)
            if leading:
                pending_break = True
            surface = restore_contractions(core)
            form = normalize_token(surface, case_sensitive=self.case_sensitive)
            if form:
                if pending_break and tokens:
                    clause += 1
                pending_break = False
                tokens.append(Token(form=form, surface=surface, position=len(tokens), clause=clause))
            if trailing or self._contains_break(sep):
                pending_break = True

        log.debug("Segmented %d chars into %d tokens / %d clauses",
                  len(text), len(tokens), clause + 1 if tokens else 0)
        return tuple(tokens)

    def forms(self, text: str | None) -> tuple[str, ...]:
        """Does: Normalized forms only, ignoring clauses (lexicon entries, phrases)."""
        return tuple(t.form for t in self.segment(text))


def group_clauses(tokens: Sequence[Token]) -> list[tuple[Token, ...]]:
    """Does: Partition a token sequence into clauses, preserving order."""
    return [tuple(group) for _, group in groupby(tokens, key=lambda t: t.clause)]
