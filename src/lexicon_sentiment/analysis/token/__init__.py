# lexicon_sentiment/analysis/token/__init__.py
"""
token.
=====

Does: Provide text normalization and the tokenizer/clause segmenter.
Exports: normalize_token, unicode_hygiene, Segmenter, group_clauses,
         DEFAULT_SEPARATOR, DEFAULT_PUNCTUATION_BREAKS
Used by: Lexicon snapshots and the sentiment scorers.
"""

from __future__ import annotations

from .normalize import (
    normalize_token,
    unicode_hygiene,
)
from .segment import (
    DEFAULT_PUNCTUATION_BREAKS,
    DEFAULT_SEPARATOR,
    Segmenter,
    group_clauses,
)

__all__ = [
    # normalize
    "normalize_token",
    "unicode_hygiene",
    # segment
    "Segmenter",
    "group_clauses",
    "DEFAULT_SEPARATOR",
    "DEFAULT_PUNCTUATION_BREAKS",
]
