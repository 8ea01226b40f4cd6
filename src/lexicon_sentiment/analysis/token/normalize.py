# lexicon_sentiment/analysis/token/normalize.py
# ──────────────────────────────────────────────────────────────
# Shared utilities for text/token normalization
# ──────────────────────────────────────────────────────────────
"""
normalize.

Does: Deterministic normalization of raw text and single word forms
      (Unicode hygiene, hyphen handling, contraction protection, case folding).
Returns: unicode_hygiene(), normalize_token(), protect_contractions(), restore_contractions().
Used by: The segmenter and, through it, lexicon entry normalization.
"""

from __future__ import annotations

import re
import unicodedata

__all__ = [
    "unicode_hygiene",
    "normalize_token",
    "protect_contractions",
    "restore_contractions",
    "APOSTROPHE_PLACEHOLDER",
]

# Word-character stand-in for an intra-word apostrophe, so "\W+" keeps "don't" whole
APOSTROPHE_PLACEHOLDER = "_apos_"

_CONTRACTION_RE = re.compile(r"(?<=\w)'(?=\w)")
_WHITESPACE_RE = re.compile(r"\s+")

# Common “fancy” Unicode punctuation we want to normalize early
_FANCY_HYPHENS = {"‐", "‑", "‒", "–", "—", "−"}  # ‐ - ‒ – — −
_FANCY_QUOTES = {"‘", "’", "‛", "′", "ʼ"}  # ‘ ’ ‛ ′ ʼ


# ──────────────────────────────────────────────────────────────
# 0) Light Unicode hygiene
# ──────────────────────────────────────────────────────────────


def unicode_hygiene(s: str) -> str:
    """
    Does: Apply light Unicode normalization:
          - NFKC fold
          - map fancy hyphens to ASCII '-'
          - map curly quotes to ASCII "'"
    Returns: Cleaned string ("" for non-strings).
    """
    if not isinstance(s, str):
        return ""
    s = unicodedata.normalize("NFKC", s)
    for ch in _FANCY_HYPHENS:
        s = s.replace(ch, "-")
    for ch in _FANCY_QUOTES:
        s = s.replace(ch, "'")
    return s


# ──────────────────────────────────────────────────────────────
# 1) Contractions
# ──────────────────────────────────────────────────────────────


def protect_contractions(text: str) -> str:
    """Does: Swap intra-word apostrophes for APOSTROPHE_PLACEHOLDER."""
    return _CONTRACTION_RE.sub(APOSTROPHE_PLACEHOLDER, text)


def restore_contractions(token: str) -> str:
    return token.replace(APOSTROPHE_PLACEHOLDER, "'")


# ──────────────────────────────────────────────────────────────
# 2) TOKEN NORMALIZATION
# ──────────────────────────────────────────────────────────────


def normalize_token(token: str, *, case_sensitive: bool = False) -> str:
    """
    Does: Normalize one token:
          - Unicode hygiene
          - trim, collapse internal whitespace
          - casefold unless case_sensitive
    Returns: Normalized form ("" when nothing is left).
    """
    if not isinstance(token, str):
        return ""
    s = _WHITESPACE_RE.sub(" ", unicode_hygiene(token)).strip()
    return s if case_sensitive else s.casefold()
