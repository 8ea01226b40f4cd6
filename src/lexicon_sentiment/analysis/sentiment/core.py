# src/lexicon_sentiment/analysis/sentiment/core.py

"""
Compound scoring.
-----------------
Does:
- Clause-by-clause single pass over segmented tokens
- Longest-match phrase overrides (phrase members are not scored again)
- Word polarity lookup with windowed negation (double negation cancels,
  "not only" / "not without" do not negate)
- Booster/dampener on the directly preceding token, sign preserved
- Contrastive shift: spans before "but"/"however"/... are halved
- High-level API: score(tokens, snapshot) → raw float; score_spans() for the breakdown
"""

from __future__ import annotations

import math
from collections.abc import Sequence
from typing import TYPE_CHECKING

from lexicon_sentiment.analysis.defaults import CONTRASTIVE_DISCOUNT
from lexicon_sentiment.analysis.token.segment import group_clauses
from lexicon_sentiment.analysis.types import ScoredSpan, Token, WordClass
from lexicon_sentiment.analysis.utils.log import trace, trace_enabled

if TYPE_CHECKING:
    from lexicon_sentiment.analysis.lexicon.snapshot import LexiconSnapshot

__all__ = [
    "score",
    "score_spans",
]

__docformat__ = "google"


# ─────────────────────────────────────────────
# Per-token rules
# ─────────────────────────────────────────────
def _is_negated(
    forms: Sequence[str], consumed: Sequence[bool], idx: int, lex: LexiconSnapshot
) -> bool:
    """Odd number of live negations within the window before `idx`."""
    count = 0
    for j in range(max(0, idx - lex.negation_window), idx):
        if consumed[j] or lex.word_class(forms[j]) is not WordClass.NEGATION:
            continue
        if j + 1 < len(forms) and forms[j + 1] in lex.negation_cancellers:
            continue
        count += 1
    return count % 2 == 1


def _apply_modifier(
    forms: Sequence[str], consumed: Sequence[bool], idx: int, weight: float, lex: LexiconSnapshot
) -> float:
    """Booster/dampener directly before `idx` shifts the magnitude; the sign is kept."""
    prev = idx - 1
    if prev < 0 or consumed[prev]:
        return weight
    delta = lex.modifier(forms[prev])
    if delta is None:
        return weight
    magnitude = abs(weight)
    # a dampener may shrink down to the floor but never below zero or above the start
    floor = min(lex.dampener_floor, magnitude)
    return math.copysign(max(magnitude + delta, floor), weight)


# ─────────────────────────────────────────────
# Clause pass
# ─────────────────────────────────────────────
def _score_clause(clause: Sequence[Token], lex: LexiconSnapshot) -> list[ScoredSpan]:
    forms = [t.form for t in clause]
    n = len(forms)
    consumed = [False] * n
    spans: list[ScoredSpan] = []

    # 1) phrases, left to right, longest at each position
    i = 0
    while i < n:
        match = lex.match_phrase(forms, i)
        if match is None:
            i += 1
            continue
        phrase, weight = match
        end = i + len(phrase)
        spans.append(
            ScoredSpan(
                start=clause[i].position,
                end=clause[end - 1].position + 1,
                clause=clause[i].clause,
                forms=phrase,
                weight=weight,
                is_phrase=True,
            )
        )
        for k in range(i, end):
            consumed[k] = True
        i = end

    # 2-4) remaining words
    for i, tok in enumerate(clause):
        if consumed[i]:
            continue
        base = lex.polarity(tok.form)
        if base == 0.0:
            continue
        weight = -base if _is_negated(forms, consumed, i, lex) else base
        weight = _apply_modifier(forms, consumed, i, weight, lex)
        spans.append(
            ScoredSpan(
                start=tok.position,
                end=tok.position + 1,
                clause=tok.clause,
                forms=(tok.form,),
                weight=weight,
            )
        )

    spans.sort(key=lambda s: s.start)

    # 5) contrastive shift: later content dominates
    for c in range(n):
        if consumed[c] or lex.word_class(forms[c]) is not WordClass.CONTRASTIVE:
            continue
        if n - 1 - c > lex.contrastive_window:
            continue
        cut = clause[c].position
        spans = [s.scaled(CONTRASTIVE_DISCOUNT) if s.end <= cut else s for s in spans]

    return spans


# ─────────────────────────────────────────────
# Public API
# ─────────────────────────────────────────────
def score_spans(tokens: Sequence[Token], lex: LexiconSnapshot) -> list[ScoredSpan]:
    """
    Scored spans for `tokens`, in reading order.

    Spans never overlap; clauses are scored independently, so negation and
    contrastive effects never cross a punctuation break.
    """
    spans: list[ScoredSpan] = []
    for clause in group_clauses(tokens):
        spans.extend(_score_clause(clause, lex))
    if trace_enabled("scoring"):
        for s in spans:
            kind = "phrase" if s.is_phrase else "word"
            trace(f"clause={s.clause} {kind} {s.text!r} [{s.start}:{s.end}] → {s.weight:+.4f}")
    return spans


def score(tokens: Sequence[Token], lex: LexiconSnapshot) -> float:
    """Raw compound score: exact (order-independent) sum of all span weights."""
    return math.fsum(s.weight for s in score_spans(tokens, lex))
