"""
legacy.py

Does: Ratio-only scoring kept for parity with the first version of the scorer:
      (positive weight − negative weight) / max(token count, total weight).
      No phrases, negation, modifiers or contrastive shift.
Returns: ratio_score(tokens, snapshot) -> float already in [-1, 1].
Used by: SentimentAnalyzer when settings.scoring_mode == "ratio".
"""

from __future__ import annotations

import math
from collections.abc import Sequence
from typing import TYPE_CHECKING

from lexicon_sentiment.analysis.types import Token

if TYPE_CHECKING:
    from lexicon_sentiment.analysis.lexicon.snapshot import LexiconSnapshot

__all__ = ["ratio_score"]


def ratio_score(tokens: Sequence[Token], lex: LexiconSnapshot) -> float:
    if not tokens:
        return 0.0
    weights = [lex.polarity(t.form) for t in tokens]
    positive = math.fsum(w for w in weights if w > 0)
    negative = math.fsum(-w for w in weights if w < 0)
    denominator = max(float(len(tokens)), positive + negative)
    return (positive - negative) / denominator
