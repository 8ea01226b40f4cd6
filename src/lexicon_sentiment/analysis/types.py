# lexicon_sentiment/analysis/types.py
"""
types.py.

Does: Value types shared by the segmenter, scorer and classifier
      (tokens, scored spans, results, and the small enums they carry).
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any

__all__ = [
    "Label",
    "ConfidenceTier",
    "WordClass",
    "Token",
    "ScoredSpan",
    "SentimentResult",
]

__docformat__ = "google"


class Label(Enum):
    """Discrete sentiment label."""
    POSITIVE = "POSITIVE"
    NEGATIVE = "NEGATIVE"
    NEUTRAL = "NEUTRAL"


class ConfidenceTier(Enum):
    """Bucket derived from the magnitude of the normalized score."""
    HIGH = "HIGH"
    MEDIUM = "MEDIUM"
    LOW = "LOW"


class WordClass(Enum):
    """Role a word form plays for the scorer, resolved from flat lexicon mappings."""
    PLAIN = "plain"
    BOOSTER = "booster"
    DAMPENER = "dampener"
    NEGATION = "negation"
    CONTRASTIVE = "contrastive"
    PHRASE_HEAD = "phrase_head"


@dataclass(frozen=True)
class Token:
    form: str
    surface: str
    position: int
    clause: int


@dataclass(frozen=True)
class ScoredSpan:
    """A run of tokens (one word, or a whole phrase) with its resolved signed weight."""
    start: int
    end: int
    clause: int
    forms: tuple[str, ...]
    weight: float
    is_phrase: bool = False

    @property
    def text(self) -> str:
        return " ".join(self.forms)

    def scaled(self, factor: float) -> ScoredSpan:
        return ScoredSpan(
            start=self.start,
            end=self.end,
            clause=self.clause,
            forms=self.forms,
            weight=self.weight * factor,
            is_phrase=self.is_phrase,
        )


@dataclass(frozen=True)
class SentimentResult:
    """
    Outcome of one analysis call.

    `confidence` and `tier` are None when the caller did not ask for confidence.
    """
    label: Label
    score: float
    confidence: float | None = None
    tier: ConfidenceTier | None = None

    @classmethod
    def neutral(cls, include_confidence: bool = True) -> SentimentResult:
        if include_confidence:
            return cls(Label.NEUTRAL, 0.0, 0.0, ConfidenceTier.LOW)
        return cls(Label.NEUTRAL, 0.0)

    @property
    def is_positive(self) -> bool:
        return self.label is Label.POSITIVE

    @property
    def is_negative(self) -> bool:
        return self.label is Label.NEGATIVE

    def to_dict(self) -> dict[str, Any]:
        return {
            "label": self.label.value,
            "score": self.score,
            "confidence": self.confidence,
            "tier": self.tier.value if self.tier is not None else None,
        }
