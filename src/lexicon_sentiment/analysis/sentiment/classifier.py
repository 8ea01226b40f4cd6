# src/lexicon_sentiment/analysis/sentiment/classifier.py

"""
classifier.py
=============

Does: Turn a normalized score into a label, a confidence tier and (optionally)
      a numeric confidence.
Returns: classify(score, thresholds) -> (Label, ConfidenceTier);
         estimate_confidence(score, token_count, thresholds) -> float in [0, 1].
"""

from __future__ import annotations

from dataclasses import dataclass

from lexicon_sentiment.analysis.types import ConfidenceTier, Label

__all__ = [
    "ClassifierThresholds",
    "classify",
    "label_for",
    "tier_for",
    "estimate_confidence",
]


@dataclass(frozen=True)
class ClassifierThresholds:
    positive: float = 0.1
    negative: float = -0.1
    high_confidence: float = 0.8
    medium_confidence: float = 0.6
    min_confidence: float = 0.1
    length_saturation: int = 10


def label_for(score: float, thresholds: ClassifierThresholds) -> Label:
    # strict comparisons: a score sitting on a threshold stays NEUTRAL
    if score > thresholds.positive:
        return Label.POSITIVE
    if score < thresholds.negative:
        return Label.NEGATIVE
    return Label.NEUTRAL


def tier_for(score: float, thresholds: ClassifierThresholds) -> ConfidenceTier:
    magnitude = abs(score)
    if magnitude >= thresholds.high_confidence:
        return ConfidenceTier.HIGH
    if magnitude >= thresholds.medium_confidence:
        return ConfidenceTier.MEDIUM
    return ConfidenceTier.LOW


def classify(score: float, thresholds: ClassifierThresholds) -> tuple[Label, ConfidenceTier]:
    """Pure mapping from normalized score to (label, tier)."""
    return label_for(score, thresholds), tier_for(score, thresholds)


def estimate_confidence(score: float, token_count: int, thresholds: ClassifierThresholds) -> float:
    """
    Numeric confidence from score magnitude and text length.

    Strong scores on short texts stay modest: the magnitude term
    (|score| * 2, capped at 1) is scaled by token_count / length_saturation
    (capped at 1). Non-empty input never drops below `min_confidence`.

    The result is snapped to the configured levels: anything reaching
    `high_confidence` reports exactly that level, everything else is capped
    at `medium_confidence`.
    """
    if token_count <= 0:
        return 0.0
    magnitude = min(abs(score) * 2.0, 1.0)
    length_factor = min(token_count / float(thresholds.length_saturation), 1.0)
    confidence = max(thresholds.min_confidence, magnitude * length_factor)
    if confidence >= thresholds.high_confidence:
        return thresholds.high_confidence
    return min(confidence, thresholds.medium_confidence)
