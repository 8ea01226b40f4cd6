"""
sentiment
=========

Package for turning segmented tokens into a sentiment label.

Submodules:
- core       : Compound scorer (phrases, negation, modifiers, contrastive shift).
- legacy     : Ratio-only fallback scorer.
- normalizer : Raw score → [-1, 1].
- classifier : Label, confidence tier and numeric confidence.

Exports:
- score, score_spans, ratio_score, normalize, classify, estimate_confidence
"""

from .classifier import ClassifierThresholds, classify, estimate_confidence
from .core import score, score_spans
from .legacy import ratio_score
from .normalizer import normalize

__all__ = [
    "score",
    "score_spans",
    "ratio_score",
    "normalize",
    "classify",
    "estimate_confidence",
    "ClassifierThresholds",
]

__docformat__ = "google"
