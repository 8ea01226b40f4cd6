# orchestrator.py
from __future__ import annotations

"""
orchestrator.py
===============

Does: High-level orchestration of one analysis call: borrow the active lexicon
      snapshot, segment, score (compound or legacy ratio), normalize, classify.
Returns:
  - SentimentAnalyzer(store).analyze(text, include_confidence=True) -> SentimentResult
  - analyze_text(text) -> SentimentResult using a lazily built default analyzer
Used by: The CLI demo, services embedding the scorer, tests.
"""

import logging
import threading
from collections.abc import Iterable

from lexicon_sentiment.analysis.lexicon.snapshot import LexiconSnapshot
from lexicon_sentiment.analysis.lexicon.store import LexiconStore
from lexicon_sentiment.analysis.sentiment.classifier import classify, estimate_confidence
from lexicon_sentiment.analysis.sentiment.core import score, score_spans
from lexicon_sentiment.analysis.sentiment.legacy import ratio_score
from lexicon_sentiment.analysis.sentiment.normalizer import normalize
from lexicon_sentiment.analysis.settings import SentimentSettings, load_settings
from lexicon_sentiment.analysis.types import ScoredSpan, SentimentResult
from lexicon_sentiment.analysis.utils.load_config import ConfigFileNotFound, DataDirNotFound

logger = logging.getLogger(__name__)

__all__ = [
    "SentimentAnalyzer",
    "analyze_text",
    "get_default_analyzer",
    "reset_default_analyzer",
]


class SentimentAnalyzer:
    """
    Stateless scoring front-end over a LexiconStore.

    Every call reads the store's snapshot once and uses it for the whole
    call, so a concurrent refresh never mixes two lexicons inside one result.
    """

    def __init__(
        self,
        store: LexiconStore | None = None,
        settings: SentimentSettings | None = None,
    ) -> None:
        if store is None:
            store = LexiconStore(settings or SentimentSettings())
        elif settings is not None:
            store.load(settings)
        self._store = store

    @property
    def store(self) -> LexiconStore:
        return self._store

    def refresh(self, settings: SentimentSettings | None = None) -> None:
        self._store.refresh(settings)

    # ── Core call ────────────────────────────────────────────────────────────
    def analyze_with(
        self, snapshot: LexiconSnapshot, text: str | None, *, include_confidence: bool = True
    ) -> SentimentResult:
        """Analyze `text` against an explicitly given snapshot."""
        if text is None or not text.strip():
            return SentimentResult.neutral(include_confidence)

        tokens = snapshot.segment(text)
        if not tokens:
            return SentimentResult.neutral(include_confidence)

        if snapshot.scoring_mode == "ratio":
            value = ratio_score(tokens, snapshot)
        else:
            raw = score(tokens, snapshot)
            value = normalize(raw, snapshot.normalization_alpha)
            logger.debug("raw=%.4f normalized=%.4f tokens=%d", raw, value, len(tokens))

        label, tier = classify(value, snapshot.thresholds)
        if not include_confidence:
            return SentimentResult(label=label, score=value)
        confidence = estimate_confidence(value, len(tokens), snapshot.thresholds)
        return SentimentResult(label=label, score=value, confidence=confidence, tier=tier)

    def analyze(self, text: str | None, *, include_confidence: bool = True) -> SentimentResult:
        """
        Score one text.

        None/blank text is not an error: it yields a NEUTRAL result with
        score 0.0 (and confidence 0.0 / LOW when confidence is requested).
        """
        return self.analyze_with(
            self._store.current_snapshot(), text, include_confidence=include_confidence
        )

    def analyze_many(
        self, texts: Iterable[str | None], *, include_confidence: bool = True
    ) -> list[SentimentResult]:
        """Score several texts against one snapshot."""
        snapshot = self._store.current_snapshot()
        return [
            self.analyze_with(snapshot, t, include_confidence=include_confidence) for t in texts
        ]

    def explain(self, text: str | None) -> list[ScoredSpan]:
        """Per-span breakdown of the compound score (debugging aid)."""
        snapshot = self._store.current_snapshot()
        return score_spans(snapshot.segment(text), snapshot)


# ── Default analyzer (lazy) ──────────────────────────────────────────────────
_default_analyzer: SentimentAnalyzer | None = None
_default_lock = threading.Lock()


def _default_settings() -> SentimentSettings:
    try:
        return load_settings()
    except (DataDirNotFound, ConfigFileNotFound) as e:
        logger.info("No settings file found (%s); using built-in defaults.", e)
        return SentimentSettings()


def get_default_analyzer() -> SentimentAnalyzer:
    """Build (once) an analyzer from data/sentiment_settings.json or built-in defaults."""
    global _default_analyzer
    if _default_analyzer is None:
        with _default_lock:
            if _default_analyzer is None:
                _default_analyzer = SentimentAnalyzer(LexiconStore(_default_settings()))
    return _default_analyzer


def reset_default_analyzer() -> None:
    """Forget the default analyzer (tests, settings hot swap)."""
    global _default_analyzer
    with _default_lock:
        _default_analyzer = None


def analyze_text(text: str | None, include_confidence: bool = True) -> SentimentResult:
    return get_default_analyzer().analyze(text, include_confidence=include_confidence)
