# lexicon_sentiment/analysis/lexicon/snapshot.py

"""
snapshot.py.

Does: Define the immutable LexiconSnapshot (every word/phrase table the scorer
      reads, plus the segmenter that normalized them) and build one from
      SentimentSettings by merging inline values with optional word-list files.
Returns: LexiconSnapshot, build_snapshot(settings).
Used by: LexiconStore (publication/refresh) and the scorers (read-only).
"""
from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field
from pathlib import Path
from types import MappingProxyType

from lexicon_sentiment.analysis.lexicon.word_files import load_word_list
from lexicon_sentiment.analysis.sentiment.classifier import ClassifierThresholds
from lexicon_sentiment.analysis.settings import WEIGHTED_CATEGORIES, SentimentSettings
from lexicon_sentiment.analysis.token.segment import Segmenter
from lexicon_sentiment.analysis.types import Token, WordClass
from lexicon_sentiment.analysis.utils.load_config import resolve_data_path

__all__ = [
    "LexiconSnapshot",
    "build_snapshot",
]

log = logging.getLogger(__name__)

Phrase = tuple[str, ...]


@dataclass(frozen=True)
class LexiconSnapshot:
    """
    Read-only view of the configured lexicon.

    Word tables are keyed by normalized forms (same normalization the
    segmenter applies to input text). Polarity weights are stored as
    magnitudes; the table they sit in gives the sign.
    """

    positive_words: Mapping[str, float]
    negative_words: Mapping[str, float]
    boosters: Mapping[str, float]
    dampeners: Mapping[str, float]
    phrases: Mapping[Phrase, float]
    negations: frozenset[str]
    contrastives: frozenset[str]
    negation_cancellers: frozenset[str]
    segmenter: Segmenter = field(compare=False)
    thresholds: ClassifierThresholds = field(default_factory=ClassifierThresholds)
    negation_window: int = 3
    contrastive_window: int = 10
    normalization_alpha: float = 15.0
    dampener_floor: float = 0.0
    scoring_mode: str = "compound"
    sources: tuple[tuple[Path, float | None], ...] = ()
    _phrase_index: Mapping[str, tuple[tuple[Phrase, float], ...]] = field(
        default_factory=lambda: MappingProxyType({}), init=False, repr=False, compare=False
    )

    def __post_init__(self) -> None:
        grouped: dict[str, list[tuple[Phrase, float]]] = {}
        for forms, weight in self.phrases.items():
            grouped.setdefault(forms[0], []).append((forms, weight))
        # Deterministic: longest first, then lexicographic
        index = {
            head: tuple(sorted(cands, key=lambda fw: (-len(fw[0]), fw[0])))
            for head, cands in grouped.items()
        }
        object.__setattr__(self, "_phrase_index", MappingProxyType(index))

    # ── Lookups used by the scorer ───────────────────────────────────────────
    @property
    def punctuation_breaks(self) -> frozenset[str]:
        return self.segmenter.punctuation_breaks

    def segment(self, text: str | None) -> tuple[Token, ...]:
        return self.segmenter.segment(text)

    def polarity(self, form: str) -> float:
        """Signed base weight of a single word form (0.0 when unknown)."""
        w = self.positive_words.get(form)
        if w is not None:
            return w
        w = self.negative_words.get(form)
        if w is not None:
            return -w
        return 0.0

    def modifier(self, form: str) -> float | None:
        """Signed magnitude delta of a booster (> 0) or dampener (< 0), else None."""
        delta = self.boosters.get(form)
        if delta is None:
            delta = self.dampeners.get(form)
        return delta

    def word_class(self, form: str) -> WordClass:
        if form in self.negations:
            return WordClass.NEGATION
        if form in self.contrastives:
            return WordClass.CONTRASTIVE
        if form in self.boosters:
            return WordClass.BOOSTER
        if form in self.dampeners:
            return WordClass.DAMPENER
        if form in self._phrase_index:
            return WordClass.PHRASE_HEAD
        return WordClass.PLAIN

    def match_phrase(self, forms: Sequence[str], start: int) -> tuple[Phrase, float] | None:
        """Longest configured phrase whose forms equal forms[start:start+len]."""
        for phrase, weight in self._phrase_index.get(forms[start], ()):
            end = start + len(phrase)
            if end <= len(forms) and tuple(forms[start:end]) == phrase:
                return phrase, weight
        return None

    # ── Introspection ────────────────────────────────────────────────────────
    def stats(self) -> dict[str, int]:
        return {
            "positive_words": len(self.positive_words),
            "negative_words": len(self.negative_words),
            "boosters": len(self.boosters),
            "dampeners": len(self.dampeners),
            "phrases": len(self.phrases),
            "negations": len(self.negations),
            "contrastives": len(self.contrastives),
        }

    def is_stale(self) -> bool:
        """True when a word-list file used for this snapshot changed, appeared or vanished."""
        for path, mtime in self.sources:
            try:
                current: float | None = path.stat().st_mtime
            except OSError:
                current = None
            if current != mtime:
                return True
        return False


# ─────────────────────────────────────────────────────────────────────────────
# Construction
# ─────────────────────────────────────────────────────────────────────────────


class _Builder:
    """Collect and normalize every category of one SentimentSettings."""

    def __init__(self, settings: SentimentSettings) -> None:
        self.settings = settings
        self.segmenter = Segmenter(
            settings.word_separator,
            case_sensitive=settings.case_sensitive,
            punctuation_breaks=settings.punctuation_breaks,
            normalize_hyphens=settings.normalize_hyphens,
            preserve_contractions=settings.preserve_contractions,
        )
        self.sources: list[tuple[Path, float | None]] = []

    def _normalized(self, entries: Mapping[str, float | None]) -> dict[Phrase, float | None]:
        out: dict[Phrase, float | None] = {}
        for raw, weight in entries.items():
            forms = self.segmenter.forms(raw)
            if forms:
                out[forms] = weight
        return out

    def _inline(self, category: str) -> dict[Phrase, float | None]:
        inline = self.settings.inline_values(category)
        if isinstance(inline, Mapping):
            return self._normalized(inline)
        return self._normalized(dict.fromkeys(inline))

    def merged(self, category: str) -> dict[Phrase, float | None]:
        """
        Union of file entries and inline entries.

        Configured inline values win over the file on conflicts; built-in seed
        values (inline left at its default) lose to the file.
        """
        seeded = self.settings.uses_seed_values(category)
        merged: dict[Phrase, float | None] = self._inline(category) if seeded else {}
        path = self.settings.word_list_paths.get(category)
        if path:
            loaded = load_word_list(
                resolve_data_path(path, self.settings.base_dir),
                weighted=category in WEIGHTED_CATEGORIES,
            )
            self.sources.append((loaded.path, loaded.mtime))
            merged.update(self._normalized(loaded.entries))
        if not seeded:
            merged.update(self._inline(category))
        return merged

    @staticmethod
    def single_forms(category: str, entries: Mapping[Phrase, float | None]) -> dict[str, float | None]:
        singles = {forms[0]: w for forms, w in entries.items() if len(forms) == 1}
        skipped = sorted(" ".join(forms) for forms in entries if len(forms) > 1)
        if skipped:
            log.warning("Skipping %d multi-word %s entries: %s", len(skipped), category, skipped[:5])
        return singles

    def build(self) -> LexiconSnapshot:
        s = self.settings

        phrases: dict[Phrase, float] = {
            forms: float(w) for forms, w in self.merged("phrases").items() if w is not None
        }

        polar: dict[str, dict[str, float]] = {}
        for category, sign in (("positive_words", 1.0), ("negative_words", -1.0)):
            words: dict[str, float] = {}
            for forms, w in self.merged(category).items():
                magnitude = abs(w) if w is not None else 1.0
                if len(forms) == 1:
                    words[forms[0]] = magnitude
                elif forms not in phrases:
                    # "well-made" → ("well", "made") scores as a phrase
                    phrases[forms] = sign * magnitude
            polar[category] = words

        conflicts = sorted(polar["positive_words"].keys() & polar["negative_words"].keys())
        if conflicts:
            log.warning(
                "Words found in both positive and negative lists are ignored "
                "(check lexicon data quality): %s",
                conflicts,
            )
            for word in conflicts:
                polar["positive_words"].pop(word)
                polar["negative_words"].pop(word)

        boosters = {
            f: abs(w) if w is not None else 1.0
            for f, w in self.single_forms("boosters", self.merged("boosters")).items()
        }
        dampeners = {
            f: -abs(w) if w is not None else -1.0
            for f, w in self.single_forms("dampeners", self.merged("dampeners")).items()
        }

        def _word_set(category: str) -> frozenset[str]:
            return frozenset(self.single_forms(category, self.merged(category)))

        negations = _word_set("negations")
        contrastives = _word_set("contrastives")
        cancellers = frozenset(
            forms[0]
            for forms in self._normalized(dict.fromkeys(s.negation_cancellers))
            if len(forms) == 1
        )

        return LexiconSnapshot(
            positive_words=MappingProxyType(polar["positive_words"]),
            negative_words=MappingProxyType(polar["negative_words"]),
            boosters=MappingProxyType(boosters),
            dampeners=MappingProxyType(dampeners),
            phrases=MappingProxyType(phrases),
            negations=negations,
            contrastives=contrastives,
            negation_cancellers=cancellers,
            segmenter=self.segmenter,
            thresholds=s.thresholds,
            negation_window=s.negation_window,
            contrastive_window=s.contrastive_window,
            normalization_alpha=float(s.normalization_alpha),
            dampener_floor=float(s.dampener_floor),
            scoring_mode=s.scoring_mode,
            sources=tuple(self.sources),
        )


def build_snapshot(settings: SentimentSettings) -> LexiconSnapshot:
    """
    Does: Build a fresh, fully populated snapshot from `settings`.
          Word-list file problems only shrink the lexicon (warnings);
          invalid settings raise SettingsError before anything is built.
    Returns: LexiconSnapshot.
    """
    settings.validate()
    snapshot = _Builder(settings).build()
    log.debug("Built lexicon snapshot: %s", snapshot.stats())
    return snapshot

