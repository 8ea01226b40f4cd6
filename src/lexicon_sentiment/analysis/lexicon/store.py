# lexicon_sentiment/analysis/lexicon/store.py

"""
store.py.

Does: Own the active LexiconSnapshot and publish replacements atomically.
Returns: LexiconStore with load(), current_snapshot(), refresh(), refresh_if_stale().
Used by: SentimentAnalyzer; administrative reload hooks.

Readers call current_snapshot() once per scoring call and keep that reference;
writers build a complete new snapshot under a lock and swap a single attribute,
so a reader sees either the old or the new lexicon, never a mix.
"""
from __future__ import annotations

import logging
import threading
import time

from lexicon_sentiment.analysis.lexicon.snapshot import LexiconSnapshot, build_snapshot
from lexicon_sentiment.analysis.settings import SentimentSettings

__all__ = ["LexiconStore", "LexiconNotLoadedError"]

log = logging.getLogger(__name__)


class LexiconNotLoadedError(RuntimeError):
    """Raise when a snapshot is requested before any load()."""


class LexiconStore:
    def __init__(self, settings: SentimentSettings | None = None) -> None:
        self._lock = threading.RLock()
        self._snapshot: LexiconSnapshot | None = None
        self._settings: SentimentSettings | None = None
        self._generation = 0
        if settings is not None:
            self.load(settings)

    @property
    def settings(self) -> SentimentSettings | None:
        return self._settings

    @property
    def generation(self) -> int:
        """Number of snapshots published so far."""
        return self._generation

    def load(self, settings: SentimentSettings) -> LexiconSnapshot:
        """
        Does: Build a snapshot from `settings` and publish it.
        Returns: The published snapshot.
        Raises: SettingsError when settings are invalid (nothing is published).
        """
        with self._lock:
            started = time.perf_counter()
            snapshot = build_snapshot(settings)
            # single reference assignment: readers never observe a partial lexicon
            self._snapshot = snapshot
            self._settings = settings
            self._generation += 1
            log.info(
                "Lexicon snapshot #%d published in %.1fms - %s",
                self._generation,
                (time.perf_counter() - started) * 1000.0,
                snapshot.stats(),
            )
            return snapshot

    def current_snapshot(self) -> LexiconSnapshot:
        snapshot = self._snapshot
        if snapshot is None:
            raise LexiconNotLoadedError("LexiconStore.load() has not been called")
        return snapshot

    def refresh(self, settings: SentimentSettings | None = None) -> None:
        """
        Does: Rebuild from `settings` (or the last loaded settings), re-reading
              word-list files, and swap the active snapshot.
        """
        with self._lock:
            target = settings or self._settings
            if target is None:
                raise LexiconNotLoadedError("refresh() needs settings before the first load()")
            log.info("Refreshing lexicon snapshot")
            self.load(target)

    def is_stale(self) -> bool:
        snapshot = self._snapshot
        return snapshot is not None and snapshot.is_stale()

    def refresh_if_stale(self) -> bool:
        """Refresh when a backing word-list file changed; return whether it did."""
        with self._lock:
            if not self.is_stale():
                return False
            self.refresh()
            return True
