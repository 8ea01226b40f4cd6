"""
log.py.

Does: Topic-filtered trace lines controlled by LEXSENT_DEBUG_TOPICS (comma-sep or 'all').
Returns: Prints timestamped lines with topic + level to stderr; silent when unset.
Used by: The compound scorer and lexicon store for per-call traces.
"""

import os
import sys
from datetime import datetime
from typing import TextIO

__all__ = ["trace", "trace_enabled", "reload_topics"]


def _load_topics() -> set[str]:
    raw = os.getenv("LEXSENT_DEBUG_TOPICS", "")
    return {t.strip().lower() for t in raw.split(",") if t.strip()}


_DEBUG_TOPICS = _load_topics()


def reload_topics() -> None:
    """Does: Re-read LEXSENT_DEBUG_TOPICS."""
    global _DEBUG_TOPICS
    _DEBUG_TOPICS = _load_topics()


def trace_enabled(topic: str) -> bool:
    """Does: Tell whether `topic` is switched on (lets callers skip building messages)."""
    if not _DEBUG_TOPICS:
        return False
    return "all" in _DEBUG_TOPICS or topic.lower().strip() in _DEBUG_TOPICS


def trace(
    msg: str,
    topic: str = "scoring",
    *,
    level: str = "DEBUG",
    stream: TextIO | None = None,
) -> None:
    """Does: Print a timestamped trace line when `topic` is enabled."""
    if not trace_enabled(topic):
        return
    if stream is None:
        stream = sys.stderr
    ts = datetime.now().strftime("%Y-%m-%d %H:%M:%S")
    print(f"[{ts}] [{topic.lower().strip()}][{level.upper()}] {msg}", file=stream)
