# defaults.py
# ===========

"""
defaults.
=========

Does: Define the built-in rule dictionaries and scalar defaults used when the
      settings file leaves a category empty or no data directory is present.
Used By: SentimentSettings defaults, lexicon snapshot construction, tests.
Returns: Pure data structures only (no side effects).
"""

from __future__ import annotations

from types import MappingProxyType

from lexicon_sentiment.analysis.token.segment import DEFAULT_PUNCTUATION_BREAKS  # noqa: F401

# ── 1) Modifiers ─────────────────────────────────────────────────────────────

# Added to the magnitude of the polarity word they directly precede
DEFAULT_BOOSTERS = MappingProxyType(
    {
        "extremely": 0.30,
        "very": 0.29,
        "really": 0.27,
        "highly": 0.27,
        "so": 0.25,
        "totally": 0.25,
        "completely": 0.25,
        "utterly": 0.25,
        "absolutely": 0.25,
        "incredibly": 0.30,
        "too": 0.20,
    }
)

# Subtracted from the magnitude (never flips the sign)
DEFAULT_DAMPENERS = MappingProxyType(
    {
        "slightly": -0.29,
        "somewhat": -0.27,
        "bit": -0.25,
        "little": -0.25,
        "mildly": -0.25,
        "rather": -0.20,
        "fairly": -0.20,
        "kinda": -0.20,
        "quite": -0.15,
        "average": -0.10,
    }
)


# ── 2) Clause structure ──────────────────────────────────────────────────────

DEFAULT_CONTRASTIVES: tuple[str, ...] = ("but", "however", "though", "yet")

DEFAULT_NEGATIONS: tuple[str, ...] = (
    "not", "no", "never", "none", "nobody", "nothing", "neither", "nowhere",
    "hardly", "scarcely", "barely",
    "isnt", "isn't", "arent", "aren't", "wasnt", "wasn't", "werent", "weren't",
    "dont", "don't", "doesnt", "doesn't", "didnt", "didn't",
    "cant", "can't", "cannot", "couldnt", "couldn't", "wont", "won't",
    "wouldnt", "wouldn't", "shouldnt", "shouldn't",
    "hasnt", "hasn't", "havent", "haven't", "hadnt", "hadn't",
)

# "not only ..." / "not without ..." do not negate what follows
DEFAULT_NEGATION_CANCELLERS: tuple[str, ...] = ("only", "without")


# ── 3) Phrases (literal weights, matched before single words) ────────────────

DEFAULT_PHRASES = MappingProxyType(
    {
        "waste of time": -1.5,
        "poorly communicated": -1.0,
        "customer support unresponsive": -1.2,
        "fell apart": -1.2,
        "not good": -0.8,
        "worth recommending": 0.6,
        "hard to believe": -0.8,
        "total disappointment": -1.5,
        "more bugs than it fixed": -1.3,
        "performance has drastically worsened": -1.4,
    }
)


# ── 4) Seed polarity words (data/words/*.txt extends these) ──────────────────

DEFAULT_POSITIVE_WORDS: tuple[str, ...] = (
    "good", "great", "excellent", "amazing", "awesome", "wonderful", "fantastic",
    "love", "loved", "like", "liked", "happy", "pleased", "delighted", "best",
    "perfect", "nice", "brilliant", "outstanding", "superb", "reliable", "fast",
    "helpful", "friendly", "enjoy", "enjoyed", "recommend", "beautiful", "impressive",
)

DEFAULT_NEGATIVE_WORDS: tuple[str, ...] = (
    "bad", "terrible", "awful", "horrible", "poor", "worst", "hate", "hated",
    "dislike", "disappointed", "disappointing", "disappointment", "slow", "broken",
    "useless", "annoying", "angry", "sad", "ugly", "buggy", "unreliable", "waste",
    "fail", "failed", "failure", "problem", "problems", "rude", "unresponsive",
)


# ── 5) Scalars ───────────────────────────────────────────────────────────────

DEFAULT_NEGATION_WINDOW = 3
DEFAULT_CONTRASTIVE_WINDOW = 10
DEFAULT_NORMALIZATION_ALPHA = 15.0
DEFAULT_DAMPENER_FLOOR = 0.0

# Weight kept by spans that precede a contrastive conjunction
CONTRASTIVE_DISCOUNT = 0.5
