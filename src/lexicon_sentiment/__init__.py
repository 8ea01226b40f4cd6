"""
lexicon_sentiment
=================

Does: Root package for rule-based (lexicon + rules) sentiment scoring.
Returns: Re-exports the stable public surface: SentimentAnalyzer, analyze_text,
         LexiconStore, SentimentSettings, load_settings and the result types.
Used by: All imports starting from `lexicon_sentiment.*`.
"""

from lexicon_sentiment.analysis.lexicon import LexiconSnapshot, LexiconStore
from lexicon_sentiment.analysis.orchestrator import SentimentAnalyzer, analyze_text
from lexicon_sentiment.analysis.settings import SentimentSettings, SettingsError, load_settings
from lexicon_sentiment.analysis.types import ConfidenceTier, Label, SentimentResult

__all__: list[str] = [
    "SentimentAnalyzer",
    "analyze_text",
    "LexiconStore",
    "LexiconSnapshot",
    "SentimentSettings",
    "SettingsError",
    "load_settings",
    "SentimentResult",
    "Label",
    "ConfidenceTier",
]
__version__ = "0.1.0"
__docformat__ = "google"
