# lexicon_sentiment/analysis/__init__.py

"""
analysis.
=========

Does: Group the lexicon, tokenizer, scorer and classifier subpackages plus the
      settings layer and the orchestrating SentimentAnalyzer.
Used by: The package root and the CLI demo.
"""
from __future__ import annotations

__all__: list[str] = []
__docformat__ = "google"
