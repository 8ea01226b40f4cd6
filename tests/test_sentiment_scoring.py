# tests/test_sentiment_scoring.py
from __future__ import annotations

import pytest

from lexicon_sentiment.analysis.lexicon.snapshot import build_snapshot
from lexicon_sentiment.analysis.sentiment import core as S
from lexicon_sentiment.analysis.sentiment import legacy as L
from lexicon_sentiment.analysis.settings import SentimentSettings
from lexicon_sentiment.analysis.utils import log as LOG

"""
Tests: sentiment/core.py & sentiment/legacy.py
- Built-in lexicon only (no data dir, no word-list files)
- Covers: phrases, windowed negation (double / cancelled), boosters & dampeners,
          contrastive shift, clause isolation, ratio fallback.
"""

# ──────────────────────────────────────────────────────────────────────────────
# Fixtures
# ──────────────────────────────────────────────────────────────────────────────

@pytest.fixture(scope="module")
def lex():
    return build_snapshot(SentimentSettings())


def raw(lex, text):
    return S.score(lex.segment(text), lex)


# ──────────────────────────────────────────────────────────────────────────────
# Words & phrases
# ──────────────────────────────────────────────────────────────────────────────

def test_plain_words_sum(lex):
    assert raw(lex, "good") == 1.0
    assert raw(lex, "terrible") == -1.0
    assert raw(lex, "good and bad") == 0.0
    assert raw(lex, "the table is wooden") == 0.0


def test_phrase_overrides_member_words(lex):
    # "waste" is a negative word too, but only the phrase weight counts
    assert raw(lex, "waste of time") == pytest.approx(-1.5)
    assert raw(lex, "What a WASTE of time!") == pytest.approx(-1.5)


def test_phrase_weight_is_literal(lex):
    # a negation before a phrase does not flip it
    assert raw(lex, "never a waste of time") == pytest.approx(-1.5)


def test_spans_never_overlap(lex):
    spans = S.score_spans(lex.segment("total disappointment and a waste of time"), lex)
    assert [s.text for s in spans] == ["total disappointment", "waste of time"]
    assert all(s.is_phrase for s in spans)
    for a, b in zip(spans, spans[1:]):
        assert a.end <= b.start


# ──────────────────────────────────────────────────────────────────────────────
# Negation
# ──────────────────────────────────────────────────────────────────────────────

@pytest.mark.parametrize("word", ["great", "wonderful", "reliable", "terrible", "slow"])
def test_negation_lowers_positive_and_raises_negative(lex, word):
    plain = raw(lex, word)
    negated = raw(lex, "not " + word)
    assert negated == -plain


def test_negated_positive_scores_below_plain(lex):
    assert raw(lex, "not great") < raw(lex, "great")
    # configured phrase
    assert raw(lex, "not good") == pytest.approx(-0.8)


def test_negation_window_limits_reach(lex):
    assert raw(lex, "not the great") == -1.0
    assert raw(lex, "not at all very great") == pytest.approx(1.29)


def test_contraction_negation(lex):
    assert raw(lex, "I don't like it") == -1.0
    assert raw(lex, "I don’t like it") == -1.0


def test_double_negation_cancels(lex):
    assert raw(lex, "not never great") == 1.0


def test_not_only_does_not_negate(lex):
    assert raw(lex, "not only great") == 1.0
    assert raw(lex, "not without problems") == -1.0


def test_negation_does_not_cross_clauses(lex):
    assert raw(lex, "not. great") == 1.0


# ──────────────────────────────────────────────────────────────────────────────
# Boosters & dampeners
# ──────────────────────────────────────────────────────────────────────────────

def test_booster_raises_magnitude_keeping_sign(lex):
    assert raw(lex, "very good") == pytest.approx(1.29)
    assert raw(lex, "very bad") == pytest.approx(-1.29)


def test_dampener_lowers_magnitude_without_flipping(lex):
    assert raw(lex, "slightly good") == pytest.approx(0.71)
    assert raw(lex, "slightly bad") == pytest.approx(-0.71)


def test_dampener_floor_and_no_sign_flip():
    settings = SentimentSettings().replace(
        positive_words={"ok": 0.2}, negative_words={}, dampeners={"barely": -0.5}, negations=()
    )
    lex = build_snapshot(settings)
    assert raw(lex, "barely ok") == 0.0
    lex = build_snapshot(settings.replace(dampener_floor=0.1))
    assert raw(lex, "barely ok") == pytest.approx(0.1)


def test_modifier_only_applies_when_directly_preceding(lex):
    assert raw(lex, "very much good") == 1.0
    assert raw(lex, "very nice good") == pytest.approx(2.29)


# ──────────────────────────────────────────────────────────────────────────────
# Contrastive shift
# ──────────────────────────────────────────────────────────────────────────────

def test_contrastive_clause_dominates(lex):
    contrast = raw(lex, "great product but terrible support")
    parallel = raw(lex, "great product and wonderful support")
    assert contrast == pytest.approx(-0.5)
    assert parallel == 2.0
    assert contrast < parallel


def test_contrastive_halves_preceding_phrases(lex):
    assert raw(lex, "waste of time but great") == pytest.approx(0.25)


def test_contrastive_outside_window_is_ignored():
    lex = build_snapshot(SentimentSettings().replace(contrastive_window=2))
    assert raw(lex, "great but it is slow now") == 0.0
    assert raw(lex, "great but slow") == pytest.approx(-0.5)


def test_contrastive_does_not_reach_previous_clause(lex):
    assert raw(lex, "great. but terrible") == 0.0


# ──────────────────────────────────────────────────────────────────────────────
# Misc properties
# ──────────────────────────────────────────────────────────────────────────────

def test_empty_tokens_score_zero(lex):
    assert S.score((), lex) == 0.0
    assert S.score_spans((), lex) == []


def test_scoring_is_deterministic(lex):
    text = "Not bad at all, but the support was really slow and unresponsive."
    assert raw(lex, text) == raw(lex, text)
    assert S.score_spans(lex.segment(text), lex) == S.score_spans(lex.segment(text), lex)


def test_scoring_trace_when_topic_enabled(lex, monkeypatch, capsys):
    monkeypatch.setenv("LEXSENT_DEBUG_TOPICS", "scoring")
    LOG.reload_topics()
    try:
        raw(lex, "very good")
    finally:
        monkeypatch.delenv("LEXSENT_DEBUG_TOPICS")
        LOG.reload_topics()
    err = capsys.readouterr().err
    assert "'good'" in err and "+1.2900" in err


def test_ratio_score(lex):
    assert L.ratio_score(lex.segment("good day"), lex) == 0.5
    assert L.ratio_score(lex.segment("good bad day"), lex) == 0.0
    assert L.ratio_score(lex.segment("terrible"), lex) == -1.0
    assert L.ratio_score((), lex) == 0.0
    # no negation handling in ratio mode
    assert L.ratio_score(lex.segment("not good"), lex) == 0.5
