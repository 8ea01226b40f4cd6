# tests/test_settings.py
"""SentimentSettings: validation, JSON layout parsing, env overrides, file loading."""

from __future__ import annotations

import json
import logging

import pytest

from lexicon_sentiment.analysis.settings import (
    SentimentSettings,
    SettingsError,
    apply_env_overrides,
    load_settings,
)
from lexicon_sentiment.analysis.utils.load_config import (
    ConfigFileNotFound,
    ConfigParseError,
    ConfigTypeError,
    DataDirNotFound,
    clear_config_cache,
)

ENV_VARS = ("LEXSENT_POS_TH", "LEXSENT_NEG_TH", "LEXSENT_ALPHA", "LEXSENT_CASE_SENSITIVE")


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch):
    for var in ENV_VARS:
        monkeypatch.delenv(var, raising=False)
    clear_config_cache()


@pytest.fixture
def data_dir(tmp_path, monkeypatch):
    data = tmp_path / "data"
    (data / "words").mkdir(parents=True)
    monkeypatch.setenv("LEXSENT_DATA_DIR", str(data))
    return data


def _write(data_dir, payload, name="sentiment_settings.json"):
    (data_dir / name).write_text(json.dumps(payload), encoding="utf-8")


# ---------- validation ----------
def test_defaults_are_valid():
    s = SentimentSettings()
    assert s.positive_threshold == 0.1 and s.negative_threshold == -0.1
    assert s.negation_window == 3 and s.contrastive_window == 10
    assert s.normalization_alpha == 15.0
    assert s.thresholds.high_confidence == 0.8


@pytest.mark.parametrize(
    "changes",
    [
        {"positive_threshold": 0.0},
        {"negative_threshold": 0.2},
        {"positive_threshold": "0.1"},
        {"high_confidence": 0.5, "medium_confidence": 0.6},
        {"high_confidence": 1.5},
        {"min_confidence": -0.1},
        {"min_confidence": 0.7},
        {"normalization_alpha": 0},
        {"normalization_alpha": -1.0},
        {"normalization_alpha": float("inf")},
        {"negation_window": -1},
        {"contrastive_window": 2.5},
        {"negation_window": True},
        {"confidence_length_saturation": 0},
        {"dampener_floor": -0.1},
        {"case_sensitive": "yes"},
        {"scoring_mode": "vader"},
        {"word_separator": ""},
        {"word_separator": "("},
        {"word_separator": r"\s*"},
        {"word_list_paths": {"adjectives": "x.txt"}},
    ],
)
def test_invalid_values_raise_settings_error(changes):
    with pytest.raises(SettingsError):
        SentimentSettings(**changes)


def test_settings_error_is_a_config_parse_error():
    assert issubclass(SettingsError, ConfigParseError)
    assert issubclass(SettingsError, ValueError)


def test_replace_revalidates():
    s = SentimentSettings()
    assert s.replace(negation_window=5).negation_window == 5
    with pytest.raises(SettingsError):
        s.replace(positive_threshold=-1.0)


def test_inline_values():
    s = SentimentSettings(negations=("not",))
    assert s.inline_values("negations") == ("not",)
    with pytest.raises(KeyError):
        s.inline_values("colors")


# ---------- from_mapping ----------
def test_from_mapping_sectioned_layout(tmp_path):
    s = SentimentSettings.from_mapping(
        {
            "thresholds": {"positive": 0.2, "negative": -0.3},
            "confidence_levels": {"high": 0.9, "medium": 0.5, "minimum": 0.05, "length_saturation": 8},
            "text_processing": {"word_separator": r"\s+", "case_sensitive": True},
            "word_lists": {
                "positive_words": ["good", "great"],
                "negative_words": {"awful": 1.5},
                "negative_words_path": "words/neg.txt",
            },
            "rules": {
                "boosters": {"very": 0.3},
                "negations": "not, never",
                "negation_window": 4,
                "scoring_mode": "ratio",
            },
        },
        base_dir=tmp_path,
    )
    assert (s.positive_threshold, s.negative_threshold) == (0.2, -0.3)
    assert (s.high_confidence, s.medium_confidence, s.min_confidence) == (0.9, 0.5, 0.05)
    assert s.confidence_length_saturation == 8
    assert s.word_separator == r"\s+" and s.case_sensitive is True
    assert s.positive_words == {"good": 1.0, "great": 1.0}
    assert s.negative_words == {"awful": 1.5}
    assert s.word_list_paths == {"negative_words": "words/neg.txt"}
    assert s.boosters == {"very": 0.3}
    assert s.negations == ("not", "never")
    assert s.negation_window == 4
    assert s.scoring_mode == "ratio"
    assert s.base_dir == tmp_path


def test_from_mapping_flat_keys_and_missing_sections_use_defaults():
    s = SentimentSettings.from_mapping({"negation_window": 2, "contrastives": ["but"]})
    assert s.negation_window == 2
    assert s.contrastives == ("but",)
    assert s.boosters == SentimentSettings().boosters


def test_from_mapping_unknown_keys_warn(caplog):
    with caplog.at_level(logging.WARNING):
        SentimentSettings.from_mapping({"thresholds": {"neutral": 0.0}, "colour": "red"})
    assert "thresholds.neutral" in caplog.text
    assert "colour" in caplog.text


@pytest.mark.parametrize(
    "payload",
    [
        {"thresholds": [0.1, -0.1]},
        {"word_lists": {"positive_words": {"good": "high"}}},
        {"rules": {"negations": ["not", 3]}},
        {"word_lists": {"positive_words_path": 12}},
        {"word_lists": {"negative_words": {"awful": float("inf")}}},
    ],
)
def test_from_mapping_type_errors(payload):
    with pytest.raises(SettingsError):
        SentimentSettings.from_mapping(payload)


def test_from_mapping_rejects_non_object():
    with pytest.raises(SettingsError):
        SentimentSettings.from_mapping(["not", "an", "object"])


# ---------- env overrides ----------
def test_env_overrides(monkeypatch):
    monkeypatch.setenv("LEXSENT_POS_TH", "0.25")
    monkeypatch.setenv("LEXSENT_ALPHA", "5")
    monkeypatch.setenv("LEXSENT_CASE_SENSITIVE", "1")
    s = apply_env_overrides(SentimentSettings())
    assert s.positive_threshold == 0.25
    assert s.normalization_alpha == 5.0
    assert s.case_sensitive is True
    assert s.negative_threshold == -0.1


def test_env_override_non_numeric_is_ignored(monkeypatch, caplog):
    monkeypatch.setenv("LEXSENT_NEG_TH", "low")
    with caplog.at_level(logging.WARNING):
        s = apply_env_overrides(SentimentSettings())
    assert s.negative_threshold == -0.1
    assert "LEXSENT_NEG_TH" in caplog.text


def test_env_override_invalid_value_raises(monkeypatch):
    monkeypatch.setenv("LEXSENT_ALPHA", "-3")
    with pytest.raises(SettingsError):
        apply_env_overrides(SentimentSettings())


def test_no_env_returns_same_object():
    s = SentimentSettings()
    assert apply_env_overrides(s) is s


# ---------- load_settings ----------
def test_load_settings_from_data_dir(data_dir):
    _write(
        data_dir,
        {
            "thresholds": {"positive": 0.15, "negative": -0.15},
            "word_lists": {"positive_words_path": "words/pos.txt"},
        },
    )
    s = load_settings()
    assert s.positive_threshold == 0.15
    assert s.word_list_paths == {"positive_words": "words/pos.txt"}
    assert s.base_dir == data_dir.resolve()


def test_load_settings_named_file_and_env(data_dir, monkeypatch):
    _write(data_dir, {"rules": {"negation_window": 5}}, name="strict.json")
    monkeypatch.setenv("LEXSENT_POS_TH", "0.3")
    s = load_settings("strict")
    assert s.negation_window == 5
    assert s.positive_threshold == 0.3
    assert load_settings("strict", use_env=False).positive_threshold == 0.1


def test_load_settings_invalid_values(data_dir):
    _write(data_dir, {"thresholds": {"positive": -0.5}})
    with pytest.raises(SettingsError):
        load_settings()


def test_load_settings_file_errors(data_dir, tmp_path, monkeypatch):
    with pytest.raises(ConfigFileNotFound):
        load_settings()

    (data_dir / "sentiment_settings.json").write_text("{oops", encoding="utf-8")
    with pytest.raises(ConfigParseError):
        load_settings()

    _write(data_dir, ["not", "a", "dict"])
    with pytest.raises(ConfigTypeError):
        load_settings()

    monkeypatch.setenv("LEXSENT_DATA_DIR", str(tmp_path / "missing"))
    with pytest.raises(DataDirNotFound):
        load_settings()


def test_shipped_settings_file_is_valid():
    from pathlib import Path

    data = Path(__file__).resolve().parents[1] / "data"
    s = load_settings(base_dir=data, use_env=False)
    assert s.word_list_paths["positive_words"] == "words/positive_words.txt"
    assert s.positive_words == {}


# ---------- weights must be finite ----------
@pytest.mark.parametrize(
    "raw",
    [
        '{"rules": {"phrases": {"waste of time": NaN}}}',
        '{"word_lists": {"positive_words": {"good": Infinity}}}',
        '{"rules": {"boosters": {"very": -Infinity}}}',
    ],
)
def test_from_mapping_rejects_non_finite_weights_from_json(raw):
    with pytest.raises(SettingsError, match="finite"):
        SentimentSettings.from_mapping(json.loads(raw))


@pytest.mark.parametrize("field_name", ["positive_words", "negative_words", "boosters", "dampeners", "phrases"])
def test_constructor_rejects_non_finite_weights(field_name):
    with pytest.raises(SettingsError, match="finite"):
        SentimentSettings(**{field_name: {"meh": float("nan")}})


def test_load_settings_rejects_nan_weight_file(data_dir):
    (data_dir / "sentiment_settings.json").write_text(
        '{"rules": {"dampeners": {"slightly": NaN}}}', encoding="utf-8"
    )
    with pytest.raises(SettingsError):
        load_settings()


# ---------- seed values vs configured values ----------
def test_uses_seed_values_tracks_configured_categories():
    s = SentimentSettings.from_mapping({"word_lists": {"positive_words": ["good"]}})
    assert s.uses_seed_values("positive_words") is False
    assert s.uses_seed_values("negative_words") is True
    assert s.uses_seed_values("negations") is True
    assert SentimentSettings(negations=("not",)).uses_seed_values("negations") is False
