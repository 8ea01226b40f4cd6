# src/lexicon_sentiment/analysis/settings.py

"""
Sentiment settings: validated, immutable configuration.
-------------------------------------------------------
Does:
- Hold every tunable of the scorer/classifier in one frozen object
- Parse the sectioned JSON layout of data/sentiment_settings.json (or flat keys)
- Reject invalid combinations at load time (threshold ordering, alpha <= 0, ...)
- Apply LEXSENT_* environment overrides on top of the file
- High-level API: load_settings(name) → SentimentSettings
"""

from __future__ import annotations

import dataclasses
import logging
import math
import os
import re
from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from lexicon_sentiment.analysis.defaults import (
    DEFAULT_BOOSTERS,
    DEFAULT_CONTRASTIVE_WINDOW,
    DEFAULT_CONTRASTIVES,
    DEFAULT_DAMPENER_FLOOR,
    DEFAULT_DAMPENERS,
    DEFAULT_NEGATION_CANCELLERS,
    DEFAULT_NEGATION_WINDOW,
    DEFAULT_NEGATIONS,
    DEFAULT_NEGATIVE_WORDS,
    DEFAULT_NORMALIZATION_ALPHA,
    DEFAULT_PHRASES,
    DEFAULT_POSITIVE_WORDS,
    DEFAULT_PUNCTUATION_BREAKS,
)
from lexicon_sentiment.analysis.sentiment.classifier import ClassifierThresholds
from lexicon_sentiment.analysis.token.segment import DEFAULT_SEPARATOR
from lexicon_sentiment.analysis.utils.load_config import (
    ConfigParseError,
    find_data_dir,
    load_config,
)

__all__ = [
    "SentimentSettings",
    "SettingsError",
    "load_settings",
    "apply_env_overrides",
    "WORD_LIST_CATEGORIES",
    "WEIGHTED_CATEGORIES",
    "SCORING_MODES",
]

__docformat__ = "google"

logger = logging.getLogger(__name__)

SETTINGS_FILE = "sentiment_settings"

WORD_LIST_CATEGORIES: tuple[str, ...] = (
    "positive_words",
    "negative_words",
    "negations",
    "contrastives",
    "boosters",
    "dampeners",
    "phrases",
)
# File lines for these must end in a numeric weight
WEIGHTED_CATEGORIES: frozenset[str] = frozenset({"boosters", "dampeners", "phrases"})

SCORING_MODES: tuple[str, ...] = ("compound", "ratio")
WEIGHT_FIELDS: tuple[str, ...] = ("positive_words", "negative_words", "boosters", "dampeners", "phrases")


class SettingsError(ConfigParseError):
    """Raise when settings values are missing, mistyped or inconsistent."""


# ─────────────────────────────────────────────
# Coercion helpers
# ─────────────────────────────────────────────
def _is_number(v: Any) -> bool:
    return isinstance(v, (int, float)) and not isinstance(v, bool)


def _as_weights(value: Any, name: str) -> dict[str, float]:
    """Lists become weight 1.0 entries; mappings keep their (numeric) weights."""
    if value is None:
        return {}
    if isinstance(value, Mapping):
        out: dict[str, float] = {}
        for k, v in value.items():
            if not isinstance(k, str) or not _is_number(v):
                raise SettingsError(f"{name}: expected str → number entries, got {k!r}: {v!r}")
            if not math.isfinite(v):
                raise SettingsError(f"{name}: weight for {k!r} must be finite, got {v!r}")
            out[k] = float(v)
        return out
    if isinstance(value, str):
        # comma-separated form ("good,great,fine")
        value = [w.strip() for w in value.split(",")]
    if isinstance(value, Iterable):
        out = {}
        for w in value:
            if not isinstance(w, str):
                raise SettingsError(f"{name}: expected strings, got {w!r}")
            if w.strip():
                out[w] = 1.0
        return out
    raise SettingsError(f"{name}: expected a list or mapping, got {type(value).__name__}")


def _as_words(value: Any, name: str) -> tuple[str, ...]:
    if value is None:
        return ()
    if isinstance(value, str):
        value = [w.strip() for w in value.split(",")]
    if isinstance(value, Mapping) or not isinstance(value, Iterable):
        raise SettingsError(f"{name}: expected a list of strings, got {type(value).__name__}")
    words = []
    for w in value:
        if not isinstance(w, str):
            raise SettingsError(f"{name}: expected strings, got {w!r}")
        if w.strip():
            words.append(w)
    return tuple(words)


def _env_float(name: str, default: float) -> float:
    try:
        return float(os.getenv(name, str(default)))
    except ValueError:
        logger.warning("Ignoring non-numeric %s=%r", name, os.getenv(name))
        return default


def _env_bool(name: str, default: bool) -> bool:
    v = os.getenv(name)
    if v is None:
        return default
    return v.strip() not in {"0", "false", "False", ""}


# ─────────────────────────────────────────────
# Settings object
# ─────────────────────────────────────────────
@dataclass(frozen=True)
class SentimentSettings:
    """
    Immutable configuration for lexicon construction, scoring and classification.

    Construction validates; an invalid instance never exists.
    """

    # classification
    positive_threshold: float = 0.1
    negative_threshold: float = -0.1
    high_confidence: float = 0.8
    medium_confidence: float = 0.6
    min_confidence: float = 0.1
    confidence_length_saturation: int = 10

    # text processing
    word_separator: str = DEFAULT_SEPARATOR
    case_sensitive: bool = False
    normalize_hyphens: bool = True
    preserve_contractions: bool = True

    # word lists (inline) + optional files
    positive_words: Mapping[str, float] = field(
        default_factory=lambda: dict.fromkeys(DEFAULT_POSITIVE_WORDS, 1.0)
    )
    negative_words: Mapping[str, float] = field(
        default_factory=lambda: dict.fromkeys(DEFAULT_NEGATIVE_WORDS, 1.0)
    )
    word_list_paths: Mapping[str, str] = field(default_factory=dict)

    # rules
    boosters: Mapping[str, float] = field(default_factory=lambda: dict(DEFAULT_BOOSTERS))
    dampeners: Mapping[str, float] = field(default_factory=lambda: dict(DEFAULT_DAMPENERS))
    phrases: Mapping[str, float] = field(default_factory=lambda: dict(DEFAULT_PHRASES))
    negations: tuple[str, ...] = DEFAULT_NEGATIONS
    negation_cancellers: tuple[str, ...] = DEFAULT_NEGATION_CANCELLERS
    contrastives: tuple[str, ...] = DEFAULT_CONTRASTIVES
    punctuation_breaks: tuple[str, ...] = DEFAULT_PUNCTUATION_BREAKS
    negation_window: int = DEFAULT_NEGATION_WINDOW
    contrastive_window: int = DEFAULT_CONTRASTIVE_WINDOW
    normalization_alpha: float = DEFAULT_NORMALIZATION_ALPHA
    dampener_floor: float = DEFAULT_DAMPENER_FLOOR
    scoring_mode: str = "compound"

    # anchor for relative word_list_paths (the data dir when loaded from file)
    base_dir: Path | None = None

    def __post_init__(self) -> None:
        self.validate()

    # ── Validation ───────────────────────────────────────────────────────────
    def validate(self) -> None:
        """Raise SettingsError on the first inconsistent value."""
        for name in (
            "positive_threshold",
            "negative_threshold",
            "high_confidence",
            "medium_confidence",
            "min_confidence",
            "normalization_alpha",
            "dampener_floor",
        ):
            v = getattr(self, name)
            if not _is_number(v) or math.isnan(v):
                raise SettingsError(f"{name} must be a number, got {v!r}")

        if not (self.negative_threshold < 0 < self.positive_threshold):
            raise SettingsError(
                "thresholds must satisfy negative < 0 < positive, got "
                f"negative={self.negative_threshold}, positive={self.positive_threshold}"
            )
        if not (0.0 <= self.medium_confidence <= self.high_confidence <= 1.0):
            raise SettingsError(
                "confidence levels must satisfy 0 <= medium <= high <= 1, got "
                f"medium={self.medium_confidence}, high={self.high_confidence}"
            )
        if not (0.0 <= self.min_confidence <= 1.0):
            raise SettingsError(f"min_confidence must be within [0, 1], got {self.min_confidence}")
        if self.min_confidence > self.medium_confidence:
            raise SettingsError(
                f"min_confidence ({self.min_confidence}) cannot exceed medium ({self.medium_confidence})"
            )
        if self.normalization_alpha <= 0 or math.isinf(self.normalization_alpha):
            raise SettingsError(
                f"normalization_alpha must be a finite number > 0, got {self.normalization_alpha}"
            )
        if self.dampener_floor < 0:
            raise SettingsError(f"dampener_floor cannot be negative, got {self.dampener_floor}")

        for name in ("negation_window", "contrastive_window", "confidence_length_saturation"):
            v = getattr(self, name)
            if not isinstance(v, int) or isinstance(v, bool) or v < 0:
                raise SettingsError(f"{name} must be a non-negative integer, got {v!r}")
        if self.confidence_length_saturation == 0:
            raise SettingsError("confidence_length_saturation must be >= 1")

        for name in ("case_sensitive", "normalize_hyphens", "preserve_contractions"):
            if not isinstance(getattr(self, name), bool):
                raise SettingsError(f"{name} must be a boolean, got {getattr(self, name)!r}")

        if self.scoring_mode not in SCORING_MODES:
            raise SettingsError(
                f"scoring_mode must be one of {SCORING_MODES}, got {self.scoring_mode!r}"
            )

        if not isinstance(self.word_separator, str) or not self.word_separator:
            raise SettingsError("word_separator must be a non-empty regex string")
        try:
            pattern = re.compile(self.word_separator)
        except re.error as e:
            raise SettingsError(f"word_separator {self.word_separator!r} is not a valid regex: {e}") from e
        if pattern.fullmatch(""):
            raise SettingsError(f"word_separator {self.word_separator!r} matches the empty string")

        unknown = set(self.word_list_paths) - set(WORD_LIST_CATEGORIES)
        if unknown:
            raise SettingsError(
                f"word_list_paths has unknown categories {sorted(unknown)}; "
                f"expected any of {WORD_LIST_CATEGORIES}"
            )

        for name in WEIGHT_FIELDS:
            table = getattr(self, name)
            if not isinstance(table, Mapping):
                raise SettingsError(f"{name} must be a word → weight mapping, got {type(table).__name__}")
            for word, w in table.items():
                if not _is_number(w) or not math.isfinite(w):
                    raise SettingsError(f"{name}: weight for {word!r} must be a finite number, got {w!r}")

    # ── Derived views ────────────────────────────────────────────────────────
    @property
    def thresholds(self) -> ClassifierThresholds:
        return ClassifierThresholds(
            positive=self.positive_threshold,
            negative=self.negative_threshold,
            high_confidence=self.high_confidence,
            medium_confidence=self.medium_confidence,
            min_confidence=self.min_confidence,
            length_saturation=self.confidence_length_saturation,
        )

    def inline_values(self, category: str) -> Mapping[str, float] | tuple[str, ...]:
        """Inline (configured) values for one word-list category."""
        if category not in WORD_LIST_CATEGORIES:
            raise KeyError(category)
        return getattr(self, category)

    def uses_seed_values(self, category: str) -> bool:
        """True when `category` still holds the built-in defaults (nothing configured inline)."""
        f = _FIELDS[category]
        default = f.default_factory() if f.default_factory is not dataclasses.MISSING else f.default
        return self.inline_values(category) == default

    def replace(self, **changes: Any) -> SentimentSettings:
        """Copy with `changes` applied (validated again)."""
        return dataclasses.replace(self, **changes)

    # ── Parsing ──────────────────────────────────────────────────────────────
    @classmethod
    def from_mapping(
        cls, data: Mapping[str, Any], *, base_dir: Path | None = None
    ) -> SentimentSettings:
        """
        Build settings from the sectioned layout::

            {"thresholds": {"positive": .., "negative": ..},
             "confidence_levels": {"high": .., "medium": .., "minimum": .., "length_saturation": ..},
             "text_processing": {"word_separator": .., "case_sensitive": .., ...},
             "word_lists": {"positive_words": [...], "positive_words_path": "..."},
             "rules": {"boosters": {...}, "negation_window": 3, ...}}

        Flat snake_case keys are accepted as well. Unknown keys are logged and ignored.
        """
        if not isinstance(data, Mapping):
            raise SettingsError(f"settings must be a JSON object, got {type(data).__name__}")

        flat: dict[str, Any] = {}
        paths: dict[str, str] = {}

        def _section(name: str) -> Mapping[str, Any]:
            sec = data.get(name) or {}
            if not isinstance(sec, Mapping):
                raise SettingsError(f"section '{name}' must be an object")
            return sec

        renames = {
            "thresholds": {"positive": "positive_threshold", "negative": "negative_threshold"},
            "confidence_levels": {
                "high": "high_confidence",
                "medium": "medium_confidence",
                "minimum": "min_confidence",
                "length_saturation": "confidence_length_saturation",
            },
        }
        for sec_name, mapping in renames.items():
            for key, value in _section(sec_name).items():
                if key not in mapping:
                    logger.warning("Ignoring unknown setting %s.%s", sec_name, key)
                    continue
                flat[mapping[key]] = value

        known = {f.name for f in dataclasses.fields(cls)} - {"base_dir", "word_list_paths"}
        pending = [("", {k: v for k, v in data.items() if k not in renames})]
        for sec_name in ("text_processing", "word_lists", "rules"):
            pending.append((sec_name, _section(sec_name)))

        for sec_name, section in pending:
            for key, value in section.items():
                if sec_name == "" and key in ("text_processing", "word_lists", "rules"):
                    continue
                if key.endswith("_path") and key[: -len("_path")] in WORD_LIST_CATEGORIES:
                    if value:
                        if not isinstance(value, str):
                            raise SettingsError(f"{key} must be a path string, got {value!r}")
                        paths[key[: -len("_path")]] = value
                    continue
                if key == "word_list_paths" and isinstance(value, Mapping):
                    paths.update({k: v for k, v in value.items() if v})
                    continue
                if key in known:
                    flat[key] = value
                else:
                    where = f"{sec_name}.{key}" if sec_name else key
                    logger.warning("Ignoring unknown setting %s", where)

        kwargs: dict[str, Any] = {}
        for key, value in flat.items():
            if key in WEIGHT_FIELDS:
                kwargs[key] = _as_weights(value, key)
            elif key in ("negations", "negation_cancellers", "contrastives", "punctuation_breaks"):
                kwargs[key] = _as_words(value, key)
            else:
                kwargs[key] = value

        return cls(**kwargs, word_list_paths=paths, base_dir=base_dir)


_FIELDS = {f.name: f for f in dataclasses.fields(SentimentSettings)}


# ─────────────────────────────────────────────
# Loading
# ─────────────────────────────────────────────
def apply_env_overrides(settings: SentimentSettings) -> SentimentSettings:
    """Overlay LEXSENT_POS_TH / LEXSENT_NEG_TH / LEXSENT_ALPHA / LEXSENT_CASE_SENSITIVE."""
    changes: dict[str, Any] = {}
    for env, name in (
        ("LEXSENT_POS_TH", "positive_threshold"),
        ("LEXSENT_NEG_TH", "negative_threshold"),
        ("LEXSENT_ALPHA", "normalization_alpha"),
    ):
        if os.getenv(env) is not None:
            changes[name] = _env_float(env, getattr(settings, name))
    if os.getenv("LEXSENT_CASE_SENSITIVE") is not None:
        changes["case_sensitive"] = _env_bool("LEXSENT_CASE_SENSITIVE", settings.case_sensitive)
    if not changes:
        return settings
    logger.info("Applying environment overrides: %s", sorted(changes))
    return settings.replace(**changes)


def load_settings(
    name: str = SETTINGS_FILE,
    *,
    base_dir: Path | None = None,
    allow_comments: bool = False,
    use_env: bool = True,
) -> SentimentSettings:
    """
    Load <data>/<name>.json into SentimentSettings.

    Raises:
        DataDirNotFound / ConfigFileNotFound: file cannot be located.
        ConfigParseError (SettingsError): invalid JSON or invalid values.
        ConfigTypeError: the file is not a JSON object.
    """
    data_dir = (base_dir or find_data_dir()).resolve()
    settings: SentimentSettings = load_config(
        name,
        mode="validated_dict",
        base_dir=data_dir,
        validator=lambda d: SentimentSettings.from_mapping(d, base_dir=data_dir),
        allow_comments=allow_comments,
    )
    if use_env:
        settings = apply_env_overrides(settings)
    logger.debug("Loaded settings %s from %s", name, data_dir)
    return settings
