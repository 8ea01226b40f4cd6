# lexicon_sentiment/analysis/utils/__init__.py
"""

Does: Provide config loading and topic-filtered trace logging for the analysis stack.
Returns: Public API via load_config/clear_config_cache/find_data_dir and trace/reload_topics.
Used by: Settings, lexicon store, scorer, tests.
"""

from __future__ import annotations

from .load_config import (
    ConfigFileNotFound,
    ConfigParseError,
    ConfigTypeError,
    DataDirNotFound,
    clear_config_cache,
    find_data_dir,
    load_config,
    resolve_data_path,
)
from .log import (
    reload_topics,
    trace,
    trace_enabled,
)

__all__ = [
    # Config loading
    "load_config",
    "clear_config_cache",
    "find_data_dir",
    "resolve_data_path",
    "DataDirNotFound",
    "ConfigFileNotFound",
    "ConfigParseError",
    "ConfigTypeError",
    # Logging helpers
    "trace",
    "trace_enabled",
    "reload_topics",
]
