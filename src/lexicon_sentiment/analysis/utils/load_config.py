# src/lexicon_sentiment/analysis/utils/load_config.py

"""Load JSON settings from a <data/> directory with caching and typed coercions.

Modes:
- "raw"             -> return parsed JSON as-is
- "validated_dict"  -> return the validator's output for a JSON object

Also resolves data-relative paths (word-list files referenced by the settings).
"""

from __future__ import annotations

import json
import logging
import os
import threading
from collections.abc import Callable
from pathlib import Path
from typing import Any, Literal

# --- optional json5 support (no hard dependency) -----------------------------
try:  # mypy: json5 may be missing in most envs
    import json5 as _json5
except Exception:  # pragma: no cover - only hit when json5 missing
    _json5 = None  # type: ignore[assignment]

# ── Public surface ────────────────────────────────────────────────────────────
Mode = Literal["raw", "validated_dict"]
__all__ = [
    "Mode",
    "load_config",
    "clear_config_cache",
    "find_data_dir",
    "resolve_data_path",
    "DataDirNotFound",
    "ConfigFileNotFound",
    "ConfigParseError",
    "ConfigTypeError",
]

DATA_DIR_ENV_VARS: tuple[str, ...] = ("LEXSENT_DATA_DIR", "DATA_DIR")


# ── Exceptions ───────────────────────────────────────────────────────────────
class DataDirNotFound(FileNotFoundError):
    """Raise when no 'data' directory is found while walking upwards."""


class ConfigFileNotFound(FileNotFoundError):
    """Raise when the requested config file cannot be read or resolved."""


class ConfigParseError(ValueError):
    """Raise when JSON parsing/validation fails for a config file."""


class ConfigTypeError(TypeError):
    """Raise when the parsed JSON doesn't match the expected structure."""


# ── Logging & cache ──────────────────────────────────────────────────────────
log = logging.getLogger(__name__)
_CACHE_LOCK = threading.RLock()
# cache key: path, mtime, mode, allow_comments
_CONFIG_CACHE: dict[tuple[Path, float, str, bool], Any] = {}


def clear_config_cache() -> None:
    """Empty the in-memory config cache (pytest / hot reload)."""
    with _CACHE_LOCK:
        _CONFIG_CACHE.clear()
        log.debug("Config cache cleared.")


def _candidate_data_dirs(start: Path | None = None) -> list[Path]:
    start = (start or Path(__file__)).resolve()
    return [(p / "data").resolve() for p in [start, *start.parents]]


def _env_data_dir() -> Path | None:
    for var in DATA_DIR_ENV_VARS:
        v = os.environ.get(var)
        if v:
            return Path(os.path.expanduser(v)).resolve()
    return None


def find_data_dir(start: Path | None = None) -> Path:
    """Return the data dir: env override first, else the nearest 'data/' walking up."""
    env_dir = _env_data_dir()
    if env_dir is not None:
        if not env_dir.is_dir():
            raise DataDirNotFound(f"Data directory from environment does not exist: {env_dir}")
        return env_dir
    for cand in _candidate_data_dirs(start):
        if cand.is_dir():
            return cand
    raise DataDirNotFound(
        "No 'data' directory found.\n"
        "Tried:\n  " + "\n  ".join(str(p) for p in _candidate_data_dirs(start))
    )


def resolve_data_path(path: str | os.PathLike[str], base_dir: Path | None) -> Path:
    """Absolute paths pass through; relative ones are anchored on `base_dir` (or CWD)."""
    p = Path(os.path.expanduser(os.fspath(path)))
    if p.is_absolute():
        return p
    return ((base_dir or Path.cwd()) / p).resolve()


def _read_json(path: Path, allow_comments: bool) -> Any:
    try:
        with path.open("r", encoding="utf-8-sig") as f:
            if allow_comments:
                if _json5 is None:
                    raise ConfigParseError(
                        "json5 requested (allow_comments=True) but not installed"
                    )
                return _json5.load(f)
            return json.load(f)
    except ConfigParseError:
        raise
    except ValueError as e:  # JSONDecodeError, json5 errors, bad UTF-8
        raise ConfigParseError(f"Invalid JSON in {path}: {e}") from e
    except OSError as e:
        raise ConfigFileNotFound(f"Cannot read {path}: {e}") from e


def load_config(
    file: str | os.PathLike[str],
    mode: Mode = "raw",
    *,
    base_dir: Path | None = None,
    validator: Callable[[dict[str, Any]], Any] | None = None,
    allow_comments: bool = False,
) -> Any:
    """Load <data>/<file>.json, parse, coerce by mode, and cache results."""
    data_dir = (base_dir or find_data_dir()).resolve()

    file_str = os.fspath(file)
    file_name = file_str if file_str.endswith((".json", ".json5")) else f"{file_str}.json"
    path = (data_dir / file_name).resolve()
    try:
        path.relative_to(data_dir)
    except ValueError as e:
        raise ConfigFileNotFound(
            f"Refusing to access file outside data dir: {path} (base={data_dir})"
        ) from e

    if not path.is_file():
        raise ConfigFileNotFound(f"Config file not found: {path}")

    try:
        mtime = path.stat().st_mtime
    except OSError as e:
        raise ConfigFileNotFound(f"Cannot stat {path}: {e}") from e

    cache_key = (path, mtime, mode, allow_comments)

    # validated output is never cached: validators may depend on outside state
    if validator is None:
        with _CACHE_LOCK:
            if cache_key in _CONFIG_CACHE:
                log.debug("Config cache HIT: %s (mode=%s)", path.name, mode)
                return _CONFIG_CACHE[cache_key]

    data = _read_json(path, allow_comments)

    if mode == "raw":
        result: Any = data

    elif mode == "validated_dict":
        if not isinstance(data, dict):
            raise ConfigTypeError(
                f"{path.name}: expected dict for mode 'validated_dict', got {type(data).__name__}"
            )
        if validator is not None:
            try:
                data = validator(data)
            except ConfigParseError:
                raise
            except Exception as e:
                raise ConfigParseError(f"{path.name}: validator failed: {e}") from e
        result = data

    else:
        raise ValueError(f"Unknown mode '{mode}'")

    if validator is None:
        with _CACHE_LOCK:
            _CONFIG_CACHE[cache_key] = result
            log.debug("Config cache MISS → STORED: %s (mode=%s)", path.name, mode)
    else:
        log.debug("Config loaded (validator present, not cached): %s", path.name)

    return result

