"""CLI configuration helpers for data location and options persistence."""
from __future__ import annotations

import json
import os
from pathlib import Path
from typing import Dict

DATA_DIR_ENV = "STARBATTLE_DATA_DIR"
_DEFAULT_LOG_LEVEL = "WARNING"
_VALID_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")

ConfigPayload = Dict[str, object]


def get_user_data_dir() -> Path:
    """Return the per-user data directory, honouring STARBATTLE_DATA_DIR."""
    override = os.environ.get(DATA_DIR_ENV)
    if override:
        return Path(override)
    if os.name == "nt":
        base = os.environ.get("APPDATA")
        if base:
            return Path(base) / "StarBattle"
        return Path.home() / "StarBattle"
    return Path.home() / ".config" / "star_battle"


def get_default_config_path() -> Path:
    """Return the default per-user config path."""
    return get_user_data_dir() / "config.json"


def _normalize_log_level(value: object) -> str:
    if isinstance(value, str) and value.upper() in _VALID_LOG_LEVELS:
        return value.upper()
    return _DEFAULT_LOG_LEVEL


def _normalize_seed(value: object) -> int | None:
    if isinstance(value, int) and not isinstance(value, bool):
        return value
    return None


def _defaults() -> ConfigPayload:
    return {"log_level": _DEFAULT_LOG_LEVEL, "seed": None}


def load_config(path: Path | None = None) -> ConfigPayload:
    """Load config from disk or return defaults."""
    config_path = path or get_default_config_path()
    try:
        raw = json.loads(config_path.read_text(encoding="utf-8"))
    except FileNotFoundError:
        return _defaults()
    except (OSError, ValueError):
        return _defaults()
    if not isinstance(raw, dict):
        return _defaults()
    return {"log_level": _normalize_log_level(raw.get("log_level")), "seed": _normalize_seed(raw.get("seed"))}


def save_config(config: ConfigPayload, path: Path | None = None) -> None:
    """Persist config to disk."""
    config_path = path or get_default_config_path()
    config_path.parent.mkdir(parents=True, exist_ok=True)
    payload = {
        "log_level": _normalize_log_level(config.get("log_level")),
        "seed": _normalize_seed(config.get("seed")),
    }
    config_path.write_text(json.dumps(payload, indent=2, sort_keys=True), encoding="utf-8")
