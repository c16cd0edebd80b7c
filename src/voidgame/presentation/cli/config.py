"""CLI configuration helpers for options persistence."""
from __future__ import annotations

import json
import os
from pathlib import Path
from typing import Dict

_DEFAULT_SHOW_COMBAT_LOG = True


def get_user_data_dir() -> Path:
    """Return the per-user data directory."""
    if os.name == "nt":
        base = os.environ.get("APPDATA")
        if base:
            return Path(base) / "Void"
        return Path.home() / "Void"
    return Path.home() / ".config" / "void_rpg"


def get_default_config_path() -> Path:
    """Return the default per-user config path."""
    return get_user_data_dir() / "config.json"


def _defaults() -> Dict[str, bool]:
    return {"show_combat_log": _DEFAULT_SHOW_COMBAT_LOG}


def load_config(path: Path | None = None) -> Dict[str, bool]:
    """Load config from disk or return defaults."""
    config_path = path or get_default_config_path()
    try:
        raw = json.loads(config_path.read_text(encoding="utf-8"))
    except (OSError, json.JSONDecodeError):
        return _defaults()
    if not isinstance(raw, dict):
        return _defaults()
    show_log = raw.get("show_combat_log")
    if not isinstance(show_log, bool):
        show_log = _DEFAULT_SHOW_COMBAT_LOG
    return {"show_combat_log": show_log}


def save_config(config: Dict[str, bool], path: Path | None = None) -> None:
    """Persist config to disk."""
    config_path = path or get_default_config_path()
    config_path.parent.mkdir(parents=True, exist_ok=True)
    payload = {"show_combat_log": bool(config.get("show_combat_log", _DEFAULT_SHOW_COMBAT_LOG))}
    config_path.write_text(json.dumps(payload, indent=2, sort_keys=True), encoding="utf-8")
