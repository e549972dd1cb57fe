import copy
import os
from pathlib import Path
from typing import Any

import tomli
import tomli_w

APP_DIR = "userstore"

DEFAULT_CONFIG: dict[str, Any] = {
    "store": {
        "file_name": "",
    },
    "logging": {
        "level": "warning",
    },
}


def _xdg_app_dir(env_var: str, fallback: str) -> Path:
    """Per-user app directory under $env_var, or ~/fallback when it is unset."""
    root = os.environ.get(env_var) or Path.home() / fallback
    return Path(root) / APP_DIR


def get_cache_dir() -> Path:
    return _xdg_app_dir("XDG_CACHE_HOME", ".cache")


def get_config_dir() -> Path:
    return _xdg_app_dir("XDG_CONFIG_HOME", ".config")


def get_config_path() -> Path:
    return get_config_dir() / "config.toml"


def get_log_dir() -> Path:
    return get_cache_dir() / "log"


def load_config() -> dict[str, Any]:
    """Defaults with the user's config.toml, if any, layered on top."""
    config = copy.deepcopy(DEFAULT_CONFIG)

    config_path = get_config_path()
    if not config_path.exists():
        return config

    with open(config_path, "rb") as f:
        return _deep_update(config, tomli.load(f))


def save_config(config: dict[str, Any]) -> None:
    config_path = get_config_path()
    config_path.parent.mkdir(parents=True, exist_ok=True)

    with open(config_path, "wb") as f:
        tomli_w.dump(config, f)


def _deep_update(target: dict, updates: dict) -> dict:
    for key, value in updates.items():
        current = target.get(key)
        if isinstance(current, dict) and isinstance(value, dict):
            _deep_update(current, value)
        else:
            target[key] = value
    return target


def get_default_file_name(config: dict) -> str:
    return str(config.get("store", {}).get("file_name") or "")


def get_log_level(config: dict) -> str:
    return str(config.get("logging", {}).get("level") or "warning").upper()
