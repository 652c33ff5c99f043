import os
from pathlib import Path

import yaml

CONFIG_PATH = Path(__file__).resolve().parents[2] / "config" / "gedcom_viewer.yml"
CONFIG_ENV_VAR = "GEDCOM_VIEWER_CONFIG"

VIEWER_DEFAULTS = {
    "main_person_id": "@I1@",
    "default_generations": 3,
    "min_trace_generations": 6,
    "max_trace_generations": 12,
}

BIOGRAPHY_DEFAULTS = {
    "model": "gemini-2.5-flash",
    "api_key_env": "API_KEY",
}


class GVConfig:
    def __init__(self, data):
        self.paths = data.get("paths", {})
        self.logging = data.get("logging", {})
        self.viewer = {**VIEWER_DEFAULTS, **(data.get("viewer") or {})}
        self.biography = {**BIOGRAPHY_DEFAULTS, **(data.get("biography") or {})}
        self.debug = data.get("debug", False)


def _config_path() -> Path:
    override = os.environ.get(CONFIG_ENV_VAR)
    return Path(override) if override else CONFIG_PATH


def load_config(path: Path | None = None) -> 'GVConfig':
    explicit = path is not None or CONFIG_ENV_VAR in os.environ
    path = path or _config_path()

    if not path.exists():
        if explicit:
            raise FileNotFoundError(f"Config file not found: {path}")
        # Installed without the project tree: run on defaults.
        return GVConfig({})

    with open(path, "r", encoding="utf-8") as f:
        data = yaml.safe_load(f) or {}

    return GVConfig(data)

_config_cache = None

def get_config() -> 'GVConfig':
    global _config_cache
    if _config_cache is None:
        _config_cache = load_config()
    return _config_cache


def reset_config() -> None:
    """Drop the cached config so the next ``get_config`` reloads it."""
    global _config_cache
    _config_cache = None
