import re
from datetime import time
from functools import lru_cache

import yaml

from .lib import paths

DEFAULTS = {
    "file": None,
    "due_time": "23:59",
    "name_width": 20,
}

_TIME_RE = re.compile(r"^([01]\d|2[0-3]):([0-5]\d)$")


def _validate_config(cfg: dict) -> None:
    """Validate config structure in place. Fail fast on invalid types."""
    if not isinstance(cfg, dict):
        raise ValueError(f"Config must be a dict, got {type(cfg).__name__}")

    # YAML 1.1 reads an unquoted 23:59 as the base-60 integer 1439.
    raw = cfg.get("due_time")
    if isinstance(raw, int) and not isinstance(raw, bool):
        cfg["due_time"] = f"{raw // 60:02d}:{raw % 60:02d}"

    if cfg.get("file") is not None and not isinstance(cfg["file"], str):
        raise ValueError("Config 'file' must be a string")

    if "due_time" in cfg and not _TIME_RE.match(str(cfg["due_time"])):
        raise ValueError(f"Config 'due_time' must be HH:MM, got {cfg['due_time']!r}")

    width = cfg.get("name_width")
    if width is not None and (isinstance(width, bool) or not isinstance(width, int) or width < 4):
        raise ValueError("Config 'name_width' must be an integer >= 4")


def clear_cache():
    load_config.cache_clear()


@lru_cache(maxsize=1)
def load_config() -> dict:
    """Load config.yaml merged over DEFAULTS, or DEFAULTS alone if not found."""
    path = paths.config_file()
    cfg: dict = {}
    if path.exists():
        with open(path, encoding="utf-8") as f:
            try:
                cfg = yaml.safe_load(f) or {}
            except yaml.YAMLError as e:
                raise ValueError(f"Config {path} is not valid YAML: {e}") from e
        _validate_config(cfg)
    return {**DEFAULTS, **cfg}


def due_time() -> time:
    hours, minutes = str(load_config()["due_time"]).split(":")
    return time(int(hours), int(minutes))


def name_width() -> int:
    return int(load_config()["name_width"])
