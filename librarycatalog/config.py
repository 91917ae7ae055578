from __future__ import annotations

import os
from pathlib import Path
import tomllib

DEFAULT_CONFIG_PATH = Path("~/.config/librarycatalog/config.toml").expanduser()


def load_config(path: Path | None = None) -> dict:
    cfg_path = path or DEFAULT_CONFIG_PATH
    if not cfg_path.exists():
        # Allow running without config (defaults + CLI args)
        return {}

    try:
        with cfg_path.open("rb") as f:
            cfg = tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        raise SystemExit(f"Invalid config file {cfg_path}: {e}")

    # log_file is the only path setting
    paths = cfg.get("paths", {})
    log_file = paths.get("log_file")
    if isinstance(log_file, str):
        paths["log_file"] = os.path.expanduser(log_file)

    return cfg
