from __future__ import annotations

import os
from pathlib import Path
from typing import Any

import yaml

DEFAULT_DATA_DIR = Path(__file__).resolve().parents[1] / "data"


def load_settings(path: str | None = None) -> dict[str, Any]:
    config_path = Path(path or os.getenv("NANODISC_SETTINGS_PATH", "config/settings.example.yaml"))
    if not config_path.exists():
        return {}
    return yaml.safe_load(config_path.read_text()) or {}


def store_config(settings: dict[str, Any]) -> tuple[str, str]:
    store = settings.get("store") or {}
    return store.get("sqlite_path", "./data/reference.sqlite"), store.get("data_dir") or str(DEFAULT_DATA_DIR)


def text_config(settings: dict[str, Any]) -> tuple[str, int]:
    bot = settings.get("bot") or {}
    text = settings.get("text") or {}
    return str(bot.get("name", "Nanobot")), int(text.get("max_page_size", 7500))
