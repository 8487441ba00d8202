from __future__ import annotations

import json
from typing import Any

from nanodisc.core import ReferenceStore
from nanodisc.core.settings import load_settings, store_config


def get_store() -> ReferenceStore:
    settings = load_settings()
    sqlite_path, data_dir = store_config(settings)
    return ReferenceStore(sqlite_path=sqlite_path, data_dir=data_dir)


def print_json(data: Any) -> None:
    if hasattr(data, "model_dump"):
        print(json.dumps(data.model_dump(), indent=2))
        return
    print(json.dumps(data, indent=2))
