#!/usr/bin/env python3
from __future__ import annotations

import argparse
import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))


def main() -> None:
    parser = argparse.ArgumentParser(description="Import the disc and nano reference datasets")
    parser.add_argument("--force", action="store_true", help="Re-import even if the SQL files are unchanged")
    args = parser.parse_args()

    from nanodisc.core import setup
    from nanodisc.tools._common import get_store, print_json

    store = get_store()
    print_json({"loaded": setup(store, force=args.force)})


if __name__ == "__main__":
    main()
