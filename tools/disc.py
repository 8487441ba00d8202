#!/usr/bin/env python3
from __future__ import annotations

import argparse
import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))


def main() -> None:
    parser = argparse.ArgumentParser(description="Show which nano an instruction disc will turn into")
    parser.add_argument("argument", nargs="*", help="Disc name, or a pasted itemref link")
    parser.add_argument("--json", action="store_true", help="Print the full reply as JSON")
    parser.add_argument("--help-text", action="store_true", help="Print the in-chat help for the disc command")
    args = parser.parse_args()
    if not args.argument and not args.help_text:
        parser.error("a disc name or item link is required")

    from nanodisc.core import build_command
    from nanodisc.core.text import ConsoleReply
    from nanodisc.tools._common import print_json

    command = build_command()
    if args.help_text:
        print(command.help_text())
        return
    argument = " ".join(args.argument)
    if args.json:
        print_json(command.run(argument))
        return
    command.handle(argument, ConsoleReply())


if __name__ == "__main__":
    main()
