from __future__ import annotations

from typing import Any

from .formatter import COMMAND, render_choices, render_mistyped, render_not_a_disc, render_not_convertible, render_single
from .log import logger
from .lookup import LookupService
from .models import ById, DiscRecord, DiscReply
from .resolver import looks_like_instruction_disc, resolve_input
from .settings import load_settings, store_config, text_config
from .store import ReferenceStore
from .text import ReplyChannel, TextFormatter

DATASETS = (("disc", "discs"), ("nanos", "nanolines"), ("nanos", "nanos"))


class DiscCommand:
    """The ``disc`` command: which nano will an instruction disc turn into."""

    name = COMMAND
    description = "Show which nano a disc will turn into"

    def __init__(self, lookup: LookupService, text: TextFormatter):
        self.lookup = lookup
        self.text = text

    def run(self, argument: str) -> DiscReply:
        resolved = resolve_input(argument)
        logger.debug("disc {!r} resolved as {}", argument, resolved.kind)

        if isinstance(resolved, ById):
            disc = self.lookup.find_by_id(resolved.disc_id)
            if disc is None:
                if not looks_like_instruction_disc(resolved.link_name):
                    return DiscReply(
                        argument=argument,
                        outcome="not_an_instruction_disc",
                        pages=[render_not_a_disc(resolved.raw)],
                    )
                return DiscReply(
                    argument=argument,
                    outcome="no_longer_convertible",
                    pages=[render_not_convertible(resolved.raw)],
                )
            return self._single(argument, disc)

        discs = self.lookup.find_by_name(resolved.term)
        if not discs:
            return DiscReply(argument=argument, outcome="no_longer_convertible", pages=[render_mistyped(resolved.term)])
        if len(discs) > 1:
            return DiscReply(
                argument=argument,
                outcome="choices",
                pages=render_choices(discs, self.text),
                matches=discs,
            )
        return self._single(argument, discs[0])

    def _single(self, argument: str, disc: DiscRecord) -> DiscReply:
        details = self.lookup.find_nano_details(disc.crystal_id)
        return DiscReply(
            argument=argument,
            outcome="single",
            pages=[render_single(disc, details, self.text)],
            disc=disc,
            details=details,
            matches=[disc],
        )

    def help_text(self) -> str:
        path = self.lookup.store.data_dir / self.name / f"{self.name}.txt"
        if not path.exists():
            return self.description
        return path.read_text(encoding="utf-8").strip()

    def handle(self, argument: str, sendto: ReplyChannel) -> DiscReply:
        result = self.run(argument)
        sendto.reply(result.message)
        return result


def setup(store: ReferenceStore, force: bool = False) -> list[str]:
    """Import the reference datasets the command reads; returns the ones (re)loaded."""
    loaded: list[str] = []
    for module_name, dataset in DATASETS:
        if store.load_sql_file(module_name, dataset, force=force):
            loaded.append(f"{module_name}/{dataset}")
    return loaded


def build_command(settings: dict[str, Any] | None = None) -> DiscCommand:
    settings = load_settings() if settings is None else settings
    sqlite_path, data_dir = store_config(settings)
    bot_name, max_page_size = text_config(settings)

    store = ReferenceStore(sqlite_path=sqlite_path, data_dir=data_dir)
    setup(store)
    return DiscCommand(LookupService(store), TextFormatter(bot_name=bot_name, max_page_size=max_page_size))
