from __future__ import annotations

from .models import DiscRecord, NanoDetails
from .text import PAGEBREAK, TextFormatter

COMMAND = "disc"
CHOICE_HEADER = "Multiple matches, please choose one"


def disc_link(disc: DiscRecord, text: TextFormatter) -> str:
    return text.make_item(disc.disc_id, disc.disc_id, disc.disc_ql, disc.disc_name)


def nano_link(disc: DiscRecord, text: TextFormatter) -> str:
    return text.make_item(disc.crystal_id, disc.crystal_id, disc.crystal_ql, disc.crystal_name)


def _details_suffix(details: NanoDetails | None) -> str:
    if details is None:
        return ""
    parts = [value for value in (details.profession, details.nanoline_name, details.location) if value]
    if not parts:
        return ""
    return f" ({', '.join(parts)})"


def render_single(disc: DiscRecord, details: NanoDetails | None, text: TextFormatter) -> str:
    msg = f"{disc_link(disc, text)} will turn into {nano_link(disc, text)}{_details_suffix(details)}."
    if disc.comment:
        msg += f" <red>{disc.comment}<end>"
    return msg


def choice_command(disc: DiscRecord, text: TextFormatter) -> str:
    return f"{COMMAND} {disc_link(disc, text)}"


def render_choices(discs: list[DiscRecord], text: TextFormatter) -> list[str]:
    entries = [text.make_chatcmd(disc.disc_name, f"/tell <myname> {choice_command(disc, text)}") for disc in discs]
    pages = text.make_blob(
        f"{len(discs)} discs matching your search",
        f"\n{PAGEBREAK}".join(entries),
        CHOICE_HEADER,
    )
    return [f"Found {page}." for page in pages]


def render_not_a_disc(raw: str) -> str:
    return f"{raw} is not an instruction disc."


def render_not_convertible(raw: str) -> str:
    return f"{raw} cannot be made into a nano anymore."


def render_mistyped(term: str) -> str:
    return f"Either <highlight>{term}<end> was mistyped or it cannot be turned into a nano anymore."
