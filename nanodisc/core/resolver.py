from __future__ import annotations

import re

from .models import ById, ByName, ItemRef, ResolvedInput

_ITEMREF_SCHEME = "itemref://"
_QUOTES = "'\""
_DISC_NAME_RE = re.compile(r"instruction\s*dis[ck]", re.IGNORECASE)


def _skip_ws(text: str, i: int) -> int:
    while i < len(text) and text[i].isspace():
        i += 1
    return i


def _is_number(field: str) -> bool:
    return field.isascii() and field.isdigit()


def _parse_anchor(text: str, lowered: str, start: int) -> ItemRef | None:
    i = start + 2
    if i >= len(text) or not text[i].isspace():
        return None
    i = _skip_ws(text, i)
    if not lowered.startswith("href", i):
        return None
    i = _skip_ws(text, i + 4)
    if not text.startswith("=", i):
        return None
    i = _skip_ws(text, i + 1)
    if i >= len(text) or text[i] not in _QUOTES:
        return None
    quote = text[i]
    i += 1
    if not lowered.startswith(_ITEMREF_SCHEME, i):
        return None
    i += len(_ITEMREF_SCHEME)

    end_quote = text.find(quote, i)
    if end_quote < 0:
        return None
    fields = text[i:end_quote].split("/")
    if len(fields) != 3 or not all(_is_number(f) for f in fields):
        return None

    i = _skip_ws(text, end_quote + 1)
    if not text.startswith(">", i):
        return None
    i += 1
    close = lowered.find("</a>", i)
    if close < 0:
        return None
    name = text[i:close]
    if not name:
        return None

    low_id, high_id, ql = (int(f) for f in fields)
    return ItemRef(low_id=low_id, high_id=high_id, ql=ql, name=name)


def parse_item_ref(text: str) -> ItemRef | None:
    """Find the first well-formed ``<a href="itemref://low/high/ql">name</a>`` in text."""
    lowered = text.lower()
    pos = 0
    while True:
        start = lowered.find("<a", pos)
        if start < 0:
            return None
        ref = _parse_anchor(text, lowered, start)
        if ref is not None:
            return ref
        pos = start + 2


def looks_like_instruction_disc(name: str) -> bool:
    return bool(_DISC_NAME_RE.search(name))


def resolve_input(argument: str) -> ResolvedInput:
    ref = parse_item_ref(argument)
    if ref is None:
        return ByName(term=argument)
    return ById(disc_id=ref.low_id, link_name=ref.name, raw=argument)
