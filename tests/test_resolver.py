from __future__ import annotations

import pytest

from nanodisc.core.models import ById, ByName
from nanodisc.core.resolver import looks_like_instruction_disc, parse_item_ref, resolve_input


def test_resolve_input_item_link() -> None:
    out = resolve_input('<a href="itemref://161699/161699/100">Instruction Disc: Notum Siphon</a>')
    assert isinstance(out, ById)
    assert out.disc_id == 161699
    assert out.link_name == "Instruction Disc: Notum Siphon"
    assert out.raw == '<a href="itemref://161699/161699/100">Instruction Disc: Notum Siphon</a>'


def test_resolve_input_single_quotes_and_case() -> None:
    out = resolve_input("<A HREF='ITEMREF://5/6/7'>Broken Bottle</A>")
    assert isinstance(out, ById)
    assert out.disc_id == 5
    assert out.link_name == "Broken Bottle"


def test_resolve_input_link_embedded_in_text() -> None:
    ref = parse_item_ref('look at <a href="itemref://1/2/3">Thing</a> please')
    assert ref is not None
    assert (ref.low_id, ref.high_id, ref.ql, ref.name) == (1, 2, 3, "Thing")


def test_resolve_input_free_text() -> None:
    out = resolve_input("notum siphon")
    assert isinstance(out, ByName)
    assert out.term == "notum siphon"


@pytest.mark.parametrize(
    "argument",
    [
        '<a href="itemref://1/2">Missing ql</a>',
        '<a href="itemref://1/x/3">Bad field</a>',
        '<a href="itemref://1/2/3/4">Too many</a>',
        '<a href="itemref://1/2/3"></a>',
        '<a href="itemref://1/2/3">Unclosed',
        '<a href="text://1/2/3">Other scheme</a>',
        '<a href=itemref://1/2/3>Unquoted</a>',
        '<abbr href="itemref://1/2/3">Wrong tag</abbr>',
        '<a href="itemref://-1/2/3">Negative</a>',
    ],
)
def test_malformed_links_fall_back_to_name(argument: str) -> None:
    out = resolve_input(argument)
    assert isinstance(out, ByName)
    assert out.term == argument


def test_second_link_used_when_first_is_malformed() -> None:
    ref = parse_item_ref('<a href="itemref://1/2">x</a> <a href="itemref://7/8/9">Good</a>')
    assert ref is not None
    assert ref.low_id == 7
    assert ref.name == "Good"


@pytest.mark.parametrize(
    ("name", "expected"),
    [
        ("Notum Siphon Instruction Disc", True),
        ("Instruction Disk: Orphaned", True),
        ("INSTRUCTIONDISC", True),
        ("instruction   disc", True),
        ("Broken Bottle", False),
        ("Instruction Manual", False),
    ],
)
def test_looks_like_instruction_disc(name: str, expected: bool) -> None:
    assert looks_like_instruction_disc(name) is expected
