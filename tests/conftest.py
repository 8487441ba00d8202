from __future__ import annotations

from collections.abc import Iterator
from pathlib import Path

import pytest

from nanodisc.core.command import setup
from nanodisc.core.store import ReferenceStore

DISCS_SQL = """
DROP TABLE IF EXISTS discs;
CREATE TABLE discs (
    disc_id INTEGER NOT NULL PRIMARY KEY,
    disc_name VARCHAR(200) NOT NULL,
    disc_ql INTEGER NOT NULL,
    crystal_id INTEGER NOT NULL,
    crystal_ql INTEGER NOT NULL,
    crystal_name VARCHAR(200) NOT NULL,
    comment VARCHAR(200)
);
INSERT INTO discs VALUES
    (1, 'Instruction Disc: Nano Programming', 25, 11, 25, 'Nano Programming Expertise', NULL),
    (2, 'Instruction Disc: Notum Siphon', 100, 12, 100, 'Notum Siphon', NULL),
    (3, 'Instruction Disc: Greater Notum Siphon', 160, 13, 160, 'Greater Notum Siphon', 'Only converts after the Shadowlands patch.'),
    (4, 'Nano Crystal (Bullseye)', 50, 14, 50, 'Bullseye', NULL),
    (5, 'Instruction Disk: Orphaned Program', 10, 15, 10, 'Orphaned Program', ''),
    (6, 'Instruction Disc: Lost Line', 30, 16, 30, 'Lost Line', NULL),
    (7, 'Instruction Disc: Boost Alpha', 40, 17, 40, 'Boost Alpha', NULL);
"""

NANOLINES_SQL = """
DROP TABLE IF EXISTS nanolines;
CREATE TABLE nanolines (id INTEGER NOT NULL PRIMARY KEY, name VARCHAR(100) NOT NULL, profession VARCHAR(50));
INSERT INTO nanolines VALUES
    (1, 'Notum Siphons', 'Nano-Technician'),
    (2, 'Nano Programming Buffs', 'Meta-Physicist');
"""

NANOS_SQL = """
DROP TABLE IF EXISTS nanos;
CREATE TABLE nanos (
    crystal_id INTEGER NOT NULL PRIMARY KEY,
    nano_name VARCHAR(200) NOT NULL,
    profession VARCHAR(50),
    location VARCHAR(200),
    nanoline_id INTEGER
);
INSERT INTO nanos VALUES
    (11, 'Nano Programming Expertise', 'Meta-Physicist', 'Trader Shop', 2),
    (12, 'Notum Siphon', 'Nano-Technician', 'Shadowlands Garden', 1),
    (13, 'Greater Notum Siphon', 'Nano-Technician', 'Inferno Sanctuary', 1),
    (14, 'Bullseye', 'Agent', 'Trader Shop', NULL),
    (16, 'Lost Line', 'Trader', 'Pandemonium', NULL),
    (17, 'Boost Alpha', 'General', 'Adonis Garden', 99);
"""


def write_datasets(data_dir: Path) -> None:
    (data_dir / "disc").mkdir(parents=True, exist_ok=True)
    (data_dir / "nanos").mkdir(parents=True, exist_ok=True)
    (data_dir / "disc" / "discs.sql").write_text(DISCS_SQL)
    (data_dir / "nanos" / "nanolines.sql").write_text(NANOLINES_SQL)
    (data_dir / "nanos" / "nanos.sql").write_text(NANOS_SQL)


@pytest.fixture
def store(tmp_path: Path) -> Iterator[ReferenceStore]:
    data_dir = tmp_path / "data"
    write_datasets(data_dir)
    reference = ReferenceStore(sqlite_path=str(tmp_path / "db" / "reference.sqlite"), data_dir=str(data_dir))
    setup(reference)
    yield reference
    reference.close()
