from __future__ import annotations

from .log import logger
from .models import DiscRecord, NanoDetails
from .store import ReferenceStore

_DISC_COLUMNS = "disc_id, disc_name, disc_ql, crystal_id, crystal_ql, crystal_name, comment"
_SQLITE_INT_MIN = -(2**63)
_SQLITE_INT_MAX = 2**63 - 1


def _tokens(term: str) -> list[str]:
    return [part for part in term.split() if part]


def _like_pattern(token: str) -> str:
    escaped = token.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")
    return f"%{escaped}%"


class LookupService:
    def __init__(self, store: ReferenceStore):
        self.store = store

    def find_by_id(self, disc_id: int) -> DiscRecord | None:
        if not _SQLITE_INT_MIN <= disc_id <= _SQLITE_INT_MAX:
            logger.debug("Disc id {} is outside the integer range of the store", disc_id)
            return None
        row = self.store.query_row(f"SELECT {_DISC_COLUMNS} FROM discs WHERE disc_id = ?", (disc_id,))
        if row is None:
            logger.debug("No disc with id {}", disc_id)
            return None
        return DiscRecord.model_validate(row)

    def find_by_name(self, term: str) -> list[DiscRecord]:
        tokens = _tokens(term)
        if not tokens:
            return []

        where = " AND ".join("disc_name LIKE ? ESCAPE '\\'" for _ in tokens)
        rows = self.store.query(
            f"SELECT {_DISC_COLUMNS} FROM discs WHERE {where}",
            [_like_pattern(token) for token in tokens],
        )
        matches = [DiscRecord.model_validate(row) for row in rows]
        logger.debug("Name search {!r} matched {} disc(s)", term, len(matches))
        return matches

    def find_nano_details(self, crystal_id: int) -> NanoDetails | None:
        row = self.store.query_row(
            """
            SELECT n.profession AS profession, l.name AS nanoline_name, n.location AS location
            FROM nanos n
            LEFT JOIN nanolines l ON l.id = n.nanoline_id
            WHERE n.crystal_id = ?
            """,
            (crystal_id,),
        )
        if row is None:
            logger.debug("No nano program details for crystal {}", crystal_id)
            return None
        return NanoDetails.model_validate(row)
