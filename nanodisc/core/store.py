from __future__ import annotations

import hashlib
import sqlite3
import time
from pathlib import Path
from typing import Any, Sequence

from .errors import DataLoadError, StoreError
from .log import logger


class ReferenceStore:
    def __init__(self, sqlite_path: str = "./data/reference.sqlite", data_dir: str = "./data"):
        self.sqlite_path = sqlite_path
        self.data_dir = Path(data_dir)

        if sqlite_path != ":memory:":
            Path(sqlite_path).parent.mkdir(parents=True, exist_ok=True)

        self.conn = sqlite3.connect(sqlite_path)
        self.conn.row_factory = sqlite3.Row
        self._init_tables()

    def _init_tables(self) -> None:
        cur = self.conn.cursor()
        cur.execute(
            """
            CREATE TABLE IF NOT EXISTS dataset_versions (
                dataset_key TEXT PRIMARY KEY,
                content_hash TEXT NOT NULL,
                loaded_at INTEGER NOT NULL
            )
            """
        )
        self.conn.commit()

    @staticmethod
    def dataset_key(module_name: str, dataset: str) -> str:
        return f"{module_name.strip().lower()}:{dataset.strip().lower()}"

    def dataset_path(self, module_name: str, dataset: str) -> Path:
        return self.data_dir / module_name / f"{dataset}.sql"

    def dataset_version(self, module_name: str, dataset: str) -> str | None:
        cur = self.conn.cursor()
        row = cur.execute(
            "SELECT content_hash FROM dataset_versions WHERE dataset_key = ?",
            (self.dataset_key(module_name, dataset),),
        ).fetchone()
        if not row:
            return None
        return row["content_hash"]

    def load_sql_file(self, module_name: str, dataset: str, force: bool = False) -> bool:
        """Import ``<data_dir>/<module_name>/<dataset>.sql`` into the store.

        The file is skipped when its content hash matches the last import,
        unless ``force`` is set. Returns True when the script was executed.
        """
        path = self.dataset_path(module_name, dataset)
        if not path.exists():
            raise DataLoadError("DATA_FILE_MISSING", f"No SQL file for {module_name}/{dataset} at {path}")

        script = path.read_text(encoding="utf-8")
        content_hash = hashlib.sha256(script.encode("utf-8")).hexdigest()
        if not force and self.dataset_version(module_name, dataset) == content_hash:
            logger.debug("Dataset {}/{} unchanged, skipping import", module_name, dataset)
            return False

        try:
            self.conn.executescript(script)
        except sqlite3.Error as exc:
            raise DataLoadError("DATA_LOAD_FAILED", f"Importing {path} failed: {exc}") from exc

        cur = self.conn.cursor()
        cur.execute(
            """
            INSERT INTO dataset_versions(dataset_key, content_hash, loaded_at)
            VALUES(?, ?, ?)
            ON CONFLICT(dataset_key) DO UPDATE SET
              content_hash = excluded.content_hash,
              loaded_at = excluded.loaded_at
            """,
            (self.dataset_key(module_name, dataset), content_hash, int(time.time())),
        )
        self.conn.commit()
        logger.info("Loaded dataset {}/{} from {}", module_name, dataset, path)
        return True

    def query(self, sql: str, params: Sequence[Any] = ()) -> list[dict[str, Any]]:
        try:
            rows = self.conn.execute(sql, tuple(params)).fetchall()
        except sqlite3.Error as exc:
            raise StoreError("STORE_QUERY_FAILED", str(exc)) from exc
        return [dict(row) for row in rows]

    def query_row(self, sql: str, params: Sequence[Any] = ()) -> dict[str, Any] | None:
        try:
            row = self.conn.execute(sql, tuple(params)).fetchone()
        except sqlite3.Error as exc:
            raise StoreError("STORE_QUERY_FAILED", str(exc)) from exc
        if not row:
            return None
        return dict(row)

    def close(self) -> None:
        self.conn.close()
