# shelf_db.py
from __future__ import annotations
import sqlite3, atexit
from pathlib import Path
from typing import Any, List

from movieShelf.settings import DATABASE_PATH as _DB_PATH, SCHEMA_PATH as _SCHEMA_PATH

# ─── internal helpers ────────────────────────────────────────────────────
def _new_connection(path: Path | str) -> sqlite3.Connection:
    """Create a fresh sqlite3.Connection and run the schema SQL on it."""
    if str(path) != ":memory:":
        Path(path).parent.mkdir(parents=True, exist_ok=True)
    conn = sqlite3.connect(
        path,
        check_same_thread=True,     # the GUI thread owns the store
        isolation_level="DEFERRED",
    )
    conn.row_factory = sqlite3.Row
    conn.executescript(_SCHEMA_PATH.read_text(encoding="utf-8"))
    conn.commit()
    return conn


class ShelfDB:
    """Process-wide key-value store persisted in one SQLite file.

    Values keep their SQLite storage class: ints come back as ints, bytes as
    bytes, text as str.
    """

    def __init__(self, path: Path | str = _DB_PATH):
        self.path = path
        self.conn = _new_connection(path)

    # ─── raw SQL ─────────────────────────────────────────────────────────
    def execute(self, sql: str, params: tuple = ()) -> sqlite3.Cursor:
        return self.conn.execute(sql, params)

    def commit(self) -> None:
        self.conn.commit()

    def close(self) -> None:
        self.conn.close()

    # ─── kv ──────────────────────────────────────────────────────────────
    def get_kv(self, key: str) -> Any | None:
        row = self.execute("SELECT value FROM kv_store WHERE key=?", (key,)).fetchone()
        return row["value"] if row else None

    def set_kv(self, key: str, value: Any) -> None:
        self.execute(
            # upsert keeps the rowid, so keys() order is first-write order
            "INSERT INTO kv_store(key, value) VALUES(?,?) "
            "ON CONFLICT(key) DO UPDATE SET value=excluded.value",
            (key, value)
        )
        self.commit()

    def delete_kv(self, key: str) -> None:
        self.execute("DELETE FROM kv_store WHERE key=?", (key,))
        self.commit()

    def has_kv(self, key: str) -> bool:
        row = self.execute("SELECT 1 FROM kv_store WHERE key=?", (key,)).fetchone()
        return row is not None

    def keys(self, prefix: str = "") -> List[str]:
        """Keys starting with *prefix*, in the order they were first written."""
        rows = self.execute(
            "SELECT key FROM kv_store WHERE substr(key, 1, ?)=? ORDER BY rowid",
            (len(prefix), prefix)
        ).fetchall()
        return [r["key"] for r in rows]


# ─── shared instance for the app ────────────────────────────────────────
_shared: ShelfDB | None = None

def shared_db() -> ShelfDB:
    """Return the app-wide store at `DATABASE_PATH`, opening it on first use."""
    global _shared
    if _shared is None:
        _shared = ShelfDB()
    return _shared

# ─── cleanup ──────────────────────────────────────────────────────────────
@atexit.register
def _close_everything() -> None:
    if _shared is not None:
        _shared.close()
