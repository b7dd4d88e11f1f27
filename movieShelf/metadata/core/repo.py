"""metadata.core.repo
Favorites repository.

Every favorite lives under its own key (`favorite:<id>`); display order is a
separate JSON id list (`favorites:order`) and `count` mirrors its length.
Read failures are logged and treated as "not stored"; they never reach the
caller.
"""

from __future__ import annotations
import json
from typing import List, Optional

from movieShelf.errors import DecodeError, StorageDecodeError
from movieShelf.metadata.core.codec import decode_record, encode
from movieShelf.metadata.core.models import MovieRecord
from movieShelf.metadata.shelf_db import ShelfDB, shared_db
from movieShelf.settings import COUNT_KEY, ORDER_KEY, FAVORITE_PREFIX
from movieShelf.utils import log_debug


def favorite_key(movie_id: int) -> str:
    return f"{FAVORITE_PREFIX}{movie_id}"


class FavoritesRepo:
    """Add / remove / list favorite `MovieRecord`s in a `ShelfDB`."""

    def __init__(self, db: ShelfDB | None = None):
        self.db = db or shared_db()

    # ───────────────────────────── bootstrap ──────────────────────────
    def ensure_initialized(self) -> None:
        """Write `count = 0` the first time the store is opened."""
        if not self.db.has_kv(COUNT_KEY):
            self.db.set_kv(COUNT_KEY, 0)

    # ───────────────────────────── writers ────────────────────────────
    def add(self, record: MovieRecord) -> bool:
        """Toggle *record*: store it, or drop it if its id is already stored.

        Returns True when the record was inserted, False when an existing
        favorite with the same id was removed instead.
        """
        if self.contains(record.id):
            self.remove(record.id)
            return False
        self._insert(record)
        return True

    def favorite(self, record: MovieRecord) -> None:
        """Store *record*; an existing entry with the same id is overwritten in place."""
        if self.contains(record.id):
            self.db.set_kv(favorite_key(record.id), encode(record))
            return
        self._insert(record)

    def remove(self, movie_id: int) -> bool:
        """Delete the favorite with *movie_id*. Returns False if it was not stored."""
        order = self._load_order()
        if movie_id not in order and not self.db.has_kv(favorite_key(movie_id)):
            return False

        self.db.delete_kv(favorite_key(movie_id))
        order = [mid for mid in order if mid != movie_id]
        self._save_order(order)
        log_debug(f"Favorites → removed id={movie_id} ({len(order)} left)")
        return True

    def unfavorite(self, movie_id: int) -> bool:
        return self.remove(movie_id)

    def _insert(self, record: MovieRecord) -> None:
        order = self._load_order()
        self.db.set_kv(favorite_key(record.id), encode(record))
        if record.id not in order:
            order.append(record.id)
        self._save_order(order)
        log_debug(f"Favorites → added id={record.id} “{record.title}”")

    # ───────────────────────────── look-ups ───────────────────────────
    def list(self) -> List[MovieRecord]:
        """All readable favorites in the order they were added."""
        movies: List[MovieRecord] = []
        for movie_id in self._load_order():
            movie = self._read(movie_id)
            if movie is not None:
                movies.append(movie)
        return movies

    def contains(self, movie_id: int) -> bool:
        return self._read(movie_id) is not None

    def count(self) -> int:
        """The persisted favorites counter (0 when absent or unreadable)."""
        raw = self.db.get_kv(COUNT_KEY)
        try:
            value = int(raw) if raw is not None else 0
        except (TypeError, ValueError):
            log_debug(f"Favorites → unreadable {COUNT_KEY!r} value {raw!r}")
            return 0
        return max(value, 0)

    # ───────────────────────────── storage helpers ────────────────────
    def _read(self, movie_id: int) -> Optional[MovieRecord]:
        key = favorite_key(movie_id)
        blob = self.db.get_kv(key)
        if blob is None:
            return None
        try:
            if not isinstance(blob, (bytes, str)):
                raise StorageDecodeError(key, f"unexpected {type(blob).__name__} value")
            movie = decode_record(blob)
            if movie.id != movie_id:
                raise StorageDecodeError(key, f"holds id {movie.id}")
        except DecodeError as exc:
            log_debug(f"Favorites → skipping {key}: {exc}")
            return None
        return movie

    def _load_order(self) -> List[int]:
        raw = self.db.get_kv(ORDER_KEY)
        if raw is None:
            return self._rebuild_order()
        try:
            order = json.loads(raw)
            if not isinstance(order, list) or not all(
                isinstance(mid, int) and not isinstance(mid, bool) for mid in order
            ):
                raise StorageDecodeError(ORDER_KEY, "not a list of ids")
        except (json.JSONDecodeError, UnicodeDecodeError, TypeError, StorageDecodeError) as exc:
            log_debug(f"Favorites → {exc}; rebuilding order from stored keys")
            return self._rebuild_order()
        return list(dict.fromkeys(order))

    def _rebuild_order(self) -> List[int]:
        """Recover the id list from the `favorite:<id>` keys themselves."""
        order: List[int] = []
        for key in self.db.keys(FAVORITE_PREFIX):
            suffix = key[len(FAVORITE_PREFIX):]
            try:
                order.append(int(suffix))
            except ValueError:
                log_debug(f"Favorites → ignoring stray key {key!r}")
        return order

    def _save_order(self, order: List[int]) -> None:
        self.db.set_kv(ORDER_KEY, json.dumps(order))
        self.db.set_kv(COUNT_KEY, len(order))
