"""
metadata
~~~~~~~~
Top-level package that bundles:

* core        – MovieRecord, codec + favorites repository
* api_clients – TMDb singleton
* shelf_db    – SQLite key-value store
"""

# ── core objects ──────────────────────────────────────────────────────────
from movieShelf.metadata.core.models import MovieRecord
from movieShelf.metadata.core.repo   import FavoritesRepo

# ── storage ───────────────────────────────────────────────────────────────
from movieShelf.metadata.shelf_db    import ShelfDB, shared_db

# ── shared API clients ────────────────────────────────────────────────────
from movieShelf.metadata.api_clients.tmdb_client import client as tmdb_client

__all__ = [
    "MovieRecord",
    "FavoritesRepo",
    "ShelfDB",
    "shared_db",
    "tmdb_client",
]
