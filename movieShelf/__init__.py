"""
movieShelf
~~~~~~~~~~

Top-level package for the Movie Shelf application.

Exports:
  - Domain: MovieRecord, FavoritesRepo, ShelfDB, tmdb_client
  - Utility functions: log_debug, apply_dark_palette
  - MainWindow GUI entrypoint
"""

# domain
from movieShelf.metadata import MovieRecord, FavoritesRepo, ShelfDB, tmdb_client

# utils
from movieShelf.utils import log_debug, apply_dark_palette

# GUI entrypoint
from movieShelf.gui.main_window import MainWindow

__all__ = [
    # domain
    "MovieRecord",
    "FavoritesRepo",
    "ShelfDB",
    "tmdb_client",
    # utils
    "log_debug",
    "apply_dark_palette",
    # GUI
    "MainWindow",
]
