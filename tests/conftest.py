"""Shared fixtures: throw-away SQLite stores, a private debug log and sample movies."""

from __future__ import annotations

import os

import pytest

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

from movieShelf import utils
from movieShelf.metadata.core.models import MovieRecord
from movieShelf.metadata.core.repo import FavoritesRepo
from movieShelf.metadata.shelf_db import ShelfDB


@pytest.fixture(autouse=True)
def debug_log(tmp_path, monkeypatch):
    """Send `log_debug` output to a per-test file instead of the package dir."""
    path = tmp_path / "shelf_debug.log"
    monkeypatch.setattr(utils, "LOG_PATH", path)
    return path


@pytest.fixture
def db(tmp_path):
    store = ShelfDB(tmp_path / "shelf.sqlite")
    yield store
    store.close()


@pytest.fixture
def repo(db):
    favorites = FavoritesRepo(db)
    favorites.ensure_initialized()
    return favorites


def make_movie(movie_id: int = 1, **overrides) -> MovieRecord:
    fields = {
        "id": movie_id,
        "title": f"Movie {movie_id}",
        "poster_path": f"/poster{movie_id}.jpg",
        "overview": "Somebody does something somewhere.",
        "release_date": "2023-07-19",
        "vote_average": 7.4,
        "original_language": "en",
    }
    fields.update(overrides)
    return MovieRecord(**fields)


@pytest.fixture
def movie1():
    return make_movie(1)


@pytest.fixture
def movie2():
    return make_movie(2, title="Second Feature", original_language="ja")


@pytest.fixture(scope="session")
def qapp():
    QtWidgets = pytest.importorskip("PySide6.QtWidgets")
    return QtWidgets.QApplication.instance() or QtWidgets.QApplication([])
