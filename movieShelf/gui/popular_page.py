from __future__ import annotations
from PySide6.QtCore    import Qt, Signal, Slot # type: ignore
from PySide6.QtWidgets import QWidget, QVBoxLayout, QHBoxLayout, QLabel, QPushButton # type: ignore

from movieShelf.gui.controller  import PopularViewModel
from movieShelf.gui.movie_card  import CardList
from movieShelf.gui.movie_detail import MovieDetailDialog
from movieShelf.metadata.core.repo import FavoritesRepo


class PopularPage(QWidget):
    """Catalog's popular movies; tap a card for details."""
    favorites_changed = Signal()

    def __init__(self, view_model: PopularViewModel, repo: FavoritesRepo, parent: QWidget | None = None):
        super().__init__(parent)
        self.view_model = view_model
        self.repo       = repo

        root = QVBoxLayout(self)
        top  = QHBoxLayout()
        self.status      = QLabel("", alignment=Qt.AlignLeft)
        self.btn_refresh = QPushButton("Refresh")
        self.btn_refresh.setAutoDefault(False)
        top.addWidget(self.status, 1)
        top.addWidget(self.btn_refresh)
        root.addLayout(top)

        self.cards = CardList("No movies loaded. Check the access token and refresh.")
        root.addWidget(self.cards, 1)

        self.btn_refresh.clicked.connect(self.view_model.refresh)
        self.cards.movie_clicked.connect(self._show_details)
        self.view_model.movies_changed.connect(self._on_movies)
        self.view_model.loading_changed.connect(self._on_loading)

    @Slot(list)
    def _on_movies(self, movies: list) -> None:
        self.cards.set_movies(movies)

    @Slot(bool)
    def _on_loading(self, busy: bool) -> None:
        self.status.setText("Loading…" if busy else f"{len(self.view_model.movies)} movies")

    @Slot(object)
    def _show_details(self, movie) -> None:
        dlg = MovieDetailDialog(movie, self.repo, self)
        dlg.favorites_changed.connect(self.favorites_changed)
        dlg.exec()
