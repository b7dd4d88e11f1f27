from __future__ import annotations
from PySide6.QtCore    import Qt, Slot # type: ignore
from PySide6.QtWidgets import QWidget, QVBoxLayout, QHBoxLayout, QLabel, QPushButton # type: ignore

from movieShelf.gui.movie_card   import CardList
from movieShelf.gui.movie_detail import MovieDetailDialog
from movieShelf.metadata.core.models import MovieRecord
from movieShelf.metadata.core.repo   import FavoritesRepo


class FavoritesPage(QWidget):
    """Stored favorites, re-read every time the page is shown."""

    def __init__(self, repo: FavoritesRepo, parent: QWidget | None = None):
        super().__init__(parent)
        self.repo = repo

        root = QVBoxLayout(self)
        top  = QHBoxLayout()
        self.status      = QLabel("", alignment=Qt.AlignLeft)
        self.btn_refresh = QPushButton("Refresh")
        self.btn_refresh.setAutoDefault(False)
        top.addWidget(self.status, 1)
        top.addWidget(self.btn_refresh)
        root.addLayout(top)

        self.cards = CardList("No favorites yet.")
        root.addWidget(self.cards, 1)

        self.btn_refresh.clicked.connect(self.reload)
        self.cards.movie_clicked.connect(self._show_details)

    def showEvent(self, event):
        super().showEvent(event)
        self.reload()

    @Slot()
    def reload(self) -> None:
        movies = self.repo.list()
        self.cards.set_movies(movies, action=("Remove", self._remove))
        self.status.setText(f"{len(movies)} favorites")

    def _remove(self, movie: MovieRecord) -> None:
        self.repo.remove(movie.id)
        self.reload()

    @Slot(object)
    def _show_details(self, movie) -> None:
        dlg = MovieDetailDialog(movie, self.repo, self)
        dlg.favorites_changed.connect(self.reload)
        dlg.exec()
