from __future__ import annotations
from PySide6.QtCore    import Qt, Signal, Slot # type: ignore
from PySide6.QtWidgets import ( # type: ignore
    QDialog, QVBoxLayout, QLabel, QPushButton, QScrollArea, QWidget
)

from movieShelf.settings import ACCENT_COLOR
from movieShelf.utils    import open_url_host_browser
from movieShelf.metadata.core.models import MovieRecord
from movieShelf.metadata.core.repo   import FavoritesRepo


class MovieDetailDialog(QDialog):
    """Full details for one movie plus a favorite / unfavorite button."""
    favorites_changed = Signal()

    def __init__(self, movie: MovieRecord, repo: FavoritesRepo, parent: QWidget | None = None):
        super().__init__(parent)
        self.movie = movie
        self.repo  = repo
        self.setWindowTitle(movie.title)
        self.setMinimumWidth(420)

        box = QVBoxLayout(self)

        # titles and overviews are shown verbatim, never as markup
        self.title_label = QLabel(movie.title)
        self.title_label.setTextFormat(Qt.PlainText)
        self.title_label.setStyleSheet("font-size:20px; font-weight:bold;")
        self.title_label.setWordWrap(True)
        box.addWidget(self.title_label)

        if movie.poster_url:
            poster = QLabel(f'<a href="{movie.poster_url}">Poster</a>')
            poster.setTextFormat(Qt.RichText)
            poster.linkActivated.connect(open_url_host_browser)
            box.addWidget(poster)

        box.addWidget(QLabel(f"Release Date: {movie.release_date}"))
        box.addWidget(QLabel(f"Rating: {movie.vote_average}"))
        box.addWidget(QLabel(f"Language: {movie.original_language}"))

        heading = QLabel("Overview:")
        heading.setStyleSheet("font-weight:bold;")
        box.addWidget(heading)

        overview = QLabel(movie.overview)
        overview.setTextFormat(Qt.PlainText)
        overview.setWordWrap(True)
        overview.setAlignment(Qt.AlignTop | Qt.AlignLeft)
        scroll = QScrollArea()
        scroll.setWidgetResizable(True)
        scroll.setWidget(overview)
        box.addWidget(scroll, 1)

        self.btn_favorite = QPushButton()
        self.btn_favorite.setAutoDefault(False)
        self.btn_favorite.clicked.connect(self._on_toggle)
        box.addWidget(self.btn_favorite)
        self._sync_button()

    # button reflects what is stored, not a local flag
    def is_favorite(self) -> bool:
        return self.repo.contains(self.movie.id)

    def _sync_button(self) -> None:
        if self.is_favorite():
            self.btn_favorite.setText("Remove from favorites")
            bg = "gray"
        else:
            self.btn_favorite.setText("Add to favorites")
            bg = ACCENT_COLOR
        self.btn_favorite.setStyleSheet(
            f"background:{bg}; color:#ffffff; border-radius:10px; padding:8px;"
        )

    @Slot()
    def _on_toggle(self) -> None:
        if self.is_favorite():
            self.repo.unfavorite(self.movie.id)
        else:
            self.repo.favorite(self.movie)
        self._sync_button()
        self.favorites_changed.emit()
