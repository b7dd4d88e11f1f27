from __future__ import annotations
import html
from typing import Callable, Iterable

from PySide6.QtCore    import Qt, Signal, QPropertyAnimation # type: ignore
from PySide6.QtWidgets import ( # type: ignore
    QFrame, QLabel, QVBoxLayout, QHBoxLayout, QGraphicsDropShadowEffect,
    QScrollArea, QWidget, QPushButton
)

from movieShelf.settings import ACCENT_COLOR
from movieShelf.utils    import elide, open_url_host_browser
from movieShelf.metadata.core.models import MovieRecord


class MovieCard(QFrame):
    """Row card: title (poster link), rating, language, release date, overview."""
    clicked = Signal(object)          # the card's MovieRecord

    def __init__(self, movie: MovieRecord, parent=None):
        super().__init__(parent)
        self.movie = movie
        self.setObjectName("MovieCardItem")
        self.setFrameShape(QFrame.StyledPanel)
        self.setCursor(Qt.PointingHandCursor)

        root = QVBoxLayout(self)
        root.setContentsMargins(8, 8, 8, 8)

        # ── title link (or plain text) ───────────────────────────────────
        url    = movie.poster_url
        title  = html.escape(movie.title)
        anchor = f'<a href="{html.escape(url)}"><b>{title}</b></a>' if url else f"<b>{title}</b>"
        link   = QLabel(anchor)
        self.title_label = link
        link.setTextFormat(Qt.RichText)
        link.setTextInteractionFlags(Qt.TextBrowserInteraction)
        link.setWordWrap(True)
        if url:
            link.setOpenExternalLinks(False)
            link.linkActivated.connect(open_url_host_browser)
        root.addWidget(link)

        # ── rating | language ───────────────────────────────────────────
        meta = QHBoxLayout()
        rating = QLabel(f"★ {movie.rating_label}")
        rating.setStyleSheet("color:#f1c40f; font-weight:bold;")
        lang = QLabel(movie.original_language, alignment=Qt.AlignCenter)
        lang.setStyleSheet(
            "background:gray; color:#ffffff; border-radius:5px; padding:0 6px;"
        )
        meta.addWidget(rating, 0, Qt.AlignLeft)
        meta.addWidget(lang,   0, Qt.AlignLeft)
        meta.addStretch()
        root.addLayout(meta)

        root.addWidget(QLabel(movie.release_date or "—"))

        overview = QLabel(elide(movie.overview))
        overview.setTextFormat(Qt.PlainText)
        overview.setWordWrap(True)
        root.addWidget(overview)

        # ── hover shadow effect ──────────────────────────────────────────
        self._shadow = QGraphicsDropShadowEffect(self)
        self._shadow.setBlurRadius(4)
        self._shadow.setOffset(0, 0)
        self.setGraphicsEffect(self._shadow)

    def mouseReleaseEvent(self, event):
        super().mouseReleaseEvent(event)
        if event.button() == Qt.LeftButton:
            self.clicked.emit(self.movie)

    # ------------------------------------------------------------------
    # hover animation
    def enterEvent(self, event):
        super().enterEvent(event)
        anim = QPropertyAnimation(self._shadow, b"blurRadius", self)
        anim.setDuration(200)
        anim.setEndValue(16)
        anim.start(QPropertyAnimation.DeleteWhenStopped)

    def leaveEvent(self, event):
        super().leaveEvent(event)
        anim = QPropertyAnimation(self._shadow, b"blurRadius", self)
        anim.setDuration(200)
        anim.setEndValue(4)
        anim.start(QPropertyAnimation.DeleteWhenStopped)


class CardList(QScrollArea):
    """Vertical, scrollable column of `MovieCard`s."""
    movie_clicked = Signal(object)

    def __init__(self, empty_text: str = "Nothing here yet.", parent=None):
        super().__init__(parent)
        self.setWidgetResizable(True)
        self._empty_text = empty_text
        self._body = QWidget()
        self._box  = QVBoxLayout(self._body)
        self._box.setAlignment(Qt.AlignTop)
        self.setWidget(self._body)
        self.set_movies([])

    def set_movies(
        self,
        movies: Iterable[MovieRecord],
        action: tuple[str, Callable[[MovieRecord], None]] | None = None,
    ) -> None:
        """Replace the cards. *action* adds a (label, callback) button per card."""
        while self._box.count():
            item = self._box.takeAt(0)
            if item.widget():
                item.widget().deleteLater()

        movies = list(movies)
        if not movies:
            self._box.addWidget(QLabel(self._empty_text, alignment=Qt.AlignCenter))
            return

        for movie in movies:
            card = MovieCard(movie)
            card.clicked.connect(self.movie_clicked)
            if action:
                label, callback = action
                btn = QPushButton(label)
                btn.setAutoDefault(False)
                btn.setStyleSheet(f"color:{ACCENT_COLOR};")
                btn.clicked.connect(lambda _=False, m=movie: callback(m))
                card.layout().addWidget(btn, 0, Qt.AlignRight)
            self._box.addWidget(card)
