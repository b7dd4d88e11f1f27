# gui/main_window.py
from __future__ import annotations

from PySide6.QtCore    import Qt, Slot
from PySide6.QtGui     import QAction
from PySide6.QtWidgets import (
    QMainWindow, QListWidget, QListWidgetItem,
    QStackedWidget, QSplitter, QStyle
)

from movieShelf.settings            import WINDOW_TITLE
from movieShelf.gui.controller      import PopularViewModel
from movieShelf.gui.popular_page    import PopularPage
from movieShelf.gui.favorites_page  import FavoritesPage
from movieShelf.metadata.core.repo  import FavoritesRepo


class MainWindow(QMainWindow):
    def __init__(self, repo: FavoritesRepo, view_model: PopularViewModel):
        super().__init__()
        self.setWindowTitle(WINDOW_TITLE)
        self.resize(720, 800)
        self.repo       = repo
        self.view_model = view_model

        # ── pages ────────────────────────────────────────────────────────
        self.popular_page   = PopularPage(view_model, repo)
        self.favorites_page = FavoritesPage(repo)

        # ── sidebar ─────────────────────────────────────────────────────
        self.nav_list = QListWidget()
        self.nav_list.setFixedWidth(150)
        for icon_id, label in [
            (QStyle.SP_ArrowUp,         "Popular"),
            (QStyle.SP_DialogYesButton, "Favorites"),
        ]:
            item = QListWidgetItem(self.style().standardIcon(icon_id), label)
            item.setTextAlignment(Qt.AlignHCenter)
            self.nav_list.addItem(item)

        # ── stacked widget ──────────────────────────────────────────────
        self.pages = QStackedWidget()
        self.pages.addWidget(self.popular_page)
        self.pages.addWidget(self.favorites_page)
        self.nav_list.currentRowChanged.connect(self.pages.setCurrentIndex)
        self.nav_list.setCurrentRow(0)

        splitter = QSplitter()
        splitter.addWidget(self.nav_list)
        splitter.addWidget(self.pages)
        splitter.setStretchFactor(1, 1)
        self.setCentralWidget(splitter)

        # ── toolbar ─────────────────────────────────────────────────────
        tb = self.addToolBar("Main")
        act = QAction(self.style().standardIcon(QStyle.SP_BrowserReload), "Refresh", self)
        act.setShortcut("Ctrl+R")
        act.triggered.connect(self._on_refresh)
        tb.addAction(act)

        # favorites toggled from the popular page show up on the other tab
        self.popular_page.favorites_changed.connect(self.favorites_page.reload)

    # ───────────────────────────────────────────────────────────────────
    @Slot()
    def _on_refresh(self):
        """Refresh whichever page is on screen."""
        if self.pages.currentWidget() is self.favorites_page:
            self.favorites_page.reload()
        else:
            self.view_model.refresh()
