import sys
from PySide6.QtWidgets import QApplication

from movieShelf.utils               import apply_dark_palette, log_debug
from movieShelf.gui.controller      import PopularViewModel
from movieShelf.gui.main_window     import MainWindow
from movieShelf.metadata.shelf_db   import shared_db
from movieShelf.metadata.core.repo  import FavoritesRepo


def main() -> None:
    app = QApplication(sys.argv)
    apply_dark_palette(app)

    # -------- favorites store: count = 0 on first launch -------------
    repo = FavoritesRepo(shared_db())
    repo.ensure_initialized()
    log_debug(f"Movie Shelf started ({repo.count()} favorites)")

    # -------- create main window and load the first page --------------
    view_model = PopularViewModel()
    window = MainWindow(repo, view_model)
    window.show()
    view_model.refresh()

    # -------- run the event-loop -------------------------------------
    sys.exit(app.exec())

# Python entry-point guard
if __name__ == "__main__":
    main()
