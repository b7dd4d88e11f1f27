from PySide6.QtCore import QObject, Signal, Slot

from movieShelf.metadata.api_clients.tmdb_client import TMDBClient, client as tmdb_client
from movieShelf.utils import log_debug

# ───────────────────────── Worker skeletons ───────────────────────────────
class _PopularWorker(QObject):
    """Runs one popular-movies fetch off the GUI thread."""
    fetched  = Signal(list)          # list[MovieRecord]; not emitted on failure
    finished = Signal(bool)

    def __init__(self, client: TMDBClient | None = None):
        super().__init__()
        self.client = client or tmdb_client

    @Slot()
    def run(self):
        try:
            movies = self.client.fetch_popular()
        except Exception as e:
            # fetch_popular logs its own failures; this is a programming error
            log_debug(f"popular-worker error: {e}")
            self.finished.emit(False)
            return
        if movies is None:
            # failure already logged; leave what the GUI shows untouched
            self.finished.emit(False)
            return
        self.fetched.emit(movies)
        self.finished.emit(True)
