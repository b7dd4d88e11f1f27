from __future__ import annotations
from typing import List

from PySide6.QtCore import QObject, QThread, Signal, Slot

from movieShelf.metadata.api_clients.tmdb_client import TMDBClient
from movieShelf.metadata.core.models import MovieRecord
from movieShelf.gui.workers import _PopularWorker


class PopularViewModel(QObject):
    """
    Single observable slot holding the last popular-movies result.

    `refresh()` fetches on a worker thread; the result crosses back to this
    object's thread through a queued signal before `movies` is touched.
    When two refreshes overlap, whichever finishes last wins.
    """
    movies_changed  = Signal(list)
    loading_changed = Signal(bool)

    def __init__(self, client: TMDBClient | None = None, parent: QObject | None = None):
        super().__init__(parent)
        self.client = client
        self._movies: List[MovieRecord] = []
        self._running: list[tuple[QThread, _PopularWorker]] = []

    @property
    def movies(self) -> List[MovieRecord]:
        return list(self._movies)

    def is_loading(self) -> bool:
        return bool(self._running)

    def refresh(self) -> None:
        """Kick off one popular-movies fetch."""
        thr    = QThread()
        worker = _PopularWorker(self.client)
        worker.moveToThread(thr)
        # both stay referenced here until the thread reports finished
        self._running.append((thr, worker))

        worker.fetched.connect(self.set_movies)
        worker.finished.connect(thr.quit)
        worker.finished.connect(worker.deleteLater)
        thr.finished.connect(self._reap)

        thr.started.connect(worker.run)
        thr.start()
        self.loading_changed.emit(True)

    @Slot(list)
    def set_movies(self, movies: list) -> None:
        self._movies = list(movies)
        self.movies_changed.emit(self.movies)

    @Slot()
    def _reap(self) -> None:
        done = [(t, w) for t, w in self._running if t.isFinished()]
        for thr, _worker in done:
            thr.wait()                # finished fires just before run() returns
        self._running = [pair for pair in self._running if pair not in done]
        if not self._running:
            self.loading_changed.emit(False)
