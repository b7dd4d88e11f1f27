# MovieRecord dataclass (+ any simple DTOs)
from __future__ import annotations
from dataclasses import dataclass

from movieShelf.settings import IMAGE_BASE_URL


@dataclass(frozen=True, slots=True)
class MovieRecord:
    id: int
    title: str
    poster_path: str
    overview: str
    release_date: str
    vote_average: float
    original_language: str

    @property
    def poster_url(self) -> str | None:
        return f"{IMAGE_BASE_URL}{self.poster_path}" if self.poster_path else None

    @property
    def rating_label(self) -> str:
        return f"{self.vote_average:.1f}"
