"""
gui
~~~
All Qt widgets, pages and controllers.

•  No direct SQL here – favorites go through `metadata.core.repo`.
•  Re-export the high-level symbols so the app can simply:

    from movieShelf.gui import MainWindow, PopularViewModel
"""

from movieShelf.gui.controller     import PopularViewModel
from movieShelf.gui.main_window    import MainWindow
from movieShelf.gui.popular_page   import PopularPage
from movieShelf.gui.favorites_page import FavoritesPage
from movieShelf.gui.movie_card     import MovieCard, CardList
from movieShelf.gui.movie_detail   import MovieDetailDialog

__all__ = [
    "PopularViewModel",
    "MainWindow", "PopularPage", "FavoritesPage",
    "MovieCard", "CardList", "MovieDetailDialog",
]
