from pathlib import Path
import os
from dotenv import load_dotenv

BASE_DIR = Path(__file__).resolve().parent

# Load environment variables
load_dotenv(BASE_DIR / "secret.env")

# The token itself is read at fetch time, not here
TOKEN_ENV_VAR    = "API_read_access_token"

CATALOG_BASE_URL = os.getenv("CATALOG_BASE_URL", "https://api.themoviedb.org/3")
IMAGE_BASE_URL   = "https://image.tmdb.org/t/p/w500"
REQUEST_TIMEOUT  = 10

# File / folder paths
DATABASE_PATH    = Path(os.getenv("MOVIESHELF_DB_PATH", BASE_DIR / "movie_shelf.sqlite"))
SCHEMA_PATH      = BASE_DIR / "metadata" / "movie_shelf_schema.sql"
LOG_PATH         = Path(os.getenv("MOVIESHELF_LOG_PATH", BASE_DIR / "shelf_debug.log"))

# Key-value layout of the favorites collection
COUNT_KEY        = "count"
ORDER_KEY        = "favorites:order"
FAVORITE_PREFIX  = "favorite:"

# UI constants
ACCENT_COLOR     = "#3b82f6"
WINDOW_TITLE     = "Movie Shelf"
