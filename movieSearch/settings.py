from pathlib import Path
import os
from dotenv import load_dotenv

BASE_DIR = Path(__file__).resolve().parent

# Load environment variables
load_dotenv(BASE_DIR / "secret.env")

OMDB_API_KEY = os.getenv("OMDB_API_KEY")

# File / folder paths
DATA_DIR      = Path(os.getenv("MOVIESEARCH_DATA_DIR", BASE_DIR))
DATABASE_PATH = DATA_DIR / "movie_search.sqlite"
LOG_PATH      = DATA_DIR / "movie_search_debug.log"
SCHEMA_PATH   = BASE_DIR / "movie_search_schema.sql"

# OMDb
OMDB_URL       = "https://www.omdbapi.com/"
OMDB_TIMEOUT   = 8
OMDB_MIN_DELAY = 0.6

# UI constants
WINDOW_TITLE = "Movie Search"
ACCENT_COLOR = "#3b82f6"
ROW_HEIGHT   = 120
