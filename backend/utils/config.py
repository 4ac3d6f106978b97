"""Configuration from environment."""
import os

from sqlalchemy.engine import make_url

BACKEND_DIR = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
DEFAULT_DATABASE_URL = "sqlite:///" + os.path.join(BACKEND_DIR, "locations.db")


def _absolute_sqlite_url(url: str) -> str:
    """Pin a relative SQLite file to the directory the process started in."""
    parsed = make_url(url)
    if parsed.get_backend_name() != "sqlite" or not parsed.database or parsed.database == ":memory:":
        return url
    if os.path.isabs(parsed.database) or parsed.database.startswith("file:"):
        return url
    return parsed.set(database=os.path.abspath(parsed.database)).render_as_string(hide_password=False)


PORT = int(os.environ.get("PORT", "8001"))

# When TESTING=true, use test DB URL so tests never touch the real store.
if os.environ.get("TESTING") == "true":
    DATABASE_URL = os.environ.get("TESTING_DATABASE_URL", "sqlite:///:memory:")
else:
    DATABASE_URL = _absolute_sqlite_url(os.environ.get("DATABASE_URL", DEFAULT_DATABASE_URL))

# Key for the external map / address autocomplete widget. Empty disables the embedded map.
MAPS_API_KEY = os.environ.get("MAPS_API_KEY", "")

# Where the UI sends its REST calls. Empty means in-process (same app).
API_BASE_URL = os.environ.get("API_BASE_URL", "")

CORS_ORIGINS = [
    origin.strip()
    for origin in os.environ.get("CORS_ORIGINS", "http://localhost:3000,http://127.0.0.1:3000").split(",")
    if origin.strip()
]

LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO").upper()
