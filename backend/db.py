"""Database engine and session factory, built once at process start."""
from collections.abc import Generator
import os

from sqlalchemy import create_engine
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from utils.config import DATABASE_URL

# Runtime safety: when TESTING=true, never use the real store.
if os.environ.get("TESTING") == "true":
    url = DATABASE_URL
    if "locations.db" in url or (":memory:" not in url and "test" not in url.lower().split("?")[0]):
        raise RuntimeError(
            "Tests must not run against the real database. Set TESTING_DATABASE_URL to sqlite:///:memory: "
            "(or another test URL containing :memory: or 'test')."
        )

_connect_args = {"check_same_thread": False} if "sqlite" in DATABASE_URL else {}
# In-memory SQLite: use one connection so all sessions share the same DB.
_engine_kw = {"connect_args": _connect_args, "echo": False}
if "sqlite" in DATABASE_URL and ":memory:" in DATABASE_URL:
    _engine_kw["poolclass"] = StaticPool

_engine = create_engine(DATABASE_URL, **_engine_kw)

SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=_engine)


def get_db() -> Generator[Session, None, None]:
    """FastAPI dependency: yield a DB session and close after request."""
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
