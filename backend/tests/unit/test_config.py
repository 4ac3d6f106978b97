"""Unit tests: database URL resolution in utils.config."""
import importlib
import os

import pytest

import utils.config

pytestmark = pytest.mark.unit

BACKEND_DIR = os.path.dirname(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))


@pytest.fixture
def production_config(monkeypatch):
    """Reload utils.config outside TESTING; the test configuration is restored afterwards."""
    monkeypatch.delenv("TESTING", raising=False)
    monkeypatch.delenv("DATABASE_URL", raising=False)

    def load():
        return importlib.reload(utils.config)

    yield load
    monkeypatch.undo()
    importlib.reload(utils.config)


def test_default_database_is_in_backend_dir(production_config, tmp_path, monkeypatch):
    """The default SQLite file does not depend on the working directory."""
    monkeypatch.chdir(tmp_path)
    config = production_config()
    assert config.DATABASE_URL == "sqlite:///" + os.path.join(BACKEND_DIR, "locations.db")


def test_relative_sqlite_url_is_made_absolute(production_config, tmp_path, monkeypatch):
    """A relative SQLite path is pinned to the directory the process started in."""
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("DATABASE_URL", "sqlite:///./mine.db")
    config = production_config()
    assert config.DATABASE_URL == "sqlite:///" + os.path.join(os.getcwd(), "mine.db")


@pytest.mark.parametrize(
    "url",
    ["sqlite:///:memory:", "sqlite:////var/data/locations.db", "postgresql://user:pw@db:5432/locations"],
)
def test_other_database_urls_are_unchanged(production_config, monkeypatch, url):
    """In-memory, absolute and non-SQLite URLs are used as given."""
    monkeypatch.setenv("DATABASE_URL", url)
    assert production_config().DATABASE_URL == url


def test_testing_uses_testing_database_url():
    """Under TESTING the test database URL wins."""
    assert utils.config.DATABASE_URL == "sqlite:///:memory:"
