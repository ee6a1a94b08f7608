import pytest
from fastapi.testclient import TestClient

from song_library_api.app.core.config import Settings
from song_library_api.app.core.db import Database
from song_library_api.app.main import create_app
from song_library_api.app.services.song_service import SongStore


@pytest.fixture
def settings(tmp_path) -> Settings:
    return Settings(db_name=str(tmp_path / "songs.db"))


@pytest.fixture
def database(settings) -> Database:
    db = Database(settings)
    db.init_db()
    return db


@pytest.fixture
def store(database) -> SongStore:
    return SongStore(database)


@pytest.fixture
def client(settings):
    with TestClient(create_app(settings)) as test_client:
        yield test_client
