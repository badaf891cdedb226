# tests/conftest.py
import os

import httpx
import mongomock
import pytest
from fastapi.testclient import TestClient

from main import app
from src.client.film_client import FilmApiClient
from src.db import FilmDatabase
from src.dependencies import get_db, get_film_api_client

TEST_DB_NAME = os.getenv("TEST_DB_NAME", "filmsTest")
TEST_DB_ALIAS = "films-test"

INCEPTION = {
    "name": "Inception",
    "description": "A mind-bending thriller by Christopher Nolan.",
    "imageUrl": "http://x/y.jpg",
    "imdb": 8.8,
    "metaScore": 74,
}


@pytest.fixture(scope="session")
def db_connection():
    # In-memory MongoDB вместо настоящего сервера
    db = FilmDatabase(
        "mongodb://localhost",
        alias=TEST_DB_ALIAS,
        db_name=TEST_DB_NAME,
        mongo_client_class=mongomock.MongoClient,
    )
    db.connect()
    yield db
    db.close()


@pytest.fixture(scope="function")
def test_db(db_connection: FilmDatabase):
    try:
        yield db_connection
    finally:
        # Чистим коллекцию после каждого теста
        db_connection.collection.drop()


@pytest.fixture(scope="function")
def client(test_db):
    app.dependency_overrides[get_db] = lambda: test_db
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()


@pytest.fixture(scope="function")
def frontend_client(client):
    # Страницы ходят в API того же приложения без сети
    api_client = FilmApiClient("http://testserver/api", transport=httpx.ASGITransport(app=app))
    app.dependency_overrides[get_film_api_client] = lambda: api_client
    yield client


@pytest.fixture
def inception():
    return dict(INCEPTION)
