# dependencies.py

from fastapi import Request

from src.client.film_client import FilmApiClient
from src.db import FilmDatabase


def get_db(request: Request) -> FilmDatabase:
    return request.app.state.db


def get_film_api_client(request: Request) -> FilmApiClient:
    return request.app.state.film_api_client
