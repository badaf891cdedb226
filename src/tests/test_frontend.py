# tests/test_frontend.py
import math

import httpx
import pytest

from main import app
from src.client.cards import render_cards, sort_films_by_name
from src.client.film_client import FilmApiClient
from src.client.forms import build_film_payload, parse_number
from src.dependencies import get_film_api_client

FORM = {
    "name": "Inception",
    "description": "A mind-bending thriller.",
    "imageUrl": "http://x/y.jpg",
    "imdb": "8.8",
    "metaScore": "74",
}


@pytest.mark.parametrize("text, expected", [("8.8", 8.8), (" 74 ", 74.0), ("7.5/10", 7.5), ("-1e2", -100.0)])
def test_parse_number(text, expected):
    assert parse_number(text) == expected


def test_parse_number_stops_at_underscore():
    assert parse_number("1_000") == 1.0


def test_parse_number_infinity():
    assert parse_number("-Infinity") == -math.inf


def test_parse_number_long_text():
    assert math.isnan(parse_number("a" * 100_000))
    assert parse_number("9" + "x" * 100_000) == 9.0


@pytest.mark.parametrize("text", ["", "abc", None, ".", "\u0661\u0662"])
def test_parse_number_nan(text):
    assert math.isnan(parse_number(text))


def test_build_film_payload():
    payload = build_film_payload({**FORM, "metaScore": "n/a"})
    assert payload == {
        "name": "Inception",
        "description": "A mind-bending thriller.",
        "imageUrl": "http://x/y.jpg",
        "imdb": 8.8,
        "metaScore": None,
    }


def test_sort_films_by_name():
    films = [{"name": "memento"}, {"name": "Arrival"}, {"name": "Dune"}]
    assert [f["name"] for f in sort_films_by_name(films)] == ["Arrival", "Dune", "memento"]
    assert [f["name"] for f in sort_films_by_name(films, descending=True)] == ["memento", "Dune", "Arrival"]


def test_render_cards_escapes_markup():
    html = render_cards([{
        "name": "<script>alert(1)</script>",
        "description": "plain",
        "imageUrl": "http://x/y.jpg",
        "imdb": 8.8,
        "metaScore": 74,
    }])
    assert "<script>" not in html
    assert "&lt;script&gt;" in html
    assert html.count('class="card rounded') == 1


def test_films_page(frontend_client):
    for name in ["Memento", "Arrival", "Dune"]:
        frontend_client.post("/api/films", json={**FORM, "name": name, "imdb": 8.0, "metaScore": 70})

    response = frontend_client.get("/")
    assert response.status_code == 200
    page = response.text
    assert page.index("Arrival") < page.index("Dune") < page.index("Memento")
    assert page.count('class="card rounded') == 3
    assert ">70<" in page
    assert ">70.0<" not in page


def test_films_page_api_unavailable(client):
    def unavailable(request):
        raise httpx.ConnectError("connection refused", request=request)

    api_client = FilmApiClient("http://api.test/api", transport=httpx.MockTransport(unavailable))
    app.dependency_overrides[get_film_api_client] = lambda: api_client

    response = client.get("/")
    assert response.status_code == 200
    assert 'class="card rounded' not in response.text


def test_add_film_page(frontend_client):
    response = frontend_client.get("/add")
    assert response.status_code == 200
    assert 'id="filmForm"' in response.text


def test_submit_film(frontend_client):
    response = frontend_client.post("/add", data=FORM)
    assert response.status_code == 200
    assert "Film added successfully!" in response.text

    films = frontend_client.get("/api/films").json()
    assert len(films) == 1
    assert films[0]["imdb"] == 8.8
    assert films[0]["metaScore"] == 74


def test_submit_film_non_numeric_not_persisted(frontend_client):
    frontend_client.post("/add", data={**FORM, "imdb": "great"})
    assert frontend_client.get("/api/films").json() == []


def test_submit_film_network_error(client):
    def unavailable(request):
        raise httpx.ConnectError("connection refused", request=request)

    api_client = FilmApiClient("http://api.test/api", transport=httpx.MockTransport(unavailable))
    app.dependency_overrides[get_film_api_client] = lambda: api_client

    response = client.post("/add", data=FORM)
    assert response.status_code == 200
    assert "Error adding film." in response.text
