import logging

from fastapi import APIRouter, Depends, Form, Request
from fastapi.responses import HTMLResponse

from src.client.cards import render_cards, sort_films_by_name, templates
from src.client.film_client import FilmApiClient, FilmClientError
from src.client.forms import build_film_payload
from src.dependencies import get_film_api_client

logger = logging.getLogger(__name__)

frontend_router = APIRouter(
    tags=["Frontend"],
    include_in_schema=False,
)


@frontend_router.get("/", response_class=HTMLResponse)
async def films_page(request: Request, client: FilmApiClient = Depends(get_film_api_client)):
    try:
        films = sort_films_by_name(await client.list_films())
    except FilmClientError as e:
        logger.error(f"Error fetching data: {e}")
        films = []
    return templates.TemplateResponse(request, "index.html", {"cards": render_cards(films)})


@frontend_router.get("/add", response_class=HTMLResponse)
async def add_film_page(request: Request):
    return templates.TemplateResponse(request, "add.html", {"alert": None})


@frontend_router.post("/add", response_class=HTMLResponse)
async def submit_film(
        request: Request,
        name: str = Form(""),
        description: str = Form(""),
        imageUrl: str = Form(""),
        imdb: str = Form(""),
        metaScore: str = Form(""),
        client: FilmApiClient = Depends(get_film_api_client),
):
    payload = build_film_payload({
        "name": name,
        "description": description,
        "imageUrl": imageUrl,
        "imdb": imdb,
        "metaScore": metaScore,
    })
    try:
        await client.create_film(payload)
        alert = {"ok": True, "text": "Film added successfully!"}
    except FilmClientError:
        alert = {"ok": False, "text": "Error adding film."}
    return templates.TemplateResponse(request, "add.html", {"alert": alert})
