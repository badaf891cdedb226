# src/client/cards.py

from fastapi.templating import Jinja2Templates

from src import settings

templates = Jinja2Templates(directory=str(settings.TEMPLATES_DIR))


def sort_films_by_name(films: list[dict], descending: bool = False) -> list[dict]:
    """Лексикографическая сортировка по name; записи без name идут первыми."""
    return sorted(films, key=lambda film: str(film.get("name") or ""), reverse=descending)


def render_cards(films: list[dict]) -> str:
    # autoescape включен: разметка в полях выводится как текст
    return templates.get_template("cards.html").render(films=films)
