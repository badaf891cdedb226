# src/client/film_client.py

import logging
from typing import Optional

import httpx

logger = logging.getLogger(__name__)


class FilmClientError(Exception):
    pass


class FilmApiClient:
    """
    Обертка над httpx.AsyncClient для страниц фронтенда.
    Ходит в JSON API так же, как это делал бы браузер.
    """

    def __init__(self, base_url: str, transport: Optional[httpx.AsyncBaseTransport] = None,
                 timeout: float = 10.0):
        self.base_url = base_url.rstrip("/")
        self.client = httpx.AsyncClient(base_url=self.base_url, transport=transport, timeout=timeout)

    async def create_film(self, payload: dict) -> dict:
        """
        Один POST /films. Успехом считается любой ответ, который удалось
        получить и разобрать как JSON; статус только логируется.
        """
        try:
            response = await self.client.post("/films", json=payload)
            logger.info(f"Response status: {response.status_code}")
            data = response.json()
        except (httpx.HTTPError, ValueError) as e:
            logger.error(f"Error adding film: {e}")
            raise FilmClientError(str(e))
        logger.info(f"Film added: {data}")
        return data

    async def list_films(self) -> list[dict]:
        try:
            response = await self.client.get("/films")
            response.raise_for_status()
            return response.json()
        except (httpx.HTTPError, ValueError) as e:
            logger.error(f"Error fetching films: {e}")
            raise FilmClientError(str(e))

    async def aclose(self):
        await self.client.aclose()
