import logging

from fastapi import APIRouter, Depends, status

from pydantic_models import ErrorResponse, FilmPayload, FilmResponse, MessageResponse
from src.db import FilmDatabase
from src.dependencies import get_db
from src.repositories.film_repository import (
    Film,
    create_film,
    delete_film,
    get_all_films,
    get_film_by_id,
    update_film,
)

logger = logging.getLogger(__name__)

film_router = APIRouter(
    prefix="/films",
    tags=["Films"],
    responses={500: {"model": ErrorResponse, "description": "Store failure"}},
)


def to_response(film: Film) -> FilmResponse:
    return FilmResponse(
        id=str(film.id),
        name=film.name,
        description=film.description,
        image_url=film.image_url,
        imdb=film.imdb,
        meta_score=film.meta_score,
    )


@film_router.post("", response_model=FilmResponse,
                  status_code=status.HTTP_201_CREATED,
                  summary="Create a new film",
                  response_description="The film was successfully created",
                  responses={400: {"model": ErrorResponse, "description": "Invalid input"}})
def create_film_endpoint(payload: FilmPayload, db: FilmDatabase = Depends(get_db)):
    film = create_film(db, **payload.model_dump())
    logger.info(f"A new film has been added: ID {film.id}, {film.name}")
    return to_response(film)


@film_router.get("", response_model=list[FilmResponse],
                 summary="Returns a list of all films",
                 response_description="A list of all films")
def list_films_endpoint(db: FilmDatabase = Depends(get_db)):
    films = get_all_films(db)
    logger.info(f"A list of films was requested, {len(films)} entries were found")
    return [to_response(film) for film in films]


@film_router.get("/{film_id}", response_model=FilmResponse,
                 summary="Get a film by its ID",
                 response_description="The film details",
                 responses={404: {"model": ErrorResponse, "description": "Film not found"}})
def get_film_endpoint(film_id: str, db: FilmDatabase = Depends(get_db)):
    film = get_film_by_id(db, film_id)
    logger.info(f"Film ID {film_id} requested: {film.name}")
    return to_response(film)


@film_router.put("/{film_id}", response_model=FilmResponse,
                 summary="Update a film by ID",
                 response_description="The film was successfully updated",
                 responses={
                     400: {"model": ErrorResponse, "description": "Invalid input"},
                     404: {"model": ErrorResponse, "description": "Film not found"},
                 })
def update_film_endpoint(film_id: str, payload: FilmPayload, db: FilmDatabase = Depends(get_db)):
    film = update_film(db, film_id, **payload.model_dump())
    logger.info(f"Updated film ID {film_id}: {film.name}")
    return to_response(film)


@film_router.delete("/{film_id}", response_model=MessageResponse,
                    summary="Delete a film by ID",
                    response_description="The film was deleted",
                    responses={404: {"model": ErrorResponse, "description": "Film not found"}})
def delete_film_endpoint(film_id: str, db: FilmDatabase = Depends(get_db)):
    delete_film(db, film_id)
    logger.info(f"Deleted film ID {film_id}")
    return {"message": "Film deleted successfully"}
