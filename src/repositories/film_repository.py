# src/repositories/film_repository.py
import logging
from typing import List

from bson import ObjectId
from mongoengine import Document, FloatField, StringField
from mongoengine.errors import OperationError, ValidationError as DocumentValidationError
from mongoengine.queryset import QuerySet
from pymongo.errors import PyMongoError, WriteError

from src import settings
from src.db import FilmDatabase
from src.exceptions import MISSING_FIELDS, NotFoundError, StoreError, ValidationError

logger = logging.getLogger(__name__)

FILM_FIELDS = ("name", "description", "image_url", "imdb", "meta_score")


class Film(Document):
    name = StringField(required=True)
    description = StringField(required=True)
    image_url = StringField(required=True, db_field="imageUrl")  # не проверяется как URL
    imdb = FloatField(required=True)
    meta_score = FloatField(required=True, db_field="metaScore")

    meta = {"collection": settings.FILMS_COLLECTION}


def films(db: FilmDatabase) -> QuerySet:
    return QuerySet(Film, db.collection)


def check_required_fields(fields: dict):
    """
    Все пять полей должны быть заданы и "истинны": пустая строка,
    None и 0 считаются отсутствующими.
    """
    missing = [name for name in FILM_FIELDS if not fields.get(name)]
    if missing:
        logger.warning(f"Missing required fields: {', '.join(missing)}")
        raise ValidationError(MISSING_FIELDS)


def _object_id(film_id: str, malformed_error=StoreError) -> ObjectId:
    if ObjectId.is_valid(film_id):
        return ObjectId(film_id)
    if settings.MALFORMED_ID_AS_NOT_FOUND:
        logger.warning(f"Malformed film id '{film_id}' treated as not found")
        raise NotFoundError()
    raise malformed_error(f'Cast to ObjectId failed for value "{film_id}"')


def create_film(db: FilmDatabase, **fields) -> Film:
    check_required_fields(fields)
    film = Film(**{name: fields[name] for name in FILM_FIELDS})
    try:
        film.validate()
        document = film.to_mongo()
        document.pop("_id", None)
        film.id = db.collection.insert_one(document).inserted_id
    except (DocumentValidationError, OperationError, WriteError) as e:
        logger.error(f"Store rejected film '{fields.get('name')}': {e}")
        raise ValidationError(str(e))
    except PyMongoError as e:
        raise StoreError(str(e))
    return film


def get_all_films(db: FilmDatabase) -> List[Film]:
    try:
        return list(films(db))
    except PyMongoError as e:
        raise StoreError(str(e))


def get_film_by_id(db: FilmDatabase, film_id: str) -> Film:
    oid = _object_id(film_id, malformed_error=StoreError)
    try:
        film = films(db).filter(id=oid).first()
    except PyMongoError as e:
        raise StoreError(str(e))
    if film is None:
        raise NotFoundError()
    return film


def update_film(db: FilmDatabase, film_id: str, **fields) -> Film:
    check_required_fields(fields)
    oid = _object_id(film_id, malformed_error=ValidationError)
    try:
        film = films(db).filter(id=oid).modify(
            new=True,
            **{f"set__{name}": fields[name] for name in FILM_FIELDS}
        )
    except (DocumentValidationError, OperationError, WriteError) as e:
        logger.error(f"Store rejected update of film {film_id}: {e}")
        raise ValidationError(str(e))
    except PyMongoError as e:
        raise StoreError(str(e))
    if film is None:
        raise NotFoundError()
    return film


def delete_film(db: FilmDatabase, film_id: str) -> None:
    oid = _object_id(film_id, malformed_error=StoreError)
    try:
        deleted = films(db).filter(id=oid).delete()
    except PyMongoError as e:
        raise StoreError(str(e))
    if not deleted:
        raise NotFoundError()
