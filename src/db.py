# src/db.py

import logging

from mongoengine import connect, disconnect
from mongoengine.connection import get_connection, get_db
from pymongo.errors import PyMongoError

from src import settings
from src.exceptions import StoreError

logger = logging.getLogger(__name__)


class FilmDatabase:
    """
    Единственное подключение к хранилищу фильмов.
    Создается при старте приложения, закрывается при остановке,
    в обработчики попадает через зависимость get_db.
    """

    def __init__(self, uri: str = settings.MONGO_URI, alias: str = settings.MONGO_ALIAS,
                 db_name: str = None, **client_kwargs):
        self.uri = uri
        self.alias = alias
        self.db_name = db_name
        self.client_kwargs = client_kwargs
        self.connected = False

    def connect(self):
        logger.info(f"Connecting to MongoDB (alias '{self.alias}')...")
        connect(db=self.db_name, host=self.uri, alias=self.alias, **self.client_kwargs)
        self.connected = True

    def ping(self):
        try:
            info = get_connection(self.alias).server_info()
        except PyMongoError as e:
            logger.error(f"MongoDB is unreachable: {e}")
            raise StoreError(str(e))
        logger.debug(f"MongoDB server version {info.get('version')}")

    @property
    def collection(self):
        return get_db(self.alias)[settings.FILMS_COLLECTION]

    def close(self):
        if self.connected:
            disconnect(self.alias)
            self.connected = False
            logger.info(f"MongoDB connection '{self.alias}' closed.")
