# src/settings.py

import os
from pathlib import Path

BASE_DIR = Path(__file__).resolve().parent.parent
TEMPLATES_DIR = BASE_DIR / "templates"
STATIC_DIR = BASE_DIR / "static"

# Хранилище
MONGO_URI = os.getenv("MONGO_URI", "mongodb://localhost:27017/filmsDB")
MONGO_ALIAS = os.getenv("MONGO_ALIAS", "films")
MONGO_TIMEOUT_MS = int(os.getenv("MONGO_TIMEOUT_MS", "5000"))
FILMS_COLLECTION = "films"

# HTTP
HOST = os.getenv("HOST", "127.0.0.1")
PORT = int(os.getenv("PORT", "3000"))
API_PREFIX = os.getenv("API_PREFIX", "/api")
FRONTEND_ORIGIN = os.getenv("FRONTEND_ORIGIN", "http://127.0.0.1:5500")

# Куда ходят страницы фронтенда за данными
API_BASE_URL = os.getenv("API_BASE_URL", f"http://localhost:{PORT}{API_PREFIX}")

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

# false -> невалидный ObjectId ведет себя как в исходном сервисе (500 на GET)
MALFORMED_ID_AS_NOT_FOUND = os.getenv("MALFORMED_ID_AS_NOT_FOUND", "true").lower() in ("1", "true", "yes")
