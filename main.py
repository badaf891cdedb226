# main.py

import logging

import uvicorn
from fastapi import Depends, FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles

from film_router import film_router
from frontend_router import frontend_router
from pydantic_models import ErrorResponse, LivenessResponse
from src import settings
from src.client.film_client import FilmApiClient
from src.db import FilmDatabase
from src.dependencies import get_db
from src.exceptions import StoreError, register_exception_handlers

logger = logging.getLogger("films.main")
logging.basicConfig(
    level=settings.LOG_LEVEL,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    handlers=[logging.StreamHandler()],
)

app = FastAPI(
    title="Film API",
    description="API for managing films, including names, descriptions, and images",
    version="1.0.0",
    docs_url="/api-docs",
    redoc_url="/redoc",
    openapi_url="/api-docs/openapi.json",
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=[settings.FRONTEND_ORIGIN],
    allow_methods=["GET", "POST", "PUT", "DELETE"],
    allow_headers=["*"],
)

register_exception_handlers(app)

app.mount("/static", StaticFiles(directory=str(settings.STATIC_DIR)), name="static")
app.include_router(film_router, prefix=settings.API_PREFIX)
app.include_router(frontend_router)


@app.on_event("startup")
async def startup_event():
    db = FilmDatabase(settings.MONGO_URI, alias=settings.MONGO_ALIAS,
                      serverSelectionTimeoutMS=settings.MONGO_TIMEOUT_MS)
    db.connect()
    app.state.db = db
    try:
        db.ping()
        logger.info("Connected to MongoDB")
    except StoreError as e:
        # Сервис поднимается и без базы, запросы к хранилищу вернут 500
        logger.error(f"MongoDB connection error: {e}")

    app.state.film_api_client = FilmApiClient(settings.API_BASE_URL)
    logger.info(f"Server is running on http://{settings.HOST}:{settings.PORT}")


@app.on_event("shutdown")
async def shutdown_event():
    client = getattr(app.state, "film_api_client", None)
    if client is not None:
        await client.aclose()
    db = getattr(app.state, "db", None)
    if db is not None:
        db.close()


@app.get("/liveness", response_model=LivenessResponse,
         responses={500: {"model": ErrorResponse, "description": "Store is unreachable"}})
def health(db: FilmDatabase = Depends(get_db)):
    db.ping()
    return {"status": "ok", "problems": []}


if __name__ == "__main__":
    uvicorn.run("main:app", host=settings.HOST, port=settings.PORT)
