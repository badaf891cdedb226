# src/exceptions.py

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

logger = logging.getLogger(__name__)

MISSING_FIELDS = "Missing required fields"
FILM_NOT_FOUND = "Film not found"


class FilmServiceError(Exception):
    """Base error of the film service, carries the HTTP status it maps to."""
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class ValidationError(FilmServiceError):
    """Missing/invalid field or a write rejected by the store."""
    status_code = status.HTTP_400_BAD_REQUEST


class NotFoundError(FilmServiceError):
    status_code = status.HTTP_404_NOT_FOUND

    def __init__(self, message: str = FILM_NOT_FOUND):
        super().__init__(message)


class StoreError(FilmServiceError):
    """Store unreachable or a lookup the store could not execute."""
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR


def error_response(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": message})


def register_exception_handlers(app: FastAPI):
    @app.exception_handler(FilmServiceError)
    async def handle_film_service_error(request: Request, exc: FilmServiceError):
        if exc.status_code >= 500:
            logger.error(f"{request.method} {request.url.path} failed: {exc.message}")
        else:
            logger.warning(f"{request.method} {request.url.path} rejected: {exc.message}")
        return error_response(exc.status_code, exc.message)

    @app.exception_handler(RequestValidationError)
    async def handle_request_validation_error(request: Request, exc: RequestValidationError):
        # Тело не распарсилось или число не приводится к float
        errors = exc.errors()
        parts = []
        for err in errors:
            location = ".".join(str(part) for part in err.get("loc", ()) if part != "body")
            if not location:
                # Тела нет совсем
                parts.append(MISSING_FIELDS)
            else:
                parts.append(f"{location}: {err.get('msg')}")
        message = "; ".join(parts) or "Invalid input"
        logger.warning(f"{request.method} {request.url.path} rejected: {message}")
        return error_response(status.HTTP_400_BAD_REQUEST, message)
