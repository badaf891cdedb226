from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_serializer

FILM_EXAMPLE = {
    "name": "Inception",
    "description": "A mind-bending thriller by Christopher Nolan.",
    "imageUrl": "https://link-to-image.com/inception.jpg",
    "imdb": 8.8,
    "metaScore": 74,
}


class FilmPayload(BaseModel):
    # Все поля опциональны на уровне схемы: наличие проверяет репозиторий,
    # чтобы отсутствующее поле давало 400 "Missing required fields"
    name: Optional[str] = Field(None, description="The name of the film")
    description: Optional[str] = Field(None, description="The description of the film")
    image_url: Optional[str] = Field(None, alias="imageUrl", description="URL to the image of the film")
    imdb: Optional[float] = Field(None, description="IMDb rating of the film")
    meta_score: Optional[float] = Field(None, alias="metaScore", description="Meta score of the film")

    model_config = ConfigDict(
        populate_by_name=True,
        allow_inf_nan=False,
        json_schema_extra={"examples": [FILM_EXAMPLE]},
    )


class FilmResponse(BaseModel):
    id: str = Field(..., description="The auto-generated id of the film")
    name: str
    description: str
    image_url: str = Field(..., alias="imageUrl")
    imdb: float
    meta_score: float = Field(..., alias="metaScore")

    model_config = ConfigDict(
        populate_by_name=True,
        json_schema_extra={"examples": [{"id": "64b7f0c2e4b0a1a2b3c4d5e6", **FILM_EXAMPLE}]},
    )

    @field_serializer("imdb", "meta_score")
    def serialize_number(self, value: float):
        # Хранилище отдает 74.0, клиенту возвращаем 74 как было отправлено
        return int(value) if value.is_integer() else value


class MessageResponse(BaseModel):
    message: str


class ErrorResponse(BaseModel):
    error: str


class LivenessResponse(BaseModel):
    status: str
    problems: list[str] = []
